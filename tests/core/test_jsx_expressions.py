"""
Tests for JSX expression-container deferral.
"""

import pytest

from solid_switcheroo.core import transform


def test_dynamic_child_expression_is_deferred():
  code = "const el = <p>{count + 1}</p>;"
  assert transform(code) == "const el = <p>{(function(){return count + 1})()}</p>;"


def test_dynamic_attribute_expression_is_deferred():
  code = "const el = <input value={a ? b : c} />;"
  assert transform(code) == "const el = <input value={(function(){return a ? b : c})()} />;"


@pytest.mark.parametrize(
  "code",
  [
    "const el = <p>{count}</p>;",
    "const el = <p>{fmt(count)}</p>;",
    "const el = <button onClick={() => inc(1)} />;",
    "const el = <p>{/* note */}</p>;",
    "const el = <Foo {...props} />;",
  ],
)
def test_stable_containers_are_untouched(code):
  assert transform(code) == code


def test_object_container_defers_each_value():
  code = "const el = <p style={{color: a || b, margin: m}} />;"
  assert transform(code) == "const el = <p style={{color: (function(){return a || b})(), margin: m}} />;"


def test_nested_elements_inside_containers():
  code = "const el = <ul>{items.map((i) => React.createElement(Item, {i}))}</ul>;"
  assert transform(code) == "const el = <ul>{items.map((i) => <Item i={i} />)}</ul>;"


def test_literal_in_container_is_deferred():
  code = 'const el = <p>{"text"}</p>;'
  assert transform(code) == 'const el = <p>{(function(){return "text"})()}</p>;'
