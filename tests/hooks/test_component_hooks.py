"""
Tests for refs, context hooks, Children and runtime element construction.
"""

import pytest

from solid_switcheroo.errors import ChildrenError
from solid_switcheroo.hooks import (
  Children,
  Element,
  HookContext,
  Ref,
  create_context,
  create_element,
  resolve_component,
  use_context,
  use_ref,
)
from solid_switcheroo.runtime import create_root


def test_ref_holds_current():
  ref = use_ref(5)
  assert isinstance(ref, Ref)
  assert ref.current == 5
  ref.current = 6
  assert ref.current == 6


def test_ref_as_attach_callback():
  ref = use_ref()
  assert ref.current is None
  ref("node")
  assert ref.current == "node"


def test_context_default_and_provider():
  theme = create_context("light")
  assert isinstance(theme, HookContext)
  assert use_context(theme) == "light"

  def app(_dispose):
    return theme.Provider(value="dark", children=lambda: use_context(theme))

  assert create_root(app) == "dark"


def test_provider_with_static_children():
  theme = create_context()
  assert theme.Provider(value=1, children="static") == "static"


def test_consumer_render_prop():
  theme = create_context("light")

  def app(_dispose):
    return theme.Provider(value="dark", children=lambda: theme.Consumer(lambda value: f"theme={value}"))

  assert create_root(app) == "theme=dark"
  assert theme.Consumer(lambda value: value) == "light"


def test_use_context_accepts_runtime_context():
  theme = create_context("x")
  assert use_context(theme.context) == "x"


def test_children_helpers():
  assert Children.map(["a", None, "b"], lambda child, i: f"{i}:{child}") == ["0:a", None, "2:b"]
  assert Children.map("solo", lambda child, i: child.upper()) == ["SOLO"]
  assert Children.count(["a", None]) == 2
  assert Children.count("a") == 1
  assert Children.to_array(("a", None, "b")) == ["a", "b"]

  seen = []
  Children.for_each(["x", "y"], lambda child, i: seen.append((i, child)))
  assert seen == [(0, "x"), (1, "y")]


def test_children_only():
  assert Children.only("a") == "a"
  assert Children.only(["a"]) == "a"
  with pytest.raises(ChildrenError, match="single child"):
    Children.only(["a", "b"])


def test_create_element_intrinsic():
  el = create_element("div", {"className": "a", "id": "x"}, "hi")
  assert el == Element("div", {"class": "a", "id": "x"}, ("hi",))

  el = create_element("ul", None, "a", "b")
  assert el.children == ("a", "b")
  assert create_element("br").props == {}


def test_create_element_component():
  def greeting(props):
    return f"hello {props['name']} {props.get('children')}"

  assert create_element(greeting, {"name": "ada"}, "!") == "hello ada !"


def test_resolve_component():
  prebuilt = Element("b")
  assert resolve_component(prebuilt)({}) is prebuilt
  assert resolve_component(None)({}) is None
  assert resolve_component(len) is len
  assert resolve_component("span")({"children": "x"}) == Element("span", {}, ("x",))

  with pytest.raises(TypeError):
    resolve_component(42)
