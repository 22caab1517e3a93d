"""
Tests for the TransformEngine pipeline.

Verifies:
1. Pass-through of units with no framework code (byte-identical output).
2. Alias tracking from imports, isolated per translation unit.
3. Parse failures: raised by `transform`, reported by `run`, never leaking scope.
4. The anonymous-function pre-pass placeholder never reaches the output.
"""

import pytest

import solid_switcheroo
from solid_switcheroo.config import RuntimeConfig
from solid_switcheroo.core import TransformEngine, transform
from solid_switcheroo.core.tracer import TraceEventType
from solid_switcheroo.errors import JsParseError


def test_readme_example(engine):
  code = 'React.createElement("div", {className: "a"}, "hi")'
  assert engine.transform(code) == '<div class="a">hi</div>'


@pytest.mark.parametrize(
  "code",
  [
    "const x = foo(1);\nfunction f() { return x; }\n",
    "// nothing here\n",
    "",
    "function () { return 1; }",
    "const el = <p>{count}</p>;\n",
    "import { useState } from 'react';\nconst [a, setA] = useState(0);\n",
  ],
)
def test_pass_through_is_byte_identical(engine, code):
  assert engine.transform(code) == code


def test_anonymous_function_placeholder_is_removed(engine):
  code = 'function () { return React.createElement("b"); }'
  assert engine.transform(code) == "function () { return <b />; }"


def test_anonymous_function_placeholder_avoids_existing_names(engine):
  code = 'function (___) { return React.createElement("b", null, ___); }'
  assert engine.transform(code) == "function (___) { return <b>{___}</b>; }"


def test_generated_copy_named_like_placeholder_survives(engine):
  code = "React.useEffect(() => __ + 1);\nconst g = function () { return 1; };"
  expected = (
    "React.useEffect(() => { const ___ = __resolveDep(__); return ___ + 1; });\n"
    "const g = function () { return 1; };"
  )
  assert engine.transform(code) == expected


def test_placeholder_inside_string_literals_is_erased(engine):
  code = 'React.createElement("p", {title: "function () {}"}, "see function (x)")'
  assert engine.transform(code) == '<p title="function () {}">see function (x)</p>'

  code = 'React.createElement("p", null, "function () x")'
  assert engine.transform(code) == "<p>function () x</p>"


def test_placeholder_inside_effect_callback(engine):
  code = "React.useEffect(function () { ping(); });"
  expected = "React.useEffect(function () { const ping_ = __resolveDep(ping); ping_(); });"
  assert engine.transform(code) == expected


def test_default_import_binds_root(engine):
  code = 'import R from "react";\nR.createElement(Foo);'
  assert engine.transform(code) == 'import R from "react";\n<Foo />;'


def test_explicit_root_replaces_implicit_root(engine):
  code = 'import R from "react";\nReact.createElement(Foo);'
  assert engine.transform(code) == code


def test_namespace_import_binds_root(engine):
  code = 'import * as Re from "react";\nRe.createElement("p", null, "x");'
  assert engine.transform(code) == 'import * as Re from "react";\n<p>x</p>;'


def test_default_as_import_binds_root(engine):
  code = 'import { default as Lib } from "react";\nLib.createElement("p");'
  assert engine.transform(code) == 'import { default as Lib } from "react";\n<p />;'


def test_renamed_factory_import(engine):
  code = 'import { createElement as h } from "react";\nh(Foo, null, h("span", null, "x"));'
  assert engine.transform(code) == 'import { createElement as h } from "react";\n<Foo><span>x</span></Foo>;'


def test_imports_from_other_modules_are_ignored(engine):
  code = 'import { createElement as h } from "vue";\nh("i");'
  assert engine.transform(code) == code


def test_aliases_do_not_leak_between_units(engine):
  first = 'import { createElement as h } from "react";\nh("i");'
  assert engine.transform(first) == 'import { createElement as h } from "react";\n<i />;'

  second = 'h("i");'
  assert engine.transform(second) == second
  assert len(engine.scopes) == 0


def test_configured_source_module():
  config = RuntimeConfig(source_modules=["preact/compat"])
  code = 'import P from "preact/compat";\nP.createElement("a");'
  assert transform(code, config) == 'import P from "preact/compat";\n<a />;'


def test_disabled_root_alias():
  code = 'React.createElement("a");'
  assert transform(code, RuntimeConfig(root_alias=None)) == code


def test_parse_error_raises_with_location(engine):
  with pytest.raises(JsParseError) as exc:
    engine.transform('React.createElement("div", ')

  assert exc.value.line == 1
  assert exc.value.column is not None
  assert "line 1" in str(exc.value)


def test_parse_error_does_not_leak_scope(engine):
  with pytest.raises(JsParseError):
    engine.transform('import R from "react";\nR.createElement(')

  assert len(engine.scopes) == 0
  with pytest.raises(LookupError):
    _ = engine.scopes.current

  # The failed unit's alias is gone: R is not a root any more.
  code = "R.createElement(Foo);"
  assert engine.transform(code) == code


def test_run_reports_parse_failure():
  result = TransformEngine().run("const = ;")

  assert not result.success
  assert result.has_errors
  assert result.errors[0].startswith("Parse Error:")
  assert result.code == "const = ;"
  assert any(e["type"] == TraceEventType.WARNING for e in result.trace_events)


def test_run_records_rewrites_and_trace():
  code = 'import { createElement as h } from "react";\nh("i");'
  result = TransformEngine().run(code)

  assert result.success
  assert result.rewrites == 1
  types = [e["type"] for e in result.trace_events]
  assert TraceEventType.ALIAS_BINDING in types
  assert TraceEventType.TEXT_MUTATION in types

  mutation = next(e for e in result.trace_events if e["type"] == TraceEventType.TEXT_MUTATION)
  assert mutation["metadata"] == {"before": 'h("i")', "after": "<i />"}


def test_package_convert_wrapper():
  assert solid_switcheroo.convert('React.createElement("b")') == "<b />"
  assert solid_switcheroo.convert('X.createElement("b")', {"root_alias": "X"}) == "<b />"

  with pytest.raises(ValueError, match="Conversion failed"):
    solid_switcheroo.convert("React.createElement(")


def test_non_ascii_source_offsets(engine):
  code = 'const s = "héllo";\nReact.createElement("p", null, "ünï");'
  assert engine.transform(code) == 'const s = "héllo";\n<p>ünï</p>;'
