"""
Tests for generated-name synthesis.
"""

from solid_switcheroo.core.naming import unique_name


def test_base_name_when_free():
  assert unique_name("TempCls", "foo(bar)") == "TempCls"


def test_suffix_until_absent_from_every_haystack():
  assert unique_name("TempCls", "TempCls", "x") == "TempCls_"
  assert unique_name("TempCls", "a", "TempCls_ TempCls") == "TempCls__"


def test_reserved_names():
  assert unique_name("x_", "", reserved=["x_", "x__"]) == "x___"
