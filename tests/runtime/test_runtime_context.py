"""
Tests for the runtime context primitive.
"""

from solid_switcheroo.runtime import create_context, create_effect, create_root, use_context


def test_default_outside_provider():
  theme = create_context("light")
  assert use_context(theme) == "light"


def test_nearest_provider_wins():
  theme = create_context("light")

  def app(_dispose):
    outer = theme.provide("dark", lambda: use_context(theme))
    inner = theme.provide("dark", lambda: theme.provide("blue", lambda: use_context(theme)))
    return outer, inner, use_context(theme)

  assert create_root(app) == ("dark", "blue", "light")


def test_computations_inherit_context():
  theme = create_context(None)
  seen = []

  def render():
    create_effect(lambda _: seen.append(use_context(theme)))

  create_root(lambda _dispose: theme.provide("dark", render))
  assert seen == ["dark"]
