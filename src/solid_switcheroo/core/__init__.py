"""Transform engine: parse, rewrite and emit JavaScript/JSX source."""

from solid_switcheroo.core.conversion_result import ConversionResult
from solid_switcheroo.core.engine import TransformEngine, transform

__all__ = ["ConversionResult", "TransformEngine", "transform"]
