"""
solid-switcheroo Package.

Rewrites React-style JavaScript/JSX so it runs on a fine-grained reactive
runtime, and provides the hook emulation layer the rewritten code calls into.

Usage
-----

Simple String Conversion
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import solid_switcheroo as sws
    code = 'React.createElement("div", {className: "a"}, "hi")'
    print(sws.convert(code))
    # <div class="a">hi</div>

Engine Usage
^^^^^^^^^^^^

.. code-block:: python

    from solid_switcheroo import RuntimeConfig, TransformEngine

    engine = TransformEngine(config=RuntimeConfig(root_alias=None))
    res = engine.run(code)

    if res.success:
        print(res.code)
    else:
        print(f"Errors: {res.errors}")
"""

from typing import Any, Dict, Optional

from solid_switcheroo.config import RuntimeConfig
from solid_switcheroo.core import ConversionResult, TransformEngine, transform

__version__ = "0.0.1"


def convert(code: str, overrides: Optional[Dict[str, Any]] = None) -> str:
  """
  Rewrites a string of JavaScript/JSX.

  Convenience wrapper around `TransformEngine.run` for callers that prefer an
  exception to a result object.

  Args:
      code (str): The source code to convert.
      overrides (dict, optional): `RuntimeConfig` field values.

  Returns:
      str: The rewritten source code.

  Raises:
      ValueError: If the conversion fails (e.g. syntax errors).
  """
  config = RuntimeConfig(**(overrides or {}))
  result = TransformEngine(config=config).run(code)

  if not result.success:
    error_msg = "\n".join(result.errors)
    raise ValueError(f"Conversion failed:\n{error_msg}")

  return result.code


__all__ = [
  "ConversionResult",
  "RuntimeConfig",
  "TransformEngine",
  "convert",
  "transform",
  "__version__",
]
