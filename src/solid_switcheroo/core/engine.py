"""
Orchestration Engine for Source Transformations.

This module provides the `TransformEngine`, the driver for rewriting one
translation unit at a time. The pipeline consists of:

1.  **Pre-pass**: Naming the first anonymous ``function`` literal so the
    grammar accepts units that consist of a bare function.
2.  **Parse**: tree-sitter JavaScript/JSX grammar. Any syntax error is fatal.
3.  **Rewrite**: Running the `JsxRewriter` under a freshly pushed alias scope,
    which is popped again whatever happens.
4.  **Emit**: Splicing the recorded edits into the source. The pre-pass
    placeholder is erased as one of those edits.

``transform`` raises on malformed input; ``run`` reports the failure in a
`ConversionResult` instead, which is what the CLI consumes.
"""

import logging
from typing import Optional, Tuple

from solid_switcheroo.config import RuntimeConfig
from solid_switcheroo.core.conversion_result import ConversionResult
from solid_switcheroo.core.parser import JsParser, get_js_parser
from solid_switcheroo.core.prepass import name_anonymous_function
from solid_switcheroo.core.rewriter import AliasScopeStack, JsxRewriter
from solid_switcheroo.core.tracer import TraceLogger
from solid_switcheroo.errors import SwitcherooError

logger = logging.getLogger(__name__)


class TransformEngine:
  """
  The main compilation unit.

  Holds the configuration and the alias scope stack shared by every unit this
  engine transforms.
  """

  def __init__(
    self,
    config: Optional[RuntimeConfig] = None,
    scopes: Optional[AliasScopeStack] = None,
    parser: Optional[JsParser] = None,
  ):
    """
    Initializes the Engine.

    Args:
        config (RuntimeConfig, optional): The runtime configuration object.
        scopes (AliasScopeStack, optional): Alias stack to push unit scopes onto.
        parser (JsParser, optional): Parser to use instead of the shared one.
    """
    self.config = config or RuntimeConfig()
    self.scopes = scopes if scopes is not None else AliasScopeStack()
    self.parser = parser or get_js_parser()

  def transform(self, code: str) -> str:
    """
    Rewrites one translation unit.

    Args:
        code (str): JavaScript/JSX source text.

    Returns:
        str: The rewritten text.

    Raises:
        JsParseError: If the source is malformed.
    """
    text, _ = self._transform(code, TraceLogger())
    return text

  def run(self, code: str) -> ConversionResult:
    """
    Executes the full pipeline, capturing failures in the result.

    Args:
        code (str): The input source string.

    Returns:
        ConversionResult: Object containing transformed code, error log and trace.
    """
    tracer = TraceLogger()
    tracer.start_phase("Transform Pipeline", f"{len(code)} chars")
    try:
      text, rewrites = self._transform(code, tracer)
    except SwitcherooError as e:
      tracer.log_warning(str(e))
      return ConversionResult(
        code=code,
        errors=[f"Parse Error: {e}"],
        success=False,
        trace_events=tracer.export(),
      )
    tracer.end_phase()
    return ConversionResult(code=text, rewrites=rewrites, trace_events=tracer.export())

  def _transform(self, code: str, tracer: TraceLogger) -> Tuple[str, int]:
    tracer.start_phase("Pre-pass", "Naming anonymous functions")
    prepared, placeholder = name_anonymous_function(code)
    tracer.end_phase()

    source = prepared.encode("utf-8")
    with self.scopes.pushed(self.config.root_alias) as scope:
      tracer.start_phase("Parse", "tree-sitter javascript")
      tree = self.parser.parse(source)
      tracer.end_phase()

      tracer.start_phase("Rewrite", "Source-order traversal")
      span = placeholder.byte_span(prepared) if placeholder is not None else None
      rewriter = JsxRewriter(source, scope, self.config, tracer, placeholder=span)
      text = rewriter.transform_tree(tree.root_node)
      tracer.end_phase()

    logger.debug("Transform applied %d rewrites", rewriter.rewrites)
    if rewriter.rewrites == 0:
      return code, 0
    return text, rewriter.rewrites


def transform(code: str, config: Optional[RuntimeConfig] = None) -> str:
  """
  Rewrites one translation unit with a throw-away engine.

  Args:
      code (str): JavaScript/JSX source text.
      config (RuntimeConfig, optional): Configuration overrides.

  Returns:
      str: The rewritten text.

  Raises:
      JsParseError: If the source is malformed.
  """
  return TransformEngine(config=config).transform(code)
