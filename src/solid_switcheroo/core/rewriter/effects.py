"""
Effect Callback Rewriting Logic.

Effect bodies run on a later microtask. Reading a memoised dependency there
must not subscribe whatever reactive scope happens to be active, so every
free variable of an inline effect callback is copied once, through the
dependency resolver, at the top of the body:

.. code-block:: javascript

    useEffect(() => { log(count); }, [count]);
    // becomes
    useEffect(() => { const log_ = __resolveDep(log); const count_ = __resolveDep(count); log_(count_); }, [count]);

References inside the callback are then replaced by the copies. The
dependency array is left untouched.
"""

from typing import TYPE_CHECKING, Dict, List, Optional, Set

from tree_sitter import Node

from solid_switcheroo.core.edits import EditList
from solid_switcheroo.core.naming import unique_name
from solid_switcheroo.core.parser import walk
from solid_switcheroo.core.rewriter.nodes import (
  INLINE_FUNCTION_TYPES,
  binding_names,
  call_arguments,
  is_jsx_tag_name,
)
from solid_switcheroo.core.rewriter.scopes import Substitution
from solid_switcheroo.enums import EffectFlavour

if TYPE_CHECKING:
  from solid_switcheroo.core.rewriter import JsxRewriter

RESERVED_NAMES = frozenset({"undefined", "arguments", "NaN", "Infinity"})

_REFERENCE_TYPES = frozenset({"identifier", "shorthand_property_identifier"})
_NAMED_DECLARATIONS = frozenset(
  {
    "function_declaration",
    "generator_function_declaration",
    "function_expression",
    "function",
    "generator_function",
    "class_declaration",
    "class",
  }
)
_ASSIGNMENTS = frozenset({"assignment_expression", "augmented_assignment_expression"})


class EffectMixin:
  """
  Mixin materialising the free variables of effect callbacks.
  """

  def rewrite_effect(self: "JsxRewriter", node: Node, flavour: EffectFlavour) -> Optional[str]:
    args = call_arguments(node)
    if not args or args[0].type not in INLINE_FUNCTION_TYPES:
      return None

    callback = args[0]
    body = callback.child_by_field_name("body")
    names = self.free_names(callback)
    if body is None or not names:
      return None

    callback_text = self.text(callback)
    copies: Dict[str, str] = {}
    for name in names:
      copies[name] = unique_name(f"{name}_", callback_text, reserved=copies.values())

    resolver = self.config.dependency_resolver
    declarations = " ".join(f"const {copy} = {resolver}({name});" for name, copy in copies.items())

    edits = EditList()
    frame = Substitution(callback.start_byte, callback.end_byte, copies)
    with self.scope.substituting(frame):
      self.collect_children(node, edits)

    if body.type == "statement_block":
      edits.insert(body.start_byte + 1, f" {declarations}")
    else:
      edits.insert(body.start_byte, f"{{ {declarations} return ")
      edits.insert(body.end_byte, "; }")

    self.tracer.log_alias(", ".join(copies.values()), f"{flavour.value} dependency copies")
    return edits.apply(self.source, node.start_byte, node.end_byte)

  def free_names(self: "JsxRewriter", callback: Node) -> List[str]:
    """
    Lists the names a callback reads from its enclosing scopes.

    Excludes names declared anywhere inside the callback, names it assigns,
    JSX tag names, bare ``typeof`` operands (they may be undeclared globals)
    and a few reserved globals.

    Args:
        callback: An inline function node.

    Returns:
        List[str]: Distinct names in first-reference order.
    """
    declared = self._declared_names(callback)
    seen: Set[str] = set()
    names: List[str] = []
    for node in walk(callback):
      if node.type not in _REFERENCE_TYPES or is_jsx_tag_name(node) or _is_typeof_operand(node):
        continue
      name = self.text(node)
      if name in declared or name in seen or name in RESERVED_NAMES:
        continue
      seen.add(name)
      names.append(name)
    return names

  def _declared_names(self: "JsxRewriter", callback: Node) -> Set[str]:
    declared: Set[str] = set()
    for node in walk(callback):
      kind = node.type
      if kind == "variable_declarator":
        declared.update(binding_names(self.source, node.child_by_field_name("name")))
      elif kind == "formal_parameters":
        declared.update(binding_names(self.source, node))
      elif kind == "arrow_function":
        declared.update(binding_names(self.source, node.child_by_field_name("parameter")))
      elif kind in _NAMED_DECLARATIONS:
        declared.update(binding_names(self.source, node.child_by_field_name("name")))
      elif kind == "catch_clause":
        declared.update(binding_names(self.source, node.child_by_field_name("parameter")))
      elif kind == "for_in_statement":
        declared.update(binding_names(self.source, node.child_by_field_name("left")))
      elif kind in _ASSIGNMENTS:
        declared.update(binding_names(self.source, node.child_by_field_name("left")))
      elif kind == "update_expression":
        declared.update(binding_names(self.source, node.child_by_field_name("argument")))
    return declared

  def rewrite_identifier(self: "JsxRewriter", node: Node) -> Optional[str]:
    if not self.scope.substitutions or is_jsx_tag_name(node):
      return None
    return self.scope.substitute(self.text(node), node.start_byte)

  def rewrite_shorthand_property_identifier(self: "JsxRewriter", node: Node) -> Optional[str]:
    if not self.scope.substitutions:
      return None
    name = self.text(node)
    copy = self.scope.substitute(name, node.start_byte)
    if copy is None:
      return None
    return f"{name}: {copy}"


def _is_typeof_operand(node: Node) -> bool:
  parent = node.parent
  if parent is None or parent.type != "unary_expression":
    return False
  operator = parent.child_by_field_name("operator")
  return operator is not None and operator.type == "typeof"
