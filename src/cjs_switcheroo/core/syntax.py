"""
ESTree Node Builders.

Constructors for the nodes synthesized by the require-to-import transform.
Nodes are plain dictionaries so they can be spliced directly into parser
output (acorn / espree / esprima JSON) and serialized back without conversion.

The module also offers :func:`render_node`, a compact single-line rendering
used in warnings and trace events. It is not a code generator.
"""

from typing import Any, Dict, List, Optional

from cjs_switcheroo.enums import NodeType

Node = Dict[str, Any]

COMMENT_KEYS = ("comments", "leadingComments", "trailingComments")


def import_default_specifier(local: Node) -> Node:
  """`import <local> from ...`"""
  return {"type": NodeType.IMPORT_DEFAULT_SPECIFIER.value, "local": local}


def import_specifier(local: Node, imported: Node) -> Node:
  """`import {<imported> as <local>} from ...`"""
  return {"type": NodeType.IMPORT_SPECIFIER.value, "local": local, "imported": imported}


def import_declaration(specifiers: List[Node], source: Node) -> Node:
  """
  Builds an ``ImportDeclaration``.

  Args:
      specifiers: Ordered default/named specifiers.
      source: String ``Literal`` naming the module.

  Returns:
      Node: The new declaration.
  """
  return {
    "type": NodeType.IMPORT_DECLARATION.value,
    "specifiers": list(specifiers),
    "source": source,
  }


def variable_declaration(kind: str, declarations: List[Node]) -> Node:
  """
  Builds a ``VariableDeclaration`` of the given kind (`var`, `let` or `const`).
  """
  return {
    "type": NodeType.VARIABLE_DECLARATION.value,
    "kind": kind,
    "declarations": list(declarations),
  }


def copy_comments(source: Node, target: Node) -> Node:
  """
  Copies comment attachments from ``source`` onto ``target``.

  Comments already present on ``target`` are kept after the copied ones.

  Args:
      source: Node whose comments should survive.
      target: Node receiving them.

  Returns:
      Node: ``target``, for chaining.
  """
  for key in COMMENT_KEYS:
    comments = source.get(key)
    if comments:
      target[key] = [*comments, *target.get(key, [])]
  return target


def node_line(node: Node) -> int:
  """
  Returns the 1-based start line of ``node`` or 0 when no location is attached.
  """
  loc = node.get("loc") if isinstance(node, dict) else None
  if isinstance(loc, dict):
    start = loc.get("start") or {}
    line = start.get("line")
    if isinstance(line, int):
      return line
  return 0


def _name(node: Optional[Node]) -> str:
  if not isinstance(node, dict):
    return "?"
  if node.get("type") == NodeType.IDENTIFIER:
    return str(node.get("name"))
  if node.get("type") == NodeType.LITERAL:
    return repr(node.get("value"))
  return f"<{node.get('type')}>"


def render_node(node: Node) -> str:
  """
  Renders import and variable declarations as an approximate one-liner.

  Args:
      node: Any ESTree node.

  Returns:
      str: E.g. ``import a, {b as c} from 'x';`` or ``const a, b = ...;``.
  """
  node_type = node.get("type")

  if node_type == NodeType.IMPORT_DECLARATION:
    default_parts = []
    named_parts = []
    for specifier in node.get("specifiers", []):
      local = _name(specifier.get("local"))
      if specifier.get("type") == NodeType.IMPORT_DEFAULT_SPECIFIER:
        default_parts.append(local)
      else:
        imported = _name(specifier.get("imported"))
        named_parts.append(imported if imported == local else f"{imported} as {local}")

    clauses = list(default_parts)
    if named_parts or not default_parts:
      clauses.append("{" + ", ".join(named_parts) + "}")
    return f"import {', '.join(clauses)} from {_name(node.get('source'))};"

  if node_type == NodeType.VARIABLE_DECLARATION:
    declarations = node.get("declarations", [])
    names = [_name(dec.get("id")) for dec in declarations]
    return f"{node.get('kind')} {', '.join(names)} = ...;"

  return f"<{node_type}>"
