"""
Tree Traversal with Replacement.

A single-pass, pre-order walker over ESTree dictionaries. Visitors observe each
node on entry and may answer with a rewrite request:

- ``None``: keep the node and descend into it.
- A node: replace the visited node with it, then descend into the new node.
- A :class:`~cjs_switcheroo.core.rewriter.Replacement`: splice several
  statements in place of the visited one (list positions only), then descend
  into each of them.

Replacement nodes are never re-entered themselves, which keeps a rewrite from
matching its own output. All mutation happens here, in the walker.
"""

from typing import Any, List, Optional, Union

from cjs_switcheroo.core.rewriter import Replacement
from cjs_switcheroo.core.syntax import COMMENT_KEYS, Node

# Metadata keys that never hold child nodes
SKIP_KEYS = frozenset({"loc", "range", "start", "end", *COMMENT_KEYS})

VisitResult = Union[None, Node, Replacement]


class TreeVisitor:
  """
  Base class for visitors passed to :func:`replace`.
  """

  def enter(self, node: Node, parent: Optional[Node]) -> VisitResult:
    """
    Called once per node, before its children.

    Args:
        node: The node being visited.
        parent: The node owning the field that holds ``node`` (``None`` for the root).

    Returns:
        VisitResult: ``None``, a replacement node, or a :class:`Replacement`.
    """
    return None


def _is_node(value: Any) -> bool:
  return isinstance(value, dict) and "type" in value


def replace(tree: Node, visitor: TreeVisitor) -> Node:
  """
  Walks ``tree`` and applies the visitor's rewrite requests in place.

  Args:
      tree: Root node (usually a ``Program``).
      visitor: The visitor.

  Returns:
      Node: The root, which differs from ``tree`` only if the visitor replaced it.

  Raises:
      ValueError: If a :class:`Replacement` targets a node outside a list.
  """
  result = visitor.enter(tree, None)
  if isinstance(result, Replacement):
    raise ValueError("The root node cannot be replaced by a statement list.")
  root = tree if result is None else result
  _walk_children(root, visitor)
  return root


def _walk_children(node: Node, visitor: TreeVisitor) -> None:
  for key, value in list(node.items()):
    if key in SKIP_KEYS:
      continue

    if isinstance(value, list):
      _walk_list(value, node, visitor)
    elif _is_node(value):
      result = visitor.enter(value, node)
      if isinstance(result, Replacement):
        raise ValueError(f"Cannot splice statements into single-node field '{key}'.")
      if result is not None:
        node[key] = result
        value = result
      _walk_children(value, visitor)


def _walk_list(items: List[Any], parent: Node, visitor: TreeVisitor) -> None:
  index = 0
  while index < len(items):
    item = items[index]
    if not _is_node(item):
      index += 1
      continue

    result = visitor.enter(item, parent)

    if isinstance(result, Replacement):
      start = result.apply(items)
      for new_node in result.nodes:
        _walk_children(new_node, visitor)
      index = start + len(result.nodes)
      continue

    if result is not None:
      items[index] = result
      item = result
    _walk_children(item, visitor)
    index += 1
