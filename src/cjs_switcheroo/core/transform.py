"""
CommonJS Import Transform.

Entry point plugged into the tree traversal. Rewrites top-level
``var/let/const x = require('m')`` statements into ``import`` declarations and
warns about require-shaped declarations found anywhere else.
"""

from typing import List, Optional

from cjs_switcheroo.core.classifier import is_require_declarator
from cjs_switcheroo.core.rewriter import Replacement, rewrite_statement
from cjs_switcheroo.core.syntax import Node
from cjs_switcheroo.core.traverser import TreeVisitor, VisitResult, replace
from cjs_switcheroo.enums import NodeType

ROOT_LEVEL_MESSAGE = "import can only be at root level"


def is_var_with_require_calls(node: Node) -> bool:
  """True for a ``VariableDeclaration`` with at least one require-shaped declarator."""
  return node.get("type") == NodeType.VARIABLE_DECLARATION and any(
    is_require_declarator(dec) for dec in node.get("declarations", [])
  )


class ImportCommonjsVisitor(TreeVisitor):
  """
  Visitor turning top-level require statements into rewrite requests.

  Attributes:
      replacements (List[Replacement]): Requests issued so far, in visit order.
      rejected (List[Node]): Candidates left untouched because they are nested.
  """

  def __init__(self, logger, category: str = "commonjs", preserve_comments: bool = True) -> None:
    """
    Args:
        logger: Diagnostic sink exposing ``warn(node, message, category)``.
        category: Category passed to the logger.
        preserve_comments: Forwarded to the statement rewriter.
    """
    self.logger = logger
    self.category = category
    self.preserve_comments = preserve_comments
    self.replacements: List[Replacement] = []
    self.rejected: List[Node] = []

  def enter(self, node: Node, parent: Optional[Node]) -> VisitResult:
    if not is_var_with_require_calls(node):
      return None

    if parent is None or parent.get("type") != NodeType.PROGRAM:
      self.logger.warn(node, ROOT_LEVEL_MESSAGE, self.category)
      self.rejected.append(node)
      return None

    request = rewrite_statement(node, preserve_comments=self.preserve_comments)
    self.replacements.append(request)
    return request


def import_commonjs(ast: Node, logger, category: str = "commonjs", preserve_comments: bool = True) -> ImportCommonjsVisitor:
  """
  Runs the transform over ``ast`` in place.

  Args:
      ast: ``Program`` node.
      logger: Diagnostic sink exposing ``warn(node, message, category)``.
      category: Category reported with warnings.
      preserve_comments: Keep comments of rewritten statements.

  Returns:
      ImportCommonjsVisitor: The visitor, exposing the applied replacements and rejected candidates.
  """
  visitor = ImportCommonjsVisitor(logger, category=category, preserve_comments=preserve_comments)
  replace(ast, visitor)
  return visitor
