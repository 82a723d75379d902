"""
Statement Rewriting.

Turns one ``VariableDeclaration`` into the ordered list of statements that
replace it. The rewriter does not touch the tree itself: it returns a
:class:`Replacement` request which the traversal applies in a single place.

Example:

.. code-block:: javascript

    // const {a} = require('x'), b = 2;
    import {a} from 'x';
    const b = 2;
"""

from dataclasses import dataclass, field
from typing import List

from cjs_switcheroo.core.classifier import declarator_to_statement
from cjs_switcheroo.core.syntax import Node, copy_comments


@dataclass
class Replacement:
  """
  Request to substitute ``original`` with ``nodes`` in its containing statement list.

  Attributes:
      original: The statement being replaced.
      nodes: Replacement statements, in output order.
  """

  original: Node
  nodes: List[Node] = field(default_factory=list)

  def apply(self, body: List[Node]) -> int:
    """
    Splices the replacement into ``body`` in place.

    The original is located by identity, so structurally equal siblings are
    never confused with it.

    Args:
        body: The statement list containing ``original``.

    Returns:
        int: Index at which the replacement starts.

    Raises:
        ValueError: If ``original`` is not an element of ``body``.
    """
    for index, stmt in enumerate(body):
      if stmt is self.original:
        body[index : index + 1] = self.nodes
        return index
    raise ValueError(f"Statement of type '{self.original.get('type')}' is not in the target body.")


def rewrite_statement(statement: Node, preserve_comments: bool = True) -> Replacement:
  """
  Maps every declarator of ``statement`` to its own replacement statement.

  A statement with N declarators always yields N statements in the original order.

  Args:
      statement: A ``VariableDeclaration``.
      preserve_comments: Copy the statement's comments onto the first replacement.

  Returns:
      Replacement: The rewrite request.
  """
  kind = statement["kind"]
  nodes = [declarator_to_statement(dec, kind) for dec in statement["declarations"]]

  if preserve_comments and nodes:
    copy_comments(statement, nodes[0])

  return Replacement(original=statement, nodes=nodes)
