"""
Diagnostic Logger.

Collects warnings raised by transforms against specific nodes and echoes them
through the rich-backed logging channel.
"""

from typing import List

from rich.markup import escape

from cjs_switcheroo.core.syntax import Node, node_line
from cjs_switcheroo.core.transform_result import TransformWarning
from cjs_switcheroo.utils.console import log_warning


class Logger:
  """
  Sink for node-level diagnostics.

  Attributes:
      warnings (List[TransformWarning]): Recorded warnings, oldest first.
  """

  def __init__(self, echo: bool = True) -> None:
    """
    Args:
        echo: Also emit each warning through ``logging``.
    """
    self.echo = echo
    self.warnings: List[TransformWarning] = []

  def warn(self, node: Node, message: str, category: str) -> None:
    """
    Records a warning about ``node``.

    Args:
        node: The offending node; its ``loc`` supplies the line number if present.
        message: Explanation of the problem.
        category: Name of the transform reporting it.
    """
    warning = TransformWarning(line=node_line(node), message=message, category=category)
    self.warnings.append(warning)
    if self.echo:
      log_warning(f"{warning.line}: {escape(message)} ({escape(category)})")
