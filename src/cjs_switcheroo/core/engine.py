"""
Orchestration Engine for the CommonJS Import Transform.

This module provides the `TransformEngine`, which drives a single pass of the
require-to-import rewrite over an ESTree ``Program``:

1.  **Validation**: The root must be a ``Program`` node.
2.  **Rewriting**: Top-level require statements become import declarations.
    Nested ones are reported through the diagnostic logger and left intact.
3.  **Reporting**: Each replacement is recorded as a trace mutation, and the
    run is summarized in a `TransformResult`.

The tree is mutated in place; the result carries only metadata.
"""

from typing import Optional

from cjs_switcheroo.config import RuntimeConfig
from cjs_switcheroo.core.logger import Logger
from cjs_switcheroo.core.syntax import Node, render_node
from cjs_switcheroo.core.tracer import TraceLogger
from cjs_switcheroo.core.transform import import_commonjs
from cjs_switcheroo.core.transform_result import TransformResult
from cjs_switcheroo.enums import NodeType
from cjs_switcheroo.utils.console import log_success


class TransformEngine:
  """
  The main transform unit.

  Holds the configuration and a diagnostic logger for one run at a time.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None, logger: Optional[Logger] = None):
    """
    Initializes the Engine.

    Args:
        config (RuntimeConfig, optional): Runtime settings. Loaded from pyproject.toml if None.
        logger (Logger, optional): Diagnostic sink. A fresh echoing logger is created per run if None.
    """
    self.config = config or RuntimeConfig.load()
    self._logger = logger

  def run(self, ast: Node) -> TransformResult:
    """
    Rewrites ``ast`` in place.

    Args:
        ast (Node): ESTree ``Program`` node.

    Returns:
        TransformResult: Replacement count, warnings and trace events.

    Raises:
        ValueError: If ``ast`` is not a ``Program`` node.
    """
    if not isinstance(ast, dict) or ast.get("type") != NodeType.PROGRAM:
      found = ast.get("type") if isinstance(ast, dict) else type(ast).__name__
      raise ValueError(f"Expected a Program node, got '{found}'.")

    # per-run tracer; events never leak between runs
    tracer = TraceLogger()
    logger = self._logger or Logger()
    known_warnings = len(logger.warnings)

    tracer.start_phase("CommonJS Imports", "require() -> import")

    visitor = import_commonjs(
      ast,
      logger,
      category=self.config.warning_category,
      preserve_comments=self.config.preserve_comments,
    )

    for request in visitor.replacements:
      after = "\n".join(render_node(n) for n in request.nodes)
      tracer.log_mutation(NodeType.VARIABLE_DECLARATION.value, render_node(request.original), after)

    for node in visitor.rejected:
      tracer.log_inspection(render_node(node), "rejected", "not at program root")

    warnings = logger.warnings[known_warnings:]
    for warning in warnings:
      tracer.log_warning(f"{warning.line}: {warning.message}")

    tracer.end_phase()

    if visitor.replacements:
      log_success(f"Rewrote {len(visitor.replacements)} require statement(s)")

    return TransformResult(
      replaced=len(visitor.replacements),
      warnings=list(warnings),
      success=not (self.config.strict_placement and visitor.rejected),
      trace_events=tracer.export(),
    )
