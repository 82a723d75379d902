"""
Data structures describing the outcome of a transform run.

This module defines the ``TransformWarning`` and ``TransformResult`` Pydantic
models returned by the engine.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class TransformWarning(BaseModel):
  """
  A non-fatal diagnostic attached to a source location.
  """

  line: int = Field(default=0, description="1-based start line of the offending node, 0 if unknown.")
  message: str = Field(description="Human-readable explanation.")
  category: str = Field(default="commonjs", description="Transform that emitted the warning.")


class TransformResult(BaseModel):
  """
  Container for the results of running the transform over one tree.

  The tree itself is mutated in place and is not part of the result.
  """

  replaced: int = Field(default=0, description="Number of statements rewritten into imports.")
  warnings: List[TransformWarning] = Field(default_factory=list, description="Diagnostics, in emission order.")
  success: bool = Field(default=True, description="False if strict placement rejected a candidate.")
  trace_events: List[Dict[str, Any]] = Field(default_factory=list, description="Execution trace log data.")

  @property
  def has_warnings(self) -> bool:
    """
    Check if the run produced any diagnostics.

    Returns:
        True if one or more warnings are present.
    """
    return len(self.warnings) > 0
