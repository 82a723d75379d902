"""
Transform Trace Logger.

Records the step-by-step execution of a transform run:
1. Lifecycle phases (e.g. the CommonJS import pass).
2. AST mutations (statement A replaced by statements B, C).
3. Inspections where a candidate was found but left untouched.

The output is a list of event dictionaries suitable for JSON serialization.
"""

import time
import uuid
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class TraceEventType(str, Enum):
  PHASE_START = "phase_start"
  PHASE_END = "phase_end"
  AST_MUTATION = "ast_mutation"
  ANALYSIS_WARNING = "analysis_warning"
  INSPECTION = "inspection"


@dataclass
class TraceEvent:
  id: str
  type: TraceEventType
  timestamp: float
  description: str
  parent_id: Optional[str] = None
  metadata: Dict[str, Any] = field(default_factory=dict)


class TraceLogger:
  """
  Records transform events, nested under the currently open phase.
  """

  def __init__(self):
    self._events: List[TraceEvent] = []
    self._active_phases: List[str] = []

  def start_phase(self, name: str, description: str = "") -> str:
    """Opens a nested phase. Returns its ID."""
    phase_id = str(uuid.uuid4())
    self._events.append(
      TraceEvent(
        id=phase_id,
        type=TraceEventType.PHASE_START,
        timestamp=time.time(),
        description=name,
        parent_id=self._current_parent(),
        metadata={"detail": description},
      )
    )
    self._active_phases.append(phase_id)
    return phase_id

  def end_phase(self):
    """Closes the innermost open phase. No-op when none is open."""
    if not self._active_phases:
      return

    phase_id = self._active_phases.pop()
    self._events.append(
      TraceEvent(
        id=str(uuid.uuid4()),
        type=TraceEventType.PHASE_END,
        timestamp=time.time(),
        description="End Phase",
        parent_id=phase_id,
      )
    )

  def log_mutation(self, node_type: str, before: str, after: str):
    self._log_simple(TraceEventType.AST_MUTATION, f"Transformed {node_type}", {"before": before, "after": after})

  def log_warning(self, message: str):
    self._log_simple(TraceEventType.ANALYSIS_WARNING, message, {"level": "warning"})

  def log_inspection(self, node_str: str, outcome: str, detail: str = ""):
    """Logs a decision point where no change occurred."""
    self._log_simple(TraceEventType.INSPECTION, f"Inspecting '{node_str}'", {"outcome": outcome, "detail": detail})

  def _current_parent(self) -> Optional[str]:
    return self._active_phases[-1] if self._active_phases else None

  def _log_simple(self, evt_type: TraceEventType, desc: str, meta: Dict[str, Any]):
    self._events.append(
      TraceEvent(
        id=str(uuid.uuid4()),
        type=evt_type,
        timestamp=time.time(),
        description=desc,
        parent_id=self._current_parent(),
        metadata=meta,
      )
    )

  def export(self) -> List[Dict[str, Any]]:
    """Returns the events as plain dictionaries."""
    return [asdict(e) for e in self._events]

