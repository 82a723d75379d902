"""
Declarative AST Pattern Matching.

This module provides a tiny combinator language for describing the shape of
ESTree nodes and extracting sub-values from them. A pattern is one of four
immutable variants:

1.  **LiteralPattern**: Equal-compares the candidate against a fixed value.
2.  **FieldsPattern**: Matches a mapping node field by field. Fields not listed
    are unconstrained; a listed field that is absent is a non-match.
3.  **PredicatePattern**: Delegates to an arbitrary callable receiving the raw value.
4.  **CapturePattern**: Wraps another pattern and records the matched value under a name.

A match returns ``None`` on failure, or a dictionary of captures on success.
The dictionary may be empty, so callers must test against ``None`` rather than
relying on truthiness.

Usage:

.. code-block:: python

    is_call = matches_ast({"type": "CallExpression", "callee": extract("callee")})
    captures = is_call(node)
    if captures is not None:
      print(captures["callee"])
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

Captures = Dict[str, Any]


class PatternError(ValueError):
  """
  Raised when a pattern binds the same capture name twice, either at construction
  or when a predicate returns a name that is already bound.
  """


def _check_unique(names: Iterable[str]) -> Tuple[str, ...]:
  """
  Validates that no capture name is bound twice within a single pattern tree.

  Args:
      names: Capture names collected from sub-patterns, in declaration order.

  Returns:
      Tuple[str, ...]: The names as a tuple.

  Raises:
      PatternError: If a name appears more than once.
  """
  seen = []
  for name in names:
    if name in seen:
      raise PatternError(f"Duplicate capture name '{name}' in pattern.")
    seen.append(name)
  return tuple(seen)


def _merge_captures(captures: Captures, extra: Mapping) -> Captures:
  """
  Adds ``extra`` to ``captures`` in place.

  Names returned by predicates are only known at match time, so they are
  checked here as well as at construction.

  Raises:
      PatternError: If a name is already bound.
  """
  for name, value in extra.items():
    if name in captures:
      raise PatternError(f"Duplicate capture name '{name}' in pattern.")
    captures[name] = value
  return captures


def _deep_equal(left: Any, right: Any) -> bool:
  # bool is an int subclass; keep `computed: False` from matching 0 at any depth
  if isinstance(left, bool) or isinstance(right, bool):
    return type(left) is type(right) and left == right
  if isinstance(left, Mapping) and isinstance(right, Mapping):
    return left.keys() == right.keys() and all(_deep_equal(left[k], right[k]) for k in left)
  if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
    if type(left) is not type(right) or len(left) != len(right):
      return False
    return all(_deep_equal(a, b) for a, b in zip(left, right))
  return left == right


class Pattern(ABC):
  """
  Abstract base for all pattern variants.

  Patterns are callable, so a compiled pattern can be used anywhere a predicate is expected.
  """

  @property
  def capture_names(self) -> Tuple[str, ...]:
    """Names this pattern (and its children) may bind on success."""
    return ()

  @abstractmethod
  def match(self, value: Any) -> Optional[Captures]:
    """
    Tests ``value`` against the pattern.

    Args:
        value: The candidate node or raw field value.

    Returns:
        Optional[Captures]: ``None`` on failure, captures on success.
    """

  def matches(self, value: Any) -> bool:
    """Boolean view of :meth:`match`."""
    return self.match(value) is not None

  def __call__(self, value: Any) -> Optional[Captures]:
    return self.match(value)


@dataclass(frozen=True)
class LiteralPattern(Pattern):
  """Matches values deep-equal to ``expected``."""

  expected: Any

  def match(self, value: Any) -> Optional[Captures]:
    return {} if _deep_equal(value, self.expected) else None


@dataclass(frozen=True)
class PredicatePattern(Pattern):
  """
  Matches when ``func(value)`` is truthy.

  A predicate returning a mapping contributes that mapping to the captures,
  which is how hand-written extractors derive values from a node.
  """

  func: Callable[[Any], Any]

  def match(self, value: Any) -> Optional[Captures]:
    result = self.func(value)
    if isinstance(result, Mapping):
      return dict(result)
    return {} if result else None


@dataclass(frozen=True)
class FieldsPattern(Pattern):
  """Matches a mapping node whose listed fields all match their sub-patterns."""

  fields: Tuple[Tuple[str, Pattern], ...]

  def __post_init__(self) -> None:
    _check_unique(name for _, sub in self.fields for name in sub.capture_names)

  @property
  def capture_names(self) -> Tuple[str, ...]:
    return tuple(name for _, sub in self.fields for name in sub.capture_names)

  def match(self, value: Any) -> Optional[Captures]:
    if not isinstance(value, Mapping):
      return None

    captures: Captures = {}
    for key, sub in self.fields:
      if key not in value:
        return None
      result = sub.match(value[key])
      if result is None:
        return None
      _merge_captures(captures, result)
    return captures


@dataclass(frozen=True)
class CapturePattern(Pattern):
  """Records the matched value under ``name`` when ``inner`` matches."""

  name: str
  inner: Pattern

  def __post_init__(self) -> None:
    _check_unique((self.name, *self.inner.capture_names))

  @property
  def capture_names(self) -> Tuple[str, ...]:
    return (self.name, *self.inner.capture_names)

  def match(self, value: Any) -> Optional[Captures]:
    result = self.inner.match(value)
    if result is None:
      return None
    return _merge_captures({self.name: value}, result)


def compile_pattern(spec: Any) -> Pattern:
  """
  Converts a declarative description into a :class:`Pattern`.

  - Patterns are returned unchanged.
  - Mappings become :class:`FieldsPattern` (values compiled recursively).
  - Other callables become :class:`PredicatePattern`.
  - Anything else becomes :class:`LiteralPattern`.

  Args:
      spec: The description to compile.

  Returns:
      Pattern: The compiled pattern.

  Raises:
      PatternError: If the description binds a capture name twice.
  """
  if isinstance(spec, Pattern):
    return spec
  if isinstance(spec, Mapping):
    return FieldsPattern(tuple((key, compile_pattern(sub)) for key, sub in spec.items()))
  if callable(spec):
    return PredicatePattern(spec)
  return LiteralPattern(spec)


def matches_ast(spec: Mapping) -> Pattern:
  """
  Builds a node matcher from a field mapping.

  Args:
      spec: Mapping of field name to literal, nested mapping, predicate or capture.

  Returns:
      Pattern: Callable returning captures on success and ``None`` otherwise.
  """
  return compile_pattern(spec)


def extract(name: str, spec: Any = None) -> CapturePattern:
  """
  Wraps a description in a named capture.

  Args:
      name: Key under which the matched value is recorded.
      spec: Optional constraint on the value. ``None`` accepts anything.

  Returns:
      CapturePattern: The capture pattern.
  """
  inner = PredicatePattern(lambda _: True) if spec is None else compile_pattern(spec)
  return CapturePattern(name, inner)


def match(pattern: Any, node: Any) -> Optional[Captures]:
  """
  One-shot helper: compiles ``pattern`` and applies it to ``node``.

  Args:
      pattern: A :class:`Pattern` or any description accepted by :func:`compile_pattern`.
      node: The candidate value.

  Returns:
      Optional[Captures]: ``None`` on failure, captures on success.
  """
  return compile_pattern(pattern).match(node)
