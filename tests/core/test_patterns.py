"""
Tests for the Require Pattern Catalog.
"""

import pytest

from cjs_switcheroo.core.patterns import (
  is_identifier,
  is_object_pattern,
  is_simple_property,
  is_string_literal,
  match_require,
  match_require_call,
  match_require_with_property,
)
from tests.estree import declarator, ident, lit, member, obj_pattern, prop, require


def test_string_literal():
  assert is_string_literal(lit("x"))
  assert not is_string_literal(lit(5))
  assert not is_string_literal(ident("x"))


def test_simple_property_shorthand_and_renamed():
  assert is_simple_property.matches(prop("a"))
  assert is_simple_property.matches(prop("a", "b"))


def test_simple_property_rejects_computed_and_literal_keys():
  assert not is_simple_property.matches(prop("a", "b", computed=True))
  assert not is_simple_property.matches(prop(lit("a"), "b"))
  assert not is_simple_property.matches(prop("a", obj_pattern(prop("b"))))


def test_object_pattern_requires_every_property_simple():
  assert is_object_pattern.matches(obj_pattern(prop("a"), prop("b", "c")))
  assert not is_object_pattern.matches(obj_pattern(prop("a"), prop("b", "c", computed=True)))
  rest = {"type": "RestElement", "argument": ident("rest")}
  assert not is_object_pattern.matches(obj_pattern(prop("a"), rest))


def test_require_call_captures_sources():
  result = match_require_call(require("fs"))
  assert result["sources"] == [lit("fs")]


@pytest.mark.parametrize(
  "node",
  [
    require(),
    require("a", "b"),
    require(ident("name")),
    require(lit(42)),
    {"type": "CallExpression", "callee": ident("load"), "arguments": [lit("x")]},
    {"type": "CallExpression", "callee": member(ident("module"), "require"), "arguments": [lit("x")]},
  ],
)
def test_require_call_rejects_other_calls(node):
  assert match_require_call(node) is None


def test_match_require_identifier():
  dec = declarator("fs", require("fs"))
  result = match_require(dec)
  assert result["id"] is dec["id"]
  assert result["sources"][0] == lit("fs")


def test_match_require_object_pattern():
  dec = declarator(obj_pattern(prop("a")), require("x"))
  assert match_require(dec)["id"]["type"] == "ObjectPattern"


def test_match_require_rejects_array_pattern():
  dec = declarator({"type": "ArrayPattern", "elements": [ident("a")]}, require("x"))
  assert match_require(dec) is None


def test_match_require_with_property():
  dec = declarator("foo", member(require("m"), "foo"))
  result = match_require_with_property(dec)
  assert result["id"] == ident("foo")
  assert result["property"] == ident("foo")
  assert result["sources"] == [lit("m")]


def test_match_require_with_property_rejects_computed_access():
  dec = declarator("foo", member(require("m"), lit("foo"), computed=True))
  assert match_require_with_property(dec) is None


def test_match_require_with_property_requires_identifier_id():
  dec = declarator(obj_pattern(prop("a")), member(require("m"), "foo"))
  assert match_require_with_property(dec) is None


def test_patterns_are_mutually_exclusive():
  plain = declarator("a", require("m"))
  with_prop = declarator("a", member(require("m"), "b"))
  assert match_require(plain) is not None and match_require_with_property(plain) is None
  assert match_require(with_prop) is None and match_require_with_property(with_prop) is not None


def test_identifier_matcher():
  assert is_identifier.matches(ident("x"))
  assert not is_identifier.matches(lit("x"))


def test_declarator_without_init():
  assert match_require(declarator("a", None)) is None
  assert match_require_with_property(declarator("a", None)) is None
