"""
Tests for Statement Rewriting and Replacement Requests.
"""

import pytest

from cjs_switcheroo.core.rewriter import Replacement, rewrite_statement
from tests.estree import comment, decl, declarator, default_spec, import_decl, lit, named_spec, obj_pattern, prop, require


def test_single_declarator_yields_single_replacement():
  stmt = decl("const", declarator("a", require("x")))
  request = rewrite_statement(stmt)
  assert request.original is stmt
  assert request.nodes == [import_decl("x", default_spec("a"))]


def test_mixed_statement_splits_in_order():
  """const {a} = require('x'), b = 2;"""
  b_dec = declarator("b", lit(2))
  stmt = decl("const", declarator(obj_pattern(prop("a")), require("x")), b_dec)
  request = rewrite_statement(stmt)
  assert request.nodes == [
    import_decl("x", named_spec("a")),
    {"type": "VariableDeclaration", "kind": "const", "declarations": [b_dec]},
  ]


@pytest.mark.parametrize("kind", ["var", "let", "const"])
def test_passthrough_keeps_declaration_kind(kind):
  stmt = decl(kind, declarator("a", require("x")), declarator("b", lit(1)), declarator("c", lit(2)))
  request = rewrite_statement(stmt)
  assert len(request.nodes) == 3
  assert [n.get("kind") for n in request.nodes[1:]] == [kind, kind]


def test_comments_move_to_first_replacement():
  stmt = decl("var", declarator("a", require("x")), declarator("b", lit(1)))
  stmt["leadingComments"] = [comment(" deps")]
  stmt["comments"] = [comment(" recast style")]
  request = rewrite_statement(stmt)
  assert request.nodes[0]["leadingComments"] == [comment(" deps")]
  assert request.nodes[0]["comments"] == [comment(" recast style")]
  assert "leadingComments" not in request.nodes[1]


def test_comments_can_be_dropped_on_request():
  stmt = decl("var", declarator("a", require("x")))
  stmt["leadingComments"] = [comment(" deps")]
  request = rewrite_statement(stmt, preserve_comments=False)
  assert "leadingComments" not in request.nodes[0]


def test_apply_splices_at_original_position():
  first = decl("var", declarator("z", lit(0)))
  target = decl("var", declarator("a", require("x")), declarator("b", lit(1)))
  last = decl("var", declarator("y", lit(0)))
  body = [first, target, last]

  index = rewrite_statement(target).apply(body)

  assert index == 1
  assert len(body) == 4
  assert body[0] is first
  assert body[1]["type"] == "ImportDeclaration"
  assert body[2]["declarations"][0]["id"]["name"] == "b"
  assert body[3] is last


def test_apply_matches_by_identity():
  twin = decl("var", declarator("a", require("x")))
  target = decl("var", declarator("a", require("x")))
  body = [twin, target]
  rewrite_statement(target).apply(body)
  assert body[0] is twin


def test_apply_missing_original_raises():
  request = Replacement(original=decl("var", declarator("a", require("x"))), nodes=[])
  with pytest.raises(ValueError):
    request.apply([])
