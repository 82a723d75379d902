"""
Declarator Classification.

Decides whether a single ``VariableDeclarator`` encodes a ``require`` import
and, if so, builds the equivalent ``ImportDeclaration``.

Decision order (first match wins):

1.  ``{a, b: c} = require('m')`` -> ``import {a, b as c} from 'm'``
    (a ``default`` key becomes a default specifier, placed first).
2.  ``a = require('m')`` -> ``import a from 'm'``.
3.  ``a = require('m').default`` -> ``import a from 'm'``.
4.  ``a = require('m').foo`` -> ``import {foo as a} from 'm'``.
5.  Anything else is not an import.
"""

from typing import Any, Dict, Optional

from cjs_switcheroo.core.patterns import match_require, match_require_with_property
from cjs_switcheroo.core.syntax import (
  Node,
  import_declaration,
  import_default_specifier,
  import_specifier,
  variable_declaration,
)
from cjs_switcheroo.enums import NodeType


def classify(declarator: Node) -> Optional[Node]:
  """
  Converts a declarator to an ``ImportDeclaration`` when it is recognized as one.

  Never mutates ``declarator``.

  Args:
      declarator: An ESTree ``VariableDeclarator``.

  Returns:
      Optional[Node]: The import declaration, or ``None`` if the declarator
      is an ordinary variable binding.
  """
  m = match_require(declarator)
  if m is not None:
    if m["id"]["type"] == NodeType.OBJECT_PATTERN:
      return _pattern_to_named_import(m)
    return _identifier_to_default_import(m)

  m = match_require_with_property(declarator)
  if m is not None:
    if m["property"]["name"] == "default":
      return _identifier_to_default_import(m)
    return _property_to_named_import(m)

  return None


def is_require_declarator(declarator: Node) -> bool:
  """True when ``declarator`` has any require shape understood by :func:`classify`."""
  return match_require.matches(declarator) or match_require_with_property.matches(declarator)


def declarator_to_statement(declarator: Node, kind: str) -> Node:
  """
  Converts a declarator to a standalone statement.

  Recognized requires become an ``ImportDeclaration``; everything else is
  wrapped in its own ``VariableDeclaration`` of the original ``kind``.

  Args:
      declarator: An ESTree ``VariableDeclarator``.
      kind: ``var``, ``let`` or ``const``.

  Returns:
      Node: A statement node.
  """
  converted = classify(declarator)
  if converted is not None:
    return converted
  return variable_declaration(kind, [declarator])


def _pattern_to_named_import(m: Dict[str, Any]) -> Node:
  specifiers = [_create_import_specifier(local=prop["value"], imported=prop["key"]) for prop in m["id"]["properties"]]
  # import syntax only allows the default binding before the braces
  specifiers.sort(key=lambda s: s["type"] != NodeType.IMPORT_DEFAULT_SPECIFIER)
  return import_declaration(specifiers=specifiers, source=m["sources"][0])


def _identifier_to_default_import(m: Dict[str, Any]) -> Node:
  return import_declaration(specifiers=[import_default_specifier(m["id"])], source=m["sources"][0])


def _property_to_named_import(m: Dict[str, Any]) -> Node:
  return import_declaration(
    specifiers=[_create_import_specifier(local=m["id"], imported=m["property"])],
    source=m["sources"][0],
  )


def _create_import_specifier(local: Node, imported: Node) -> Node:
  if imported["name"] == "default":
    return import_default_specifier(local)
  return import_specifier(local=local, imported=imported)
