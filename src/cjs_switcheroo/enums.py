"""
Enumerations for cjs-switcheroo.

This module defines the ESTree node type tags the transform inspects or
synthesizes.
"""

from enum import Enum


class NodeType(str, Enum):
  """
  ESTree ``type`` discriminators used by the require-to-import transform.

  Members compare equal to their raw string value, so ``node["type"] == NodeType.IDENTIFIER``
  works against parser output directly.
  """

  PROGRAM = "Program"
  VARIABLE_DECLARATION = "VariableDeclaration"
  VARIABLE_DECLARATOR = "VariableDeclarator"
  CALL_EXPRESSION = "CallExpression"
  MEMBER_EXPRESSION = "MemberExpression"
  IDENTIFIER = "Identifier"
  OBJECT_PATTERN = "ObjectPattern"
  PROPERTY = "Property"
  LITERAL = "Literal"
  IMPORT_DECLARATION = "ImportDeclaration"
  IMPORT_SPECIFIER = "ImportSpecifier"
  IMPORT_DEFAULT_SPECIFIER = "ImportDefaultSpecifier"

