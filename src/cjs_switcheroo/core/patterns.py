"""
Require Pattern Catalog.

Fixed matchers describing the CommonJS idioms the transform understands:

- ``require('<source>')``
- ``<id> = require('<source>')`` where ``<id>`` is an identifier or a flat
  destructuring pattern such as ``{a, b: myB}``.
- ``<id> = require('<source>').<property>``

Capture names: ``sources`` (the one-element argument list), ``id`` and ``property``.
"""

from typing import Any

from cjs_switcheroo.core.matcher import extract, matches_ast
from cjs_switcheroo.enums import NodeType


def is_string_literal(node: Any) -> bool:
  """True for an ESTree ``Literal`` holding a string value."""
  return isinstance(node, dict) and node.get("type") == NodeType.LITERAL and isinstance(node.get("value"), str)


is_identifier = matches_ast({"type": NodeType.IDENTIFIER.value})

# Property with Identifier key and value (possibly shorthand)
is_simple_property = matches_ast(
  {
    "type": NodeType.PROPERTY.value,
    "key": is_identifier,
    "computed": False,
    "value": is_identifier,
  }
)

# {a, b: myB, c, ...}
is_object_pattern = matches_ast(
  {
    "type": NodeType.OBJECT_PATTERN.value,
    "properties": lambda props: isinstance(props, list) and all(is_simple_property.matches(p) for p in props),
  }
)

# require(<source>)
match_require_call = matches_ast(
  {
    "type": NodeType.CALL_EXPRESSION.value,
    "callee": {
      "type": NodeType.IDENTIFIER.value,
      "name": "require",
    },
    "arguments": extract(
      "sources",
      lambda args: isinstance(args, list) and len(args) == 1 and is_string_literal(args[0]),
    ),
  }
)

# <id> = require(<source>)
match_require = matches_ast(
  {
    "type": NodeType.VARIABLE_DECLARATOR.value,
    "id": extract("id", lambda node: is_identifier.matches(node) or is_object_pattern.matches(node)),
    "init": match_require_call,
  }
)

# <id> = require(<source>).<property>
match_require_with_property = matches_ast(
  {
    "type": NodeType.VARIABLE_DECLARATOR.value,
    "id": extract("id", is_identifier),
    "init": {
      "type": NodeType.MEMBER_EXPRESSION.value,
      "computed": False,
      "object": match_require_call,
      "property": extract("property", {"type": NodeType.IDENTIFIER.value}),
    },
  }
)
