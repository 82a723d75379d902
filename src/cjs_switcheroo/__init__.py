"""
cjs-switcheroo Package.

A deterministic ESTree transform converting CommonJS ``require`` idioms into
ES-module ``import`` declarations.

Usage
-----

Simple Conversion
^^^^^^^^^^^^^^^^^

.. code-block:: python

    import cjs_switcheroo as cjs

    # `program` is an ESTree dict, e.g. json.loads() of acorn/espree output
    result = cjs.transform(program)
    print(result.replaced, result.warnings)

Advanced Usage (Engine)
^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from cjs_switcheroo import TransformEngine, RuntimeConfig

    engine = TransformEngine(config=RuntimeConfig(strict_placement=True))
    res = engine.run(program)
    if not res.success:
      print(res.warnings)
"""

from typing import Optional

from cjs_switcheroo.config import RuntimeConfig
from cjs_switcheroo.core.classifier import classify
from cjs_switcheroo.core.engine import TransformEngine
from cjs_switcheroo.core.logger import Logger
from cjs_switcheroo.core.transform import import_commonjs
from cjs_switcheroo.core.transform_result import TransformResult, TransformWarning

__version__ = "0.0.1"


def transform(ast: dict, config: Optional[RuntimeConfig] = None) -> TransformResult:
  """
  Rewrites require statements of an ESTree ``Program`` in place.

  Args:
      ast (dict): The program node.
      config (Optional[RuntimeConfig]): Settings. If None, they are loaded from the
          ``[tool.cjs_switcheroo]`` table of the nearest pyproject.toml, as
          :class:`TransformEngine` does.

  Returns:
      TransformResult: Summary of the run.
  """
  engine = TransformEngine(config=config)
  return engine.run(ast)


__all__ = [
  "RuntimeConfig",
  "TransformEngine",
  "TransformResult",
  "TransformWarning",
  "Logger",
  "classify",
  "import_commonjs",
  "transform",
  "__version__",
]
