"""
Runtime Configuration Store.

Settings are read from the ``[tool.cjs_switcheroo]`` table of the nearest
``pyproject.toml`` and may be overridden by explicit arguments.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

TOOL_SECTION = "cjs_switcheroo"


class RuntimeConfig(BaseModel):
  """
  Configuration container for the transform engine.
  """

  preserve_comments: bool = Field(True, description="Carry comments of a split statement onto its first replacement.")
  strict_placement: bool = Field(
    False,
    description="If True, a require below the program root marks the run as failed. If False, it only warns.",
  )
  warning_category: str = Field("commonjs", description="Category attached to emitted warnings.")

  @field_validator("warning_category")
  @classmethod
  def validate_category(cls, v: str) -> str:
    """
    Normalizes the warning category.

    Args:
        v (str): Raw category.

    Returns:
        str: Stripped, lowercase category.

    Raises:
        ValueError: If the category is blank.
    """
    v_clean = v.strip().lower()
    if not v_clean:
      raise ValueError("warning_category must not be empty.")
    return v_clean

  @classmethod
  def load(
    cls,
    preserve_comments: Optional[bool] = None,
    strict_placement: Optional[bool] = None,
    warning_category: Optional[str] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and applies explicit overrides.

    Args:
        preserve_comments (Optional[bool]): Override for comment preservation.
        strict_placement (Optional[bool]): Override for strict placement.
        warning_category (Optional[str]): Override for the warning category.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    settings: Dict[str, Any] = {key: value for key, value in toml_config.items() if key in cls.model_fields}
    overrides = {
      "preserve_comments": preserve_comments,
      "strict_placement": strict_placement,
      "warning_category": warning_category,
    }
    settings.update({key: value for key, value in overrides.items() if value is not None})

    return cls(**settings)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None
      return data.get("tool", {}).get(TOOL_SECTION, {}), parent

  return {}, None
