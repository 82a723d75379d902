"""
Tests for Runtime Configuration loading.
"""

import pytest
from pydantic import ValidationError

from cjs_switcheroo.config import RuntimeConfig


def test_defaults():
  cfg = RuntimeConfig()
  assert cfg.preserve_comments is True
  assert cfg.strict_placement is False
  assert cfg.warning_category == "commonjs"


def test_category_normalized_and_validated():
  assert RuntimeConfig(warning_category="  CommonJS ").warning_category == "commonjs"
  with pytest.raises(ValidationError):
    RuntimeConfig(warning_category="   ")


def test_load_from_pyproject(tmp_path):
  (tmp_path / "pyproject.toml").write_text(
    '[tool.cjs_switcheroo]\nstrict_placement = true\npreserve_comments = false\nunknown_key = 1\n',
    encoding="utf-8",
  )
  nested = tmp_path / "src" / "app"
  nested.mkdir(parents=True)

  cfg = RuntimeConfig.load(search_path=nested)

  assert cfg.strict_placement is True
  assert cfg.preserve_comments is False


def test_explicit_overrides_win(tmp_path):
  (tmp_path / "pyproject.toml").write_text('[tool.cjs_switcheroo]\nstrict_placement = true\n', encoding="utf-8")
  cfg = RuntimeConfig.load(strict_placement=False, warning_category="esm", search_path=tmp_path)
  assert cfg.strict_placement is False
  assert cfg.warning_category == "esm"


def test_pyproject_without_section(tmp_path):
  (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
  assert RuntimeConfig.load(search_path=tmp_path) == RuntimeConfig()


def test_invalid_toml_falls_back_to_defaults(tmp_path):
  (tmp_path / "pyproject.toml").write_text("not = [valid", encoding="utf-8")
  assert RuntimeConfig.load(search_path=tmp_path) == RuntimeConfig()
