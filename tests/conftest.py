"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so captured log output never leaks between tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'cjs_switcheroo' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from cjs_switcheroo.core.logger import Logger  # noqa: E402
from cjs_switcheroo.utils.console import reset_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_console():
  """Ensures every test starts and ends with the default stdout console."""
  reset_console()
  yield
  reset_console()


@pytest.fixture
def logger():
  """A diagnostic logger that records warnings without echoing them."""
  return Logger(echo=False)
