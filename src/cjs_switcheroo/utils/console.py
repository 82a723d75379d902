"""
Central Logging and Console Utilities.

All user-facing output goes through the standard ``logging`` module, rendered
by ``rich``. The active Rich console sits behind a proxy so the destination
(stdout, a file, an in-memory buffer for tests) can be swapped at runtime with
:func:`set_console` while modules keep importing the same ``console`` object.

Attributes:
    console (_ConsoleProxy): Stable module-level reference to the active console.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Between INFO and WARNING
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "code": "bold magenta",
  }
)


class _ConsoleProxy:
  """
  Forwards printing to a swappable ``rich.console.Console`` backend.

  Swapping the backend also re-points the root logger's ``RichHandler`` so that
  ``logging`` output follows the console.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._configure_logging()

  @property
  def backend(self) -> Console:
    """The currently active Rich console."""
    return self._backend

  def set_backend(self, new_console: Console) -> None:
    """
    Installs ``new_console`` and rebinds logging to it.

    Args:
        new_console (Console): The console to write to.
    """
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    """Returns to a fresh stdout console."""
    self.set_backend(Console(theme=_THEME))

  def _configure_logging(self) -> None:
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
      if isinstance(handler, RichHandler):
        root_logger.removeHandler(handler)

    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(
      RichHandler(
        console=self._backend,
        show_time=False,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
      )
    )

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Redirects console and logging output to ``new_console``.

  Args:
      new_console (Console): E.g. ``Console(file=io.StringIO())`` to capture output.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Restores console and logging output to stdout."""
  console.reset()


def get_console() -> Console:
  """Returns the active Rich console."""
  return console.backend


def log_info(msg: str) -> None:
  """Logs an informational message. Rich markup is honoured."""
  logging.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  """Logs at the custom SUCCESS level."""
  logging.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  """Logs a warning message."""
  logging.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  """Logs an error message."""
  logging.error(f"❌ {msg}", extra={"markup": True})
