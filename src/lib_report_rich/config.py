"""Configuration helpers: ``.env`` loading and environment-driven settings.

Purpose
-------
Centralise the few runtime switches of the reporter (colour control and the
diagnostic log level) and the opt-in ``.env`` loading shared by the CLI and
host applications.

Contents
--------
* :data:`DOTENV_ENV_VAR` - environment toggle for ``.env`` loading.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - dotenv policy and loader.
* :class:`ReporterSettings` - colour and logging settings read from the
  environment.

System Role
-----------
Consumed by :mod:`lib_report_rich.cli` and
:func:`lib_report_rich.runtime.create_reporter`. Rendering constants (glyphs,
indent, widths) are static and live in :mod:`lib_report_rich.domain.spinners`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv

LOGGER = logging.getLogger(__name__)

DOTENV_ENV_VAR = "REPORT_USE_DOTENV"
FORCE_COLOR_ENV_VAR = "REPORT_FORCE_COLOR"
NO_COLOR_ENV_VAR = "REPORT_NO_COLOR"
LOG_LEVEL_ENV_VAR = "REPORT_LOG_LEVEL"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_DOTENV_LOCK = Lock()
_DOTENV_LOADED: Path | None = None


def _env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> _ = os.environ.pop('REPORT_EXAMPLE_BOOL', None)
    >>> _env_bool('REPORT_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['REPORT_EXAMPLE_BOOL'] = '0'
    >>> _env_bool('REPORT_EXAMPLE_BOOL', default=True)
    False
    >>> del os.environ['REPORT_EXAMPLE_BOOL']
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is enabled.

    An explicit CLI flag wins; otherwise the ``REPORT_USE_DOTENV`` value is
    interpreted; the default is ``False``.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    normalised = env_value.strip().lower()
    if normalised in _FALSY:
        return False
    return normalised in _TRUTHY


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    The lookup walks upwards from ``search_from`` (default: the working
    directory). The first successful load is cached; later calls return the
    cached path.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _DOTENV_LOADED
    with _DOTENV_LOCK:
        if _DOTENV_LOADED is not None:
            return _DOTENV_LOADED
        candidate = _locate_dotenv(search_from)
        if candidate is None:
            LOGGER.debug("No .env file found above %s", search_from or Path.cwd())
            return None
        load_dotenv(candidate, override=False)
        _DOTENV_LOADED = candidate.resolve()
        return _DOTENV_LOADED


def _locate_dotenv(search_from: Path | None) -> Path | None:
    if search_from is None:
        found = find_dotenv(usecwd=True)
        return Path(found) if found else None
    start = Path(search_from).resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    """Forget the cached ``.env`` location (tests only)."""

    global _DOTENV_LOADED
    with _DOTENV_LOCK:
        _DOTENV_LOADED = None


@dataclass(slots=True, frozen=True)
class ReporterSettings:
    """Environment-driven reporter settings.

    Attributes
    ----------
    force_color:
        Emit ANSI styles even when stdout is not a terminal.
    no_color:
        Suppress all colours (``REPORT_NO_COLOR`` or the ``NO_COLOR`` convention).
    log_level:
        Level name for the reporter's own diagnostics on stderr.
    """

    force_color: bool = False
    no_color: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "ReporterSettings":
        """Read settings from the process environment.

        Raises
        ------
        ValueError
            When ``REPORT_LOG_LEVEL`` does not name a logging level.
        """

        level = (os.getenv(LOG_LEVEL_ENV_VAR) or "WARNING").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"{LOG_LEVEL_ENV_VAR} must be a logging level name, got {level!r}")
        no_color = _env_bool(NO_COLOR_ENV_VAR, default=bool(os.getenv("NO_COLOR")))
        return cls(force_color=_env_bool(FORCE_COLOR_ENV_VAR, default=False), no_color=no_color, log_level=level)


__all__ = [
    "DOTENV_ENV_VAR",
    "FORCE_COLOR_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "NO_COLOR_ENV_VAR",
    "ReporterSettings",
    "enable_dotenv",
    "should_use_dotenv",
]
