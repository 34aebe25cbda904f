"""Configuration: frozen Config for error-provenance capture."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
import logging
import os
from typing import Any

from dotenv import load_dotenv

from resultkit.errors import ConfigurationError

log = logging.getLogger(__name__)

_CAPTURE_ENV_VAR = "RESULTKIT_CAPTURE_PROVENANCE"
_LIMIT_ENV_VAR = "RESULTKIT_PROVENANCE_LIMIT"
_FALSY = frozenset({"0", "false", "no", "off"})

_active: Config | None = None


@dataclass(frozen=True)
class Config:
    """Immutable settings for resultkit.

    Only ``Err`` construction consults the config; every other operation is
    independent of it.

    Example:
        configure(provenance_limit=8)
        # Err values now keep the eight innermost caller frames
    """

    #: Take a call-stack snapshot whenever an ``Err`` is built.
    capture_provenance: bool = True
    #: Keep at most this many of the most recent frames; *None* keeps all.
    provenance_limit: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration."""
        limit = self.provenance_limit
        if limit is not None and (
            not isinstance(limit, int) or isinstance(limit, bool)
        ):
            raise ConfigurationError(
                f"provenance_limit must be an integer or None, got {limit!r}",
                hint="Use None to keep the full call stack.",
            )
        if limit is not None and limit < 1:
            raise ConfigurationError(
                f"provenance_limit must be ≥ 1, got {self.provenance_limit}",
                hint="Use None to keep the full call stack.",
            )

    @classmethod
    def from_env(cls) -> Config:
        """Build a Config from ``RESULTKIT_*`` environment variables.

        A project ``.env`` file is loaded first, without overriding variables
        that are already set.
        """
        load_dotenv()

        capture = True
        raw_capture = os.environ.get(_CAPTURE_ENV_VAR)
        if raw_capture is not None:
            capture = raw_capture.strip().lower() not in _FALSY

        limit: int | None = None
        raw_limit = os.environ.get(_LIMIT_ENV_VAR)
        if raw_limit is not None and raw_limit.strip():
            try:
                limit = int(raw_limit)
            except ValueError as e:
                raise ConfigurationError(
                    f"{_LIMIT_ENV_VAR} must be an integer, got {raw_limit!r}",
                    hint=f"Unset {_LIMIT_ENV_VAR} to keep the full call stack.",
                ) from e

        log.debug(
            "Resolved config from environment: capture_provenance=%s provenance_limit=%s",
            capture,
            limit,
        )
        return cls(capture_provenance=capture, provenance_limit=limit)


def get_config() -> Config:
    """Return the active Config, resolving it from the environment on first use.

    An invalid environment is reported once and replaced by the defaults, so
    building an ``Err`` never fails on configuration.
    """
    global _active
    if _active is None:
        try:
            _active = Config.from_env()
        except ConfigurationError as e:
            log.warning("Ignoring invalid resultkit environment: %s. %s", e, e.hint)
            _active = Config()
    return _active


def configure(config: Config | None = None, **overrides: Any) -> Config:
    """Install and return a new active Config.

    ``overrides`` are applied on top of ``config`` (or the current config when
    omitted).
    """
    global _active
    valid = {f.name for f in fields(Config)}
    unknown = sorted(set(overrides) - valid)
    if unknown:
        raise ConfigurationError(
            f"Unknown config field(s): {', '.join(unknown)}",
            hint=f"Valid fields: {', '.join(sorted(valid))}",
        )
    base = config if config is not None else get_config()
    new = replace(base, **overrides) if overrides else base
    _active = new
    return new


def reset_config() -> None:
    """Forget the active Config so the next lookup re-reads the environment."""
    global _active
    _active = None
