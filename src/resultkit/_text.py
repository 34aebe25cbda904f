"""Display helper shared by every ``__str__`` and unwrap message."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel
from pydantic_core import to_json

__all__ = ["to_string"]

log = logging.getLogger(__name__)


def to_string(value: Any) -> str:
    """Render ``value`` as display text. Never raises.

    Plain objects without their own ``__str__``/``__repr__`` are rendered as a
    JSON object of their attributes instead of ``<Foo object at 0x...>``.
    """
    try:
        return _render(value)
    except Exception as e:
        log.debug("to_string fell back to object repr: %s", e, exc_info=True)
        return object.__repr__(value)


def _render(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, BaseException):
        message = str(value)
        name = type(value).__name__
        return f"{name}: {message}" if message else name
    if isinstance(value, BaseModel):
        return value.model_dump_json()
    if _lacks_custom_text(value):
        return to_json(vars(value), fallback=repr).decode()
    return str(value)


def _lacks_custom_text(value: Any) -> bool:
    cls = type(value)
    return (
        cls.__str__ is object.__str__
        and cls.__repr__ is object.__repr__
        and hasattr(value, "__dict__")
    )
