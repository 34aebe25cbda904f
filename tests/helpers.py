"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: the combinator tests mostly need to
prove that a callback ran, or did not.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Recorder:
    """Callable that records its arguments and returns a scripted value.

    With no ``returns`` it echoes its first argument (identity), or returns
    ``None`` when called without arguments.
    """

    returns: Any = None
    echo: bool = True
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if self.returns is not None or not self.echo:
            return self.returns
        return args[0] if args else None

    @property
    def called(self) -> bool:
        return bool(self.calls)


def scripted(value: Any) -> Recorder:
    """Recorder that always returns ``value``."""
    return Recorder(returns=value, echo=False)


def boom(message: str = "boom") -> Any:
    """Raise ``ValueError(message)``; used where a callable must fail."""
    raise ValueError(message)


class Indexed:
    """Sequence-protocol iterable: only ``__getitem__``, no ``__iter__``."""

    def __init__(self, *items: Any) -> None:
        self._items = items

    def __getitem__(self, index: int) -> Any:
        return self._items[index]
