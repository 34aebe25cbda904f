"""Option: a value that may be absent.

An ``Option[T]`` is either ``Some(value)`` or the singleton ``NONE``. It
replaces ``T | None`` where absence has to flow through a pipeline of
transformations instead of being checked at every step.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
import dataclasses
from typing import TYPE_CHECKING, Any, ClassVar, Never, final

from resultkit._text import to_string
from resultkit.errors import UnwrapError

if TYPE_CHECKING:
    from resultkit.result import Err, Ok, Result

__all__ = ["NONE", "NoneOption", "Option", "Some"]


class Option[T](ABC):
    """Shared contract of ``Some`` and ``NONE`` plus namespace helpers."""

    __slots__ = ()

    @property
    @abstractmethod
    def is_some(self) -> bool:
        """``True`` when this is ``Some``."""

    @property
    @abstractmethod
    def is_none(self) -> bool:
        """``True`` when this is ``NONE``."""

    @abstractmethod
    def expect(self, msg: str) -> T:
        """Return the contained value, or raise ``UnwrapError(msg)``.

        Prefer checking ``is_some`` and reading ``val`` when the variant is
        already known; ``expect`` is for the cases where absence is a bug.
        """

    @abstractmethod
    def unwrap(self) -> T:
        """Return the contained value, or raise ``UnwrapError``.

        Because this may raise, prefer handling ``NONE`` explicitly.
        """

    @abstractmethod
    def unwrap_or[D](self, default: D) -> T | D:
        """Return the contained value or ``default``."""

    @abstractmethod
    def map[U](self, fn: Callable[[T], U]) -> Option[U]:
        """Apply ``fn`` to a contained value, leaving ``NONE`` untouched."""

    @abstractmethod
    def map_or[U](self, default: U, fn: Callable[[T], U]) -> U:
        """Return ``fn(val)`` for ``Some``, else ``default``.

        If ``default`` is expensive to compute use ``map_or_else``.
        """

    @abstractmethod
    def map_or_else[U](self, default_fn: Callable[[], U], fn: Callable[[T], U]) -> U:
        """Return ``fn(val)`` for ``Some``, else ``default_fn()``."""

    @abstractmethod
    def and_then[U](self, fn: Callable[[T], Option[U]]) -> Option[U]:
        """Chain a computation that itself returns an Option.

        ``fn`` runs only for ``Some`` and its result is returned as is, so a
        chain stops at the first ``NONE``.
        """

    @abstractmethod
    def or_(self, other: Option[T]) -> Option[T]:
        """Return ``self`` if ``Some``, else ``other``.

        ``other`` is evaluated eagerly by the caller. Use ``or_else`` when it
        is the result of a function call.

        Example:
            Some(1).or_(Some(2))  # Some(1)
            NONE.or_(Some(2))  # Some(2)
        """

    @abstractmethod
    def or_else(self, other_fn: Callable[[], Option[T]]) -> Option[T]:
        """Return ``self`` if ``Some``, else ``other_fn()``.

        ``other_fn`` is called only when needed.
        """

    @abstractmethod
    def to_result[E](self, error: E) -> Result[T, E]:
        """Convert to a Result: ``Some(v)`` -> ``Ok(v)``, ``NONE`` -> ``Err(error)``."""

    @abstractmethod
    def __iter__(self) -> Iterator[Any]: ...

    # --- Namespace helpers ---

    @staticmethod
    def all(*options: Option[Any]) -> Option[tuple[Any, ...]]:
        """Collect the values of ``options`` into a tuple.

        Short-circuits with the first ``NONE`` found, if any.
        """
        values = []
        for option in options:
            if option.is_none:
                return option
            values.append(option.unwrap())
        return Some(tuple(values))

    @staticmethod
    def any(*options: Option[Any]) -> Option[Any]:
        """Return the first option as given; ``NONE`` when there are none.

        Unlike ``Result.any`` this does not look past the first input.
        """
        for option in options:
            return option
        return NONE

    @staticmethod
    def is_option(value: object) -> bool:
        """Return True if ``value`` is a ``Some`` or ``NONE``."""
        return isinstance(value, Some) or value is NONE

    @staticmethod
    def of[V](value: V | None) -> Option[V]:
        """Lift a nullable value: ``None`` -> ``NONE``, anything else -> ``Some``."""
        return NONE if value is None else Some(value)


@final
@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Some[T](Option[T]):
    """Option variant holding a value."""

    val: T

    EMPTY: ClassVar[Some[None]]

    @property
    def is_some(self) -> bool:
        return True

    @property
    def is_none(self) -> bool:
        return False

    def expect(self, msg: str) -> T:
        return self.val

    def unwrap(self) -> T:
        return self.val

    def safe_unwrap(self) -> T:
        """Return the contained value; unlike ``unwrap`` this cannot raise.

        Only ``Some`` has it, so a type checker flags the call if the variable
        later widens to ``Option``.
        """
        return self.val

    def unwrap_or(self, default: object) -> T:
        return self.val

    def map[U](self, fn: Callable[[T], U]) -> Some[U]:
        return Some(fn(self.val))

    def map_or[U](self, default: U, fn: Callable[[T], U]) -> U:
        return fn(self.val)

    def map_or_else[U](self, default_fn: Callable[[], U], fn: Callable[[T], U]) -> U:
        return fn(self.val)

    def and_then[U](self, fn: Callable[[T], Option[U]]) -> Option[U]:
        return fn(self.val)

    def or_(self, other: Option[T]) -> Option[T]:
        return self

    def or_else(self, other_fn: Callable[[], Option[T]]) -> Option[T]:
        return self

    def to_result(self, error: object) -> Ok[T]:
        from resultkit.result import Ok

        return Ok(self.val)

    def __iter__(self) -> Iterator[Any]:
        try:
            return iter(self.val)
        except TypeError:
            return iter(())

    def __str__(self) -> str:
        return f"Some({to_string(self.val)})"

    def __repr__(self) -> str:
        return f"Some({self.val!r})"


Some.EMPTY = Some(None)


@final
class NoneOption(Option[Never]):
    """Option variant holding nothing.

    There is exactly one instance, ``NONE``; calling ``NoneOption()`` returns
    it. It has no state and rejects attribute assignment.
    """

    __slots__ = ()

    def __new__(cls) -> NoneOption:
        return NONE

    @property
    def is_some(self) -> bool:
        return False

    @property
    def is_none(self) -> bool:
        return True

    def expect(self, msg: str) -> Never:
        raise UnwrapError(msg)

    def unwrap(self) -> Never:
        raise UnwrapError("Tried to unwrap None")

    def unwrap_or[D](self, default: D) -> D:
        return default

    def map(self, fn: Callable[[Any], Any]) -> NoneOption:
        return self

    def map_or[U](self, default: U, fn: Callable[[Any], U]) -> U:
        return default

    def map_or_else[U](self, default_fn: Callable[[], U], fn: Callable[[Any], U]) -> U:
        return default_fn()

    def and_then(self, fn: Callable[[Any], Option[Any]]) -> NoneOption:
        return self

    def or_[U](self, other: Option[U]) -> Option[U]:
        return other

    def or_else[U](self, other_fn: Callable[[], Option[U]]) -> Option[U]:
        return other_fn()

    def to_result[E](self, error: E) -> Err[E]:
        from resultkit.result import Err

        return Err(error)

    def __iter__(self) -> Iterator[Never]:
        return iter(())

    def __str__(self) -> str:
        return "None"

    def __repr__(self) -> str:
        return "NONE"

    def __copy__(self) -> NoneOption:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> NoneOption:
        return self

    def __reduce__(self) -> str:
        return "NONE"


NONE: NoneOption = object.__new__(NoneOption)
