"""Result: a computation that either succeeded or failed.

A ``Result[T, E]`` is either ``Ok(value)`` or ``Err(error)``. Failures travel
through the data flow as values and only turn back into exceptions when a
caller deliberately uses one of the unsafe accessors (``unwrap``, ``expect``,
``unwrap_err``, ``expect_err``).

Every ``Err`` records where it was built. When it is later unwrapped, the
resulting ``UnwrapError`` shows that origin as well as the unwrap site.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Iterator
import dataclasses
import logging
from typing import Any, ClassVar, Never, NoReturn, final

from resultkit._provenance import capture_stack
from resultkit._text import to_string
from resultkit.errors import UnwrapError
from resultkit.option import NONE, NoneOption, Option, Some

__all__ = ["Err", "Ok", "Result"]

log = logging.getLogger(__name__)


def _raise_unwrap(message: str, cause: Any) -> NoReturn:
    exc = UnwrapError(message, cause=cause)
    if isinstance(cause, BaseException):
        raise exc from cause
    raise exc


class Result[T, E](ABC):
    """Shared contract of ``Ok`` and ``Err`` plus namespace helpers."""

    __slots__ = ()

    @property
    @abstractmethod
    def is_ok(self) -> bool:
        """``True`` when this is ``Ok``."""

    @property
    @abstractmethod
    def is_err(self) -> bool:
        """``True`` when this is ``Err``."""

    @abstractmethod
    def expect(self, msg: str) -> T:
        """Return the ``Ok`` value, or raise ``UnwrapError``.

        The error message starts with ``msg`` and includes the error value and
        where the ``Err`` was created.
        """

    @abstractmethod
    def expect_err(self, msg: str) -> E:
        """Return the ``Err`` value, or raise ``UnwrapError(msg)``."""

    @abstractmethod
    def unwrap(self) -> T:
        """Return the ``Ok`` value, or raise ``UnwrapError``.

        Because this may raise, prefer handling ``Err`` explicitly.
        """

    @abstractmethod
    def unwrap_err(self) -> E:
        """Return the ``Err`` value, or raise ``UnwrapError``."""

    @abstractmethod
    def unwrap_or[D](self, default: D) -> T | D:
        """Return the ``Ok`` value or ``default``."""

    @abstractmethod
    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply ``fn`` to an ``Ok`` value, leaving an ``Err`` untouched."""

    @abstractmethod
    def map_err[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        """Apply ``fn`` to an ``Err`` value, leaving an ``Ok`` untouched."""

    @abstractmethod
    def map_or[U](self, default: U, fn: Callable[[T], U]) -> U:
        """Return ``fn(val)`` for ``Ok``, else ``default``."""

    @abstractmethod
    def map_or_else[U](self, default_fn: Callable[[], U], fn: Callable[[T], U]) -> U:
        """Return ``fn(val)`` for ``Ok``, else ``default_fn()``."""

    @abstractmethod
    def and_then[U, F](self, fn: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
        """Chain a computation that itself returns a Result.

        ``fn`` runs only for ``Ok``; an ``Err`` is passed through unchanged.
        """

    @abstractmethod
    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        """Return ``self`` if ``Ok``, else ``other`` (evaluated eagerly)."""

    @abstractmethod
    def or_else[F](self, other_fn: Callable[[], Result[T, F]]) -> Result[T, F]:
        """Return ``self`` if ``Ok``, else ``other_fn()`` (called only when needed)."""

    @abstractmethod
    def to_option(self) -> Option[T]:
        """Convert to an Option, discarding any error."""

    @abstractmethod
    def __iter__(self) -> Iterator[Any]: ...

    # --- Namespace helpers ---

    @staticmethod
    def all(*results: Result[Any, Any]) -> Result[tuple[Any, ...], Any]:
        """Collect the ``Ok`` values of ``results`` into a tuple.

        Short-circuits with the first ``Err`` found, if any.
        """
        values = []
        for result in results:
            if result.is_err:
                return result
            values.append(result.unwrap())
        return Ok(tuple(values))

    @staticmethod
    def any(*results: Result[Any, Any]) -> Result[Any, tuple[Any, ...]]:
        """Return the first ``Ok`` in ``results``.

        If there is none, return an ``Err`` holding every error value in
        input order.
        """
        errors = []
        for result in results:
            if result.is_ok:
                return result
            errors.append(result.unwrap_err())
        return Err(tuple(errors))

    @staticmethod
    def wrap[**P, R](
        fn: Callable[P, R], /, *args: P.args, **kwargs: P.kwargs
    ) -> Result[R, Exception]:
        """Call ``fn`` and capture its outcome.

        A return value becomes ``Ok``; a raised exception becomes ``Err`` of
        that exception, unchanged.

        Example:
            Result.wrap(json.loads, raw)  # Ok({...}) or Err(JSONDecodeError(...))
        """
        try:
            return Ok(fn(*args, **kwargs))
        except Exception as e:
            log.debug("wrap captured %s from %r", type(e).__name__, fn)
            return Err(e)

    @staticmethod
    async def wrap_async[**P, R](
        fn: Callable[P, Awaitable[R]], /, *args: P.args, **kwargs: P.kwargs
    ) -> Result[R, Exception]:
        """Await ``fn(*args, **kwargs)`` and capture its outcome.

        Both a synchronous raise from ``fn`` and a failure of the awaitable
        it returns become ``Err``. Cancellation still propagates.
        """
        try:
            awaitable = fn(*args, **kwargs)
        except Exception as e:
            log.debug("wrap_async captured %s raised by %r", type(e).__name__, fn)
            return Err(e)
        try:
            value = await awaitable
        except Exception as e:
            log.debug("wrap_async captured %s awaited from %r", type(e).__name__, fn)
            return Err(e)
        return Ok(value)

    @staticmethod
    def is_result(value: object) -> bool:
        """Return True if ``value`` is an ``Ok`` or ``Err``."""
        return isinstance(value, (Ok, Err))


@final
@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Ok[T](Result[T, Never]):
    """Result variant holding a success value."""

    val: T

    EMPTY: ClassVar[Ok[None]]

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def expect(self, msg: str) -> T:
        return self.val

    def expect_err(self, msg: str) -> Never:
        raise UnwrapError(msg)

    def unwrap(self) -> T:
        return self.val

    def unwrap_err(self) -> Never:
        _raise_unwrap(f"Tried to unwrap Ok: {to_string(self.val)}", self.val)

    def safe_unwrap(self) -> T:
        """Return the ``Ok`` value; unlike ``unwrap`` this cannot raise."""
        return self.val

    def unwrap_or(self, default: object) -> T:
        return self.val

    def map[U](self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.val))

    def map_err(self, fn: Callable[[Any], Any]) -> Ok[T]:
        return self

    def map_or[U](self, default: U, fn: Callable[[T], U]) -> U:
        return fn(self.val)

    def map_or_else[U](self, default_fn: Callable[[], U], fn: Callable[[T], U]) -> U:
        return fn(self.val)

    def and_then[U, F](self, fn: Callable[[T], Result[U, F]]) -> Result[U, F]:
        return fn(self.val)

    def or_(self, other: Result[T, Any]) -> Ok[T]:
        return self

    def or_else(self, other_fn: Callable[[], Result[T, Any]]) -> Ok[T]:
        return self

    def to_option(self) -> Some[T]:
        return Some(self.val)

    def __iter__(self) -> Iterator[Any]:
        try:
            return iter(self.val)
        except TypeError:
            return iter(())

    def __str__(self) -> str:
        return f"Ok({to_string(self.val)})"

    def __repr__(self) -> str:
        return f"Ok({self.val!r})"


@final
@dataclasses.dataclass(frozen=True, slots=True, init=False, repr=False)
class Err[E](Result[Never, E]):
    """Result variant holding an error value and where it was created."""

    val: E
    _stack: str = dataclasses.field(default="", init=False, compare=False)

    def __init__(self, val: E) -> None:
        object.__setattr__(self, "val", val)
        object.__setattr__(self, "_stack", capture_stack())

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    @property
    def stack(self) -> str:
        """This error followed by the call stack that created it."""
        return f"{self}\n{self._stack}"

    def expect(self, msg: str) -> Never:
        _raise_unwrap(
            f"{msg} - Error: {to_string(self.val)}\n{self._stack}", self.val
        )

    def expect_err(self, msg: str) -> E:
        return self.val

    def unwrap(self) -> Never:
        _raise_unwrap(
            f"Tried to unwrap Error: {to_string(self.val)}\n{self._stack}", self.val
        )

    def unwrap_err(self) -> E:
        return self.val

    def unwrap_or[D](self, default: D) -> D:
        return default

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err[F](self, fn: Callable[[E], F]) -> Err[F]:
        return Err(fn(self.val))

    def map_or[U](self, default: U, fn: Callable[[Any], U]) -> U:
        return default

    def map_or_else[U](self, default_fn: Callable[[], U], fn: Callable[[Any], U]) -> U:
        return default_fn()

    def and_then(self, fn: Callable[[Any], Result[Any, Any]]) -> Err[E]:
        return self

    def or_[T, F](self, other: Result[T, F]) -> Result[T, F]:
        return other

    def or_else[T, F](self, other_fn: Callable[[], Result[T, F]]) -> Result[T, F]:
        return other_fn()

    def to_option(self) -> NoneOption:
        return NONE

    def __iter__(self) -> Iterator[Never]:
        return iter(())

    def __str__(self) -> str:
        return f"Err({to_string(self.val)})"

    def __repr__(self) -> str:
        return f"Err({self.val!r})"


Ok.EMPTY = Ok(None)
