"""Cooperative cancellation signals.

A `CancellationSignal` is a one-way flag polled by the line readers before
each read. Use `CancellationToken` to request cancellation and
`NEVER_CANCELLED` where no cancellation is wanted.
"""

from abc import ABCMeta, abstractmethod
from collections.abc import Iterable
from threading import Event
from typing import ClassVar, final

from ..utils import abc_subclasshook_check

__all__ = (
    "Cancelled",
    "CancellationSignal",
    "CancellationToken",
    "NeverCancelled",
    "NEVER_CANCELLED",
)


class Cancelled(Exception):
    """Raised by single-shot reads when cancellation was already requested."""


class CancellationSignal(metaclass=ABCMeta):
    """Observable flag that moves at most once from unset to set.

    Polling must be cheap and must never block.
    """

    __slots__: ClassVar = ()

    @property
    @abstractmethod
    def cancellation_requested(self) -> bool:
        """Whether cancellation has been requested."""
        raise NotImplementedError(self)

    def raise_if_cancellation_requested(self) -> None:
        """Raise `Cancelled` if cancellation has been requested."""
        if self.cancellation_requested:
            raise Cancelled(self)

    @classmethod
    def __subclasshook__(cls, subclass: type):
        """Structural check used by `issubclass` to recognise signal-like types."""
        return abc_subclasshook_check(
            CancellationSignal, cls, subclass, names=("cancellation_requested",)
        )


@final
class NeverCancelled(CancellationSignal):
    """A `CancellationSignal` that is never requested."""

    __slots__: ClassVar = ()

    @property
    def cancellation_requested(self) -> bool:
        return False

    def __repr__(self):
        return f"{type(self).__qualname__}()"


NEVER_CANCELLED = NeverCancelled()


@final
class CancellationToken(CancellationSignal):
    """Thread-safe `CancellationSignal` that can be requested with `cancel`.

    A token created with `parents` is also requested as soon as any of its
    parents is, which lets a caller combine e.g. a global timeout with a
    per-input limit. Once requested, a token stays requested.
    """

    __slots__: ClassVar = ("__event", "__parents")

    def __init__(self, *, parents: Iterable[CancellationSignal] = ()):
        """Create an unset token, optionally linked to `parents`."""
        self.__event = Event()
        self.__parents = tuple(parents)

    def __repr__(self):
        return f"{type(self).__qualname__}(parents={self.__parents!r}, cancellation_requested={self.cancellation_requested!r})"

    @property
    def parents(self) -> tuple[CancellationSignal, ...]:
        """Signals this token is linked to."""
        return self.__parents

    @property
    def cancellation_requested(self) -> bool:
        if self.__event.is_set():
            return True
        if any(parent.cancellation_requested for parent in self.__parents):
            self.__event.set()
            return True
        return False

    def cancel(self) -> None:
        """Request cancellation. Calling this more than once has no effect."""
        self.__event.set()
