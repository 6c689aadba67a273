"""Tests for `linereader.utils`."""

import asyncio
from abc import ABCMeta, abstractmethod
from typing import Any, ClassVar

import pytest

from linereader.utils import abc_subclasshook_check, wrap_async

__all__ = ()


@pytest.mark.asyncio
async def test_wrap_async_plain_and_awaitable():
    """`wrap_async` returns plain values and awaits awaitables."""
    assert await wrap_async(1) == 1

    async def coro():
        await asyncio.sleep(0)
        return "x"

    assert await wrap_async(coro()) == "x"


class _Readable(metaclass=ABCMeta):
    __slots__: ClassVar = ()

    @abstractmethod
    def read(self) -> Any:
        raise NotImplementedError(self)

    @classmethod
    def __subclasshook__(cls, subclass: type):
        return abc_subclasshook_check(_Readable, cls, subclass, names=("read",))


class _Structural(metaclass=ABCMeta):
    __slots__: ClassVar = ()

    @classmethod
    def __subclasshook__(cls, subclass: type):
        return abc_subclasshook_check(
            _Structural, cls, subclass, names=("read",), typing="structural"
        )


def test_abc_subclasshook_check_nominal():
    """Nominal checks need registration and reject attributes set to `None`."""

    class Plain:
        def read(self):
            return None

    assert not issubclass(Plain, _Readable)
    _Readable.register(Plain)
    assert issubclass(Plain, _Readable)

    class Disabled:
        read = None

    _Readable.register(Disabled)
    assert not issubclass(Disabled, _Readable)


def test_abc_subclasshook_check_structural():
    """Structural checks accept any class defining every name."""

    class Plain:
        def read(self):
            return None

    class Other:
        pass

    assert issubclass(Plain, _Structural)
    assert not issubclass(Other, _Structural)


def test_abc_subclasshook_check_invalid_typing():
    """An unknown typing mode is rejected."""
    with pytest.raises(ValueError):
        abc_subclasshook_check(
            _Readable,
            _Readable,
            object,
            names=(),
            typing="bogus",  # type: ignore[arg-type]
        )
