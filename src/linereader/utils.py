"""Small utility helpers shared across the package.

Provides a sync/async value adapter and the helper used by the
`__subclasshook__` implementations of the capability classes.
"""

from abc import ABCMeta
from inspect import isawaitable
from typing import Awaitable, Collection, Literal, TypeVar, overload

__all__ = (
    "wrap_async",
    "abc_subclasshook_check",
)

_T = TypeVar("_T")


@overload
async def wrap_async(value: Awaitable[_T]) -> _T:
    """Await and return the underlying value when awaitable (overload)."""
    ...


@overload
async def wrap_async(value: Awaitable[_T] | _T) -> _T:
    """Await and return the underlying value when awaitable (overload)."""
    ...


async def wrap_async(value: Awaitable[_T] | _T):
    """Await and return the underlying value when awaitable.

    Lets text streams with either a blocking or an awaitable `readline`
    be consumed uniformly from async code.
    """
    if isawaitable(value):
        return await value
    return value


def abc_subclasshook_check(
    impl_cls: ABCMeta,
    cls: ABCMeta,
    subclass: type,
    /,
    *,
    names: Collection[str],
    typing: Literal["nominal", "structural"] = "nominal",
):
    """Helper used in `__subclasshook__` implementations.

    With `"nominal"` typing, a subclass is rejected when it sets any of
    `names` to `None` or a base hook rejects it; otherwise the decision is
    left to the normal ABC machinery. With `"structural"` typing, a class
    defining every one of `names` is accepted without registration.
    Returns `True`, `False` or `NotImplemented`.
    """
    if cls is not impl_cls:
        return NotImplemented
    bases = tuple(
        c
        for c in cls.__mro__
        if c is not cls  # type: ignore[reportUnnecessaryComparison]
        and hasattr(c, "__subclasshook__")
    )
    if typing == "nominal":
        if any(c.__subclasshook__(subclass) is False for c in bases) or any(
            all(c.__dict__[p] is None for c in subclass.__mro__ if p in c.__dict__)
            for p in names
        ):
            return False
    elif typing == "structural":
        if all(c.__subclasshook__(subclass) is not False for c in bases) and all(
            any(c.__dict__[p] is not None for c in subclass.__mro__ if p in c.__dict__)
            for p in names
        ):
            return True
    else:
        raise ValueError(typing)
    return NotImplemented
