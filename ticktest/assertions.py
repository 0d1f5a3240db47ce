"""Assertion helpers that record failures on a test context.

A failed assertion calls ``t.error(...)``: the message is logged and the test
is marked failed, but execution continues.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from ticktest.context import TestContext


def deep_equal(a: object, b: object) -> bool:
    """Structural equality of two values."""
    return bool(a == b)


def equals(t: TestContext, a: object, b: object) -> None:
    """Assert that ``a`` is deeply equal to ``b``."""
    if not deep_equal(a, b):
        t.error("expected %r to be deeply equal to %r", a, b)


def identical(t: TestContext, a: object, b: object) -> None:
    """Assert that ``a`` is the same object as ``b``."""
    if a is not b:
        t.error("expected %r to be strictly equal to %r", a, b)


def own_attributes(obj: object) -> set[str]:
    """Names of attributes set on ``obj`` itself, in ``__dict__`` or in slots."""
    names = set(getattr(obj, "__dict__", {}))
    for cls in type(obj).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.update(
            slot
            for slot in slots
            if slot not in ("__dict__", "__weakref__") and hasattr(obj, slot)
        )
    return names


def has_key(t: TestContext, obj: Any, key: str) -> None:
    """Assert that ``key`` exists in ``obj``.

    Mappings are checked for the key; other objects for an instance attribute
    of that name, including assigned slots (class attributes do not count).
    """
    if isinstance(obj, Mapping):
        found = key in obj
    else:
        found = key in own_attributes(obj)
    if not found:
        t.error("expected %r to have key %r", obj, key)


def contains(t: TestContext, collection: Iterable[Any], item: object) -> None:
    """Assert that ``item`` itself is an element of ``collection``."""
    if not any(element is item for element in collection):
        t.error("expected %r to contain %r", collection, item)


def contains_equal(t: TestContext, collection: Iterable[Any], item: object) -> None:
    """Assert that some element of ``collection`` is deeply equal to ``item``."""
    if not any(deep_equal(element, item) for element in collection):
        t.error("expected %r to contain %r", collection, item)


class Assert:
    """Assertions bound to one test context.

    Useful to avoid passing the context to every assertion::

        check = Assert.bind(t)
        check.equals(1, 1)
        check.identical(obj, obj)

    """

    def __init__(self, t: TestContext) -> None:
        self.t = t

    @classmethod
    def bind(cls, t: TestContext) -> "Assert":
        return cls(t)

    def equals(self, a: object, b: object) -> None:
        equals(self.t, a, b)

    def identical(self, a: object, b: object) -> None:
        identical(self.t, a, b)

    def has_key(self, obj: Any, key: str) -> None:
        has_key(self.t, obj, key)

    def contains(self, collection: Iterable[Any], item: object) -> None:
        contains(self.t, collection, item)

    def contains_equal(self, collection: Iterable[Any], item: object) -> None:
        contains_equal(self.t, collection, item)
