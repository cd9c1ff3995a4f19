from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")
D = TypeVar("D")


class Undefined:
    """Marks a style attribute that is inherited from the enclosing span."""

    _inst = None

    def __new__(cls) -> Undefined:
        if cls._inst is None:
            cls._inst = super().__new__(cls)
        return cls._inst

    def __repr__(self) -> str:
        return "Undefined"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> Undefined:
        return self

    def __deepcopy__(self, memo) -> Undefined:
        return self

    def __reduce__(self):
        return (Undefined, ())

    @staticmethod
    def default(value: T | Undefined, default: D) -> T | D:
        if isinstance(value, Undefined):
            return default
        return value


undefined = Undefined()
