from .typing import Undefined, undefined

__all__ = ["Undefined", "undefined"]
