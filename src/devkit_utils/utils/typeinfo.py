"""Class introspection helpers for generic types.

"Generic" means the unparameterised class, e.g. Repository for
class UserRepository(Repository[User]).
"""

from __future__ import annotations

import inspect
from typing import Any, get_origin


def is_concrete(cls: type) -> bool:
    """Whether cls can be instantiated: not abstract and not a Protocol."""
    if getattr(cls, "_is_protocol", False):
        return False
    return not inspect.isabstract(cls)


def get_implemented_generic_bases(cls: type, generic: type) -> list[Any]:
    """Parameterised bases of generic declared anywhere in cls's MRO.

    Example:
        >>> get_implemented_generic_bases(UserRepository, Repository)
        [Repository[User]]
    """
    found: list[Any] = []
    for klass in cls.__mro__:
        for base in klass.__dict__.get("__orig_bases__", ()):
            if get_origin(base) is generic and base not in found:
                found.append(base)
    return found


def implements_generic_base(cls: type, generic: type) -> bool:
    """Whether cls declares generic with type arguments somewhere in its MRO."""
    return bool(get_implemented_generic_bases(cls, generic))


def derives_from_generic_parent(cls: type, generic: type) -> bool:
    """Whether cls is generic or inherits from it, parameterised or not."""
    if cls is object:
        return False
    return generic in cls.__mro__
