"""Tests for standalone helpers."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Generic, Protocol, TypeVar

from devkit_utils.utils import (
    derives_from_generic_parent,
    detail_message,
    get_implemented_generic_bases,
    if_not_none,
    implements_generic_base,
    is_concrete,
    is_none_or_default,
)

T = TypeVar("T")


class StorageError(Exception):
    pass


def raise_chain():
    try:
        try:
            raise OSError("disk full")
        except OSError as e:
            raise StorageError("write failed") from e
    except StorageError as e:
        raise RuntimeError("save failed") from e


class TestDetailMessage:
    """Tests for detail_message."""

    def test_unraised_exception(self):
        """Test an exception that was never raised has no traceback."""
        assert detail_message(ValueError("bad")) == "ValueError: bad"

    def test_qualified_type_name(self):
        """Test non-builtin types are module qualified."""
        message = detail_message(StorageError("oops"))
        assert message == f"{__name__}.StorageError: oops"

    def test_includes_traceback(self):
        """Test raised exceptions include their traceback."""
        try:
            raise KeyError("k")
        except KeyError as e:
            message = detail_message(e)

        assert message.startswith("KeyError: 'k'\n")
        assert "test_includes_traceback" in message

    def test_chained_causes(self):
        """Test causes are appended with increasing depth."""
        try:
            raise_chain()
        except RuntimeError as e:
            message = detail_message(e)

        assert message.startswith("RuntimeError: save failed")
        assert f" [Cause (1): {__name__}.StorageError: write failed" in message
        assert " [Cause (2): OSError: disk full" in message
        assert message.index("Cause (1)") < message.index("Cause (2)")

    def test_implicit_context(self):
        """Test implicit exception context counts as a cause."""
        try:
            try:
                raise OSError("first")
            except OSError:
                raise ValueError("second")
        except ValueError as e:
            message = detail_message(e)

        assert "[Cause (1): OSError: first" in message

    def test_suppressed_context(self):
        """Test 'from None' hides the context."""
        try:
            try:
                raise OSError("first")
            except OSError:
                raise ValueError("second") from None
        except ValueError as e:
            message = detail_message(e)

        assert "Cause" not in message

    def test_exclude_inner(self):
        """Test causes can be left out."""
        try:
            raise_chain()
        except RuntimeError as e:
            message = detail_message(e, include_inner=False)

        assert "Cause" not in message


class TestNullable:
    """Tests for None-aware helpers."""

    def test_if_not_none(self):
        """Test the function is applied only to present values."""
        assert if_not_none("abc", str.upper) == "ABC"
        assert if_not_none(None, str.upper) is None

    def test_if_not_none_falsy_values(self):
        """Test falsy values are still present."""
        assert if_not_none(0, lambda x: x + 1) == 1

    def test_is_none_or_default(self):
        """Test default instances are recognised."""
        assert is_none_or_default(None)
        assert is_none_or_default(0)
        assert is_none_or_default(0.0)
        assert is_none_or_default(False)
        assert is_none_or_default("")
        assert is_none_or_default([])

    def test_is_not_default(self):
        """Test non-default values."""
        assert not is_none_or_default(1)
        assert not is_none_or_default("x")
        assert not is_none_or_default([0])

    def test_type_without_default(self):
        """Test types that need constructor arguments."""

        class Point:
            def __init__(self, x):
                self.x = x

        assert not is_none_or_default(Point(0))


class Repository(Generic[T]):
    pass


class Entity:
    pass


class EntityRepository(Repository[Entity]):
    pass


class CachedEntityRepository(EntityRepository):
    pass


class UntypedRepository(Repository):
    pass


class Reader(Protocol):
    def read(self) -> bytes: ...


class Handler(ABC):
    @abstractmethod
    def handle(self): ...


class Settings(Mapping[str, str]):
    def __getitem__(self, key):
        raise KeyError(key)

    def __iter__(self):
        return iter(())

    def __len__(self):
        return 0


class TestTypeInfo:
    """Tests for class introspection helpers."""

    def test_is_concrete(self):
        """Test concrete and non-concrete classes."""
        assert is_concrete(Entity)
        assert is_concrete(EntityRepository)
        assert not is_concrete(Handler)
        assert not is_concrete(Reader)

    def test_get_implemented_generic_bases(self):
        """Test parameterised bases are found across the MRO."""
        assert get_implemented_generic_bases(EntityRepository, Repository) == [Repository[Entity]]
        assert get_implemented_generic_bases(CachedEntityRepository, Repository) == [
            Repository[Entity]
        ]
        assert get_implemented_generic_bases(Entity, Repository) == []

    def test_implements_generic_base(self):
        """Test generic base detection."""
        assert implements_generic_base(CachedEntityRepository, Repository)
        assert implements_generic_base(Settings, Mapping)
        assert not implements_generic_base(UntypedRepository, Repository)

    def test_derives_from_generic_parent(self):
        """Test ancestry regardless of parameterisation."""
        assert derives_from_generic_parent(Repository, Repository)
        assert derives_from_generic_parent(UntypedRepository, Repository)
        assert derives_from_generic_parent(CachedEntityRepository, Repository)
        assert not derives_from_generic_parent(Entity, Repository)
        assert not derives_from_generic_parent(object, Repository)
