"""Unit tests for TypingInspector, Lazy and is_disposable."""

from typing import Any, Callable, Dict, Generic, List, TypeVar

from graphguard.application.type_inspector import Lazy, TypingInspector, is_disposable
from graphguard.domain import ITypeInspector

T = TypeVar("T")
K = TypeVar("K")


class Repository(Generic[T]):
    pass


class Pair(Generic[K, T]):
    pass


class Provider(Generic[T]):
    pass


class IBar:
    pass


class Bar(IBar):
    pass


class TestGenerics:
    """Test cases for generic introspection."""

    def test_implements_interface(self):
        """Test that TypingInspector implements ITypeInspector."""
        assert isinstance(TypingInspector(), ITypeInspector)

    def test_plain_class_is_not_generic(self):
        """Test that a plain class is not a parameterized generic."""
        inspector = TypingInspector()

        assert not inspector.is_generic(Bar)
        assert not inspector.is_open_generic(Bar)

    def test_open_generic(self):
        """Test that a generic parameterized with type variables is open."""
        inspector = TypingInspector()

        assert inspector.is_generic(Repository[T])
        assert inspector.is_open_generic(Repository[T])
        assert inspector.is_open_generic(Pair[K, T])
        assert inspector.generic_type_definition(Repository[T]) is Repository

    def test_closed_generic(self):
        """Test that a generic parameterized with concrete types is closed."""
        inspector = TypingInspector()

        assert inspector.is_generic(Repository[Bar])
        assert not inspector.is_open_generic(Repository[Bar])
        assert not inspector.is_open_generic(Pair[K, Bar])
        assert inspector.generic_type_arguments(Repository[Bar]) == (Bar,)

    def test_builtin_generic(self):
        """Test that builtin generic aliases are supported."""
        inspector = TypingInspector()

        assert inspector.generic_type_definition(List[int]) is list
        assert not inspector.is_open_generic(Dict[str, Any])

    def test_definition_of_plain_class_is_itself(self):
        """Test that a non-generic type is its own definition."""
        assert TypingInspector().generic_type_definition(Bar) is Bar

    def test_declared_interfaces(self):
        """Test that base classes are reported without object."""
        assert TypingInspector().declared_interfaces(Bar) == (IBar,)
        assert TypingInspector().declared_interfaces(Callable[[], Bar]) == ()


class TestDeferredWrappers:
    """Test cases for deferred-construction wrapper detection."""

    def test_zero_argument_factory(self):
        """Test that Callable[[], X] defers X."""
        inspector = TypingInspector()

        assert inspector.is_deferred_wrapper(Callable[[], IBar])
        assert inspector.unwrap_deferred(Callable[[], IBar]) is IBar

    def test_factory_with_arguments_is_not_deferred(self):
        """Test that factories taking arguments are not deferred wrappers."""
        inspector = TypingInspector()

        assert not inspector.is_deferred_wrapper(Callable[[int], IBar])
        assert not inspector.is_deferred_wrapper(Callable[..., IBar])

    def test_lazy(self):
        """Test that Lazy[X] defers X."""
        assert TypingInspector().unwrap_deferred(Lazy[IBar]) is IBar

    def test_plain_types_are_not_deferred(self):
        """Test that plain and unrelated generic types are not wrappers."""
        inspector = TypingInspector()

        assert inspector.unwrap_deferred(IBar) is None
        assert inspector.unwrap_deferred(Repository[IBar]) is None

    def test_additional_wrapper(self):
        """Test that further wrapper generics can be registered."""
        inspector = TypingInspector()

        inspector.add_deferred_wrapper(Provider)

        assert inspector.unwrap_deferred(Provider[IBar]) is IBar


class TestLazy:
    """Test cases for the Lazy handle."""

    def test_value_created_once(self):
        """Test that the factory runs on first access only."""
        calls = []

        def factory():
            calls.append(1)
            return Bar()

        lazy = Lazy(factory)

        assert not lazy.is_value_created
        first = lazy.value
        second = lazy.value

        assert first is second
        assert lazy.is_value_created
        assert calls == [1]


class TestIsDisposable:
    """Test cases for the default disposal predicate."""

    def test_plain_class(self):
        """Test that a class without release members is not disposable."""
        assert not is_disposable(Bar)

    def test_close_method(self):
        """Test that a close method marks a type disposable."""

        class Connection:
            def close(self):
                pass

        assert is_disposable(Connection)

    def test_context_manager(self):
        """Test that sync and async context managers are disposable."""

        class Session:
            def __enter__(self):
                return self

            def __exit__(self, *args):
                return False

        class AsyncSession:
            async def __aenter__(self):
                return self

            async def __aexit__(self, *args):
                return False

        assert is_disposable(Session)
        assert is_disposable(AsyncSession)

    def test_inherited_from_interface(self):
        """Test that a release member declared on a base class counts."""

        class IDisposableBar:
            def dispose(self):
                raise NotImplementedError

        class DisposableBar(IDisposableBar):
            pass

        assert is_disposable(IDisposableBar)
        assert is_disposable(DisposableBar)

    def test_generic_alias_uses_origin(self):
        """Test that a parameterized generic is checked through its definition."""

        class Pool(Generic[T]):
            def close(self):
                pass

        assert is_disposable(Pool[Bar])

    def test_non_class(self):
        """Test that non-class values are never disposable."""
        assert not is_disposable(Callable[[], Bar])
        assert not is_disposable(42)

    def test_uses_declared_interfaces_of_inspector(self):
        """Test that interfaces reported by the inspector are checked for release members."""

        class IClosable:
            def close(self):
                pass

        class Handle:
            pass

        class HandleInspector(TypingInspector):
            def declared_interfaces(self, tp):
                if tp is Handle:
                    return (IClosable,)
                return super().declared_interfaces(tp)

        assert not is_disposable(Handle)
        assert is_disposable(Handle, type_inspector=HandleInspector())
