"""
DependencyList

This module tracks the object dependencies of one injector. It holds the
declared dependencies, each represented by a Reference, and the instances
the container has resolved for them so far.

The container reads the declared list, resolves every reference on it and
hands each instance back through set_instantiated_dependency(). Once all
dependencies are fulfilled, the list is passed to the injector's inject().
Literal (non-reference) arguments never appear here; the injector supplies
them itself.
"""

from typing import Any, Dict, Iterable, Iterator, Union

from .exceptions import InvalidDependencyError
from .reference import Reference


class _Unresolved:
    """Marker type for a declared dependency that has no instance yet."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNRESOLVED"


# Returned by get_instantiated_dependency() for pending dependencies.
# Distinct from None, False and every other legitimate instance.
UNRESOLVED = _Unresolved()


class DependencyList:
    """Declared dependencies of an injector plus their resolved instances.

    Invariant: the resolved IDs are always a subset of the declared IDs.
    The list is fulfilled when both sets have the same size.

    Attributes:
        _list: Declared references keyed by reference ID
        _instances: Resolved instances keyed by reference ID

    Example::

        deps = DependencyList([engine_ref, wheel_ref])
        deps.are_all_dependencies_fulfilled()  # False
        deps.set_instantiated_dependency(engine_ref, Engine())
        deps.set_instantiated_dependency(wheel_ref, Wheel())
        deps.are_all_dependencies_fulfilled()  # True
    """

    def __init__(self, references: Iterable[Reference] = ()):
        """Create a list from the given references.

        Duplicates (by ID) collapse into one entry, the later one wins.

        Args:
            references: Reference instances this list declares

        Raises:
            TypeError: When an element is not a Reference
        """
        self._list: Dict[str, Reference] = {}
        self._instances: Dict[str, Any] = {}

        for reference in references:
            if not isinstance(reference, Reference):
                raise TypeError(
                    f"DependencyList error in instantiation. The list must "
                    f"contain only Reference instances, "
                    f"'{type(reference).__name__}' found."
                )
            self._list[reference.get_id()] = reference

    def get_list(self) -> Dict[str, Reference]:
        """Get the declared dependencies.

        Returns:
            A copy of the {reference ID: Reference} mapping
        """
        return dict(self._list)

    def set_instantiated_dependency(self, reference: Reference, instance: Any) -> None:
        """Record the resolved instance for a declared dependency.

        Args:
            reference: The declared reference
            instance: Its resolved instance

        Raises:
            InvalidDependencyError: When the reference is not declared, or
                the instance is not of the referenced class
        """
        reference_id = self._ensure_declared(reference, "setting")
        expected = reference.get_class()

        if not isinstance(instance, expected):
            raise InvalidDependencyError(
                f"DependencyList error in setting instantiated dependency "
                f"'{reference_id}'. Instance of {reference.get_class_name()} "
                f"expected, {type(instance).__name__} given."
            )

        self._instances[reference_id] = instance

    def get_instantiated_dependency(self, reference: Reference) -> Any:
        """Get the resolved instance of a declared dependency.

        Args:
            reference: The declared reference

        Returns:
            The instance, or UNRESOLVED when it has not been set yet

        Raises:
            InvalidDependencyError: When the reference is not declared
        """
        reference_id = self._ensure_declared(reference, "getting")
        return self._instances.get(reference_id, UNRESOLVED)

    def has_instantiated_dependency(self, reference: Reference) -> bool:
        reference_id = self._ensure_declared(reference, "checking")
        return reference_id in self._instances

    def get_instantiated_dependencies(self) -> Dict[str, Any]:
        return dict(self._instances)

    def are_all_dependencies_fulfilled(self) -> bool:
        """Check whether every declared dependency has an instance.

        Trivially True for an empty list.
        """
        return len(self._instances) == len(self._list)

    def is_identical(self, other: 'DependencyList') -> bool:
        """Check whether two lists declare the same reference IDs.

        Order does not matter and resolved instances are not compared.

        Args:
            other: The list to compare with

        Returns:
            True if both lists declare exactly the same IDs
        """
        return self._list.keys() == other._list.keys()

    def _ensure_declared(self, reference: Reference, action: str) -> str:
        reference_id = reference.get_id()
        if reference_id not in self._list:
            raise InvalidDependencyError(
                f"DependencyList error in {action} instantiated dependency. "
                f"The reference '{reference_id}' is not present in the "
                f"dependency list."
            )
        return reference_id

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[Reference]:
        return iter(list(self._list.values()))

    def __contains__(self, item: Union[Reference, str]) -> bool:
        if isinstance(item, Reference):
            item = item.get_id()
        return item in self._list

    def __repr__(self) -> str:
        return (
            f"DependencyList({len(self._instances)}/{len(self._list)} "
            f"fulfilled: {list(self._list)})"
        )
