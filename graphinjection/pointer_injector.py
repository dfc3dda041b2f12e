"""
PointerInjector

Aliases one reference to another. The usual use is binding a reference to
an abstract class to the reference of its concrete implementation:

    config.add_injector(PointerInjector(
        Reference(Vehicle),
        Reference(Car, "Default"),
    ))

The referred reference is resolved (and cached, if it is a singleton) like
any other dependency; the pointer hands out the very same instance.
"""

from typing import Any

from .dependency_list import DependencyList
from .injector import Injector
from .reference import Reference


class PointerInjector(Injector):
    """Injector returning the instance of another reference.

    Attributes:
        _reference: The alias reference this injector builds
        _referred_reference: The reference the alias points to
    """

    def __init__(self, reference: Reference, referred_reference: Reference):
        if not isinstance(referred_reference, Reference):
            raise TypeError(
                f"PointerInjector for '{reference.get_id()}' expects a Reference "
                f"to point to, {type(referred_reference).__name__} given."
            )
        self._reference = reference
        self._referred_reference = referred_reference

    def get_reference(self) -> Reference:
        return self._reference

    def get_referred_reference(self) -> Reference:
        return self._referred_reference

    def get_dependency_list(self) -> DependencyList:
        return DependencyList([self._referred_reference])

    def inject(self, dependency_list: DependencyList) -> Any:
        self._ensure_fulfilled(dependency_list)
        return dependency_list.get_instantiated_dependency(self._referred_reference)
