"""
FauxInjector

Wraps an instance that was built outside the container, such as a request
object created at bootstrap. Only singleton references are accepted, since
the same instance is handed out on every request.
"""

from typing import Any

from .dependency_list import DependencyList
from .exceptions import ConfigurationError
from .injector import Injector
from .reference import Reference


class FauxInjector(Injector):
    """Injector returning a precomputed instance."""

    def __init__(self, reference: Reference, instance: Any):
        if not reference.is_singleton():
            raise ConfigurationError(
                f"FauxInjector error in instantiation. The reference "
                f"'{reference.get_id()}' lifecycle is not singleton."
            )
        self._reference = reference
        self._instance = instance

    def get_reference(self) -> Reference:
        return self._reference

    def get_dependency_list(self) -> DependencyList:
        return DependencyList()

    def inject(self, dependency_list: DependencyList) -> Any:
        return self._instance
