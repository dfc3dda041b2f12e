"""
Injector

This module defines the capability shared by every instantiation strategy.
An injector knows which reference it builds, which references it needs
(its DependencyList) and how to build the instance once the container has
resolved them.

Variants:
- ConstructorInjector: calls the referenced class
- CallbackInjector: calls a plain function
- ProviderInjector: asks a provider object
- FauxInjector: hands out an instance built beforehand
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from .dependency_list import DependencyList
from .exceptions import InvalidDependencyError
from .reference import Reference


class Injector(ABC):
    """Strategy that builds the instance of one reference."""

    @abstractmethod
    def get_reference(self) -> Reference:
        """Get the reference this injector builds."""

    @abstractmethod
    def get_dependency_list(self) -> DependencyList:
        """Get a fresh, unfulfilled list of the references this injector needs.

        A new list is returned on every call, so one injector can serve any
        number of resolutions.
        """

    @abstractmethod
    def inject(self, dependency_list: DependencyList) -> Any:
        """Build the instance.

        Args:
            dependency_list: A fulfilled list obtained from
                get_dependency_list()

        Returns:
            The built instance
        """

    def _ensure_fulfilled(self, dependency_list: DependencyList) -> None:
        if not dependency_list.are_all_dependencies_fulfilled():
            raise InvalidDependencyError(
                f"{type(self).__name__} error when trying to instantiate "
                f"'{self.get_reference().get_id()}'. The dependency list is "
                f"not fulfilled: {dependency_list!r}"
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_reference().get_id()!r})"


class ArgumentInjector(Injector):
    """Base for injectors that call something with substituted arguments.

    Positional and keyword arguments may mix literal values with Reference
    placeholders. The placeholders become the dependency list; at inject()
    time each one is replaced by its resolved instance.
    """

    def __init__(
        self,
        reference: Reference,
        args: Sequence[Any] = (),
        kwargs: Optional[Mapping[str, Any]] = None
    ):
        self._reference = reference
        self._args: Tuple[Any, ...] = tuple(args)
        self._kwargs: Dict[str, Any] = dict(kwargs or {})

    def get_reference(self) -> Reference:
        return self._reference

    def get_dependency_list(self) -> DependencyList:
        references = [
            value for value in (*self._args, *self._kwargs.values())
            if isinstance(value, Reference)
        ]
        return DependencyList(references)

    def _generate_arguments(
        self,
        dependency_list: DependencyList
    ) -> Tuple[Tuple[Any, ...], Dict[str, Any]]:
        self._ensure_fulfilled(dependency_list)

        def substitute(value: Any) -> Any:
            if isinstance(value, Reference):
                return dependency_list.get_instantiated_dependency(value)
            return value

        args = tuple(substitute(value) for value in self._args)
        kwargs = {name: substitute(value) for name, value in self._kwargs.items()}
        return args, kwargs
