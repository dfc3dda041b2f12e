"""
ProviderInjector

Builds an instance by resolving a provider object and calling its get().
The provider is an ordinary reference, so it is wired (and cached, if it is
a singleton) by the container like any other dependency.

Example::

    config.bind_constructor(Reference(EngineProvider))
    config.add_injector(ProviderInjector(
        Reference(Engine, "Default"),
        Reference(EngineProvider),
    ))
"""

from typing import Any

from .dependency_list import DependencyList
from .exceptions import ProviderError
from .injector import Injector
from .reference import Reference


class ProviderInjector(Injector):
    """Injector that delegates to a provider's get().

    Attributes:
        _reference: The reference this injector builds
        _provider_reference: The reference of the provider, its only dependency
    """

    def __init__(self, reference: Reference, provider_reference: Reference):
        if not isinstance(provider_reference, Reference):
            raise TypeError(
                f"ProviderInjector for '{reference.get_id()}' expects a "
                f"Reference to the provider, {type(provider_reference).__name__} given."
            )
        self._reference = reference
        self._provider_reference = provider_reference

    def get_reference(self) -> Reference:
        return self._reference

    def get_provider_reference(self) -> Reference:
        return self._provider_reference

    def get_dependency_list(self) -> DependencyList:
        return DependencyList([self._provider_reference])

    def inject(self, dependency_list: DependencyList) -> Any:
        """Fetch the resolved provider and call its get().

        Raises:
            ProviderError: When the provider has no callable get(), or
                get() raised
        """
        self._ensure_fulfilled(dependency_list)
        reference_id = self._reference.get_id()
        provider = dependency_list.get_instantiated_dependency(self._provider_reference)

        get = getattr(provider, 'get', None)
        if not callable(get):
            raise ProviderError(
                f"ProviderInjector error when trying to instantiate '{reference_id}'. "
                f"The provider {type(provider).__name__} "
                f"('{self._provider_reference.get_id()}') does not expose a get() method."
            )

        try:
            return get()
        except Exception as e:
            raise ProviderError(
                f"ProviderInjector error when trying to instantiate '{reference_id}'. "
                f"The provider {type(provider).__name__} raised an exception: {e}"
            ) from e
