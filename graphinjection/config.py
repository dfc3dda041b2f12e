"""
Injection Config

This module defines the seam between the resolution engine and however
bindings are declared. The container only ever calls
get_injector(reference); everything else about bindings lives here.

BindingsConfig is the in-memory implementation: an explicit map from
reference ID to injector, filled by add_injector() or the bind_* helpers.

Example::

    config = BindingsConfig()
    engine_ref = Reference(Engine, "Default")
    car_ref = Reference(Car, "Default", InjectionLifeCycle.TRANSIENT)

    config.bind_constructor(engine_ref, 2000)
    config.bind_constructor(car_ref, engine_ref)

    container = Container(config)
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict

from .callback_injector import CallbackInjector
from .constructor_injector import ConstructorInjector
from .exceptions import BindingError
from .faux_injector import FauxInjector
from .injector import Injector
from .pointer_injector import PointerInjector
from .provider_injector import ProviderInjector
from .reference import Reference

logger = logging.getLogger(__name__)


class InjectionConfig(ABC):
    """Maps references to the injectors that build them."""

    @abstractmethod
    def get_injector(self, reference: Reference) -> Injector:
        """Get the injector bound to the reference.

        Args:
            reference: The reference to build

        Returns:
            The injector for the reference

        Raises:
            BindingError: When nothing is bound to the reference
        """


class BindingsConfig(InjectionConfig):
    """Explicit reference-to-injector bindings.

    Attributes:
        _injectors: Dictionary mapping reference IDs to injectors
    """

    def __init__(self):
        self._injectors: Dict[str, Injector] = {}

    def add_injector(self, injector: Injector) -> Injector:
        """Bind an injector to the reference it builds.

        An injector already bound to the same reference ID is replaced.

        Args:
            injector: The injector to bind

        Returns:
            The injector, for chaining
        """
        if not isinstance(injector, Injector):
            raise TypeError(
                f"BindingsConfig expects an Injector, {type(injector).__name__} given."
            )
        reference_id = injector.get_reference().get_id()
        if reference_id in self._injectors:
            logger.debug("Replacing binding for %s", reference_id)
        self._injectors[reference_id] = injector
        logger.debug("Bound %s to %r", reference_id, injector)
        return injector

    def remove_injector(self, reference: Reference) -> None:
        """Unbind a reference. Unbinding an unknown reference is a no-op."""
        self._injectors.pop(reference.get_id(), None)

    def has_injector(self, reference: Reference) -> bool:
        return reference.get_id() in self._injectors

    def bind_constructor(self, reference: Reference, *args: Any, **kwargs: Any) -> ConstructorInjector:
        """Bind the reference to its class constructor.

        Example::

            config.bind_constructor(car_ref, engine_ref, color="red")
        """
        return self.add_injector(ConstructorInjector(reference, args, kwargs))

    def bind_callback(
        self,
        reference: Reference,
        callback: Callable[..., Any],
        *args: Any,
        **kwargs: Any
    ) -> CallbackInjector:
        """Bind the reference to a plain function.

        Example::

            config.bind_callback(car_ref, lambda engine: Car(engine), engine_ref)
        """
        return self.add_injector(CallbackInjector(reference, callback, args, kwargs))

    def bind_provider(self, reference: Reference, provider_reference: Reference) -> ProviderInjector:
        return self.add_injector(ProviderInjector(reference, provider_reference))

    def bind_pointer(self, reference: Reference, referred_reference: Reference) -> PointerInjector:
        """Bind the reference as an alias of another reference.

        Example::

            config.bind_pointer(Reference(Vehicle), Reference(Car, "Default"))
        """
        return self.add_injector(PointerInjector(reference, referred_reference))

    def bind_instance(self, reference: Reference, instance: Any) -> FauxInjector:
        """Bind a singleton reference to an already built instance."""
        return self.add_injector(FauxInjector(reference, instance))

    def get_injector(self, reference: Reference) -> Injector:
        reference_id = reference.get_id()
        injector = self._injectors.get(reference_id)
        if injector is None:
            bound = ", ".join(self._injectors) or "None"
            raise BindingError(
                f"No injector is bound to '{reference_id}'.\n"
                f"Bound references: {bound}\n"
                f"Hint: config.bind_constructor(Reference({reference.get_class_name()}, "
                f"{reference.get_config_name()!r}, '{reference.get_lifecycle().value}'))"
            )
        return injector

    def __len__(self) -> int:
        return len(self._injectors)
