"""
ConstructorInjector

Builds an instance by calling the referenced class with a mix of literal
arguments and Reference placeholders.

Example::

    injector = ConstructorInjector(
        Reference(Car, "Default", InjectionLifeCycle.TRANSIENT),
        args=[Reference(Engine, "Default"), "red"],
    )
"""

from typing import Any

from .dependency_list import DependencyList
from .injector import ArgumentInjector


class ConstructorInjector(ArgumentInjector):
    """Injector that instantiates the referenced class.

    Exceptions raised by the class constructor propagate unchanged.
    """

    def inject(self, dependency_list: DependencyList) -> Any:
        args, kwargs = self._generate_arguments(dependency_list)
        cls = self._reference.get_class()
        return cls(*args, **kwargs)
