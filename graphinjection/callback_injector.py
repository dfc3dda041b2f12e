"""
CallbackInjector

Builds an instance by calling a plain function (usually a lambda) with a
mix of literal arguments and Reference placeholders.

Only plain functions are accepted. Bound methods, classes and callable
objects are rejected, so the callback cannot carry hidden state of its own
and the dependency list is exactly the Reference placeholders given here.

Example::

    injector = CallbackInjector(
        Reference(Car, "Racing", InjectionLifeCycle.TRANSIENT),
        lambda engine, color: Car(engine, color=color),
        args=[Reference(Engine, "V8")],
        kwargs={"color": "red"},
    )
"""

import inspect
from typing import Any, Callable, Mapping, Optional, Sequence

from .dependency_list import DependencyList
from .exceptions import ConfigurationError
from .injector import ArgumentInjector
from .reference import Reference


class CallbackInjector(ArgumentInjector):
    """Injector that runs a plain function to build the instance.

    Attributes:
        _callback: The function to run

    Raises:
        ConfigurationError: When the callback is not callable, or is
            callable but not a plain function
    """

    def __init__(
        self,
        reference: Reference,
        callback: Callable[..., Any],
        args: Sequence[Any] = (),
        kwargs: Optional[Mapping[str, Any]] = None
    ):
        if not callable(callback):
            raise ConfigurationError(
                f"CallbackInjector error in instantiation for "
                f"'{reference.get_id()}'. The provided callback is not callable."
            )
        if not inspect.isfunction(callback):
            raise ConfigurationError(
                f"CallbackInjector error in instantiation for "
                f"'{reference.get_id()}'. The callback must be a plain function "
                f"or lambda, {type(callback).__name__} given."
            )

        super().__init__(reference, args, kwargs)
        self._callback = callback

    def inject(self, dependency_list: DependencyList) -> Any:
        args, kwargs = self._generate_arguments(dependency_list)
        return self._callback(*args, **kwargs)
