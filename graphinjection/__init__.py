import logging

# Public API
from .callback_injector import CallbackInjector
from .config import BindingsConfig, InjectionConfig
from .constructor_injector import ConstructorInjector
from .container import Container, DEFAULT_MAX_DEPTH
from .dependency_list import DependencyList, UNRESOLVED
from .exceptions import (
    BindingError,
    CircularDependencyError,
    ConfigurationError,
    ContainerClosedError,
    GraphInjectionError,
    InvalidDependencyError,
    ProviderError,
    ResolutionDepthError,
    TypeMismatchError,
)
from .faux_injector import FauxInjector
from .injector import Injector
from .lifecycle import InjectionLifeCycle
from .pointer_injector import PointerInjector
from .provider import Provider
from .provider_injector import ProviderInjector
from .reference import Reference

__all__ = [
    "Container",
    "DEFAULT_MAX_DEPTH",
    "Reference",
    "InjectionLifeCycle",
    "DependencyList",
    "UNRESOLVED",
    # Config
    "InjectionConfig",
    "BindingsConfig",
    # Injectors
    "Injector",
    "ConstructorInjector",
    "CallbackInjector",
    "ProviderInjector",
    "FauxInjector",
    "PointerInjector",
    "Provider",
    # Exceptions
    "GraphInjectionError",
    "ConfigurationError",
    "BindingError",
    "CircularDependencyError",
    "TypeMismatchError",
    "InvalidDependencyError",
    "ProviderError",
    "ResolutionDepthError",
    "ContainerClosedError",
]

__version__ = '0.1.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())
