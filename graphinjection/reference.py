"""
Reference

This module provides the value object that identifies a requested instance.
A Reference is made of three fields:

- The target class (a class object or a dotted import path)
- The configuration name, selecting one of several ways to build the class
- The lifecycle (Singleton or Transient)

The three fields are folded into a stable ID string which is used as the
key for bindings, dependency lists and the singleton cache.

Example::

    engine_ref = Reference(Engine, "Default", InjectionLifeCycle.SINGLETON)
    engine_ref.get_id()  # 'app.Engine{Singleton:Default}'
"""

import importlib
from typing import Any, Optional, Type, Union

from .exceptions import ConfigurationError
from .lifecycle import InjectionLifeCycle

# Separators stripped from both ends of a class path
_PATH_NOISE = ".: \t\n"


class Reference:
    """Immutable reference to an instance wired by the container.

    Two references constructed with the same class, configuration name and
    lifecycle produce equal IDs, compare equal and hash equally. They need
    not be the same object.

    Attributes:
        _class_name: Canonical dotted class name
        _class: Resolved class object, or None until a string path is resolved
        _module_name: Module part of a 'module:Class' path, None when unknown
        _config_name: Configuration variant name ('' is the default variant)
        _lifecycle: InjectionLifeCycle member
        _id: Composite identity key
    """

    __slots__ = ('_class_name', '_class', '_module_name', '_config_name', '_lifecycle', '_id')

    def __init__(
        self,
        cls: Union[Type, str],
        config_name: str = "",
        lifecycle: Union[InjectionLifeCycle, str] = InjectionLifeCycle.SINGLETON
    ):
        """Create a reference.

        Args:
            cls: The class, or its import path ('pkg.module.Class' or
                'pkg.module:Class')
            config_name: Configuration variant name
            lifecycle: InjectionLifeCycle member or its exact string value

        Raises:
            ConfigurationError: When the lifecycle is not recognized or
                the class is neither a type nor a non-empty path
        """
        if isinstance(cls, type):
            class_name = f"{cls.__module__}.{cls.__qualname__}"
            module_name: Optional[str] = cls.__module__
            resolved: Optional[Type] = cls
        elif isinstance(cls, str) and cls.strip(_PATH_NOISE):
            path = cls.strip(_PATH_NOISE)
            module_name = None
            if ':' in path:
                module_name, _, qualname = path.partition(':')
                path = f"{module_name}.{qualname}"
            class_name = path
            resolved = None
        else:
            raise ConfigurationError(
                f"Reference error in instantiation. Expected a class or a "
                f"dotted class path, got {cls!r}."
            )

        object.__setattr__(self, '_class_name', class_name)
        object.__setattr__(self, '_class', resolved)
        object.__setattr__(self, '_module_name', module_name)
        object.__setattr__(self, '_config_name', str(config_name))
        object.__setattr__(self, '_lifecycle', self._validate_lifecycle(lifecycle))
        object.__setattr__(
            self,
            '_id',
            f"{self._class_name}{{{self._lifecycle.value}:{self._config_name}}}"
        )

    @staticmethod
    def _validate_lifecycle(lifecycle: Any) -> InjectionLifeCycle:
        if isinstance(lifecycle, InjectionLifeCycle):
            return lifecycle
        for member in InjectionLifeCycle:
            if lifecycle == member.value:
                return member
        raise ConfigurationError(
            f"Reference error in instantiation. Lifecycle '{lifecycle}' is not "
            f"recognized. It must be either 'Singleton' or 'Transient', "
            f"case sensitive."
        )

    def get_id(self) -> str:
        """Get the composite identity key.

        Returns:
            '<class name>{<Lifecycle>:<config name>}'
        """
        return self._id

    def get_class_name(self) -> str:
        return self._class_name

    def get_config_name(self) -> str:
        return self._config_name

    def get_lifecycle(self) -> InjectionLifeCycle:
        return self._lifecycle

    def is_singleton(self) -> bool:
        return self._lifecycle is InjectionLifeCycle.SINGLETON

    def is_transient(self) -> bool:
        return self._lifecycle is InjectionLifeCycle.TRANSIENT

    def get_class(self) -> Type:
        """Get the referenced class, importing it if given as a path.

        The import happens on first use, so references to classes defined
        later (or in modules not yet loaded) can be created up front.

        Returns:
            The class object

        Raises:
            ConfigurationError: When the path cannot be imported or does
                not name a class
        """
        if self._class is None:
            object.__setattr__(
                self,
                '_class',
                self._import_class(self._class_name, self._module_name)
            )
        return self._class

    @staticmethod
    def _import_class(path: str, module_name: Optional[str] = None) -> Type:
        """Import the class named by a canonical dotted path.

        Without a known module name, the longest importable prefix of the
        path is taken as the module and the rest as the class qualname, so
        nested classes ('module.Outer.Inner') resolve too.
        """
        parts = path.split('.')
        if module_name is not None:
            candidates = [len(module_name.split('.'))]
        else:
            candidates = list(range(len(parts) - 1, 0, -1))

        for split in candidates:
            module_path = '.'.join(parts[:split])
            qualname = parts[split:]
            if not module_path or not qualname:
                continue
            try:
                target: Any = importlib.import_module(module_path)
            except ModuleNotFoundError as e:
                # Only a missing candidate module means "try a shorter prefix"
                if e.name and (module_path + '.').startswith(e.name + '.'):
                    continue
                raise ConfigurationError(f"Cannot resolve class '{path}': {e}") from e
            except ImportError as e:
                raise ConfigurationError(f"Cannot resolve class '{path}': {e}") from e

            try:
                for attr in qualname:
                    target = getattr(target, attr)
            except AttributeError as e:
                raise ConfigurationError(f"Cannot resolve class '{path}': {e}") from e

            if not isinstance(target, type):
                raise ConfigurationError(
                    f"Cannot resolve class '{path}': {target!r} is not a class."
                )
            return target

        raise ConfigurationError(
            f"Cannot resolve class '{path}'. Use a fully qualified path "
            f"such as 'package.module.Class'."
        )

    def __setattr__(self, name, value):
        raise AttributeError(f"Reference is immutable, cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"Reference is immutable, cannot delete '{name}'")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Reference):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Reference({self._id!r})"
