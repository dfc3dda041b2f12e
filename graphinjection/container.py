"""
Container

This module provides the resolution engine. Given a reference, the
container asks its config for the injector, resolves every dependency the
injector declares in the same way, and finally lets the injector build the
instance. It is responsible for:

- Building the full transitive object graph of the requested reference
- Caching singleton instances for the container's lifetime
- Rebuilding transient instances on every request
- Detecting circular dependencies
- Checking every produced instance against its reference's class

Resolution does not recurse. The graph is walked depth first with an
explicit stack, so its depth is bounded by memory and the optional
max_depth guard, never by the interpreter's recursion limit.
"""

import logging
import threading
from typing import Any, Dict, List, Optional

from .exceptions import (
    CircularDependencyError,
    ContainerClosedError,
    ResolutionDepthError,
    TypeMismatchError,
)
from .config import InjectionConfig
from .reference import Reference
from .stack_item import StackItem

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 10000


class Container:
    """Dependency injection container.

    Attributes:
        _config: The config mapping references to injectors
        _max_depth: Longest allowed dependency chain, or None for no limit
        _singletons: Dictionary mapping reference IDs to singleton instances
        _lock: Serializes get() calls and guards the singleton cache
        _resolving: Open stack items of the current get() and any nested calls
        _closed: Flag indicating if the container has been closed

    Example::

        config = BindingsConfig()
        config.bind_constructor(engine_ref)
        config.bind_constructor(car_ref, engine_ref)

        with Container(config) as container:
            car = container.get(car_ref)
    """

    def __init__(self, config: InjectionConfig, max_depth: Optional[int] = DEFAULT_MAX_DEPTH):
        """Create a container.

        Args:
            config: Object exposing get_injector(reference)
            max_depth: Longest allowed dependency chain, None disables the guard

        Raises:
            TypeError: When config has no get_injector()
            ValueError: When max_depth is smaller than 1
        """
        if not callable(getattr(config, 'get_injector', None)):
            raise TypeError(
                f"Container expects a config exposing get_injector(), "
                f"{type(config).__name__} given."
            )
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")

        self._config = config
        self._max_depth = max_depth
        self._singletons: Dict[str, Any] = {}
        self._lock = threading.RLock()
        # Items being resolved, by reference ID, across re-entrant get() calls
        self._resolving: Dict[str, StackItem] = {}
        self._closed: bool = False

    def get(self, reference: Reference) -> Any:
        """Get an instance of the given reference.

        Singleton references are built once and then served from the cache;
        transient references are built from scratch on every request, even
        when requested twice within the same graph.

        Args:
            reference: The reference to resolve

        Returns:
            The instance, with its whole dependency graph built

        Raises:
            BindingError: When a reference in the graph is not bound
            CircularDependencyError: When the graph contains a cycle
            TypeMismatchError: When an injector returns the wrong class
            ResolutionDepthError: When a chain exceeds max_depth
            ContainerClosedError: When the container has been closed
        """
        if not isinstance(reference, Reference):
            raise TypeError(
                f"Container.get() expects a Reference, {type(reference).__name__} given."
            )

        with self._lock:
            self._ensure_not_closed()
            return self._resolve(reference)

    def has_singleton(self, reference: Reference) -> bool:
        """Check whether a singleton instance is cached for the reference."""
        with self._lock:
            return reference.get_id() in self._singletons

    def _resolve(self, reference: Reference) -> Any:
        """Run the iterative depth-first resolution.

        The topmost stack item is inspected on every loop:

        1. Cached singleton: take it.
        2. Dependencies fulfilled: build it with its injector.
        3. Otherwise push its dependencies and revisit it once they are done.

        In cases 1 and 2 the instance is popped off the stack and handed to
        the parent item's dependency list, or returned if the item is the
        original request.

        Items stay open in self._resolving while their dependencies or their
        injector run. A callback or provider calling get() again from the
        same thread is checked against the outer call's open items too.
        """
        reference_id = reference.get_id()
        logger.debug("Resolving %s", reference_id)

        if reference_id in self._resolving:
            chain = " -> ".join(self._chain(self._resolving[reference_id]) + [reference_id])
            raise CircularDependencyError(
                f"Circular dependency detected: '{reference_id}' is requested again "
                f"while it is still being resolved.\n"
                f"Chain: {chain}"
            )

        stack: List[StackItem] = [self._create_stack_item(reference, None)]
        # IDs this call added to self._resolving
        opened: List[str] = []

        try:
            while stack:
                item = stack[-1]
                reference_id = item.reference_id

                if reference_id in self._singletons:
                    instance = self._singletons[reference_id]
                    logger.debug("Singleton cache hit for %s", reference_id)
                elif item.dependency_list.are_all_dependencies_fulfilled():
                    self._open(item, opened)
                    instance = self._instantiate(item)
                else:
                    self._open(item, opened)
                    self._push_dependencies(stack, item)
                    continue

                stack.pop()
                if self._resolving.get(reference_id) is item:
                    del self._resolving[reference_id]

                if item.is_root():
                    return instance

                item.parent.dependency_list.set_instantiated_dependency(item.reference, instance)
        finally:
            for opened_id in opened:
                self._resolving.pop(opened_id, None)

    def _open(self, item: StackItem, opened: List[str]) -> None:
        if self._resolving.get(item.reference_id) is not item:
            self._resolving[item.reference_id] = item
            opened.append(item.reference_id)

    def _create_stack_item(self, reference: Reference, parent: Optional[StackItem]) -> StackItem:
        item = StackItem(
            reference=reference,
            parent=parent,
            depth=1 if parent is None else parent.depth + 1,
        )
        # Cached singletons never reach the config
        if reference.get_id() not in self._singletons:
            item.injector = self._config.get_injector(reference)
            item.dependency_list = item.injector.get_dependency_list()
        return item

    def _push_dependencies(self, stack: List[StackItem], item: StackItem) -> None:
        for dependency in item.dependency_list:
            if item.dependency_list.has_instantiated_dependency(dependency):
                continue

            dependency_id = dependency.get_id()
            if dependency_id in self._resolving:
                chain = " -> ".join(self._chain(item) + [dependency_id])
                raise CircularDependencyError(
                    f"Circular dependency detected: '{dependency_id}' is required by "
                    f"'{item.reference_id}' while it is still being resolved.\n"
                    f"Chain: {chain}"
                )

            if self._max_depth is not None and item.depth >= self._max_depth:
                raise ResolutionDepthError(
                    f"Dependency chain of '{self._chain(item)[0]}' exceeds the maximum "
                    f"depth of {self._max_depth} at '{dependency_id}', required by "
                    f"'{item.reference_id}'."
                )

            stack.append(self._create_stack_item(dependency, item))

    def _instantiate(self, item: StackItem) -> Any:
        """Build the item's instance and cache it if it is a singleton.

        Raises:
            TypeMismatchError: When the injector returns an instance that
                is not of the referenced class
        """
        reference = item.reference
        reference_id = item.reference_id
        instance = item.injector.inject(item.dependency_list)

        expected = reference.get_class()
        if not isinstance(instance, expected):
            raise TypeMismatchError(
                f"Container error in trying to instantiate '{reference_id}'. "
                f"The injector doesn't return the appropriate object. Instance of "
                f"{reference.get_class_name()} expected, {type(instance).__name__} returned."
            )

        if reference.is_singleton():
            self._singletons[reference_id] = instance

        logger.debug("Instantiated %s", reference_id)
        return instance

    @staticmethod
    def _chain(item: StackItem) -> List[str]:
        """List the reference IDs from the root request down to item."""
        chain = []
        while item is not None:
            chain.append(item.reference_id)
            item = item.parent
        chain.reverse()
        return chain

    def _ensure_not_closed(self) -> None:
        if self._closed:
            raise ContainerClosedError("This container is already closed")

    def close(self) -> None:
        """Close the container and release its singleton cache.

        This method is idempotent.
        """
        with self._lock:
            if not self._closed:
                self._closed = True
                self._singletons.clear()

    @property
    def is_closed(self) -> bool:
        return self._closed

    def __enter__(self) -> 'Container':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False
