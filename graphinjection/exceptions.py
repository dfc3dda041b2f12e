"""
GraphInjection Exceptions

Custom exception hierarchy for the GraphInjection resolution engine
"""


class GraphInjectionError(Exception):
    """
    Base exception for all GraphInjection errors.

    All GraphInjection-specific exceptions inherit from this class.
    You can catch this to handle any resolution error generically.

    Example:
        >>> try:
        ...     car = container.get(Reference(Car))
        ... except GraphInjectionError as e:
        ...     print(f"DI error: {e}")
    """

    pass


class ConfigurationError(GraphInjectionError):
    """
    Raised when a reference or an injector is configured incorrectly.

    This error is raised at construction time, before any resolution
    takes place.

    Common causes:
        - Unknown lifecycle passed to ``Reference`` (only ``'Singleton'``
          and ``'Transient'`` are recognized, case sensitive)
        - A class path string that cannot be imported
        - A ``CallbackInjector`` callback that is not a plain function
        - A ``FauxInjector`` wrapping a transient reference

    Solution:
        Use the lifecycle enum and plain functions::

            ref = Reference(Engine, "Default", InjectionLifeCycle.SINGLETON)
            config.bind_callback(ref, lambda: Engine())
    """

    pass


class BindingError(GraphInjectionError):
    """
    Raised when the config cannot produce an injector for a reference.

    Common causes:
        - Forgetting to bind the reference
        - Binding a different configuration name or lifecycle than the
          one requested (all three fields make up the reference ID)

    Solution:
        Bind the exact reference before resolving it::

            config.bind_constructor(Reference(Engine, "Default"))

    Note:
        The error message lists the bound reference IDs to help spot
        near misses.
    """

    pass


class CircularDependencyError(GraphInjectionError):
    """
    Raised when circular dependency is detected during resolution.

    This error occurs when reference A depends on reference B, and B
    (directly or indirectly) depends on A again before A is built.

    Example of circular dependency::

        config.bind_constructor(ref_a, ref_b)
        config.bind_constructor(ref_b, ref_a)  # Circular!

    Note:
        The message names both the requested reference ID and the ID of
        the reference that required it.
    """

    pass


class TypeMismatchError(GraphInjectionError):
    """
    Raised when an injector produces a value of the wrong class.

    The container checks every produced instance against the class the
    reference declares. A mismatch means the binding is misconfigured,
    for example a callback returning an unrelated object.
    """

    pass


class InvalidDependencyError(GraphInjectionError):
    """
    Raised when a dependency list is used with an undeclared reference,
    with an instance of the wrong class, or consumed before it is
    fulfilled.
    """

    pass


class ProviderError(GraphInjectionError):
    """
    Raised when a provider cannot supply an instance.

    Common causes:
        - The resolved provider object has no callable ``get()``
        - The provider's ``get()`` raised an exception (chained as the
          ``__cause__`` of this error)
    """

    pass


class ResolutionDepthError(GraphInjectionError):
    """
    Raised when a dependency chain grows deeper than the container's
    ``max_depth`` limit.

    Acyclic graphs are never limited by the interpreter's recursion depth;
    this guard turns pathological graphs into a controlled failure.

    Solution:
        Raise the limit, or pass ``max_depth=None`` to disable it::

            container = Container(config, max_depth=50000)
    """

    pass


class ContainerClosedError(GraphInjectionError):
    """
    Raised when attempting to use a closed container.

    Common causes:
        - Using a container after calling ``container.close()``
        - Using a container after exiting a ``with`` block

    Solution:
        Create a new ``Container`` instead of reusing a closed one::

            with Container(config) as container:
                car = container.get(car_ref)  # OK
            # Container is now closed

            container2 = Container(config)
    """

    pass
