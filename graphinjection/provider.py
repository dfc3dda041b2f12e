"""
Provider

A provider is any object exposing a no-argument get() that returns the
instance to inject. Subclassing Provider is optional: ProviderInjector only
checks for a callable get().
"""

from abc import ABC, abstractmethod
from typing import Any


class Provider(ABC):
    """Object that supplies one instance on request."""

    @abstractmethod
    def get(self) -> Any:
        """Return the provided instance."""
