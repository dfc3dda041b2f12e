"""
InjectionLifeCycle Enum

Defines the lifecycle of a referenced instance
"""

from enum import Enum


class InjectionLifeCycle(Enum):
    """Lifecycle of referenced instances"""
    SINGLETON = "Singleton"
    TRANSIENT = "Transient"
