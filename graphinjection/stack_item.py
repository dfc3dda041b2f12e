"""
StackItem

Data class representing one pending instantiation on the container's
working stack
"""

from dataclasses import dataclass
from typing import Optional

from .dependency_list import DependencyList
from .injector import Injector
from .reference import Reference


@dataclass(eq=False)
class StackItem:
    """Pending instantiation of a reference"""
    reference: Reference
    parent: Optional['StackItem'] = None  # Item whose dependency list receives the instance
    injector: Optional[Injector] = None  # None while a singleton cache hit is pending
    dependency_list: Optional[DependencyList] = None
    depth: int = 1  # Length of the chain from the root request

    @property
    def reference_id(self) -> str:
        return self.reference.get_id()

    def is_root(self) -> bool:
        return self.parent is None
