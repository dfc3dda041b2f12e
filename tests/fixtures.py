"""
Test Fixtures

Common test classes used across test modules
"""

import itertools

from graphinjection import Provider

# Global construction counter, shared by every BuildRecorder
_ticks = itertools.count()


class BuildRecorder:
    """Records the order in which instrumented classes are constructed"""

    def __init__(self):
        self.built_at = next(_ticks)


class Engine(BuildRecorder):
    """Test engine class"""

    def __init__(self, horsepower: int = 100):
        super().__init__()
        self.horsepower = horsepower


class Wheel(BuildRecorder):
    """Test wheel class"""

    def __init__(self, size: int = 16):
        super().__init__()
        self.size = size


class Vehicle(BuildRecorder):
    """Base class of Car"""
    pass


class Car(Vehicle):
    """Test car with an engine dependency"""

    def __init__(self, engine: Engine, color: str = "black"):
        super().__init__()
        self.engine = engine
        self.color = color


class Garage(BuildRecorder):
    """Depends on two cars"""

    def __init__(self, first: Car, second: Car):
        super().__init__()
        self.first = first
        self.second = second


class Dashboard:
    """Holds a nested class, addressed as 'fixtures.Dashboard.Gauge'"""

    class Gauge:
        def __init__(self, unit: str = "km/h"):
            self.unit = unit


class ServiceA:
    """First half of a circular pair"""

    def __init__(self, b: 'ServiceB'):
        self.b = b


class ServiceB:
    """Second half of a circular pair"""

    def __init__(self, a: ServiceA):
        self.a = a


class Node:
    """Link of an arbitrarily long chain"""

    def __init__(self, child: 'Node' = None):
        self.child = child


class EngineProvider(Provider):
    """Provider building tuned engines"""

    def __init__(self, horsepower: int = 300):
        self.horsepower = horsepower
        self.calls = 0

    def get(self):
        self.calls += 1
        return Engine(self.horsepower)


class DuckProvider:
    """Provider without subclassing Provider"""

    def get(self):
        return Wheel(18)


class NotAProvider:
    """Object without a get() method"""
    pass


class BrokenProvider(Provider):
    """Provider whose get() fails"""

    def get(self):
        raise RuntimeError("engine factory is on fire")
