"""
Circular Dependency and Deep Graph Tests

Tests for cycle detection and for graphs deeper than the interpreter's
recursion limit
"""

import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from graphinjection import (
    BindingsConfig,
    CircularDependencyError,
    Container,
    ResolutionDepthError,
)
from conftest import GraphInjectionTestCase, singleton, transient
from fixtures import Car, Engine, Garage, Node, ServiceA, ServiceB


def bind_chain(config: BindingsConfig, length: int):
    """Bind Node references '0' -> '1' -> ... -> str(length - 1)"""
    for index in range(length - 1):
        config.bind_constructor(transient(Node, str(index)), transient(Node, str(index + 1)))
    config.bind_constructor(transient(Node, str(length - 1)))


class TestCircularDependency(GraphInjectionTestCase):

    def test_two_node_cycle(self):
        """A depends on B, B depends on A"""
        self.config.bind_constructor(singleton(ServiceA), singleton(ServiceB))
        self.config.bind_constructor(singleton(ServiceB), singleton(ServiceA))

        with self.assertRaises(CircularDependencyError) as ctx:
            self.container.get(singleton(ServiceA))

        message = str(ctx.exception)
        self.assertIn(singleton(ServiceA).get_id(), message)
        self.assertIn(singleton(ServiceB).get_id(), message)

    def test_self_dependency(self):
        self.config.bind_constructor(transient(Node), transient(Node))

        with self.assertRaises(CircularDependencyError):
            self.container.get(transient(Node))

    def test_longer_cycle_reports_chain(self):
        self.config.bind_constructor(transient(Node, "a"), transient(Node, "b"))
        self.config.bind_constructor(transient(Node, "b"), transient(Node, "c"))
        self.config.bind_constructor(transient(Node, "c"), transient(Node, "a"))

        with self.assertRaises(CircularDependencyError) as ctx:
            self.container.get(transient(Node, "a"))

        message = str(ctx.exception)
        self.assertIn("is required by", message)
        self.assertIn(
            " -> ".join(transient(Node, name).get_id() for name in "abca"),
            message,
        )

    def test_cycle_below_the_root(self):
        """The cycle does not have to include the requested reference"""
        self.config.bind_constructor(transient(Car), singleton(ServiceA))
        self.config.bind_constructor(singleton(ServiceA), singleton(ServiceB))
        self.config.bind_constructor(singleton(ServiceB), singleton(ServiceA))

        with self.assertRaises(CircularDependencyError):
            self.container.get(transient(Car))

    def test_cycle_caches_nothing(self):
        self.config.bind_constructor(singleton(ServiceA), singleton(ServiceB))
        self.config.bind_constructor(singleton(ServiceB), singleton(ServiceA))

        with self.assertRaises(CircularDependencyError):
            self.container.get(singleton(ServiceA))

        self.assertFalse(self.container.has_singleton(singleton(ServiceA)))
        self.assertFalse(self.container.has_singleton(singleton(ServiceB)))

    def test_diamond_is_not_a_cycle(self):
        """Siblings sharing a dependency are fine"""
        self.config.bind_constructor(transient(Engine))
        self.config.bind_constructor(transient(Car, "First"), transient(Engine))
        self.config.bind_constructor(transient(Car, "Second"), transient(Engine))
        self.config.bind_constructor(
            transient(Garage), transient(Car, "First"), transient(Car, "Second")
        )

        garage = self.container.get(transient(Garage))
        self.assertIsInstance(garage, Garage)

    def test_sibling_depending_on_pending_sibling(self):
        """A dependency that is also a pending sibling is not a cycle"""
        self.config.bind_constructor(singleton(Engine))
        self.config.bind_constructor(transient(Car), singleton(Engine))
        self.config.bind_callback(
            transient(Garage),
            lambda engine, car: Garage(car, Car(engine)),
            singleton(Engine),
            transient(Car),
        )

        garage = self.container.get(transient(Garage))
        self.assertIs(garage.first.engine, garage.second.engine)


class TestDeepGraphs(unittest.TestCase):
    """Graph depth is not bounded by the interpreter's recursion limit"""

    def test_chain_deeper_than_recursion_limit(self):
        length = sys.getrecursionlimit() * 3
        config = BindingsConfig()
        bind_chain(config, length)

        node = Container(config).get(transient(Node, "0"))

        depth = 0
        while node is not None:
            depth += 1
            node = node.child
        self.assertEqual(depth, length)

    def test_max_depth_guard(self):
        config = BindingsConfig()
        bind_chain(config, 50)

        with self.assertRaises(ResolutionDepthError) as ctx:
            Container(config, max_depth=10).get(transient(Node, "0"))

        message = str(ctx.exception)
        self.assertIn("10", message)
        self.assertIn(transient(Node, "10").get_id(), message)

    def test_chain_exactly_at_max_depth(self):
        config = BindingsConfig()
        bind_chain(config, 10)

        self.assertIsInstance(Container(config, max_depth=10).get(transient(Node, "0")), Node)

    def test_max_depth_none_disables_guard(self):
        config = BindingsConfig()
        bind_chain(config, 200)

        self.assertIsInstance(Container(config, max_depth=None).get(transient(Node, "0")), Node)


if __name__ == '__main__':
    unittest.main()
