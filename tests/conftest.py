"""
Test Configuration and Utilities

Common base classes and helper functions for GraphInjection tests
"""

import unittest

from graphinjection import BindingsConfig, Container, InjectionLifeCycle, Reference


SINGLETON = InjectionLifeCycle.SINGLETON
TRANSIENT = InjectionLifeCycle.TRANSIENT


class GraphInjectionTestCase(unittest.TestCase):
    """
    Base test case class for GraphInjection tests.

    Creates a fresh config and container before each test and closes
    the container afterwards.
    """

    def setUp(self):
        """Create a fresh config and container before each test"""
        self.config = BindingsConfig()
        self.container = Container(self.config)

    def tearDown(self):
        """Close the container after each test"""
        self.container.close()


def singleton(cls, config_name: str = "Default") -> Reference:
    """Shorthand for a singleton reference"""
    return Reference(cls, config_name, SINGLETON)


def transient(cls, config_name: str = "Default") -> Reference:
    """Shorthand for a transient reference"""
    return Reference(cls, config_name, TRANSIENT)
