"""Fake implementations of core ports for testing.

- FakeOracle: Canned proclamation, records calls
- FakeGateway: Hands out a configured oracle, records lookups
"""

from .gateway import FakeGateway
from .oracle import FakeOracle

__all__ = [
    "FakeGateway",
    "FakeOracle",
]
