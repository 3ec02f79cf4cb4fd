"""Unit tests for core domain logic.

These tests exercise the game without the real fairy. The gateway is
injected as an in-memory fake from tests/fakes/.
"""
