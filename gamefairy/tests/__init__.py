"""Test suite for the Game Fairy project.

Organized into:

1. core/: Unit tests for the game and port contracts
   - Collaborators injected as in-memory fakes

2. adapters/: Tests for the real fairy and gateway

3. fakes/: Port implementations for testing

Top-level suites contrast two ways of stubbing the gateway -> fairy
chain: the gamefairy.testing harness and unittest.mock.
"""
