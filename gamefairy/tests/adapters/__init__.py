"""Tests for the real oracle and gateway adapters."""
