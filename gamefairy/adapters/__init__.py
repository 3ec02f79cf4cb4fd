"""Concrete implementations of the core port interfaces.

Adapter Organization:

- oracle/: Oracles that proclaim game outcomes (GameFairy)
- gateway/: Lookups that hand out oracles (GameFairyGateway)
"""
