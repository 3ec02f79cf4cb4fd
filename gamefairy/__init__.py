"""Game Fairy: stubbing a chained method call, two ways.

A game asks a gateway for a fairy, then asks the fairy whether the game
is over. Tests replace both hops with doubles.
"""

__version__ = "0.1.0"
