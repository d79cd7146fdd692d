"""
Delve - Dungeon Card Crawl Engine

A small solitaire dungeon crawl: a deck of enemy, trap and treasure cards
is drawn into a hand of three, and the party resolves one card at a time
until it reaches the sanctum or runs out of force.

The package provides:
- Deck construction and shuffling
- The draw / recycle state machine
- Card resolution and enemy enhancement rules
- A game loop and display snapshots for front ends
"""

__version__ = "0.1.0"
