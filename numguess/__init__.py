"""
numguess - Hotter/colder number guessing engine

The program picks a secret integer in a range and the player narrows it
down one guess at a time. The package provides:
- Difficulty tiers and a closeness scale
- A guess engine operating on explicit Session values
- Best-score persistence behind an injected store
- A terminal CLI and an HTTP surface for a browser page
"""

__version__ = "0.1.0"
