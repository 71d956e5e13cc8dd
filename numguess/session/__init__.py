"""
Session Module - Manages live games.

A game wraps one session at a time:
- Created when the player picks a tier
- Replaced on restart or tier change
- Dropped when the player leaves

Games are EPHEMERAL. The only persistence is the best-score store.
"""

from .manager import GameManager, ManagedGame

__all__ = [
    "GameManager",
    "ManagedGame",
]
