"""
flappy_clone/entities/__init__.py
---------------------------------
Entity module exports.

Exports:
    Avatar   - Player-controlled falling box
    Obstacle - Top/bottom block pair with an opening
"""

from flappy_clone.entities.avatar import Avatar
from flappy_clone.entities.obstacle import Obstacle

__all__ = [
    'Avatar',
    'Obstacle',
]
