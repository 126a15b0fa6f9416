"""
flappy_clone
------------
Single-screen arcade game: keep the avatar airborne and fly it through the
openings of an endless stream of obstacles.
"""

__version__ = "1.0.0"
