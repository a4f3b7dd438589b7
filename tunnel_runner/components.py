"""
Component Definitions
======================
Plain data for the things that live in the tunnel.
"""

from dataclasses import dataclass
from enum import Enum, auto


class PlayerStatus(Enum):
    """Session status. Only ALIVE and DEAD are ever entered."""
    ALIVE = auto()
    DEAD = auto()
    PAUSED = auto()
    ANIMATION = auto()


class Intent(Enum):
    """A decoded player action for the current tick."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    FIRE = auto()
    QUIT = auto()


@dataclass
class Location:
    """Screen cell, row first."""
    row: int = 0
    col: int = 0

    def hit(self, other: 'Location') -> bool:
        return self.row == other.row and self.col == other.col

    def above(self) -> 'Location':
        """The cell one row up, saturating at row 0."""
        return Location(max(0, self.row - 1), self.col)


@dataclass
class Enemy:
    location: Location


@dataclass
class Bullet:
    """Player projectile. Energy is the number of forward ticks left."""
    location: Location
    energy: int = 0
