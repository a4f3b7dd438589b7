"""
World State
============
The single mutable simulation state for one session.

The driver owns the World. Only the physics step and the input
mapper mutate it; the renderer reads it.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .components import Location, Enemy, Bullet, PlayerStatus
from .config import INITIAL_HALF_WIDTH, INITIAL_TARGET_HALF_WIDTH, SHIP_CHAR


@dataclass
class World:
    player_location: Location
    max_col: int
    max_row: int
    # One (left wall, right wall) pair per screen row
    map: List[Tuple[int, int]]
    next_left: int
    next_right: int
    status: PlayerStatus = PlayerStatus.ALIVE
    ship: str = SHIP_CHAR
    enemies: List[Enemy] = field(default_factory=list)
    bullets: List[Bullet] = field(default_factory=list)
    ticks: int = 0

    @classmethod
    def new(cls, max_col: int, max_row: int, ship: str = SHIP_CHAR) -> 'World':
        """Build the starting world for a terminal of the given size."""
        mid = max_col // 2
        left = max(0, mid - INITIAL_HALF_WIDTH)
        right = mid + INITIAL_HALF_WIDTH
        return cls(
            player_location=Location(max(0, max_row - 1), mid),
            max_col=max_col,
            max_row=max_row,
            map=[(left, right) for _ in range(max_row)],
            next_left=max(0, mid - INITIAL_TARGET_HALF_WIDTH),
            next_right=mid + INITIAL_TARGET_HALF_WIDTH,
            ship=ship,
        )

    @property
    def is_alive(self) -> bool:
        return self.status is PlayerStatus.ALIVE

    def move_player(self, drow: int, dcol: int) -> bool:
        """
        Move the player one cell, staying strictly inside the screen edges.

        Out-of-range moves are dropped, never wrapped. Returns True if
        the player moved.
        """
        pos = self.player_location
        new_row = pos.row + drow
        new_col = pos.col + dcol
        if not (1 <= new_row <= self.max_row - 1):
            return False
        if not (1 <= new_col <= self.max_col - 1):
            return False
        pos.row = new_row
        pos.col = new_col
        return True

    def fire_bullet(self) -> bool:
        """Launch a bullet from the ship unless one is already in flight."""
        if self.bullets:
            return False
        self.bullets.append(Bullet(
            location=Location(self.player_location.row, self.player_location.col),
            energy=self.max_row // 2,
        ))
        return True
