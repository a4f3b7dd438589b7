"""
Rendering Engine
=================
Full-frame terminal renderer.

Every tick clears the screen and redraws everything: tunnel walls,
enemies, bullets, then the ship on top. The renderer only reads the
World.
"""

from typing import List, Tuple

from blessed import Terminal

from .config import WALL_CHAR, ENEMY_CHAR, BULLET_CHAR, CLOSING_MESSAGE
from .world import World


# (column, row, text)
DrawOp = Tuple[int, int, str]


def compose_frame(world: World) -> List[DrawOp]:
    """
    Project the world into an ordered list of writes.

    Later writes land on top of earlier ones, so the ship goes last.
    """
    ops: List[DrawOp] = []

    for y, (left, right) in enumerate(world.map):
        ops.append((0, y, WALL_CHAR * left))
        ops.append((right, y, WALL_CHAR * max(0, world.max_col - right)))

    for enemy in world.enemies:
        ops.append((enemy.location.col, enemy.location.row, ENEMY_CHAR))

    for bullet in world.bullets:
        ops.append((bullet.location.col, bullet.location.row, BULLET_CHAR))

    pos = world.player_location
    ops.append((pos.col, pos.row, world.ship))
    return ops


class GameRenderer:
    """Turns frames into escape sequences for a blessed Terminal."""

    def __init__(self, term: Terminal):
        self.term = term

    def draw(self, world: World) -> str:
        """Build the output for one full redraw of the world."""
        term = self.term
        output_parts = [term.home, term.clear]
        for x, y, text in compose_frame(world):
            if not text:
                continue
            output_parts.append(term.move_xy(x, y))
            output_parts.append(text)
        output_parts.append(term.normal)
        return ''.join(output_parts)

    def closing_screen(self, world: World, message: str = CLOSING_MESSAGE) -> str:
        """Clear the screen and put the goodbye line near the middle."""
        term = self.term
        return ''.join([
            term.home,
            term.clear,
            term.move_xy(world.max_col // 2, world.max_row // 2),
            message,
        ])

    def blank(self) -> str:
        return self.term.home + self.term.clear
