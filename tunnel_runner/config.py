"""
Game Configuration
===================
Tunables for the tunnel, entities and loop pacing.
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# CONSTANTS
# =============================================================================

TICK_MS = 100
POLL_MS = 10
CLOSING_PAUSE_MS = 3000

MIN_WIDTH = 16
MIN_HEIGHT = 3

# Tunnel shape
MIN_TUNNEL_WIDTH = 3
INITIAL_HALF_WIDTH = 5
INITIAL_TARGET_HALF_WIDTH = 7
RETARGET_CHANCE = 0.3
RETARGET_SPREAD = 5

# Entities
ENEMY_SPAWN_CHANCE = 0.1
BULLET_RISE = 2

# Glyphs
WALL_CHAR = '*'
ENEMY_CHAR = 'E'
BULLET_CHAR = '^'
SHIP_CHAR = 'P'

CLOSING_MESSAGE = 'Good game! Thanks.'


@dataclass
class GameConfig:
    """Everything the physics step and the loop driver read."""
    tick_ms: int = TICK_MS
    poll_ms: int = POLL_MS
    closing_pause_ms: int = CLOSING_PAUSE_MS

    min_tunnel_width: int = MIN_TUNNEL_WIDTH
    retarget_chance: float = RETARGET_CHANCE
    retarget_spread: int = RETARGET_SPREAD
    enemy_spawn_chance: float = ENEMY_SPAWN_CHANCE
    bullet_rise: int = BULLET_RISE

    seed: Optional[int] = None
    log_file: Optional[str] = None

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0

    @property
    def poll_seconds(self) -> float:
        return self.poll_ms / 1000.0

    @property
    def closing_pause_seconds(self) -> float:
        return self.closing_pause_ms / 1000.0
