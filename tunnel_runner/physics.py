"""
Physics Systems
================
Functions that advance the world by one tick.

physics_step() runs the systems in a fixed order; collision timing
depends on it. Every random draw goes through the rng handle passed
in, so a seeded random.Random replays a session exactly.
"""

from typing import List, Optional
import logging
import random

from .components import Location, Enemy, Intent, PlayerStatus
from .config import GameConfig
from .player import apply_intent
from .world import World


logger = logging.getLogger(__name__)


# =============================================================================
# COLLISION SYSTEMS
# =============================================================================

def wall_collision_system(world: World) -> bool:
    """Kill the player if the ship touches either wall of its row."""
    pos = world.player_location
    if pos.row >= len(world.map):
        return False
    left, right = world.map[pos.row]
    if pos.col <= left or pos.col >= right:
        world.status = PlayerStatus.DEAD
        logger.info('Tick %d: hit the wall at %d,%d', world.ticks, pos.row, pos.col)
        return True
    return False


def enemy_collision_system(world: World) -> List[Enemy]:
    """
    Resolve player-enemy and bullet-enemy contacts.

    A bullet hits an enemy on its own cell or the cell just above it,
    since the two close in by several rows per tick. Walks the enemy
    list backwards so removal does not skip anything. Returns the
    enemies shot down this tick.
    """
    killed = []
    for i in range(len(world.enemies) - 1, -1, -1):
        enemy = world.enemies[i]

        if enemy.location.hit(world.player_location):
            world.status = PlayerStatus.DEAD
            logger.info('Tick %d: rammed by an enemy at %d,%d',
                        world.ticks, enemy.location.row, enemy.location.col)

        above = enemy.location.above()
        for bullet in world.bullets:
            if bullet.location.hit(enemy.location) or bullet.location.hit(above):
                del world.enemies[i]
                killed.append(enemy)
                logger.debug('Tick %d: enemy shot down at %d,%d',
                             world.ticks, enemy.location.row, enemy.location.col)
                break

    return killed


# =============================================================================
# TUNNEL SYSTEMS
# =============================================================================

def _step_toward(value: int, target: int) -> int:
    if target > value:
        return 1
    if target < value:
        return -1
    return 0


def tunnel_scroll_system(world: World, config: GameConfig):
    """
    Shift the tunnel down one row and grow a new top row.

    The new top row moves each wall at most one column toward its
    target. A step that would squeeze the opening under the minimum
    width is not taken.
    """
    tunnel = world.map
    if not tunnel:
        return

    for row in range(len(tunnel) - 1, 0, -1):
        tunnel[row] = tunnel[row - 1]

    left, right = tunnel[0]
    new_left = left + _step_toward(left, world.next_left)
    new_right = right + _step_toward(right, world.next_right)

    if new_right - new_left < config.min_tunnel_width and new_right < right:
        new_right = right
    if new_right - new_left < config.min_tunnel_width and new_left > left:
        new_left = left

    tunnel[0] = (new_left, new_right)


def _retarget(world: World, target: int, rng: random.Random, config: GameConfig) -> int:
    low = max(0, target - config.retarget_spread)
    high = target + config.retarget_spread
    return min(rng.randrange(low, high), world.max_col)


def retarget_system(world: World, rng: random.Random, config: GameConfig):
    """
    Random walk of the wall targets.

    Each wall that has arrived at its target picks a new one nearby
    with retarget_chance. Afterwards the targets are pushed apart to
    keep the tunnel passable.
    """
    if not world.map:
        return
    left, right = world.map[0]

    if world.next_left == left and rng.random() < config.retarget_chance:
        world.next_left = _retarget(world, world.next_left, rng, config)
        logger.debug('Tick %d: left wall heading for %d', world.ticks, world.next_left)

    if world.next_right == right and rng.random() < config.retarget_chance:
        world.next_right = _retarget(world, world.next_right, rng, config)
        logger.debug('Tick %d: right wall heading for %d', world.ticks, world.next_right)

    floor = config.min_tunnel_width
    if world.next_right - world.next_left < floor:
        world.next_right = max(world.next_right + floor, world.next_left + floor)

    if world.next_right > world.max_col:
        world.next_right = world.max_col
        world.next_left = min(world.next_left, max(0, world.max_col - floor))


# =============================================================================
# ENTITY SYSTEMS
# =============================================================================

def enemy_movement_system(world: World) -> int:
    """Scroll enemies down with the tunnel; drop the ones off screen."""
    removed = 0
    for i in range(len(world.enemies) - 1, -1, -1):
        enemy = world.enemies[i]
        enemy.location.row += 1
        if enemy.location.row >= world.max_row:
            del world.enemies[i]
            removed += 1
    return removed


def enemy_spawn_system(world: World, rng: random.Random, config: GameConfig) -> Optional[Enemy]:
    """
    Maybe drop a new enemy into the top row.

    The column is drawn from inside the opening, using the left wall of
    row 0 and the right wall of row 1.
    """
    if not world.map or rng.random() >= config.enemy_spawn_chance:
        return None

    low = world.map[0][0] + 1
    high = world.map[1][1] if len(world.map) > 1 else world.map[0][1]
    if low >= high:
        return None

    enemy = Enemy(Location(0, rng.randrange(low, high)))
    world.enemies.append(enemy)
    logger.debug('Tick %d: enemy spawned at column %d', world.ticks, enemy.location.col)
    return enemy


def bullet_system(world: World, config: GameConfig):
    """Fly bullets upward, burning energy; remove spent or escaping ones."""
    for i in range(len(world.bullets) - 1, -1, -1):
        bullet = world.bullets[i]
        if bullet.energy == 0 or bullet.location.row < 3:
            del world.bullets[i]
            continue

        bullet.location.row = max(0, bullet.location.row - config.bullet_rise)
        bullet.energy -= 1
        if bullet.location.row < 2:
            bullet.energy = 0


# =============================================================================
# TICK
# =============================================================================

def physics_step(world: World, rng: random.Random, config: GameConfig):
    """Advance the world one tick. Order matters."""
    wall_collision_system(world)
    enemy_collision_system(world)
    tunnel_scroll_system(world, config)
    retarget_system(world, rng, config)
    enemy_movement_system(world)
    enemy_spawn_system(world, rng, config)
    bullet_system(world, config)
    world.ticks += 1


def step(world: World, intent: Optional[Intent], rng: random.Random,
         config: GameConfig) -> bool:
    """
    Apply one tick's intent, then run the physics.

    Returns False when the intent ends the session; the world is left
    untouched in that case.
    """
    if intent is Intent.QUIT:
        return False
    if intent is not None:
        apply_intent(world, intent)
    physics_step(world, rng, config)
    return True
