"""
Player Module
==============
Key decoding, input draining and applying intents to the ship.
"""

from typing import Dict, Optional, Tuple
import logging

from .components import Intent
from .world import World


logger = logging.getLogger(__name__)


KEY_BINDINGS: Dict[str, Intent] = {
    'w': Intent.UP,
    's': Intent.DOWN,
    'a': Intent.LEFT,
    'd': Intent.RIGHT,
    ' ': Intent.FIRE,
    'q': Intent.QUIT,
}

SEQUENCE_BINDINGS: Dict[str, Intent] = {
    'KEY_UP': Intent.UP,
    'KEY_DOWN': Intent.DOWN,
    'KEY_LEFT': Intent.LEFT,
    'KEY_RIGHT': Intent.RIGHT,
    'KEY_ESCAPE': Intent.QUIT,
}

MOVES: Dict[Intent, Tuple[int, int]] = {
    Intent.UP: (-1, 0),
    Intent.DOWN: (1, 0),
    Intent.LEFT: (0, -1),
    Intent.RIGHT: (0, 1),
}


def map_key(key) -> Optional[Intent]:
    """Translate a blessed Keystroke into an Intent, or None if unbound."""
    if key is None or not key:
        return None
    if key.is_sequence:
        return SEQUENCE_BINDINGS.get(key.name)
    return KEY_BINDINGS.get(str(key).lower())


class InputHandler:
    """
    Collects the intent for the current tick.

    Terminals queue repeated keys faster than the game ticks. Only the
    most recent bound key of a batch counts, so the ship never replays
    a backlog of stale presses. A quit anywhere in the batch sticks.
    """

    def __init__(self):
        self._intent: Optional[Intent] = None
        self._quit_triggered = False

    def process_key(self, key) -> None:
        """Process a single key press from blessed's inkey()."""
        intent = map_key(key)
        if intent is None:
            return
        if intent is Intent.QUIT:
            self._quit_triggered = True
        else:
            self._intent = intent

    def poll(self, term, timeout: float) -> None:
        """Wait up to timeout for a key, then drain everything queued."""
        key = term.inkey(timeout=timeout)
        while key:
            self.process_key(key)
            key = term.inkey(timeout=0)

    def consume_intent(self) -> Optional[Intent]:
        """Return and clear this tick's intent."""
        if self._quit_triggered:
            intent = Intent.QUIT
        else:
            intent = self._intent
        self._intent = None
        self._quit_triggered = False
        return intent


def apply_intent(world: World, intent: Intent) -> bool:
    """Move or fire. Returns True if the world changed."""
    if intent in MOVES:
        drow, dcol = MOVES[intent]
        return world.move_player(drow, dcol)
    if intent is Intent.FIRE:
        fired = world.fire_bullet()
        if fired:
            logger.debug('Tick %d: fired from %d,%d', world.ticks,
                         world.player_location.row, world.player_location.col)
        return fired
    return False
