#!/usr/bin/env python3
"""
TUNNEL RUNNER - Terminal Tunnel Dodger
=======================================
Steer through a scrolling tunnel that keeps narrowing and widening.
Touch a wall or an enemy and the run is over.

Controls:
    WASD / Arrows   - Move
    SPACE           - Fire (one bullet in flight at a time)
    Q/ESC           - Quit
"""

from typing import Optional, Sequence
import argparse
import logging
import random
import sys
import time

from blessed import Terminal

from .components import Intent
from .config import GameConfig, MIN_WIDTH, MIN_HEIGHT, TICK_MS
from .engine import GameRenderer
from .physics import step
from .player import InputHandler
from .world import World


logger = logging.getLogger(__name__)

PACKAGE_LOGGER = 'tunnel_runner'
LOG_FORMAT = '[%(levelname)s] %(message)s'


# =============================================================================
# GAME LOOP
# =============================================================================

class Game:
    """
    Loop driver for one session.

    Each tick: poll and drain input, step the world, redraw, sleep.
    Runs until the player dies or quits, then shows the closing screen.
    """

    def __init__(self, term: Terminal, config: GameConfig,
                 rng: Optional[random.Random] = None, sleep=time.sleep):
        self.term = term
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.sleep = sleep

        self.renderer = GameRenderer(term)
        self.input_handler = InputHandler()
        self.world = World.new(term.width, term.height)
        self.quit_requested = False

    def write(self, output: str):
        print(output, end='', flush=True)

    def handle_input(self) -> Optional[Intent]:
        """Poll briefly, drain the queue and return this tick's intent."""
        self.input_handler.poll(self.term, self.config.poll_seconds)
        return self.input_handler.consume_intent()

    def tick(self) -> bool:
        """Run one frame. Returns False if the player quit."""
        intent = self.handle_input()
        if not step(self.world, intent, self.rng, self.config):
            self.quit_requested = True
            logger.info('Quit at tick %d', self.world.ticks)
            return False

        self.write(self.renderer.draw(self.world))
        self.sleep(self.config.tick_seconds)
        return True

    def run(self) -> World:
        while self.world.is_alive:
            if not self.tick():
                break
        self.finish()
        return self.world

    def finish(self):
        """Show the goodbye line long enough to read it, then blank out."""
        logger.info('Session over after %d ticks (%s)', self.world.ticks,
                    'quit' if self.quit_requested else self.world.status.name.lower())
        self.write(self.renderer.closing_screen(self.world))
        self.sleep(self.config.closing_pause_seconds)
        self.write(self.renderer.blank())


# =============================================================================
# ENTRY POINT
# =============================================================================

def configure_logging(log_file: Optional[str]) -> None:
    """Log to a file if asked. The terminal is the game screen."""
    if not log_file:
        return
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handler = logging.FileHandler(log_file)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='tunnel-runner', description='Terminal tunnel dodger.')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the tunnel and enemy random draws.')
    parser.add_argument('--tick-ms', type=int, default=TICK_MS, help='Milliseconds per frame.')
    parser.add_argument('--log-file', default=None, help='Write a debug log to this file.')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point. Sets up the terminal and runs one session."""
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_file)

    seed = args.seed if args.seed is not None else random.randrange(2 ** 32)
    config = GameConfig(tick_ms=args.tick_ms, seed=seed, log_file=args.log_file)

    term = Terminal()
    if term.width < MIN_WIDTH or term.height < MIN_HEIGHT:
        print(
            f'Terminal too small: {term.width}x{term.height}. '
            f'Minimum: {MIN_WIDTH}x{MIN_HEIGHT}'
        )
        return 1

    logger.info('Starting on a %dx%d terminal, seed %d', term.width, term.height, seed)
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        Game(term, config).run()
        print(term.normal, end='', flush=True)

    return 0


if __name__ == '__main__':
    sys.exit(main())
