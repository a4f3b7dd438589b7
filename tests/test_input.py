from blessed.keyboard import Keystroke

from conftest import FakeTerminal, arrow, key
from tunnel_runner.components import Intent, Location
from tunnel_runner.player import InputHandler, apply_intent, map_key
from tunnel_runner.world import World


def test_letter_and_arrow_keys_map_to_intents() -> None:
    assert map_key(key('w')) is Intent.UP
    assert map_key(key('S')) is Intent.DOWN
    assert map_key(key('a')) is Intent.LEFT
    assert map_key(key('d')) is Intent.RIGHT
    assert map_key(key(' ')) is Intent.FIRE
    assert map_key(key('q')) is Intent.QUIT
    assert map_key(arrow('KEY_UP')) is Intent.UP
    assert map_key(arrow('KEY_DOWN')) is Intent.DOWN
    assert map_key(arrow('KEY_LEFT')) is Intent.LEFT
    assert map_key(arrow('KEY_RIGHT')) is Intent.RIGHT
    assert map_key(arrow('KEY_ESCAPE')) is Intent.QUIT


def test_unbound_and_empty_keys_are_ignored() -> None:
    assert map_key(key('x')) is None
    assert map_key(Keystroke('')) is None
    assert map_key(None) is None


def test_latest_key_of_a_batch_wins() -> None:
    handler = InputHandler()
    handler.process_key(key('w'))
    handler.process_key(key('x'))
    handler.process_key(key('d'))

    assert handler.consume_intent() is Intent.RIGHT
    assert handler.consume_intent() is None


def test_quit_sticks_through_later_keys() -> None:
    handler = InputHandler()
    handler.process_key(key('q'))
    handler.process_key(key('w'))

    assert handler.consume_intent() is Intent.QUIT


def test_poll_drains_the_whole_queue() -> None:
    term = FakeTerminal(batches=[[key('w'), key('s'), key('a')], [key('d')]])
    handler = InputHandler()

    handler.poll(term, 0.01)
    assert handler.consume_intent() is Intent.LEFT

    handler.poll(term, 0.01)
    assert handler.consume_intent() is Intent.RIGHT

    handler.poll(term, 0.01)
    assert handler.consume_intent() is None
    assert term.polls == [0.01, 0.01, 0.01]


def test_apply_intent_moves_and_fires() -> None:
    world = World.new(40, 20)

    assert apply_intent(world, Intent.UP)
    assert apply_intent(world, Intent.LEFT)
    assert world.player_location == Location(18, 19)

    assert apply_intent(world, Intent.DOWN)
    assert not apply_intent(world, Intent.DOWN)
    assert world.player_location == Location(19, 19)

    assert apply_intent(world, Intent.FIRE)
    assert not apply_intent(world, Intent.FIRE)
    assert len(world.bullets) == 1
