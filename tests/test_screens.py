import pytest

from glitchbomb.player import PlayerGameState
from glitchbomb.screens import (
    TextLine,
    game_lost_screen,
    game_won_screen,
    menu_screen,
    playing_screen,
    screen_for,
)
from glitchbomb.states import GameState, StatType
from glitchbomb.systems import stat_text
from glitchbomb.widgets import GREEN_PALETTE, PULL_ORB, QUIT, RESTART, START, Button, Color


def _texts(screen):
    return [item.text for item in screen.items if isinstance(item, TextLine)]


def _buttons(screen):
    return [item for item in screen.items if isinstance(item, Button)]


def test_menu_screen():
    screen = menu_screen()
    assert _texts(screen) == ["GLITCH BOMB"]
    [button] = _buttons(screen)
    assert (button.label, button.action) == ("START", START)


def test_playing_screen_stats_match_fresh_state():
    screen = playing_screen()
    lines = [item for item in screen.items if isinstance(item, TextLine)]
    assert [line.stat for line in lines] == list(StatType)
    fresh = PlayerGameState()
    assert [line.text for line in lines] == [stat_text(fresh, s) for s in StatType]
    assert lines[0].text == "Health: 5"
    assert lines[4].text == "Orbs: H:5 P:5 B:5"


def test_playing_screen_buttons():
    buttons = _buttons(playing_screen())
    assert [(b.label, b.action) for b in buttons] == [("PULL ORB", PULL_ORB), ("QUIT", QUIT)]
    assert buttons[0].palette == GREEN_PALETTE


def test_won_screen():
    screen = game_won_screen()
    assert _texts(screen) == ["YOU WIN!", "Congratulations! You reached the milestone!"]
    assert screen.items[0].color == Color(0.0, 0.8, 0.0)
    [button] = _buttons(screen)
    assert (button.label, button.action) == ("PLAY AGAIN", RESTART)


def test_lost_screen():
    screen = game_lost_screen()
    assert _texts(screen) == ["GAME OVER", "Your health reached zero!"]
    [button] = _buttons(screen)
    assert (button.label, button.action) == ("TRY AGAIN", RESTART)


@pytest.mark.parametrize("state", list(GameState))
def test_screen_for_builds_fresh_screen_for_state(state):
    first = screen_for(state)
    second = screen_for(state)
    assert first.state is state
    assert first is not second
    assert len(first.items) == len(second.items)