import pygame
import pytest

from glitchbomb.app import GlitchBombApp, main
from glitchbomb.states import GameState
from glitchbomb.widgets import Button, Interaction


def _start_button(app):
    [button] = [i for i in app.interface.screen().items if isinstance(i, Button)]
    return button


def _centre(button):
    return (int(button.x + button.width / 2), int(button.y + button.height / 2))


def test_quit_event_stops_app():
    app = GlitchBombApp()
    assert app.handle_event(pygame.event.Event(pygame.QUIT)) is False
    assert app.running is False


def test_mouse_motion_hovers_button():
    app = GlitchBombApp()
    button = _start_button(app)
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=_centre(button), buttons=(0, 0, 0))
    assert app.handle_event(event) is True
    assert button.interaction is Interaction.HOVERED


def test_click_starts_game():
    app = GlitchBombApp()
    pos = _centre(_start_button(app))
    app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1))
    app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=1))
    assert app.interface.tick() is GameState.PLAYING


def test_right_click_does_nothing():
    app = GlitchBombApp()
    button = _start_button(app)
    app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=_centre(button), button=3))
    assert button.interaction is Interaction.NONE


def test_draw_without_surface_raises():
    with pytest.raises(RuntimeError):
        GlitchBombApp().draw()


def test_draw_paints_background_and_button():
    surface = pygame.Surface((800, 600))
    app = GlitchBombApp(800, 600, surface=surface)
    app.draw()
    button = _start_button(app)
    assert surface.get_at((0, 0)) == (0, 0, 0, 255)
    inside = (int(button.x) + 5, int(button.y) + 5)
    assert surface.get_at(inside) == (51, 51, 51, 255)


def test_main_rejects_bad_size():
    with pytest.raises(SystemExit) as excinfo:
        main(["--width", "0"])
    assert excinfo.value.code == 2