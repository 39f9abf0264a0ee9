"""Colours, button palettes and clickable buttons."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

START = "start"
QUIT = "quit"
PULL_ORB = "pull_orb"
RESTART = "restart"


class Interaction(Enum):
    """How the pointer is interacting with a button."""

    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


@dataclass(frozen=True)
class Color:
    """An sRGB colour with channels between 0 and 1."""

    red: float
    green: float
    blue: float

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0.0 <= channel <= 1.0:
                raise ValueError(f"colour channel out of range: {channel}")


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)


@dataclass(frozen=True)
class ButtonPalette:
    """Background and border colours for each interaction."""

    idle: tuple[Color, Color]
    hovered: tuple[Color, Color]
    pressed: tuple[Color, Color]


GREY_PALETTE = ButtonPalette(
    idle=(Color(0.2, 0.2, 0.2), Color(0.4, 0.4, 0.4)),
    hovered=(Color(0.3, 0.3, 0.3), Color(0.6, 0.6, 0.6)),
    pressed=(Color(0.1, 0.1, 0.1), Color(0.3, 0.3, 0.3)),
)

GREEN_PALETTE = ButtonPalette(
    idle=(Color(0.2, 0.4, 0.2), Color(0.4, 0.6, 0.4)),
    hovered=(Color(0.3, 0.5, 0.3), Color(0.5, 0.7, 0.5)),
    pressed=(Color(0.1, 0.2, 0.1), Color(0.2, 0.4, 0.2)),
)


@dataclass(eq=False)
class Button:
    """A labelled button that triggers an action when pressed."""

    label: str
    action: str
    palette: ButtonPalette = GREY_PALETTE
    width: float = 200.0
    height: float = 60.0
    margin_top: float = 0.0
    margin_bottom: float = 0.0
    label_size: float = 24.0
    border_width: float = 2.0
    x: float = 0.0
    y: float = 0.0
    interaction: Interaction = field(default=Interaction.NONE, init=False)
    background: Color = field(default=BLACK, init=False)
    border: Color = field(default=BLACK, init=False)

    def __post_init__(self) -> None:
        self.background, self.border = self.palette.idle

    def set_interaction(self, interaction: Interaction) -> bool:
        """Change the interaction and recolour; return False if it was unchanged."""
        if interaction is self.interaction:
            return False
        self.interaction = interaction
        colours = {
            Interaction.NONE: self.palette.idle,
            Interaction.HOVERED: self.palette.hovered,
            Interaction.PRESSED: self.palette.pressed,
        }
        self.background, self.border = colours[interaction]
        return True

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside the button."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height