"""Screens of the game: the main menu, gameplay and the app that holds them."""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import Enum, IntEnum

MENU_BUTTON_SIZE = (200, 50)
START_BUTTON_Y = 200.0
EXIT_BUTTON_Y = 300.0
START_LABEL = "PLAY GAME"
EXIT_LABEL = "EXIT GAME"

BACKGROUND_AMPLITUDE = 100.0
BACKGROUND_FREQUENCY = 0.002
BACKGROUND_Y = 100.0

SCALE_SPEED = 0.1
CELL_SIZE = 128
DEFAULT_BACKGROUND = (0.025, 0.05, 0.15, 1.0)


class ScreenIndex(IntEnum):
    MAIN_MENU = 0
    GAMEPLAY = 1


class ScreenState(Enum):
    NONE = "none"
    RUNNING = "running"
    EXIT_APPLICATION = "exit_application"
    CHANGE_NEXT = "change_next"
    CHANGE_PREVIOUS = "change_previous"


class _Screen:
    screen_index = ScreenIndex.MAIN_MENU

    def __init__(self) -> None:
        self.next_index = ScreenIndex.GAMEPLAY
        self.previous_index = ScreenIndex.GAMEPLAY
        self.state = ScreenState.NONE


class MainMenu(_Screen):
    """Title screen with a start button and an exit button."""

    screen_index = ScreenIndex.MAIN_MENU

    def __init__(self) -> None:
        super().__init__()
        self.start_label = START_LABEL
        self.exit_label = EXIT_LABEL
        self._start_action: Callable[[], bool] = self.start_game

    def button_position(self, camera_width: float, y: float) -> tuple[float, float]:
        """Top-left corner of a menu button centred horizontally."""
        return camera_width / 2 - MENU_BUTTON_SIZE[0] / 2, y

    def start_game(self) -> bool:
        self.next_index = ScreenIndex.GAMEPLAY
        self.state = ScreenState.CHANGE_NEXT
        return True

    def resume_game(self) -> bool:
        self.previous_index = ScreenIndex.GAMEPLAY
        self.state = ScreenState.CHANGE_PREVIOUS
        return True

    def exit_game(self) -> None:
        self.state = ScreenState.EXIT_APPLICATION

    def press_start(self) -> bool:
        """Run whatever the start button currently does."""
        return self._start_action()

    def on_exit(self) -> None:
        """Once a game has begun, the start button resumes it instead."""
        self._start_action = self.resume_game


class GameplayScreen(_Screen):
    """The level itself; pausing returns to the main menu."""

    screen_index = ScreenIndex.GAMEPLAY

    def __init__(self) -> None:
        super().__init__()
        self.render_debug = False
        self.background_color = DEFAULT_BACKGROUND

    def pause(self) -> bool:
        self.previous_index = ScreenIndex.MAIN_MENU
        self.state = ScreenState.CHANGE_PREVIOUS
        return True


class App:
    """Holds the screens and knows which one is showing."""

    def __init__(self) -> None:
        self.screens: dict[ScreenIndex, _Screen] = {}
        self._current: ScreenIndex | None = None

    def add_screens(self) -> None:
        menu = MainMenu()
        gameplay = GameplayScreen()
        self.screens = {menu.screen_index: menu, gameplay.screen_index: gameplay}
        self._current = menu.screen_index

    def current_screen(self) -> MainMenu | GameplayScreen:
        if self._current is None:
            raise LookupError("no screens have been added")
        return self.screens[self._current]


class MenuBackground:
    """Menu backdrop that sways in depth as time passes."""

    def __init__(self) -> None:
        self.elapsed = 0.0
        self.z_index = 0.0

    def update(self, delta_time: float) -> float:
        self.elapsed += delta_time
        self.z_index = BACKGROUND_AMPLITUDE * math.sin(BACKGROUND_FREQUENCY * self.elapsed)
        return self.z_index