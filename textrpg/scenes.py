"""Scenes of the game and the manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod

from textrpg.command_input import CommandInput
from textrpg.screen import Screen
from textrpg.text_prompt import TextPrompt


class Scene(ABC):
    """One screen of the game, sharing the display, input and message log."""

    def __init__(
        self, screen: Screen, command_input: CommandInput, text_prompt: TextPrompt
    ) -> None:
        self.screen = screen
        self.command_input = command_input
        self.text_prompt = text_prompt

    @abstractmethod
    def on_enter(self) -> None:
        """Called when the scene becomes the current one."""

    @abstractmethod
    def on_exit(self) -> None:
        """Called when the scene is replaced."""

    @abstractmethod
    def update(self) -> None:
        """Advance the scene by one frame."""

    @abstractmethod
    def render(self) -> None:
        """Draw the scene onto its screen."""


class SceneManager:
    """Keeps the current scene and runs the enter/exit hooks on changes."""

    def __init__(self) -> None:
        self._current: Scene | None = None

    @property
    def current_scene(self) -> Scene | None:
        """The active scene, or None before the first change."""
        return self._current

    def change_scene(self, scene: Scene) -> None:
        """Leave the current scene, if any, and enter the new one."""
        if self._current is not None:
            self._current.on_exit()
            self._current = None
        self._current = scene
        scene.on_enter()