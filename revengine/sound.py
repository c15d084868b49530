"""Loading and playing named sounds."""

from __future__ import annotations

import os
from typing import Any, Optional, Union

import pygame


class SoundError(Exception):
    """Raised when a sound cannot be loaded or played."""


class Mixer:
    """Audio backend keeping loaded sounds by name."""

    def __init__(self) -> None:
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            raise SoundError(f"audio could not initialise: {exc}") from None
        self._sounds: dict[str, Any] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._sounds

    def __enter__(self) -> "Mixer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def load_sound(self, name: str, source: Union[str, os.PathLike]) -> None:
        if name in self._sounds:
            raise SoundError(f'Sound "{name}" is already loaded!')
        try:
            self._sounds[name] = pygame.mixer.Sound(os.fspath(source))
        except (pygame.error, OSError):
            raise SoundError(f'Loaded sound "{name}" not found!') from None

    def play_sound(self, name: str) -> None:
        try:
            sound = self._sounds[name]
        except KeyError:
            raise SoundError(f'Played sound "{name}" not found!') from None
        sound.play()

    def close(self) -> None:
        """Drop all sounds and shut the audio system down."""
        self._sounds.clear()
        pygame.mixer.quit()


class SoundImpl:
    """Checks that sound files exist before handing them to the mixer."""

    def __init__(self, mixer: Optional[Mixer] = None) -> None:
        self._mixer = mixer if mixer is not None else Mixer()

    def load_sound(self, name: str, source: Union[str, os.PathLike]) -> None:
        if not os.path.exists(source):
            raise FileNotFoundError(f"source file not found: {os.fspath(source)}")
        self._mixer.load_sound(name, source)

    def play_sound(self, name: str) -> None:
        self._mixer.play_sound(name)


class Sound:
    """The engine's sound interface."""

    def __init__(self, impl: Optional[SoundImpl] = None) -> None:
        self._impl = impl if impl is not None else SoundImpl()

    def load_sound(self, name: str, source: Union[str, os.PathLike]) -> None:
        self._impl.load_sound(name, source)

    def play_sound(self, name: str) -> None:
        self._impl.play_sound(name)