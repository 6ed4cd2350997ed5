from __future__ import annotations

from importlib import import_module

from .settings import GameSettings, PlayerSettings
from .terminal import TerminalApp

__all__ = ["CheckersGUI", "GameSettings", "PlayerSettings", "TerminalApp"]


def __getattr__(name: str):
    # pygame is only imported when the graphical front-end is asked for.
    if name == "CheckersGUI":
        module = import_module(".pygame_gui", __name__)
        return getattr(module, name)
    raise AttributeError(name)
