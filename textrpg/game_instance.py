"""Process-wide game state shared by the scenes."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import Any

from textrpg.characters import PlayerCharacter
from textrpg.items import ItemTable

PLAYER_NAME = "모험가"
PLAYER_DESCRIPTION = "전설의 용사(진)"


def _default_player() -> PlayerCharacter:
    return PlayerCharacter(PLAYER_NAME, PLAYER_DESCRIPTION)


@dataclass
class GameInstance:
    """The item catalogue, the player and the active scene manager."""

    item_table: ItemTable = field(default_factory=ItemTable)
    player: PlayerCharacter = field(default_factory=_default_player)
    scene_manager: Any = None


@functools.lru_cache(maxsize=None)
def instance() -> GameInstance:
    """Return the shared game instance, creating it on first use."""
    return GameInstance()