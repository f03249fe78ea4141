"""Player character: movement math, controller and entity assembly."""

from pushball.entities.player.character_controller import CharacterController
from pushball.entities.player.player_core import Player

__all__ = ['CharacterController', 'Player']
