from .damage import attack, calculate_damage
from .game_manager import GameManager
from .game_state import GameState

__all__ = ["GameManager", "GameState", "attack", "calculate_damage"]
