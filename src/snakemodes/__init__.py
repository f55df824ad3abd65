"""Grid snake engine with classic, god, walls, portal and speed modes."""

from snakemodes.board import Board
from snakemodes.engine import GameEngine, GameEvent, Phase, Scene
from snakemodes.modes import Mode, parse_mode

__all__ = ["Board", "GameEngine", "GameEvent", "Phase", "Scene", "Mode", "parse_mode"]
