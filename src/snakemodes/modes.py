from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

from .config import FOOD_MARGIN, PORTAL_FOOD_MARGIN


class Mode(Enum):
    CLASSIC = 1
    GOD = 2
    WALLS = 3
    PORTAL = 4
    SPEED = 5


@dataclass(frozen=True)
class ModeRules:
    """Which checks and side effects a mode switches on."""
    checks_bounds: bool = True
    checks_self: bool = True
    checks_bricks: bool = False
    wraps: bool = False
    portal: bool = False
    food_margin: int = FOOD_MARGIN


MODE_RULES: Dict[Mode, ModeRules] = {
    Mode.CLASSIC: ModeRules(),
    Mode.GOD: ModeRules(checks_bounds=False, checks_self=False, wraps=True),
    Mode.WALLS: ModeRules(checks_bricks=True),
    Mode.PORTAL: ModeRules(portal=True, food_margin=PORTAL_FOOD_MARGIN),
    Mode.SPEED: ModeRules(),
}


def rules_for(mode: Mode) -> ModeRules:
    return MODE_RULES[mode]


def parse_mode(value: Union[Mode, int, str, None]) -> Optional[Mode]:
    """
    Turn user input into a Mode. Accepts a Mode, its numeric value
    (1..5, as sent by the menu radio buttons) or its name in any case.
    Returns None for anything unrecognised.
    """
    if isinstance(value, Mode):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return Mode(value)
        except ValueError:
            return None
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return parse_mode(int(text))
        return Mode.__members__.get(text.upper())
    return None
