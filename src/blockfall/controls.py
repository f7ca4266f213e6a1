"""Player intents and the key names that produce them."""

from __future__ import annotations

from enum import Enum
from typing import Dict


class Intent(str, Enum):
    """Directional intent delivered by an input source."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE_CW = "rotate_cw"
    ROTATE_CCW = "rotate_ccw"
    SOFT_DROP = "soft_drop"
    HARD_DROP = "hard_drop"
    RESET = "reset"
    OTHER = "other"


# Arrow up turns clockwise and arrow down counter-clockwise; any other key
# nudges the piece down one row.
KEY_INTENTS: Dict[str, Intent] = {
    "left": Intent.MOVE_LEFT,
    "right": Intent.MOVE_RIGHT,
    "up": Intent.ROTATE_CW,
    "down": Intent.ROTATE_CCW,
    "space": Intent.HARD_DROP,
    "escape": Intent.RESET,
}


def intent_for_key(name: str) -> Intent:
    """Return the intent bound to key ``name``, or ``Intent.OTHER``."""

    return KEY_INTENTS.get(name.strip().lower(), Intent.OTHER)
