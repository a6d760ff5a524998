# controls.py
# Maps raw device input to simulation intents. No arcade imports here.
from __future__ import annotations

from simulation import Intent, Phase
from settings import TOUCH_DUCK_ZONE


def primary_intent(phase: Phase) -> Intent:
    """Space / Up / tap: start, restart or jump depending on the phase."""
    if phase is Phase.NOT_STARTED:
        return Intent.START
    if phase is Phase.GAME_OVER:
        return Intent.RESTART
    return Intent.JUMP


def tap_intent(phase: Phase, y_from_bottom: float, height: float) -> Intent:
    """A press in the lower TOUCH_DUCK_ZONE of the viewport ducks while running."""
    intent = primary_intent(phase)
    if intent is Intent.JUMP and y_from_bottom < height * TOUCH_DUCK_ZONE:
        return Intent.DUCK_PRESSED
    return intent
