import pytest

from controls import primary_intent, tap_intent
from simulation import Intent, Phase


@pytest.mark.parametrize("phase, intent", [
    (Phase.NOT_STARTED, Intent.START),
    (Phase.RUNNING, Intent.JUMP),
    (Phase.GAME_OVER, Intent.RESTART),
])
def test_primary_intent(phase, intent):
    assert primary_intent(phase) is intent


@pytest.mark.parametrize("y, intent", [
    (0, Intent.DUCK_PRESSED),
    (119, Intent.DUCK_PRESSED),
    (120, Intent.JUMP),
    (290, Intent.JUMP),
])
def test_tap_zones_while_running(y, intent):
    assert tap_intent(Phase.RUNNING, y, 300) is intent


def test_low_tap_still_starts_and_restarts():
    assert tap_intent(Phase.NOT_STARTED, 10, 300) is Intent.START
    assert tap_intent(Phase.GAME_OVER, 10, 300) is Intent.RESTART
