# tests/conftest.py

import logging

import pytest
import structlog

from Roller.metrics import reset_counters


@pytest.fixture(autouse=True)
def _clean_process_state():
    """Give every test fresh counters and an unconfigured logging stack.

    The CLI installs root handlers bound to the runner's streams; drop them so
    later tests never write to a closed stream.
    """
    reset_counters()
    yield
    reset_counters()
    logging.basicConfig(handlers=[logging.NullHandler()], force=True)
    structlog.reset_defaults()


class ScriptedRNG:
    """Stands in for DiceRNG and returns outcomes from a fixed script."""

    def __init__(self, outcomes):
        self._outcomes = list(outcomes)
        self.drawn = []

    def draw(self, die):
        self.drawn.append(die)
        return self._outcomes.pop(0)


@pytest.fixture
def scripted_rng():
    return ScriptedRNG
