"""Pytest configuration and fixtures."""

import pytest

from chronicle.context import Artifact, SessionState
from chronicle.history import CharacterHistory


@pytest.fixture
def state() -> SessionState:
    """Session context at depth 5, character level 10, turn 1000."""
    return SessionState(depth=5, level=10, turn=1000)


@pytest.fixture
def history(state: SessionState) -> CharacterHistory:
    """Fresh history bound to the fixture session."""
    return CharacterHistory(state)


@pytest.fixture
def phial() -> Artifact:
    return Artifact(aidx=1, name="Phial of Galadriel")


@pytest.fixture
def ring() -> Artifact:
    return Artifact(aidx=7, name="Ring of Barahir")
