"""Shared personality vectors for engine tests."""

import pytest

from theme_engine.personality import PersonalityVector

PERSONALITY_VECTORS = {
    "minimal": [0.1, 0.5, 0.5, 0.3, 0.5, 0.3],
    "rich": [0.9, 0.5, 0.5, 0.7, 0.5, 0.7],
    "playful": [0.5, 0.1, 0.5, 0.4, 0.5, 0.8],
    "serious": [0.5, 0.9, 0.5, 0.6, 0.5, 0.3],
    "warm": [0.5, 0.5, 0.1, 0.5, 0.3, 0.5],
    "cool": [0.5, 0.5, 0.9, 0.5, 0.8, 0.5],
    "light": [0.3, 0.5, 0.5, 0.2, 0.5, 0.5],
    "bold": [0.7, 0.5, 0.5, 0.8, 0.5, 0.5],
    "classic": [0.5, 0.5, 0.5, 0.5, 0.1, 0.5],
    "modern": [0.5, 0.5, 0.5, 0.5, 0.9, 0.5],
    "balanced": [0.5, 0.5, 0.5, 0.5, 0.5, 0.5],
}


@pytest.fixture
def balanced():
    return PersonalityVector.parse(PERSONALITY_VECTORS["balanced"])


@pytest.fixture(params=sorted(PERSONALITY_VECTORS))
def any_vector(request):
    return PersonalityVector.parse(PERSONALITY_VECTORS[request.param])
