import pytest

from astroyantra.models import GenerationSession
from astroyantra.renderers.scene import RecordingScene


@pytest.fixture
def session():
    """Fresh, empty generation session."""
    return GenerationSession()


@pytest.fixture
def scene():
    """Recording scene that captures primitives."""
    return RecordingScene()
