"""
Tests for the Streamlit page's schematic area.

Tests cover:
- A stored result that was never drawn still gets a schematic
- The latitude-0 note only for a non-buildable result
"""

from pathlib import Path

from streamlit.testing.v1 import AppTest

from astroyantra.compute import generate
from astroyantra.models import GenerationSession, InstrumentKind

APP_PATH = str(Path(__file__).resolve().parents[1] / "src" / "astroyantra" / "app.py")


def _run_with(session: GenerationSession) -> AppTest:
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.session_state["generation"] = session
    return at.run()


# ============== Schematic Area Tests ==============

class TestSchematicArea:
    """Test what the 2D output panel shows."""

    def test_undrawn_result_is_drawn(self):
        """A stored result with no figure yet is rendered, not reported as latitude 0."""
        session = GenerationSession()
        generate(session, InstrumentKind.SAMRAT, "28.6139")

        at = _run_with(session)

        assert not at.exception
        assert len(at.info) == 0
        assert len(at.get("plotly_chart")) == 1

    def test_equator_shows_note(self):
        """A latitude-0 result shows the not-buildable note instead of a chart."""
        session = GenerationSession()
        generate(session, InstrumentKind.SAMRAT, "0")

        at = _run_with(session)

        assert not at.exception
        assert len(at.info) == 1
        assert "latitude 0" in at.info[0].value
        assert len(at.get("plotly_chart")) == 0

    def test_empty_session_shows_placeholder(self):
        """Before any generation there is neither a chart nor a note."""
        at = _run_with(GenerationSession())

        assert not at.exception
        assert len(at.info) == 0
        assert len(at.get("plotly_chart")) == 0
