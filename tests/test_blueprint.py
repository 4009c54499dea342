"""
Tests for the blueprint renderer against a recording scene.

Tests cover:
- Uniform scale selection
- Triangle vertices and annotation placement
- Label rounding
- Clearing between draws
- Refusal at latitude 0
"""

import pytest

from astroyantra.compute import NotBuildableError, compute_dimensions
from astroyantra.models import InstrumentKind, ReferenceDimensions
from astroyantra.renderers.blueprint import (
    DIMENSION_STYLE,
    GNOMON_STYLE,
    render_blueprint,
)


# ============== Fixtures ==============

@pytest.fixture
def square_gnomon():
    """Base 4 m, height 2 m: width-limited on a 400×400 surface."""
    return ReferenceDimensions(
        angle_deg=26.5, gnomon_height_m=2.0, base_length_m=4.0, dial_radius_m=4.472
    )


# ============== Scale Tests ==============

class TestScale:
    """Test uniform scale selection."""

    def test_width_limited(self, scene, square_gnomon):
        """The worse-fitting axis decides the scale."""
        scale = render_blueprint(square_gnomon, scene, 400, 400, padding=40)

        # usable 320×320: 320/4 = 80 vs 320/2 = 160
        assert scale == pytest.approx(80.0)

    def test_height_limited(self, scene):
        """A tall gnomon is limited by the height."""
        dims = ReferenceDimensions(
            angle_deg=80.0, gnomon_height_m=2.0, base_length_m=0.35, dial_radius_m=2.03
        )
        scale = render_blueprint(dims, scene, 600, 400, padding=40)

        assert scale == pytest.approx(320 / 2.0)

    def test_fits_inside_padding(self, scene):
        """Every polygon vertex stays inside the padded area."""
        dims = compute_dimensions(InstrumentKind.SAMRAT, 28.6139)
        render_blueprint(dims, scene, 600, 400, padding=40)

        (polygon,) = scene.of_kind("polygon")
        for x, y in polygon.points:
            assert 40 - 1e-9 <= x <= 560 + 1e-9
            assert 40 - 1e-9 <= y <= 360 + 1e-9


# ============== Geometry Tests ==============

class TestGeometry:
    """Test drawn primitives."""

    def test_triangle_vertices(self, scene, square_gnomon):
        """Vertices are bottom-left, bottom-right, top-left."""
        render_blueprint(square_gnomon, scene, 400, 400, padding=40)

        (polygon,) = scene.of_kind("polygon")
        assert polygon.points == ((40, 360), (360, 360), (40, 200))
        assert polygon.style == GNOMON_STYLE

    def test_dimension_lines(self, scene, square_gnomon):
        """Height line left of the gnomon, base line under it."""
        render_blueprint(square_gnomon, scene, 400, 400, padding=40)

        vertical, horizontal = scene.of_kind("line")
        assert vertical.points == ((30, 200), (30, 360))
        assert horizontal.points == ((40, 370), (360, 370))
        assert vertical.style == DIMENSION_STYLE

    def test_angle_arc(self, scene, square_gnomon):
        """A quarter arc sits on the top-left vertex."""
        render_blueprint(square_gnomon, scene, 400, 400, padding=40)

        (arc,) = scene.of_kind("arc")
        assert arc.points == ((40, 200),)
        assert arc.radius == 20
        assert (arc.start_deg, arc.end_deg) == (0.0, 90.0)

    def test_labels(self, scene, square_gnomon):
        """Labels are rounded to two decimals and placed beside their lines."""
        render_blueprint(square_gnomon, scene, 400, 400, padding=40)

        height_label, base_label, angle_label = scene.of_kind("label")
        assert height_label.text == "2.00m"
        assert height_label.points == ((25, 280),)
        assert height_label.style.rotation == -90.0
        assert base_label.text == "4.00m"
        assert base_label.points == ((200, 385),)
        assert base_label.style.anchor == "middle"
        assert angle_label.text == "26.50°"
        assert angle_label.points == ((65, 230),)

    def test_record_untouched(self, scene):
        """Rounding happens only on the labels."""
        dims = compute_dimensions(InstrumentKind.SAMRAT, 28.6139)
        before = dims.base_length_m
        render_blueprint(dims, scene, 600, 400)

        assert dims.base_length_m == before
        assert "3.67m" in [p.text for p in scene.of_kind("label")]

    def test_misra_draws_sundial(self, scene):
        """A Misra record draws its 0.5 m sundial gnomon."""
        dims = compute_dimensions(InstrumentKind.MISRA, 28.6139)
        render_blueprint(dims, scene, 600, 400)

        assert "0.50m" in [p.text for p in scene.of_kind("label")]


# ============== Lifecycle Tests ==============

class TestLifecycle:
    """Test clear/present behaviour."""

    def test_no_accumulation(self, scene, square_gnomon):
        """Each draw clears the previous scene first."""
        render_blueprint(square_gnomon, scene, 400, 400)
        render_blueprint(square_gnomon, scene, 400, 400)

        assert len(scene.of_kind("polygon")) == 1
        assert scene.clear_count == 2
        assert scene.present_count == 2

    def test_equator_refused(self, scene, square_gnomon):
        """Latitude 0 raises NotBuildableError and leaves the scene as it was."""
        render_blueprint(square_gnomon, scene, 400, 400)
        before = list(scene.primitives)

        with pytest.raises(NotBuildableError):
            render_blueprint(compute_dimensions(InstrumentKind.SAMRAT, 0), scene, 400, 400)

        assert scene.primitives == before
        assert scene.present_count == 1

    @pytest.mark.parametrize("size", [(60, 60), (80, 400), (600, 80), (10, 10)])
    def test_surface_smaller_than_padding_refused(self, scene, size):
        """A surface with no room inside the padding raises and draws nothing."""
        delhi = compute_dimensions(InstrumentKind.SAMRAT, 28.6139)

        with pytest.raises(ValueError, match="too small"):
            render_blueprint(delhi, scene, *size, padding=40)

        assert scene.primitives == []
        assert scene.present_count == 0

    def test_smallest_surface_scale_positive(self, scene):
        """One pixel of room inside the padding still gives a positive scale."""
        delhi = compute_dimensions(InstrumentKind.SAMRAT, 28.6139)
        scale = render_blueprint(delhi, scene, 81, 81, padding=40)

        assert scale > 0
        (polygon,) = scene.of_kind("polygon")
        for x, y in polygon.points:
            assert 40 - 1e-9 <= x <= 41 + 1e-9
            assert 40 - 1e-9 <= y <= 41 + 1e-9
