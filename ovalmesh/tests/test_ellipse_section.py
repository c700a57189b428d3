"""Tests for the Ellipse and Section facades."""
import dataclasses
import math

import numpy as np
import pytest

from ovalmesh import Ellipse, Rect, Section, TessellationConfig
from ovalmesh.core.constants import DEFAULT_RESOLUTION, EPS_BOUNDARY, TAU

UNIT = Rect.from_w_h(2.0, 2.0)


def as_floats(points):
    return [(float(p.x), float(p.y)) for p in points]


class TestEllipse:
    """Ellipse construction and the iterators it builds."""

    def test_circumference_matches_example(self):
        """Unit circle at resolution 4 yields the four axis points and closes."""
        pts = as_floats(Ellipse(UNIT, 4).circumference())
        expected = [(1, 0), (0, 1), (-1, 0), (0, -1), (1, 0)]
        for p, e in zip(pts, expected):
            assert p == pytest.approx(e, abs=EPS_BOUNDARY)
        assert len(pts) == 5

    def test_each_call_restarts(self):
        """Every circumference()/triangles() call starts a fresh walk."""
        ellipse = Ellipse(UNIT, 7)
        assert list(ellipse.circumference()) == list(ellipse.circumference())
        assert len(list(ellipse.triangles())) == 7
        assert len(list(ellipse.triangles())) == 7

    def test_resolution_zero_is_clamped(self):
        """Resolution 0 is stored as given and clamped when iterating."""
        ellipse = Ellipse(UNIT, 0)
        assert ellipse.resolution == 0
        assert len(ellipse.circumference()) == 2
        assert len(ellipse.triangles()) == 1

    def test_invalid_resolution(self):
        """Negative resolutions raise ValueError, non-integers TypeError."""
        with pytest.raises(ValueError):
            Ellipse(UNIT, -2)
        with pytest.raises(TypeError):
            Ellipse(UNIT, 3.5)

    def test_invalid_dtype(self):
        """Non-floating dtypes are rejected at construction."""
        with pytest.raises(TypeError):
            Ellipse(UNIT, 4, dtype='int64')

    def test_is_immutable_and_hashable(self):
        """Ellipses are frozen value objects."""
        ellipse = Ellipse(UNIT, 4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            ellipse.resolution = 8
        assert len({ellipse, Ellipse(UNIT, 4), Ellipse(UNIT, 5)}) == 2

    def test_default_resolution(self):
        """The default resolution comes from the constants module."""
        assert len(Ellipse(UNIT).triangles()) == DEFAULT_RESOLUTION

    def test_from_config(self):
        """from_config takes resolution and dtype from the config."""
        cfg = TessellationConfig(resolution=8, dtype='float32')
        ellipse = Ellipse.from_config(Rect(1.0, 1.0, 2.0, 4.0), cfg)
        circ = ellipse.circumference()
        assert len(circ) == 9
        assert circ.dtype == np.float32

    def test_from_default_config(self):
        """Without a config the defaults apply."""
        ellipse = Ellipse.from_config(UNIT)
        assert ellipse.resolution == DEFAULT_RESOLUTION

    def test_circle(self):
        """circle() builds a square bounding rect around the centre."""
        circle = Ellipse.circle((1.0, 2.0), 3.0, resolution=6)
        assert circle.rect == Rect(1.0, 2.0, 6.0, 6.0)
        for p in circle.circumference():
            assert math.hypot(p.x - 1.0, p.y - 2.0) == pytest.approx(3.0)


class TestSection:
    """Angular sections of an ellipse."""

    def test_quarter_section_matches_example(self):
        """Offset pi/2 with span pi/2 at resolution 2 walks from (0,1) to (-1,0)."""
        section = Ellipse(UNIT, 2).section(math.pi / 2, math.pi / 2)
        assert isinstance(section, Section)
        pts = as_floats(section.circumference())
        h = math.sqrt(0.5)
        expected = [(0, 1), (-h, h), (-1, 0)]
        assert len(pts) == 3
        for p, e in zip(pts, expected):
            assert p == pytest.approx(e, abs=EPS_BOUNDARY)

    @pytest.mark.parametrize("offset,span,resolution", [
        (0.0, math.pi, 4),
        (1.0, 0.5, 5),
        (-0.3, 3 * math.pi, 9),
        (2.0, -1.5, 3),
    ])
    def test_angles_step_evenly_from_offset(self, offset, span, resolution):
        """Angles run from offset to offset + span in resolution equal steps."""
        circ = Ellipse(UNIT, resolution).section(offset, span).circumference()
        expected = [offset + span * k / resolution for k in range(resolution + 1)]
        assert [float(a) for a in circ.angles()] == pytest.approx(expected)
        assert len(circ) == resolution + 1

    @pytest.mark.parametrize("resolution", [1, 4, 31])
    def test_full_section_recovers_full_circumference(self, resolution):
        """section(0, 2*pi) matches the full circumference."""
        ellipse = Ellipse(Rect(2.0, -1.0, 3.0, 5.0), resolution)
        full = as_floats(ellipse.circumference())
        sect = as_floats(ellipse.section(0.0, TAU).circumference())
        assert len(full) == len(sect)
        for a, b in zip(full, sect):
            assert a == pytest.approx(b, abs=EPS_BOUNDARY)

    def test_section_triangles(self):
        """A section fan has one triangle per step between its end points."""
        section = Ellipse(UNIT, 6).section(0.25, math.pi)
        tris = list(section.triangles())
        pts = list(section.circumference())
        assert len(tris) == 6
        assert tris[0].b == pts[0]
        assert tris[-1].c == pts[-1]
        assert all(tri.signed_area() > 0 for tri in tris)

    def test_section_with_resolution_zero(self):
        """Resolution 0 sections still yield both end points."""
        pts = as_floats(Ellipse(UNIT, 0).section(math.pi / 2, math.pi).circumference())
        assert len(pts) == 2
        assert pts[0] == pytest.approx((0, 1), abs=EPS_BOUNDARY)
        assert pts[1] == pytest.approx((0, -1), abs=EPS_BOUNDARY)

    def test_section_keeps_ellipse_dtype(self):
        """Sections generate points in the parent ellipse's dtype."""
        circ = Ellipse(UNIT, 3, dtype='float32').section(0.5, 1.0).circumference()
        assert circ.dtype == np.float32
        assert isinstance(next(circ).x, np.float32)

    def test_is_immutable(self):
        """Sections are frozen value objects."""
        section = Ellipse(UNIT, 3).section(0.0, 1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            section.offset_radians = 2.0
