import numpy as np
import pytest

from foilview import config
from foilview.naca import generate_profile
from foilview.params import FoilParams
from foilview.render import (
    Viewport,
    axis_lines,
    compute_transform,
    grid_lines,
    render,
)
from foilview.surface import RecordingSurface


@pytest.fixture
def profile():
    return generate_profile(FoilParams(camber=0.02, thickness=0.12, chord=1.0, resolution=40))


def test_compute_transform():
    view = compute_transform(0.12, 1.0, Viewport(800, 400))
    assert view.scale_x == pytest.approx(700.0)
    assert view.scale_y == pytest.approx(300.0 / (2 * 0.12 + 0.2))
    assert view.origin == (50.0, 200.0)


def test_transform_scales_differ():
    view = compute_transform(0.2, 2.0, Viewport(600, 600))
    assert view.scale_x == pytest.approx(250.0)
    assert view.scale_y == pytest.approx(500.0 / 1.2)
    assert view.scale_x != view.scale_y


def test_transform_apply_draws_y_upward():
    view = compute_transform(0.1, 1.0, Viewport(400, 300))
    xy = view.apply(np.array([[0.0, 0.0], [1.0, 0.1], [0.5, -0.1]]))
    np.testing.assert_allclose(xy[0], [50, 150])
    assert xy[1, 0] == pytest.approx(350)
    assert xy[1, 1] < 150
    assert xy[2, 1] > 150


def test_grid_lines():
    viewport = Viewport(800, 400)
    lines = grid_lines(viewport)
    assert lines.shape == (22, 2, 2)

    vertical, horizontal = lines[:11], lines[11:]
    np.testing.assert_allclose(vertical[:, 0, 0], np.linspace(50, 750, 11))
    np.testing.assert_allclose(horizontal[:, 0, 1], np.linspace(50, 350, 11))
    np.testing.assert_allclose(vertical[0], [[50, 50], [50, 350]])
    np.testing.assert_allclose(horizontal[-1], [[50, 350], [750, 350]])


def test_axis_lines_through_centre():
    lines = axis_lines(Viewport(800, 400))
    np.testing.assert_allclose(lines[0], [[0, 200], [800, 200]])
    np.testing.assert_allclose(lines[1], [[400, 0], [400, 400]])


def test_render_draws_grid_axes_and_profile(profile):
    surface = RecordingSurface()
    render(surface, profile, Viewport(800, 400))

    assert surface.clear_count == 1
    assert len(surface.strokes) == 22 + 2 + 1

    grid = surface.strokes[:22]
    axes = surface.strokes[22:24]
    outline = surface.strokes[-1]

    assert all(s.color == config.GRID_COLOR for s in grid)
    assert all(s.width == config.GRID_WIDTH for s in grid)
    assert all(s.width == config.AXIS_WIDTH for s in axes)
    assert config.AXIS_WIDTH > config.GRID_WIDTH

    assert outline.closed
    assert outline.color == config.PROFILE_COLOR
    assert len(outline.xy) == len(profile) + 1
    np.testing.assert_allclose(outline.xy[-1], outline.xy[0])


def test_render_places_profile(profile):
    surface = RecordingSurface()
    view = render(surface, profile, Viewport(800, 400))
    outline = surface.strokes[-1].xy

    np.testing.assert_allclose(outline[:-1], view.apply(profile.xy))

    # Leading edge sits at the left margin on the centre line
    n = profile.params.resolution
    np.testing.assert_allclose(outline[n], [50, 200], atol=1e-12)

    # Trailing edge near the right margin
    assert outline[0, 0] == pytest.approx(750, abs=1.0)

    # Upper surface above the centre line on screen
    upper = outline[n + 1 : -1]
    assert np.all(upper[1:-1, 1] < 200)


def test_render_pixel_ratio(profile):
    plain = RecordingSurface()
    render(plain, profile, Viewport(800, 400))
    dense = RecordingSurface()
    render(dense, profile, Viewport(800, 400, pixel_ratio=2.0))

    assert dense.device_size == (1600.0, 800.0)
    for a, b in zip(plain.strokes, dense.strokes):
        np.testing.assert_allclose(b.xy, 2 * a.xy)
        assert b.width == pytest.approx(2 * a.width)


def test_render_is_full_redraw(profile):
    surface = RecordingSurface()
    viewport = Viewport(640, 480)
    render(surface, profile, viewport)
    first = [s.xy.copy() for s in surface.strokes]
    render(surface, profile, viewport)

    assert surface.clear_count == 2
    assert len(surface.strokes) == len(first)
    for a, b in zip(first, surface.strokes):
        np.testing.assert_array_equal(a, b.xy)


def test_render_flat_profile():
    profile = generate_profile(FoilParams(camber=0.0, thickness=0.0, resolution=20))
    surface = RecordingSurface()
    render(surface, profile, Viewport(800, 400))

    outline = surface.strokes[-1].xy
    assert np.all(outline[:, 1] == 200)
