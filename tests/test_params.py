import logging

import pytest

from foilview.params import PARAM_RANGES, FoilParams, ParamKind


def test_defaults():
    params = FoilParams()
    assert params.camber == 0.02
    assert params.thickness == 0.12
    assert params.chord == 1.0
    assert params.resolution == 100
    assert params.camber_position == 0.4
    assert params.designation == "NACA 2412"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"chord": 0.0},
        {"chord": -1.0},
        {"chord": float("nan")},
        {"camber": -0.01},
        {"thickness": -0.01},
        {"resolution": 0},
        {"resolution": 20.5},
        {"camber_position": 1.0},
    ],
)
def test_invalid_params_rejected(kwargs):
    with pytest.raises(ValueError):
        FoilParams(**kwargs)


def test_record_accepts_values_outside_slider_range():
    # Slider bounds only apply through with_param
    params = FoilParams(camber=0.02, thickness=0.12, chord=1.0, resolution=4)
    assert params.resolution == 4
    assert FoilParams(chord=2.5, camber=0.15, resolution=1000).chord == 2.5


def test_integral_float_resolution_accepted():
    params = FoilParams(resolution=40.0)
    assert params.resolution == 40
    assert isinstance(params.resolution, int)


def test_params_are_immutable():
    params = FoilParams()
    with pytest.raises(AttributeError):
        params.chord = 1.5


@pytest.mark.parametrize(
    "kind, value, expected",
    [
        (ParamKind.Chord, 0.0, 0.5),
        (ParamKind.Chord, 3.0, 2.0),
        (ParamKind.Camber, -0.5, 0.0),
        (ParamKind.Thickness, 0.15, 0.15),
        (ParamKind.Resolution, 1000, 500),
        (ParamKind.Resolution, 33.6, 34),
        ("resolution", 5, 20),
        ("camber", 0.05, 0.05),
    ],
)
def test_with_param_clamps(kind, value, expected):
    params = FoilParams().with_param(kind, value)
    assert params.get(ParamKind(kind)) == pytest.approx(expected)


def test_with_param_returns_new_record():
    params = FoilParams()
    changed = params.with_param(ParamKind.Thickness, 0.09)
    assert params.thickness == 0.12
    assert changed.thickness == 0.09
    assert changed.camber == params.camber


def test_clamp_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="foilview.params"):
        FoilParams().with_param(ParamKind.Chord, 0.0)
    assert "Clamped chord" in caplog.text


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        FoilParams().with_param("span", 1.0)


def test_labels():
    params = FoilParams(camber=0.0316, thickness=0.1, chord=1.26, resolution=120)
    assert params.label(ParamKind.Camber) == "0.032"
    assert params.label(ParamKind.Thickness) == "0.100"
    assert params.label(ParamKind.Chord) == "1.3"
    assert params.label(ParamKind.Resolution) == "120"


def test_resolution_range_is_integer():
    rng = PARAM_RANGES[ParamKind.Resolution]
    assert rng.integer
    assert isinstance(rng.clamp(99.7), int)


def test_designation():
    assert FoilParams(camber=0.0, thickness=0.12).designation == "NACA 0012"
    assert FoilParams(camber=0.04, thickness=0.15).designation == "NACA 4415"
    assert FoilParams(camber=0.01, thickness=0.06).designation == "NACA 1406"


def test_kind_names():
    assert str(ParamKind.Resolution) == "resolution"
    assert ParamKind.Chord.display_name == "Chord"
    assert ParamKind("thickness") is ParamKind.Thickness


def test_designation_digits():
    assert FoilParams(camber=0.1, thickness=0.2).designation == "NACA 9420"
    assert FoilParams(camber=0.02, thickness=0.125).designation == "NACA 2413"
    assert FoilParams(camber=0.02, thickness=0.145).designation == "NACA 2415"
    assert FoilParams(camber=0.004, thickness=0.12).designation == "NACA 0012"
