import math

import pytest

from coastalwaves.parameters import (
    WaterDepthRegime,
    WaveParameterError,
    WaveParameters,
    classify_depth,
)


def test_wave_parameters_creation():
    params = WaveParameters(1.0, 4.0, 2.0)
    assert params.h == 1.0
    assert params.period == 4.0
    assert params.d == 2.0
    assert params.amplitude() == 0.5
    assert params.frequency() == 0.25


def test_omega_computed_and_unsolved_fields_zero():
    params = WaveParameters(1.0, 4.0, 2.0)
    assert params.omega == pytest.approx(math.pi / 2.0)
    assert params.k == 0.0
    assert params.c == 0.0
    assert params.wavelength == 0.0


def test_wave_breaking_validation():
    with pytest.raises(WaveParameterError, match="Wave may break"):
        WaveParameters(2.0, 4.0, 2.0)
    assert WaveParameters(1.0, 4.0, 2.0).h == 1.0


@pytest.mark.parametrize(
    "height, period, depth, message",
    [
        (0.0, 4.0, 2.0, "Wave height must be positive"),
        (1.0, 0.0, 2.0, "Wave period must be positive"),
        (1.0, 4.0, 0.0, "Water depth must be positive"),
    ],
)
def test_invalid_parameters(height, period, depth, message):
    with pytest.raises(WaveParameterError, match=message):
        WaveParameters(height, period, depth)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        WaveParameters(-1.0, 4.0, 2.0)


def test_update_from_dispersion():
    params = WaveParameters(1.0, 4.0, 2.0)
    params.update_from_dispersion(0.5)
    assert params.k == 0.5
    assert params.c == pytest.approx(params.omega / 0.5)
    assert params.wavelength == pytest.approx(4.0 * math.pi)
    assert params.dimensionless_depth() == pytest.approx(1.0)
    assert params.depth_wavelength_ratio() == pytest.approx(2.0 / (4.0 * math.pi))


def test_validate_passes_after_update():
    params = WaveParameters(1.0, 4.0, 2.0)
    params.update_from_dispersion(0.7)
    params.validate()
    assert params.c * params.k == pytest.approx(params.omega)


def test_validate_rejects_unsolved():
    params = WaveParameters(1.0, 4.0, 2.0)
    with pytest.raises(WaveParameterError, match="Wave number must be positive"):
        params.validate()


def test_validate_rejects_inconsistent_celerity():
    params = WaveParameters(1.0, 4.0, 2.0)
    params.update_from_dispersion(0.7)
    params.c += 1.0
    with pytest.raises(WaveParameterError, match="Inconsistent parameters"):
        params.validate()


def test_validate_rejects_negative_celerity():
    params = WaveParameters(1.0, 4.0, 2.0)
    params.update_from_dispersion(0.7)
    params.c = -1.0
    with pytest.raises(WaveParameterError, match="Phase velocity must be positive"):
        params.validate()


@pytest.mark.parametrize(
    "depth, wavelength, regime",
    [
        (1.0, 100.0, WaterDepthRegime.SHALLOW),
        (1.0, 20.0, WaterDepthRegime.INTERMEDIATE),
        (1.0, 2.0, WaterDepthRegime.INTERMEDIATE),
        (1.0, 1.0, WaterDepthRegime.DEEP),
        (5.0, 20.0, WaterDepthRegime.INTERMEDIATE),
    ],
)
def test_classify_depth(depth, wavelength, regime):
    assert classify_depth(depth, wavelength) is regime


def test_water_depth_regime_from_params():
    params = WaveParameters(0.1, 4.0, 2.0)
    params.update_from_dispersion(2.0 * math.pi / 200.0)
    assert params.water_depth_regime() is WaterDepthRegime.SHALLOW
    params.update_from_dispersion(2.0 * math.pi / 2.0)
    assert params.water_depth_regime() is WaterDepthRegime.DEEP


@pytest.mark.parametrize(
    "depth, wavelength, text",
    [
        (1.0, 100.0, "Shallow Water"),
        (1.0, 10.0, "Intermediate Water"),
        (1.0, 1.0, "Deep Water"),
    ],
)
def test_regime_display(depth, wavelength, text):
    assert str(classify_depth(depth, wavelength)) == text