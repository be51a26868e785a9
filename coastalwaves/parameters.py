"""Basic wave parameters and water depth classification."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

BREAKING_RATIO = 0.78
SHALLOW_LIMIT = 1.0 / 20.0
DEEP_LIMIT = 0.5


class WaveParameterError(ValueError):
    """Raised when wave parameters are physically invalid or inconsistent."""


class WaterDepthRegime(Enum):
    """Water depth regime, classified by the depth-to-wavelength ratio."""

    SHALLOW = "Shallow Water"
    INTERMEDIATE = "Intermediate Water"
    DEEP = "Deep Water"

    def __str__(self) -> str:
        return self.value


def classify_depth(depth: float, wavelength: float) -> WaterDepthRegime:
    """Classify the regime: shallow below d/L = 1/20, deep above d/L = 1/2."""
    ratio = depth / wavelength
    if ratio < SHALLOW_LIMIT:
        return WaterDepthRegime.SHALLOW
    if ratio > DEEP_LIMIT:
        return WaterDepthRegime.DEEP
    return WaterDepthRegime.INTERMEDIATE


@dataclass
class WaveParameters:
    """Linear wave description.

    ``h`` is the wave height, ``period`` the wave period and ``d`` the water
    depth. The wave number ``k``, phase velocity ``c`` and ``wavelength`` stay
    zero until :meth:`update_from_dispersion` is called.
    """

    h: float
    period: float
    d: float
    omega: float = field(init=False)
    k: float = field(default=0.0, init=False)
    c: float = field(default=0.0, init=False)
    wavelength: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        if self.h <= 0.0:
            raise WaveParameterError("Wave height must be positive")
        if self.period <= 0.0:
            raise WaveParameterError("Wave period must be positive")
        if self.d <= 0.0:
            raise WaveParameterError("Water depth must be positive")
        breaking_ratio = self.h / self.d
        if breaking_ratio > BREAKING_RATIO:
            raise WaveParameterError(
                f"Wave may break: H/d = {breaking_ratio:.3f} > {BREAKING_RATIO}"
            )
        self.omega = 2.0 * math.pi / self.period

    def update_from_dispersion(self, wave_number: float) -> None:
        """Set k, c and wavelength from a solved wave number."""
        self.k = wave_number
        self.c = self.omega / wave_number
        self.wavelength = 2.0 * math.pi / wave_number

    def amplitude(self) -> float:
        """Wave amplitude H/2."""
        return self.h / 2.0

    def frequency(self) -> float:
        """Wave frequency 1/T."""
        return 1.0 / self.period

    def dimensionless_depth(self) -> float:
        """Dimensionless depth kd."""
        return self.k * self.d

    def depth_wavelength_ratio(self) -> float:
        """Depth-to-wavelength ratio d/L."""
        return self.d / self.wavelength

    def water_depth_regime(self) -> WaterDepthRegime:
        """Regime of these parameters from their d/L ratio."""
        return classify_depth(self.d, self.wavelength)

    def validate(self) -> None:
        """Raise WaveParameterError unless k, omega and c are positive and c = omega/k."""
        if self.k <= 0.0:
            raise WaveParameterError("Wave number must be positive")
        if self.omega <= 0.0:
            raise WaveParameterError("Angular frequency must be positive")
        if self.c <= 0.0:
            raise WaveParameterError("Phase velocity must be positive")
        expected_c = self.omega / self.k
        if abs(self.c - expected_c) > 1e-6:
            raise WaveParameterError(
                f"Inconsistent parameters: c = {self.c:.6f}, ω/k = {expected_c:.6f}"
            )