"""Depth-averaged kinematics of a linear wave."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from .parameters import WaveParameters

SHALLOW_KD = 0.1
LINEAR_STEEPNESS = 0.1
ENERGY_TOLERANCE = 0.1
POINTS_PER_WAVELENGTH = 20.0
CFL_FACTOR = 0.5


class EnergyConservationError(ValueError):
    """Raised when the local energy departs too far from the linear-wave value."""


@dataclass
class VelocityCalculator:
    """Velocities, displacements and elevations for given wave parameters."""

    params: WaveParameters
    gravity: float = 9.81

    def update_parameters(self, params: WaveParameters) -> None:
        """Replace the wave parameters."""
        self.params = params

    def _phase(self, x: float, time: float) -> float:
        return self.params.k * x - self.params.omega * time

    def _depth_coefficient(self) -> float:
        # Below kd = 0.1 the shallow-water limit tanh(kd) ≈ kd is replaced by 1.
        kd = self.params.k * self.params.d
        return 1.0 if kd < SHALLOW_KD else math.tanh(kd)

    def horizontal_velocity(self, x: float, time: float) -> float:
        """Depth-averaged horizontal velocity at position x and time."""
        return self.velocity_amplitude() * math.cos(self._phase(x, time))

    def vertical_velocity(self, x: float, time: float) -> float:
        """Vertical velocity; zero for one-dimensional horizontal propagation."""
        return 0.0

    def velocity_amplitude(self) -> float:
        """Maximum horizontal velocity."""
        return self.params.amplitude() * self.params.c * self._depth_coefficient()

    def particle_displacement(self, x: float, time: float) -> float:
        """Horizontal particle displacement at position x and time."""
        return (
            self.params.amplitude()
            * self._depth_coefficient()
            * math.sin(self._phase(x, time))
        )

    def orbital_velocity_components(self, x: float, time: float) -> tuple[float, float]:
        """Horizontal and vertical velocity as a pair (u, w)."""
        return self.horizontal_velocity(x, time), self.vertical_velocity(x, time)

    def velocity_time_series(self, x: float, time_points: Iterable[float]) -> list[float]:
        """Horizontal velocity at a fixed position for each time."""
        return [self.horizontal_velocity(x, t) for t in time_points]

    def velocity_spatial_series(self, x_points: Iterable[float], time: float) -> list[float]:
        """Horizontal velocity at a fixed time for each position."""
        return [self.horizontal_velocity(x, time) for x in x_points]

    def validate_energy_conservation(self, x: float, time: float) -> float:
        """Return the relative energy error, raising if it exceeds 10 %."""
        u = self.horizontal_velocity(x, time)
        eta = self.surface_elevation(x, time)
        kinetic = 0.5 * u * u * self.params.d
        potential = 0.5 * self.gravity * eta * eta
        expected = 0.125 * self.gravity * self.params.h * self.params.h
        error = abs(kinetic + potential - expected) / expected
        if error > ENERGY_TOLERANCE:
            raise EnergyConservationError(
                f"Energy conservation violated: error = {error:.2e}"
            )
        return error

    def surface_elevation(self, x: float, time: float) -> float:
        """Free-surface elevation at position x and time."""
        return self.params.amplitude() * math.cos(self._phase(x, time))

    def wave_steepness(self) -> float:
        """Steepness ak = kH/2."""
        return self.params.k * self.params.amplitude()

    def is_linear(self) -> bool:
        """True when the steepness ak is below 0.1."""
        return self.wave_steepness() < LINEAR_STEEPNESS

    def recommended_time_step(self) -> float:
        """CFL time step for 20 points per wavelength with a safety factor of 0.5."""
        typical_dx = self.params.wavelength / POINTS_PER_WAVELENGTH
        return CFL_FACTOR * typical_dx / self.params.c