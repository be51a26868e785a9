"""Wave generation at the left boundary of a one-dimensional channel."""

from __future__ import annotations

import math
from collections.abc import MutableSequence
from dataclasses import dataclass, replace

from .parameters import WaveParameters
from .velocity import VelocityCalculator

TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class BoundaryStatus:
    """Snapshot of the wave-generating boundary at one instant."""

    enabled: bool
    current_time: float
    generation_position: float
    current_velocity: float
    current_elevation: float
    wave_parameters: WaveParameters

    def current_phase(self) -> float:
        """Wave phase kx - ωt at the generation position."""
        return (
            self.wave_parameters.k * self.generation_position
            - self.wave_parameters.omega * self.current_time
        )

    def period_completion(self) -> float:
        """Fraction of the current wave period that has elapsed."""
        periods_elapsed = self.current_time / self.wave_parameters.period
        return periods_elapsed - math.floor(periods_elapsed)

    def at_wave_crest(self, tolerance: float) -> bool:
        """True when the phase is within tolerance of a crest."""
        crest_phase = math.fmod(self.current_phase(), TWO_PI)
        return abs(crest_phase) < tolerance or abs(crest_phase - TWO_PI) < tolerance

    def at_wave_trough(self, tolerance: float) -> bool:
        """True when the phase is within tolerance of a trough."""
        trough_phase = math.fmod(self.current_phase() + math.pi, TWO_PI)
        return abs(trough_phase) < tolerance or abs(trough_phase - TWO_PI) < tolerance


class BoundaryApplicator:
    """Imposes a generated linear wave on the first grid point of a channel."""

    def __init__(self, params: WaveParameters) -> None:
        self._velocity_calc = VelocityCalculator(params)
        self.current_time = 0.0
        self.generation_position = 0.0
        self.enabled = True

    @property
    def parameters(self) -> WaveParameters:
        """Wave parameters used for generation."""
        return self._velocity_calc.params

    def update_parameters(self, params: WaveParameters) -> None:
        """Replace the wave parameters."""
        self._velocity_calc.update_parameters(params)

    def advance_time(self, dt: float) -> None:
        """Advance the simulation time by dt."""
        self.current_time += dt

    def boundary_velocity(self) -> float:
        """Horizontal velocity at the generation position, zero when disabled."""
        if not self.enabled:
            return 0.0
        return self._velocity_calc.horizontal_velocity(
            self.generation_position, self.current_time
        )

    def boundary_surface_elevation(self) -> float:
        """Surface elevation at the generation position, zero when disabled."""
        if not self.enabled:
            return 0.0
        return self._velocity_calc.surface_elevation(
            self.generation_position, self.current_time
        )

    def apply_boundary_conditions(
        self,
        velocities: MutableSequence[float],
        surface_elevations: MutableSequence[float],
    ) -> None:
        """Write the boundary values into the first element of each field."""
        if not self.enabled or not velocities or not surface_elevations:
            return
        velocities[0] = self.boundary_velocity()
        surface_elevations[0] = self.boundary_surface_elevation()

    def ramp_up_factor(self, ramp_duration: float) -> float:
        """Cosine-taper factor rising from 0 to 1 over ramp_duration."""
        if not self.enabled:
            return 0.0
        if ramp_duration <= 0.0:
            return 1.0
        if self.current_time < ramp_duration:
            t_normalized = self.current_time / ramp_duration
            return 0.5 * (1.0 - math.cos(math.pi * t_normalized))
        return 1.0

    def apply_ramped_boundary_conditions(
        self,
        velocities: MutableSequence[float],
        surface_elevations: MutableSequence[float],
        ramp_duration: float,
    ) -> None:
        """Write ramped boundary values into the first element of each field."""
        if not self.enabled or not velocities or not surface_elevations:
            return
        factor = self.ramp_up_factor(ramp_duration)
        velocities[0] = self.boundary_velocity() * factor
        surface_elevations[0] = self.boundary_surface_elevation() * factor

    def boundary_flux(self) -> float:
        """Volume flux velocity × depth at the boundary, zero when disabled."""
        if not self.enabled:
            return 0.0
        return self.boundary_velocity() * self.parameters.d

    def should_generate_waves(self, simulation_duration: float) -> bool:
        """True while enabled and before the end of the generation period."""
        return self.enabled and self.current_time < simulation_duration

    def status(self) -> BoundaryStatus:
        """Snapshot of the current boundary state."""
        return BoundaryStatus(
            enabled=self.enabled,
            current_time=self.current_time,
            generation_position=self.generation_position,
            current_velocity=self.boundary_velocity(),
            current_elevation=self.boundary_surface_elevation(),
            wave_parameters=replace(self.parameters),
        )

    def reset(self) -> None:
        """Return to time zero with generation enabled."""
        self.current_time = 0.0
        self.enabled = True

    def recommended_time_step(self) -> float:
        """Recommended stable time step for the current wave."""
        return self._velocity_calc.recommended_time_step()