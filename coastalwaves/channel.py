"""One-dimensional wave channel: adaptive dispersion and surface animation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .parameters import WaterDepthRegime, classify_depth

GRAVITY = 9.81
MAX_DISPERSION_ITERATIONS = 20
DISPERSION_TOLERANCE = 1e-6
WALL_FREEBOARD = 1.0

Point = tuple[float, float]


def classify_water_depth(depth: float, wavelength: float) -> WaterDepthRegime:
    """Classify the regime: shallow below h/L = 1/20, deep above h/L = 1/2."""
    return classify_depth(depth, wavelength)


def adaptive_wavelength(period: float, depth: float, gravity: float = GRAVITY) -> float:
    """Wavelength from the formula that suits the water depth regime.

    Shallow water uses L = T√(gh), deep water L = gT²/(2π), and intermediate
    depths iterate L = (gT²/(2π)) tanh(2πh/L) from the deep-water guess.
    """
    shallow = period * math.sqrt(gravity * depth)
    deep = gravity * period * period / (2.0 * math.pi)
    regime = classify_water_depth(depth, shallow)
    if regime is WaterDepthRegime.SHALLOW:
        return shallow
    if regime is WaterDepthRegime.DEEP:
        return deep

    wavelength = deep
    for _ in range(MAX_DISPERSION_ITERATIONS):
        previous = wavelength
        k = 2.0 * math.pi / previous
        wavelength = deep * math.tanh(k * depth)
        if abs(wavelength - previous) < DISPERSION_TOLERANCE:
            break
    return wavelength


def adaptive_celerity(period: float, depth: float, gravity: float = GRAVITY) -> float:
    """Phase celerity L/T using the adaptive wavelength."""
    return adaptive_wavelength(period, depth, gravity) / period


@dataclass
class WaveChannel:
    """A flat-bottomed channel with waves generated at its left end."""

    channel_length: float = 50.0
    grid_resolution: int = 100
    still_water_level: float = 2.0
    wave_height: float = 0.5
    wave_period: float = 4.0
    number_of_waves: int = 50
    simulation_time: float = 0.0
    simulation_running: bool = False
    surface_elevation: list[float] = field(init=False)

    def __post_init__(self) -> None:
        self.surface_elevation = [0.0] * self.grid_resolution

    def grid_spacing(self) -> float:
        """Distance between grid points, L / (N - 1)."""
        return self.channel_length / (self.grid_resolution - 1.0)

    def _celerity(self) -> float:
        return adaptive_celerity(self.wave_period, self.still_water_level, GRAVITY)

    def _generation_duration(self) -> float:
        return self.number_of_waves * self.wave_period

    def update_surface_elevation(self) -> None:
        """Recompute the surface elevation at every grid point for the current time."""
        if not (self.simulation_running or self.simulation_time > 0.0):
            self.surface_elevation = [0.0] * self.grid_resolution
            return

        dx = self.grid_spacing()
        wavelength = adaptive_wavelength(self.wave_period, self.still_water_level, GRAVITY)
        k = 2.0 * math.pi / wavelength
        amplitude = self.wave_height / 2.0
        omega = 2.0 * math.pi / self.wave_period
        celerity = self._celerity()
        generation_duration = self._generation_duration()
        t = self.simulation_time

        def elevation(x: float) -> float:
            arrival = x / celerity
            generated_at = t - arrival
            if 0.0 <= generated_at <= generation_duration and t >= arrival:
                return amplitude * math.cos(k * x - omega * t)
            return 0.0

        self.surface_elevation = [
            elevation(i * dx) for i in range(self.grid_resolution)
        ]

    def start(self) -> None:
        """Start or resume the simulation."""
        self.simulation_running = True

    def pause(self) -> None:
        """Pause the simulation."""
        self.simulation_running = False

    def reset(self) -> None:
        """Stop the simulation and return to still water at time zero."""
        self.simulation_running = False
        self.simulation_time = 0.0
        self.update_surface_elevation()

    def total_duration(self) -> float:
        """Generation time plus the time for the last wave to cross the channel."""
        return self._generation_duration() + self.channel_length / self._celerity()

    def advance(self, dt: float) -> None:
        """Advance a running simulation by dt, stopping it once complete."""
        if not self.simulation_running:
            return
        self.simulation_time += dt
        self.update_surface_elevation()
        if self.simulation_time >= self.total_duration():
            self.simulation_running = False

    def progress(self) -> float:
        """Fraction of the total duration elapsed, capped at 1."""
        total = self.total_duration()
        if total <= 0.0:
            return 0.0
        return min(self.simulation_time / total, 1.0)

    def is_complete(self) -> bool:
        """True once all waves have been generated and crossed the channel."""
        return self.simulation_time >= self.total_duration()

    def plot_data(self) -> tuple[list[Point], list[Point], list[Point]]:
        """Water surface, channel bottom and channel wall outlines as point lists."""
        dx = self.grid_spacing()
        xs = [i * dx for i in range(self.grid_resolution)]
        water_surface = [
            (x, self.still_water_level + eta)
            for x, eta in zip(xs, self.surface_elevation)
        ]
        channel_bottom = [(x, 0.0) for x in xs]
        top = self.still_water_level + WALL_FREEBOARD
        channel_walls = [
            (0.0, 0.0),
            (0.0, top),
            (self.channel_length, top),
            (self.channel_length, 0.0),
        ]
        return water_surface, channel_bottom, channel_walls