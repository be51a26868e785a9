"""One-layer non-hydrostatic dispersion relation and its Newton solver.

The relation is ω² = g k (kd) / (1 + (kd)²/4).
"""

from __future__ import annotations

from dataclasses import dataclass

from .parameters import WaveParameters


class DispersionError(ValueError):
    """Raised when the dispersion relation cannot be solved or is not satisfied."""


@dataclass
class DispersionSolver:
    """Newton-Raphson solver for the wave number."""

    max_iterations: int = 100
    tolerance: float = 1e-10
    gravity: float = 9.81

    def solve_wave_parameters(
        self, wave_height: float, wave_period: float, water_depth: float
    ) -> WaveParameters:
        """Build wave parameters and fill in k, c and wavelength from the relation."""
        params = WaveParameters(wave_height, wave_period, water_depth)
        params.update_from_dispersion(self.solve_wave_number(params.omega, water_depth))
        params.validate()
        return params

    def solve_wave_number(self, omega: float, depth: float) -> float:
        """Solve for k given angular frequency and depth, starting from the deep-water guess."""
        k = omega * omega / self.gravity
        for _ in range(self.max_iterations):
            f = self.dispersion_function(k, omega, depth)
            df_dk = self.dispersion_derivative(k, depth)
            if abs(df_dk) < self.tolerance:
                raise DispersionError("Derivative too small in Newton-Raphson iteration")
            k_new = k - f / df_dk
            if abs(k_new - k) < self.tolerance:
                return k_new
            k = max(k_new, self.tolerance)
        raise DispersionError(
            f"Newton-Raphson failed to converge after {self.max_iterations} iterations"
        )

    def dispersion_function(self, k: float, omega: float, depth: float) -> float:
        """Residual f(k) = ω² - g k (kd) / (1 + (kd)²/4)."""
        kd = k * depth
        rhs = self.gravity * k * kd / (1.0 + kd * kd / 4.0)
        return omega * omega - rhs

    def dispersion_derivative(self, k: float, depth: float) -> float:
        """Derivative of the residual with respect to k."""
        kd = k * depth
        kd2 = kd * kd
        denominator = 1.0 + kd2 / 4.0
        term1 = kd / denominator
        term2 = k * depth * (1.0 - kd2 / 4.0) / (denominator * denominator)
        return -self.gravity * (term1 + term2)

    def phase_velocity(self, k: float, depth: float) -> float:
        """Phase velocity ω/k implied by the relation."""
        kd = k * depth
        c_squared = self.gravity * kd / (k * (1.0 + kd * kd / 4.0))
        return c_squared ** 0.5

    def group_velocity(self, k: float, depth: float) -> float:
        """Group velocity ∂ω/∂k implied by the relation."""
        kd = k * depth
        kd2 = kd * kd
        denominator = 1.0 + kd2 / 4.0
        omega = (self.gravity * k * kd / denominator) ** 0.5
        domega2_dk = self.gravity * depth * (1.0 - kd2 / 4.0) / denominator**2
        return domega2_dk / (2.0 * omega)

    def validate_dispersion(self, k: float, omega: float, depth: float) -> float:
        """Return the residual, raising DispersionError if it exceeds 1e-6."""
        residual = self.dispersion_function(k, omega, depth)
        if abs(residual) > 1e-6:
            raise DispersionError(
                f"Dispersion relation not satisfied: residual = {residual:.2e}"
            )
        return residual