"""Regular water waves for coastal engineering: dispersion, kinematics, boundaries and a 1D channel."""

__version__ = "0.1.0"