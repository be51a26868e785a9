"""Command-line front end: configure a wave channel, run it and print its state."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence

from .channel import GRAVITY, WaveChannel, adaptive_celerity, adaptive_wavelength, classify_water_depth
from .equations import DEFAULT_REGISTRY, EquationRegistry
from .parameters import WaterDepthRegime

PLATFORM_TITLE = "Coastal Engineering Platform"
DEFAULT_TIME_STEP = 0.05

_REGIME_EQUATIONS = {
    WaterDepthRegime.SHALLOW: ("shallow_water_celerity", "shallow_water_wavelength"),
    WaterDepthRegime.DEEP: ("deep_water_celerity", "deep_water_wavelength"),
    WaterDepthRegime.INTERMEDIATE: ("dispersion_relation",),
}


def _status(channel: WaveChannel) -> str:
    if channel.simulation_running:
        return "Running"
    if channel.is_complete():
        return "Complete"
    if channel.simulation_time > 0.0:
        return "Paused"
    return "Ready"


def _regime(channel: WaveChannel) -> WaterDepthRegime:
    wavelength = adaptive_wavelength(channel.wave_period, channel.still_water_level, GRAVITY)
    return classify_water_depth(channel.still_water_level, wavelength)


def format_report(channel: WaveChannel) -> str:
    """Describe the channel's parameters, derived wave values and simulation state as text."""
    frequency = 1.0 / channel.wave_period
    angular_frequency = 2.0 * math.pi * frequency
    wavelength = adaptive_wavelength(channel.wave_period, channel.still_water_level, GRAVITY)
    celerity = adaptive_celerity(channel.wave_period, channel.still_water_level, GRAVITY)
    regime = classify_water_depth(channel.still_water_level, wavelength)

    lines = [
        "1D Wave Channel Simulator",
        "",
        "Channel Parameters",
        f"Channel Length: {channel.channel_length:.1f} m",
        f"Grid Resolution: {channel.grid_resolution} points",
        f"Still Water Level: {channel.still_water_level:.2f} m",
        "",
        "Wave Parameters",
        f"Wave Height (H): {channel.wave_height:.2f} m",
        f"Wave Period (T): {channel.wave_period:.1f} s",
        f"Number of Waves: {channel.number_of_waves} waves",
        "",
        "Computed Values",
        f"Grid Spacing (Δx): {channel.grid_spacing():.3f} m",
        f"Wave Frequency (f): {frequency:.3f} Hz",
        f"Angular Frequency (ω): {angular_frequency:.3f} rad/s",
        f"Water Depth Regime: {regime}",
        f"Wave Celerity (c): {celerity:.3f} m/s",
        f"Wavelength (L): {wavelength:.3f} m",
        f"Wave Number (k): {2.0 * math.pi / wavelength:.3f} rad/m",
        "",
        "Channel Visualization",
        f"Status: {_status(channel)}",
        f"Time: {channel.simulation_time:.1f}s ({channel.progress() * 100.0:.0f}%)",
    ]
    return "\n".join(lines)


def _bounded(kind, low, high):
    def convert(text: str):
        try:
            value = kind(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid value: {text!r}") from None
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(f"{value} is outside {low}..{high}")
        return value

    return convert


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coastalwaves", description="One-dimensional wave channel simulator."
    )
    parser.add_argument("--length", type=_bounded(float, 1.0, 200.0), default=50.0,
                        help="channel length in metres (1-200)")
    parser.add_argument("--resolution", type=_bounded(int, 10, 2000), default=100,
                        help="number of grid points (10-2000)")
    parser.add_argument("--depth", type=_bounded(float, 0.1, 5.0), default=2.0,
                        help="still water level in metres (0.1-5)")
    parser.add_argument("--height", type=_bounded(float, 0.01, 5.0), default=0.5,
                        help="wave height in metres (0.01-5)")
    parser.add_argument("--period", type=_bounded(float, 1.0, 20.0), default=4.0,
                        help="wave period in seconds (1-20)")
    parser.add_argument("--waves", type=_bounded(int, 1, 1000), default=50,
                        help="number of waves to generate (1-1000)")
    run = parser.add_mutually_exclusive_group()
    run.add_argument("--time", type=_bounded(float, 0.0, math.inf),
                     help="simulate until this time in seconds")
    run.add_argument("--run", action="store_true", help="simulate until complete")
    parser.add_argument("--dt", type=_bounded(float, 1e-6, math.inf), default=DEFAULT_TIME_STEP,
                        help="time step in seconds")
    parser.add_argument("--surface", action="store_true",
                        help="print the water surface as x,elevation rows")
    parser.add_argument("--equations", default=str(DEFAULT_REGISTRY),
                        help="path of the equation registry")
    return parser


def _simulate(channel: WaveChannel, dt: float, until: float | None) -> None:
    channel.start()
    while channel.simulation_running and (until is None or channel.simulation_time < until):
        channel.advance(dt)
    if channel.simulation_running:
        channel.pause()


def _equation_lines(channel: WaveChannel, registry: EquationRegistry) -> list[str]:
    ids = ("wave_frequency", "angular_frequency", *_REGIME_EQUATIONS[_regime(channel)])
    found = [registry.get(equation_id) for equation_id in ids]
    return [f"{eq.id}: {eq.description}" for eq in found if eq is not None]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulator from the command line."""
    args = _build_parser().parse_args(argv)

    registry = EquationRegistry()
    try:
        registry.load(args.equations)
    except (OSError, ValueError, KeyError, TypeError) as error:
        print(f"Failed to load equations: {error}", file=sys.stderr)

    channel = WaveChannel(
        channel_length=args.length,
        grid_resolution=args.resolution,
        still_water_level=args.depth,
        wave_height=args.height,
        wave_period=args.period,
        number_of_waves=args.waves,
    )
    if args.run:
        _simulate(channel, args.dt, None)
    elif args.time is not None and args.time > 0.0:
        _simulate(channel, args.dt, args.time)

    print(PLATFORM_TITLE)
    print()
    print(format_report(channel))

    equation_lines = _equation_lines(channel, registry)
    if equation_lines:
        print()
        print("Equations")
        for line in equation_lines:
            print(line)

    if args.surface:
        print()
        print("x,elevation")
        water_surface, _, _ = channel.plot_data()
        for x, level in water_surface:
            print(f"{x:.6f},{level - channel.still_water_level:.6f}")
    return 0