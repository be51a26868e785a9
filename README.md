# coastalwaves

Tools for regular (monochromatic) water waves in a coastal setting:

- **Wave parameters**: height, period and depth are checked, with a depth-limited
  breaking check at H/d > 0.78. Derived values include wave number, celerity,
  wavelength and the depth regime (shallow, intermediate or deep).
- **Dispersion solver**: a Newton–Raphson solution of the one-layer
  non-hydrostatic dispersion relation ω² = gk·(kd)/(1 + (kd)²/4). It also gives
  phase and group velocities.
- **Velocity calculator**: depth-averaged horizontal velocity, surface
  elevation, particle displacement, steepness and a recommended time step from
  linear wave theory.
- **Boundary applicator**: drives a wave-generating left boundary with an
  optional cosine ramp-up. It reports status (phase, crest and trough
  detection).
- **Wave channel**: a 1D channel in which a wave train is generated at the left
  wall and travels across the domain. Wavelength and celerity come from the
  adaptive (shallow, intermediate or deep) linear dispersion relation.
- **Equation registry**: loads equation descriptions from a JSON registry and
  recolours their rendered SVG files to a chosen text colour.

The package depends only on the Python standard library and needs Python 3.10
or later.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Command line

```
coastalwaves
```

This prints a report of the wave channel's parameters and computed values:
grid spacing, frequency, angular frequency, depth regime, celerity, wavelength
and wave number.

## Library use

Solve the dispersion relation for a wave with H = 0.5 m and T = 4 s in 2 m of
water:

```python
from coastalwaves.dispersion import DispersionSolver

solver = DispersionSolver()
params = solver.solve_wave_parameters(0.5, 4.0, 2.0)

print(params.k, params.c, params.wavelength)
print(params.water_depth_regime())
print(solver.group_velocity(params.k, params.d))
```

Invalid input raises an exception rather than returning a status. This covers
non-positive values and waves that would break:

```python
from coastalwaves.parameters import WaveParameterError

try:
    solver.solve_wave_parameters(2.0, 4.0, 2.0)  # H/d = 1.0
except WaveParameterError as err:
    print(err)
```

If the Newton iteration fails to converge, the solver raises
`coastalwaves.dispersion.DispersionError`.

Velocities and surface elevation at a point:

```python
from coastalwaves.velocity import VelocityCalculator

calc = VelocityCalculator(params)
u = calc.horizontal_velocity(0.0, 1.0)
eta = calc.surface_elevation(0.0, 1.0)
dt = calc.recommended_time_step()
series = calc.velocity_time_series(0.0, [0.0, 0.1, 0.2, 0.3])
```

Driving a generating boundary on a grid:

```python
from coastalwaves.boundary import BoundaryApplicator

boundary = BoundaryApplicator(params)
velocities = [0.0] * 100
elevations = [0.0] * 100

for _ in range(40):
    boundary.advance_time(0.05)
    boundary.apply_ramped_boundary_conditions(velocities, elevations, 2.0)

status = boundary.status()
print(status.current_phase(), status.period_completion())
```

Running the 1D wave channel:

```python
from coastalwaves.channel import WaveChannel, adaptive_wavelength

channel = WaveChannel()
channel.start()
while not channel.is_complete():
    channel.advance(0.05)

print(channel.progress())
print(adaptive_wavelength(4.0, 2.0, 9.81))
```

`WaveChannel.plot_data()` returns the water surface, the channel bottom and the
channel walls as sequences of points. You can pass them to any plotting tool.