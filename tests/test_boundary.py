import math

import pytest

from coastalwaves.boundary import BoundaryApplicator, BoundaryStatus
from coastalwaves.dispersion import DispersionSolver


@pytest.fixture
def applicator():
    params = DispersionSolver().solve_wave_parameters(0.5, 4.0, 2.0)
    return BoundaryApplicator(params)


def test_creation(applicator):
    assert applicator.current_time == 0.0
    assert applicator.generation_position == 0.0
    assert applicator.enabled is True


def test_time_advancement(applicator):
    applicator.advance_time(0.1)
    assert applicator.current_time == 0.1
    applicator.current_time = 1.0
    assert applicator.current_time == 1.0


def test_boundary_velocity(applicator):
    v0 = applicator.boundary_velocity()
    assert v0 != 0.0
    applicator.current_time = applicator.parameters.period / 4.0
    assert abs(applicator.boundary_velocity()) < 1e-10
    applicator.current_time = applicator.parameters.period / 2.0
    assert abs(v0 + applicator.boundary_velocity()) < 1e-10


def test_boundary_surface_elevation(applicator):
    assert applicator.boundary_surface_elevation() == applicator.parameters.amplitude()
    applicator.current_time = applicator.parameters.period / 4.0
    assert abs(applicator.boundary_surface_elevation()) < 1e-10


def test_enable_disable(applicator):
    assert applicator.enabled
    v_enabled = applicator.boundary_velocity()
    assert v_enabled != 0.0
    applicator.enabled = False
    assert applicator.boundary_velocity() == 0.0
    assert applicator.boundary_surface_elevation() == 0.0
    assert applicator.boundary_flux() == 0.0
    assert applicator.ramp_up_factor(2.0) == 0.0
    applicator.enabled = True
    assert applicator.boundary_velocity() == v_enabled


def test_ramp_up_factor(applicator):
    ramp = 2.0
    applicator.current_time = 0.0
    assert applicator.ramp_up_factor(ramp) == 0.0
    applicator.current_time = ramp
    assert abs(applicator.ramp_up_factor(ramp) - 1.0) < 1e-10
    applicator.current_time = ramp / 2.0
    assert abs(applicator.ramp_up_factor(ramp) - 0.5) < 1e-10
    applicator.current_time = ramp * 2.0
    assert applicator.ramp_up_factor(ramp) == 1.0


def test_ramp_up_factor_non_positive_duration(applicator):
    assert applicator.ramp_up_factor(0.0) == 1.0
    assert applicator.ramp_up_factor(-1.0) == 1.0


def test_boundary_conditions_application(applicator):
    velocities = [0.0] * 10
    elevations = [0.0] * 10
    applicator.apply_boundary_conditions(velocities, elevations)
    assert velocities[0] == applicator.boundary_velocity()
    assert elevations[0] == applicator.boundary_surface_elevation()
    assert velocities[1:] == [0.0] * 9
    assert elevations[1:] == [0.0] * 9


def test_boundary_conditions_disabled_leaves_fields(applicator):
    applicator.enabled = False
    velocities = [7.0, 8.0]
    elevations = [9.0, 1.0]
    applicator.apply_boundary_conditions(velocities, elevations)
    assert velocities == [7.0, 8.0]
    assert elevations == [9.0, 1.0]


def test_boundary_conditions_empty_fields(applicator):
    velocities = []
    elevations = [3.0]
    applicator.apply_boundary_conditions(velocities, elevations)
    assert velocities == []
    assert elevations == [3.0]


def test_ramped_boundary_conditions(applicator):
    velocities = [0.0] * 10
    elevations = [0.0] * 10
    ramp = 2.0
    applicator.current_time = 0.0
    applicator.apply_ramped_boundary_conditions(velocities, elevations, ramp)
    assert velocities[0] == 0.0
    assert elevations[0] == 0.0
    applicator.current_time = ramp
    applicator.apply_ramped_boundary_conditions(velocities, elevations, ramp)
    assert velocities[0] == applicator.boundary_velocity()
    assert elevations[0] == applicator.boundary_surface_elevation()


def test_boundary_flux(applicator):
    expected = applicator.boundary_velocity() * applicator.parameters.d
    assert applicator.boundary_flux() == expected


def test_reset(applicator):
    applicator.advance_time(5.0)
    applicator.enabled = False
    applicator.reset()
    assert applicator.current_time == 0.0
    assert applicator.enabled is True


def test_recommended_time_step(applicator):
    dt = applicator.recommended_time_step()
    assert dt > 0.0
    assert dt < applicator.parameters.period / 10.0


def test_should_generate_waves(applicator):
    assert applicator.should_generate_waves(10.0)
    applicator.current_time = 10.0
    assert not applicator.should_generate_waves(10.0)
    applicator.current_time = 1.0
    applicator.enabled = False
    assert not applicator.should_generate_waves(10.0)


def test_update_parameters(applicator):
    new_params = DispersionSolver().solve_wave_parameters(1.0, 6.0, 3.0)
    applicator.update_parameters(new_params)
    assert applicator.parameters.h == 1.0
    assert applicator.parameters.period == 6.0
    assert applicator.boundary_surface_elevation() == 0.5


def test_status_crest_and_trough(applicator):
    status = applicator.status()
    assert status.at_wave_crest(1e-6)
    assert not status.at_wave_trough(1e-6)
    applicator.current_time = applicator.parameters.period / 2.0
    status = applicator.status()
    assert status.at_wave_trough(1e-6)
    assert not status.at_wave_crest(1e-6)


def test_status_phase_and_period_completion(applicator):
    period = applicator.parameters.period
    applicator.current_time = 1.5 * period
    status = applicator.status()
    assert status.period_completion() == pytest.approx(0.5)
    assert status.current_phase() == pytest.approx(-applicator.parameters.omega * 1.5 * period)
    assert status.current_phase() == pytest.approx(-3.0 * math.pi)


def test_status_is_a_snapshot(applicator):
    status = applicator.status()
    applicator.advance_time(1.0)
    assert status.current_time == 0.0
    assert applicator.current_time == 1.0