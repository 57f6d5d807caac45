import math

import pytest

from retwall.loads import derive_load_case
from retwall.models import DesignInput, DesignSettings, Footing, Material
from retwall.sections import propose_sections
from retwall.stability import evaluate, max_base_pressure, wall_forces


def _scenario_a():
    design_input = DesignInput(height=48.0, material="Concrete", toe_length=12.0)
    sections = propose_sections(48.0, Material.CONCRETE, 3, 1.0)
    return sections, derive_load_case(design_input)


def test_scenario_a_factors():
    sections, lc = _scenario_a()
    result = evaluate(sections, Footing(toe=12.0, heel=11.0, thickness=8.0), lc)

    assert result.passed
    assert result.failed_checks == ()
    assert result.overturning_factor == pytest.approx(3.39, rel=1e-2)
    assert result.sliding_factor == pytest.approx(1.537, abs=5e-3)
    assert result.max_bearing_pressure == pytest.approx(578.0, rel=1e-2)
    assert result.bearing_factor == pytest.approx(3000.0 / result.max_bearing_pressure)
    assert 0 < result.eccentricity < (32.0 / 12.0) / 6.0


def test_short_heel_fails_sliding_only():
    sections, lc = _scenario_a()
    result = evaluate(sections, Footing(toe=12.0, heel=10.0, thickness=8.0), lc)
    assert not result.passed
    assert result.failed_checks == ("sliding",)
    assert result.sliding_factor == pytest.approx(1.478, abs=5e-3)


def test_passive_resistance_can_be_switched_off():
    sections, lc = _scenario_a()
    footing = Footing(toe=12.0, heel=11.0, thickness=8.0)
    with_passive = evaluate(sections, footing, lc)
    without = evaluate(sections, footing, lc, DesignSettings(include_passive=False))
    assert without.sliding_factor < with_passive.sliding_factor
    assert without.overturning_factor == pytest.approx(with_passive.overturning_factor)


def test_higher_minimums_fail_the_same_wall():
    sections, lc = _scenario_a()
    footing = Footing(toe=12.0, heel=11.0, thickness=8.0)
    result = evaluate(sections, footing, lc, DesignSettings(min_overturning_factor=4.0, min_bearing_factor=6.0))
    assert result.failed_checks == ("overturning", "bearing")


def test_weights_cover_every_part():
    sections = propose_sections(120.0, Material.CONCRETE, 3, 2.0)
    lc = derive_load_case(DesignInput(height=120.0, material="Concrete", topping_depth=6.0))
    forces = wall_forces(sections, Footing(toe=12.0, heel=40.0, thickness=13.0), lc, DesignSettings())
    names = [item.name for item in forces.weights]
    assert names[:5] == ["section 1", "section 2", "step soil 2", "section 3", "step soil 3"]
    assert {"topping", "footing", "heel soil"} <= set(names)
    assert forces.base_width == pytest.approx((12.0 + 14.0 + 40.0) / 12.0)


def test_trapezoidal_pressure_with_centered_resultant():
    q, e = max_base_pressure(1000.0, 1500.0, 3.0)
    assert e == pytest.approx(0.0)
    assert q == pytest.approx(1000.0 / 3.0)


def test_triangular_pressure_outside_middle_third():
    # x = 0.5 ft from the toe on a 3 ft base: contact length 1.5 ft
    q, e = max_base_pressure(1000.0, 500.0, 3.0)
    assert e == pytest.approx(1.0)
    assert q == pytest.approx(2.0 * 1000.0 / 1.5)


def test_resultant_outside_base_has_no_bearing():
    q, _ = max_base_pressure(1000.0, -10.0, 3.0)
    assert math.isinf(q)
