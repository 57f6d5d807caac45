import math

import pytest

from retwall.loads import derive_load_case, slope_surcharge
from retwall.models import DesignContractError, DesignInput, DesignSettings
from retwall.tables import rankine_active, rankine_active_sloped, rankine_passive, slope_angle


def _input(**overrides):
    data = dict(height=48.0, material="Concrete", surcharge="Flat", soil_stiffness="Stiff")
    data.update(overrides)
    return DesignInput(**data)


def test_level_backfill_has_no_slope_surcharge():
    lc = derive_load_case(_input())
    assert lc.active_earth_pressure_coefficient == pytest.approx(0.2827, abs=1e-4)
    assert lc.active_earth_pressure_coefficient == pytest.approx(lc.level_active_coefficient)
    assert lc.surcharge_load == 0.0
    assert lc.effective_soil_unit_weight == 120.0


def test_stiff_soil_pushes_less_than_soft_soil():
    stiff = derive_load_case(_input(soil_stiffness="Stiff"))
    soft = derive_load_case(_input(soil_stiffness="Soft"))
    assert stiff.active_earth_pressure_coefficient < soft.active_earth_pressure_coefficient
    assert stiff.allowable_bearing_pressure > soft.allowable_bearing_pressure


def test_adjacent_slab_adds_configured_surcharge():
    settings = DesignSettings(adjacent_slab_surcharge=250.0)
    lc = derive_load_case(_input(has_adjacent_slab=True), settings)
    assert lc.surcharge_load == pytest.approx(250.0)


@pytest.mark.parametrize("surcharge", ["Slope1_4", "Slope1_2", "Slope1_1"])
def test_sloped_backfill_raises_coefficient_and_surcharge(surcharge):
    flat = derive_load_case(_input())
    sloped = derive_load_case(_input(surcharge=surcharge))
    assert sloped.active_earth_pressure_coefficient > flat.active_earth_pressure_coefficient
    assert sloped.surcharge_load > 0


def test_steeper_slope_gives_more_surcharge():
    loads = [derive_load_case(_input(surcharge=s)).surcharge_load for s in ("Slope1_4", "Slope1_2", "Slope1_1")]
    assert loads == sorted(loads)


def test_slope_steeper_than_friction_angle_is_limited():
    # 1:1 (45°) behind soft soil (φ = 28°)
    lc = derive_load_case(_input(height=144.0, surcharge="Slope1_1", soil_stiffness="Soft"))
    assert lc.slope_angle == pytest.approx(28.0)
    assert lc.active_earth_pressure_coefficient == pytest.approx(math.cos(math.radians(28.0)) ** 2)


def test_topping_gives_overburden():
    lc = derive_load_case(_input(topping_depth=6.0))
    assert lc.overburden_pressure == pytest.approx(120.0 * 0.5)
    assert lc.topping_depth == 6.0


def test_slope_surcharge_matches_extra_resultant():
    ka0, ka_h, gamma, h = 0.3, 0.4, 110.0, 6.0
    q = slope_surcharge(ka_h, ka0, gamma, h)
    assert ka0 * q * h == pytest.approx(0.5 * (ka_h - ka0) * gamma * h**2)


@pytest.mark.parametrize(
    "surcharge,expected",
    [("Flat", 0.0), ("Slope1_1", 45.0), ("Slope1_2", 26.565), ("Slope1_4", 14.036)],
)
def test_slope_angles(surcharge, expected):
    assert slope_angle(surcharge) == pytest.approx(expected, abs=1e-3)


def test_rankine_coefficients():
    assert rankine_active(30.0) == pytest.approx(1.0 / 3.0)
    assert rankine_passive(30.0) == pytest.approx(3.0)
    assert rankine_active_sloped(30.0, 0.0) == pytest.approx(rankine_active(30.0))


def test_unknown_enum_values_are_contract_errors():
    with pytest.raises(DesignContractError):
        slope_angle("Slope1_3")
    with pytest.raises(DesignContractError):
        DesignSettings().soil("Rock")
