import pytest

from retwall.loads import derive_load_case
from retwall.models import DesignInput, DesignSettings, SearchState, StabilityResult, total_height
from retwall.optimizer import optimize, thickness_grid


def _verdict(passed: bool, failed=("sliding",)) -> StabilityResult:
    return StabilityResult(
        overturning_factor=2.0,
        sliding_factor=1.6 if passed else 1.2,
        bearing_factor=2.0,
        passed=passed,
        failed_checks=() if passed else failed,
        max_bearing_pressure=1000.0,
        eccentricity=0.1,
    )


def _passes_from(thickness: float):
    def fake_evaluate(sections, footing, load_case, settings=None):
        return _verdict(footing.thickness >= thickness)
    return fake_evaluate


def _input(**overrides):
    data = dict(height=48.0, material="Concrete", toe_length=12.0)
    data.update(overrides)
    return DesignInput(**data)


def test_thickness_grid_whole_inches():
    assert thickness_grid(8.0, 12.0, 50) == [8.0, 9.0, 10.0, 11.0, 12.0]
    assert thickness_grid(8.0, 36.0, 5) == [8.0, 15.0, 22.0, 29.0, 36.0]
    assert thickness_grid(40.0, 36.0, 5) == []


def test_minimize_excavation_takes_first_passing_thickness(monkeypatch):
    monkeypatch.setattr("retwall.optimizer.evaluate", _passes_from(14.0))
    design_input = _input()
    result = optimize(design_input, derive_load_case(design_input))

    assert result.state is SearchState.CONVERGED
    assert result.candidate.footing.thickness == 14.0
    assert result.iterations == 7  # 8..14
    assert [p.parameter for p in result.trace] == [8.0, 9.0, 10.0, 11.0, 12.0, 13.0, 14.0]


def test_coarse_grid_is_refined_by_bisection(monkeypatch):
    monkeypatch.setattr("retwall.optimizer.evaluate", _passes_from(14.0))
    design_input = _input()
    settings = DesignSettings(max_iterations=5)
    result = optimize(design_input, derive_load_case(design_input, settings), settings)

    assert result.state is SearchState.CONVERGED
    assert result.candidate.footing.thickness == 14.0
    # 8, 15 on the grid, then 11, 13, 14
    assert [p.parameter for p in result.trace] == [8.0, 15.0, 11.0, 13.0, 14.0]


def test_nothing_passes_is_infeasible_with_last_verdict(monkeypatch):
    monkeypatch.setattr("retwall.optimizer.evaluate", _passes_from(100.0))
    design_input = _input()
    result = optimize(design_input, derive_load_case(design_input))

    assert result.state is SearchState.INFEASIBLE
    assert result.candidate is None
    assert result.last_stability.failed_checks == ("sliding",)
    assert "sliding" in result.reason
    assert result.iterations == len(thickness_grid(8.0, 36.0, 50))


def test_thickness_rule_beyond_limit_is_infeasible():
    design_input = _input(height=144.0)
    settings = DesignSettings(max_footing_thickness=12.0)
    result = optimize(design_input, derive_load_case(design_input, settings), settings)
    assert result.state is SearchState.INFEASIBLE
    assert "thickness rule" in result.reason
    assert result.iterations == 1


def test_minimize_footing_sweeps_width_steps(monkeypatch):
    monkeypatch.setattr("retwall.optimizer.evaluate", _passes_from(0.0))
    design_input = _input(optimization_objective="MinimizeFooting")
    result = optimize(design_input, derive_load_case(design_input))

    assert result.state is SearchState.CONVERGED
    # one trace point per width step (1..16 in for one concrete section)
    assert [p.parameter for p in result.trace] == [float(s) for s in range(1, 17)]
    best = min(p.footprint for p in result.trace)
    assert result.candidate.footing.footprint == best


@pytest.mark.parametrize("height", [36.0, 72.0, 120.0])
@pytest.mark.parametrize("material", ["Concrete", "CMU"])
def test_minimize_footing_never_larger_than_minimize_excavation(height, material):
    excavation = _input(height=height, material=material, toe_length=0.0)
    footing = _input(height=height, material=material, toe_length=0.0, optimization_objective="MinimizeFooting")
    lc = derive_load_case(excavation)

    a = optimize(excavation, lc)
    b = optimize(footing, lc)
    assert a.state is SearchState.CONVERGED and b.state is SearchState.CONVERGED
    assert b.candidate.footing.footprint <= a.candidate.footing.footprint
    assert total_height(b.candidate.sections) == height


def test_footing_width_is_held_at_limit():
    design_input = _input(height=144.0, surcharge="Slope1_1", soil_stiffness="Soft", toe_length=0.0)
    settings = DesignSettings()
    result = optimize(design_input, derive_load_case(design_input, settings), settings)

    assert result.state is SearchState.INFEASIBLE
    assert "footing width held" in result.reason
    assert result.last_stability is not None and not result.last_stability.passed


def test_footprint_floor_lengthens_the_heel(monkeypatch):
    monkeypatch.setattr("retwall.optimizer.evaluate", _passes_from(0.0))
    design_input = _input()
    result = optimize(design_input, derive_load_case(design_input), DesignSettings(), min_footprint=40.0)

    assert result.state is SearchState.CONVERGED
    footing = result.candidate.footing
    assert (footing.toe, footing.heel, footing.footprint) == (12.0, 28.0, 40.0)
    assert result.iterations == 1


def test_floor_beyond_width_limit_does_not_qualify(monkeypatch):
    monkeypatch.setattr("retwall.optimizer.evaluate", _passes_from(0.0))
    design_input = _input()
    result = optimize(design_input, derive_load_case(design_input), DesignSettings(), min_footprint=200.0)

    assert result.state is SearchState.INFEASIBLE
    assert "footing width held at 180 in" in result.reason
    assert not any(p.passed for p in result.trace)


@pytest.mark.parametrize("objective", ["MinimizeExcavation", "MinimizeFooting"])
def test_toe_and_stem_wider_than_limit_never_qualify(monkeypatch, objective):
    monkeypatch.setattr("retwall.optimizer.evaluate", _passes_from(0.0))
    design_input = _input(toe_length=20.0, optimization_objective=objective)
    settings = DesignSettings(max_footing_width=24.0)
    result = optimize(design_input, derive_load_case(design_input, settings), settings)

    assert result.state is SearchState.INFEASIBLE
    assert result.candidate is None
    assert "toe and stem alone exceed 24 in" in result.reason
    assert not any(p.passed for p in result.trace)
