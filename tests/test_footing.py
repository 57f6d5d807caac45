import math

import pytest

from retwall.footing import _threshold, footing_thickness, heel_criteria, size_footing, toe_length
from retwall.loads import derive_load_case
from retwall.models import DesignInput, DesignSettings, Material
from retwall.sections import propose_sections
from retwall.stability import evaluate


def _scenario_a():
    design_input = DesignInput(height=48.0, material="Concrete", toe_length=12.0)
    sections = propose_sections(48.0, Material.CONCRETE, 3, 1.0)
    return design_input, sections, derive_load_case(design_input)


@pytest.mark.parametrize("height,expected", [(24.0, 8.0), (48.0, 8.0), (96.0, 11.0), (144.0, 15.0)])
def test_thickness_rule(height, expected):
    assert footing_thickness(height, DesignSettings()) == expected


def test_thickness_rule_respects_requested_minimum():
    assert footing_thickness(48.0, DesignSettings(), min_thickness=20.0) == 20.0


def test_toe_rule():
    settings = DesignSettings()
    assert toe_length(48.0, 12.0, settings) == 12.0
    assert toe_length(48.0, 0.0, settings) == 5.0
    assert toe_length(48.0, 0.0, DesignSettings(toe_ratio=0.0)) == 1.0


@pytest.mark.parametrize(
    "a,b,c,expected",
    [
        (1.0, 0.0, -4.0, 2.0),
        (0.0, 2.0, -4.0, 2.0),
        (1.0, 0.0, 1.0, -math.inf),
        (0.0, 0.0, 1.0, -math.inf),
        (0.0, -1.0, 0.0, None),
        (-1.0, 0.0, 10.0, None),
        (0.0, 0.0, -1.0, None),
    ],
)
def test_threshold(a, b, c, expected):
    assert _threshold(a, b, c) == expected


def test_scenario_a_footing_is_governed_by_sliding():
    design_input, sections, lc = _scenario_a()
    footing = size_footing(sections, lc, design_input.toe_length)
    assert (footing.toe, footing.heel, footing.thickness) == (12.0, 11.0, 8.0)

    criteria = heel_criteria(sections, lc, footing.toe, footing.thickness, DesignSettings())
    governing = max((u for u in criteria.values() if u is not None))
    assert governing == criteria["sliding"]
    assert governing == pytest.approx(2.615, abs=1e-3)


@pytest.mark.parametrize("height", [24.0, 48.0, 72.0, 96.0, 120.0])
@pytest.mark.parametrize("surcharge", ["Flat", "Slope1_2"])
def test_sized_footing_passes_the_checker(height, surcharge):
    design_input = DesignInput(height=height, material="Concrete", surcharge=surcharge)
    lc = derive_load_case(design_input)
    sections = propose_sections(height, Material.CONCRETE, 3, 1.0)
    footing = size_footing(sections, lc, 0.0)
    assert footing.heel >= 1.0
    assert evaluate(sections, footing, lc).passed


def test_heel_is_the_smallest_whole_inch():
    design_input, sections, lc = _scenario_a()
    footing = size_footing(sections, lc, design_input.toe_length)
    shorter = footing.model_copy(update={"heel": footing.heel - 1.0})
    assert evaluate(sections, footing, lc).passed
    assert not evaluate(sections, shorter, lc).passed
