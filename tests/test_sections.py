import pytest

from retwall.models import DesignContractError, DesignSettings, Material, total_height
from retwall.sections import propose_sections, section_count, width_steps


def test_short_concrete_wall_is_one_section():
    sections = propose_sections(48.0, Material.CONCRETE, 3, 1.0)
    assert len(sections) == 1
    assert sections[0].height_above_footing == 48.0
    assert sections[0].width == 9.0


def test_tall_wall_steps_back_upward():
    sections = propose_sections(144.0, Material.CONCRETE, 3, 2.0)
    assert [s.height_above_footing for s in sections] == [48.0, 48.0, 48.0]
    assert [s.width for s in sections] == [14.0, 12.0, 10.0]


def test_cmu_upper_sections_are_whole_courses():
    sections = propose_sections(100.0, Material.CMU, 3, 2.0)
    assert [s.height_above_footing for s in sections] == [36.0, 32.0, 32.0]
    assert all(s.height_above_footing % 8 == 0 for s in sections[1:])


@pytest.mark.parametrize("height", [24.0, 47.0, 50.5, 72.0, 99.9, 121.0, 144.0])
@pytest.mark.parametrize("material", [Material.CONCRETE, Material.CMU])
def test_heights_sum_exactly(height, material):
    sections = propose_sections(height, material, 3, 2.0)
    assert total_height(sections) == height
    widths = [s.width for s in sections]
    assert widths == sorted(widths, reverse=True)
    assert len(set(widths)) == len(widths)


def test_max_sections_limits_count():
    assert len(propose_sections(144.0, Material.CONCRETE, 1, 1.0)) == 1
    assert section_count(144.0, DesignSettings(max_sections=2)) == 2
    assert section_count(24.0, DesignSettings()) == 1


@pytest.mark.parametrize("step", [0.0, -2.0, 3.0])
def test_bad_cmu_width_step_is_rejected(step):
    with pytest.raises(DesignContractError):
        propose_sections(48.0, Material.CMU, 3, step)


def test_width_steps_reach_material_maximum():
    steps = width_steps(1, Material.CONCRETE)
    assert steps[0] == 1.0
    assert steps[-1] == 16.0  # 8 + 16 = 24 in
    assert width_steps(3, Material.CMU) == [2.0]


def test_width_steps_are_thinned_to_max_iterations():
    steps = width_steps(1, Material.CONCRETE, DesignSettings(max_iterations=5))
    assert len(steps) == 5
    assert steps[0] == 1.0 and steps[-1] == 16.0
