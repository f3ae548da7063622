import pytest

from link_planner.application.state import PlannerState
from link_planner.domain.exceptions import (
    FrequencyMismatchError,
    LinkNotFoundError,
    TowerNotFoundError,
    ValidationError,
)
from link_planner.domain.models.geo import Coordinates

A = Coordinates(13.027, 77.545)
B = Coordinates(13.035, 77.560)


class TestAddTower:
    def test_default_frequency(self, planner_state):
        tower = planner_state.add_tower(A)
        assert tower.id == "T1"
        assert tower.frequency_ghz == 5.8
        assert planner_state.towers == {"T1": tower}

    def test_configured_default_frequency(self):
        state = PlannerState(default_frequency_ghz=2.4)
        assert state.add_tower(A).frequency_ghz == 2.4

    def test_explicit_frequency(self, planner_state):
        assert planner_state.add_tower(A, 24).frequency_ghz == 24.0

    def test_invalid_position(self, planner_state):
        with pytest.raises(ValidationError):
            planner_state.add_tower(Coordinates(95.0, 0.0))
        assert planner_state.towers == {}

    def test_invalid_frequency(self, planner_state):
        with pytest.raises(ValidationError):
            planner_state.add_tower(A, 0)

    def test_insertion_order(self, planner_state):
        ids = [planner_state.add_tower(A).id for _ in range(4)]
        assert list(planner_state.towers) == ids == ["T1", "T2", "T3", "T4"]


class TestEditFrequency:
    def test_edit(self, planner_state):
        tower = planner_state.add_tower(A)
        planner_state.edit_frequency(tower.id, "2.4")
        assert tower.frequency_ghz == 2.4

    @pytest.mark.parametrize("value", ["abc", 0, -1.0])
    def test_invalid_value_keeps_frequency(self, planner_state, value):
        tower = planner_state.add_tower(A)
        with pytest.raises(ValidationError):
            planner_state.edit_frequency(tower.id, value)
        assert tower.frequency_ghz == 5.8

    def test_unknown_tower(self, planner_state):
        with pytest.raises(TowerNotFoundError):
            planner_state.edit_frequency("T42", 5.8)

    def test_existing_links_are_kept(self, planner_state):
        """Editing after creation leaves a mismatched link in place."""
        a = planner_state.add_tower(A)
        b = planner_state.add_tower(B)
        link = planner_state.create_link(a.id, b.id)
        planner_state.edit_frequency(b.id, 2.4)
        assert planner_state.links == {link.id: link}


class TestCreateLink:
    def test_shared_id_counter(self, planner_state):
        a = planner_state.add_tower(A)
        b = planner_state.add_tower(B)
        link = planner_state.create_link(a.id, b.id)
        assert (link.id, link.tower_a_id, link.tower_b_id) == ("L3", "T1", "T2")
        assert planner_state.add_tower(A).id == "T4"

    def test_frequency_mismatch(self, planner_state):
        a = planner_state.add_tower(A, 5.8)
        b = planner_state.add_tower(B, 2.4)
        with pytest.raises(FrequencyMismatchError):
            planner_state.create_link(a.id, b.id)
        assert planner_state.links == {}

    def test_same_tower(self, planner_state):
        a = planner_state.add_tower(A)
        with pytest.raises(ValidationError, match="itself"):
            planner_state.create_link(a.id, a.id)

    def test_identical_positions_are_allowed(self, planner_state):
        a = planner_state.add_tower(A)
        b = planner_state.add_tower(A)
        assert planner_state.create_link(a.id, b.id).id == "L3"

    def test_unknown_tower(self, planner_state):
        a = planner_state.add_tower(A)
        with pytest.raises(TowerNotFoundError):
            planner_state.create_link(a.id, "T99")


class TestLookups:
    def test_get_link(self, planner_state):
        a = planner_state.add_tower(A)
        b = planner_state.add_tower(B)
        link = planner_state.create_link(a.id, b.id)
        assert planner_state.get_link("L3") is link
        with pytest.raises(LinkNotFoundError):
            planner_state.get_link("L1")

    def test_link_towers_with_missing_tower(self, planner_state):
        a = planner_state.add_tower(A)
        b = planner_state.add_tower(B)
        link = planner_state.create_link(a.id, b.id)
        del planner_state.towers[b.id]
        assert planner_state.link_towers(link) == (a, None)
        assert planner_state.link_distance(link) == 0.0

    def test_link_distance(self, planner_state):
        a = planner_state.add_tower(A)
        b = planner_state.add_tower(B)
        link = planner_state.create_link(a.id, b.id)
        # 0.008° lat and 0.015° lon at 13°N
        assert planner_state.link_distance(link) == pytest.approx(1852, rel=0.01)
