import pytest

from boredapi.client.errors import InvalidCriterionValue
from boredapi.models.activity import ActivityType
from boredapi.query import criteria
from boredapi.query.selection import CriteriaSelection


class TestCriteriaSelection:
    def test_starts_empty(self) -> None:
        selection = CriteriaSelection()
        assert selection.parameters == {}
        assert len(selection) == 0

    def test_set_chains_and_encodes(self) -> None:
        selection = (
            CriteriaSelection()
            .set(criteria.TYPE, ActivityType.cooking)
            .set(criteria.PARTICIPANTS, 2)
            .set(criteria.MAX_PRICE, 0.5)
        )
        assert selection.parameters == {"type": "cooking", "participants": "2", "maxprice": "0.5"}
        assert "type" in selection

    def test_set_returns_same_instance(self) -> None:
        selection = CriteriaSelection()
        assert selection.set(criteria.KEY, 3943506) is selection

    def test_same_criterion_overwrites(self) -> None:
        selection = CriteriaSelection().set(criteria.PARTICIPANTS, 1).set(criteria.PARTICIPANTS, 3)
        assert selection.parameters == {"participants": "3"}
        assert len(selection) == 1

    def test_parameters_is_a_copy(self) -> None:
        selection = CriteriaSelection().set(criteria.PARTICIPANTS, 1)
        selection.parameters["participants"] = "9"
        assert selection.parameters == {"participants": "1"}

    def test_copy_is_independent(self) -> None:
        original = CriteriaSelection().set(criteria.PARTICIPANTS, 1)
        clone = original.copy().set(criteria.TYPE, ActivityType.music)
        assert original.parameters == {"participants": "1"}
        assert clone.parameters == {"participants": "1", "type": "music"}
        assert clone != original

    def test_out_of_range_value_is_rejected(self) -> None:
        selection = CriteriaSelection()
        with pytest.raises(InvalidCriterionValue) as exc_info:
            selection.set(criteria.EXACT_ACCESSIBILITY, -0.2)
        assert exc_info.value.criterion == "accessibility"
        assert selection.parameters == {}

    def test_validation_can_be_deferred_to_service(self) -> None:
        selection = CriteriaSelection(validate=False).set(criteria.EXACT_ACCESSIBILITY, -0.2)
        assert selection.parameters == {"accessibility": "-0.2"}

    def test_type_errors_are_raised_even_without_validation(self) -> None:
        with pytest.raises(InvalidCriterionValue):
            CriteriaSelection(validate=False).set(criteria.TYPE, "busywork")
