from dataclasses import FrozenInstanceError

import pytest

from boredapi.models.activity import Activity, ActivityType
from boredapi.schemas.activity import ActivityRead


WIRE_NAMES = [
    "education",
    "recreational",
    "social",
    "diy",
    "charity",
    "cooking",
    "relaxation",
    "music",
    "busywork",
]


def _activity(**overrides) -> Activity:
    fields = {
        "description": "Learn Rust",
        "accessibility": 0.3,
        "activity_type": ActivityType.education,
        "participants": 1,
        "price": 0.0,
        "link": None,
        "key": 3943506,
    }
    fields.update(overrides)
    return Activity(**fields)


class TestActivityType:
    def test_has_exactly_nine_variants(self) -> None:
        assert sorted(member.value for member in ActivityType) == sorted(WIRE_NAMES)

    @pytest.mark.parametrize("member", list(ActivityType))
    def test_wire_round_trip(self, member: ActivityType) -> None:
        assert ActivityType(member.value) is member

    @pytest.mark.parametrize("wire", ["skydiving", "Education", "BUSYWORK", "", " music"])
    def test_unknown_wire_string_is_rejected(self, wire: str) -> None:
        with pytest.raises(ValueError):
            ActivityType(wire)

    def test_str_is_wire_name(self) -> None:
        assert str(ActivityType.diy) == "diy"


class TestActivity:
    def test_is_immutable(self) -> None:
        activity = _activity()
        with pytest.raises(FrozenInstanceError):
            activity.price = 0.5  # type: ignore[misc]

    def test_display_without_link(self) -> None:
        assert str(_activity()) == (
            "Activity(description=Learn Rust, accessibility=0.3, activity_type=education, "
            "participants=1, price=0, link=None, key=3943506)"
        )

    def test_display_with_link(self) -> None:
        text = str(_activity(link="https://www.rust-lang.org/learn"))
        assert "link=https://www.rust-lang.org/learn" in text

    def test_read_schema_from_entity(self) -> None:
        read = ActivityRead.model_validate(_activity(activity_type=ActivityType.music))
        assert read.activity_type == ActivityType.music
        assert read.key == 3943506
        assert read.model_dump(mode="json")["activity_type"] == "music"
