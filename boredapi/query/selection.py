from typing import TypeVar

from boredapi.client.errors import InvalidCriterionValue
from boredapi.query.criteria import ActivityCriterion

T = TypeVar("T")


class CriteriaSelection:
    """Wire parameters accumulated from applied criteria.

    One binding per wire name; applying a criterion again replaces its value.
    An empty selection asks the service for a random activity.
    """

    def __init__(self, *, validate: bool = True):
        self.validate = validate
        self._parameters: dict[str, str] = {}

    def set(self, criterion: ActivityCriterion[T], value: T) -> "CriteriaSelection":
        wire_value = criterion.encode(value)
        if self.validate and not criterion.is_valid(value):
            raise InvalidCriterionValue(criterion.name, value, "outside the accepted range")
        self._parameters[criterion.name] = wire_value
        return self

    @property
    def parameters(self) -> dict[str, str]:
        return dict(self._parameters)

    def copy(self) -> "CriteriaSelection":
        clone = CriteriaSelection(validate=self.validate)
        clone._parameters = dict(self._parameters)
        return clone

    def __contains__(self, name: object) -> bool:
        return name in self._parameters

    def __len__(self) -> int:
        return len(self._parameters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CriteriaSelection):
            return NotImplemented
        return self._parameters == other._parameters

    __hash__ = None

    def __repr__(self) -> str:
        return f"CriteriaSelection({self._parameters!r})"
