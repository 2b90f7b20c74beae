from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Generic, TypeVar

from boredapi.client.errors import InvalidCriterionValue
from boredapi.models.activity import ActivityType, format_real

T = TypeVar("T")

KEY_MIN = 1_000_000
KEY_MAX = 9_999_999


def _in_unit_interval(value: float) -> bool:
    return 0.0 <= value < 1.0


def _in_key_range(value: int) -> bool:
    return KEY_MIN <= value < KEY_MAX


def _always(_value: object) -> bool:
    return True


@dataclass(frozen=True, slots=True)
class ActivityCriterion(Generic[T]):
    """A query dimension: wire parameter name, value type and validity predicate.

    ``value_type`` is the runtime tag for ``T`` and is one of ``float``,
    ``int`` (unsigned) or an ``Enum`` subclass whose values are wire strings.
    """

    name: str
    value_type: type[T]
    validator: Callable[[T], bool]

    def is_valid(self, value: T) -> bool:
        return bool(self.validator(value))

    def encode(self, value: T) -> str:
        """Return the wire string for ``value`` or raise InvalidCriterionValue on a type mismatch."""
        if self.value_type is float:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidCriterionValue(self.name, value, "expected a real number")
            try:
                return format_real(float(value))
            except OverflowError:
                raise InvalidCriterionValue(self.name, value, "number out of range") from None

        if self.value_type is int:
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidCriterionValue(self.name, value, "expected an unsigned integer")
            if value < 0:
                raise InvalidCriterionValue(self.name, value, "expected an unsigned integer")
            return str(value)

        if not isinstance(value, self.value_type) or not isinstance(value, Enum):
            raise InvalidCriterionValue(self.name, value, f"expected {self.value_type.__name__}")
        return value.value


EXACT_ACCESSIBILITY: ActivityCriterion[float] = ActivityCriterion("accessibility", float, _in_unit_interval)
EXACT_PRICE: ActivityCriterion[float] = ActivityCriterion("price", float, _in_unit_interval)
KEY: ActivityCriterion[int] = ActivityCriterion("key", int, _in_key_range)
MAX_ACCESSIBILITY: ActivityCriterion[float] = ActivityCriterion("maxaccessibility", float, _in_unit_interval)
MAX_PRICE: ActivityCriterion[float] = ActivityCriterion("maxprice", float, _in_unit_interval)
MIN_ACCESSIBILITY: ActivityCriterion[float] = ActivityCriterion("minaccessibility", float, _in_unit_interval)
MIN_PRICE: ActivityCriterion[float] = ActivityCriterion("minprice", float, _in_unit_interval)
PARTICIPANTS: ActivityCriterion[int] = ActivityCriterion("participants", int, _always)
TYPE: ActivityCriterion[ActivityType] = ActivityCriterion("type", ActivityType, _always)

CATALOG: Mapping[str, ActivityCriterion] = MappingProxyType(
    {
        criterion.name: criterion
        for criterion in (
            EXACT_ACCESSIBILITY,
            EXACT_PRICE,
            KEY,
            MAX_ACCESSIBILITY,
            MAX_PRICE,
            MIN_ACCESSIBILITY,
            MIN_PRICE,
            PARTICIPANTS,
            TYPE,
        )
    }
)
