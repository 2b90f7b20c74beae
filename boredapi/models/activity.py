from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


def format_real(value: float) -> str:
    """Plain decimal text for a float: no exponent, no trailing ``.0`` on whole numbers."""
    # repr() is locale independent; Decimal drops the exponent form (1e-05).
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        return text[:-2]
    return text


class ActivityType(str, Enum):
    education = "education"
    recreational = "recreational"
    social = "social"
    diy = "diy"
    charity = "charity"
    cooking = "cooking"
    relaxation = "relaxation"
    music = "music"
    busywork = "busywork"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Activity:
    description: str
    accessibility: float
    activity_type: ActivityType
    participants: int
    price: float
    link: str | None
    key: int

    def __str__(self) -> str:
        return (
            f"Activity(description={self.description}, accessibility={format_real(self.accessibility)}, "
            f"activity_type={self.activity_type.value}, participants={self.participants}, "
            f"price={format_real(self.price)}, link={self.link if self.link is not None else 'None'}, "
            f"key={self.key})"
        )
