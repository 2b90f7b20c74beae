from pydantic import BaseModel

from boredapi.models.activity import ActivityType


class ActivityRead(BaseModel):
    description: str
    accessibility: float
    activity_type: ActivityType
    participants: int
    price: float
    link: str | None
    key: int

    model_config = {"from_attributes": True, "frozen": True}
