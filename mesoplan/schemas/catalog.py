"""Schemas for the read-only exercise catalog."""
from pydantic import BaseModel, ConfigDict

from mesoplan.models.enums import BodyPart, Equipment


class Exercise(BaseModel):
    """A catalog exercise.

    ``target`` is the catalog's own vocabulary (e.g. "pecs", "middle back");
    ``compound`` marks multi-joint movements.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    equipment: Equipment
    target: str
    body_part: BodyPart
    compound: bool = False
    is_unilateral: bool = False
