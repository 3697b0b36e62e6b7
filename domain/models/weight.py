"""
Weight value variants.

A prescribed weight is either a single value (``ScalarWeight``), one value per
set (``PerSetWeight``), or ``UnavailableWeight`` when the member has not
recorded the max for that lift. The ``kind`` field is the discriminator, so
API consumers branch on it instead of inspecting value shapes.
"""

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field


class ScalarWeight(BaseModel):
    kind: Literal["scalar"] = "scalar"
    value: float


class PerSetWeight(BaseModel):
    kind: Literal["per_set"] = "per_set"
    values: List[float] = Field(default_factory=list)


class UnavailableWeight(BaseModel):
    kind: Literal["unavailable"] = "unavailable"


Weight = Annotated[
    Union[ScalarWeight, PerSetWeight, UnavailableWeight],
    Field(discriminator="kind"),
]
