# models/schemas/order.py
from .base import TimestampModel
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, model_validator
from typing import Annotated, List, Optional, Union


# ints stay ints so whole-number totals are exact; booleans are rejected
Amount = Union[
    Annotated[StrictInt, Field(ge=0)],
    Annotated[StrictFloat, Field(ge=0, allow_inf_nan=False)],
]


class ServiceItem(BaseModel):
    """One priced line item, named by `name`, `description` or both.

    Unknown keys are kept as sent.
    """
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    amount: Amount

    @model_validator(mode="after")
    def _require_label(self):
        if not (self.name and self.name.strip()) and not (
            self.description and self.description.strip()
        ):
            raise ValueError("a service needs a name or a description")
        return self


class OrderCreate(BaseModel):
    user_id: str = Field(..., min_length=1)
    # emptiness is a business rule, checked by the service
    services: Optional[List[ServiceItem]] = None


class OrderUpdate(BaseModel):
    id: str = Field(..., min_length=1)
    services: Optional[List[ServiceItem]] = None


class OrderResponse(TimestampModel):
    id: str
    user_id: str
    services: List[ServiceItem]
    total_fee: Union[int, float]
    is_deleted: bool
