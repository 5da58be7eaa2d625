from pydantic import BaseModel, ConfigDict, field_validator
from datetime import datetime

from oms.utils.common import as_utc

class TimestampModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # some backends hand timestamps back without tzinfo
        return as_utc(value)
