from pydantic import BaseModel, Field

from oms.config import settings

# largest page whose offset still fits a signed 64-bit integer
MAX_PAGE = (2**63 - 1) // settings.max_page_size


class Pagination(BaseModel):
    page: int = Field(..., ge=0, le=MAX_PAGE)
    page_size: int = Field(..., gt=0, le=settings.max_page_size)

    @property
    def offset(self) -> int:
        return self.page_size * self.page
