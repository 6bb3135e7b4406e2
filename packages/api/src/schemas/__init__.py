# This project was developed with assistance from AI tools.
"""Schema components shared by list responses."""

from pydantic import BaseModel


class Pagination(BaseModel):
    """Offset pagination block attached to every list response."""

    total: int
    offset: int
    limit: int
    has_more: bool

    @classmethod
    def single_page(cls, total: int) -> "Pagination":
        return cls(total=total, offset=0, limit=total, has_more=False)
