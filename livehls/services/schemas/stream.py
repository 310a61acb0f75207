# livehls/services/schemas/stream.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from livehls.domain.entities.stream import SelectionConstraint


class StreamQuery(BaseModel):
    url: str = Field("", examples=["https://www.youtube.com/@AlekhbariahSY/live"])
    target_height: Optional[int] = Field(None, examples=[720])
    min_height: int = Field(0, examples=[480])

    def to_constraint(self) -> SelectionConstraint:
        return SelectionConstraint.from_raw(self.target_height, self.min_height)
