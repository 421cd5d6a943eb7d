"""Navigation menu tree contract."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MenuItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    parent_id: Optional[int] = Field(default=None, alias="parentId")
    title: str
    url: str
    page_type_id: int = Field(alias="pageTypeId")
    sort_order: int = Field(alias="sortOrder")
    children: List["MenuItem"] = []


MenuItem.model_rebuild()
