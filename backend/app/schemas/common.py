"""Response envelope shared by every JSON endpoint."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None


class CreatedOut(BaseModel):
    id: int


class OrderUpdate(BaseModel):
    order: int


class ClubRequest(BaseModel):
    club_id: str
