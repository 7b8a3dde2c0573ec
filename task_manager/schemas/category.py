from datetime import datetime
from typing import Optional
from pydantic import BaseModel
from sqlmodel import SQLModel


class CategoryCreate(BaseModel):
    name: str
    description: Optional[str] = None
    color: Optional[str] = None


class CategoryUpdate(BaseModel):
    """Partial update; only fields present in the payload are applied.

    An explicit null for description or color clears the stored value.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = None


class CategoryRead(SQLModel):
    id: int
    name: str
    description: Optional[str] = None
    color: Optional[str] = None
    created_at: datetime
    updated_at: datetime
