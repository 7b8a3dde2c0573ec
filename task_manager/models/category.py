from datetime import datetime
from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from .task import utcnow

NAME_MAX_LENGTH = 100
CATEGORY_DESCRIPTION_MAX_LENGTH = 500


class Category(SQLModel, table=True):
    """A named, optionally colored label attached to tasks."""
    __tablename__ = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=NAME_MAX_LENGTH, unique=True, index=True)
    description: Optional[str] = Field(default=None, max_length=CATEGORY_DESCRIPTION_MAX_LENGTH)
    color: Optional[str] = Field(default=None, max_length=7)
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)


class TaskCategoryLink(SQLModel, table=True):
    """Join row linking one task to one category."""
    __tablename__ = "task_categories"

    task_id: int = Field(foreign_key="tasks.id", primary_key=True, ondelete="CASCADE", index=True)
    category_id: int = Field(
        foreign_key="categories.id", primary_key=True, ondelete="CASCADE", index=True
    )
