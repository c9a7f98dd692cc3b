from datetime import date
from typing import Optional
from sqlmodel import SQLModel, Field

class TaskRow(SQLModel, table=True):
    __tablename__ = "Tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False)
    description: Optional[str] = None
    due_date: Optional[date] = None
    completed: bool = Field(default=False, nullable=False)
