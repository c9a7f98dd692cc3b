from datetime import date
from typing import Optional
from pydantic import BaseModel, Field

class TaskIn(BaseModel):
    # title stays optional here; a missing title is reported by validate_task
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = Field(default=None, alias="dueDate")
    completed: bool = False

    class Config:
        populate_by_name = True

class Task(TaskIn):
    """Caller-owned copy of one row of the Tasks table."""
    id: Optional[int] = None

class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = Field(default=None, alias="dueDate")
    completed: Optional[bool] = None

    class Config:
        populate_by_name = True
