import logging
from typing import List, Optional
from sqlalchemy import nulls_last
from sqlmodel import Session, select
from ..core.config import settings
from ..schemas.tasks import Task, TaskIn, TaskUpdate
from ..services.validation import ensure_valid
from .models import TaskRow

logger = logging.getLogger(__name__)

_EDITABLE = ("title", "description", "due_date", "completed")


def _to_task(row: TaskRow) -> Task:
    return Task(
        id=row.id,
        title=row.title,
        description=row.description,
        due_date=row.due_date,
        completed=row.completed,
    )


def _commit(session: Session, row: TaskRow) -> Task:
    session.add(row)
    try:
        session.commit()
    except Exception:
        # leave the session usable for the caller
        session.rollback()
        raise
    session.refresh(row)
    return _to_task(row)


def create_task(session: Session, task: TaskIn) -> Task:
    ensure_valid(task)
    # the store assigns the id, so one supplied by the caller is dropped
    row = TaskRow(**{f: getattr(task, f) for f in _EDITABLE})
    created = _commit(session, row)
    logger.info("Created task %s", created.id)
    return created


def save_task(session: Session, task: Task) -> Optional[Task]:
    if task.id is None:
        return create_task(session, task)
    ensure_valid(task)
    row = session.get(TaskRow, task.id)
    if row is None:
        logger.warning("Cannot save task %s: not found", task.id)
        return None
    for f in _EDITABLE:
        setattr(row, f, getattr(task, f))
    return _commit(session, row)


def update_task(session: Session, task_id: int, changes: TaskUpdate) -> Optional[Task]:
    row = session.get(TaskRow, task_id)
    if row is None:
        logger.warning("Cannot update task %s: not found", task_id)
        return None
    # rebuilt through the model so a null completed fails before any write
    merged = Task.model_validate({**_to_task(row).model_dump(), **changes.model_dump(exclude_unset=True)})
    ensure_valid(merged)
    for f in _EDITABLE:
        setattr(row, f, getattr(merged, f))
    return _commit(session, row)


def get_task(session: Session, task_id: int) -> Optional[Task]:
    row = session.get(TaskRow, task_id)
    logger.debug("Lookup task %s: %s", task_id, "hit" if row else "miss")
    return _to_task(row) if row is not None else None


def list_tasks(session: Session, completed: Optional[bool] = None, limit: Optional[int] = None) -> List[Task]:
    stmt = select(TaskRow)
    if completed is not None:
        stmt = stmt.where(TaskRow.completed == completed)
    limit = settings.LIST_LIMIT if limit is None else limit
    stmt = stmt.order_by(nulls_last(TaskRow.due_date.asc()), TaskRow.id).limit(limit)
    return [_to_task(r) for r in session.exec(stmt).all()]


def delete_task(session: Session, task_id: int) -> bool:
    row = session.get(TaskRow, task_id)
    if row is None:
        logger.warning("Cannot delete task %s: not found", task_id)
        return False
    session.delete(row)
    try:
        session.commit()
    except Exception:
        session.rollback()
        raise
    logger.info("Deleted task %s", task_id)
    return True
