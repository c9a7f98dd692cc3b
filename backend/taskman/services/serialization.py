from typing import Any, Dict, Iterable, List

from pydantic import TypeAdapter

from ..schemas.tasks import Task

# wire names are the record's field names, except due_date which goes out as dueDate

_TASK_LIST = TypeAdapter(List[Task])


def task_to_dict(task: Task) -> Dict[str, Any]:
    return task.model_dump(mode="json", by_alias=True)


def task_from_dict(data: Dict[str, Any]) -> Task:
    return Task.model_validate(data)


def task_to_json(task: Task) -> str:
    return task.model_dump_json(by_alias=True)


def task_from_json(text: str) -> Task:
    return Task.model_validate_json(text)


def tasks_to_json(tasks: Iterable[Task]) -> str:
    return _TASK_LIST.dump_json(list(tasks), by_alias=True).decode()
