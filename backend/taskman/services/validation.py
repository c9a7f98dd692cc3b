import logging
from typing import List

from ..core.errors import ValidationError

logger = logging.getLogger(__name__)

TITLE_REQUIRED = "Title is required"


def validate_task(task) -> List[ValidationError]:
    """Return every validation failure for ``task``; an empty list means valid.

    Only the title is checked. Any object with a ``title`` attribute works,
    so input schemas, records and rows all go through the same rule.
    """
    errors = []
    if getattr(task, "title", None) is None:
        errors.append(ValidationError("title", TITLE_REQUIRED))
    return errors


def ensure_valid(task):
    errors = validate_task(task)
    if errors:
        logger.warning("Rejected task: %s", "; ".join(e.message for e in errors))
        raise errors[0]
    return task
