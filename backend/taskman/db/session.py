import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy.engine import Engine, make_url
from sqlmodel import SQLModel, create_engine, Session
from ..core.config import settings

logger = logging.getLogger(__name__)


def make_engine(url: Optional[str] = None) -> Engine:
    url = url or settings.DATABASE_URL
    connect_args = {}
    if make_url(url).get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    # SQL output goes through the sqlalchemy.engine logger, see setup_logging
    return create_engine(url, echo=False, connect_args=connect_args)

engine = make_engine()


def _ensure_sqlite_dir(bind: Engine) -> None:
    url = bind.url
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def init_db(bind: Optional[Engine] = None) -> None:
    from . import models  # noqa: F401
    bind = bind or engine
    _ensure_sqlite_dir(bind)
    SQLModel.metadata.create_all(bind)
    logger.info("Tables ready on %s", bind.url.render_as_string(hide_password=True))


@contextmanager
def session_scope(bind: Optional[Engine] = None) -> Iterator[Session]:
    with Session(bind or engine) as session:
        try:
            yield session
        except Exception:
            session.rollback()
            raise
