import logging
from typing import Optional
from sqlalchemy.engine import Engine
from .core.config import settings
from .core.logging_setup import setup_logging
from .db.session import engine, init_db

logger = logging.getLogger(__name__)

def bootstrap(bind: Optional[Engine] = None) -> Engine:
    setup_logging(settings.LOG_LEVEL, sql_echo=settings.SQL_ECHO)
    bind = bind or engine
    init_db(bind)
    logger.info("%s ready", settings.APP_NAME)
    return bind

if __name__ == "__main__":
    bootstrap()
