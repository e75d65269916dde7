# ============================================================================
# FILE: songbook/main.py
# ============================================================================
from typing import Optional
from sqlalchemy.engine import Engine
from songbook.core.logging import setup_logging
from songbook.config import settings
from songbook.db.base import Base
from songbook.db.models import playlist, user  # noqa: F401  (registers tables)
import logging

logger = logging.getLogger(__name__)

def init_db(bind: Optional[Engine] = None) -> None:
    """Create database tables that do not exist yet"""
    if bind is None:
        from songbook.db.session import engine
        bind = engine
    Base.metadata.create_all(bind=bind)

def init_app(bind: Optional[Engine] = None) -> None:
    """Initialize logging and storage on startup"""
    setup_logging()
    logger.info(f"Starting {settings.APP_NAME}")
    init_db(bind)
