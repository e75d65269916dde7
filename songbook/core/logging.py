# ============================================================================
# FILE: songbook/core/logging.py
# ============================================================================
import logging
import sys
from typing import Optional
from songbook.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging for the application"""
    level = (level or settings.LOG_LEVEL).upper()
    if settings.DEBUG:
        level = "DEBUG"
    
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    
    root = logging.getLogger()
    # Replace handlers from a previous call instead of stacking them
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    
    # SQL echo is noisy; only surface it in debug mode
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )
