"""
Create-if-absent bootstrap for the embedded store.
"""
import logging

from app.db.session import engine
from app.db.base import Base

logger = logging.getLogger(__name__)


def init_db(bind=None):
    """Create all tables that do not exist yet. No migrations are run."""
    # Register models with Base.metadata
    from app.db import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info(f"Database tables ready: {', '.join(sorted(Base.metadata.tables))}")
