"""
Base SQLAlchemy Models
"""

import uuid

from sqlalchemy.orm import declarative_base
from sqlalchemy import Column, DateTime
from datetime import datetime

Base = declarative_base()


def new_id() -> str:
    """Generate an opaque public identifier"""
    return uuid.uuid4().hex


class TimestampMixin:
    """Mixin for created_at and updated_at"""

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )
