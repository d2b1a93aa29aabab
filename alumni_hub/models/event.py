"""
Event Database Models
"""

from sqlalchemy import Column, String, Integer, Text, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from alumni_hub.models.base import Base, TimestampMixin, new_id


class Event(Base, TimestampMixin):
    """Alumni events that users can RSVP to"""

    __tablename__ = "events"

    pk = Column("id", Integer, primary_key=True, autoincrement=True)
    id = Column("event_id", String(64), unique=True, nullable=False, index=True, default=new_id)

    title = Column(String(256), nullable=False)
    description = Column(Text, nullable=False, default="")
    # ISO date or datetime string as entered
    date = Column(String(32), nullable=False)
    location = Column(String(256), nullable=False)
    category = Column(String(64), nullable=False, default="General")
    featured = Column(Boolean, nullable=False, default=False)

    rsvp = Column(Integer, nullable=False, default=0)
    max_attendees = Column(Integer, nullable=True)

    created_by = Column(String(64), nullable=False)

    attendees = relationship("EventRSVP", back_populates="event", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Event(id='{self.id}', title='{self.title}', rsvp={self.rsvp})>"


class EventRSVP(Base, TimestampMixin):
    """One row per (event, user) attendance"""

    __tablename__ = "event_rsvps"

    pk = Column("id", Integer, primary_key=True, autoincrement=True)
    event_pk = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    user_id = Column(String(64), nullable=False, index=True)

    event = relationship("Event", back_populates="attendees")
