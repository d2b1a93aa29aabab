"""Database models package"""

from alumni_hub.models.base import Base, TimestampMixin
from alumni_hub.models.user import User
from alumni_hub.models.event import Event, EventRSVP
from alumni_hub.models.fundraiser import Fundraiser, Donation
from alumni_hub.models.message import Conversation, Message

__all__ = [
    "Base",
    "TimestampMixin",
    "User",
    "Event",
    "EventRSVP",
    "Fundraiser",
    "Donation",
    "Conversation",
    "Message",
]
