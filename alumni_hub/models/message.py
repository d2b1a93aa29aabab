"""
Messaging Database Models
"""

from sqlalchemy import Column, String, Integer, Text, Boolean, JSON, ForeignKey
from sqlalchemy.orm import relationship
from alumni_hub.models.base import Base, TimestampMixin, new_id


class Conversation(Base, TimestampMixin):
    """A two-party conversation"""

    __tablename__ = "conversations"

    pk = Column("id", Integer, primary_key=True, autoincrement=True)
    id = Column("conversation_id", String(64), unique=True, nullable=False, index=True, default=new_id)

    # Public user ids of both participants
    participants = Column(JSON, nullable=False)

    # Public id of the most recent message
    last_message_id = Column(String(64), nullable=True)

    messages = relationship("Message", back_populates="conversation", cascade="all, delete-orphan")


class Message(Base, TimestampMixin):
    """A message inside a conversation"""

    __tablename__ = "messages"

    pk = Column("id", Integer, primary_key=True, autoincrement=True)
    id = Column("message_id", String(64), unique=True, nullable=False, index=True, default=new_id)

    conversation_pk = Column(Integer, ForeignKey("conversations.id"), nullable=False, index=True)
    sender_id = Column(String(64), nullable=False, index=True)
    receiver_id = Column(String(64), nullable=False, index=True)
    content = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False)

    conversation = relationship("Conversation", back_populates="messages")

    @property
    def conversation_id(self) -> str:
        return self.conversation.id
