"""
Database Service

The record store: users, events, fundraisers, donations and messages kept in a
SQL database through SQLAlchemy. One instance is constructed per application
and handed to whatever needs it.
"""

import time
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, Generator, List, Optional, Tuple, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from sqlalchemy import create_engine, func, inspect, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from alumni_hub.exceptions import (
    AccessDeniedError,
    DuplicateRecordError,
    InvalidOperationError,
    RecordNotFoundError,
)
from alumni_hub.models import (
    Base,
    Conversation,
    Donation,
    Event,
    EventRSVP,
    Fundraiser,
    Message,
    User,
)
from alumni_hub.schemas.event import EventResponse
from alumni_hub.schemas.fundraiser import DonationResponse, FundraiserResponse
from alumni_hub.schemas.message import ConversationResponse, MessageResponse
from alumni_hub.schemas.person import Person, UserRole, UserType
from alumni_hub.schemas.stats import StatsResponse
from alumni_hub.utils.logger import get_logger

logger = get_logger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Profile fields that never change through an update
_IMMUTABLE_USER_FIELDS = {"id", "pk", "email", "password", "created_at", "updated_at"}
# Columns that cannot be cleared
_REQUIRED_USER_FIELDS = {"name", "user_type", "role"}


def _to_schema(schema: Type[SchemaT], row: Any, **extra: Any) -> SchemaT:
    """Build a pydantic schema from an ORM row's column attributes"""
    data: Dict[str, Any] = {
        attr.key: getattr(row, attr.key) for attr in inspect(row).mapper.column_attrs
    }
    data.update(extra)
    return schema.model_validate(data)


def _enum_value(value: Any) -> Any:
    return value.value if hasattr(value, "value") else value


def _role_for(user_type: str) -> str:
    """Management accounts are admins; everyone else's role is their user type"""
    return UserRole.ADMIN.value if user_type == UserType.MANAGEMENT.value else user_type


class DatabaseService:
    """SQLAlchemy-backed record store"""

    def __init__(self, database_url: str, echo: bool = False):
        engine_kwargs: Dict[str, Any] = {"echo": echo}
        if database_url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                # Share the single in-memory database across threads
                engine_kwargs["poolclass"] = StaticPool

        self.database_url = database_url
        self.engine = create_engine(database_url, **engine_kwargs)
        self.session_factory = sessionmaker(self.engine, class_=Session, expire_on_commit=False)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Transactional session scope.

        Commits on success, rolls back and re-raises on any error.
        """
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_tables(self):
        """Create every table that does not exist yet"""
        Base.metadata.create_all(self.engine)
        logger.info("Database tables ready", url=self.engine.url.render_as_string(hide_password=True))

    def drop_tables(self):
        Base.metadata.drop_all(self.engine)

    def close(self):
        """Close database connections"""
        self.engine.dispose()
        logger.info("Database connections closed")

    # User operations
    def _get_user_row(self, session: Session, user_id: str) -> User:
        row = session.execute(select(User).where(User.id == user_id)).scalar_one_or_none()
        if row is None:
            raise RecordNotFoundError("User", user_id)
        return row

    def create_user(
        self,
        email: str,
        password: str,
        name: str,
        user_type: UserType,
        role: Optional[UserRole] = None,
        user_id: Optional[str] = None,
        **profile: Any,
    ) -> Person:
        """
        Create a new account.

        Raises:
            DuplicateRecordError: If the email is already registered
        """
        user_type = _enum_value(user_type)
        if role is None:
            role = _role_for(user_type)

        with self.session() as session:
            exists = session.execute(select(User.pk).where(User.email == email)).first()
            if exists:
                raise DuplicateRecordError(f"An account with email '{email}' already exists")

            user = User(
                email=email,
                password=password,
                name=name,
                user_type=user_type,
                role=_enum_value(role),
                **{key: value for key, value in profile.items() if value is not None},
            )
            if user_id:
                user.id = user_id
            session.add(user)
            try:
                session.flush()
            except IntegrityError as e:
                logger.error(f"Failed to create user: {e}")
                raise DuplicateRecordError(f"User '{user_id or email}' already exists") from e

            logger.info("Created user", user_id=user.id, user_type=user_type)
            return _to_schema(Person, user)

    def get_user(self, user_id: str) -> Optional[Person]:
        """Get a person by public id"""
        with self.session() as session:
            row = session.execute(select(User).where(User.id == user_id)).scalar_one_or_none()
            return _to_schema(Person, row) if row else None

    def get_user_by_email(self, email: str) -> Optional[Person]:
        with self.session() as session:
            row = session.execute(select(User).where(User.email == email)).scalar_one_or_none()
            return _to_schema(Person, row) if row else None

    def authenticate_user(self, email: str, password: str) -> Optional[Person]:
        """Plaintext credential check; None when either part is wrong"""
        with self.session() as session:
            row = session.execute(
                select(User).where(User.email == email, User.password == password)
            ).scalar_one_or_none()
            return _to_schema(Person, row) if row else None

    def update_user(self, user_id: str, updates: Dict[str, Any]) -> Person:
        """
        Apply a partial profile update.

        Changing ``user_type`` without an explicit ``role`` re-derives the
        role the same way account creation does.

        Raises:
            RecordNotFoundError: If the user does not exist
        """
        with self.session() as session:
            row = self._get_user_row(session, user_id)
            for field, value in updates.items():
                if field in _IMMUTABLE_USER_FIELDS or not hasattr(User, field):
                    continue
                if value is None and field in _REQUIRED_USER_FIELDS:
                    continue
                setattr(row, field, _enum_value(value))

            if updates.get("user_type") is not None and updates.get("role") is None:
                row.role = _role_for(row.user_type)

            session.flush()
            logger.info("Updated user", user_id=user_id, fields=sorted(updates))
            return _to_schema(Person, row)

    def list_all_persons(self) -> List[Person]:
        """Every person in collection (insertion) order"""
        with self.session() as session:
            rows = session.execute(select(User).order_by(User.pk)).scalars().all()
            return [_to_schema(Person, row) for row in rows]

    def count_users(self) -> int:
        with self.session() as session:
            return session.execute(select(func.count(User.pk))).scalar_one()

    # Event operations
    def _get_event_row(self, session: Session, event_id: str) -> Event:
        row = session.execute(select(Event).where(Event.id == event_id)).scalar_one_or_none()
        if row is None:
            raise RecordNotFoundError("Event", event_id)
        return row

    def create_event(
        self,
        title: str,
        date: str,
        location: str,
        created_by: str,
        description: str = "",
        category: Optional[str] = None,
        max_attendees: Optional[int] = None,
        featured: bool = False,
        rsvp: int = 0,
        event_id: Optional[str] = None,
    ) -> EventResponse:
        """Create a new event"""
        with self.session() as session:
            event = Event(
                title=title,
                date=date,
                location=location,
                created_by=created_by,
                description=description or "",
                category=category or "General",
                max_attendees=max_attendees,
                featured=featured,
                rsvp=rsvp,
            )
            if event_id:
                event.id = event_id
            session.add(event)
            session.flush()
            logger.info("Created event", event_id=event.id, title=title)
            return _to_schema(EventResponse, event)

    def get_event(self, event_id: str) -> Optional[EventResponse]:
        with self.session() as session:
            row = session.execute(select(Event).where(Event.id == event_id)).scalar_one_or_none()
            return _to_schema(EventResponse, row) if row else None

    def list_events(self) -> List[EventResponse]:
        """List all events by date"""
        with self.session() as session:
            rows = session.execute(select(Event).order_by(Event.date, Event.pk)).scalars().all()
            return [_to_schema(EventResponse, row) for row in rows]

    def toggle_rsvp(self, event_id: str, user_id: str) -> Tuple[EventResponse, bool]:
        """
        Flip a user's attendance for an event.

        Returns:
            tuple: (updated event, whether the user is now attending)

        Raises:
            RecordNotFoundError: If the event does not exist
            InvalidOperationError: If the event is full
        """
        with self.session() as session:
            event = self._get_event_row(session, event_id)
            existing = session.execute(
                select(EventRSVP).where(EventRSVP.event_pk == event.pk, EventRSVP.user_id == user_id)
            ).scalar_one_or_none()

            if existing is not None:
                session.delete(existing)
                event.rsvp = max(0, event.rsvp - 1)
                attending = False
            else:
                if event.max_attendees is not None and event.rsvp >= event.max_attendees:
                    raise InvalidOperationError(f"Event '{event_id}' is full")
                session.add(EventRSVP(event_pk=event.pk, user_id=user_id))
                event.rsvp = event.rsvp + 1
                attending = True

            session.flush()
            logger.info("Toggled RSVP", event_id=event_id, user_id=user_id, attending=attending)
            return _to_schema(EventResponse, event), attending

    # Fundraiser operations
    def _get_fundraiser_row(self, session: Session, fundraiser_id: str) -> Fundraiser:
        row = session.execute(
            select(Fundraiser).where(Fundraiser.id == fundraiser_id)
        ).scalar_one_or_none()
        if row is None:
            raise RecordNotFoundError("Fundraiser", fundraiser_id)
        return row

    def create_fundraiser(
        self,
        title: str,
        description: str,
        goal: float,
        created_by: str,
        category: str = "General",
        end_date: Optional[str] = None,
        featured: bool = False,
        image: Optional[str] = None,
        status: str = "active",
        raised: float = 0,
        donors: int = 0,
        fundraiser_id: Optional[str] = None,
    ) -> FundraiserResponse:
        """Create a new fundraiser; new campaigns start with nothing raised"""
        with self.session() as session:
            fundraiser = Fundraiser(
                title=title,
                description=description,
                goal=goal,
                created_by=created_by,
                category=category,
                end_date=end_date,
                featured=featured,
                image=image,
                status=_enum_value(status),
                raised=raised,
                donors=donors,
            )
            if fundraiser_id:
                fundraiser.id = fundraiser_id
            session.add(fundraiser)
            session.flush()
            logger.info("Created fundraiser", fundraiser_id=fundraiser.id, goal=goal)
            return _to_schema(FundraiserResponse, fundraiser)

    def get_fundraiser(self, fundraiser_id: str) -> Optional[FundraiserResponse]:
        with self.session() as session:
            row = session.execute(
                select(Fundraiser).where(Fundraiser.id == fundraiser_id)
            ).scalar_one_or_none()
            return _to_schema(FundraiserResponse, row) if row else None

    def list_fundraisers(self, status: Optional[str] = None) -> List[FundraiserResponse]:
        """List fundraisers, optionally only those with ``status``"""
        with self.session() as session:
            query = select(Fundraiser)
            if status:
                query = query.where(Fundraiser.status == _enum_value(status))
            rows = session.execute(query.order_by(Fundraiser.pk)).scalars().all()
            return [_to_schema(FundraiserResponse, row) for row in rows]

    def create_donation(
        self,
        fundraiser_id: str,
        user_id: str,
        amount: float,
        payment_method: str,
        status: str = "completed",
    ) -> DonationResponse:
        """
        Record a donation; completed donations update the campaign totals.

        Raises:
            RecordNotFoundError: If the fundraiser does not exist
            InvalidOperationError: If the fundraiser is not active
        """
        status = _enum_value(status)
        with self.session() as session:
            fundraiser = self._get_fundraiser_row(session, fundraiser_id)
            if fundraiser.status != "active":
                raise InvalidOperationError(
                    f"Fundraiser '{fundraiser_id}' is {fundraiser.status} and not accepting donations"
                )

            donation = Donation(
                fundraiser=fundraiser,
                user_id=user_id,
                amount=amount,
                payment_method=_enum_value(payment_method),
                transaction_id=f"TXN_{int(time.time() * 1000)}",
                status=status,
            )
            session.add(donation)

            if status == "completed":
                fundraiser.raised = fundraiser.raised + amount
                fundraiser.donors = fundraiser.donors + 1

            session.flush()
            logger.info(
                "Recorded donation",
                fundraiser_id=fundraiser_id,
                user_id=user_id,
                amount=amount,
                status=status,
            )
            return _to_schema(DonationResponse, donation, fundraiser_id=fundraiser.id)

    def list_donations_by_user(self, user_id: str) -> List[DonationResponse]:
        with self.session() as session:
            rows = session.execute(
                select(Donation).where(Donation.user_id == user_id).order_by(Donation.pk)
            ).scalars().all()
            return [_to_schema(DonationResponse, row, fundraiser_id=row.fundraiser_id) for row in rows]

    def list_donations_by_fundraiser(self, fundraiser_id: str) -> List[DonationResponse]:
        with self.session() as session:
            fundraiser = self._get_fundraiser_row(session, fundraiser_id)
            return [
                _to_schema(DonationResponse, row, fundraiser_id=fundraiser.id)
                for row in fundraiser.donations
            ]

    # Messaging operations
    def _get_conversation_row(self, session: Session, conversation_id: str) -> Conversation:
        row = session.execute(
            select(Conversation).where(Conversation.id == conversation_id)
        ).scalar_one_or_none()
        if row is None:
            raise RecordNotFoundError("Conversation", conversation_id)
        return row

    def _conversation_schema(self, session: Session, row: Conversation) -> ConversationResponse:
        last_message = None
        if row.last_message_id:
            message = session.execute(
                select(Message).where(Message.id == row.last_message_id)
            ).scalar_one_or_none()
            if message is not None:
                last_message = _to_schema(MessageResponse, message, conversation_id=row.id)
        return _to_schema(ConversationResponse, row, last_message=last_message)

    def get_conversation(self, conversation_id: str) -> Optional[ConversationResponse]:
        with self.session() as session:
            row = session.execute(
                select(Conversation).where(Conversation.id == conversation_id)
            ).scalar_one_or_none()
            return self._conversation_schema(session, row) if row else None

    def get_or_create_conversation(self, user_id: str, other_user_id: str) -> ConversationResponse:
        """
        Reuse the conversation between two users, or start one.

        Raises:
            InvalidOperationError: If both ids are the same user
            RecordNotFoundError: If the other user does not exist
        """
        if user_id == other_user_id:
            raise InvalidOperationError("Cannot start a conversation with yourself")

        with self.session() as session:
            self._get_user_row(session, other_user_id)

            rows = session.execute(select(Conversation).order_by(Conversation.pk)).scalars().all()
            for row in rows:
                if user_id in row.participants and other_user_id in row.participants:
                    return self._conversation_schema(session, row)

            conversation = Conversation(participants=[user_id, other_user_id])
            session.add(conversation)
            session.flush()
            logger.info("Created conversation", conversation_id=conversation.id)
            return self._conversation_schema(session, conversation)

    def list_conversations_for_user(self, user_id: str) -> List[ConversationResponse]:
        """Conversations the user takes part in, most recently active first"""
        with self.session() as session:
            rows = session.execute(
                select(Conversation).order_by(Conversation.updated_at.desc(), Conversation.pk.desc())
            ).scalars().all()
            return [
                self._conversation_schema(session, row)
                for row in rows
                if user_id in row.participants
            ]

    def create_message(self, conversation_id: str, sender_id: str, content: str) -> MessageResponse:
        """
        Send a message to the other participant of a conversation.

        Raises:
            RecordNotFoundError: If the conversation does not exist
            AccessDeniedError: If the sender is not a participant
            InvalidOperationError: If the content is blank
        """
        if not content or not content.strip():
            raise InvalidOperationError("Message content cannot be empty")

        with self.session() as session:
            conversation = self._get_conversation_row(session, conversation_id)
            if sender_id not in conversation.participants:
                raise AccessDeniedError(f"User '{sender_id}' is not part of conversation '{conversation_id}'")

            receiver_id = next((p for p in conversation.participants if p != sender_id), None)
            if receiver_id is None:
                raise InvalidOperationError("Conversation has no other participant")

            message = Message(
                conversation=conversation,
                sender_id=sender_id,
                receiver_id=receiver_id,
                content=content.strip(),
                read=False,
            )
            session.add(message)
            session.flush()

            conversation.last_message_id = message.id
            conversation.updated_at = datetime.utcnow()
            session.flush()

            return _to_schema(MessageResponse, message, conversation_id=conversation.id)

    def list_messages(self, conversation_id: str, user_id: Optional[str] = None) -> List[MessageResponse]:
        """
        Messages of a conversation in send order.

        Raises:
            RecordNotFoundError: If the conversation does not exist
            AccessDeniedError: If ``user_id`` is given and is not a participant
        """
        with self.session() as session:
            conversation = self._get_conversation_row(session, conversation_id)
            if user_id is not None and user_id not in conversation.participants:
                raise AccessDeniedError(f"User '{user_id}' is not part of conversation '{conversation_id}'")
            rows = session.execute(
                select(Message).where(Message.conversation_pk == conversation.pk).order_by(Message.pk)
            ).scalars().all()
            return [_to_schema(MessageResponse, row, conversation_id=conversation.id) for row in rows]

    def mark_conversation_read(self, conversation_id: str, user_id: str) -> int:
        """Mark every message addressed to ``user_id`` as read; returns how many changed"""
        with self.session() as session:
            conversation = self._get_conversation_row(session, conversation_id)
            if user_id not in conversation.participants:
                raise AccessDeniedError(f"User '{user_id}' is not part of conversation '{conversation_id}'")
            unread = session.execute(
                select(Message).where(
                    Message.conversation_pk == conversation.pk,
                    Message.receiver_id == user_id,
                    Message.read.is_(False),
                )
            ).scalars().all()
            for message in unread:
                message.read = True
            return len(unread)

    # Statistics
    def get_stats(self) -> StatsResponse:
        """Network-wide totals"""
        with self.session() as session:
            fundraisers = session.execute(select(Fundraiser)).scalars().all()
            total_raised = sum(f.raised for f in fundraisers)
            active = sum(1 for f in fundraisers if f.status == "active")
            completed = sum(1 for f in fundraisers if f.status == "completed")
            success_rate = round(completed / len(fundraisers) * 100) if fundraisers else 0

            total_donors = session.execute(
                select(func.count(func.distinct(Donation.user_id)))
            ).scalar_one()
            total_users = session.execute(select(func.count(User.pk))).scalar_one()
            total_events = session.execute(select(func.count(Event.pk))).scalar_one()

            return StatsResponse(
                total_raised=total_raised,
                total_donors=total_donors,
                active_campaigns=active,
                completed_campaigns=completed,
                success_rate=success_rate,
                total_users=total_users,
                total_events=total_events,
            )


# Dependency for FastAPI
def get_db(request: Request) -> DatabaseService:
    """FastAPI dependency returning the application's record store"""
    return request.app.state.db
