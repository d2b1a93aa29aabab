"""
Messaging Endpoints

Two-party conversations between members.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from alumni_hub.exceptions import AccessDeniedError, InvalidOperationError, RecordNotFoundError
from alumni_hub.schemas.message import (
    ConversationCreateRequest,
    ConversationResponse,
    MessageCreateRequest,
    MessageResponse,
)
from alumni_hub.schemas.person import Person
from alumni_hub.services.database import DatabaseService, get_db
from alumni_hub.utils.auth import get_current_user
from alumni_hub.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/", response_model=List[ConversationResponse])
def list_conversations(
    db: DatabaseService = Depends(get_db),
    current_user: Person = Depends(get_current_user),
):
    """Inbox of the acting user, most recently active first"""
    return db.list_conversations_for_user(current_user.id)


@router.post("/", response_model=ConversationResponse)
def start_conversation(
    request: ConversationCreateRequest,
    db: DatabaseService = Depends(get_db),
    current_user: Person = Depends(get_current_user),
):
    """
    Open a conversation with another member, reusing an existing one.

    Args:
        request: The other participant

    Returns:
        ConversationResponse: The conversation
    """
    try:
        return db.get_or_create_conversation(current_user.id, request.participant_id)

    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidOperationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to start conversation: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to start conversation: {str(e)}",
        )


@router.get("/{conversation_id}/messages", response_model=List[MessageResponse])
def list_messages(
    conversation_id: str,
    db: DatabaseService = Depends(get_db),
    current_user: Person = Depends(get_current_user),
):
    try:
        return db.list_messages(conversation_id, user_id=current_user.id)

    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))


@router.post(
    "/{conversation_id}/messages",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def send_message(
    conversation_id: str,
    request: MessageCreateRequest,
    db: DatabaseService = Depends(get_db),
    current_user: Person = Depends(get_current_user),
):
    """
    Send a message to the other participant.

    Args:
        conversation_id: Conversation identifier
        request: Message content

    Returns:
        MessageResponse: The stored message
    """
    try:
        return db.create_message(conversation_id, current_user.id, request.content)

    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except InvalidOperationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to send message: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to send message: {str(e)}",
        )


@router.post("/{conversation_id}/read")
def mark_read(
    conversation_id: str,
    db: DatabaseService = Depends(get_db),
    current_user: Person = Depends(get_current_user),
):
    """Mark messages addressed to the acting user as read"""
    try:
        updated = db.mark_conversation_read(conversation_id, current_user.id)
        return {"conversationId": conversation_id, "markedRead": updated}

    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
