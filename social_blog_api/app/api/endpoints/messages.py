"""
Message endpoints.

A message id that matches nothing is not an error here: ``GET`` and
``DELETE`` on ``/messages/{message_id}`` answer 200 with an empty body.
"""

import logging
from typing import List, Union

from fastapi import APIRouter, Depends, HTTPException, Response, status

from social_blog_api.app.api.deps import RowId, get_message_service
from social_blog_api.app.schemas.message import MessageCreate, MessageRead, MessageTextUpdate
from social_blog_api.app.services.message_service import MessageService

logger = logging.getLogger(__name__)

router = APIRouter()


def _empty() -> Response:
    return Response(status_code=status.HTTP_200_OK)


@router.post("", response_model=MessageRead)
def create_message(
    message: MessageCreate,
    service: MessageService = Depends(get_message_service),
) -> MessageRead:
    result = service.create(message)
    if not result.ok:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.reason)
    return result.value


@router.get("", response_model=List[MessageRead])
def list_messages(service: MessageService = Depends(get_message_service)) -> List[MessageRead]:
    return service.get_all()


@router.get("/{message_id}", response_model=MessageRead)
def get_message(
    message_id: RowId,
    service: MessageService = Depends(get_message_service),
) -> Union[MessageRead, Response]:
    result = service.get_by_id(message_id)
    if not result.ok:
        return _empty()
    return result.value


@router.delete("/{message_id}", response_model=MessageRead)
def delete_message(
    message_id: RowId,
    service: MessageService = Depends(get_message_service),
) -> Union[MessageRead, Response]:
    """Delete a message and echo it back, or answer empty if it was absent."""
    existing = service.get_by_id(message_id)
    service.delete_by_id(message_id)
    if not existing.ok:
        return _empty()
    logger.info("Deleted message %s", message_id)
    return existing.value


@router.patch("/{message_id}", response_model=MessageRead)
def update_message(
    message_id: RowId,
    body: MessageTextUpdate,
    service: MessageService = Depends(get_message_service),
) -> MessageRead:
    """Replace the text of a message.

    Answers 400 if the message does not exist or the new text is blank
    or longer than 255 characters.
    """
    result = service.update_text(message_id, body.message_text)
    if not result.ok:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.reason)
    return result.value
