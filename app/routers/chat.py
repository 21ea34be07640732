# app/routers/chat.py
from fastapi import APIRouter, Depends, status

from ..schemas.chat import ChatMessageIn, ChatMessageOut
from ..security import get_current_user_id
from ..services.chat import (
    CreateUserChatMessageService,
    GetUserChatMessagesService,
    get_create_user_chat_message_service,
    get_user_chat_messages_service,
)
from ..utils import result_to_response

router = APIRouter()

@router.post("/messages", status_code=status.HTTP_201_CREATED, response_model=ChatMessageOut)
async def create_chat_message(
    payload: ChatMessageIn,
    user_id: str = Depends(get_current_user_id),
    service: CreateUserChatMessageService = Depends(get_create_user_chat_message_service),
):
    """El emisor es siempre el usuario del token"""
    result = await service.execute(
        sender_id=user_id,
        receiver_id=payload.receiver_id,
        content=payload.content,
    )
    return result_to_response(result, status.HTTP_201_CREATED)

@router.get("/messages/{other_user_id}")
async def list_chat_messages(
    other_user_id: str,
    user_id: str = Depends(get_current_user_id),
    service: GetUserChatMessagesService = Depends(get_user_chat_messages_service),
):
    """Conversación entre el usuario autenticado y otro usuario"""
    result = await service.execute(user_id=user_id, other_user_id=other_user_id)
    return result_to_response(result, status.HTTP_200_OK)
