# app/services/chat.py
import logging
from typing import Any, Dict, List, Optional
from fastapi import Depends
from pydantic import ValidationError

from ..either import Either, Failure, Success
from ..repositories.chat import ChatMessageRepository, get_chat_message_repository
from ..schemas.chat import ChatMessageCreate
from ..utils import validation_message

logger = logging.getLogger(__name__)


class CreateUserChatMessageService:
    """
    Crea un mensaje directo entre dos usuarios.
    sender_id llega ya autenticado (lo fija el router a partir del token).
    Los errores del repositorio se propagan como excepciones.
    """

    def __init__(self, chat_message_repository: ChatMessageRepository):
        self.chat_message_repository = chat_message_repository

    async def execute(
        self,
        sender_id: str,
        receiver_id: Optional[str],
        content: Optional[str],
    ) -> Either[Dict[str, str], Dict[str, Any]]:
        try:
            message = ChatMessageCreate(
                sender_id=sender_id,
                receiver_id=receiver_id,
                content=content,
            )
        except ValidationError as exc:
            return Failure.create({"message": validation_message(exc)})

        created = await self.chat_message_repository.create(
            sender_id=message.sender_id,
            receiver_id=message.receiver_id,
            content=message.content,
        )
        logger.info(f"Mensaje {created['id']} de {sender_id} a {message.receiver_id}")
        return Success.create(created)


class GetUserChatMessagesService:
    def __init__(self, chat_message_repository: ChatMessageRepository):
        self.chat_message_repository = chat_message_repository

    async def execute(
        self, user_id: str, other_user_id: Optional[str]
    ) -> Either[Dict[str, str], Dict[str, List[Dict[str, Any]]]]:
        if not other_user_id or not other_user_id.strip():
            return Failure.create({"message": "other_user_id: El usuario es obligatorio"})
        messages = await self.chat_message_repository.find_between_users(user_id, other_user_id.strip())
        return Success.create({"messages": messages})


async def get_create_user_chat_message_service(
    repository: ChatMessageRepository = Depends(get_chat_message_repository),
) -> CreateUserChatMessageService:
    return CreateUserChatMessageService(repository)


async def get_user_chat_messages_service(
    repository: ChatMessageRepository = Depends(get_chat_message_repository),
) -> GetUserChatMessagesService:
    return GetUserChatMessagesService(repository)
