"""
Tests para los servicios de chat
"""
import pytest

from app.services.chat import CreateUserChatMessageService, GetUserChatMessagesService

async def test_create_message_success(chat_repository):
    service = CreateUserChatMessageService(chat_repository)
    result = await service.execute(sender_id="u1", receiver_id="u2", content="hi")

    assert result.is_failure() is False
    message = result.value
    assert message["sender_id"] == "u1"
    assert message["receiver_id"] == "u2"
    assert message["content"] == "hi"
    assert message["id"]
    assert message["created_at"]
    assert chat_repository.create_calls == 1

@pytest.mark.parametrize("content", ["", "   ", None])
async def test_empty_content_fails_without_write(chat_repository, content):
    result = await CreateUserChatMessageService(chat_repository).execute("u1", "u2", content)

    assert result.is_failure()
    assert "content" in result.value["message"]
    assert chat_repository.create_calls == 0

@pytest.mark.parametrize("receiver_id", ["", "  ", None])
async def test_empty_receiver_fails_without_write(chat_repository, receiver_id):
    result = await CreateUserChatMessageService(chat_repository).execute("u1", receiver_id, "hi")

    assert result.is_failure()
    assert "receiver_id" in result.value["message"]
    assert chat_repository.create_calls == 0

async def test_repository_errors_propagate(failing_chat_repository):
    """Los errores de infraestructura no se convierten en Failure"""
    service = CreateUserChatMessageService(failing_chat_repository)
    with pytest.raises(ConnectionError):
        await service.execute("u1", "u2", "hi")

async def test_list_conversation(chat_repository):
    create = CreateUserChatMessageService(chat_repository)
    await create.execute("u1", "u2", "hola")
    await create.execute("u2", "u1", "qué tal")
    await create.execute("u3", "u1", "otro chat")

    result = await GetUserChatMessagesService(chat_repository).execute("u1", "u2")

    assert result.is_success()
    assert [m["content"] for m in result.value["messages"]] == ["hola", "qué tal"]

async def test_list_conversation_requires_other_user(chat_repository):
    result = await GetUserChatMessagesService(chat_repository).execute("u1", " ")
    assert result.is_failure()
