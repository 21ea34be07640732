"""
Configuración de pytest para tests
"""
from typing import Dict

import pytest
from fastapi.testclient import TestClient

from app.repositories.animals import get_animal_repository
from app.repositories.chat import get_chat_message_repository
from app.repositories.users import get_user_repository
from app.security import Authenticator, get_authenticator
from tests.fakes import (
    TEST_SECRET,
    FailingChatMessageRepository,
    InMemoryAnimalRepository,
    InMemoryChatMessageRepository,
    InMemoryUserRepository,
)

# ==================== Fixtures ====================

# Deshabilitar rate limiting en la app antes de importarla
@pytest.fixture(scope="session", autouse=True)
def disable_rate_limiting():
    """Deshabilita rate limiting para todos los tests"""
    from app.main import app
    app.state.limiter = None

@pytest.fixture
def authenticator():
    return Authenticator(TEST_SECRET)

@pytest.fixture
def user_repository():
    return InMemoryUserRepository()

@pytest.fixture
def animal_repository():
    return InMemoryAnimalRepository()

@pytest.fixture
def chat_repository():
    return InMemoryChatMessageRepository()

@pytest.fixture
def client(authenticator, user_repository, animal_repository, chat_repository):
    """Cliente de test con los repositorios en memoria"""
    from app.main import app
    app.state.limiter = None
    app.dependency_overrides[get_authenticator] = lambda: authenticator
    app.dependency_overrides[get_user_repository] = lambda: user_repository
    app.dependency_overrides[get_animal_repository] = lambda: animal_repository
    app.dependency_overrides[get_chat_message_repository] = lambda: chat_repository
    # Los errores 500 se comprueban como respuesta, no como excepción
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()

@pytest.fixture
def auth_headers(authenticator):
    """Cabeceras Authorization para un user_id dado"""
    def _headers(user_id: str) -> Dict[str, str]:
        token = authenticator.generate_token({"id": user_id})
        return {"Authorization": f"Bearer {token}"}
    return _headers

@pytest.fixture
def test_user_data():
    """Datos de usuario de prueba"""
    return {
        "name": "Test User",
        "email": "test@example.com",
        "password": "testpass123",
    }

@pytest.fixture
def failing_chat_repository():
    """Repositorio de chat con la base de datos caída"""
    return FailingChatMessageRepository()
