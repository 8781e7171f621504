# tests/conftest.py
"""
Fixtures compartilhadas: configurações de teste com chaves fixas, uma fonte
de registros de autenticação em memória e um cliente HTTP assíncrono
montado diretamente sobre a aplicação FastAPI.
"""

# ========================
# --- Importações ---
# ========================
import uuid
from typing import AsyncGenerator, Dict, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# --- Módulos da Aplicação ---
from webtoken.core.config import Settings
from webtoken.crypt.pwd import encrypt_pwd
from webtoken.crypt.signing import EncryptContent
from webtoken.crypt.token import TokenConfig
from webtoken.main import create_app
from webtoken.models.user import AuthRecord

# ========================
# --- Constantes de Teste ---
# ========================
TEST_PWD_KEY = b"chave-de-senhas-usada-somente-nos-testes-0123456789-abcdefghijkl"
TEST_TOKEN_KEY = b"chave-de-tokens-usada-somente-nos-testes-0123456789-abcdefghijk"
TEST_USERNAME = "demo1"
TEST_PASSWORD = "welcome"

# ========================
# --- Fonte de Registros em Memória ---
# ========================
class InMemoryAuthStore:
    """Implementação de `AuthStore` baseada em dicionário, apenas para testes."""

    def __init__(self) -> None:
        self.records: Dict[str, AuthRecord] = {}

    def add(self, record: AuthRecord) -> None:
        self.records[record.username] = record

    async def get_auth_record(self, username: str) -> Optional[AuthRecord]:
        return self.records.get(username)

# ========================
# --- Fixtures de Configuração ---
# ========================
@pytest.fixture
def test_settings() -> Settings:
    """Settings isoladas do ambiente, com chaves fixas."""
    return Settings(
        _env_file=None,
        PWD_KEY=TEST_PWD_KEY,
        TOKEN_KEY=TEST_TOKEN_KEY,
        TOKEN_DURATION_SEC=60.0,
        LOG_LEVEL="DEBUG",
    )

@pytest.fixture
def token_config(test_settings: Settings) -> TokenConfig:
    return test_settings.token_config

# ========================
# --- Fixtures de Usuário ---
# ========================
@pytest.fixture
def test_user_record(test_settings: Settings) -> AuthRecord:
    """Usuário de teste com senha no esquema #01# e salts aleatórios."""
    pwd_salt = str(uuid.uuid4())
    return AuthRecord(
        username=TEST_USERNAME,
        pwd=encrypt_pwd(EncryptContent(content=TEST_PASSWORD, salt=pwd_salt), test_settings.PWD_KEY),
        pwd_salt=pwd_salt,
        token_salt=str(uuid.uuid4()),
    )

@pytest.fixture
def auth_store(test_user_record: AuthRecord) -> InMemoryAuthStore:
    store = InMemoryAuthStore()
    store.add(test_user_record)
    return store

# ========================
# --- Fixture para o Cliente HTTP Async ---
# ========================
@pytest_asyncio.fixture
async def test_async_client(
    auth_store: InMemoryAuthStore,
    test_settings: Settings,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Cliente HTTP assíncrono que fala diretamente com a aplicação montada,
    sem servidor Uvicorn. Um cliente novo (e sem cookies) por teste.
    """
    app = create_app(auth_store=auth_store, settings=test_settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
