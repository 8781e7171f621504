# webtoken/core/config.py

# ========================
# --- Importações ---
# ========================
import os
import logging
from functools import lru_cache
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# --- Módulos da Aplicação ---
from webtoken.core.utils import UtilsError, b64u_decode_bytes
from webtoken.crypt.token import TokenConfig

# ===============================
# --- Configuração do Logger ---
# ===============================
logger = logging.getLogger(__name__)

# ===============================
# --- Carregamento do .env ---
# ===============================
# Define o caminho para o arquivo .env na raiz do projeto
dotenv_path = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), '.env')
# Carrega as variáveis do arquivo .env para o ambiente, se o arquivo existir
loaded = load_dotenv(dotenv_path=dotenv_path)

# ======================================
# --- Definição das Configurações ---
# ======================================
class Settings(BaseSettings):
    """
    Configurações da aplicação lidas do ambiente usando Pydantic BaseSettings.
    Todas as variáveis usam o prefixo `SERVICE_` (ex.: SERVICE_TOKEN_KEY).
    Docs Pydantic Settings: https://docs.pydantic.dev/latest/concepts/pydantic_settings/
    """
    # =========================
    # --- Config Gerais ---
    # =========================
    PROJECT_NAME: str = Field("WebToken Auth", description="Nome do Projeto")
    API_V1_STR: str = Field("/api/v1", description="Prefixo para a versão 1 da API")

    # =============================
    # --- Configurações Crypt ---
    # =============================
    PWD_KEY: bytes = Field(..., description="Chave de senhas em base64url (obrigatória)")
    TOKEN_KEY: bytes = Field(..., description="Chave de assinatura de tokens em base64url (obrigatória)")
    TOKEN_DURATION_SEC: float = Field(
        1800.0,
        description="Validade do token em segundos (aceita frações; zero ou negativo gera token já expirado)"
    )

    # ===========================
    # --- Configurações Web ---
    # ===========================
    AUTH_COOKIE_NAME: str = Field("auth-token", description="Nome do cookie que carrega o token")

    # ===============================
    # --- Configuração de Logging ---
    # ===============================
    LOG_LEVEL: str = Field(default="INFO", description="Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL)")

    # ====================================================
    # --- Configuração do Modelo Pydantic BaseSettings ---
    # ====================================================
    model_config = SettingsConfigDict(
        env_prefix="SERVICE_",
        case_sensitive=False,
    )

    # ===============================
    # --- Validadores ---
    # ===============================
    @field_validator("PWD_KEY", "TOKEN_KEY", mode="before")
    @classmethod
    def decode_b64u_key(cls, value: Any) -> bytes:
        """Decodifica chaves vindas do ambiente como texto base64url."""
        if isinstance(value, (bytes, bytearray)):
            key = bytes(value)
        elif isinstance(value, str):
            try:
                key = b64u_decode_bytes(value.strip())
            except UtilsError as e:
                raise ValueError("A chave deve estar codificada em base64url sem padding.") from e
        else:
            raise ValueError("A chave deve ser texto base64url.")

        if not key:
            raise ValueError("A chave não pode ser vazia.")
        return key

    @property
    def token_config(self) -> TokenConfig:
        """Chave e duração dos tokens, prontas para as funções de `crypt`."""
        return TokenConfig(key=self.TOKEN_KEY, duration_sec=self.TOKEN_DURATION_SEC)

# ================================
# --- Criação da Instância ---
# ================================
@lru_cache
def get_settings() -> Settings:
    """
    Carrega as configurações uma única vez e as reutiliza em leituras seguintes.

    Raises:
        ValidationError: Se variáveis obrigatórias faltarem ou estiverem mal formatadas.
    """
    try:
        # Pydantic BaseSettings lê do ambiente ou .env na instanciação
        return Settings()
    except ValidationError as e:
        # Captura erros de validação do Pydantic (campos obrigatórios faltando, chaves inválidas)
        logger.critical(f"Erro fatal de validação ao carregar configurações: {e}")
        raise
