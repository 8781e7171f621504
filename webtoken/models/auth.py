# webtoken/models/auth.py
"""
Modelos Pydantic das requisições e respostas das rotas de autenticação.
"""

# ========================
# --- Importações ---
# ========================
from pydantic import BaseModel, Field

# ========================
# --- Requisições ---
# ========================
class LoginPayload(BaseModel):
    username: str = Field(..., min_length=1, title="Nome de Usuário")
    pwd: str = Field(..., title="Senha em texto plano")


class LogoffPayload(BaseModel):
    logoff: bool = Field(..., title="Remover o cookie de autenticação?")

# ========================
# --- Respostas ---
# ========================
class LoginResultBody(BaseModel):
    success: bool


class LoginResult(BaseModel):
    result: LoginResultBody


class LogoffResultBody(BaseModel):
    logged_off: bool


class LogoffResult(BaseModel):
    result: LogoffResultBody


class IdentityOut(BaseModel):
    """Identidade autenticada pelo token do cookie."""
    identity: str
