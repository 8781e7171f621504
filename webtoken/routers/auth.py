# webtoken/routers/auth.py
"""
Este módulo define as rotas da API relacionadas à autenticação:
login (emissão do token em cookie), logoff (remoção do cookie) e
consulta da identidade autenticada.
"""

# ========================
# --- Importações ---
# ========================
import logging
from typing import Annotated

from fastapi import APIRouter, Body, Response

# --- Módulos da Aplicação ---
from webtoken.core.dependencies import AuthStoreDep, CurrentIdentity, SettingsDep, unauthorized_exception
from webtoken.core.security import remove_token_cookie, set_token_cookie
from webtoken.crypt.error import PwdNotMatching
from webtoken.crypt.pwd import validate_pwd
from webtoken.crypt.signing import EncryptContent
from webtoken.models.auth import (
    IdentityOut,
    LoginPayload,
    LoginResult,
    LoginResultBody,
    LogoffPayload,
    LogoffResult,
    LogoffResultBody,
)

# ========================
# --- Configuração do Logger ---
# ========================
logger = logging.getLogger(__name__)

# ========================
# --- Configuração do Router ---
# ========================
router = APIRouter(
    tags=["Authentication"],
)

# ========================
# --- Rotas da API ---
# ========================

# --- Endpoint de Login ---
@router.post(
    "/login",
    response_model=LoginResult,
    summary="Autentica o usuário e grava o token no cookie",
)
async def login(
    response: Response,
    settings: SettingsDep,
    store: AuthStoreDep,
    payload: Annotated[LoginPayload, Body(description="Credenciais do usuário.")]
):
    """
    Verifica usuário e senha e, em caso de sucesso, define o cookie de
    autenticação com um token recém-gerado.
    """
    record = await store.get_auth_record(payload.username)
    if record is None:
        logger.info(f"Login falhou: usuário '{payload.username}' não encontrado.")
        raise unauthorized_exception()

    try:
        validate_pwd(
            EncryptContent(content=payload.pwd, salt=record.pwd_salt),
            record.pwd,
            settings.PWD_KEY,
        )
    except PwdNotMatching:
        logger.info(f"Login falhou: senha incorreta para '{payload.username}'.")
        raise unauthorized_exception()

    set_token_cookie(response, record.username, record.token_salt, settings)
    logger.info(f"Login bem-sucedido para '{record.username}'.")

    return LoginResult(result=LoginResultBody(success=True))

# --- Endpoint de Logoff ---
@router.post(
    "/logoff",
    response_model=LogoffResult,
    summary="Remove o cookie de autenticação",
)
async def logoff(
    response: Response,
    settings: SettingsDep,
    payload: Annotated[LogoffPayload, Body(description="Confirmação de logoff.")]
):
    """Remove o cookie quando `logoff` é verdadeiro. Não exige token válido."""
    if payload.logoff:
        remove_token_cookie(response, settings)

    return LogoffResult(result=LogoffResultBody(logged_off=payload.logoff))

# --- Endpoint de Identidade Atual ---
@router.get(
    "/me",
    response_model=IdentityOut,
    summary="Retorna a identidade autenticada pelo cookie",
)
async def read_current_identity(identity: CurrentIdentity):
    return IdentityOut(identity=identity)
