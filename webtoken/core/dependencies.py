# webtoken/core/dependencies.py
"""
Define as dependências reutilizáveis para a aplicação FastAPI,
especialmente aquelas relacionadas à autenticação por token em cookie.
"""

# ========================
# --- Importações ---
# ========================
import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request, Response, status

# --- Módulos da Aplicação ---
from webtoken.core.config import Settings, get_settings
from webtoken.core.security import set_token_cookie
from webtoken.crypt.error import CryptError
from webtoken.crypt.token import Token, validate_token_sign_and_exp
from webtoken.models.user import AuthStore

# ========================
# --- Configuração do Logger ---
# ========================
logger = logging.getLogger(__name__)

# ========================
# --- Dependências Base ---
# ========================
def get_auth_store(request: Request) -> AuthStore:
    """Retorna a fonte de registros de autenticação configurada em `app.state`."""
    return request.app.state.auth_store

SettingsDep = Annotated[Settings, Depends(get_settings)]
AuthStoreDep = Annotated[AuthStore, Depends(get_auth_store)]

def unauthorized_exception() -> HTTPException:
    """Resposta única para qualquer falha de autenticação."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Não autorizado",
    )

# ========================
# --- Dependência: Identidade Atual ---
# ========================
async def get_current_identity(
    request: Request,
    response: Response,
    settings: SettingsDep,
    store: AuthStoreDep,
) -> str:
    """
    Dependência que autentica a requisição pelo token do cookie.

    Processo:
    1. Lê o cookie e parseia o token.
    2. Busca o salt de token do usuário identificado.
    3. Valida assinatura e expiração.
    4. Renova o cookie com um novo token (expiração deslizante).

    Returns:
        A identidade (username) contida no token.

    Raises:
        HTTPException: Status 401 para qualquer falha, sem detalhar o motivo.
    """
    token_text = request.cookies.get(settings.AUTH_COOKIE_NAME)
    if not token_text:
        logger.info("Requisição sem cookie de autenticação.")
        raise unauthorized_exception()

    try:
        token = Token.from_text(token_text)
    except CryptError as e:
        logger.warning(f"Token rejeitado no parse: {e.kind.value}")
        raise unauthorized_exception()

    record = await store.get_auth_record(token.identity)
    if record is None:
        logger.warning("Token rejeitado: usuário do token não encontrado.")
        raise unauthorized_exception()

    try:
        validate_token_sign_and_exp(token, record.token_salt, settings.TOKEN_KEY)
    except CryptError as e:
        logger.warning(f"Token rejeitado para '{token.identity}': {e.kind.value}")
        raise unauthorized_exception()

    set_token_cookie(response, token.identity, record.token_salt, settings)
    return token.identity

# ========================
# --- Tipos Anotados para Rotas ---
# ========================
CurrentIdentity = Annotated[str, Depends(get_current_identity)]
