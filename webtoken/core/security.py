# webtoken/core/security.py
"""
Módulo responsável por transportar o token de autenticação em cookie HTTP:
emissão (com geração de um novo token) e remoção.
"""

# ========================
# --- Importações ---
# ========================
from fastapi import Response

# --- Módulos da Aplicação ---
from webtoken.core.config import Settings
from webtoken.crypt.token import generate_web_token

# ========================
# --- Funções de Cookie ---
# ========================
def set_token_cookie(response: Response, identity: str, salt: str, settings: Settings) -> None:
    """
    Gera um token para `identity` e o grava no cookie de autenticação.

    Args:
        response: Resposta onde o cookie será definido.
        identity: Identidade do usuário (username).
        salt: Salt de token do usuário.
        settings: Configurações com chave, duração e nome do cookie.

    Raises:
        SigningFailed: Se a chave configurada for inválida.
    """
    token_text = generate_web_token(identity, salt, settings.token_config)
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token_text,
        path="/",
        httponly=True,
    )

def remove_token_cookie(response: Response, settings: Settings) -> None:
    """Remove o cookie de autenticação do cliente."""
    response.delete_cookie(key=settings.AUTH_COOKIE_NAME, path="/", httponly=True)
