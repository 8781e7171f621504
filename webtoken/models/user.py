# webtoken/models/user.py
"""
Este módulo define o registro de autenticação de um usuário e o protocolo
da fonte desses registros. O armazenamento em si pertence à aplicação
hospedeira, que fornece uma implementação de `AuthStore`.
"""

# ========================
# --- Importações ---
# ========================
from typing import Optional, Protocol

from pydantic import BaseModel, Field

# ========================
# --- Modelos Pydantic ---
# ========================
class AuthRecord(BaseModel):
    """Dados mínimos de um usuário necessários para login e validação de token."""
    username: str = Field(..., min_length=1, title="Nome de Usuário (identidade do token)")
    pwd: str = Field(..., title="Senha armazenada no formato #01#<assinatura>")
    pwd_salt: str = Field(..., title="Salt da senha")
    token_salt: str = Field(..., title="Salt dos tokens do usuário")

# ========================
# --- Protocolo de Armazenamento ---
# ========================
class AuthStore(Protocol):
    async def get_auth_record(self, username: str) -> Optional[AuthRecord]:
        """Retorna o registro do usuário ou None se não existir."""
        ...
