# webtoken/crypt/signing.py
"""
Primitiva de assinatura com chave usada por senhas e tokens.

HMAC-SHA512 sobre o conteúdo seguido do salt, com o digest codificado em
base64url sem padding. Determinística: mesmas entradas, mesma saída.
"""

# ========================
# --- Importações ---
# ========================
import hashlib
import hmac
from dataclasses import dataclass

# --- Módulos da Aplicação ---
from webtoken.core.utils import b64u_encode_bytes
from webtoken.crypt.error import SigningFailed

# ========================
# --- Conteúdo a Assinar ---
# ========================
@dataclass(frozen=True)
class EncryptContent:
    """Par conteúdo + contexto (salt) a ser assinado."""
    content: str
    salt: str

# ========================
# --- Função de Assinatura ---
# ========================
def encrypt_into_b64u(key: bytes, enc_content: EncryptContent) -> str:
    """
    Assina `enc_content` com `key` e retorna a assinatura em base64url.

    Args:
        key: Chave secreta (bytes, não vazia).
        enc_content: Conteúdo e salt a serem assinados.

    Returns:
        Digest HMAC-SHA512 codificado em base64url sem padding.

    Raises:
        SigningFailed: Se a chave for vazia ou não for bytes.
    """
    if not isinstance(key, (bytes, bytearray)) or len(key) == 0:
        raise SigningFailed()

    mac = hmac.new(bytes(key), digestmod=hashlib.sha512)
    mac.update(enc_content.content.encode("utf-8"))
    mac.update(enc_content.salt.encode("utf-8"))

    return b64u_encode_bytes(mac.digest())
