# webtoken/crypt/error.py
"""
Erros do pacote de criptografia.

Cada tipo de falha tem sua própria classe e um `kind` fixo, permitindo que a
camada web registre o motivo exato internamente enquanto responde ao cliente
apenas com uma mensagem genérica. Nenhum erro carrega material secreto.
"""

# ========================
# --- Importações ---
# ========================
from enum import Enum

# ========================
# --- Tipos de Erro ---
# ========================
class CryptErrorKind(str, Enum):
    """Conjunto fechado de motivos de falha."""
    # -- Chave / assinatura
    SIGNING_FAILED = "SigningFailed"

    # -- Senha
    PWD_NOT_MATCHING = "PwdNotMatching"

    # -- Token
    TOKEN_FORMAT_INVALID = "FormatInvalid"
    TOKEN_IDENTITY_DECODE_FAILED = "IdentityDecodeFailed"
    TOKEN_EXPIRATION_DECODE_FAILED = "ExpirationDecodeFailed"
    TOKEN_SIGNATURE_MISMATCH = "SignatureMismatch"
    TOKEN_EXPIRATION_UNPARSEABLE = "ExpirationUnparseable"
    TOKEN_EXPIRED = "Expired"

# ========================
# --- Exceções ---
# ========================
class CryptError(Exception):
    """Erro base. Subclasses definem `kind`."""

    kind: CryptErrorKind

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind.value)


class SigningFailed(CryptError):
    """A chave fornecida não pôde ser usada para assinar (vazia ou tipo inválido)."""
    kind = CryptErrorKind.SIGNING_FAILED


class PwdNotMatching(CryptError):
    kind = CryptErrorKind.PWD_NOT_MATCHING


class TokenError(CryptError):
    """Base para todas as rejeições de token."""


class TokenFormatInvalid(TokenError):
    """Número de segmentos diferente de três, ou segmento vazio."""
    kind = CryptErrorKind.TOKEN_FORMAT_INVALID


class TokenIdentityDecodeFailed(TokenError):
    kind = CryptErrorKind.TOKEN_IDENTITY_DECODE_FAILED


class TokenExpirationDecodeFailed(TokenError):
    kind = CryptErrorKind.TOKEN_EXPIRATION_DECODE_FAILED


class TokenSignatureMismatch(TokenError):
    """Assinatura recalculada difere da recebida (adulteração, salt ou chave errados)."""
    kind = CryptErrorKind.TOKEN_SIGNATURE_MISMATCH


class TokenExpirationUnparseable(TokenError):
    kind = CryptErrorKind.TOKEN_EXPIRATION_UNPARSEABLE


class TokenExpired(TokenError):
    kind = CryptErrorKind.TOKEN_EXPIRED
