# webtoken/crypt/__init__.py
"""
Assinatura, senhas e tokens. Funções puras, sem I/O e sem logging.
"""

from webtoken.crypt.error import (
    CryptError,
    CryptErrorKind,
    PwdNotMatching,
    SigningFailed,
    TokenError,
    TokenExpirationDecodeFailed,
    TokenExpirationUnparseable,
    TokenExpired,
    TokenFormatInvalid,
    TokenIdentityDecodeFailed,
    TokenSignatureMismatch,
)
from webtoken.crypt.pwd import encrypt_pwd, validate_pwd
from webtoken.crypt.signing import EncryptContent, encrypt_into_b64u
from webtoken.crypt.token import (
    Token,
    TokenConfig,
    generate_token,
    generate_web_token,
    validate_token,
    validate_token_sign_and_exp,
    validate_web_token,
)

__all__ = [
    "CryptError",
    "CryptErrorKind",
    "EncryptContent",
    "PwdNotMatching",
    "SigningFailed",
    "Token",
    "TokenConfig",
    "TokenError",
    "TokenExpirationDecodeFailed",
    "TokenExpirationUnparseable",
    "TokenExpired",
    "TokenFormatInvalid",
    "TokenIdentityDecodeFailed",
    "TokenSignatureMismatch",
    "encrypt_into_b64u",
    "encrypt_pwd",
    "generate_token",
    "generate_web_token",
    "validate_pwd",
    "validate_token",
    "validate_token_sign_and_exp",
    "validate_web_token",
]
