# webtoken/crypt/token.py
"""
Tokens de autenticação compactos, assinados e com expiração.

Formato textual: `ident_b64u.exp_b64u.sign_b64u`
- `ident_b64u`: identidade (ex.: username) em base64url sem padding.
- `exp_b64u`: expiração RFC 3339 UTC em base64url sem padding.
- `sign_b64u`: assinatura HMAC sobre os dois primeiros segmentos e o salt.

O salt não trafega no token: quem valida precisa fornecê-lo novamente.
Nenhum estado é mantido entre chamadas.
"""

# ========================
# --- Importações ---
# ========================
import hmac
from dataclasses import dataclass

# --- Módulos da Aplicação ---
from webtoken.core.utils import (
    UtilsError,
    b64u_decode,
    b64u_encode,
    now_utc,
    now_utc_plus_sec_str,
    parse_utc,
)
from webtoken.crypt.error import (
    TokenExpirationDecodeFailed,
    TokenExpirationUnparseable,
    TokenExpired,
    TokenFormatInvalid,
    TokenIdentityDecodeFailed,
    TokenSignatureMismatch,
)
from webtoken.crypt.signing import EncryptContent, encrypt_into_b64u

# ========================
# --- Constantes ---
# ========================
TOKEN_SEPARATOR = "."

# ========================
# --- Tipos ---
# ========================
@dataclass(frozen=True)
class TokenConfig:
    """Chave e duração dos tokens, construída uma vez a partir das Settings."""
    key: bytes
    duration_sec: float


@dataclass(frozen=True)
class Token:
    """
    Token já decomposto. Ser construído ou parseado não significa ser
    confiável: assinatura e expiração são verificadas à parte.
    """
    identity: str
    expiration: str
    signature_b64u: str

    def to_text(self) -> str:
        """Serializa o token no formato `ident_b64u.exp_b64u.sign_b64u`."""
        return TOKEN_SEPARATOR.join((
            b64u_encode(self.identity),
            b64u_encode(self.expiration),
            self.signature_b64u,
        ))

    @classmethod
    def from_text(cls, token_text: str) -> "Token":
        """
        Reconstrói um token a partir do texto.

        A assinatura é mantida exatamente como recebida.

        Raises:
            TokenFormatInvalid: Número de segmentos diferente de 3 ou segmento vazio.
            TokenIdentityDecodeFailed: Primeiro segmento não decodificável.
            TokenExpirationDecodeFailed: Segundo segmento não decodificável.
        """
        parts = token_text.split(TOKEN_SEPARATOR)
        if len(parts) != 3 or not all(parts):
            raise TokenFormatInvalid()

        ident_b64u, exp_b64u, signature_b64u = parts

        try:
            identity = b64u_decode(ident_b64u)
        except UtilsError as e:
            raise TokenIdentityDecodeFailed() from e

        try:
            expiration = b64u_decode(exp_b64u)
        except UtilsError as e:
            raise TokenExpirationDecodeFailed() from e

        return cls(identity=identity, expiration=expiration, signature_b64u=signature_b64u)

# ========================
# --- Geração e Validação (API Web) ---
# ========================
def generate_web_token(identity: str, salt: str, config: TokenConfig) -> str:
    """Gera um token com a chave/duração de `config` e retorna sua forma textual."""
    token = generate_token(identity, config.duration_sec, salt, config.key)
    return token.to_text()

def validate_web_token(token_text: str, salt: str, config: TokenConfig) -> None:
    """Valida a forma textual de um token com a chave de `config`."""
    validate_token(token_text, salt, config.key)

# ========================
# --- Geração e Validação ---
# ========================
def generate_token(identity: str, duration_sec: float, salt: str, key: bytes) -> Token:
    """
    Gera um novo token para `identity`, válido por `duration_sec` segundos.

    Durações zero ou negativas são aceitas e produzem um token já expirado.

    Raises:
        SigningFailed: Se a chave for inválida.
    """
    expiration = now_utc_plus_sec_str(duration_sec)
    signature_b64u = _token_sign_into_b64u(identity, expiration, salt, key)

    return Token(identity=identity, expiration=expiration, signature_b64u=signature_b64u)

def validate_token(token_text: str, salt: str, key: bytes) -> None:
    """
    Parseia e valida um token textual.

    Erros de formato do parse são propagados sem alteração.
    """
    token = Token.from_text(token_text)
    validate_token_sign_and_exp(token, salt, key)

def validate_token_sign_and_exp(token: Token, salt: str, key: bytes) -> None:
    """
    Verifica assinatura e depois expiração de um token já parseado.

    A expiração só é lida depois que a assinatura é autenticada.

    Raises:
        TokenSignatureMismatch: Assinatura não confere.
        TokenExpirationUnparseable: Expiração assinada mas não é RFC 3339.
        TokenExpired: Expiração anterior ao instante atual.
        SigningFailed: Se a chave for inválida.
    """
    # --- Assinatura ---
    new_signature_b64u = _token_sign_into_b64u(token.identity, token.expiration, salt, key)
    if not hmac.compare_digest(
        new_signature_b64u.encode("utf-8"),
        token.signature_b64u.encode("utf-8"),
    ):
        raise TokenSignatureMismatch()

    # --- Expiração ---
    try:
        expiration = parse_utc(token.expiration)
    except UtilsError as e:
        raise TokenExpirationUnparseable() from e

    if expiration < now_utc():
        raise TokenExpired()

def _token_sign_into_b64u(identity: str, expiration: str, salt: str, key: bytes) -> str:
    """Assina os dois primeiros segmentos (já em base64url) com o salt."""
    content = f"{b64u_encode(identity)}{TOKEN_SEPARATOR}{b64u_encode(expiration)}"
    return encrypt_into_b64u(key, EncryptContent(content=content, salt=salt))
