# webtoken/crypt/pwd.py
"""
Esquema de senha baseado na mesma primitiva de assinatura dos tokens.

A senha armazenada tem o formato `#01#<assinatura_b64u>`, onde o prefixo
identifica o esquema e a assinatura é calculada com `PWD_KEY` sobre a senha
em texto plano e o salt próprio do usuário.
"""

# ========================
# --- Importações ---
# ========================
import hmac

# --- Módulos da Aplicação ---
from webtoken.crypt.error import PwdNotMatching
from webtoken.crypt.signing import EncryptContent, encrypt_into_b64u

# ========================
# --- Constantes ---
# ========================
PWD_SCHEME_PREFIX = "#01#"

# ========================
# --- Funções de Senha ---
# ========================
def encrypt_pwd(enc_content: EncryptContent, key: bytes) -> str:
    """
    Gera a representação armazenável de uma senha.

    Args:
        enc_content: `content` é a senha em texto plano, `salt` o salt do usuário.
        key: Chave de senhas (`PWD_KEY`).

    Returns:
        String no formato `#01#<assinatura>`.
    """
    return f"{PWD_SCHEME_PREFIX}{encrypt_into_b64u(key, enc_content)}"

def validate_pwd(enc_content: EncryptContent, pwd_ref: str, key: bytes) -> None:
    """
    Verifica se a senha em texto plano corresponde à referência armazenada.

    Raises:
        PwdNotMatching: Se não corresponder.
        SigningFailed: Se a chave for inválida.
    """
    pwd = encrypt_pwd(enc_content, key)
    if not hmac.compare_digest(pwd.encode("utf-8"), pwd_ref.encode("utf-8")):
        raise PwdNotMatching()
