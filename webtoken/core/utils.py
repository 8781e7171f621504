# webtoken/core/utils.py
"""
Módulo contendo funções utilitárias de baixo nível usadas pelo pacote de
criptografia: codificação base64url sem padding e helpers de tempo UTC
no formato RFC 3339.
"""

# ========================
# --- Importações ---
# ========================
import base64
import binascii
import re
from datetime import datetime, timedelta, timezone

# ========================
# --- Erros ---
# ========================
class UtilsError(ValueError):
    """Erro base das funções utilitárias."""


class Base64DecodeError(UtilsError):
    """Texto não pôde ser decodificado como base64url sem padding."""


class DateFailParse(UtilsError):
    """Texto não é um timestamp RFC 3339 válido."""

    def __init__(self, value: str):
        super().__init__(f"Data inválida: {value!r}")
        self.value = value

# ========================
# --- Base64url ---
# ========================
# Apenas o alfabeto URL-safe, sem '=' de padding.
_B64U_RE = re.compile(r"[A-Za-z0-9_-]*")

def b64u_encode_bytes(data: bytes) -> str:
    """Codifica bytes em base64url sem padding."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")

def b64u_encode(text: str) -> str:
    """Codifica um texto (UTF-8) em base64url sem padding."""
    return b64u_encode_bytes(text.encode("utf-8"))

def b64u_decode_bytes(b64u: str) -> bytes:
    """
    Decodifica base64url sem padding para bytes.

    Só a forma canônica é aceita: bits finais não usados devem ser zero,
    de modo que cada sequência de bytes tenha uma única representação.

    Raises:
        Base64DecodeError: Caractere fora do alfabeto, comprimento inválido
            ou codificação não canônica.
    """
    if not _B64U_RE.fullmatch(b64u):
        raise Base64DecodeError("Caractere fora do alfabeto base64url")
    padded = b64u + "=" * (-len(b64u) % 4)
    try:
        data = base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as e:
        raise Base64DecodeError(str(e)) from e

    if b64u_encode_bytes(data) != b64u:
        raise Base64DecodeError("Codificação base64url não canônica")
    return data

def b64u_decode(b64u: str) -> str:
    """Decodifica base64url sem padding para texto UTF-8."""
    data = b64u_decode_bytes(b64u)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise Base64DecodeError("Conteúdo decodificado não é UTF-8") from e

# ========================
# --- Tempo (UTC / RFC 3339) ---
# ========================
_RFC3339_RE = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})[Tt]([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:\.([0-9]+))?"
    r"([Zz]|[+-][0-9]{2}:[0-9]{2})"
)

def now_utc() -> datetime:
    """Retorna o instante atual em UTC (timezone-aware)."""
    return datetime.now(timezone.utc)

def format_time(time: datetime) -> str:
    """
    Formata um datetime no formato canônico RFC 3339 em UTC.

    Sempre com microssegundos e sufixo 'Z', ex.: 2023-05-17T15:30:00.123456Z.
    """
    return time.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")

def now_utc_plus_sec_str(sec: float) -> str:
    """Retorna `now_utc() + sec` formatado. Aceita valores fracionários e negativos."""
    return format_time(now_utc() + timedelta(seconds=sec))

def parse_utc(moment: str) -> datetime:
    """
    Converte um texto RFC 3339 em datetime UTC.

    O offset é obrigatório ('Z' ou '+HH:MM'/'-HH:MM'). Frações de segundo
    além de microssegundos são truncadas.

    Raises:
        DateFailParse: Se o texto não for um timestamp RFC 3339 válido.
    """
    match = _RFC3339_RE.fullmatch(moment)
    if not match:
        raise DateFailParse(moment)

    year, month, day, hour, minute, second, fraction, offset = match.groups()
    microsecond = int((fraction or "0")[:6].ljust(6, "0"))

    if offset in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = -1 if offset[0] == "-" else 1
        offset_delta = timedelta(hours=int(offset[1:3]), minutes=int(offset[4:6]))
        try:
            tz = timezone(sign * offset_delta)
        except ValueError as e:
            raise DateFailParse(moment) from e

    try:
        parsed = datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second),
            microsecond, tzinfo=tz
        )
    except ValueError as e:
        # Ex.: minuto 80, dia 31 de fevereiro
        raise DateFailParse(moment) from e

    return parsed.astimezone(timezone.utc)
