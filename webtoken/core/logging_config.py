# webtoken/core/logging_config.py
"""
Configura o logging da aplicação com Loguru.

Os módulos da aplicação usam `logging.getLogger(__name__)`; o
InterceptHandler repassa esses registros para o Loguru, que é o único
destino de saída.
"""

# ========================
# --- Importações ---
# ========================
import logging
import sys
from loguru import logger as loguru_logger

# ========================
# --- Formato ---
# ========================
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

# ========================
# --- Handler de Intercepção ---
# ========================
class InterceptHandler(logging.Handler):
    """Repassa registros do `logging` padrão para o Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Usa o nome do nível do Loguru quando existir; senão, o número.
        try:
            level = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Sobe a pilha até sair do módulo logging, para que Loguru aponte
        # a função que de fato emitiu o log.
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        loguru_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())

# ========================
# --- Função de Setup ---
# ========================
def setup_logging(log_level: str = "INFO") -> None:
    """
    Instala o Loguru como destino único dos logs.

    Args:
        log_level: Nível mínimo exibido (ex.: "INFO", "DEBUG").
    """
    log_level = log_level.upper()

    loguru_logger.remove()
    loguru_logger.add(
        sys.stderr,
        level=log_level,
        format=LOG_FORMAT,
        diagnose=False  # Não expõe valores de variáveis (chaves, tokens) em tracebacks
    )

    # level=0 deixa o filtro de nível a cargo do Loguru
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
