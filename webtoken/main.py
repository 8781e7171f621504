# webtoken/main.py
"""
Ponto de entrada da aplicação FastAPI de autenticação por token.
`create_app` monta a aplicação com a fonte de registros de usuários
fornecida pelo host, configura o logging e registra as rotas.
"""

# ========================
# --- Importações ---
# ========================
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

# --- Módulos da Aplicação ---
from webtoken.core.config import Settings, get_settings
from webtoken.core.logging_config import setup_logging
from webtoken.models.user import AuthStore
from webtoken.routers import auth

# ========================
# --- Configuração do Logger ---
# ========================
logger = logging.getLogger(__name__)

# ========================
# --- Ciclo de Vida (Lifespan) ---
# ========================
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Aplicação iniciada e pronta.")
    yield
    logger.info("Aplicação encerrada.")

# ========================
# --- Fábrica da Aplicação ---
# ========================
def create_app(auth_store: AuthStore, settings: Optional[Settings] = None) -> FastAPI:
    """
    Cria a aplicação FastAPI.

    Args:
        auth_store: Fonte dos registros de autenticação (username -> senha e salts).
        settings: Configurações explícitas. Se None, usa `get_settings()`
                  (carregadas do ambiente uma única vez).

    Returns:
        A instância FastAPI configurada.
    """
    current_settings = settings or get_settings()
    setup_logging(log_level=current_settings.LOG_LEVEL)

    app = FastAPI(
        title=current_settings.PROJECT_NAME,
        description="Autenticação stateless com tokens assinados e com expiração.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.auth_store = auth_store

    if settings is not None:
        app.dependency_overrides[get_settings] = lambda: settings

    app.include_router(auth.router, prefix=current_settings.API_V1_STR + "/auth", tags=["Authentication"])

    # --- Endpoint Raiz ---
    @app.get("/", tags=["Root"])
    async def read_root():
        """Endpoint raiz para verificar se a API está online."""
        return {"message": f"Bem-vindo à {current_settings.PROJECT_NAME}!"}

    return app
