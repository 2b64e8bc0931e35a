"""
FastAPI Application Entry Point - Topology Analysis API

Este módulo define la aplicación principal FastAPI que expone el motor de
análisis de topología a través de una API REST local.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from topology.core.config import API_CONFIG
from topology.utils.logger import get_logger

# Routers
from api.routers import topology

logger = get_logger(__name__)

# Crear instancia FastAPI
app = FastAPI(
    title=API_CONFIG.title,
    description=API_CONFIG.description,
    version=API_CONFIG.version,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configurar CORS para el dashboard local
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(API_CONFIG.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Registrar routers
app.include_router(topology.router, prefix="/api", tags=["Topología"])


@app.get("/")
async def root():
    """Endpoint raíz - información de la API."""
    return {
        "message": API_CONFIG.title,
        "version": API_CONFIG.version,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.on_event("startup")
async def startup_event():
    """Evento de inicio - inicializar recursos."""
    logger.info(f"Iniciando {API_CONFIG.title} v{API_CONFIG.version}")
    logger.info("Documentación disponible en: http://localhost:8000/docs")


@app.on_event("shutdown")
async def shutdown_event():
    """Evento de cierre - limpieza de recursos."""
    logger.info(f"Cerrando {API_CONFIG.title}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
