"""
Realty API - Main Application
API de cadastro imobiliário: usuários, equipes, regiões, bairros e corretores
"""
import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from realty_api.core import settings, require_api_key
from realty_api.core.errors import (
    AppError,
    BadRequestError,
    InternalServerError,
    NotFoundError,
    ValidationError
)
from realty_api.core.logging_config import setup_logging, RequestLoggingMiddleware
from realty_api.database import init_db
from realty_api.api import (
    health_router,
    users_router,
    user_types_router,
    neighborhoods_router,
    regions_router,
    teams_router,
    members_router,
    broker_profiles_router
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle do aplicativo"""
    # Startup
    setup_logging(settings)
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")

    # Inicializa banco de dados
    await init_db(seed=settings.SEED_USER_TYPES)
    logger.info("Database initialized")

    yield

    # Shutdown
    logger.info("Shutting down...")


# Cria aplicação
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Real-estate registry API: users, teams, members, regions, neighborhoods and broker profiles",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None
)


# =====================================================
# HANDLERS DE ERRO
# =====================================================

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(part) for part in err["loc"] if part != "body"),
            "message": err["msg"]
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationError("Validation failed", details).to_dict()
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    error_class = NotFoundError if exc.status_code == status.HTTP_404_NOT_FOUND else BadRequestError
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(status_code=exc.status_code, content=error_class(message).to_dict())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=InternalServerError("Internal server error").to_dict()
    )


# Log de requisições
app.add_middleware(RequestLoggingMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers (tudo exceto health exige X-API-KEY)
protected = [Depends(require_api_key)]

app.include_router(health_router, prefix=settings.API_PREFIX)
app.include_router(user_types_router, prefix=settings.API_PREFIX, dependencies=protected)
app.include_router(users_router, prefix=settings.API_PREFIX, dependencies=protected)
app.include_router(neighborhoods_router, prefix=settings.API_PREFIX, dependencies=protected)
app.include_router(regions_router, prefix=settings.API_PREFIX, dependencies=protected)
app.include_router(teams_router, prefix=settings.API_PREFIX, dependencies=protected)
app.include_router(members_router, prefix=settings.API_PREFIX, dependencies=protected)
app.include_router(broker_profiles_router, prefix=settings.API_PREFIX, dependencies=protected)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "realty_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
