from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# IMPORT ROUTERS
from skatescore.routers.health import router as health_router
from skatescore.routers.sov import router as sov_router
from skatescore.routers.elements import router as elements_router
from skatescore.routers.programs import router as programs_router
from skatescore.routers.errors import scoring_exception_handler, validation_exception_handler
from skatescore.config import get_settings
from skatescore.core.exceptions import ScoringException
from skatescore.core.logging_config import configure_logging
load_dotenv()


# SWAGGER UI - tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Scale of Values"},
    {"name": "Elements"},
    {"name": "Programs"},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    print("Starting Skate Score Calculator API...")
    print("Swagger UI available at: http://localhost:8000/docs")
    yield
    print("Shutting down Skate Score Calculator API...")


# FASTAPI APPLICATION CONFIGURATION
settings = get_settings()

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
    lifespan=lifespan,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# REGISTER EXCEPTION HANDLERS
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(ScoringException, scoring_exception_handler)

# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)           # Health
app.include_router(sov_router, prefix=settings.API_V1_PREFIX)        # Scale of Values
app.include_router(elements_router, prefix=settings.API_V1_PREFIX)   # Elements
app.include_router(programs_router, prefix=settings.API_V1_PREFIX)   # Programs


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.APP_ENV,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "skatescore.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
