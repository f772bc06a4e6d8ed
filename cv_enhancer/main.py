import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from cv_enhancer.api.routes.parse import router as parse_router
from cv_enhancer.api.routes.upload import router as upload_router
from cv_enhancer.config import get_settings

settings = get_settings()

logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(
    title=settings.app_name,
    description="Converts uploaded PDF resumes into structured, editable records",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(upload_router)
app.include_router(parse_router)


@app.get("/", tags=["health"])
def root():
    return {"service": "cv-enhancer", "status": "running"}


@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}


def custom_openapi():
    """Generate OpenAPI schema with custom settings."""
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="CV Enhancer API",
        version="0.1.0",
        description="Resume upload, text extraction and heuristic parsing",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi
