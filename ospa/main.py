from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from ospa.config import get_settings
from ospa.core.logging import configure_logging

# IMPORT ROUTERS
from ospa.routers.errors import EXCEPTION_HANDLERS
from ospa.routers.health import router as health_router
from ospa.routers.records import router as records_router
from ospa.routers.scoring import router as scoring_router
from ospa.routers.submissions import router as submissions_router

configure_logging()
settings = get_settings()


# SWAGGER UI - tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Records"},
    {"name": "Scoring"},
    {"name": "Submissions"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title="OSPA Scorer API",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# REGISTER EXCEPTION HANDLERS
for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)       # Health
app.include_router(records_router)      # Records
app.include_router(scoring_router)      # Scoring
app.include_router(submissions_router)  # Submissions


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
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
        "ospa.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
