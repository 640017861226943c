"""
PaletteEngine service entry point.

Wires the v1 palette router into a FastAPI app. Run with:
    uvicorn main:app --reload
"""
from dotenv import load_dotenv

# Load environment variables before app.config reads them
load_dotenv()

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from app.api.v1 import router as v1_router  # noqa: E402
from app.config import config  # noqa: E402
from app.schemas import HealthResponse  # noqa: E402
from app.utils.logging import logger  # noqa: E402

app = FastAPI(
    title="PaletteEngine",
    description="Color model conversions and procedural palette generation for color pickers",
    version=config.SERVICE_VERSION
)

allowed_origins = config.allowed_origins()
if allowed_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"]
    )

app.include_router(v1_router)


@app.get("/healthz", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Service health check."""
    return HealthResponse(ok=True, version=config.SERVICE_VERSION, service=config.SERVICE_NAME)


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "PaletteEngine API",
        "version": config.SERVICE_VERSION,
        "docs": "/docs"
    }


logger.info("PaletteEngine app initialised", extra={"max_palette_size": config.MAX_PALETTE_SIZE})
