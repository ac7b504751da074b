"""
FastAPI entrypoint for the Scrooge budget tracker.
"""
import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from scrooge.core.config import settings
from scrooge.core.exceptions import InvalidAmount
from scrooge.core.utils import format_error
from scrooge.api.router import api_router
from scrooge.services.image_cache import cache_image

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.FETCH_IMAGE_ON_STARTUP:
        cache_image(settings.IMAGE_URL, settings.image_path)
    logger.info(f"{settings.APP_NAME} budget tracker running at http://localhost:{settings.PORT}")
    yield


app = FastAPI(
    title="Scrooge API",
    description="Spread the remaining monthly budget over the shopping trips left",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidAmount)
async def invalid_amount_handler(request: Request, exc: InvalidAmount):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=format_error(exc.message)
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # The only request body is the budget update
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=format_error("Invalid budget value", jsonable_encoder(exc.errors()))
    )


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


# Serve the browser client from the static directory; mounted last so API routes win
if os.path.isdir(settings.STATIC_DIR):
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
