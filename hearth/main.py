"""FastAPI application entry point for the Hearth home agent."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from hearth.api.routes.commands import INTERNAL_ERROR
from hearth.api.routes.commands import router as commands_router
from hearth.api.routes.handlers import router as handlers_router
from hearth.api.routes.state import router as state_router
from hearth.dispatcher import dispatcher

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    logger.info(f"Starting {settings.app_name}")

    # State lives in memory only; every start begins from the defaults file.
    dispatcher.store.load_defaults_from_yaml(settings.household_config_path)

    logger.info(f"{settings.app_name} is ready")
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    version="1.0.0",
    lifespan=lifespan,
)

# CORS for the conversational frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(commands_router, prefix="/api/v1")
app.include_router(state_router, prefix="/api/v1")
app.include_router(handlers_router, prefix="/api/v1")


@app.exception_handler(RequestValidationError)
async def malformed_request_handler(request: Request, exc: RequestValidationError):
    """Answer unparseable request bodies with the same apology as other failures."""
    logger.warning(f"Malformed request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})


@app.get("/api/v1/health")
async def health_check():
    """Health check endpoint."""
    state = dispatcher.store.state
    return {
        "status": "healthy",
        "handlers": [h.handler_id for h in dispatcher.handlers],
        "lights_count": len(state.lights),
        "tasks_count": len(state.tasks),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hearth.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
