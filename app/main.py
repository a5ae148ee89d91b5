"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from app.config import settings
from app.dependencies import get_copilot
from app.exceptions import CopilotError, NotFoundError, PermissionDeniedError, WorkflowError
from app.logging_config import configure_logging
from app.api import (
    approval_router,
    chat_router,
    email_router,
    leads_router,
    proposals_router,
    session_router,
    templates_router,
)
from app.services import SalesCopilot

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    configure_logging()
    copilot = get_copilot()
    if not copilot.generator.ai.is_available():
        logger.warning("No AI provider configured, generated content will use fallback text")
    logger.info("%s started", settings.app_name)
    yield
    # Shutdown
    await copilot.shutdown()


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Sales copilot: AI-drafted proposals with manager approval",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Templates
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

# Include API routers
app.include_router(session_router, prefix="/api")
app.include_router(leads_router, prefix="/api")
app.include_router(proposals_router, prefix="/api")
app.include_router(templates_router, prefix="/api")
app.include_router(approval_router, prefix="/api")
app.include_router(chat_router, prefix="/api")
app.include_router(email_router, prefix="/api")


_ERROR_STATUS = (
    (NotFoundError, 404),
    (PermissionDeniedError, 403),
    (WorkflowError, 409),
)


@app.exception_handler(CopilotError)
async def copilot_error_handler(request: Request, exc: CopilotError):
    """Translate workflow errors into HTTP responses."""
    status_code = next((code for cls, code in _ERROR_STATUS if isinstance(exc, cls)), 400)
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.get("/", response_class=HTMLResponse)
async def index(request: Request, copilot: SalesCopilot = Depends(get_copilot)):
    """Serve the copilot dashboard."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "app_name": settings.app_name,
            "state": copilot.state,
            "pricing": copilot.pricing,
        },
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}


@app.get("/api")
async def api_info():
    """API information."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "endpoints": {
            "session": "/api/session",
            "leads": "/api/leads",
            "proposal": "/api/proposal",
            "templates": "/api/templates",
            "approval": "/api/approval",
            "chat": "/api/chat/messages",
            "email": "/api/email",
        },
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
