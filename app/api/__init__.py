"""API routers."""

from app.api.session import router as session_router
from app.api.leads import router as leads_router
from app.api.proposals import router as proposals_router
from app.api.templates import router as templates_router
from app.api.approval import router as approval_router
from app.api.chat import router as chat_router
from app.api.emails import router as email_router

__all__ = [
    "session_router",
    "leads_router",
    "proposals_router",
    "templates_router",
    "approval_router",
    "chat_router",
    "email_router",
]
