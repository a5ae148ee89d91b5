"""Business logic services."""

from app.services.ai_provider import AIService, ai_service
from app.services.content_generator import ContentGeneratorService
from app.services.copilot import SalesCopilot
from app.services.pricing import PricingSummary, calculate_pricing

__all__ = [
    "AIService",
    "ai_service",
    "ContentGeneratorService",
    "SalesCopilot",
    "PricingSummary",
    "calculate_pricing",
]
