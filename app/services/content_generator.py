"""Content generator service - executive summaries and follow-up emails."""

from typing import Optional

from app.models import Lead
from app.services.ai_provider import AIService, ai_service
from app.services.sample_data import PROPOSED_SCOPE


class ContentGeneratorService:
    """Builds prompts for proposal content and substitutes fixed text on failure."""

    SUMMARY_PROMPT = """
You are an expert Sales Engineer. Generate a high-impact Executive Summary for a professional sales proposal.

CLIENT DATA:
Lead: {company}
Contact: {contact}
Opportunity: {opportunity}
Pain Points: {pain_points}

PROPOSED SCOPE:
{scope}

INSTRUCTIONS:
1. Focus heavily on how the "{opportunity}" directly solves {quoted_pain_points}.
2. Maintain a professional, persuasive, and visionary tone.
3. The response should ONLY contain the Executive Summary text, about 2-3 paragraphs.
4. Do not include section headers like "Executive Summary".
"""

    EMAIL_PROMPT = """
Draft a professional follow-up email to {contact} at {company} regarding the proposal for {opportunity}.
Context: {summary}
Make it warm, professional, and clear.
"""

    SUMMARY_FALLBACK = (
        "Error generating AI summary. Contoso Dynamics is prepared to transform your factory floor "
        "with industry-leading automation, targeting your specific throughput bottlenecks and "
        "rework challenges."
    )
    SUMMARY_EMPTY = "Failed to generate AI summary."

    EMAIL_FALLBACK = "Email draft failed."
    EMAIL_EMPTY = "Failed to draft email."

    def __init__(self, ai: Optional[AIService] = None):
        self.ai = ai or ai_service

    def build_summary_prompt(self, lead: Lead) -> str:
        return self.SUMMARY_PROMPT.format(
            company=lead.company,
            contact=lead.contact,
            opportunity=lead.opportunity,
            pain_points=", ".join(lead.pain_points),
            quoted_pain_points=" and ".join(f'"{p}"' for p in lead.pain_points) or "the client's needs",
            scope=PROPOSED_SCOPE,
        )

    def build_email_prompt(self, lead: Lead, summary: str) -> str:
        return self.EMAIL_PROMPT.format(
            contact=lead.contact,
            company=lead.company,
            opportunity=lead.opportunity,
            summary=summary,
        )

    async def generate_executive_summary(self, lead: Lead) -> str:
        text = await self.ai.generate(self.build_summary_prompt(lead), fallback_value=self.SUMMARY_FALLBACK)
        return self._or_empty(text, self.SUMMARY_EMPTY)

    async def generate_follow_up_email(self, lead: Lead, summary: str) -> str:
        text = await self.ai.generate(self.build_email_prompt(lead, summary), fallback_value=self.EMAIL_FALLBACK)
        return self._or_empty(text, self.EMAIL_EMPTY)

    @staticmethod
    def _or_empty(text: Optional[str], empty_value: str) -> str:
        if text is None or not text.strip():
            return empty_value
        return text.strip()
