"""Mock CRM record, price book and boilerplate proposal text."""

from decimal import Decimal

from app.models import Lead, LineItem


SAMPLE_LEAD = Lead(
    company="Acme Manufacturing Pvt Ltd",
    contact="Riya Sharma",
    email="riya.sharma@acme-mfg.co.in",
    opportunity="Factory Floor Automation - Phase 1",
    pain_points=(
        "Manual assembly throughput bottlenecks",
        "High rework rate",
    ),
)

PRICEBOOK = {
    "ROBOTIC_ARM": Decimal("15000"),
    "ML_QUALITY_MODULE": Decimal("12000"),
    "ONSITE_INSTALL": Decimal("800"),
}

INITIAL_PROPOSAL_TEXT = {
    "executive_summary": (
        "This proposal outlines the strategy for implementing high-efficiency automated "
        "systems at Acme Manufacturing. Our solution focuses on eliminating current manual "
        "bottlenecks and improving output quality through precision robotics and ML-driven "
        "quality control."
    ),
    "scope_of_work": (
        "Phase 1 involves the deployment of robotic assembly units and ML modules to "
        "supervise production lines. Installation includes hardware setup, software "
        "integration, and onsite personnel training."
    ),
    "deliverables": (
        "- Robotic Assembly Unit (Base Model)\n"
        "- ML Quality Supervision Software\n"
        "- Training Manuals\n"
        "- Support Documentation"
    ),
    "timeline": "6-8 weeks after Purchase Order",
    "terms": "30% upfront payment, 70% on final delivery and acceptance testing.",
}

# Fed to the summary prompt as the fixed scope description
PROPOSED_SCOPE = (
    "Deployment of robotic assembly units and ML modules to supervise production lines. "
    "Installation includes hardware setup, software integration, and onsite personnel training."
)


def initial_pricing() -> list[LineItem]:
    """Line items a freshly generated draft starts with."""
    return [
        LineItem(id="1", name="Robotic Arm", price=PRICEBOOK["ROBOTIC_ARM"], quantity=1),
        LineItem(id="2", name="ML Quality Module", price=PRICEBOOK["ML_QUALITY_MODULE"], quantity=1),
        LineItem(id="3", name="Onsite Install (Days)", price=PRICEBOOK["ONSITE_INSTALL"], quantity=5),
    ]
