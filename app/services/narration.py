"""Scripted copilot narration, keyed by action."""

GREETING = (
    "Hello! I'm your Sales Copilot. How can I help you today? "
    "You can start by ingesting a lead from CRM."
)

INGEST_REQUEST = "Ingest lead from CRM for Acme Manufacturing"
INGEST_DONE = 'Lead "{company}" ingested successfully. Opportunity: "{opportunity}". Ready to generate a draft?'

GENERATE_REQUEST = "Generate draft proposal"
GENERATE_PROGRESS = "Copilot is analyzing lead data and generating an AI Executive Summary..."
GENERATE_DONE = (
    "I've synthesized an Executive Summary focused on Acme's throughput bottlenecks and "
    "rework rates. The pricing table has also been populated with initial requirements."
)

APPROVAL_REQUEST = "Requesting manager approval"
APPROVAL_REQUEST_WITH_DISCOUNT = "Requesting approval with {discount}% discount"
APPROVAL_SENT = "Approval request sent. I'll notify you when the manager responds."
APPROVED = 'Approved! {discount_sentence}Note: "{note}".'
APPROVED_DISCOUNT_SENTENCE = "A {discount}% discount has been applied. "
REJECTED = 'Rejected: "{note}". Please adjust and resubmit.'

RESTORED = "Restored to version: {label} ({timestamp})"
TEMPLATE_APPLIED = 'Applied template "{name}" to the proposal.'

DEFAULT_REQUEST_NOTE = "Ready for review."

# Version labels
LABEL_AI_DRAFT = "AI Draft Generated"
LABEL_APPROVED = "Approved Version"
LABEL_MANUAL = "Manual Revision"


def approval_request(requested_discount: int | None) -> str:
    if requested_discount:
        return APPROVAL_REQUEST_WITH_DISCOUNT.format(discount=requested_discount)
    return APPROVAL_REQUEST


def approved(final_discount: int, note: str) -> str:
    sentence = APPROVED_DISCOUNT_SENTENCE.format(discount=final_discount) if final_discount > 0 else ""
    return APPROVED.format(discount_sentence=sentence, note=note)
