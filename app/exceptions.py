"""Domain errors raised by the copilot services."""

from typing import Optional


class CopilotError(Exception):
    """Base class for copilot workflow errors."""


class NotFoundError(CopilotError):
    """Raised when a referenced lead, line item, version or template does not exist."""


class PermissionDeniedError(CopilotError):
    """Raised when the current viewer role may not perform an action."""

    def __init__(self, action: str, role: str):
        super().__init__(f"Role '{role}' cannot '{action}'")
        self.action = action
        self.role = role


class WorkflowError(CopilotError):
    """Raised when an action is not possible in the current session state."""


class TransitionError(WorkflowError):
    """Raised when an approval transition is invalid."""

    def __init__(self, action: str, current: str, reason: Optional[str] = None):
        msg = f"Cannot '{action}' approval request (status={current})"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
        self.action = action
        self.current_status = current
        self.reason = reason
