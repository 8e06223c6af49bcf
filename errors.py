# errors.py
"""Exception types raised by the advocate directory."""


class AdvocateDirectoryError(Exception):
    """Base class for every error the directory raises to its callers."""


class InputValidationError(AdvocateDirectoryError):
    """Raised when caller-supplied input is missing or malformed."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


class CollaboratorUnavailable(AdvocateDirectoryError):
    """Raised when the advocate roster or feedback store cannot be read or written.

    Distinct from an empty result: callers should show a retry/error state
    rather than "no advocates found".
    """

    def __init__(self, collaborator: str, message: str) -> None:
        super().__init__(f"{collaborator} unavailable: {message}")
        self.collaborator = collaborator


class DuplicateRegistrationError(InputValidationError):
    """Raised when onboarding a registration number already in the roster."""

    def __init__(self, reg_no: str) -> None:
        super().__init__("regNo", f"advocate {reg_no} is already registered")
        self.reg_no = reg_no
