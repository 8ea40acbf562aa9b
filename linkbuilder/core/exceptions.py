# linkbuilder/core/exceptions.py
"""Domain exceptions shared by the form core, the client and the API."""
from typing import Dict, Optional


class LinkBuilderError(Exception):
    """Base exception for link builder errors."""

    pass


class ValidationError(LinkBuilderError):
    """A campaign draft failed schema validation."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        first = next(iter(self.errors.items()), None)
        super().__init__(
            f"Validation failed for {len(self.errors)} field(s). "
            f"First error: {first[0] + ': ' + first[1] if first else 'N/A'}"
        )


class DuplicateName(LinkBuilderError):
    """A reference entity with this exact name already exists."""

    def __init__(self, kind: str, name: str, message: Optional[str] = None):
        self.kind = kind
        self.name = name
        super().__init__(message or f"{kind} name already exists: {name}")


class InvalidInput(LinkBuilderError):
    """Input rejected before reaching the store (e.g. a blank name)."""

    pass


class TransientFetchError(LinkBuilderError):
    """A list/check/create call against the backend failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class NotFound(LinkBuilderError):
    """Requested record does not exist."""

    pass
