"""
Application-wide exception hierarchy.

Services raise these; blueprints register handlers against them once and
get consistent HTTP status codes everywhere.

Catalog lookups are the exception to the rule: they return None for an
unknown id and never raise. NotFoundError is raised by the layer that
decides a missing record is an error (blueprints, DB-backed services).

Usage:
    from adm_guide.core.exceptions import NotFoundError, ValidationError

    raise NotFoundError(resource="Stakeholder", resource_id="3f2a...")
    raise ValidationError("Stakeholder role is required.", details={"role": "required"})
"""


class NotFoundError(Exception):
    """Raised when a requested record does not exist.

    Args:
        resource: Human-readable entity name (e.g. "Phase", "WizardSession").
        resource_id: The identifier that was looked up.
    """

    def __init__(self, resource: str, resource_id: int | str | None = None) -> None:
        self.resource = resource
        self.resource_id = resource_id
        msg = f"{resource}"
        if resource_id is not None:
            msg += f" id={resource_id}"
        msg += " not found"
        super().__init__(msg)


class ValidationError(Exception):
    """Raised when input is well-formed but violates a business rule.

    Examples: an empty stakeholder name, an influence level outside
    high/medium/low, a wizard jump to an index outside the valid range.

    Maps to HTTP 422 in blueprint error handlers.

    Args:
        message: Human-readable explanation of what failed.
        details: Optional field-level breakdown for structured API responses.
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message)
