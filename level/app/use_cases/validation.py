"""
Translate changesets into use case errors.
"""

from level.domain.changeset import Changeset
from level.result import Error


def validation_error(changeset: Changeset) -> Error:
    """Build a VALIDATION_FAILED error carrying one entry per field error"""
    details = [
        {"attribute": error.field, "message": error.message}
        for error in changeset.errors
    ]
    return Error("VALIDATION_FAILED", "Validation failed", details=details)
