"""
Team rules
"""

import re
from typing import Any, Dict, Optional

from .changeset import Changeset

SLUG_FORMAT = re.compile(r"^(?:[a-z0-9][a-z0-9-]*[a-z0-9])$")

TEAM_FIELDS = ("name", "slug")


def validate_slug(changeset: Changeset) -> Changeset:
    return changeset.validate_length("slug", min=2, max=20).validate_format(
        "slug", SLUG_FORMAT, message="must be lowercase and alphanumeric"
    )


def team_changeset(struct: Any, params: Optional[Dict[str, Any]] = None) -> Changeset:
    changeset = Changeset.cast(struct, params, TEAM_FIELDS)
    changeset.validate_required(["name", "slug"]).validate_length("name", min=1, max=255)
    return validate_slug(changeset).unique_constraint("slug", "teams_slug_index")
