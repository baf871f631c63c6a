"""
Space rules
"""

from typing import Any, Dict, Optional

from .changeset import Changeset
from .teams import validate_slug

SPACE_FIELDS = ("team_id", "name", "slug")


def space_changeset(struct: Any, params: Optional[Dict[str, Any]] = None) -> Changeset:
    changeset = Changeset.cast(struct, params, SPACE_FIELDS)
    changeset.validate_required(["team_id", "name", "slug"]).validate_length("name", min=1, max=255)
    return validate_slug(changeset).unique_constraint("slug", "spaces_team_id_slug_index")
