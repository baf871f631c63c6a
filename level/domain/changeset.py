"""
Changesets

A changeset is a validated description of proposed field changes to a record.
It carries the accepted changes together with field-scoped errors, so callers
decide what to do with an invalid change instead of catching exceptions.

Validators only look at fields present in ``changes``; ``validate_required``
is the exception and also looks at the base record.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Pattern

# Never rendered by repr() or error details
SENSITIVE_FIELDS = frozenset({"password", "password_hash"})


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str
    meta: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class UniqueConstraint:
    field: str
    name: str
    message: str = "has already been taken"

    def matches(self, error_message: str) -> bool:
        # Postgres names the index, SQLite lists the columns ("users.team_id, users.email")
        if self.name in error_message:
            return True
        return re.search(rf"\.{re.escape(self.field)}\b", error_message) is not None


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _as_dict(struct: Any) -> Dict[str, Any]:
    if struct is None:
        return {}
    if isinstance(struct, dict):
        return dict(struct)
    return struct.model_dump()


class Changeset:
    def __init__(self, data: Optional[Dict[str, Any]] = None, params: Optional[Dict[str, Any]] = None):
        self.data: Dict[str, Any] = dict(data or {})
        self.params: Dict[str, Any] = dict(params or {})
        self.changes: Dict[str, Any] = {}
        self.errors: List[FieldError] = []
        self.constraints: List[UniqueConstraint] = []

    @classmethod
    def cast(cls, struct: Any, params: Optional[Dict[str, Any]], permitted: Iterable[str]) -> "Changeset":
        """
        Build a changeset from ``struct`` keeping only ``permitted`` params.

        Empty strings are cast to ``None``; a param only becomes a change when
        it differs from the value already on the struct.
        """
        params = {str(k): v for k, v in (params or {}).items()}
        changeset = cls(_as_dict(struct), params)

        for name in permitted:
            if name not in params:
                continue
            value = params[name]
            if isinstance(value, str) and value.strip() == "":
                value = None
            if value != changeset.data.get(name):
                changeset.changes[name] = value

        return changeset

    @property
    def valid(self) -> bool:
        return not self.errors

    # Accessors

    def get_change(self, name: str, default: Any = None) -> Any:
        return self.changes.get(name, default)

    def get_field(self, name: str, default: Any = None) -> Any:
        if name in self.changes:
            return self.changes[name]
        return self.data.get(name, default)

    def put_change(self, name: str, value: Any) -> "Changeset":
        self.changes[name] = value
        return self

    def delete_change(self, name: str) -> "Changeset":
        self.changes.pop(name, None)
        return self

    def add_error(self, name: str, message: str, **meta: Any) -> "Changeset":
        self.errors.append(FieldError(name, message, meta))
        return self

    def apply(self) -> Dict[str, Any]:
        """Merge the changes onto the base record"""
        return {**self.data, **self.changes}

    def errors_on(self) -> Dict[str, List[str]]:
        result: Dict[str, List[str]] = {}
        for error in self.errors:
            result.setdefault(error.field, []).append(error.message)
        return result

    # Validations

    def validate_required(self, fields: Iterable[str], message: str = "can't be blank") -> "Changeset":
        for name in fields:
            if _is_empty(self.get_field(name)):
                self.add_error(name, message, validation="required")
        return self

    def validate_length(
        self, name: str, min: Optional[int] = None, max: Optional[int] = None
    ) -> "Changeset":
        value = self.changes.get(name)
        if not isinstance(value, str):
            return self

        length = len(value)
        if min is not None and length < min:
            self.add_error(
                name, f"should be at least {min} character(s)", validation="length", kind="min", count=min
            )
        elif max is not None and length > max:
            self.add_error(
                name, f"should be at most {max} character(s)", validation="length", kind="max", count=max
            )
        return self

    def validate_format(self, name: str, pattern: Pattern, message: str = "has invalid format") -> "Changeset":
        value = self.changes.get(name)
        if value is None:
            return self
        if not isinstance(value, str) or pattern.match(value) is None:
            self.add_error(name, message, validation="format")
        return self

    def validate_change(self, name: str, validator: Callable[[Any], Optional[str]]) -> "Changeset":
        """Run ``validator`` on a present change; a returned string is the error message"""
        if self.changes.get(name) is None:
            return self
        message = validator(self.changes[name])
        if message:
            self.add_error(name, message, validation="change")
        return self

    def unique_constraint(
        self, name: str, constraint: str, message: str = "has already been taken"
    ) -> "Changeset":
        """
        Register a unique index so a violation reported by the storage layer
        can be turned back into an error on ``name``.
        """
        self.constraints.append(UniqueConstraint(name, constraint, message))
        return self

    def apply_constraint_violation(self, error_message: str) -> bool:
        """
        Map a storage-layer integrity error onto a registered constraint.

        Returns False when no registered constraint matches, in which case the
        caller should let the original error propagate.
        """
        for constraint in self.constraints:
            if constraint.matches(error_message):
                self.add_error(
                    constraint.field,
                    constraint.message,
                    constraint="unique",
                    constraint_name=constraint.name,
                )
                return True
        return False

    def __repr__(self) -> str:
        changes = {
            k: ("**redacted**" if k in SENSITIVE_FIELDS else v) for k, v in self.changes.items()
        }
        return f"<Changeset valid={self.valid} changes={changes} errors={self.errors_on()}>"
