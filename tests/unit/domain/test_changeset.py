import re

from level.domain.changeset import Changeset


def test_cast_keeps_only_permitted_params():
    changeset = Changeset.cast({}, {"name": "Level", "admin": True}, ["name"])

    assert changeset.changes == {"name": "Level"}
    assert changeset.params == {"name": "Level", "admin": True}


def test_cast_turns_empty_strings_into_none():
    changeset = Changeset.cast({"name": "Level"}, {"name": "  "}, ["name"])

    assert changeset.changes == {"name": None}


def test_cast_skips_unchanged_values():
    changeset = Changeset.cast({"name": "Level"}, {"name": "Level"}, ["name"])

    assert changeset.changes == {}
    assert changeset.get_field("name") == "Level"


def test_required_looks_at_base_record():
    changeset = Changeset.cast({"name": "Level"}, {}, ["name"]).validate_required(["name"])

    assert changeset.valid


def test_validations_skip_absent_changes():
    changeset = (
        Changeset.cast({}, {}, ["slug"])
        .validate_length("slug", min=2)
        .validate_format("slug", re.compile(r"^[a-z]+$"))
    )

    assert changeset.valid


def test_validate_change_adds_returned_message():
    changeset = Changeset.cast({}, {"role": "GUEST"}, ["role"]).validate_change(
        "role", lambda value: "Role not recognized"
    )

    assert changeset.errors_on() == {"role": ["Role not recognized"]}


def test_constraint_violation_matches_sqlite_message():
    changeset = Changeset.cast({}, {"email": "a@b.co"}, ["email"]).unique_constraint(
        "email", "users_team_id_email_index"
    )

    matched = changeset.apply_constraint_violation(
        "UNIQUE constraint failed: users.team_id, users.email"
    )

    assert matched
    assert changeset.errors_on() == {"email": ["has already been taken"]}


def test_constraint_violation_matches_postgres_message():
    changeset = (
        Changeset.cast({}, {}, [])
        .unique_constraint("email", "users_team_id_email_index")
        .unique_constraint("username", "users_team_id_username_index")
    )

    matched = changeset.apply_constraint_violation(
        'duplicate key value violates unique constraint "users_team_id_username_index"'
    )

    assert matched
    assert changeset.errors_on() == {"username": ["has already been taken"]}


def test_unregistered_constraint_violation_is_not_matched():
    changeset = Changeset.cast({}, {}, []).unique_constraint("email", "users_team_id_email_index")

    assert not changeset.apply_constraint_violation("FOREIGN KEY constraint failed")
    assert changeset.valid


def test_apply_merges_changes_onto_data():
    changeset = Changeset.cast({"name": "Old", "slug": "old"}, {"name": "New"}, ["name"])

    assert changeset.apply() == {"name": "New", "slug": "old"}
