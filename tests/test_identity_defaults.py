"""Tests for generated usernames, slugs and profile identities."""

import re

from booking_fixtures.services.identity_defaults import (
    default_username,
    email_domain,
    email_local_part,
    generate_profile_uid,
    profile_username,
    team_slug,
    unique_timestamp,
    unique_value,
)


def test_unique_timestamp_strictly_increases():
    stamps = [unique_timestamp() for _ in range(50)]
    assert stamps == sorted(set(stamps))


def test_default_username_uses_worker_and_timestamp():
    assert re.fullmatch(r"user-7-\d+", default_username("7"))
    assert re.fullmatch(r"pro-7-\d+", default_username("7", "pro"))


def test_default_username_exact_requires_a_username():
    assert default_username("7", "pro", use_exact_username=True) == "pro"
    # No username to use verbatim, so one is generated
    assert default_username("7", None, use_exact_username=True).startswith("user-7-")


def test_generated_values_do_not_repeat():
    values = {unique_value("user", "1") for _ in range(100)}
    assert len(values) == 100


def test_team_slug_prefix():
    assert team_slug("2").startswith("team-2-")
    assert team_slug("2", is_org=True).startswith("org-2-")


def test_email_helpers():
    assert email_local_part("pro@example.com") == "pro"
    assert email_domain("pro@example.com") == "example.com"
    assert email_domain("no-at-sign") == ""


def test_profile_username_falls_back_to_email():
    assert profile_username("pro", "other@example.com") == "pro"
    assert profile_username(None, "other@example.com") == "other"


def test_profile_uids_are_unique():
    assert generate_profile_uid() != generate_profile_uid()
