"""Tests for fixture password hashing."""

from booking_fixtures.core.security import hash_password, verify_password


def test_hash_and_verify():
    password_hash = hash_password("secret", rounds=4)

    assert password_hash != "secret"
    assert password_hash.startswith("$2")
    assert verify_password("secret", password_hash)
    assert not verify_password("wrong", password_hash)


def test_verify_rejects_empty_hash():
    assert not verify_password("secret", "")
