"""Default identity values for fixture records.

Generated strings combine a base token, the caller's worker name and a
millisecond timestamp. The worker name keeps parallel test processes apart;
the timestamp is bumped when two values are requested within the same
millisecond, so values never repeat inside one process.
"""

import threading
import time
import uuid

DEFAULT_USERNAME_BASE = "user"

_timestamp_lock = threading.Lock()
_last_timestamp = 0


def unique_timestamp() -> int:
    """Return a millisecond timestamp strictly greater than the previous one."""
    global _last_timestamp
    with _timestamp_lock:
        now = int(time.time() * 1000)
        _last_timestamp = max(now, _last_timestamp + 1)
        return _last_timestamp


def unique_value(base: str, worker_name: str) -> str:
    """Build ``{base}-{worker_name}-{timestamp}``."""
    return f"{base}-{worker_name}-{unique_timestamp()}"


def default_username(
    worker_name: str,
    username: str | None = None,
    use_exact_username: bool = False,
) -> str:
    """
    Username for a fixture user.

    The literal username is used only when use_exact_username is set and a
    username was given; otherwise the username (or "user") becomes the base
    of a generated value.
    """
    if use_exact_username and username:
        return username
    return unique_value(username or DEFAULT_USERNAME_BASE, worker_name)


def team_slug(worker_name: str, is_org: bool = False) -> str:
    """Slug for a fixture team or organization."""
    return unique_value("org" if is_org else "team", worker_name)


def email_local_part(email: str) -> str:
    return email.split("@", 1)[0]


def email_domain(email: str) -> str:
    return email.split("@", 1)[1] if "@" in email else ""


def profile_username(username: str | None, email: str) -> str:
    """Username for an organization profile, falling back to the email local part."""
    return username or email_local_part(email)


def generate_profile_uid() -> str:
    """Opaque unique identifier for a profile."""
    return str(uuid.uuid4())
