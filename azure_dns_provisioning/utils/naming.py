"""Random resource names and generated secrets."""

from __future__ import annotations
import secrets
import string

_NAME_ALPHABET = string.ascii_lowercase + string.digits


def create_random_name(prefix: str, length: int = 6) -> str:
    """Append a random lowercase suffix to prefix, e.g. ``DnsTemplateRG4k2f9a``."""
    suffix = "".join(secrets.choice(_NAME_ALPHABET) for _ in range(length))
    return f"{prefix}{suffix}"


def create_password(length: int = 20) -> str:
    """
    Generate an admin password accepted by Azure VM password rules.

    Azure requires 3 of 4 character classes; all four are always included.
    """
    if length < 12:
        raise ValueError("password length must be at least 12")

    required = [
        secrets.choice(string.ascii_lowercase),
        secrets.choice(string.ascii_uppercase),
        secrets.choice(string.digits),
        secrets.choice("!@#$%^&*()-_"),
    ]
    pool = string.ascii_letters + string.digits + "!@#$%^&*()-_"
    rest = [secrets.choice(pool) for _ in range(length - len(required))]

    chars = required + rest
    secrets.SystemRandom().shuffle(chars)
    return "".join(chars)
