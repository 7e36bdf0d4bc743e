"""
Service name generation for commands without `--name`.
"""

import secrets
import string

NAME_PREFIX = "svc-"
SUFFIX_ALPHABET = string.ascii_lowercase + string.digits
SUFFIX_LENGTH = 10


def new_service_name() -> str:
    """
    Generate a random service name in format: svc-XXXXXXXXXX

    The result is a valid Kubernetes object name (lowercase alphanumerics
    and '-', starting with a letter).

    Returns:
        str: Unique service name
    """
    suffix = ''.join(secrets.choice(SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return f"{NAME_PREFIX}{suffix}"


def is_valid_service_name(name: str) -> bool:
    """Checks the svc-XXXXXXXXXX shape produced by new_service_name."""
    if not name.startswith(NAME_PREFIX):
        return False

    suffix = name[len(NAME_PREFIX):]
    if len(suffix) != SUFFIX_LENGTH:
        return False

    return all(c in SUFFIX_ALPHABET for c in suffix)
