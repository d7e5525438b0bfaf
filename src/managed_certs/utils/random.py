"""Random names for newly provisioned SslCertificate resources."""

from __future__ import annotations

import uuid

NAME_PREFIX = "mcrt"

# Compute resource names must match [a-z]([-a-z0-9]*[a-z0-9])? and stay under 64 chars.
MAX_NAME_LENGTH = 63


class NameGenerationError(Exception):
    """Raised when no random name can be produced.

    The only source of failure is the operating system's entropy pool;
    a caller cannot create an unnamed certificate, so this is fatal to the
    create attempt in progress.
    """


def random_name() -> str:
    """Generate a unique, backend-compatible SslCertificate name.

    Each call draws a fresh version 4 UUID, so no state is shared between
    calls and concurrent callers need no coordination.

    Returns:
        A name of the form ``mcrt-<uuid>``.

    Raises:
        NameGenerationError: If the OS random source is unavailable.
    """
    try:
        token = uuid.uuid4()
    except (NotImplementedError, OSError) as e:
        raise NameGenerationError(f"Failed to generate random name: {e}") from e

    return f"{NAME_PREFIX}-{token}"
