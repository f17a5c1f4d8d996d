from __future__ import annotations

import secrets

CODE_MIN = 100000
CODE_MAX = 999999


def generate_confirmation_code() -> str:
    """Six-digit numeric code, uniform over [100000, 999999]."""
    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))
