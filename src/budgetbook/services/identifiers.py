"""Record identifier generation."""

from __future__ import annotations

import uuid
from typing import Callable

IdFactory = Callable[[], str]


def new_identifier() -> str:
    """Return a random version-4 UUID string."""
    return str(uuid.uuid4())
