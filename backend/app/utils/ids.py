from __future__ import annotations

import time
from uuid import uuid4

NOTE_ID_PREFIX = "n_"
TAG_ID_PREFIX = "t_"


def new_id(prefix: str = "") -> str:
    """Return an opaque identifier: prefix, random part, then a millisecond suffix.

    Only uniqueness within the process lifetime matters; callers must not parse it.
    """
    millis = format(int(time.time() * 1000), "x")[-4:]
    return f"{prefix}{uuid4().hex[:12]}{millis}"
