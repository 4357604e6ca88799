from __future__ import annotations

from app.core.models.base import AppBaseModel


class PruneResult(AppBaseModel):
    """Outcome of a dangling tag reference cleanup."""

    updated: int
