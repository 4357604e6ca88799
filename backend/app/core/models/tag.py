from __future__ import annotations

from pydantic import Field

from .base import AppBaseModel


class Tag(AppBaseModel):
    """Tag domain model.

    Names are unique across the registry once trimmed and case-folded; the
    registry enforces that, not the model.
    """

    id: str = Field(description="Opaque tag identifier")
    name: str = Field(description="Display name")
    color: str | None = Field(default=None, description="Display hint, e.g. a hex color")

    @property
    def normalized_name(self) -> str:
        return normalize_tag_name(self.name)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"id": "t_3f9a1c0e77b2a41c", "name": "Work", "color": "#2563EB"},
            ]
        }
    }


def normalize_tag_name(name: str) -> str:
    """Key used for case-insensitive tag name comparison."""
    return name.strip().casefold()
