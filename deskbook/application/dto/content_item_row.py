from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from deskbook.application.exceptions import RecordContractError


CONTENT_ITEMS_TABLE = "content_items"
SETTING_ITEM_TYPE = "setting"


class ContentItemRow(BaseModel):
    """A row in content_items. Settings use title as the key and content as the value."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    type: str
    content: str
    metadata: dict[str, Any] | None = None
    is_published: bool = False


def content_item_from_row(row: dict[str, Any]) -> ContentItemRow:
    try:
        return ContentItemRow.model_validate(row)
    except ValidationError as e:
        raise RecordContractError(f"Malformed content item row {row.get('id')!r}: {e}") from e
