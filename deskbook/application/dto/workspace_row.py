from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from deskbook.application.exceptions import RecordContractError
from deskbook.domain.entities.workspace import WorkspaceType


WORKSPACE_TYPES_TABLE = "workspace_types"


class WorkspaceTypeRow(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    description: str = ""
    price: float = Field(ge=0)
    price_unit: str
    image_url: str | None = None
    features: list[str] = Field(default_factory=list)
    is_active: bool = True

    def to_entity(self) -> WorkspaceType:
        return WorkspaceType(
            id=self.id,
            name=self.name,
            description=self.description,
            price=self.price,
            price_unit=self.price_unit,
            image_url=self.image_url,
            features=tuple(self.features),
            is_active=self.is_active,
        )


def workspace_from_row(row: dict[str, Any]) -> WorkspaceType:
    try:
        return WorkspaceTypeRow.model_validate(row).to_entity()
    except ValidationError as e:
        raise RecordContractError(f"Malformed workspace row {row.get('id')!r}: {e}") from e
