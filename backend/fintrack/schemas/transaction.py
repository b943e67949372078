from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_serializer
from pydantic_core import PydanticCustomError

# same shape as the ids the store generates (uuid4 strings)
UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"

TransactionType = Literal["credit", "debit"]
SortBy = Literal["value", "date"]
SortOrder = Literal["asc", "desc"]

# full date and time, optional fraction, optional Z or offset
ISO_DATETIME_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:\d{2})?$"
)


def _require_iso_datetime(value):
    if isinstance(value, str) and not ISO_DATETIME_PATTERN.match(value):
        raise PydanticCustomError(
            "datetime_format", "Input should be an ISO 8601 datetime, e.g. 2024-01-31T12:00:00Z"
        )
    return value


IsoDateTime = Annotated[datetime, BeforeValidator(_require_iso_datetime)]


class TransactionCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    # strict: the JSON string "100" is not an amount
    amount: float = Field(
        gt=0, strict=True, allow_inf_nan=False, description="Magnitude; the sign comes from `type`"
    )
    type: TransactionType
    category_id: Optional[str] = Field(default=None, alias="categoryId", pattern=UUID_PATTERN)

    def signed_amount(self) -> float:
        return self.amount if self.type == "credit" else -self.amount


class TransactionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    amount: float
    created_at: datetime = Field(serialization_alias="createdAt")
    category_id: Optional[str] = Field(default=None, serialization_alias="categoryId")
    session_id: str = Field(serialization_alias="sessionId")

    @field_serializer("created_at")
    def _iso_utc(self, value: datetime) -> str:
        # SQLite hands back naive datetimes; they were written as UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def serialize_transaction(row) -> dict | None:
    if row is None:
        return None
    return TransactionOut.model_validate(row).model_dump(by_alias=True)
