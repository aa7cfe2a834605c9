from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import normalize_sku


class Product(BaseModel):
    """
    A single inventory record. Aliases are the column headers used in exported reports.
    Fields are mutable; assigning a new SKU re-applies the uppercase normalization.
    """

    sku: str = Field(..., alias="SKU")
    name: Optional[str] = Field(default=None, alias="Name")
    quantity: int = Field(default=0, alias="Quantity")
    price: float = Field(default=0.0, alias="Price")
    category: Optional[str] = Field(default=None, alias="Category")

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    @field_validator("sku")
    @classmethod
    def uppercase_sku(cls, value: str) -> str:
        return normalize_sku(value)

    def __str__(self) -> str:
        return (
            f"Product{{SKU='{self.sku}', Name='{self.name}', "
            f"Quantity={self.quantity}, Price=${self.price}, "
            f"Category='{self.category}'}}"
        )


class OperationStatus(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_INPUT = "invalid_input"
    MALFORMED_RECORD = "malformed_record"
    IO_FAILURE = "io_failure"


class OperationResult(BaseModel):
    """Outcome of a manager operation, with the message that was logged for it."""

    status: OperationStatus
    message: str
    product: Optional[Product] = None

    @property
    def ok(self) -> bool:
        return self.status is OperationStatus.SUCCESS


class SkippedLine(BaseModel):
    """A persisted line that was not loaded."""

    line_number: int = Field(..., ge=1)
    raw: str
    reason: str
    status: OperationStatus = OperationStatus.MALFORMED_RECORD


class LoadResult(BaseModel):
    status: OperationStatus
    message: str
    loaded: int = 0
    skipped: list[SkippedLine] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is OperationStatus.SUCCESS
