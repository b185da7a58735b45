"""
Pydantic schemas shared by the REST and RPC transports.

Both transports validate input against the same models. JSON field names are
camelCase; Python attribute names stay snake_case. Datetime fields accept ISO
8601 strings (REST, JSON-RPC) as well as native datetime values (in-process
RPC calls).
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .models.transaction import TransactionStatus

CARD_LAST_FOUR_REGEX = r"^\d{4}$"


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# =============================================================================
# Category Schemas
# =============================================================================

class CategoryCreate(CamelModel):
    """Schema for creating a category"""
    name: str = Field(..., min_length=1, max_length=100, description="Category name")


class CategoryUpdate(CamelModel):
    """Schema for renaming a category"""
    name: str = Field(..., min_length=1, max_length=100, description="New category name")


class CategoryId(CamelModel):
    id: int


class CategoryUpdateInput(CategoryUpdate):
    """RPC input for category.update: the id travels in the payload"""
    id: int


class CategoryResponse(CamelModel):
    """Schema for category response"""
    id: int
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# =============================================================================
# Transaction Schemas
# =============================================================================

class TransactionCreate(CamelModel):
    """Schema for creating a transaction"""
    card_last_four: str = Field(..., pattern=CARD_LAST_FOUR_REGEX, description="Last four digits of the card")
    amount: Decimal = Field(..., gt=0, description="Transaction amount")
    category_id: int = Field(..., description="Category ID")
    transaction_date: Optional[datetime] = Field(None, description="Defaults to now")
    status: Optional[TransactionStatus] = Field(None, description="Defaults to pending")


class TransactionUpdate(CamelModel):
    """Schema for updating a transaction - every field optional, only supplied fields change"""
    card_last_four: Optional[str] = Field(None, pattern=CARD_LAST_FOUR_REGEX)
    amount: Optional[Decimal] = Field(None, gt=0)
    category_id: Optional[int] = None
    transaction_date: Optional[datetime] = None
    status: Optional[TransactionStatus] = None

    def changes(self) -> dict:
        """Fields the client actually supplied, keyed by attribute name"""
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if field != "id" and value is not None
        }


class TransactionUpdateInput(TransactionUpdate):
    """RPC input for transaction.update"""
    id: int


class TransactionId(CamelModel):
    id: int


class TransactionStatusUpdate(CamelModel):
    status: TransactionStatus


class TransactionStatusUpdateInput(TransactionStatusUpdate):
    """RPC input for transaction.updateStatus"""
    id: int


class TransactionFilters(CamelModel):
    """Optional, conjunctive listing filters"""
    category_id: Optional[int] = None
    status: Optional[TransactionStatus] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None


class TransactionResponse(CamelModel):
    """Schema for transaction response"""
    id: int
    card_last_four: str
    amount: float
    category_id: int
    transaction_date: datetime
    status: TransactionStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TransactionWithCategoryResponse(TransactionResponse):
    category_name: str


class ExpenseSummaryResponse(CamelModel):
    category_id: int
    category_name: str
    total_amount: float
    transaction_count: int
