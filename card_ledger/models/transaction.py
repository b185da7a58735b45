import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Numeric
from sqlalchemy.sql import func
from ..database import Base


class TransactionStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


def utcnow() -> datetime:
    """Current time as naive UTC, the form every timestamp is stored in"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Transaction(Base):
    __tablename__ = "transactions"
    
    id = Column(Integer, primary_key=True, index=True)
    card_last_four = Column(String(4), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    # No ondelete rule: deleting a category leaves its transactions in place
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    transaction_date = Column(DateTime, nullable=False, default=utcnow, index=True)
    status = Column(String(20), nullable=False, default=TransactionStatus.PENDING.value, index=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)
