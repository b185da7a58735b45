from typing import Optional

from fastapi import APIRouter, Depends, Query

from .. import responses
from ..schemas import (
    ExpenseSummaryResponse,
    TransactionCreate,
    TransactionFilters,
    TransactionResponse,
    TransactionStatusUpdate,
    TransactionUpdate,
    TransactionWithCategoryResponse,
)
from ..services import Services
from ..validation import validate_id
from .deps import get_services

router = APIRouter()


@router.get("")
def get_transactions(
    category_id: Optional[str] = Query(None, alias="categoryId", description="Filter by category ID"),
    status: Optional[str] = Query(None, description="Filter by status"),
    date_from: Optional[str] = Query(None, alias="dateFrom", description="Earliest transaction date (ISO 8601)"),
    date_to: Optional[str] = Query(None, alias="dateTo", description="Latest transaction date (ISO 8601)"),
    services: Services = Depends(get_services)
):
    """Get transactions with optional filters; all filters must match."""
    query = {"categoryId": category_id, "status": status, "dateFrom": date_from, "dateTo": date_to}
    filters = TransactionFilters.model_validate({key: value for key, value in query.items() if value is not None})

    transactions = services.transactions.get_all(filters)

    return responses.success_with_meta(
        [TransactionWithCategoryResponse.model_validate(t) for t in transactions],
        {"count": len(transactions)}
    )


@router.get("/summary")
def get_expense_summary(services: Services = Depends(get_services)):
    """Total amount and transaction count per category"""
    summary = services.transactions.get_expense_summary()

    return responses.success_with_meta(
        [ExpenseSummaryResponse.model_validate(row) for row in summary],
        {
            "totalAmount": float(sum(row.total_amount for row in summary)),
            "totalTransactions": sum(row.transaction_count for row in summary),
            "categoryCount": len(summary),
        }
    )


@router.post("", status_code=201)
def create_transaction(data: TransactionCreate, services: Services = Depends(get_services)):
    """Record a new transaction"""
    transaction = services.transactions.create(
        card_last_four=data.card_last_four,
        amount=data.amount,
        category_id=data.category_id,
        transaction_date=data.transaction_date,
        status=data.status
    )
    return responses.created(TransactionResponse.model_validate(transaction))


@router.put("/{transaction_id}")
def update_transaction(transaction_id: str, data: TransactionUpdate, services: Services = Depends(get_services)):
    """Update only the supplied fields of a transaction"""
    transaction = services.transactions.update(validate_id(transaction_id, "transaction ID"), data.changes())
    return responses.updated(TransactionResponse.model_validate(transaction))


@router.delete("/{transaction_id}")
def delete_transaction(transaction_id: str, services: Services = Depends(get_services)):
    """Delete a transaction"""
    services.transactions.delete(validate_id(transaction_id, "transaction ID"))
    return responses.deleted()


@router.patch("/{transaction_id}/status")
def update_transaction_status(
    transaction_id: str,
    data: TransactionStatusUpdate,
    services: Services = Depends(get_services)
):
    """Move a transaction to any status"""
    services.transactions.update_status(validate_id(transaction_id, "transaction ID"), data.status)
    return responses.message("Transaction status updated successfully")
