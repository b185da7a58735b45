from ..schemas import (
    ExpenseSummaryResponse,
    TransactionCreate,
    TransactionFilters,
    TransactionId,
    TransactionResponse,
    TransactionStatusUpdateInput,
    TransactionUpdateInput,
    TransactionWithCategoryResponse,
)
from .procedures import ProcedureRouter

transaction_router = ProcedureRouter()


@transaction_router.procedure("create", TransactionCreate)
def create(services, data: TransactionCreate):
    transaction = services.transactions.create(
        card_last_four=data.card_last_four,
        amount=data.amount,
        category_id=data.category_id,
        transaction_date=data.transaction_date,
        status=data.status,
    )
    return TransactionResponse.model_validate(transaction)


@transaction_router.procedure("update", TransactionUpdateInput)
def update(services, data: TransactionUpdateInput):
    return TransactionResponse.model_validate(services.transactions.update(data.id, data.changes()))


@transaction_router.procedure("delete", TransactionId)
def delete(services, data: TransactionId):
    services.transactions.delete(data.id)
    return {"success": True}


@transaction_router.procedure("getAll", TransactionFilters, input_optional=True)
def get_all(services, filters):
    return [TransactionWithCategoryResponse.model_validate(t) for t in services.transactions.get_all(filters)]


@transaction_router.procedure("updateStatus", TransactionStatusUpdateInput)
def update_status(services, data: TransactionStatusUpdateInput):
    services.transactions.update_status(data.id, data.status)
    return {"success": True}


@transaction_router.procedure("getExpenseSummary")
def get_expense_summary(services, _):
    return [ExpenseSummaryResponse.model_validate(row) for row in services.transactions.get_expense_summary()]
