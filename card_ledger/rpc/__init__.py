from .category import category_router
from .procedures import Procedure, ProcedureRouter
from .transaction import transaction_router

app_router = ProcedureRouter()


@app_router.procedure("healthCheck")
def health_check(services, _):
    return "OK"


app_router.include("category", category_router)
app_router.include("transaction", transaction_router)

__all__ = ["app_router", "Procedure", "ProcedureRouter"]
