from ..schemas import CategoryCreate, CategoryId, CategoryResponse, CategoryUpdateInput
from .procedures import ProcedureRouter

category_router = ProcedureRouter()


@category_router.procedure("getAll")
def get_all(services, _):
    return [CategoryResponse.model_validate(c) for c in services.categories.get_all()]


@category_router.procedure("getById", CategoryId)
def get_by_id(services, data: CategoryId):
    return CategoryResponse.model_validate(services.categories.get_by_id(data.id))


@category_router.procedure("create", CategoryCreate)
def create(services, data: CategoryCreate):
    return CategoryResponse.model_validate(services.categories.create(data.name))


@category_router.procedure("update", CategoryUpdateInput)
def update(services, data: CategoryUpdateInput):
    return CategoryResponse.model_validate(services.categories.update(data.id, data.name))


@category_router.procedure("delete", CategoryId)
def delete(services, data: CategoryId):
    services.categories.delete(data.id)
    return {"success": True}
