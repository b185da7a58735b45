from fastapi import APIRouter, Depends

from .. import responses
from ..schemas import CategoryCreate, CategoryResponse, CategoryUpdate
from ..services import Services
from ..validation import validate_id
from .deps import get_services

router = APIRouter()


@router.get("")
def get_categories(services: Services = Depends(get_services)):
    """Get all categories"""
    categories = services.categories.get_all()
    return responses.success([CategoryResponse.model_validate(c) for c in categories])


@router.get("/{category_id}")
def get_category(category_id: str, services: Services = Depends(get_services)):
    """Get a single category by ID"""
    category = services.categories.get_by_id(validate_id(category_id, "category ID"))
    return responses.success(CategoryResponse.model_validate(category))


@router.post("", status_code=201)
def create_category(data: CategoryCreate, services: Services = Depends(get_services)):
    """Create a new category"""
    category = services.categories.create(data.name)
    return responses.created(CategoryResponse.model_validate(category))


@router.put("/{category_id}")
def update_category(category_id: str, data: CategoryUpdate, services: Services = Depends(get_services)):
    """Rename a category"""
    category = services.categories.update(validate_id(category_id, "category ID"), data.name)
    return responses.updated(CategoryResponse.model_validate(category))


@router.delete("/{category_id}")
def delete_category(category_id: str, services: Services = Depends(get_services)):
    """Delete a category"""
    services.categories.delete(validate_id(category_id, "category ID"))
    return responses.deleted()
