from fastapi import APIRouter, Depends, status
from typing import List

from ..schemas import CategoryCreate, CategoryRead, CategoryUpdate
from ..services import CategoryService
from .deps import get_category_service

router = APIRouter()


@router.post("/categories", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(
    category: CategoryCreate, service: CategoryService = Depends(get_category_service)
):
    return service.create_category(category)


@router.get("/categories", response_model=List[CategoryRead])
def get_categories(service: CategoryService = Depends(get_category_service)):
    return service.get_all_categories()


@router.get("/categories/{category_id}", response_model=CategoryRead)
def get_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    return service.get_category(category_id)


@router.put("/categories/{category_id}", response_model=CategoryRead)
def update_category(
    category_id: int,
    category_update: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
):
    return service.update_category(category_id, category_update)


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    service.delete_category(category_id)
