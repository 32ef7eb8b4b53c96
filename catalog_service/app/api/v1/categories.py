"""Category API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from ...schemas.category import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    CategoryWithProductsResponse,
)
from ...services.category_service import CategoryService
from ..dependencies import CategoryServiceDep, CorrelationIdDep

router = APIRouter(prefix="/categories")


@router.get("/", response_model=List[CategoryResponse])
async def list_categories(service: CategoryService = CategoryServiceDep):
    """Get all categories"""
    return await service.get_all_categories()


@router.get("/active", response_model=List[CategoryResponse])
async def list_active_categories(service: CategoryService = CategoryServiceDep):
    """Get only active categories"""
    return await service.get_active_categories()


@router.get("/search", response_model=List[CategoryResponse])
async def search_categories(
    q: Optional[str] = Query(None, description="Case-insensitive name fragment"),
    service: CategoryService = CategoryServiceDep,
):
    """Search categories by name; an empty query returns every category"""
    return await service.search_categories(q)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: CategoryService = CategoryServiceDep,
):
    """Get category details by ID"""
    category = await service.get_category(category_id, correlation_id=correlation_id)
    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category with ID {category_id} not found",
        )
    return category


@router.get("/{category_id}/with-products", response_model=CategoryWithProductsResponse)
async def get_category_with_products(
    category_id: int,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: CategoryService = CategoryServiceDep,
):
    """Get a category together with its products"""
    category = await service.get_category_with_products(
        category_id, correlation_id=correlation_id
    )
    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category with ID {category_id} not found",
        )
    return category


@router.post("/", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: CategoryCreate,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: CategoryService = CategoryServiceDep,
):
    """Create a new category"""
    return await service.create_category(
        category_data.to_entity(), correlation_id=correlation_id
    )


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    category_data: CategoryUpdate,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: CategoryService = CategoryServiceDep,
):
    """Update an existing category"""
    if category_id != category_data.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Category ID in URL does not match category ID in body",
        )

    return await service.update_category(
        category_data.to_entity(), correlation_id=correlation_id
    )


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: CategoryService = CategoryServiceDep,
):
    """Delete a category that no product references"""
    deleted = await service.delete_category(category_id, correlation_id=correlation_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category with ID {category_id} not found",
        )
    return None
