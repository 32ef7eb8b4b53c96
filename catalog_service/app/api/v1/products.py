"""Product API endpoints"""

from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from ...schemas.product import ProductCreate, ProductResponse, ProductUpdate
from ...services.product_service import ProductService
from ..dependencies import CorrelationIdDep, ProductServiceDep

# Upper bound used when the client leaves max_price out
UNBOUNDED_PRICE = Decimal("Infinity")

router = APIRouter(prefix="/products")


@router.get("/", response_model=List[ProductResponse])
async def list_products(service: ProductService = ProductServiceDep):
    """Get all products"""
    return await service.get_all_products()


@router.get("/active", response_model=List[ProductResponse])
async def list_active_products(service: ProductService = ProductServiceDep):
    """Get only active products"""
    return await service.get_active_products()


@router.get("/search", response_model=List[ProductResponse])
async def search_products(
    q: Optional[str] = Query(None, description="Case-insensitive name fragment"),
    service: ProductService = ProductServiceDep,
):
    """Search products by name; an empty query returns every product"""
    return await service.search_products(q)


@router.get("/price-range", response_model=List[ProductResponse])
async def list_products_in_price_range(
    min_price: Decimal = Query(Decimal("0")),
    max_price: Optional[Decimal] = Query(None),
    service: ProductService = ProductServiceDep,
):
    """Get products priced within [min_price, max_price]"""
    return await service.get_products_in_price_range(
        min_price, max_price if max_price is not None else UNBOUNDED_PRICE
    )


@router.get("/category/{category_id}", response_model=List[ProductResponse])
async def list_products_by_category(
    category_id: int, service: ProductService = ProductServiceDep
):
    """Get products of one category"""
    return await service.get_products_by_category(category_id)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """Get product details by ID"""
    product = await service.get_product(product_id, correlation_id=correlation_id)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with ID {product_id} not found",
        )
    return product


@router.post("/", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: ProductCreate,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """Create a new product"""
    return await service.create_product(
        product_data.to_entity(), correlation_id=correlation_id
    )


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    product_data: ProductUpdate,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """Update an existing product"""
    if product_id != product_data.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Product ID in URL does not match product ID in body",
        )

    return await service.update_product(
        product_data.to_entity(), correlation_id=correlation_id
    )


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """Delete a product"""
    deleted = await service.delete_product(product_id, correlation_id=correlation_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with ID {product_id} not found",
        )
    return None
