"""Product API routes"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Depends

from ..database import ProductDatabase
from ..models.product import Product
from .dependencies import get_product_db

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=list[Product])
async def list_products(
    category: Optional[str] = Query(None, description="Filter by category"),
    product_db: ProductDatabase = Depends(get_product_db),
):
    """List products in the storefront"""
    return product_db.list_products(category=category)


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, product_db: ProductDatabase = Depends(get_product_db)):
    """Get a product by ID"""
    product = product_db.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
