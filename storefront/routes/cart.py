"""Cart API routes"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Depends

from ..cart.engine import CartEngine
from ..core.config import Settings
from ..core.exceptions import InvalidQuantity
from ..database import CartDatabase, ProductDatabase
from ..models.cart import (
    AddToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
)
from ..models.product import Product
from .dependencies import get_app_settings, get_cart_db, get_product_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def _load_cart(cart_db: CartDatabase, cart_id: str) -> CartEngine:
    engine = cart_db.load(cart_id)
    if engine is None:
        raise HTTPException(status_code=404, detail="Cart not found")
    return engine


def _check_variant(product: Product, size: Optional[str], color: Optional[str]) -> None:
    """Reject selectors the product does not offer"""
    if product.sizes and size is not None and size not in product.sizes:
        raise HTTPException(status_code=400, detail=f"Size {size!r} not offered for {product.name}")
    if product.colors and color is not None and color not in product.colors:
        raise HTTPException(status_code=400, detail=f"Color {color!r} not offered for {product.name}")


@router.post("", response_model=CartResponse, status_code=201)
async def create_cart(cart_db: CartDatabase = Depends(get_cart_db)):
    """Create a new shopping cart"""
    cart_id = cart_db.create_cart()
    engine = cart_db.load(cart_id)
    return CartResponse(cart_id=cart_id, cart=engine.cart, message="Cart created")


@router.post("/maintenance/cleanup")
async def cleanup_carts(
    max_age_hours: Optional[int] = Query(None, ge=1, description="Idle age in hours"),
    cart_db: CartDatabase = Depends(get_cart_db),
    settings: Settings = Depends(get_app_settings),
):
    """Drop carts idle beyond the configured age"""
    if max_age_hours is None:
        max_age_hours = settings.cart_max_age_hours
    removed = cart_db.cleanup_stale_carts(max_age_hours)
    return {"removed": removed}


@router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str, cart_db: CartDatabase = Depends(get_cart_db)):
    """Get cart by ID"""
    engine = _load_cart(cart_db, cart_id)
    return CartResponse(cart_id=cart_id, cart=engine.cart)


@router.post("/{cart_id}/items", response_model=CartResponse)
async def add_to_cart(
    cart_id: str,
    request: AddToCartRequest,
    cart_db: CartDatabase = Depends(get_cart_db),
    product_db: ProductDatabase = Depends(get_product_db),
):
    """Add an item to the cart"""
    engine = _load_cart(cart_db, cart_id)

    product = product_db.get_product(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    _check_variant(product, request.size, request.color)

    try:
        cart = engine.add_item(product, request.quantity, size=request.size, color=request.color)
    except InvalidQuantity as e:
        raise HTTPException(status_code=400, detail=str(e))

    cart_db.save(cart_id, engine)
    logger.info(f"Cart {cart_id}: added {request.quantity}x {product.id}")
    return CartResponse(
        cart_id=cart_id,
        cart=cart,
        message=f"Added {request.quantity}x {product.name} to cart",
    )


@router.put("/{cart_id}/items/{product_id}", response_model=CartResponse)
async def update_cart_item(
    cart_id: str,
    product_id: str,
    request: UpdateCartItemRequest,
    cart_db: CartDatabase = Depends(get_cart_db),
):
    """Update item quantity in cart"""
    engine = _load_cart(cart_db, cart_id)

    try:
        cart = engine.update_quantity(product_id, request.quantity, size=request.size, color=request.color)
    except InvalidQuantity as e:
        raise HTTPException(status_code=400, detail=str(e))

    cart_db.save(cart_id, engine)
    return CartResponse(cart_id=cart_id, cart=cart, message="Cart updated")


@router.delete("/{cart_id}/items/{product_id}", response_model=CartResponse)
async def remove_from_cart(
    cart_id: str,
    product_id: str,
    size: Optional[str] = None,
    color: Optional[str] = None,
    cart_db: CartDatabase = Depends(get_cart_db),
):
    """Remove an item from the cart"""
    engine = _load_cart(cart_db, cart_id)
    cart = engine.remove_item(product_id, size=size, color=color)
    cart_db.save(cart_id, engine)
    return CartResponse(cart_id=cart_id, cart=cart, message="Item removed")


@router.delete("/{cart_id}", response_model=CartResponse)
async def clear_cart(cart_id: str, cart_db: CartDatabase = Depends(get_cart_db)):
    """Clear all items from cart"""
    engine = _load_cart(cart_db, cart_id)
    cart = engine.clear_cart()
    cart_db.save(cart_id, engine)
    return CartResponse(cart_id=cart_id, cart=cart, message="Cart cleared")
