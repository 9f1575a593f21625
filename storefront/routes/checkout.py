"""Checkout API routes

Checkout drafts a pending order from the cart and resets the cart.
Payment capture happens with the payment processor afterwards, using the
order's amount_cents.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Depends

from ..database import CartDatabase, OrderDatabase
from ..models.checkout import CheckoutRequest, CheckoutResponse, Order
from .dependencies import get_cart_db, get_order_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


@router.post("", response_model=CheckoutResponse)
async def checkout(
    request: CheckoutRequest,
    cart_db: CartDatabase = Depends(get_cart_db),
    order_db: OrderDatabase = Depends(get_order_db),
):
    """Turn a cart into a pending order"""
    engine = cart_db.load(request.cart_id)
    if engine is None:
        raise HTTPException(status_code=404, detail="Cart not found")

    if engine.is_empty():
        raise HTTPException(status_code=400, detail="Cart is empty")

    order = order_db.create_order(
        cart=engine.cart,
        user_id=request.user_id,
        shipping_address=request.shipping_address,
        notes=request.notes,
    )

    # The finalized cart is replaced by an empty one
    engine.clear_cart()
    cart_db.save(request.cart_id, engine)

    logger.info(f"Checkout of cart {request.cart_id} produced order {order.order_id}")
    return CheckoutResponse(success=True, order=order)


@router.get("/orders/{order_id}", response_model=Order)
async def get_order(order_id: str, order_db: OrderDatabase = Depends(get_order_db)):
    """Get order details"""
    order = order_db.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.get("/orders", response_model=list[Order])
async def list_orders(
    user_id: Optional[str] = None,
    limit: int = 50,
    order_db: OrderDatabase = Depends(get_order_db),
):
    """List recent orders"""
    return order_db.list_orders(user_id=user_id, limit=limit)
