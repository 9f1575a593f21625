"""Request-scoped access to the stores owned by the application"""

from fastapi import Request

from ..core.config import Settings
from ..database import CartDatabase, OrderDatabase, ProductDatabase


def get_cart_db(request: Request) -> CartDatabase:
    return request.app.state.cart_db


def get_product_db(request: Request) -> ProductDatabase:
    return request.app.state.product_db


def get_order_db(request: Request) -> OrderDatabase:
    return request.app.state.order_db


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
