"""
Storefront Cart Application

Cart pricing engine exposed over a small HTTP API. Each cart lives in a
session-keyed store owned by the application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from . import __version__
from .cart.pricing import PricingPolicy
from .core.config import Settings, get_settings
from .database import CartDatabase, OrderDatabase, ProductDatabase
from .routes import products_router, cart_router, checkout_router

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    policy = app.state.cart_db.policy
    logger.info("Storefront starting up...")
    logger.info(
        f"Pricing: tax_rate={policy.tax_rate}, "
        f"free_shipping_over={policy.free_shipping_threshold}, "
        f"flat_shipping={policy.shipping_flat_fee}"
    )
    yield
    logger.info("Storefront shutting down...")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its own cart, product and order stores"""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Storefront cart pricing and checkout hand-off",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.cart_db = CartDatabase(
        policy=PricingPolicy.from_settings(settings),
        currency=settings.currency,
    )
    app.state.product_db = ProductDatabase()
    app.state.order_db = OrderDatabase()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routers
    app.include_router(products_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "storefront-cart"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
