# storefront/api/__init__.py
from storefront.api.routers import auth, cart, health, products

__all__ = ["auth", "cart", "health", "products"]
