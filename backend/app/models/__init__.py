"""Models module."""
from app.models.user import User, ValidRoles  # noqa: F401
from app.models.product import Product, ProductImage  # noqa: F401
