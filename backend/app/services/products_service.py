"""
Products Service — catalog CRUD over PostgreSQL.

Lookup accepts either a product UUID or a title/slug (case-insensitive).
Updates that carry an ``images`` list replace every image row of the
product inside one transaction: old rows are deleted, new rows inserted in
the given order, and any failure rolls the whole thing back.
"""
import logging
import uuid
from typing import Optional

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import transaction
from app.core.exceptions import NotFoundError, handle_db_exceptions
from app.models.product import Product, ProductImage
from app.models.user import User
from app.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = {"description"}


def normalize_slug(value: str) -> str:
    """
    Normalize a slug: lowercase, spaces to hyphens, apostrophes stripped.

    >>> normalize_slug("Women's Strap Tee")
    'womens-strap-tee'
    """
    return (
        value.lower()
        .replace(" ", "-")
        .replace("'", "")
        .replace("´", "")
    )


def parse_uuid(value: str) -> Optional[uuid.UUID]:
    """Return the UUID if ``value`` is a canonical hyphenated UUID string, else None."""
    try:
        parsed = uuid.UUID(value)
    except (ValueError, AttributeError, TypeError):
        return None
    # hex-only, braced and urn: forms are treated as titles/slugs
    return parsed if str(parsed) == value.lower() else None


class ProductsService:
    """Create / find / update / delete products and their images."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, payload: ProductCreate, user: Optional[User] = None) -> Product:
        """Insert a product and its images as one unit."""
        data = payload.model_dump(exclude_none=True, exclude={"images"})
        image_urls = payload.images or []

        product = Product(
            **data,
            images=[ProductImage(url=url) for url in image_urls],
        )
        product.slug = normalize_slug(payload.slug or payload.title)
        if user is not None:
            product.user = user

        try:
            async with transaction(self.db):
                self.db.add(product)
                await self.db.flush()
        except Exception as error:
            handle_db_exceptions(error, logger)

        logger.info("Created product %s (%s) with %d images", product.id, product.slug, len(image_urls))
        return product

    async def find_all(self, limit: int = 10, offset: int = 0) -> list[Product]:
        """Page through products in store order."""
        result = await self.db.execute(select(Product).offset(offset).limit(limit))
        return list(result.scalars().all())

    async def find_one(self, term: str) -> Product:
        """Find by UUID, or by case-insensitive title / slug."""
        product_id = parse_uuid(term)

        if product_id is not None:
            result = await self.db.execute(select(Product).where(Product.id == product_id))
        else:
            result = await self.db.execute(
                select(Product)
                .where(
                    or_(
                        func.upper(Product.title) == term.upper(),
                        Product.slug == term.lower(),
                    )
                )
                .limit(1)
            )
        product = result.scalars().first()

        if product is None:
            raise NotFoundError(f"Product with {term} not found")
        return product

    async def update(
        self,
        product_id: uuid.UUID,
        payload: ProductUpdate,
        user: Optional[User] = None,
    ) -> Product:
        """
        Merge a partial payload onto a product.

        Sending ``images`` replaces the full image list; omitting it keeps
        the current images. Fields not sent keep their stored values.

        On failure the transaction is rolled back, which expires every
        instance loaded in the session; callers must re-query (or use ids
        captured beforehand) rather than read attributes off them.
        """
        changes = payload.model_dump(exclude_unset=True)
        image_urls = changes.pop("images", None)

        result = await self.db.execute(select(Product).where(Product.id == product_id))
        product = result.scalar_one_or_none()
        if product is None:
            raise NotFoundError(f"Product with id: {product_id} not found")

        for field, value in changes.items():
            # explicit null only clears nullable columns
            if value is None and field not in NULLABLE_FIELDS:
                continue
            setattr(product, field, value)
        product.slug = normalize_slug(product.slug)

        try:
            async with transaction(self.db):
                if image_urls is not None:
                    product.images.clear()
                    await self.db.flush()
                    product.images.extend(ProductImage(url=url) for url in image_urls)

                if user is not None:
                    product.user = user

                await self.db.flush()
        except Exception as error:
            handle_db_exceptions(error, logger)

        logger.info(
            "Updated product %s (images %s)",
            product.id,
            "replaced" if image_urls is not None else "kept",
        )
        return product

    async def remove(self, term: str) -> None:
        """Delete a product (and its images) found by id or slug/title."""
        product = await self.find_one(term)

        try:
            async with transaction(self.db):
                await self.db.delete(product)
        except Exception as error:
            handle_db_exceptions(error, logger)

        logger.info("Deleted product %s", product.id)

    async def delete_all_products(self) -> None:
        """Bulk delete every product and image. Used by the seeder only."""
        try:
            async with transaction(self.db):
                await self.db.execute(delete(ProductImage))
                await self.db.execute(delete(Product))
        except Exception as error:
            handle_db_exceptions(error, logger)

        logger.info("Deleted all products")
