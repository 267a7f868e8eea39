"""
Product catalog models.

Product owns an ordered list of ProductImage rows (delete-orphan cascade):
images are only ever replaced as a whole. Images and the owning user are
loaded eagerly with every product.
"""
import uuid
from typing import Optional

from sqlalchemy import Float, ForeignKey, Integer, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, StringList
from app.models.user import User


class Product(Base):
    """Catalog product."""

    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0, server_default=text("0"))
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    slug: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default=text("0"))
    sizes: Mapped[list[str]] = mapped_column(StringList, nullable=False)
    gender: Mapped[str] = mapped_column(String(10), nullable=False)
    tags: Mapped[list[str]] = mapped_column(StringList, nullable=False, default=list)

    user_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("users.id"), nullable=True, index=True
    )

    # Relationships
    images: Mapped[list["ProductImage"]] = relationship(
        back_populates="product",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="ProductImage.id",
    )
    user: Mapped[Optional[User]] = relationship(lazy="selectin")

    def __repr__(self):
        return f"<Product id={self.id} slug={self.slug}>"


class ProductImage(Base):
    """Image URL owned by exactly one product."""

    __tablename__ = "product_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    product_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )

    product: Mapped[Product] = relationship(back_populates="images")

    def __repr__(self):
        return f"<ProductImage id={self.id} url={self.url}>"
