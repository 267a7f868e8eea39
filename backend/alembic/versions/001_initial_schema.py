"""Initial schema — users, products, product_images.

Uses IF NOT EXISTS to be safe for re-runs on databases where
tables were already created manually.

Revision ID: 001_initial_schema
Revises: None
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    conn = op.get_bind()

    conn.execute(sa.text("""
        CREATE TABLE IF NOT EXISTS users (
            id UUID PRIMARY KEY,
            email VARCHAR(255) NOT NULL UNIQUE,
            hashed_password VARCHAR(255) NOT NULL,
            full_name VARCHAR(255),
            is_active BOOLEAN DEFAULT TRUE,
            roles TEXT[] NOT NULL DEFAULT '{user}',
            created_at TIMESTAMPTZ DEFAULT NOW(),
            updated_at TIMESTAMPTZ DEFAULT NOW()
        )
    """))
    conn.execute(sa.text(
        "CREATE INDEX IF NOT EXISTS ix_users_email ON users(email)"
    ))

    conn.execute(sa.text("""
        CREATE TABLE IF NOT EXISTS products (
            id UUID PRIMARY KEY,
            title TEXT NOT NULL UNIQUE,
            price FLOAT NOT NULL DEFAULT 0,
            description TEXT,
            slug TEXT NOT NULL UNIQUE,
            stock INTEGER NOT NULL DEFAULT 0,
            sizes TEXT[] NOT NULL,
            gender VARCHAR(10) NOT NULL,
            tags TEXT[] NOT NULL DEFAULT '{}',
            user_id UUID REFERENCES users(id)
        )
    """))
    conn.execute(sa.text(
        "CREATE INDEX IF NOT EXISTS ix_products_user_id ON products(user_id)"
    ))

    conn.execute(sa.text("""
        CREATE TABLE IF NOT EXISTS product_images (
            id SERIAL PRIMARY KEY,
            url TEXT NOT NULL,
            product_id UUID NOT NULL REFERENCES products(id) ON DELETE CASCADE
        )
    """))
    conn.execute(sa.text(
        "CREATE INDEX IF NOT EXISTS ix_product_images_product_id ON product_images(product_id)"
    ))


def downgrade() -> None:
    op.drop_table("product_images")
    op.drop_table("products")
    op.drop_table("users")
