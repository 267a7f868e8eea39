import uuid

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import ConflictError, InternalError, NotFoundError
from app.models.product import ProductImage
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.products_service import ProductsService, normalize_slug, parse_uuid


def make_payload(title="Women's Strap Tee", **overrides):
    data = {"title": title, "sizes": ["S", "M"], "gender": "women", "price": 35}
    data.update(overrides)
    return ProductCreate(**data)


def urls(product):
    return [image.url for image in product.images]


@pytest.fixture
def service(db):
    return ProductsService(db)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Women's Strap Tee", "womens-strap-tee"),
        ("Kids Cybertruck Tee", "kids-cybertruck-tee"),
        ("men´s hoodie", "mens-hoodie"),
        ("already_normal", "already_normal"),
    ],
)
def test_normalize_slug(raw, expected):
    assert normalize_slug(raw) == expected


def test_parse_uuid():
    value = uuid.uuid4()
    assert parse_uuid(str(value)) == value
    assert parse_uuid("womens-strap-tee") is None
    assert parse_uuid(str(value).upper()) == value


@pytest.mark.parametrize(
    "make_term",
    [
        lambda value: value.hex,
        lambda value: "{" + str(value) + "}",
        lambda value: value.urn,
    ],
)
def test_parse_uuid_rejects_non_canonical_forms(make_term):
    assert parse_uuid(make_term(uuid.uuid4())) is None


async def test_create_derives_slug_from_title(service):
    product = await service.create(make_payload(images=["a.jpg", "b.jpg"]))

    assert product.slug == "womens-strap-tee"
    assert product.stock == 0
    assert product.tags == []
    assert urls(product) == ["a.jpg", "b.jpg"]


async def test_create_normalizes_given_slug(service):
    product = await service.create(make_payload(slug="Summer Sale's Tee"))
    assert product.slug == "summer-sales-tee"


async def test_create_sets_owner(service, admin_user):
    product = await service.create(make_payload(), admin_user)
    assert product.user_id == admin_user.id


async def test_create_duplicate_title_conflicts(service):
    await service.create(make_payload())

    with pytest.raises(ConflictError):
        await service.create(make_payload(slug="another-slug"))


async def test_create_duplicate_slug_conflicts(service):
    await service.create(make_payload(title="Same Slug"))

    with pytest.raises(ConflictError):
        await service.create(make_payload(title="same slug"))


async def test_find_one_by_id_title_and_slug(service):
    created = await service.create(make_payload(images=["a.jpg"]))

    assert (await service.find_one(str(created.id))).id == created.id
    assert (await service.find_one("WOMEN'S STRAP TEE")).id == created.id
    assert (await service.find_one("Womens-Strap-Tee")).id == created.id


async def test_find_one_non_canonical_uuid_is_a_title(service):
    hex_title = uuid.uuid4().hex
    braced_title = "{" + str(uuid.uuid4()) + "}"
    by_hex = await service.create(make_payload(title=hex_title))
    by_braces = await service.create(make_payload(title=braced_title))

    assert (await service.find_one(hex_title)).id == by_hex.id
    assert (await service.find_one(braced_title)).id == by_braces.id


async def test_find_one_unknown_uuid_is_not_found(service):
    await service.create(make_payload())

    with pytest.raises(NotFoundError):
        await service.find_one(str(uuid.uuid4()))


async def test_find_one_unknown_term_is_not_found(service):
    with pytest.raises(NotFoundError) as exc_info:
        await service.find_one("no-such-product")
    assert "no-such-product" in exc_info.value.detail


async def test_find_all_pagination_window(service):
    for n in range(1, 6):
        await service.create(make_payload(title=f"Product {n}"))

    page = await service.find_all(limit=2, offset=1)

    assert [p.title for p in page] == ["Product 2", "Product 3"]


async def test_find_all_offset_out_of_range(service):
    await service.create(make_payload())
    assert await service.find_all(limit=10, offset=5) == []


async def test_update_replaces_images(service, session_maker):
    product = await service.create(make_payload(images=["x.jpg", "y.jpg"]))

    updated = await service.update(product.id, ProductUpdate(images=["a.jpg"]))
    assert urls(updated) == ["a.jpg"]

    async with session_maker() as fresh:
        reloaded = await ProductsService(fresh).find_one(str(product.id))
        assert urls(reloaded) == ["a.jpg"]
        count = await fresh.scalar(select(func.count()).select_from(ProductImage))
        assert count == 1


async def test_update_without_images_keeps_them(service, session_maker):
    product = await service.create(make_payload(images=["x.jpg", "y.jpg"]))

    updated = await service.update(product.id, ProductUpdate(price=99, stock=4))

    assert updated.price == 99
    assert updated.stock == 4
    assert urls(updated) == ["x.jpg", "y.jpg"]
    async with session_maker() as fresh:
        reloaded = await ProductsService(fresh).find_one(str(product.id))
        assert urls(reloaded) == ["x.jpg", "y.jpg"]
        assert reloaded.title == "Women's Strap Tee"


async def test_update_renormalizes_slug(service):
    product = await service.create(make_payload())

    updated = await service.update(product.id, ProductUpdate(slug="Brand New Slug's"))
    assert updated.slug == "brand-new-slugs"

    # title change alone keeps the stored slug
    updated = await service.update(product.id, ProductUpdate(title="Renamed Tee"))
    assert updated.title == "Renamed Tee"
    assert updated.slug == "brand-new-slugs"


async def test_update_sets_owner(service, admin_user):
    product = await service.create(make_payload())

    updated = await service.update(product.id, ProductUpdate(stock=1), admin_user)

    assert updated.user.id == admin_user.id


async def test_update_unknown_id_is_not_found(service):
    with pytest.raises(NotFoundError):
        await service.update(uuid.uuid4(), ProductUpdate(price=1))


async def test_update_duplicate_title_conflicts_and_keeps_images(service, session_maker):
    await service.create(make_payload(title="First"))
    second = await service.create(make_payload(title="Second", images=["s.jpg"]))
    second_id = second.id

    with pytest.raises(ConflictError):
        await service.update(second_id, ProductUpdate(title="First", images=["new.jpg"]))

    async with session_maker() as fresh:
        reloaded = await ProductsService(fresh).find_one(str(second_id))
        assert reloaded.title == "Second"
        assert urls(reloaded) == ["s.jpg"]


async def test_update_duplicate_slug_conflicts(service, session_maker):
    await service.create(make_payload(title="Same Slug"))
    other = await service.create(make_payload(title="Other Tee"))
    other_id = other.id

    with pytest.raises(ConflictError):
        await service.update(other_id, ProductUpdate(slug="Same Slug"))

    async with session_maker() as fresh:
        reloaded = await ProductsService(fresh).find_one(str(other_id))
        assert reloaded.slug == "other-tee"


async def test_update_rolls_back_when_commit_fails(service, db, session_maker, monkeypatch):
    product = await service.create(make_payload(images=["x.jpg", "y.jpg"]))
    product_id = product.id

    async def failing_commit():
        raise SQLAlchemyError("simulated store failure")

    monkeypatch.setattr(db, "commit", failing_commit)

    with pytest.raises(InternalError) as exc_info:
        await service.update(product_id, ProductUpdate(images=["a.jpg"]))
    assert exc_info.value.detail == "Unexpected error, check server logs"

    async with session_maker() as fresh:
        reloaded = await ProductsService(fresh).find_one(str(product_id))
        assert urls(reloaded) == ["x.jpg", "y.jpg"]


async def test_remove_deletes_product_and_images(service, db):
    product = await service.create(make_payload(images=["x.jpg", "y.jpg"]))

    await service.remove(product.slug)

    with pytest.raises(NotFoundError):
        await service.find_one(str(product.id))
    assert await db.scalar(select(func.count()).select_from(ProductImage)) == 0


async def test_remove_unknown_is_not_found(service):
    with pytest.raises(NotFoundError):
        await service.remove(str(uuid.uuid4()))


async def test_delete_all_products(service, db):
    await service.create(make_payload(title="One", images=["1.jpg"]))
    await service.create(make_payload(title="Two", images=["2.jpg"]))

    await service.delete_all_products()

    assert await service.find_all() == []
    assert await db.scalar(select(func.count()).select_from(ProductImage)) == 0
