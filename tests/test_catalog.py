"""
Tests for product listing, slugs and catalog administration.
"""
from decimal import Decimal

import pytest

from storefront.core.exceptions import InvalidRequestError, NotFoundError
from storefront.schemas.product import ProductFilters
from storefront.services import CatalogService
from storefront.services.catalog_service import escape_like


def names(products):
    return [p.name for p in products]


class TestListProducts:

    @pytest.mark.asyncio
    async def test_inactive_products_never_listed(self, db, make_product):
        await make_product("Visible Tee", is_new=True)
        await make_product("Hidden Tee", is_new=True, is_active=False)
        catalog = CatalogService(db)

        for filters in ({}, {"is_new": True}, {"search": "tee"}, {"limit": 10, "offset": 0}):
            assert "Hidden Tee" not in names(await catalog.list_products(filters))

    @pytest.mark.asyncio
    async def test_flags_are_conjunctive(self, db, make_product):
        await make_product("New Only", is_new=True)
        await make_product("Deal Only", is_deal=True)
        await make_product("New Deal", is_new=True, is_deal=True)

        result = await CatalogService(db).list_products({"is_new": True, "is_deal": True})

        assert names(result) == ["New Deal"]

    @pytest.mark.asyncio
    async def test_category_filter(self, seeded_db):
        catalog = CatalogService(seeded_db)
        jeans = await catalog.get_category_by_slug("jeans")

        result = await catalog.list_products(ProductFilters(category_id=jeans.id))

        assert names(result) == ["Slim Fit Jeans"]

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_over_name(self, seeded_db):
        result = await CatalogService(seeded_db).list_products({"search": "shirt"})

        assert "Classic White Shirt" in names(result)
        assert "Slim Fit Jeans" not in names(result)
        assert "Leather Watch" not in names(result)

    @pytest.mark.asyncio
    async def test_search_matches_description(self, seeded_db):
        result = await CatalogService(seeded_db).list_products({"search": "CHRONOGRAPH"})
        assert names(result) == ["Leather Watch"]

    @pytest.mark.asyncio
    async def test_search_with_null_description(self, db, make_product):
        await make_product("Plain Cap", description=None)

        catalog = CatalogService(db)
        assert names(await catalog.list_products({"search": "cap"})) == ["Plain Cap"]
        assert await catalog.list_products({"search": "wool"}) == []

    @pytest.mark.asyncio
    async def test_search_wildcards_are_literal(self, db, make_product):
        await make_product("Cap 100% Cotton")
        await make_product("Cap Polyester")

        result = await CatalogService(db).list_products({"search": "100%"})

        assert names(result) == ["Cap 100% Cotton"]
        assert await CatalogService(db).list_products({"search": "_"}) == []

    @pytest.mark.asyncio
    async def test_newest_first(self, db, make_product):
        for name in ("First", "Second", "Third"):
            await make_product(name)

        assert names(await CatalogService(db).list_products()) == ["Third", "Second", "First"]

    @pytest.mark.asyncio
    async def test_offset_then_limit(self, seeded_db):
        catalog = CatalogService(seeded_db)
        everything = names(await catalog.list_products())
        assert everything == ["Leather Watch", "Graphic T-Shirt", "Slim Fit Jeans", "Classic White Shirt"]

        page = await catalog.list_products({"offset": 2, "limit": 2})

        assert names(page) == everything[2:4]
        assert await catalog.list_products({"offset": 10}) == []
        assert await catalog.list_products({"limit": 0}) == []

    @pytest.mark.asyncio
    async def test_negative_paging_rejected(self, seeded_db):
        catalog = CatalogService(seeded_db)
        with pytest.raises(InvalidRequestError):
            await catalog.list_products({"limit": -1})
        with pytest.raises(InvalidRequestError):
            await catalog.list_products({"offset": -1})

    @pytest.mark.asyncio
    async def test_unknown_filter_rejected(self, seeded_db):
        with pytest.raises(InvalidRequestError) as exc_info:
            await CatalogService(seeded_db).list_products({"isNew": True})
        assert exc_info.value.field == "isNew"


def test_escape_like():
    assert escape_like("50%_off\\") == "50\\%\\_off\\\\"


class TestCategories:

    @pytest.mark.asyncio
    async def test_active_categories_by_sort_order(self, seeded_db):
        catalog = CatalogService(seeded_db)
        await catalog.create_category(name="Footwear", sort_order=0)
        await catalog.create_category(name="Retired", sort_order=-1, is_active=False)

        result = await catalog.list_categories()

        assert [c.slug for c in result] == ["footwear", "shirts", "jeans", "t-shirts", "accessories"]

    @pytest.mark.asyncio
    async def test_missing_category_slug(self, seeded_db):
        with pytest.raises(NotFoundError):
            await CatalogService(seeded_db).get_category_by_slug("hats")

    @pytest.mark.asyncio
    async def test_category_by_id_and_rename(self, seeded_db):
        catalog = CatalogService(seeded_db)
        shirts = await catalog.get_category_by_slug("shirts")

        renamed = await catalog.update_category(shirts.id, name="Dress Shirts")

        assert (await catalog.get_category(shirts.id)).name == "Dress Shirts"
        assert renamed.slug == "shirts"
        with pytest.raises(NotFoundError):
            await catalog.get_category(9999)


class TestProductAdmin:

    @pytest.mark.asyncio
    async def test_generated_slugs_are_unique(self, db, make_product):
        first = await make_product("Denim Jacket")
        second = await make_product("Denim Jacket")

        assert first.slug == "denim-jacket"
        assert second.slug == "denim-jacket-2"

    @pytest.mark.asyncio
    async def test_supplied_slug_collision_rejected(self, db, make_product):
        await make_product("Denim Jacket")
        with pytest.raises(InvalidRequestError) as exc_info:
            await make_product("Other Jacket", slug="denim-jacket")
        assert exc_info.value.field == "slug"

    @pytest.mark.asyncio
    async def test_unknown_category_rejected(self, db, make_product):
        with pytest.raises(NotFoundError):
            await make_product("Orphan", category_id=404)

    @pytest.mark.asyncio
    async def test_update_product(self, db, make_product):
        product = await make_product("Linen Shirt")

        updated = await CatalogService(db).update_product(product.id, price=Decimal("1299.00"), is_deal=True)

        assert updated.price == Decimal("1299.00")
        assert updated.is_deal is True

    @pytest.mark.asyncio
    async def test_archive_hides_but_keeps_row(self, db, make_product):
        product = await make_product("Linen Shirt")
        catalog = CatalogService(db)

        await catalog.archive_product(product.id)

        assert await catalog.list_products() == []
        assert (await catalog.get_product(product.id)).is_active is False

    @pytest.mark.asyncio
    async def test_delete_product(self, db, make_product):
        product = await make_product("Linen Shirt")
        catalog = CatalogService(db)

        await catalog.delete_product(product.id)

        with pytest.raises(NotFoundError):
            await catalog.get_product(product.id)
