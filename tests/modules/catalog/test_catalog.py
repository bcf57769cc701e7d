# -*- coding: utf-8 -*-
"""
backend/tests/modules/catalog/test_catalog.py

Tests del catálogo: tipos, categorías e ítems (servicios y rutas).

Fecha: 2026-09-02
"""

from decimal import Decimal

import pytest

from app.modules.catalog.enums import TypeName
from app.modules.catalog.schemas import (
    CategoryCreateRequest,
    CategoryUpdateRequest,
    ItemCreateRequest,
    ItemUpdateRequest,
    TypeCreateRequest,
)
from app.modules.catalog.services import CategoryService, ItemService, TypeService
from app.shared.errors import ConflictError, NotFoundError, ValidationError

from tests.helpers import ADMIN_ID


async def _seed_catalog(db):
    types = TypeService(db)
    producto = await types.create(TypeCreateRequest(name="Producto"), created_by=ADMIN_ID)
    servicio = await types.create(TypeCreateRequest(name="servicio"), created_by=ADMIN_ID)
    categories = CategoryService(db)
    muebles = await categories.create(
        CategoryCreateRequest(name="Muebles", typeId=producto.id), created_by=ADMIN_ID
    )
    asesoria = await categories.create(
        CategoryCreateRequest(name="Asesoría", typeId=servicio.id), created_by=ADMIN_ID
    )
    return producto, servicio, muebles, asesoria


class TestTypeService:
    """Tests para TypeService"""

    @pytest.mark.asyncio
    async def test_create_and_list(self, db_session):
        """Test: tipos normalizados en minúsculas con slug"""
        producto, servicio, _, _ = await _seed_catalog(db_session)

        assert producto.name == TypeName.producto
        assert producto.slug == "producto"
        listed = await TypeService(db_session).list()
        assert {t.name for t in listed} == {TypeName.producto, TypeName.servicio}

    @pytest.mark.asyncio
    async def test_duplicate_type(self, db_session):
        """Test: tipo repetido -> ConflictError"""
        await _seed_catalog(db_session)
        with pytest.raises(ConflictError):
            await TypeService(db_session).create(TypeCreateRequest(name="producto"), created_by=ADMIN_ID)

    def test_unknown_type_name_rejected(self):
        """Test: solo producto/servicio son válidos"""
        with pytest.raises(ValueError):
            TypeCreateRequest(name="combo")

    @pytest.mark.asyncio
    async def test_remove_missing_type(self, db_session):
        """Test: borrar un tipo inexistente -> deleted False"""
        result = await TypeService(db_session).remove_by_id("00000000-0000-4000-8000-0000000000aa")
        assert result == {"deleted": False}


class TestCategoryService:
    """Tests para CategoryService"""

    @pytest.mark.asyncio
    async def test_slug_and_type_ref(self, db_session):
        """Test: slug sin acentos y referencia al tipo"""
        _, servicio, _, asesoria = await _seed_catalog(db_session)
        assert asesoria.name == "asesoría"
        assert asesoria.slug == "asesoria"
        assert asesoria.type.id == servicio.id

    @pytest.mark.asyncio
    async def test_missing_type(self, db_session):
        """Test: el tipo asociado debe existir"""
        with pytest.raises(ValidationError, match="El tipo asociado no existe"):
            await CategoryService(db_session).create(
                CategoryCreateRequest(name="Sillas", typeId="00000000-0000-4000-8000-0000000000bb"),
                created_by=ADMIN_ID,
            )

    @pytest.mark.asyncio
    async def test_duplicate_in_same_type(self, db_session):
        """Test: misma categoría en el mismo tipo -> ConflictError"""
        producto, _, _, _ = await _seed_catalog(db_session)
        with pytest.raises(ConflictError):
            await CategoryService(db_session).create(
                CategoryCreateRequest(name="MUEBLES", typeId=producto.id), created_by=ADMIN_ID
            )

    @pytest.mark.asyncio
    async def test_filter_by_type_slug(self, db_session):
        """Test: typeSlug filtra; un slug desconocido no filtra"""
        await _seed_catalog(db_session)
        service = CategoryService(db_session)

        by_slug = await service.list(type_slug="servicio")
        unknown = await service.list(type_slug="no-existe")

        assert [c.slug for c in by_slug["items"]] == ["asesoria"]
        assert len(unknown["items"]) == 2

    @pytest.mark.asyncio
    async def test_rename_recomputes_slug(self, db_session):
        """Test: renombrar recalcula el slug"""
        _, _, muebles, _ = await _seed_catalog(db_session)
        updated = await CategoryService(db_session).update_by_id(
            muebles.id, CategoryUpdateRequest(name="Muebles de Jardín"), updated_by=ADMIN_ID
        )
        assert updated.slug == "muebles-de-jardin"


class TestItemService:
    """Tests para ItemService"""

    @pytest.mark.asyncio
    async def test_category_must_belong_to_type(self, db_session):
        """Test: la categoría debe pertenecer al tipo del ítem"""
        producto, _, _, asesoria = await _seed_catalog(db_session)
        with pytest.raises(ValidationError, match="no pertenece al mismo tipo"):
            await ItemService(db_session).create(
                ItemCreateRequest(
                    name="Mesa", description="Mesa de roble", price=Decimal("100"),
                    typeId=producto.id, categoryId=asesoria.id,
                ),
                created_by=ADMIN_ID,
            )

    @pytest.mark.asyncio
    async def test_create_list_and_search(self, db_session):
        """Test: alta, búsqueda por texto y filtro por categoría"""
        producto, _, muebles, _ = await _seed_catalog(db_session)
        service = ItemService(db_session)
        for name in ("Mesa", "Silla", "Sillón"):
            await service.create(
                ItemCreateRequest(
                    name=name, description=f"{name} de madera", price=Decimal("50"),
                    typeId=producto.id, categoryId=muebles.id, stock=3,
                ),
                created_by=ADMIN_ID,
            )

        found = await service.list(q="sill")
        by_category = await service.list(category_id=muebles.id, page=1, limit=2)

        assert found["total"] == 2
        assert by_category["total"] == 3
        assert by_category["has_more"] is True
        assert by_category["items"][0].category.slug == "muebles"

    @pytest.mark.asyncio
    async def test_update_and_delete(self, db_session):
        """Test: update parcial y borrado"""
        producto, _, muebles, _ = await _seed_catalog(db_session)
        service = ItemService(db_session)
        item = await service.create(
            ItemCreateRequest(
                name="Mesa", description="Mesa", price=Decimal("10"),
                typeId=producto.id, categoryId=muebles.id,
            ),
            created_by=ADMIN_ID,
        )

        updated = await service.update_by_id(item.id, ItemUpdateRequest(price=Decimal("12.5")), updated_by=ADMIN_ID)
        assert updated.price == Decimal("12.5")

        assert await service.remove_by_id(item.id) == {"deleted": True}
        with pytest.raises(NotFoundError):
            await service.get_by_id(item.id)


class TestCatalogRoutes:
    """Tests HTTP: lecturas públicas, escrituras solo admin"""

    @pytest.mark.asyncio
    async def test_public_reads(self, async_client):
        """Test: getTypes y getItems no requieren token"""
        types = await async_client.get("/api/types/getTypes")
        items = await async_client.get("/api/items/getItems")
        assert types.status_code == 200
        assert types.json()["data"] == []
        assert items.json()["data"]["items"] == []

    @pytest.mark.asyncio
    async def test_writes_require_admin(self, async_client, buyer_headers):
        """Test: createType sin token -> 401; con buyer -> 403"""
        anon = await async_client.post("/api/types/createType", json={"name": "producto"})
        buyer = await async_client.post("/api/types/createType", json={"name": "producto"}, headers=buyer_headers)
        assert anon.status_code == 401
        assert buyer.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_flow(self, async_client, admin_headers):
        """Test: admin crea tipo, categoría e ítem"""
        type_resp = await async_client.post(
            "/api/types/createType", json={"name": "Producto"}, headers=admin_headers
        )
        assert type_resp.status_code == 201
        type_id = type_resp.json()["data"]["id"]

        cat_resp = await async_client.post(
            "/api/categories/createCategory",
            json={"name": "Herramientas", "typeId": type_id},
            headers=admin_headers,
        )
        assert cat_resp.status_code == 201
        category_id = cat_resp.json()["data"]["id"]

        item_resp = await async_client.post(
            "/api/items/createItem",
            json={
                "name": "Taladro", "description": "Taladro percutor", "price": 45990,
                "typeId": type_id, "categoryId": category_id,
            },
            headers=admin_headers,
        )
        assert item_resp.status_code == 201
        assert item_resp.json()["message"] == "Ítem creado"

        names = await async_client.get("/api/categories/getCategoriesByType?typeSlug=producto")
        assert names.json()["data"] == ["herramientas"]

        distinct = await async_client.get("/api/items/categories")
        assert distinct.json()["data"] == ["herramientas"]

    @pytest.mark.asyncio
    async def test_get_item_not_found(self, async_client):
        """Test: ítem inexistente -> 404"""
        response = await async_client.get("/api/items/getItem/00000000-0000-4000-8000-0000000000cc")
        assert response.status_code == 404
