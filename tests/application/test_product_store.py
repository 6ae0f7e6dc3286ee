"""Integration tests for the ProductStore service.

Uses the in-memory fake repository — no file I/O.
"""

import pytest

from catalog.application.dto import ProductFields
from catalog.application.product_store import ProductStore
from catalog.domain.exceptions import (
    DuplicateCodeError,
    NotFoundError,
    ValidationError,
)
from catalog.domain.model.product import Product
from tests.fakes import FakeProductRepository


def _fields(**overrides) -> dict:
    fields = {
        "title": "A",
        "description": "d",
        "price": 200,
        "thumbnail": "t",
        "code": "abc123",
        "stock": 25,
    }
    fields.update(overrides)
    return fields


def _setup(
    products: list[Product] | None = None, revalidate: bool = False
) -> tuple[ProductStore, FakeProductRepository]:
    repo = FakeProductRepository(products)
    return ProductStore(repo, revalidate_on_update=revalidate), repo


class TestCreate:

    def test_create_then_get_returns_fields_plus_id(self):
        store, _ = _setup()
        product = store.create(_fields())
        fetched = store.get_by_id(product.id)
        assert fetched == Product(id=product.id, **_fields())

    def test_first_id_is_one(self):
        store, _ = _setup()
        assert store.create(_fields()).id == 1

    def test_accepts_product_fields_dto(self):
        store, _ = _setup()
        product = store.create(ProductFields(**_fields()))
        assert product.code == "abc123"

    def test_ids_exceed_existing_max(self):
        store, _ = _setup([Product(id=7, **_fields(code="old"))])
        first = store.create(_fields(code="n1"))
        second = store.create(_fields(code="n2"))
        assert first.id == 8
        assert second.id == 9

    def test_id_not_reused_after_deleting_lower_id(self):
        store, _ = _setup()
        store.create(_fields(code="a"))
        store.create(_fields(code="b"))
        store.delete(1)
        assert store.create(_fields(code="c")).id == 3

    def test_persists_on_create(self):
        store, repo = _setup()
        store.create(_fields())
        assert repo.save_count == 1
        assert [p.code for p in repo.read_all()] == ["abc123"]

    @pytest.mark.parametrize(
        "name", ["title", "description", "price", "thumbnail", "code", "stock"]
    )
    def test_empty_field_leaves_collection_unchanged(self, name):
        store, repo = _setup()
        with pytest.raises(ValidationError):
            store.create(_fields(**{name: 0 if name in ("price", "stock") else ""}))
        assert store.list() == []
        assert repo.save_count == 0

    def test_duplicate_code_rejected(self):
        store, repo = _setup()
        store.create(_fields())
        with pytest.raises(DuplicateCodeError, match="abc123"):
            store.create(_fields(title="Other"))
        assert len(store.list()) == 1
        assert repo.save_count == 1

    def test_non_finite_price_leaves_collection_unchanged(self):
        store, repo = _setup()
        with pytest.raises(ValidationError, match="finite"):
            store.create(_fields(price=float("nan")))
        assert store.list() == []
        assert repo.save_count == 0

    def test_duplicate_code_is_a_validation_error(self):
        store, _ = _setup()
        store.create(_fields())
        with pytest.raises(ValidationError):
            store.create(_fields())


class TestQueries:

    def test_empty_store_lists_nothing(self):
        store, _ = _setup()
        assert store.list() == []

    def test_list_preserves_order(self):
        store, _ = _setup()
        for code in ("c", "a", "b"):
            store.create(_fields(code=code))
        assert [p.code for p in store.list()] == ["c", "a", "b"]

    def test_get_missing_id_raises_not_found(self):
        store, _ = _setup()
        with pytest.raises(NotFoundError, match="99"):
            store.get_by_id(99)


class TestUpdate:

    def test_changes_only_given_field(self):
        store, _ = _setup()
        store.create(_fields())
        updated = store.update(1, {"price": 300})
        assert updated.price == 300
        assert store.get_by_id(1) == Product(id=1, **_fields(price=300))

    def test_id_in_changes_ignored(self):
        store, _ = _setup()
        store.create(_fields())
        store.update(1, {"id": 5, "stock": 1})
        assert store.get_by_id(1).stock == 1
        with pytest.raises(NotFoundError):
            store.get_by_id(5)

    def test_missing_id_leaves_collection_unchanged(self):
        store, repo = _setup()
        store.create(_fields())
        with pytest.raises(NotFoundError):
            store.update(2, {"price": 1})
        assert store.list() == [Product(id=1, **_fields())]
        assert repo.save_count == 1

    def test_no_revalidation_by_default(self):
        store, _ = _setup()
        store.create(_fields(code="a"))
        store.create(_fields(code="b"))
        store.update(2, {"code": "a", "title": ""})
        assert [p.code for p in store.list()] == ["a", "a"]

    def test_revalidation_rejects_empty_field(self):
        store, _ = _setup(revalidate=True)
        store.create(_fields())
        with pytest.raises(ValidationError, match="title"):
            store.update(1, {"title": ""})
        assert store.get_by_id(1).title == "A"

    def test_revalidation_rejects_duplicate_code(self):
        store, _ = _setup(revalidate=True)
        store.create(_fields(code="a"))
        store.create(_fields(code="b"))
        with pytest.raises(DuplicateCodeError):
            store.update(2, {"code": "a"})

    def test_revalidation_allows_keeping_own_code(self):
        store, _ = _setup(revalidate=True)
        store.create(_fields(code="a"))
        assert store.update(1, {"code": "a", "stock": 2}).stock == 2


class TestDelete:

    def test_removes_exactly_the_match(self):
        store, _ = _setup()
        for code in ("a", "b", "c"):
            store.create(_fields(code=code))
        store.delete(2)
        assert [p.id for p in store.list()] == [1, 3]

    def test_delete_is_idempotent(self):
        store, _ = _setup()
        store.create(_fields())
        store.delete(1)
        store.delete(1)
        assert store.list() == []


class TestScenario:

    def test_full_walkthrough(self):
        store, _ = _setup()
        assert store.list() == []

        assert store.create(_fields()).id == 1

        with pytest.raises(DuplicateCodeError):
            store.create(_fields())
        assert len(store.list()) == 1

        store.update(1, {"price": 300})
        assert store.get_by_id(1).price == 300
        assert store.get_by_id(1).code == "abc123"

        store.delete(1)
        assert store.list() == []
