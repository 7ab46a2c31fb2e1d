import pytest

from app.domain.exceptions import BadRequestError, NotFoundError
from app.services.favorite_service import FavoriteService

from tests.conftest import BIRYANI_ID, CATALOG, PIZZA_ID, UNKNOWN_ID


@pytest.fixture()
def svc(db, catalog):
    return FavoriteService(db=db, product_client=catalog)


def test_add_is_idempotent(svc, user_id):
    svc.add_favorite(user_id, PIZZA_ID)
    result = svc.add_favorite(user_id, PIZZA_ID)

    assert result["message"] == "Product added to favorites"
    assert result["user"]["favourites"] == [PIZZA_ID]


def test_add_requires_product_id(svc, user_id):
    with pytest.raises(BadRequestError) as exc:
        svc.add_favorite(user_id, None)

    assert exc.value.message == "productId is required"


def test_add_rejects_malformed_product_id(svc, user_id):
    with pytest.raises(BadRequestError) as exc:
        svc.add_favorite(user_id, "12345")

    assert exc.value.message == "Invalid productId format"


def test_add_for_unknown_user_is_not_found(svc):
    with pytest.raises(NotFoundError):
        svc.add_favorite(UNKNOWN_ID, PIZZA_ID)


def test_remove_filters_out_product(svc, user_id):
    svc.add_favorite(user_id, PIZZA_ID)
    svc.add_favorite(user_id, BIRYANI_ID)

    result = svc.remove_favorite(user_id, PIZZA_ID)

    assert result["message"] == "Product removed from favorites successfully"
    assert result["user"]["favourites"] == [BIRYANI_ID]


def test_remove_absent_product_is_noop(svc, user_id):
    svc.add_favorite(user_id, BIRYANI_ID)

    result = svc.remove_favorite(user_id, PIZZA_ID)

    assert result["user"]["favourites"] == [BIRYANI_ID]


def test_list_resolves_products_in_insertion_order(svc, user_id):
    svc.add_favorite(user_id, BIRYANI_ID)
    svc.add_favorite(user_id, UNKNOWN_ID)
    svc.add_favorite(user_id, PIZZA_ID)

    assert svc.list_favorites(user_id) == [CATALOG[BIRYANI_ID], CATALOG[PIZZA_ID]]


def test_list_for_unknown_user_is_not_found(svc):
    with pytest.raises(NotFoundError):
        svc.list_favorites(UNKNOWN_ID)


def test_add_same_product_in_different_case_is_idempotent(svc, user_id):
    svc.add_favorite(user_id, PIZZA_ID)
    result = svc.add_favorite(user_id, PIZZA_ID.upper())

    assert result["user"]["favourites"] == [PIZZA_ID]


def test_remove_accepts_uppercase_id(svc, user_id):
    svc.add_favorite(user_id, PIZZA_ID)
    result = svc.remove_favorite(user_id, PIZZA_ID.upper())

    assert result["user"]["favourites"] == []


def test_remove_for_unknown_user_is_not_found(svc):
    with pytest.raises(NotFoundError) as exc:
        svc.remove_favorite(UNKNOWN_ID, PIZZA_ID)

    assert exc.value.status_code == 404
