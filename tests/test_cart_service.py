import pytest

from app.data.models.user import UserModel
from app.domain.exceptions import BadRequestError, ConflictError, NotFoundError
from app.repos.cart_repo import CartRepo
from app.services.cart_service import CartService

from tests.conftest import BIRYANI_ID, CATALOG, PIZZA_ID, UNKNOWN_ID


@pytest.fixture()
def svc(db, catalog):
    return CartService(db=db, product_client=catalog, max_line_quantity=20, max_lines=2)


def test_add_twice_merges_into_one_line(svc, user_id):
    svc.add_product(user_id, PIZZA_ID, 2)
    result = svc.add_product(user_id, PIZZA_ID, 3)

    assert result["message"] == "Product added to cart successfully"
    assert result["user"]["cart"] == [{"product": PIZZA_ID, "quantity": 5}]


def test_add_different_products_keeps_insertion_order(svc, user_id):
    svc.add_product(user_id, BIRYANI_ID, 1)
    result = svc.add_product(user_id, PIZZA_ID, 4)

    assert [line["product"] for line in result["user"]["cart"]] == [BIRYANI_ID, PIZZA_ID]


def test_each_mutation_bumps_user_version(svc, user_id, db):
    before = db.get(UserModel, user_id).version
    svc.add_product(user_id, PIZZA_ID, 1)
    svc.remove_product(user_id, PIZZA_ID)

    assert db.get(UserModel, user_id).version == before + 2


def test_add_rejects_malformed_product_id(svc, user_id):
    with pytest.raises(BadRequestError):
        svc.add_product(user_id, "pizza", 1)


def test_add_rejects_non_positive_quantity(svc, user_id):
    with pytest.raises(BadRequestError):
        svc.add_product(user_id, PIZZA_ID, 0)


def test_add_for_unknown_user_is_not_found(svc):
    with pytest.raises(NotFoundError):
        svc.add_product(UNKNOWN_ID, PIZZA_ID, 1)


def test_line_quantity_cap(svc, user_id):
    svc.add_product(user_id, PIZZA_ID, 15)

    with pytest.raises(BadRequestError):
        svc.add_product(user_id, PIZZA_ID, 6)

    assert svc.list_items(user_id)[0]["quantity"] == 15


def test_cart_size_cap(svc, user_id):
    svc.add_product(user_id, PIZZA_ID, 1)
    svc.add_product(user_id, BIRYANI_ID, 1)

    with pytest.raises(BadRequestError):
        svc.add_product(user_id, UNKNOWN_ID, 1)


def test_remove_partial_quantity_decrements(svc, user_id):
    svc.add_product(user_id, PIZZA_ID, 5)
    result = svc.remove_product(user_id, PIZZA_ID, 2)

    assert result["message"] == "Product quantity updated in cart"
    assert result["user"]["cart"] == [{"product": PIZZA_ID, "quantity": 3}]


@pytest.mark.parametrize("quantity", [5, 7])
def test_remove_quantity_at_least_current_deletes_line(svc, user_id, quantity):
    svc.add_product(user_id, PIZZA_ID, 5)
    result = svc.remove_product(user_id, PIZZA_ID, quantity)

    assert result["user"]["cart"] == []


@pytest.mark.parametrize("quantity", [None, 0, -3])
def test_remove_without_positive_quantity_deletes_line(svc, user_id, quantity):
    svc.add_product(user_id, PIZZA_ID, 9)
    svc.add_product(user_id, BIRYANI_ID, 1)
    result = svc.remove_product(user_id, PIZZA_ID, quantity)

    assert result["user"]["cart"] == [{"product": BIRYANI_ID, "quantity": 1}]


def test_remove_product_not_in_cart_is_not_found(svc, user_id):
    with pytest.raises(NotFoundError) as exc:
        svc.remove_product(user_id, PIZZA_ID)

    assert exc.value.message == "Product not found in the user's cart"


def test_remove_for_unknown_user_is_not_found(svc):
    with pytest.raises(NotFoundError) as exc:
        svc.remove_product(UNKNOWN_ID, PIZZA_ID)

    assert exc.value.message == "User not found"


def test_list_resolves_products_from_catalog(svc, user_id):
    svc.add_product(user_id, PIZZA_ID, 2)
    svc.add_product(user_id, UNKNOWN_ID, 1)

    items = svc.list_items(user_id)

    assert items[0] == {"product": CATALOG[PIZZA_ID], "quantity": 2}
    #produkt usuniety z katalogu
    assert items[1] == {"product": None, "quantity": 1}


def test_concurrent_modification_rolls_back(svc, user_id, db, monkeypatch):
    monkeypatch.setattr(svc.users, "update_user_version", lambda user_id, old_version: 0)

    with pytest.raises(ConflictError):
        svc.add_product(user_id, PIZZA_ID, 1)

    assert CartRepo(db).get_cart_items(user_id) == []


def test_add_same_product_in_different_case_merges(svc, user_id):
    svc.add_product(user_id, PIZZA_ID, 2)
    result = svc.add_product(user_id, PIZZA_ID.upper(), 3)

    assert result["user"]["cart"] == [{"product": PIZZA_ID, "quantity": 5}]
    assert svc.list_items(user_id) == [{"product": CATALOG[PIZZA_ID], "quantity": 5}]


def test_remove_accepts_uppercase_id(svc, user_id):
    svc.add_product(user_id, PIZZA_ID, 2)
    result = svc.remove_product(user_id, PIZZA_ID.upper())

    assert result["user"]["cart"] == []


def test_remove_malformed_id_is_not_found(svc, user_id):
    with pytest.raises(NotFoundError):
        svc.remove_product(user_id, "pizza")


def test_single_add_over_line_cap_is_rejected(svc, user_id):
    with pytest.raises(BadRequestError):
        svc.add_product(user_id, PIZZA_ID, 21)

    assert svc.list_items(user_id) == []
