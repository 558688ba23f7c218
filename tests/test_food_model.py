from foodstore.extensions import db
from foodstore.models import Food
from foodstore.services.food_service import destroy_food

from factories import build_food, create_cart, create_food, create_line_item

NASI_UDUK = "Betawi style steamed rice cooked in coconut milk. Delicious!"
KERAK_TELOR = "Betawi traditional spicy omelette made from glutinous rice cooked with egg and served with serundeng."
SEMUR_JENGKOL = "Based on dongfruit, this menu promises a unique and delicious taste with a small hint of bitterness."


def seed_betawi_foods():
    nasi_uduk = create_food(name="Nasi Uduk", description=NASI_UDUK, price=10000.0)
    kerak_telor = create_food(name="Kerak Telor", description=KERAK_TELOR, price=8000.0)
    semur_jengkol = create_food(name="Nasi Semur Jengkol", description=SEMUR_JENGKOL, price=8000.0)
    return nasi_uduk, kerak_telor, semur_jengkol


def test_valid_with_name_description_and_price(app):
    food = Food(name="Nasi Uduk", description=NASI_UDUK, price=10000.0)
    assert food.is_valid()
    assert food.errors == {}


def test_factory_builds_a_valid_food(app):
    assert build_food().is_valid()


def test_invalid_without_name(app):
    food = build_food(name=None)
    assert not food.is_valid()
    assert "can't be blank" in food.errors["name"]


def test_invalid_with_whitespace_name(app):
    food = build_food(name="   ")
    assert not food.is_valid()
    assert "can't be blank" in food.errors["name"]


def test_invalid_without_description(app):
    food = build_food(description=None)
    assert not food.is_valid()
    assert "can't be blank" in food.errors["description"]


def test_invalid_without_price(app):
    food = build_food(price=None)
    assert not food.is_valid()
    assert "can't be blank" in food.errors["price"]


def test_invalid_with_duplicate_name(app):
    create_food(name="Nasi Uduk", description=NASI_UDUK)
    duplicate = build_food(name="Nasi Uduk", description="Just with a different description.")

    assert not duplicate.is_valid()
    assert "has already been taken" in duplicate.errors["name"]


def test_name_uniqueness_is_case_sensitive(app):
    create_food(name="Nasi Uduk")
    assert build_food(name="nasi uduk").is_valid()


def test_saved_food_does_not_collide_with_itself(app):
    food = create_food(name="Nasi Uduk")
    assert food.is_valid()


def test_valid_with_minimum_price(app):
    assert build_food(price=0.01).is_valid()


def test_invalid_with_non_numeric_price(app):
    food = build_food(price="abc")
    assert not food.is_valid()
    assert "is not a number" in food.errors["price"]


def test_invalid_with_price_below_minimum(app):
    food = build_food(price=-10)
    assert not food.is_valid()
    assert "must be greater than or equal to 0.01" in food.errors["price"]


def test_invalid_with_zero_price(app):
    food = build_food(price=0)
    assert not food.is_valid()
    assert "must be greater than or equal to 0.01" in food.errors["price"]


class TestByLetter:
    def test_returns_sorted_matches(self, app):
        nasi_uduk, _, semur_jengkol = seed_betawi_foods()
        assert Food.by_letter("N") == [semur_jengkol, nasi_uduk]
        assert [food.name for food in Food.by_letter("N")] == ["Nasi Semur Jengkol", "Nasi Uduk"]

    def test_omits_non_matching(self, app):
        _, kerak_telor, _ = seed_betawi_foods()
        assert kerak_telor not in Food.by_letter("N")

    def test_prefix_match_is_case_sensitive(self, app):
        seed_betawi_foods()
        lower = create_food(name="nasi campur")

        assert lower not in Food.by_letter("N")
        assert Food.by_letter("n") == [lower]

    def test_wildcards_are_literal(self, app):
        seed_betawi_foods()
        assert Food.by_letter("%") == []
        assert Food.by_letter("_") == []

    def test_no_matches(self, app):
        seed_betawi_foods()
        assert Food.by_letter("Z") == []


def test_cannot_be_destroyed_while_it_has_line_items(app):
    cart = create_cart()
    food = create_food()
    create_line_item(cart=cart, food=food)
    before = Food.query.count()

    assert destroy_food(food) is False
    assert Food.query.count() == before
    assert food.errors["base"] == ["Cannot delete record because dependent line items exist"]
    assert db.session.get(Food, food.id) is not None


def test_can_be_destroyed_without_line_items(app):
    food = create_food()
    before = Food.query.count()

    assert destroy_food(food) is True
    assert Food.query.count() == before - 1


def test_line_item_total_uses_food_price(app):
    food = create_food(price=8000)
    item = create_line_item(food=food, quantity=3)
    assert item.total_price == 24000
    assert item.cart.total_price == 24000


def test_invalid_with_price_above_column_precision(app):
    food = build_food(price="1000000")
    assert not food.is_valid()
    assert "must be less than or equal to 999999.99" in food.errors["price"]


def test_valid_with_maximum_price(app):
    assert build_food(price="999999.99").is_valid()


def test_errors_dict_keeps_added_entries(app):
    food = build_food()
    food.errors["base"] = ["Something went wrong"]
    assert food.errors == {"base": ["Something went wrong"]}

    loaded = db.session.get(Food, create_food().id)
    loaded.errors.setdefault("name", []).append("is reserved")
    assert loaded.errors["name"] == ["is reserved"]
