from foodstore.extensions import db
from foodstore.models import Cart, Food, LineItem

from factories import create_cart, create_food, create_line_item

JSON = {"Accept": "application/json"}


def test_index_lists_carts(client, captured_templates):
    first = create_cart()
    second = create_cart()

    r = client.get("/carts")
    assert r.status_code == 200
    template, context = captured_templates[-1]
    assert template.name == "carts/index.html"
    assert context["carts"] == [first, second]


def test_show_renders_line_items_and_total(client, captured_templates):
    cart = create_cart()
    create_line_item(cart=cart, food=create_food(name="Nasi Uduk", price=10000), quantity=2)
    create_line_item(cart=cart, food=create_food(name="Kerak Telor", price=8000))

    r = client.get(f"/carts/{cart.id}")
    assert r.status_code == 200
    template, context = captured_templates[-1]
    assert template.name == "carts/show.html"
    assert context["cart"] == cart
    assert b"Nasi Uduk" in r.data
    assert b"28000.00" in r.data


def test_show_json(client):
    cart = create_cart()
    create_line_item(cart=cart, food=create_food(price=8000), quantity=3)

    r = client.get(f"/carts/{cart.id}", headers=JSON)
    body = r.get_json()
    assert body["total_price"] == 24000.0
    assert body["line_items"][0]["quantity"] == 3


def test_show_missing_cart(client):
    r = client.get("/carts/999")
    assert r.status_code == 404


def test_new_and_edit_render_forms(client, captured_templates):
    cart = create_cart()

    client.get("/carts/new")
    assert captured_templates[-1][0].name == "carts/new.html"

    client.get(f"/carts/{cart.id}/edit")
    template, context = captured_templates[-1]
    assert template.name == "carts/edit.html"
    assert context["cart"] == cart


def test_create_redirects_to_show(client):
    before = Cart.query.count()
    r = client.post("/carts")
    cart = Cart.query.order_by(Cart.id.desc()).first()

    assert Cart.query.count() == before + 1
    assert r.status_code == 302
    assert r.headers["Location"].endswith(f"/carts/{cart.id}")


def test_create_json(client):
    r = client.post("/carts", headers=JSON)
    assert r.status_code == 201
    assert r.get_json()["line_items"] == []


def test_update_redirects_to_show(client):
    cart = create_cart()
    r = client.patch(f"/carts/{cart.id}")
    assert r.status_code == 302
    assert r.headers["Location"].endswith(f"/carts/{cart.id}")


def test_destroy_removes_cart_and_its_line_items(client):
    cart = create_cart()
    item = create_line_item(cart=cart)
    food_id = item.food_id

    r = client.delete(f"/carts/{cart.id}")
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/carts")
    assert Cart.query.count() == 0
    assert LineItem.query.count() == 0
    assert db.session.get(Food, food_id) is not None


def test_food_can_be_destroyed_once_its_cart_is_gone(client):
    item = create_line_item()
    food_id = item.food_id

    client.delete(f"/carts/{item.cart_id}")
    client.delete(f"/foods/{food_id}")
    assert Food.query.count() == 0
