import pytest


@pytest.fixture()
def category(client):
    response = client.post("/categories", json={"name": "Electrical", "description": "Bulbs and switches"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture()
def product(client, category):
    response = client.post(
        "/products",
        json={"categoryId": category["id"], "name": "LED bulb 9W", "price": 99.0},
    )
    assert response.status_code == 201
    return response.json()


def test_categories_listing_and_duplicates(client, category):
    listing = client.get("/categories")
    assert [item["name"] for item in listing.json()] == ["Electrical"]

    duplicate = client.post("/categories", json={"name": "Electrical"})
    assert duplicate.status_code == 409
    assert client.post("/categories", json={}).json()["code"] == "MISSING_FIELDS"


def test_products_by_id_and_category(client, category, product):
    single = client.get("/products", params={"id": product["id"]})
    assert single.json()["name"] == "LED bulb 9W"

    listing = client.get("/products", params={"categoryId": category["id"]})
    assert [item["id"] for item in listing.json()] == [product["id"]]

    assert client.get("/products", params={"id": 999}).json()["code"] == "PRODUCT_NOT_FOUND"


def test_product_validation(client, category):
    negative = client.post("/products", json={"categoryId": category["id"], "name": "Bad", "price": -1})
    assert negative.json()["code"] == "INVALID_PRICE"

    unknown = client.post("/products", json={"categoryId": 999, "name": "Orphan", "price": 10})
    assert unknown.status_code == 404
    assert unknown.json()["code"] == "CATEGORY_NOT_FOUND"


def test_product_reviews(client, user, product):
    created = client.post(
        "/products/reviews",
        json={"productId": product["id"], "userId": user["id"], "rating": 4, "comments": "Bright"},
    )
    assert created.status_code == 201

    listing = client.get("/products/reviews", params={"productId": product["id"]})
    assert [item["rating"] for item in listing.json()] == [4]

    out_of_range = client.post(
        "/products/reviews",
        json={"productId": product["id"], "userId": user["id"], "rating": 9},
    )
    assert out_of_range.json()["code"] == "INVALID_RATING_RANGE"


def test_cart_merges_lines_and_checkout_empties_it(client, user, address, product):
    client.post("/cart", json={"userId": user["id"], "productId": product["id"], "quantity": 2})
    merged = client.post("/cart", json={"userId": user["id"], "productId": product["id"]})
    assert merged.json()["quantity"] == 3

    order = client.post("/orders", json={"userId": user["id"], "addressId": address["id"]})
    assert order.status_code == 201
    placed = order.json()
    assert placed["status"] == "placed"
    assert placed["totalAmount"] == 297.0
    assert [(item["productId"], item["quantity"], item["unitPrice"]) for item in placed["items"]] == [
        (product["id"], 3, 99.0)
    ]

    assert client.get("/cart", params={"userId": user["id"]}).json() == []
    assert client.get("/orders", params={"userId": user["id"]}).json()[0]["id"] == placed["id"]


def test_checkout_with_empty_cart(client, user, address):
    response = client.post("/orders", json={"userId": user["id"], "addressId": address["id"]})

    assert response.status_code == 400
    assert response.json()["code"] == "EMPTY_CART"


def test_cart_validation_and_removal(client, user, product):
    zero = client.post("/cart", json={"userId": user["id"], "productId": product["id"], "quantity": 0})
    assert zero.json()["code"] == "INVALID_QUANTITY"

    item = client.post("/cart", json={"userId": user["id"], "productId": product["id"]}).json()
    removed = client.delete("/cart", params={"id": item["id"]})
    assert removed.status_code == 200
    assert client.delete("/cart", params={"id": item["id"]}).json()["code"] == "CART_ITEM_NOT_FOUND"


def test_order_status_update(client, user, address, product):
    client.post("/cart", json={"userId": user["id"], "productId": product["id"]})
    order = client.post("/orders", json={"userId": user["id"], "addressId": address["id"]}).json()

    shipped = client.put("/orders", params={"id": order["id"]}, json={"status": "Shipped"})
    assert shipped.json()["status"] == "shipped"

    invalid = client.put("/orders", params={"id": order["id"]}, json={"status": "lost"})
    assert invalid.json()["code"] == "INVALID_STATUS"


def test_checkout_requires_existing_address(client, user, product):
    client.post("/cart", json={"userId": user["id"], "productId": product["id"]})

    response = client.post("/orders", json={"userId": user["id"], "addressId": 9999})

    assert response.status_code == 404
    assert response.json()["code"] == "ADDRESS_NOT_FOUND"
    assert len(client.get("/cart", params={"userId": user["id"]}).json()) == 1
