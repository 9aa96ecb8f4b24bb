AUTH = {"Authorization": "Bearer test-token"}

DESK = {"name": "Desk", "description": "Wood desk", "price": 150, "category": "Furniture"}


def test_welcome(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == "Welcome to the Product API! Go to /api/products to see all products."


def test_list_products_returns_seed_in_order(client):
    resp = client.get("/api/products")
    assert resp.status_code == 200
    assert [p["id"] for p in resp.json()] == ["1", "2", "3"]


def test_get_seed_product(client):
    resp = client.get("/api/products/1")
    assert resp.status_code == 200
    assert resp.json() == {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    }


def test_get_is_idempotent(client):
    assert client.get("/api/products/2").json() == client.get("/api/products/2").json()


def test_get_unknown_product(client):
    resp = client.get("/api/products/nope")
    assert resp.status_code == 404
    assert resp.json() == {
        "error": "Product not found",
        "message": "Product with id nope does not exist",
    }


def test_create_product_normalizes_fields(client, store):
    resp = client.post("/api/products", json=DESK, headers=AUTH)
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Product created successfully"
    product = body["product"]
    assert product["category"] == "furniture"
    assert product["inStock"] is True
    assert product["id"] not in {"1", "2", "3"}
    assert len(store) == 4
    assert client.get("/api/products").json()[-1] == product


def test_create_then_get_round_trip(client):
    payload = {
        "name": "  Lamp ",
        "description": " Desk lamp  ",
        "price": 19.5,
        "category": " Lighting ",
        "inStock": False,
    }
    created = client.post("/api/products", json=payload, headers=AUTH).json()["product"]
    fetched = client.get(f"/api/products/{created['id']}").json()
    assert fetched == created
    assert fetched["name"] == "Lamp"
    assert fetched["description"] == "Desk lamp"
    assert fetched["category"] == "lighting"
    assert fetched["inStock"] is False


def test_created_ids_are_unique(client):
    for _ in range(5):
        client.post("/api/products", json=DESK, headers=AUTH)
    ids = [p["id"] for p in client.get("/api/products").json()]
    assert len(ids) == len(set(ids)) == 8


def test_create_ignores_client_id(client):
    resp = client.post("/api/products", json={**DESK, "id": "1"}, headers=AUTH)
    assert resp.status_code == 201
    assert resp.json()["product"]["id"] != "1"


def test_create_zero_price_is_valid(client):
    resp = client.post("/api/products", json={**DESK, "price": 0}, headers=AUTH)
    assert resp.status_code == 201
    assert resp.json()["product"]["price"] == 0


def test_create_negative_price(client, store):
    resp = client.post("/api/products", json={**DESK, "price": -5}, headers=AUTH)
    assert resp.status_code == 400
    assert resp.json() == {
        "error": "Validation Error",
        "message": "Price must be a positive number",
    }
    assert len(store) == 3


def test_create_rejects_numeric_string_price(client):
    resp = client.post("/api/products", json={**DESK, "price": "150"}, headers=AUTH)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Price must be a positive number"


def test_create_missing_fields(client):
    resp = client.post("/api/products", json={"name": "Desk", "price": 10}, headers=AUTH)
    assert resp.status_code == 400
    assert resp.json()["message"] == (
        "Missing required fields: name, description, price, and category are required"
    )


def test_create_empty_name_counts_as_missing(client):
    resp = client.post("/api/products", json={**DESK, "name": "   "}, headers=AUTH)
    assert resp.status_code == 400
    assert resp.json()["message"].startswith("Missing required fields")


def test_create_reports_every_violation(client):
    payload = {"name": "Desk", "description": "Wood desk", "price": -1, "inStock": "yes"}
    resp = client.post("/api/products", json=payload, headers=AUTH)
    assert resp.status_code == 400
    assert resp.json()["message"] == (
        "Missing required fields: name, description, price, and category are required; "
        "Price must be a positive number; inStock must be a boolean"
    )


def test_create_rejects_non_string_name(client):
    resp = client.post("/api/products", json={**DESK, "name": 42}, headers=AUTH)
    assert resp.status_code == 400
    assert resp.json()["message"] == "name must be a string"


def test_create_rejects_non_object_body(client):
    resp = client.post("/api/products", json=[DESK], headers=AUTH)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Request body must be a JSON object"


def test_create_rejects_malformed_json(client):
    resp = client.post(
        "/api/products",
        content=b"{not json",
        headers={**AUTH, "Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "Validation Error"


def test_create_requires_auth(client, store):
    resp = client.post("/api/products", json=DESK)
    assert resp.status_code == 401
    assert resp.json() == {
        "error": "Unauthorized",
        "message": "Please provide a valid authorization token",
    }
    assert resp.headers["WWW-Authenticate"] == "Bearer"
    assert len(store) == 3


def test_malformed_auth_header_is_rejected(client):
    for value in ("Token abc", "bearer abc", "Basic dXNlcjpwYXNz"):
        resp = client.post("/api/products", json=DESK, headers={"Authorization": value})
        assert resp.status_code == 401


def test_auth_is_checked_before_validation(client):
    resp = client.put("/api/products/1", json={"price": -5})
    assert resp.status_code == 401
    resp = client.post(
        "/api/products",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 401


def test_update_price_only_keeps_other_fields(client):
    before = client.get("/api/products/3").json()
    resp = client.put("/api/products/3", json={"price": 65.5}, headers=AUTH)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Product updated successfully"
    after = resp.json()["product"]
    assert after == {**before, "price": 65.5}


def test_update_normalizes_and_keeps_position(client):
    resp = client.put(
        "/api/products/2",
        json={"name": " Phone ", "category": " Mobile ", "inStock": False},
        headers=AUTH,
    )
    assert resp.status_code == 200
    product = resp.json()["product"]
    assert product["name"] == "Phone"
    assert product["category"] == "mobile"
    assert product["inStock"] is False
    listed = client.get("/api/products").json()
    assert [p["id"] for p in listed] == ["1", "2", "3"]
    assert listed[1] == product


def test_update_cannot_change_id(client):
    resp = client.put("/api/products/1", json={"id": "99", "name": "Notebook"}, headers=AUTH)
    assert resp.status_code == 200
    assert resp.json()["product"]["id"] == "1"
    assert client.get("/api/products/99").status_code == 404


def test_update_empty_text_leaves_value(client):
    resp = client.put("/api/products/1", json={"name": ""}, headers=AUTH)
    assert resp.status_code == 200
    assert resp.json()["product"]["name"] == "Laptop"


def test_update_invalid_price(client):
    resp = client.put("/api/products/1", json={"price": -1}, headers=AUTH)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Price must be a positive number"
    assert client.get("/api/products/1").json()["price"] == 1200


def test_update_null_price_is_invalid(client):
    resp = client.put("/api/products/1", json={"price": None}, headers=AUTH)
    assert resp.status_code == 400


def test_update_unknown_product(client):
    resp = client.put("/api/products/missing", json={"price": -1}, headers=AUTH)
    assert resp.status_code == 404
    assert resp.json()["message"] == "Product with id missing does not exist"


def test_delete_product(client, store):
    resp = client.delete("/api/products/2", headers=AUTH)
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Product deleted successfully"
    assert body["product"]["name"] == "Smartphone"
    assert len(store) == 2
    assert [p["id"] for p in client.get("/api/products").json()] == ["1", "3"]
    assert client.get("/api/products/2").status_code == 404


def test_delete_unknown_product(client):
    resp = client.delete("/api/products/missing", headers=AUTH)
    assert resp.status_code == 404


def test_delete_requires_auth(client, store):
    resp = client.delete("/api/products/1")
    assert resp.status_code == 401
    assert len(store) == 3


def test_create_accepts_very_large_integer_price(client):
    body = (
        '{"name": "Vault", "description": "Very expensive", "category": "misc", '
        '"price": 1' + "0" * 400 + "}"
    )
    resp = client.post(
        "/api/products",
        content=body.encode(),
        headers={**AUTH, "Content-Type": "application/json"},
    )
    assert resp.status_code == 201
    assert resp.json()["product"]["price"] == 10 ** 400


def test_create_rejects_non_finite_price(client):
    resp = client.post(
        "/api/products",
        content=b'{"name": "a", "description": "b", "category": "c", "price": NaN}',
        headers={**AUTH, "Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "Price must be a positive number"


def test_create_falsy_text_counts_as_missing(client, store):
    for value in (False, 0, None, ""):
        resp = client.post("/api/products", json={**DESK, "name": value}, headers=AUTH)
        assert resp.status_code == 400
        assert resp.json()["message"] == (
            "Missing required fields: name, description, price, and category are required"
        )
    assert len(store) == 3


def test_create_only_accepts_in_stock_wire_name(client):
    resp = client.post("/api/products", json={**DESK, "in_stock": False}, headers=AUTH)
    assert resp.status_code == 201
    assert resp.json()["product"]["inStock"] is True


def test_update_falsy_text_leaves_value(client):
    resp = client.put("/api/products/1", json={"name": False, "category": 0}, headers=AUTH)
    assert resp.status_code == 200
    product = resp.json()["product"]
    assert product["name"] == "Laptop"
    assert product["category"] == "electronics"
