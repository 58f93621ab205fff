from datetime import date

from stock_manager.services.product_service import previous_week


def make_product(client, name="Tomato", unit="KG", **fields):
    category = client.post("/categories", json={"name": "Vegetables"}).json()
    producer = client.post("/producers", json={"name": "Horta Nova"}).json()
    body = {"name": name, "unit": unit, "categoryId": category["id"], "producerId": producer["id"]}
    body.update(fields)
    return client.post("/products", json=body).json()


def test_health(client):
    body = client.get("/health").json()

    assert body["status"] == "healthy"


def test_category_crud(client):
    created = client.post("/categories", json={"name": "Drinks"})
    assert created.status_code == 201
    category_id = created.json()["id"]

    renamed = client.patch(f"/categories/{category_id}", json={"name": "Beverages"})
    assert renamed.json() == {"id": category_id, "name": "Beverages"}
    assert client.get("/categories").json() == [{"id": category_id, "name": "Beverages"}]

    deleted = client.delete(f"/categories/{category_id}")
    assert deleted.json() == {"message": "Category deleted"}
    assert client.get(f"/categories/{category_id}").status_code == 404


def test_category_name_cannot_be_empty(client):
    response = client.post("/categories", json={"name": ""})

    assert response.status_code == 400


def test_category_name_cannot_be_nulled(client):
    category_id = client.post("/categories", json={"name": "Drinks"}).json()["id"]

    response = client.patch(f"/categories/{category_id}", json={"name": None})

    assert response.status_code == 400
    assert response.json()["detail"] == "name cannot be null"


def test_subcategory_needs_existing_category(client):
    response = client.post("/subcategories", json={"name": "Juices", "categoryId": 99})

    assert response.status_code == 404
    assert response.json()["detail"] == "Category with id 99 not found"


def test_product_response_embeds_references(client):
    product = make_product(client, description="Cherry tomatoes")

    assert product["isActive"] is True
    assert product["unit"] == "KG"
    assert product["category"]["name"] == "Vegetables"
    assert product["producer"]["name"] == "Horta Nova"
    assert product["subcategory"] is None


def test_product_with_unknown_unit_is_400(client):
    category = client.post("/categories", json={"name": "Vegetables"}).json()
    producer = client.post("/producers", json={"name": "Horta Nova"}).json()

    response = client.post("/products", json={
        "name": "Tomato", "unit": "BOX", "categoryId": category["id"], "producerId": producer["id"],
    })

    assert response.status_code == 400


def test_history_record_round_trip(client):
    product = make_product(client)

    created = client.post("/product-history", json={
        "productId": product["id"],
        "weekStartDate": "2025-06-02",
        "receivedQuantity": 30,
        "soldQuantity": 26,
        "unsoldQuantity": 4,
        "price": 2.5,
    })

    assert created.status_code == 201
    record = created.json()
    assert record["weekStartDate"] == "2025-06-02"
    assert record["price"] == 2.5
    assert record["product"]["name"] == "Tomato"


def test_history_rejects_negative_quantities(client):
    product = make_product(client)

    response = client.post("/product-history", json={
        "productId": product["id"],
        "weekStartDate": "2025-06-02",
        "receivedQuantity": -1,
        "soldQuantity": 0,
        "unsoldQuantity": 0,
    })

    assert response.status_code == 400


def test_deleting_product_deletes_history(client):
    product = make_product(client)
    client.post("/product-history", json={
        "productId": product["id"],
        "weekStartDate": "2025-06-02",
        "receivedQuantity": 1,
        "soldQuantity": 1,
        "unsoldQuantity": 0,
    })

    response = client.delete(f"/products/{product['id']}")

    assert response.json() == {"message": "Product deleted"}
    assert client.get("/product-history").json() == []


def test_ruptures_lists_low_stock_products(client):
    product = make_product(client)
    plenty = make_product(client, name="Potato")
    monday, _ = previous_week(date.today())
    for item, unsold in ((product, 2), (plenty, 40)):
        client.post("/product-history", json={
            "productId": item["id"],
            "weekStartDate": monday.isoformat(),
            "receivedQuantity": 50,
            "soldQuantity": 50 - unsold,
            "unsoldQuantity": unsold,
        })

    response = client.get("/products/ruptures")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == [product["id"]]
    assert client.get("/products/ruptures", params={"categoryId": plenty["categoryId"]}).json() == []


def test_customer_and_client_are_separate(client):
    customer = client.post("/customers", json={"name": "Joana", "email": "joana@example.com"}).json()
    party = client.post("/clients", json={"name": "Hotel Mar"}).json()

    assert customer["email"] == "joana@example.com"
    assert client.get("/customers").json() == [customer]
    assert client.get("/clients").json() == [party]


def test_invalid_email_is_400(client):
    response = client.post("/customers", json={"name": "Joana", "email": "not-an-email"})

    assert response.status_code == 400
