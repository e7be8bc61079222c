from factories import make_product


def test_my_products_with_images(client, db_session, test_user, other_user, auth_headers):
    make_product(db_session, test_user, title="Lamp", images=("lamp-front.png", "lamp-side.png"))
    make_product(db_session, test_user, title="Stool", images=())
    make_product(db_session, other_user, title="Rug")

    response = client.get("/api/v1/users/me", headers=auth_headers)

    assert response.status_code == 200
    products = {p["title"]: p for p in response.json()["data"]["products"]}
    assert set(products) == {"Lamp", "Stool"}
    assert len(products["Lamp"]["images"]) == 2
    assert products["Stool"]["images"] == []
    assert all(p["user_id"] == test_user.id for p in products.values())


def test_no_products(client, auth_headers):
    response = client.get("/api/v1/users/me", headers=auth_headers)

    assert response.json() == {"status": "success", "data": {"products": []}}
