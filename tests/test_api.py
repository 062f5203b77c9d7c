"""
End-to-end tests through the HTTP API.
"""
import pytest

from storefront.middleware.request_context import REQUEST_DURATION_HEADER, REQUEST_ID_HEADER

ADDRESS = {
    "name": "Asha Rao",
    "phone": "+91 98450 00000",
    "address_line_1": "12 MG Road",
    "city": "Bengaluru",
    "state": "Karnataka",
    "pincode": "560001",
}


async def product_id(client, slug):
    response = await client.get(f"/api/products/slug/{slug}")
    assert response.status_code == 200
    return response.json()["id"]


class TestHealth:

    @pytest.mark.asyncio
    async def test_root_and_health(self, client):
        assert (await client.get("/")).json()["status"] == "operational"

        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["database"] == "connected"

    @pytest.mark.asyncio
    async def test_request_context_headers(self, client):
        response = await client.get("/", headers={REQUEST_ID_HEADER: "req-42"})
        assert response.headers[REQUEST_ID_HEADER] == "req-42"
        assert response.headers[REQUEST_DURATION_HEADER].endswith("ms")


class TestCatalogRoutes:

    @pytest.mark.asyncio
    async def test_categories(self, seeded_client):
        response = await seeded_client.get("/api/categories")
        assert [c["slug"] for c in response.json()] == ["shirts", "jeans", "t-shirts", "accessories"]

        response = await seeded_client.get("/api/categories/jeans")
        assert response.json()["name"] == "Jeans"

        response = await seeded_client.get("/api/categories/hats")
        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list_products_with_filters(self, seeded_client):
        response = await seeded_client.get("/api/products", params={"is_new": "true", "is_trending": "true"})
        assert [p["name"] for p in response.json()] == ["Graphic T-Shirt"]

        response = await seeded_client.get("/api/products", params={"search": "SHIRT"})
        assert {p["name"] for p in response.json()} == {"Classic White Shirt", "Graphic T-Shirt"}

        response = await seeded_client.get("/api/products", params={"offset": 2, "limit": 2})
        assert [p["name"] for p in response.json()] == ["Slim Fit Jeans", "Classic White Shirt"]

    @pytest.mark.asyncio
    async def test_negative_offset_is_bad_request(self, seeded_client):
        response = await seeded_client.get("/api/products", params={"offset": -1})
        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_REQUEST"
        assert response.json()["details"]["field"] == "offset"

    @pytest.mark.asyncio
    async def test_product_detail(self, seeded_client):
        pid = await product_id(seeded_client, "leather-watch")

        response = await seeded_client.get(f"/api/products/{pid}")
        body = response.json()

        assert response.status_code == 200
        assert body["category"]["slug"] == "accessories"
        assert body["price"] == 5999.0
        assert len(body["recommendations"]["also_like"]) == 3
        assert pid not in [p["id"] for p in body["recommendations"]["pair_with"]]

    @pytest.mark.asyncio
    async def test_product_admin_and_recommendations(self, seeded_client):
        response = await seeded_client.post("/api/products", json={"name": "Wool Scarf", "price": "799.00"})
        assert response.status_code == 201
        scarf = response.json()
        assert scarf["slug"] == "wool-scarf"

        response = await seeded_client.patch(f"/api/products/{scarf['id']}", json={"name": None})
        assert response.status_code == 400
        assert response.json()["details"]["field"] == "name"

        response = await seeded_client.get(f"/api/products/{scarf['id']}")
        assert response.json()["category"] is None

        response = await seeded_client.get(f"/api/recommendations/{scarf['id']}", params={"type": "pair_with"})
        assert len(response.json()) == 3

        response = await seeded_client.get(f"/api/recommendations/{scarf['id']}", params={"type": "bogus"})
        assert response.status_code == 400

        response = await seeded_client.post(f"/api/products/{scarf['id']}/archive")
        assert response.json()["is_active"] is False
        listed = await seeded_client.get("/api/products", params={"search": "scarf"})
        assert listed.json() == []


class TestCartRoutes:

    @pytest.mark.asyncio
    async def test_cart_flow(self, seeded_client):
        pid = await product_id(seeded_client, "graphic-t-shirt")

        response = await seeded_client.post(
            "/api/cart", json={"product_id": pid, "quantity": 2, "session_id": "guest-1", "size": "M"}
        )
        assert response.status_code == 201
        item_id = response.json()["id"]

        cart = (await seeded_client.get("/api/cart", params={"session_id": "guest-1"})).json()
        assert cart["item_count"] == 2
        assert cart["subtotal"] == 2598.0
        assert cart["items"][0]["product"]["slug"] == "graphic-t-shirt"

        other = (await seeded_client.get("/api/cart", params={"session_id": "guest-2"})).json()
        assert other["items"] == []

        response = await seeded_client.patch(f"/api/cart/{item_id}", json={"quantity": 0})
        assert response.status_code == 204
        cart = (await seeded_client.get("/api/cart", params={"session_id": "guest-1"})).json()
        assert cart["items"] == []

    @pytest.mark.asyncio
    async def test_cart_without_identity(self, seeded_client):
        response = await seeded_client.get("/api/cart")
        assert response.status_code == 400
        assert response.json()["details"]["field"] == "user_id"

    @pytest.mark.asyncio
    async def test_deleted_product_is_integrity_error(self, seeded_client):
        pid = await product_id(seeded_client, "leather-watch")
        await seeded_client.post("/api/cart", json={"product_id": pid, "session_id": "guest-1"})

        response = await seeded_client.delete(f"/api/products/{pid}")
        assert response.status_code == 204

        response = await seeded_client.get("/api/cart", params={"session_id": "guest-1"})
        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "DATA_INTEGRITY"
        assert body["details"]["missing_id"] == pid


class TestOrderRoutes:

    @pytest.mark.asyncio
    async def test_order_lifecycle(self, seeded_client):
        pid = await product_id(seeded_client, "slim-fit-jeans")
        payload = {
            "session_id": "guest-1",
            "items": [{"product_id": pid, "quantity": 1, "size": "32"}],
            "shipping_address": ADDRESS,
            "shipping": "99.00",
        }

        response = await seeded_client.post("/api/orders", json=payload)
        assert response.status_code == 201
        order = response.json()
        assert order["subtotal"] == 3999.0
        assert order["total"] == 4098.0
        assert order["items"][0]["price"] == 3999.0
        assert order["order_number"].startswith("SNT-")

        response = await seeded_client.patch(f"/api/orders/{order['id']}/status", json={"status": "delivered"})
        assert response.status_code == 400

        response = await seeded_client.patch(f"/api/orders/{order['id']}/status", json={"status": "confirmed"})
        assert response.json()["status"] == "confirmed"

        response = await seeded_client.patch(
            f"/api/orders/{order['id']}/payment-status", json={"payment_status": "paid"}
        )
        assert response.json()["payment_status"] == "paid"

        response = await seeded_client.get(f"/api/orders/{order['id']}")
        assert response.json()["items"][0]["product"]["slug"] == "slim-fit-jeans"

    @pytest.mark.asyncio
    async def test_tampered_total_rejected(self, seeded_client):
        pid = await product_id(seeded_client, "leather-watch")
        response = await seeded_client.post(
            "/api/orders",
            json={
                "session_id": "guest-1",
                "items": [{"product_id": pid, "quantity": 1}],
                "shipping_address": ADDRESS,
                "total": "1.00",
            },
        )
        assert response.status_code == 400
        assert response.json()["details"]["field"] == "total"

    @pytest.mark.asyncio
    async def test_user_orders_and_missing_order(self, seeded_client):
        user = (await seeded_client.post("/api/users", json={"email": "buyer@example.com"})).json()
        pid = await product_id(seeded_client, "leather-watch")
        await seeded_client.post(
            "/api/orders",
            json={"user_id": user["id"], "items": [{"product_id": pid}], "shipping_address": ADDRESS},
        )

        response = await seeded_client.get(f"/api/orders/user/{user['id']}")
        assert response.json()["total"] == 1

        assert (await seeded_client.get("/api/orders/9999")).status_code == 404


class TestContentRoutes:

    @pytest.mark.asyncio
    async def test_reviews_and_wishlist(self, seeded_client):
        user = (await seeded_client.post("/api/users", json={"first_name": "Asha"})).json()
        assert user["is_guest"] is True
        pid = await product_id(seeded_client, "classic-white-shirt")

        response = await seeded_client.post(
            "/api/reviews", json={"user_id": user["id"], "product_id": pid, "rating": 7}
        )
        assert response.status_code == 400

        response = await seeded_client.post(
            "/api/reviews", json={"user_id": user["id"], "product_id": pid, "rating": 5, "comment": "Crisp"}
        )
        review = response.json()
        response = await seeded_client.patch(f"/api/reviews/{review['id']}/helpful", json={"helpful": False})
        assert response.json()["helpful_count"] == 0
        assert [r["comment"] for r in (await seeded_client.get(f"/api/reviews/{pid}")).json()] == ["Crisp"]

        response = await seeded_client.post("/api/wishlist", json={"product_id": pid})
        assert response.status_code == 400
        await seeded_client.post("/api/wishlist", json={"user_id": user["id"], "product_id": pid})
        wishlist = (await seeded_client.get(f"/api/wishlist/{user['id']}")).json()
        assert [w["product"]["id"] for w in wishlist] == [pid]

        response = await seeded_client.delete(f"/api/wishlist/{user['id']}/{pid}")
        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_banners_collections_notifications(self, seeded_client):
        banners = (await seeded_client.get("/api/banners")).json()
        assert [b["title"] for b in banners] == ["NEW COLLECTION", "SUMMER SALE"]

        collection = (await seeded_client.get("/api/collections/slug/worth-the-wait")).json()
        assert collection["is_upcoming"] is True
        response = await seeded_client.get("/api/collections", params={"upcoming": "false"})
        assert response.json() == []

        assert (await seeded_client.post("/api/collections", json={"name": "Secret Drop"})).status_code == 201
        response = await seeded_client.post("/api/collections", json={"name": "Secret Drop"})
        assert response.status_code == 400
        assert "secret-drop" in response.json()["message"]

        user = (await seeded_client.post("/api/users", json={"email": "n@example.com"})).json()
        response = await seeded_client.post(
            "/api/notifications",
            json={"user_id": user["id"], "title": "Back in stock", "message": "M is back", "type": "restock"},
        )
        note = response.json()
        response = await seeded_client.patch(f"/api/notifications/{note['id']}/read")
        assert response.json()["is_read"] is True
        assert (await seeded_client.patch("/api/notifications/999/read")).status_code == 404

    @pytest.mark.asyncio
    async def test_addresses(self, seeded_client):
        user = (await seeded_client.post("/api/users", json={"email": "a@example.com"})).json()

        response = await seeded_client.post("/api/addresses", json=dict(ADDRESS, user_id=user["id"], is_default=True))
        assert response.status_code == 201
        address = response.json()
        assert address["country"] == "India"

        response = await seeded_client.patch(f"/api/addresses/{address['id']}", json={"city": "Mysuru"})
        assert response.json()["city"] == "Mysuru"

        assert (await seeded_client.delete(f"/api/addresses/{address['id']}")).status_code == 204
        assert (await seeded_client.get(f"/api/addresses/{user['id']}")).json() == []
