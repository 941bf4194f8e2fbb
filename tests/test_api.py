"""HTTP tests through FastAPI's TestClient against an in-memory database."""

from tests.support import PASSWORD, ApiTestCase, add_category, add_product


class TestAuthEndpoints(ApiTestCase):
    def test_register_returns_201_with_token(self) -> None:
        response = self.register()
        self.assertEqual(response.status_code, 201)
        self.assertEqual(set(response.json()), {"jwt-token"})

    def test_register_twice_returns_409(self) -> None:
        self.register()
        response = self.register()
        self.assertEqual(response.status_code, 409)
        body = response.json()
        self.assertEqual(body["error"], "DuplicateIdentityError")
        self.assertEqual(body["details"]["email"], "alice@shop.io")

    def test_register_validates_body(self) -> None:
        response = self.client.post(
            "/api/register",
            json={"first_name": "Alice", "last_name": "L", "email": "not-an-email", "password": "short"},
        )
        self.assertEqual(response.status_code, 422)

    def test_register_rejects_digits_in_name(self) -> None:
        response = self.client.post(
            "/api/register",
            json={
                "first_name": "R2D2",
                "last_name": "Droid",
                "email": "r2@shop.io",
                "password": PASSWORD,
            },
        )
        self.assertEqual(response.status_code, 422)

    def test_login_returns_same_shape_as_register(self) -> None:
        self.register()
        response = self.client.post("/api/login", json={"email": "alice@shop.io", "password": PASSWORD})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(set(response.json()), {"jwt-token"})

    def test_login_with_wrong_password_returns_401(self) -> None:
        self.register()
        response = self.client.post("/api/login", json={"email": "alice@shop.io", "password": "nope-nope"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["error"], "InvalidCredentialsError")


class TestProtectedEndpoints(ApiTestCase):
    def test_me_requires_token(self) -> None:
        response = self.client.get("/api/users/me")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.headers.get("www-authenticate"), "Bearer")

    def test_me_rejects_bad_token(self) -> None:
        response = self.client.get("/api/users/me", headers={"Authorization": "Bearer junk"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["error"], "InvalidSignatureError")

    def test_me_returns_profile_without_hash(self) -> None:
        response = self.client.get("/api/users/me", headers=self.user_headers())
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["email"], "alice@shop.io")
        self.assertNotIn("password_hash", body)

    def test_admin_routes_forbid_regular_users(self) -> None:
        response = self.client.post(
            "/api/admin/categories",
            json={"category_name": "Electronics"},
            headers=self.user_headers(),
        )
        self.assertEqual(response.status_code, 403)


class TestCatalogEndpoints(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.admin = self.admin_headers()

    def test_admin_creates_category_and_product(self) -> None:
        response = self.client.post(
            "/api/admin/categories", json={"category_name": "Electronics"}, headers=self.admin
        )
        self.assertEqual(response.status_code, 201, response.text)
        category_id = response.json()["category_id"]

        response = self.client.post(
            f"/api/admin/categories/{category_id}/products",
            json={"product_name": "Headphones", "price": 50.0, "discount": 20.0, "quantity": 4},
            headers=self.admin,
        )
        self.assertEqual(response.status_code, 201, response.text)
        self.assertEqual(response.json()["special_price"], 40.0)

    def test_public_listing_uses_query_parameters(self) -> None:
        for i in range(25):
            add_category(self.db, f"Category {i:02d}")
        response = self.client.get(
            "/api/public/categories",
            params={"pageNumber": 2, "pageSize": 10, "sortBy": "category_name", "sortOrder": "ASC"},
        )
        self.assertEqual(response.status_code, 200, response.text)
        body = response.json()
        self.assertEqual(len(body["content"]), 5)
        self.assertEqual(body["total_pages"], 3)
        self.assertEqual(body["total_elements"], 25)
        self.assertTrue(body["last_page"])
        self.assertEqual(body["content"][0]["category_name"], "Category 20")

    def test_page_beyond_range_is_empty(self) -> None:
        add_category(self.db, "Lonely category")
        response = self.client.get("/api/public/categories", params={"pageNumber": 5})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["content"], [])
        self.assertEqual(response.json()["total_elements"], 1)

    def test_unknown_sort_field_returns_400(self) -> None:
        response = self.client.get("/api/public/products", params={"sortBy": "secret"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "InvalidSortFieldError")

    def test_unknown_sort_order_returns_400(self) -> None:
        response = self.client.get("/api/public/products", params={"sortOrder": "sideways"})
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertEqual(body["error"], "InvalidSortOrderError")
        self.assertEqual(body["details"]["allowed"], ["asc", "desc"])

    def test_bad_page_size(self) -> None:
        self.assertEqual(
            self.client.get("/api/public/products", params={"pageSize": 0}).status_code, 422
        )
        self.assertEqual(
            self.client.get("/api/public/products", params={"pageSize": 10_000}).status_code, 422
        )

    def test_keyword_search(self) -> None:
        category = add_category(self.db, "Electronics")
        add_product(self.db, category, "Wireless Mouse")
        add_product(self.db, category, "Keyboard")
        response = self.client.get("/api/public/products/keyword/mouse")
        self.assertEqual(response.status_code, 200)
        self.assertEqual([p["product_name"] for p in response.json()["content"]], ["Wireless Mouse"])

    def test_blank_keyword_matches_nothing(self) -> None:
        category = add_category(self.db, "Electronics")
        add_product(self.db, category, "Wireless Mouse")
        add_product(self.db, category, "Keyboard")
        response = self.client.get("/api/public/products/keyword/%20%20")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["content"], [])
        self.assertEqual(response.json()["total_elements"], 0)

    def test_missing_category_returns_404(self) -> None:
        response = self.client.get("/api/public/categories/77/products")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["details"]["resource"], "Category")


class TestOrderEndpoints(ApiTestCase):
    def test_customer_places_and_reads_orders(self) -> None:
        category = add_category(self.db, "Stationery")
        pen = add_product(self.db, category, "Pen", price=3.0, quantity=10)
        headers = self.user_headers()

        response = self.client.post(
            "/api/users/me/orders",
            json={"items": [{"product_id": pen.id, "quantity": 4}], "payment_method": "card"},
            headers=headers,
        )
        self.assertEqual(response.status_code, 201, response.text)
        order = response.json()
        self.assertEqual(order["total_amount"], 12.0)
        self.assertEqual(order["email"], "alice@shop.io")

        response = self.client.get(f"/api/users/me/orders/{order['order_id']}", headers=headers)
        self.assertEqual(response.status_code, 200)
        response = self.client.get("/api/users/me/orders", headers=headers)
        self.assertEqual(len(response.json()), 1)

    def test_admin_updates_status_and_lists(self) -> None:
        category = add_category(self.db, "Stationery")
        pen = add_product(self.db, category, "Pen", price=3.0, quantity=10)
        user = self.user_headers()
        order = self.client.post(
            "/api/users/me/orders",
            json={"items": [{"product_id": pen.id, "quantity": 1}], "payment_method": "card"},
            headers=user,
        ).json()
        admin = self.admin_headers()

        response = self.client.put(
            f"/api/admin/users/alice@shop.io/orders/{order['order_id']}",
            json={"order_status": "Delivered"},
            headers=admin,
        )
        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(response.json()["order_status"], "Delivered")

        response = self.client.get("/api/admin/orders", headers=admin)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["total_elements"], 1)


class TestAddressEndpoints(ApiTestCase):
    ADDRESS = {
        "street": "221B Baker Street",
        "building_name": "Holmes House",
        "city": "London",
        "state": "Greater London",
        "country": "United Kingdom",
        "pincode": "NW1 6XE",
    }

    def test_address_lifecycle(self) -> None:
        admin = self.admin_headers()
        response = self.client.post("/api/admin/addresses", json=self.ADDRESS, headers=admin)
        self.assertEqual(response.status_code, 201, response.text)
        address_id = response.json()["address_id"]

        duplicate = self.client.post("/api/admin/addresses", json=self.ADDRESS, headers=admin)
        self.assertEqual(duplicate.status_code, 409)

        updated = dict(self.ADDRESS, city="Westminster")
        response = self.client.put(f"/api/admin/addresses/{address_id}", json=updated, headers=admin)
        self.assertEqual(response.json()["city"], "Westminster")

        response = self.client.delete(f"/api/admin/addresses/{address_id}", headers=admin)
        self.assertEqual(response.status_code, 200)
        response = self.client.get(f"/api/admin/addresses/{address_id}", headers=admin)
        self.assertEqual(response.status_code, 404)


class TestHealth(ApiTestCase):
    def test_health_reports_database(self) -> None:
        response = self.client.get("/api/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["database"], "connected")
