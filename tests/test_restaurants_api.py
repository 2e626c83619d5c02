"""
API tests for restaurants: creation, ownership-scoped reads and writes.
"""
from conftest import API, create_restaurant


class TestCreateRestaurant:

    def test_owner_is_current_user(self, client, alice):
        alice_id, headers = alice

        response = create_restaurant(client, headers, user_id=12345)

        assert response.status_code == 201
        data = response.json()
        assert data["user_id"] == alice_id
        assert data["name"] == "Chez Paulette"
        assert data["phone"] == "0478000000"

    def test_optional_fields_default_to_empty(self, client, alice):
        _, headers = alice

        response = client.post(f"{API}/restaurants", json={"name": "Le Zinc", "address": "1 place Bellecour"}, headers=headers)

        assert response.status_code == 201
        assert response.json()["description"] == ""
        assert response.json()["phone"] == ""

    def test_missing_address_is_validation_error(self, client, alice):
        _, headers = alice

        response = client.post(f"{API}/restaurants", json={"name": "Le Zinc"}, headers=headers)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    def test_requires_token(self, client):
        response = client.post(f"{API}/restaurants", json={"name": "Le Zinc", "address": "x"})
        assert response.status_code == 401


class TestReadRestaurants:

    def test_owner_lists_own_restaurants(self, client, alice, bob):
        alice_id, alice_headers = alice
        _, bob_headers = bob
        create_restaurant(client, alice_headers, name="Un")
        create_restaurant(client, alice_headers, name="Deux")
        create_restaurant(client, bob_headers, name="Trois")

        response = client.get(f"{API}/users/{alice_id}/restaurants", headers=alice_headers)

        assert response.status_code == 200
        assert [r["name"] for r in response.json()] == ["Un", "Deux"]

    def test_pagination(self, client, alice):
        alice_id, headers = alice
        for name in ("Un", "Deux", "Trois"):
            create_restaurant(client, headers, name=name)

        response = client.get(f"{API}/users/{alice_id}/restaurants", params={"page": 2, "size": 2}, headers=headers)

        assert [r["name"] for r in response.json()] == ["Trois"]

    def test_listing_other_users_restaurants_is_forbidden(self, client, alice, bob):
        _, alice_headers = alice
        bob_id, _ = bob

        response = client.get(f"{API}/users/{bob_id}/restaurants", headers=alice_headers)

        assert response.status_code == 403

    def test_listing_for_unknown_user_is_not_found(self, client, alice):
        _, headers = alice

        response = client.get(f"{API}/users/9999/restaurants", headers=headers)

        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    def test_non_owner_reading_restaurant_is_forbidden(self, client, alice, bob):
        alice_id, alice_headers = alice
        _, bob_headers = bob
        restaurant_id = create_restaurant(client, alice_headers).json()["id"]

        response = client.get(f"{API}/users/{alice_id}/restaurants/{restaurant_id}", headers=bob_headers)

        assert response.status_code == 403
        assert response.json()["error"] == "forbidden"

    def test_admin_reads_any_restaurant(self, client, alice, admin):
        alice_id, alice_headers = alice
        _, admin_headers = admin
        restaurant_id = create_restaurant(client, alice_headers).json()["id"]

        response = client.get(f"{API}/users/{alice_id}/restaurants/{restaurant_id}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["id"] == restaurant_id

    def test_restaurant_under_wrong_user_is_not_found(self, client, alice, bob):
        _, alice_headers = alice
        bob_id, bob_headers = bob
        restaurant_id = create_restaurant(client, alice_headers).json()["id"]

        response = client.get(f"{API}/users/{bob_id}/restaurants/{restaurant_id}", headers=bob_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Restaurant not found"


class TestUpdateRestaurant:

    def test_partial_update_only_changes_supplied_fields(self, client, alice):
        _, headers = alice
        before = create_restaurant(client, headers).json()

        response = client.put(
            f"{API}/restaurants/{before['id']}",
            json={"phone": "0600000000", "name": ""},
            headers=headers,
        )

        assert response.status_code == 200
        after = response.json()
        assert after["phone"] == "0600000000"
        assert after["name"] == before["name"]
        assert after["description"] == before["description"]
        assert after["address"] == before["address"]
        assert after["user_id"] == before["user_id"]

    def test_non_owner_update_is_forbidden(self, client, alice, bob):
        _, alice_headers = alice
        _, bob_headers = bob
        restaurant_id = create_restaurant(client, alice_headers).json()["id"]

        response = client.put(f"{API}/restaurants/{restaurant_id}", json={"name": "Pris"}, headers=bob_headers)

        assert response.status_code == 403
        assert response.json()["detail"] == "You don't have permission to update this restaurant"

    def test_admin_update(self, client, alice, admin):
        _, alice_headers = alice
        _, admin_headers = admin
        restaurant_id = create_restaurant(client, alice_headers).json()["id"]

        response = client.put(f"{API}/restaurants/{restaurant_id}", json={"name": "Renommé"}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["name"] == "Renommé"

    def test_update_unknown_restaurant_is_not_found(self, client, alice):
        _, headers = alice

        response = client.put(f"{API}/restaurants/9999", json={"name": "Rien"}, headers=headers)

        assert response.status_code == 404


class TestDeleteRestaurant:

    def test_delete_unknown_restaurant_is_not_found(self, client, alice):
        _, headers = alice

        response = client.delete(f"{API}/restaurants/9999", headers=headers)

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    def test_non_owner_delete_is_forbidden(self, client, alice, bob):
        _, alice_headers = alice
        _, bob_headers = bob
        restaurant_id = create_restaurant(client, alice_headers).json()["id"]

        response = client.delete(f"{API}/restaurants/{restaurant_id}", headers=bob_headers)

        assert response.status_code == 403

    def test_owner_delete_then_gone(self, client, alice):
        alice_id, headers = alice
        restaurant_id = create_restaurant(client, headers).json()["id"]

        response = client.delete(f"{API}/restaurants/{restaurant_id}", headers=headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Restaurant deleted successfully"
        assert client.get(f"{API}/users/{alice_id}/restaurants/{restaurant_id}", headers=headers).status_code == 404
        assert client.delete(f"{API}/restaurants/{restaurant_id}", headers=headers).status_code == 404
        assert client.get(f"{API}/users/{alice_id}/restaurants", headers=headers).json() == []
