def test_list_attributes_in_insertion_order(client, orders_table):
    client.post(f"/api/attributes/table/{orders_table['id']}", json={"name": "placed_at", "data_type": "TIMESTAMP"})

    body = client.get(f"/api/attributes/table/{orders_table['id']}").json()

    assert [a["name"] for a in body["data"]] == ["id", "total", "placed_at"]
    ids = [a["id"] for a in body["data"]]
    assert ids == sorted(ids)


def test_create_attribute_defaults(client, orders_table):
    response = client.post(
        f"/api/attributes/table/{orders_table['id']}",
        json={"name": "note", "data_type": "TEXT"},
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["table_id"] == orders_table["id"]
    assert data["is_nullable"] is True
    assert data["is_primary_key"] is False
    assert data["is_foreign_key"] is False


def test_create_attribute_under_missing_table_persists_nothing(client, db_session):
    from models.attribute import Attribute

    response = client.post("/api/attributes/table/404", json={"name": "x", "data_type": "TEXT"})

    assert response.status_code == 404
    assert response.json()["message"] == "Table not found"
    assert db_session.query(Attribute).count() == 0


def test_create_attribute_requires_data_type(client, orders_table):
    response = client.post(f"/api/attributes/table/{orders_table['id']}", json={"name": "x"})

    assert response.status_code == 400
    assert "data_type" in response.json()["message"]


def test_update_attribute_merges_provided_fields(client, orders_table):
    total = orders_table["attributes"][1]

    response = client.put(f"/api/attributes/{total['id']}", json={"is_nullable": False})

    data = response.json()["data"]
    assert data["is_nullable"] is False
    assert data["name"] == "total"
    assert data["data_type"] == "DECIMAL(10,2)"


def test_delete_attribute(client, orders_table):
    total = orders_table["attributes"][1]

    response = client.delete(f"/api/attributes/{total['id']}")

    assert response.json() == {"success": True, "message": "Attribute deleted successfully"}
    names = [a["name"] for a in client.get(f"/api/tables/{orders_table['id']}").json()["data"]["attributes"]]
    assert names == ["id"]


def test_delete_missing_attribute(client):
    response = client.delete("/api/attributes/31337")

    assert response.status_code == 404
    assert response.json()["message"] == "Attribute not found"
