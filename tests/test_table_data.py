import pytest


class TestStoreTableData:
    def test_bulk_insert(self, client, orders_table):
        response = client.post(
            f"/api/tables/{orders_table['id']}/data",
            json={"data": [{"id": 1, "total": 9.5}, {"id": 2, "total": None, "paid": True}]},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "2 records stored successfully"
        assert [r["row_data"] for r in body["data"]] == [
            {"id": 1, "total": 9.5},
            {"id": 2, "total": None, "paid": True},
        ]

    def test_keys_are_not_checked_against_attributes(self, client, orders_table):
        response = client.post(
            f"/api/tables/{orders_table['id']}/data",
            json={"data": [{"not_a_column": "anything"}]},
        )

        assert response.status_code == 201

    @pytest.mark.parametrize("payload", [
        {"data": {"id": 1}},
        {"data": "rows"},
        {"data": [1, 2]},
        {},
    ])
    def test_data_must_be_an_array_of_records(self, client, orders_table, payload):
        response = client.post(f"/api/tables/{orders_table['id']}/data", json=payload)

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_non_array_message(self, client, orders_table):
        response = client.post(f"/api/tables/{orders_table['id']}/data", json={"data": {"id": 1}})

        assert "Data must be an array of records" in response.json()["message"]

    def test_nested_values_reject_the_whole_batch(self, client, orders_table):
        response = client.post(
            f"/api/tables/{orders_table['id']}/data",
            json={"data": [{"id": 1}, {"id": 2, "meta": {"nested": True}}]},
        )

        assert response.status_code == 400
        assert client.get(f"/api/tables/{orders_table['id']}/data").json()["metadata"]["total"] == 0

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_numbers_are_rejected(self, client, orders_table, token):
        response = client.post(
            f"/api/tables/{orders_table['id']}/data",
            content='{"data": [{"x": ' + token + '}]}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert client.get(f"/api/tables/{orders_table['id']}/data").json()["metadata"]["total"] == 0

    def test_insert_into_missing_table(self, client):
        response = client.post("/api/tables/999/data", json={"data": [{"id": 1}]})

        assert response.status_code == 404
        assert response.json()["message"] == "Table not found"


class TestReadTableData:
    def test_paginated_newest_first(self, client, orders_table):
        table_id = orders_table["id"]
        client.post(f"/api/tables/{table_id}/data", json={"data": [{"id": i} for i in range(5)]})

        body = client.get(f"/api/tables/{table_id}/data", params={"limit": 2, "offset": 1}).json()

        assert [r["row_data"]["id"] for r in body["data"]] == [3, 2]
        assert body["metadata"] == {"total": 5, "limit": 2, "offset": 1}

    def test_default_limit_is_100(self, client, orders_table):
        body = client.get(f"/api/tables/{orders_table['id']}/data").json()

        assert body["data"] == []
        assert body["metadata"] == {"total": 0, "limit": 100, "offset": 0}

    def test_limit_is_capped_at_1000(self, client, orders_table):
        table_id = orders_table["id"]
        client.post(f"/api/tables/{table_id}/data", json={"data": [{"n": i} for i in range(1001)]})

        body = client.get(f"/api/tables/{table_id}/data", params={"limit": 5000}).json()

        assert len(body["data"]) == 1000
        assert body["metadata"]["limit"] == 1000
        assert body["metadata"]["total"] == 1001

    def test_negative_offset_is_rejected(self, client, orders_table):
        response = client.get(f"/api/tables/{orders_table['id']}/data", params={"offset": -5})

        assert response.status_code == 400

    def test_rows_are_scoped_to_their_table(self, client, sales_db, orders_table):
        other = client.post(f"/api/tables/database/{sales_db['id']}", json={"name": "customers"}).json()["data"]
        client.post(f"/api/tables/{other['id']}/data", json={"data": [{"id": 1}]})

        body = client.get(f"/api/tables/{orders_table['id']}/data").json()

        assert body["metadata"]["total"] == 0

    def test_get_single_row(self, client, orders_table):
        table_id = orders_table["id"]
        row = client.post(f"/api/tables/{table_id}/data", json={"data": [{"id": 7}]}).json()["data"][0]

        body = client.get(f"/api/tables/{table_id}/data/{row['id']}").json()

        assert body["data"]["row_data"] == {"id": 7}


class TestModifyTableData:
    def test_replace_row_data(self, client, orders_table):
        table_id = orders_table["id"]
        row = client.post(f"/api/tables/{table_id}/data", json={"data": [{"id": 1}]}).json()["data"][0]

        response = client.put(f"/api/tables/{table_id}/data/{row['id']}", json={"row_data": {"id": 1, "total": 3}})

        assert response.status_code == 200
        assert response.json()["data"]["row_data"] == {"id": 1, "total": 3}

    def test_delete_single_row(self, client, orders_table):
        table_id = orders_table["id"]
        rows = client.post(f"/api/tables/{table_id}/data", json={"data": [{"id": 1}, {"id": 2}]}).json()["data"]

        response = client.delete(f"/api/tables/{table_id}/data/{rows[0]['id']}")

        assert response.json() == {"success": True, "message": "Data row deleted successfully"}
        remaining = client.get(f"/api/tables/{table_id}/data").json()["data"]
        assert [r["id"] for r in remaining] == [rows[1]["id"]]

    def test_delete_row_through_another_table_is_not_found(self, client, sales_db, orders_table):
        other = client.post(f"/api/tables/database/{sales_db['id']}", json={"name": "customers"}).json()["data"]
        row = client.post(f"/api/tables/{orders_table['id']}/data", json={"data": [{"id": 1}]}).json()["data"][0]

        response = client.delete(f"/api/tables/{other['id']}/data/{row['id']}")

        assert response.status_code == 404
        assert response.json()["message"] == "Data row not found"

    def test_delete_all_rows(self, client, orders_table):
        table_id = orders_table["id"]
        client.post(f"/api/tables/{table_id}/data", json={"data": [{"id": 1}, {"id": 2}, {"id": 3}]})

        response = client.delete(f"/api/tables/{table_id}/data")

        body = response.json()
        assert body["message"] == "3 records deleted successfully"
        assert body["data"] == {"affected": 3}
        assert client.get(f"/api/tables/{table_id}/data").json()["metadata"]["total"] == 0

    def test_delete_all_rows_of_missing_table(self, client):
        assert client.delete("/api/tables/999/data").status_code == 404


def test_end_to_end_scenario(client):
    response = client.post("/api/databases", json={"name": "Sales", "database_type": "postgresql"})
    assert response.status_code == 201
    database_id = response.json()["data"]["id"]

    response = client.post(
        f"/api/tables/database/{database_id}",
        json={"name": "orders", "attributes": [{"name": "id", "data_type": "INTEGER", "is_primary_key": True}]},
    )
    assert response.status_code == 201
    table_id = response.json()["data"]["id"]

    response = client.post(f"/api/tables/{table_id}/data", json={"data": [{"id": 1}]})
    assert response.status_code == 201
    assert response.json()["message"] == "1 records stored successfully"

    body = client.get(f"/api/tables/{table_id}/data", params={"limit": 10, "offset": 0}).json()
    assert [r["row_data"] for r in body["data"]] == [{"id": 1}]
    assert body["metadata"]["total"] == 1

    assert client.delete(f"/api/databases/{database_id}").status_code == 200
    assert client.get(f"/api/tables/{table_id}").status_code == 404
