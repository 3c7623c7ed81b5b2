"""HTTP client for the Schema Studio API."""

from typing import Any, Dict, List, Optional

import httpx

from core.config import SCHEMA_STUDIO_URL
from schemas.attribute import AttributeCreate, AttributeOut
from schemas.database import DatabaseCreate, DatabaseOut
from schemas.erd import Diagram
from schemas.insights import ChartSeries, ChatGreeting, ChatReply
from schemas.table import TableCreate, TableOut
from schemas.table_data import TableDataOut, TableDataPage


class SchemaStudioAPIError(Exception):
    """Raised for transport failures and for any `success: false` envelope."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SchemaStudioClient:
    """Typed wrappers over the REST endpoints.

    Each method is one request/response round trip and returns Pydantic models
    built from the `data` member of the response envelope.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: float = 10.0,
                 http: Optional[httpx.Client] = None):
        """
        Args:
            base_url: API root. Defaults to SCHEMA_STUDIO_URL.
            timeout: Per-request timeout in seconds.
            http: Pre-built client to send requests with (e.g. a test client);
                base_url and timeout are ignored when given.
        """
        self._owns_http = http is None
        self.http = http or httpx.Client(base_url=base_url or SCHEMA_STUDIO_URL, timeout=timeout)

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        try:
            response = self.http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise SchemaStudioAPIError(f"Request failed: {e}")

        try:
            body = response.json()
        except ValueError:
            raise SchemaStudioAPIError(
                f"Unexpected response ({response.status_code}): {response.text[:200]}",
                status_code=response.status_code,
            )

        if response.is_error or not body.get("success", False):
            raise SchemaStudioAPIError(
                body.get("message") or f"Request failed with status {response.status_code}",
                status_code=response.status_code,
            )
        return body

    @staticmethod
    def _page_params(limit: Optional[int], offset: int) -> Dict[str, int]:
        params = {"offset": offset}
        if limit is not None:
            params["limit"] = limit
        return params

    # Databases

    def list_databases(self, limit: Optional[int] = None, offset: int = 0) -> List[DatabaseOut]:
        body = self._request("GET", "/api/databases", params=self._page_params(limit, offset))
        return [DatabaseOut.model_validate(d) for d in body["data"]]

    def get_database(self, database_id: int) -> DatabaseOut:
        body = self._request("GET", f"/api/databases/{database_id}")
        return DatabaseOut.model_validate(body["data"])

    def create_database(self, name: str, database_type: str,
                        description: Optional[str] = None) -> DatabaseOut:
        payload = DatabaseCreate(name=name, database_type=database_type, description=description)
        body = self._request("POST", "/api/databases", json=payload.model_dump(mode="json", exclude_none=True))
        return DatabaseOut.model_validate(body["data"])

    def update_database(self, database_id: int, **fields) -> DatabaseOut:
        body = self._request("PUT", f"/api/databases/{database_id}", json=fields)
        return DatabaseOut.model_validate(body["data"])

    def delete_database(self, database_id: int) -> None:
        self._request("DELETE", f"/api/databases/{database_id}")

    def export_sql(self, database_id: int) -> str:
        body = self._request("GET", f"/api/databases/{database_id}/sql")
        return body["data"]["sql"]

    # Tables

    def list_tables(self, database_id: int) -> List[TableOut]:
        body = self._request("GET", f"/api/tables/database/{database_id}")
        return [TableOut.model_validate(t) for t in body["data"]]

    def get_table(self, table_id: int) -> TableOut:
        body = self._request("GET", f"/api/tables/{table_id}")
        return TableOut.model_validate(body["data"])

    def create_table(self, database_id: int, name: str, description: Optional[str] = None,
                     attributes: Optional[List[Dict[str, Any]]] = None) -> TableOut:
        payload = TableCreate(name=name, description=description,
                              attributes=[AttributeCreate(**a) for a in attributes or []])
        body = self._request("POST", f"/api/tables/database/{database_id}",
                             json=payload.model_dump(mode="json", exclude_none=True))
        return TableOut.model_validate(body["data"])

    def update_table(self, table_id: int, **fields) -> TableOut:
        body = self._request("PUT", f"/api/tables/{table_id}", json=fields)
        return TableOut.model_validate(body["data"])

    def delete_table(self, table_id: int) -> None:
        self._request("DELETE", f"/api/tables/{table_id}")

    # Attributes

    def list_attributes(self, table_id: int) -> List[AttributeOut]:
        body = self._request("GET", f"/api/attributes/table/{table_id}")
        return [AttributeOut.model_validate(a) for a in body["data"]]

    def create_attribute(self, table_id: int, name: str, data_type: str, **flags) -> AttributeOut:
        payload = AttributeCreate(name=name, data_type=data_type, **flags)
        body = self._request("POST", f"/api/attributes/table/{table_id}", json=payload.model_dump())
        return AttributeOut.model_validate(body["data"])

    def update_attribute(self, attribute_id: int, **fields) -> AttributeOut:
        body = self._request("PUT", f"/api/attributes/{attribute_id}", json=fields)
        return AttributeOut.model_validate(body["data"])

    def delete_attribute(self, attribute_id: int) -> None:
        self._request("DELETE", f"/api/attributes/{attribute_id}")

    # Table data

    def get_table_data(self, table_id: int, limit: int = 100, offset: int = 0) -> TableDataPage:
        body = self._request("GET", f"/api/tables/{table_id}/data", params=self._page_params(limit, offset))
        metadata = body.get("metadata") or {}
        return TableDataPage(
            rows=[TableDataOut.model_validate(r) for r in body["data"]],
            total=metadata.get("total", len(body["data"])),
            limit=metadata.get("limit"),
            offset=metadata.get("offset", offset),
        )

    def insert_table_data(self, table_id: int, rows: List[Dict[str, Any]]) -> List[TableDataOut]:
        body = self._request("POST", f"/api/tables/{table_id}/data", json={"data": rows})
        return [TableDataOut.model_validate(r) for r in body.get("data", [])]

    def update_table_row(self, table_id: int, row_id: int, row_data: Dict[str, Any]) -> TableDataOut:
        body = self._request("PUT", f"/api/tables/{table_id}/data/{row_id}", json={"row_data": row_data})
        return TableDataOut.model_validate(body["data"])

    def delete_table_row(self, table_id: int, row_id: int) -> None:
        self._request("DELETE", f"/api/tables/{table_id}/data/{row_id}")

    def delete_all_table_data(self, table_id: int) -> int:
        body = self._request("DELETE", f"/api/tables/{table_id}/data")
        return body["data"]["affected"]

    # Diagram and insights

    def get_diagram(self, database_id: int) -> Diagram:
        body = self._request("GET", f"/api/erd/database/{database_id}")
        return Diagram.model_validate(body["data"])

    def chart_series(self) -> List[ChartSeries]:
        body = self._request("GET", "/api/insights/charts")
        return [ChartSeries.model_validate(s) for s in body["data"]]

    def chat_greeting(self) -> ChatGreeting:
        body = self._request("GET", "/api/insights/chat")
        return ChatGreeting.model_validate(body["data"])

    def ask(self, message: str) -> str:
        body = self._request("POST", "/api/insights/chat", json={"message": message})
        return ChatReply.model_validate(body["data"]).reply
