"""
REST client for a hosted companies table (PostgREST dialect).
"""
import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from config.settings import Settings, get_settings
from models.company_record import CompanyFields, CompanyRecord
from ports.repos import StoreError

logger = logging.getLogger(__name__)


class RestCompaniesStore:
    """Talks to `{store_url}/rest/v1/{table}` with the store's API key."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.base_url = self.settings.store_url
        self.api_key = self.settings.store_api_key
        self.table = self.settings.store_table

        if not self.base_url:
            raise RuntimeError("STORE_URL must be set to use the REST store")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/rest/v1/{self.table}"

    def _headers(self, returning: bool = False) -> Dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        if returning:
            headers["Prefer"] = "return=representation"
        return headers

    def _request(
        self,
        operation: str,
        method: str,
        params: Dict[str, str],
        payload: Any = None,
        returning: bool = False,
        record_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Send one request and return the decoded row list."""
        logger.debug(f"{method} {self.endpoint} params={params}")
        try:
            response = requests.request(
                method,
                self.endpoint,
                params=params,
                json=payload,
                headers=self._headers(returning),
                timeout=self.settings.request_timeout_seconds,
            )
        except requests.exceptions.RequestException as e:
            raise StoreError(operation, f"request error: {e}", record_id) from e

        if not 200 <= response.status_code < 300:
            raise StoreError(operation, f"status {response.status_code}: {response.text}", record_id)
        if response.status_code == 204 or not response.content:
            return []
        try:
            rows = response.json()
        except ValueError as e:
            raise StoreError(operation, f"undecodable response: {e}", record_id) from e
        if isinstance(rows, dict):
            rows = [rows]
        if not isinstance(rows, list):
            raise StoreError(operation, f"unexpected response shape: {type(rows).__name__}", record_id)
        return rows

    def _to_record(self, operation: str, row: Dict[str, Any]) -> CompanyRecord:
        try:
            return CompanyRecord(**row)
        except ValidationError as e:
            raise StoreError(operation, f"malformed row: {e}") from e

    def list_all(self) -> List[CompanyRecord]:
        rows = self._request("list", "GET", {"select": "*", "order": "created_at.desc"})
        return [self._to_record("list", row) for row in rows]

    def insert(self, fields: CompanyFields) -> CompanyRecord:
        rows = self._request(
            "insert", "POST", {"select": "*"}, payload=[fields.model_dump()], returning=True
        )
        if not rows:
            raise StoreError("insert", "store returned no row")
        return self._to_record("insert", rows[0])

    def update_by_id(self, record_id: str, fields: CompanyFields) -> None:
        rows = self._request(
            "update",
            "PATCH",
            {"id": f"eq.{record_id}"},
            payload=fields.model_dump(),
            returning=True,
            record_id=record_id,
        )
        if not rows:
            raise StoreError("update", "no such company", record_id)

    def delete_by_id(self, record_id: str) -> None:
        rows = self._request(
            "delete", "DELETE", {"id": f"eq.{record_id}"}, returning=True, record_id=record_id
        )
        if not rows:
            raise StoreError("delete", "no such company", record_id)
