# -*- coding: utf-8 -*-
"""
Hosted store client.

Talks to the hosted backend over HTTP:
- tables through the PostgREST interface (``/rest/v1/<table>``)
- blobs through the storage interface (``/storage/v1/object/<bucket>/<path>``)

Usage:
    config = StoreConfig(base_url="https://project.example.co", anon_key="...")
    store = HttpDataStore(config)
    rows = store.select("legal_documents", filters={"user_id": user_id})
"""

import json
import mimetypes
import os
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

import requests

from services.data_store import DataStore, DataStoreType
from services.exceptions import StoreError, NetworkError
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class StoreConfig:
    """
    Connection settings for the hosted store.

    Values left as None are read from Config (which reads .env).
    """
    base_url: str = None
    anon_key: str = None
    access_token: Optional[str] = None
    timeout: int = None
    rest_path: str = "/rest/v1"
    storage_path: str = "/storage/v1"
    application_name: str = "idecide"

    def __post_init__(self):
        """Load from Config if not provided."""
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.STORE_URL
        if self.anon_key is None:
            self.anon_key = Config.STORE_ANON_KEY
        if self.access_token is None:
            self.access_token = Config.STORE_ACCESS_TOKEN
        if self.timeout is None:
            self.timeout = Config.STORE_TIMEOUT


def _format_value(value: Any) -> str:
    """Render a filter value the way PostgREST expects it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _row_params(record_id: str, user_id: Optional[str] = None) -> Dict[str, str]:
    """Params addressing one row, scoped to its owner when given."""
    params = {"id": f"eq.{record_id}"}
    if user_id is not None:
        params["user_id"] = f"eq.{user_id}"
    return params


class HttpDataStore(DataStore):
    """
    DataStore backed by the hosted PostgREST + storage service.

    Features:
    - anon key + user access token headers
    - ``Prefer: return=representation`` so writes return the stored row
    - errors raised as StoreError / NetworkError
    """

    def __init__(self, config: Optional[StoreConfig] = None,
                 session: Optional[requests.Session] = None):
        self.config = config or StoreConfig()
        self.base_url = self.config.base_url.rstrip('/')
        self.session = session or requests.Session()

    @property
    def store_type(self) -> DataStoreType:
        return DataStoreType.HTTP

    def set_access_token(self, token: Optional[str]):
        """Set the signed-in user's access token (from the auth service)."""
        self.config.access_token = token
        logger.debug("Access token updated externally")

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Headers with apikey and Authorization."""
        token = self.config.access_token or self.config.anon_key
        headers = {
            "apikey": self.config.anon_key,
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
            "x-application-name": self.config.application_name,
        }
        if extra:
            headers.update(extra)
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Any] = None,
        params: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[bytes] = None,
    ) -> Any:
        """
        Execute an HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            endpoint: Path below the base url
            json_data: JSON payload
            params: Query parameters
            headers: Extra headers
            data: Raw body (blob uploads)

        Returns:
            Decoded JSON body, or None for an empty body
        """
        url = f"{self.base_url}{endpoint}"

        logger.info(f"[STORE REQ] {method} {endpoint}")
        if params:
            logger.debug(f"[STORE REQ] Params: {params}")
        if json_data is not None:
            logger.debug(f"[STORE REQ] Body: {json.dumps(json_data, ensure_ascii=False, default=str)[:1000]}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                data=data,
                headers=self._headers(headers),
                timeout=self.config.timeout,
            )
            response.raise_for_status()

            result = None
            if response.text:
                result = response.json()

            logger.info(f"[STORE RES] {response.status_code} {endpoint}")
            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except (ValueError, AttributeError):
                pass
            if not isinstance(response_data, dict):
                response_data = {}
            logger.error(f"[STORE ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise StoreError(
                message=response_data.get("message") or str(e),
                status_code=status_code,
                response_data=response_data
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkError(
                message=str(e),
                original_error=e
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkError(
                message=str(e),
                original_error=e
            )

    def _table_endpoint(self, table: str) -> str:
        return f"{self.config.rest_path}/{table}"

    # ==================== Tables ====================

    def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        in_filters: Optional[Dict[str, Iterable[Any]]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
        columns: str = "*",
    ) -> List[Dict[str, Any]]:
        params = {"select": columns}
        for column, value in (filters or {}).items():
            params[column] = f"eq.{_format_value(value)}"
        for column, values in (in_filters or {}).items():
            joined = ",".join(_format_value(v) for v in values)
            params[column] = f"in.({joined})"
        if order_by:
            params["order"] = f"{order_by}.{'desc' if descending else 'asc'}"
        if limit is not None:
            params["limit"] = str(limit)

        result = self._request("GET", self._table_endpoint(table), params=params)
        return result or []

    def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        result = self._request(
            "POST",
            self._table_endpoint(table),
            json_data=[row],
            headers={"Prefer": "return=representation"},
        )
        if not result:
            raise StoreError(f"Insert into {table} returned no row")
        return result[0]

    def update(self, table: str, record_id: str, patch: Dict[str, Any],
               user_id: Optional[str] = None) -> Dict[str, Any]:
        result = self._request(
            "PATCH",
            self._table_endpoint(table),
            json_data=patch,
            params=_row_params(record_id, user_id),
            headers={"Prefer": "return=representation"},
        )
        if not result:
            raise StoreError(f"Record {record_id} not found in {table}", status_code=404)
        return result[0]

    def delete(self, table: str, record_id: str, user_id: Optional[str] = None) -> None:
        self._request(
            "DELETE",
            self._table_endpoint(table),
            params=_row_params(record_id, user_id),
        )

    # ==================== Storage ====================

    def upload(self, bucket: str, path: str, file_path: str) -> str:
        if not file_path or not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")

        mime_type = mimetypes.guess_type(file_path)[0] or "application/octet-stream"
        endpoint = f"{self.config.storage_path}/object/{bucket}/{path}"
        logger.info(f"[STORE REQ] POST {endpoint} File: {os.path.basename(file_path)} ({mime_type})")

        with open(file_path, "rb") as f:
            payload = f.read()

        self._request(
            "POST",
            endpoint,
            data=payload,
            headers={"Content-Type": mime_type},
        )
        logger.info(f"Blob uploaded: {bucket}/{path}")
        return path

    def health_check(self) -> Dict[str, Any]:
        try:
            self._request("GET", f"{self.config.rest_path}/")
            return {"status": "ok", "type": self.store_type.value, "url": self.base_url}
        except (StoreError, NetworkError) as e:
            return {"status": "error", "type": self.store_type.value, "error": str(e)}
