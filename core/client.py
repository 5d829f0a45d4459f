# =============================================================================
# core/client.py  —  Retool Management API Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   A thin, synchronous wrapper over Retool's REST API (/api/v2).  One method
#   per endpoint, one HTTP request per method.  No retries, no caching.
#
# REQUEST SHAPE:
#   <base_url>/api/v2/<endpoint>
#   Authorization: Bearer <api_key>
#   Content-Type: application/json
#
#   Optional body fields that are None are dropped before sending, so
#   create_app("Ops") posts {"name": "Ops"} and not {"name": "Ops",
#   "folder_id": null}.
#
# RESPONSE SHAPE:
#   2xx with JSON     → decoded JSON (dict / list)
#   2xx with no body  → None        (e.g. 204 from DELETE)
#   2xx with text     → the raw text
#   anything else     → RetoolAPIError(status, body text)
#
# TESTING:
#   Pass transport=httpx.MockTransport(handler) to intercept every request
#   without touching the network.
# =============================================================================

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from core.config import RetoolSettings
from core.errors import RetoolAPIError, RetoolConnectionError

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v2"


def _segment(value: str) -> str:
    """Percent-encode an identifier so it stays a single path segment."""
    return quote(str(value), safe="")


def _drop_none(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


class RetoolClient:
    """Client for the Retool management API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._http = httpx.Client(
            base_url=f"{self.base_url}{API_PREFIX}",
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=httpx.Timeout(timeout_seconds),
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: RetoolSettings,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "RetoolClient":
        return cls(
            settings.base_url,
            settings.api_key,
            timeout_seconds=settings.timeout_seconds,
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "RetoolClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # The single choke point for HTTP
    # -------------------------------------------------------------------------
    def request(
        self,
        method: str,
        endpoint: str,
        body: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Send one request and decode the response.

        Args:
            method: HTTP verb ("GET", "POST", "DELETE", ...).
            endpoint: Path below /api/v2, starting with "/".
            body: JSON body.  None means no body at all; None-valued keys
                are dropped.
            params: Query parameters.  None-valued keys are dropped.

        Raises:
            RetoolAPIError: the response status was not 2xx.
            RetoolConnectionError: no response was received.
        """
        kwargs: dict[str, Any] = {}
        if body is not None:
            kwargs["json"] = _drop_none(body)
        if params:
            query = _drop_none(params)
            if query:
                kwargs["params"] = query

        logger.debug("%s %s%s", method, API_PREFIX, endpoint)
        try:
            response = self._http.request(method, endpoint, **kwargs)
        except httpx.RequestError as exc:
            reason = str(exc) or type(exc).__name__
            raise RetoolConnectionError(
                f"Could not reach Retool at {self.base_url}: {reason}"
            ) from exc

        if not response.is_success:
            raise RetoolAPIError(response.status_code, response.text)

        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    # --- Apps ---------------------------------------------------------------
    def list_apps(self) -> Any:
        return self.request("GET", "/apps")

    def get_app(self, app_id: str) -> Any:
        return self.request("GET", f"/apps/{_segment(app_id)}")

    def create_app(self, name: str, folder_id: Optional[str] = None) -> Any:
        return self.request("POST", "/apps", {"name": name, "folder_id": folder_id})

    def delete_app(self, app_id: str) -> Any:
        return self.request("DELETE", f"/apps/{_segment(app_id)}")

    def create_app_release(self, app_id: str, version: Optional[str] = None) -> Any:
        return self.request(
            "POST", f"/apps/{_segment(app_id)}/releases", {"version": version}
        )

    # --- Folders ------------------------------------------------------------
    def list_folders(self) -> Any:
        return self.request("GET", "/folders")

    def create_folder(self, name: str, parent_folder_id: Optional[str] = None) -> Any:
        return self.request(
            "POST", "/folders", {"name": name, "parent_folder_id": parent_folder_id}
        )

    # --- Workflows ----------------------------------------------------------
    def list_workflows(self) -> Any:
        return self.request("GET", "/workflows")

    def trigger_workflow(
        self, workflow_id: str, data: Optional[dict[str, Any]] = None
    ) -> Any:
        # Always sends a body, even when data is omitted ({}).
        return self.request(
            "POST", f"/workflows/{_segment(workflow_id)}/trigger", {"data": data}
        )

    # --- Resources (database connections, APIs, ...) ------------------------
    def list_resources(self) -> Any:
        return self.request("GET", "/resources")

    def get_resource(self, resource_id: str) -> Any:
        return self.request("GET", f"/resources/{_segment(resource_id)}")

    # --- Users --------------------------------------------------------------
    def list_users(self) -> Any:
        return self.request("GET", "/users")

    def get_user(self, user_id: str) -> Any:
        return self.request("GET", f"/users/{_segment(user_id)}")

    def create_user(
        self,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> Any:
        return self.request(
            "POST",
            "/users",
            {"email": email, "first_name": first_name, "last_name": last_name},
        )

    def deactivate_user(self, user_id: str) -> Any:
        return self.request("POST", f"/users/{_segment(user_id)}/deactivate")

    # --- Groups -------------------------------------------------------------
    def list_groups(self) -> Any:
        return self.request("GET", "/groups")

    def get_group(self, group_id: str) -> Any:
        return self.request("GET", f"/groups/{_segment(group_id)}")

    def add_user_to_group(self, group_id: str, user_id: str) -> Any:
        return self.request(
            "POST", f"/groups/{_segment(group_id)}/members", {"user_id": user_id}
        )

    # --- Source control -----------------------------------------------------
    def list_source_control_settings(self) -> Any:
        return self.request("GET", "/source_control/settings")

    # --- Audit logs ---------------------------------------------------------
    def get_audit_logs(
        self, start_date: Optional[str] = None, end_date: Optional[str] = None
    ) -> Any:
        return self.request(
            "GET",
            "/audit_logs",
            params={"start_date": start_date, "end_date": end_date},
        )
