"""
API Gateway Client

One configured httpx client for the whole API:
- request hook attaches the stored identity (X-User-ID, and the bearer token
  when one was issued)
- response hook treats 401 as a forced logout: the stored identity is
  cleared and `on_unauthorized` runs (a UI would redirect to its login view)

Usage:
    with PortalClient() as api:
        api.users.login("a@b.com", "secret")
        api.internships.list(skill="React")
"""

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import httpx

from internship_portal.core.config import get_settings
from internship_portal.core.logging import get_logger

logger = get_logger(__name__)

USER_ID_HEADER = "X-User-ID"


@dataclass
class Identity:
    id: int
    email: str
    user_type: str
    access_token: Optional[str] = None


class IdentityStore:
    """
    Holds the identity returned by signup/login.
    With a path, it survives restarts as a small JSON file.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else None
        self._identity: Optional[Identity] = None
        if self.path and self.path.exists():
            self._identity = self.load()

    @property
    def identity(self) -> Optional[Identity]:
        return self._identity

    def save(self, identity: Identity):
        self._identity = identity
        if self.path:
            self.path.write_text(json.dumps(asdict(identity)), encoding="utf-8")

    def load(self) -> Optional[Identity]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return Identity(**data)
        except (OSError, ValueError, TypeError):
            logger.warning("Ignoring unreadable identity file %s", self.path)
            return None

    def clear(self):
        self._identity = None
        if self.path and self.path.exists():
            self.path.unlink()


def _log_redirect():
    logger.info("Session rejected by the API; login required")


class _Resource:
    def __init__(self, client: "PortalClient", prefix: str):
        self._client = client
        self._prefix = prefix

    def _url(self, *parts) -> str:
        return "/".join([self._prefix, *(str(p) for p in parts)])


class UsersAPI(_Resource):
    def signup(self, email: str, password: str, user_type: str) -> dict:
        body = self._client.request("POST", self._url("signup"),
                                    json={"email": email, "password": password, "user_type": user_type})
        self._client.remember(body)
        return body

    def login(self, email: str, password: str) -> dict:
        body = self._client.request("POST", self._url("login"), json={"email": email, "password": password})
        self._client.remember(body)
        return body

    def list(self) -> dict:
        return self._client.request("GET", self._prefix)

    def get(self, user_id: int) -> dict:
        return self._client.request("GET", self._url(user_id))

    def update(self, user_id: int, data: Dict[str, Any]) -> dict:
        return self._client.request("PUT", self._url(user_id), json=data)

    def delete(self, user_id: int) -> dict:
        return self._client.request("DELETE", self._url(user_id))


class _CrudAPI(_Resource):
    def create(self, data: Dict[str, Any]) -> dict:
        return self._client.request("POST", self._prefix, json=data)

    def list(self, **filters) -> dict:
        params = {k: v for k, v in filters.items() if v is not None}
        return self._client.request("GET", self._prefix, params=params)

    def get(self, key: int) -> dict:
        return self._client.request("GET", self._url(key))

    def update(self, key: int, data: Dict[str, Any]) -> dict:
        return self._client.request("PATCH", self._url(key), json=data)

    def delete(self, key: int) -> dict:
        return self._client.request("DELETE", self._url(key))


class StudentsAPI(_CrudAPI):
    def get_by_user(self, user_id: int) -> dict:
        return self._client.request("GET", self._url("user", user_id))

    def me(self) -> dict:
        return self._client.request("GET", self._url("me"))


class StartupsAPI(_CrudAPI):
    def get_by_user(self, user_id: int) -> dict:
        return self._client.request("GET", self._url("user", user_id))


class InternshipsAPI(_CrudAPI):
    def get_by_startup(self, startup_id: int) -> dict:
        return self._client.request("GET", self._url("startup", startup_id))


class ApplicationsAPI(_CrudAPI):
    def by_student(self, student_id: int) -> dict:
        return self._client.request("GET", self._url("student", student_id))

    def by_startup(self, startup_id: int) -> dict:
        return self._client.request("GET", self._url("startup", startup_id))


class PortalClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        identity: Optional[IdentityStore] = None,
        on_unauthorized: Callable[[], None] = _log_redirect,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: float = 10.0,
    ):
        self.identity = identity or IdentityStore()
        self.on_unauthorized = on_unauthorized
        self.http = httpx.Client(
            base_url=(base_url or get_settings().api_base_url).rstrip("/") + "/",
            headers={"Content-Type": "application/json"},
            event_hooks={"request": [self._attach_identity], "response": [self._handle_unauthorized]},
            transport=transport,
            timeout=timeout,
        )

        self.users = UsersAPI(self, "users")
        self.students = StudentsAPI(self, "students")
        self.startups = StartupsAPI(self, "startups")
        self.internships = InternshipsAPI(self, "internships")
        self.applications = ApplicationsAPI(self, "applications")

    # -- hooks -------------------------------------------------------------

    def _attach_identity(self, request: httpx.Request):
        identity = self.identity.identity
        if identity is None:
            return
        request.headers[USER_ID_HEADER] = str(identity.id)
        if identity.access_token:
            request.headers["Authorization"] = f"Bearer {identity.access_token}"

    def _handle_unauthorized(self, response: httpx.Response):
        if response.status_code == 401:
            self.identity.clear()
            self.on_unauthorized()

    # -- plumbing ----------------------------------------------------------

    def request(self, method: str, path: str, **kwargs) -> dict:
        """Send one call; non-2xx responses raise httpx.HTTPStatusError."""
        response = self.http.request(method, path, **kwargs)
        response.raise_for_status()
        return response.json()

    def remember(self, body: dict):
        user = body["user"]
        self.identity.save(Identity(
            id=user["id"], email=user["email"], user_type=user["user_type"],
            access_token=body.get("access_token"),
        ))

    def logout(self):
        self.identity.clear()

    def close(self):
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
