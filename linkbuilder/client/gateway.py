# linkbuilder/client/gateway.py
"""
Reference-data gateway: partners and third parties over the REST API.

Keeps a local list per kind. Creates are applied to the local list first
(optimistic), then replaced by the authoritative list once the server
confirms; a failed create rolls the local insert back.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

import httpx

from linkbuilder.core.config import API_BASE_URL, API_TIMEOUT
from linkbuilder.core.exceptions import DuplicateName, InvalidInput, TransientFetchError
from linkbuilder.core.logging_config import log_api_request, log_api_response
from linkbuilder.schemas.reference import ReferenceKind

log = logging.getLogger("linkbuilder.gateway")

KindLike = Union[ReferenceKind, str]

# Request states
IDLE = "idle"
PENDING = "pending"
SUCCESS = "success"
ERROR = "error"


@dataclass
class ReferenceEntity:
    """Partner or third party as seen by the client; id is None until confirmed"""
    id: Optional[str]
    name: str
    pending: bool = False


@dataclass
class RequestState:
    """Last call outcome per kind, for the UI to render"""
    status: str = IDLE
    error: Optional[str] = None
    notice: Optional[str] = None


def _detail(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        detail = body.get("detail") or body.get("error")
        return detail if isinstance(detail, str) else None
    return None


class ReferenceDataGateway:
    """Client for /api/partners and /api/third-parties"""

    def __init__(self, client: Optional[httpx.Client] = None, base_url: Optional[str] = None):
        """
        Args:
            client: httpx client pointed at the backend (a FastAPI TestClient works too)
            base_url: used to build a client when none is given
        """
        self.client = client or httpx.Client(base_url=base_url or API_BASE_URL, timeout=API_TIMEOUT)
        self._cache: Dict[ReferenceKind, List[ReferenceEntity]] = {}
        self._states: Dict[ReferenceKind, RequestState] = {}

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self) -> None:
        self.client.close()

    # ────────────────────────────────────────────
    # Operations
    # ────────────────────────────────────────────

    def list(self, kind: KindLike) -> List[ReferenceEntity]:
        """Authoritative list ordered by name; replaces the local list"""
        kind = ReferenceKind(kind)
        state = self._begin(kind)
        try:
            response = self._request("GET", kind.path)
            if response.status_code != 200:
                raise TransientFetchError(
                    _detail(response) or f"Failed to fetch {kind.label.lower()} list",
                    status_code=response.status_code,
                )
            try:
                entities = [ReferenceEntity(id=row["id"], name=row["name"]) for row in response.json()]
            except (ValueError, KeyError, TypeError) as e:
                raise TransientFetchError(
                    f"Unreadable {kind.label.lower()} list: {e}", status_code=response.status_code
                )
        except TransientFetchError as e:
            state.status, state.error = ERROR, str(e)
            raise

        entities.sort(key=lambda entity: entity.name)
        self._cache[kind] = entities
        state.status = SUCCESS
        return list(entities)

    def exists(self, kind: KindLike, name: Optional[str]) -> bool:
        """Exact, case-sensitive existence check on the trimmed name"""
        kind = ReferenceKind(kind)
        name = (name or "").strip()
        if not name:
            raise InvalidInput(f"{kind.label} name is required")

        state = self._begin(kind)
        try:
            response = self._request("POST", f"{kind.path}/check", {"name": name})
            if response.status_code == 400:
                raise InvalidInput(_detail(response) or f"{kind.label} name is required")
            if response.status_code != 200:
                raise TransientFetchError(
                    _detail(response) or f"Failed to check {kind.label.lower()}",
                    status_code=response.status_code,
                )
            try:
                found = bool(response.json()["exists"])
            except (ValueError, KeyError, TypeError) as e:
                raise TransientFetchError(
                    f"Unreadable {kind.label.lower()} check: {e}", status_code=response.status_code
                )
        except (InvalidInput, TransientFetchError) as e:
            state.status, state.error = ERROR, str(e)
            raise

        state.status = SUCCESS
        return found

    def create(self, kind: KindLike, name: Optional[str]) -> ReferenceEntity:
        """
        Create a partner / third party.

        Raises:
            InvalidInput: blank name (no request is made) or server-side 400
            DuplicateName: the name already exists (409)
            TransientFetchError: any other failure, including an unreadable reply
        """
        kind = ReferenceKind(kind)
        name = (name or "").strip()
        if not name:
            raise InvalidInput(f"{kind.label} name is required")

        placeholder = ReferenceEntity(id=None, name=name, pending=True)
        local = self._cache.setdefault(kind, [])
        local.append(placeholder)
        state = self._begin(kind)

        try:
            response = self._request("POST", kind.path, {"name": name})
            if response.status_code == 409:
                raise DuplicateName(kind.value, name, _detail(response) or f"{kind.label} name already exists")
            if response.status_code == 400:
                raise InvalidInput(_detail(response) or f"{kind.label} name is invalid")
            if response.status_code not in (200, 201):
                raise TransientFetchError(
                    _detail(response) or f"Failed to create {kind.label.lower()}",
                    status_code=response.status_code,
                )
            try:
                body = response.json()
                created = ReferenceEntity(id=body["id"], name=body["name"])
            except (ValueError, KeyError, TypeError) as e:
                raise TransientFetchError(
                    f"Unreadable reply creating {kind.label.lower()}: {e}", status_code=response.status_code
                )
        except (DuplicateName, InvalidInput, TransientFetchError) as e:
            self._rollback(kind, placeholder)
            state.status, state.error = ERROR, str(e)
            raise

        self._replace(kind, placeholder, created)
        log.info(f"✅ {kind.label} created: {created.name}")

        # reconcile with the server; a failure here only leaves a notice
        try:
            self.list(kind)
        except TransientFetchError as e:
            log.warning(f"⚠️ Could not refresh {kind.value} list after create: {e}")
            state.status, state.error = SUCCESS, None
            state.notice = f"{created.name} was added but the list could not be refreshed"
        return created

    # ────────────────────────────────────────────
    # Local view
    # ────────────────────────────────────────────

    def cached(self, kind: KindLike) -> List[ReferenceEntity]:
        kind = ReferenceKind(kind)
        return sorted(self._cache.get(kind, []), key=lambda entity: entity.name)

    def choices(self, kind: KindLike, refresh: bool = False) -> List[str]:
        """Names for a dropdown; falls back to the local list (or []) on fetch errors"""
        kind = ReferenceKind(kind)
        if refresh or kind not in self._cache:
            try:
                self.list(kind)
            except TransientFetchError as e:
                log.warning(f"⚠️ {kind.value} list unavailable: {e}")
        return [entity.name for entity in self.cached(kind)]

    def state(self, kind: KindLike) -> RequestState:
        return self._states.setdefault(ReferenceKind(kind), RequestState())

    # ────────────────────────────────────────────
    # Helpers
    # ────────────────────────────────────────────

    def _begin(self, kind: ReferenceKind) -> RequestState:
        state = self.state(kind)
        state.status, state.error, state.notice = PENDING, None, None
        return state

    def _request(self, method: str, path: str, payload: Optional[dict] = None) -> httpx.Response:
        log_api_request(log, method, path, payload)
        try:
            response = self.client.request(method, path, json=payload)
        except httpx.HTTPError as e:
            log_api_response(log, None, error=e)
            raise TransientFetchError(f"{method} {path} failed: {e}")
        log_api_response(log, response.status_code)
        return response

    def _rollback(self, kind: ReferenceKind, placeholder: ReferenceEntity) -> None:
        local = self._cache.get(kind, [])
        self._cache[kind] = [entity for entity in local if entity is not placeholder]

    def _replace(self, kind: ReferenceKind, placeholder: ReferenceEntity, created: ReferenceEntity) -> None:
        local = self._cache.get(kind, [])
        self._cache[kind] = [created if entity is placeholder else entity for entity in local]
