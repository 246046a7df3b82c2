"""Shared fakes: an in-memory Firestore and a scripted REST backend."""

from __future__ import annotations

import itertools
import json
from datetime import datetime, timezone
from typing import Any, Callable

import httpx
import pytest
from firebase_admin import firestore

from cebee_admin.client import ApiClient, BackendServices
from cebee_admin.firestore import DocumentStore
from cebee_admin.session import SessionStore


BACKEND_URL = "http://backend.test/api"

_ids = itertools.count(1)


def _resolve(value: Any) -> Any:
    if value is firestore.SERVER_TIMESTAMP:
        return datetime.now(timezone.utc)
    return value


class FakeSnapshot:
    def __init__(self, doc_id: str, data: dict[str, Any] | None):
        self.id = doc_id
        self._data = data

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self) -> dict[str, Any] | None:
        return dict(self._data) if self._data is not None else None


class FakeDocument:
    def __init__(self, collection: "FakeCollection", doc_id: str):
        self.collection = collection
        self.id = doc_id

    def get(self) -> FakeSnapshot:
        return FakeSnapshot(self.id, self.collection.docs.get(self.id))

    def set(self, data: dict[str, Any]) -> None:
        self.collection.docs[self.id] = {key: _resolve(value) for key, value in data.items()}

    def update(self, data: dict[str, Any]) -> None:
        if self.id not in self.collection.docs:
            raise KeyError(f"No document to update: {self.id}")
        self.collection.docs[self.id].update({key: _resolve(value) for key, value in data.items()})

    def delete(self) -> None:
        self.collection.docs.pop(self.id, None)


class FakeQuery:
    def __init__(self, collection: "FakeCollection"):
        self.collection = collection
        self.filters: list[Callable[[dict[str, Any]], bool]] = []
        self.ordering: tuple[str, bool] | None = None
        self.max_results: int | None = None

    def where(self, field: str, op: str, value: Any) -> "FakeQuery":
        if op != "==":
            raise NotImplementedError(op)
        self.filters.append(lambda doc: doc.get(field) == value)
        return self

    def order_by(self, field: str, direction: str = "ASCENDING") -> "FakeQuery":
        self.ordering = (field, direction == firestore.Query.DESCENDING)
        return self

    def limit(self, count: int) -> "FakeQuery":
        self.max_results = count
        return self

    def stream(self):
        docs = [
            (doc_id, data)
            for doc_id, data in self.collection.docs.items()
            if all(check(data) for check in self.filters)
        ]
        if self.ordering:
            field, descending = self.ordering
            # Firestore leaves out documents missing the ordered field.
            docs = [item for item in docs if item[1].get(field) is not None]
            docs.sort(key=lambda item: item[1][field], reverse=descending)
        if self.max_results is not None:
            docs = docs[: self.max_results]
        return iter([FakeSnapshot(doc_id, data) for doc_id, data in docs])


class FakeCollection:
    def __init__(self):
        self.docs: dict[str, dict[str, Any]] = {}

    def document(self, doc_id: str | None = None) -> FakeDocument:
        return FakeDocument(self, doc_id or f"doc{next(_ids)}")

    def where(self, field: str, op: str, value: Any) -> FakeQuery:
        return FakeQuery(self).where(field, op, value)

    def order_by(self, field: str, direction: str = "ASCENDING") -> FakeQuery:
        return FakeQuery(self).order_by(field, direction=direction)

    def limit(self, count: int) -> FakeQuery:
        return FakeQuery(self).limit(count)

    def stream(self):
        return FakeQuery(self).stream()


class FakeFirestore:
    """In-memory stand-in for ``firestore.client()``."""

    def __init__(self):
        self.collections: dict[str, FakeCollection] = {}

    def collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    def seed(self, name: str, doc_id: str, data: dict[str, Any]) -> None:
        self.collection(name).docs[doc_id] = dict(data)


class FakeBackend:
    """Scripted REST backend served through ``httpx.MockTransport``."""

    def __init__(self):
        self.routes: dict[tuple[str, str], Any] = {}
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, payload: Any = None, *, status: int = 200, headers=None) -> None:
        self.routes[(method.upper(), path)] = (status, payload, headers or {})

    def bodies(self, method: str, path: str) -> list[Any]:
        return [
            json.loads(request.content) if request.content else None
            for request in self.requests
            if request.method == method and request.url.path == f"/api{path}"
        ]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"success": False, "message": f"No route for {request.method} {path}"})
        status, payload, headers = route
        if callable(payload):
            payload = payload(request)
        if isinstance(payload, (dict, list)):
            return httpx.Response(status, json=payload, headers=headers)
        return httpx.Response(status, text=payload or "", headers=headers)


@pytest.fixture
def sessions(tmp_path) -> SessionStore:
    return SessionStore(tmp_path / "admin_session.json")


@pytest.fixture
def signed_in(sessions) -> SessionStore:
    sessions.save("token-123", {"id": "u1", "name": "Ada Admin", "email": "ada@example.com", "role": "admin"})
    return sessions


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def api_client(backend, sessions) -> ApiClient:
    client = ApiClient(BACKEND_URL, sessions, transport=httpx.MockTransport(backend.handle))
    yield client
    client.close()


@pytest.fixture
def services(api_client) -> BackendServices:
    return BackendServices.from_client(api_client)


@pytest.fixture
def fake_db() -> FakeFirestore:
    return FakeFirestore()


@pytest.fixture
def documents(fake_db) -> DocumentStore:
    return DocumentStore(fake_db)


@pytest.fixture
def anyio_backend():
    return "asyncio"
