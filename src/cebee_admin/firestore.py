"""Direct Firestore access for the collections the console reads itself."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Tuple

import firebase_admin
from firebase_admin import credentials, firestore

from cebee_admin.config import AdminConfig


logger = logging.getLogger(__name__)

FIXTURES = "fixtures"
NOTIFICATIONS = "notifications"
PREDICTIONS = "predictions"
POLLS = "polls"
LEAGUES = "leagues"

Filter = Tuple[str, str, Any]


def firestore_client(config: AdminConfig):
    """Return a Firestore client, initialising the default Firebase app once.

    A service-account file is used when configured; otherwise the SDK falls
    back to application default credentials.
    """

    try:
        app = firebase_admin.get_app()
    except ValueError:
        cred = None
        if config.firebase_credentials:
            cred = credentials.Certificate(str(config.firebase_credentials))
        options = {"projectId": config.firebase_project_id} if config.firebase_project_id else None
        app = firebase_admin.initialize_app(cred, options)
        logger.info("Firebase Admin SDK initialized (project=%s)", config.firebase_project_id or "default")
    return firestore.client(app)


class DocumentStore:
    """Thin collection-level wrapper over a Firestore client.

    Documents come back as plain dicts with their id under ``"id"``.
    """

    def __init__(self, db: Any):
        self.db = db

    def list(
        self,
        collection: str,
        *,
        filters: Iterable[Filter] = (),
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        query = self.db.collection(collection)
        for field, op, value in filters:
            query = query.where(field, op, value)
        if order_by:
            direction = firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
            query = query.order_by(order_by, direction=direction)
        if limit:
            query = query.limit(limit)
        return [{**(doc.to_dict() or {}), "id": doc.id} for doc in query.stream()]

    def get(self, collection: str, doc_id: str) -> Optional[dict[str, Any]]:
        snapshot = self.db.collection(collection).document(doc_id).get()
        if not snapshot.exists:
            return None
        return {**(snapshot.to_dict() or {}), "id": snapshot.id}

    def create(self, collection: str, data: Mapping[str, Any]) -> str:
        ref = self.db.collection(collection).document()
        ref.set(
            {
                **data,
                "createdAt": firestore.SERVER_TIMESTAMP,
                "updatedAt": firestore.SERVER_TIMESTAMP,
            }
        )
        logger.info("Created %s/%s", collection, ref.id)
        return ref.id

    def update(self, collection: str, doc_id: str, data: Mapping[str, Any]) -> None:
        self.db.collection(collection).document(doc_id).update(
            {**data, "updatedAt": firestore.SERVER_TIMESTAMP}
        )
        logger.info("Updated %s/%s", collection, doc_id)

    def delete(self, collection: str, doc_id: str) -> None:
        self.db.collection(collection).document(doc_id).delete()
        logger.info("Deleted %s/%s", collection, doc_id)
