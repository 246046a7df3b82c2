"""FAQ and long-form content endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .base import ApiClient, ApiResult, require_id


FAQ_ENDPOINT = "/faqs"
FAQ_STATUSES = ("published", "draft")


class FaqService:
    def __init__(self, client: ApiClient):
        self.client = client

    def list(self, **params: Any) -> ApiResult:
        result = self.client.get(FAQ_ENDPOINT, params)
        if not result.success:
            result.data = {"faqs": [], "pagination": {}}
        return result.with_defaults(error="Failed to fetch FAQs")

    def get(self, faq_id: str) -> ApiResult:
        return require_id(faq_id, "FAQ") or self.client.get(f"{FAQ_ENDPOINT}/{faq_id}").with_defaults(
            error="Failed to fetch FAQ"
        )

    def create(self, faq: Mapping[str, Any]) -> ApiResult:
        if not str(faq.get("question") or "").strip() or not str(faq.get("answer") or "").strip():
            return ApiResult.failure("Question and answer are required")
        return self.client.post(FAQ_ENDPOINT, dict(faq)).with_defaults(
            message="FAQ created successfully",
            error="Failed to create FAQ",
        )

    def update(self, faq_id: str, faq: Mapping[str, Any]) -> ApiResult:
        missing = require_id(faq_id, "FAQ")
        if missing:
            return missing
        return self.client.put(f"{FAQ_ENDPOINT}/{faq_id}", dict(faq)).with_defaults(
            message="FAQ updated successfully",
            error="Failed to update FAQ",
        )

    def delete(self, faq_id: str) -> ApiResult:
        missing = require_id(faq_id, "FAQ")
        if missing:
            return missing
        return self.client.delete(f"{FAQ_ENDPOINT}/{faq_id}").with_defaults(
            message="FAQ deleted successfully",
            error="Failed to delete FAQ",
        )

    def set_status(self, faq_id: str, status: str) -> ApiResult:
        missing = require_id(faq_id, "FAQ")
        if missing:
            return missing
        if not status:
            return ApiResult.failure("Status is required")
        if status not in FAQ_STATUSES:
            return ApiResult.failure(f"Status must be one of: {', '.join(FAQ_STATUSES)}")
        return self.client.patch(f"{FAQ_ENDPOINT}/{faq_id}/status", {"status": status}).with_defaults(
            message="FAQ status updated successfully",
            error="Failed to update FAQ status",
        )


@dataclass(frozen=True)
class DocumentKind:
    """One editable long-form document: terms, privacy policy, game rules or app features."""

    slug: str
    endpoint: str
    list_key: str
    title: str
    id_label: str
    singular: str
    noun: str
    plural: str
    requires_title: bool = False


DOCUMENT_KINDS = {
    kind.slug: kind
    for kind in (
        DocumentKind(
            slug="terms",
            endpoint="/terms",
            list_key="terms",
            title="Terms & Conditions",
            id_label="Terms",
            singular="terms",
            noun="terms",
            plural="terms",
        ),
        DocumentKind(
            slug="privacy",
            endpoint="/privacy",
            list_key="privacy",
            title="Privacy Policy",
            id_label="Privacy Policy",
            singular="privacy policy",
            noun="privacy policy",
            plural="privacy policies",
        ),
        DocumentKind(
            slug="game-rules",
            endpoint="/game-rules",
            list_key="gameRules",
            title="Game rules",
            id_label="Game Rule",
            singular="game rule",
            noun="game rules",
            plural="game rules",
            requires_title=True,
        ),
        DocumentKind(
            slug="app-features",
            endpoint="/app-features",
            list_key="appFeatures",
            title="App features",
            id_label="App Feature",
            singular="app feature",
            noun="app features",
            plural="app features",
            requires_title=True,
        ),
    )
}
DOCUMENT_STATUSES = ("draft", "published")


class ContentDocumentService:
    def __init__(self, client: ApiClient, kind: DocumentKind):
        self.client = client
        self.kind = kind

    def list(self, **params: Any) -> ApiResult:
        result = self.client.get(self.kind.endpoint, params)
        if not result.success:
            result.data = {self.kind.list_key: [], "pagination": {}}
        return result.with_defaults(error=f"Failed to fetch {self.kind.plural}")

    def documents(self, **params: Any) -> list[dict[str, Any]]:
        data = self.list(**params).data
        if isinstance(data, list):
            return [item for item in data if isinstance(item, dict)]
        if isinstance(data, dict):
            items = data.get(self.kind.list_key)
            if isinstance(items, dict):
                return [items]
            if isinstance(items, list):
                return [item for item in items if isinstance(item, dict)]
        return []

    def published(self) -> ApiResult:
        return self.list(status="published", limit=1)

    def current(self) -> dict[str, Any] | None:
        """The published document, or the newest draft when nothing is published."""

        published = self.documents(status="published", limit=1)
        if published:
            return published[0]
        latest = self.documents(limit=1)
        return latest[0] if latest else None

    def get(self, document_id: str) -> ApiResult:
        return require_id(document_id, self.kind.id_label) or self.client.get(
            f"{self.kind.endpoint}/{document_id}"
        ).with_defaults(error=f"Failed to fetch {self.kind.singular}")

    def _missing_fields(self, document: Mapping[str, Any]) -> ApiResult | None:
        content = str(document.get("content") or "").strip()
        if self.kind.requires_title:
            if not str(document.get("title") or "").strip() or not content:
                return ApiResult.failure("Title and content are required")
        elif not content:
            return ApiResult.failure("Content is required")
        status = document.get("status")
        if status and status not in DOCUMENT_STATUSES:
            return ApiResult.failure(f"Status must be one of: {', '.join(DOCUMENT_STATUSES)}")
        return None

    def create(self, document: Mapping[str, Any]) -> ApiResult:
        invalid = self._missing_fields(document)
        if invalid:
            return invalid
        return self.client.post(self.kind.endpoint, dict(document)).with_defaults(
            message=f"{self.kind.title} created successfully",
            error=f"Failed to create {self.kind.noun}",
        )

    def update(self, document_id: str, document: Mapping[str, Any]) -> ApiResult:
        missing = require_id(document_id, self.kind.id_label) or self._missing_fields(document)
        if missing:
            return missing
        return self.client.put(f"{self.kind.endpoint}/{document_id}", dict(document)).with_defaults(
            message=f"{self.kind.title} updated successfully",
            error=f"Failed to update {self.kind.noun}",
        )

    def save(self, document_id: str | None, document: Mapping[str, Any]) -> ApiResult:
        if document_id:
            return self.update(document_id, document)
        return self.create(document)

    def delete(self, document_id: str) -> ApiResult:
        missing = require_id(document_id, self.kind.id_label)
        if missing:
            return missing
        return self.client.delete(f"{self.kind.endpoint}/{document_id}").with_defaults(
            message=f"{self.kind.title} deleted successfully",
            error=f"Failed to delete {self.kind.noun}",
        )
