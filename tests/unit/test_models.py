"""
Unit tests for EPUB status models.

Dependencies: pytest, epub_service.models
System role: Schema validation
"""

import json

from epub_service.models.epub import EpubStatus, EpubStatusResponse, StatusRecord

from tests.fakes import NOW


class TestStatusRecord:
    """Test suite for StatusRecord decoding and encoding."""

    def test_parses_rfc3339_with_z(self):
        record = StatusRecord.model_validate({"status": "PENDING", "createdAt": "2025-01-01T12:00:00Z"})

        assert record.created_at == NOW

    def test_non_string_status_ignored(self):
        record = StatusRecord.model_validate({"status": 3})

        assert record.status is None

    def test_empty_error_reads_as_absent(self):
        record = StatusRecord.model_validate({"status": "FAILED", "error": ""})

        assert record.error is None

    def test_unknown_fields_ignored(self):
        record = StatusRecord.model_validate({"status": "PROCESSING", "worker": "batch-1"})

        assert record.status == "PROCESSING"

    def test_pending_factory(self):
        record = StatusRecord.pending(NOW)

        assert record.status == EpubStatus.PENDING.value
        assert record.created_at == NOW
        assert record.error is None

    def test_to_json_omits_absent_fields(self):
        payload = json.loads(StatusRecord.pending(NOW).to_json())

        assert payload == {"status": "PENDING", "createdAt": "2025-01-01T12:00:00Z"}


class TestEpubStatusResponse:
    """Test suite for the status descriptor."""

    def test_dump_by_alias(self):
        response = EpubStatusResponse(
            id="L4", status=EpubStatus.COMPLETED, signed_url="https://signed"
        )

        assert response.model_dump(by_alias=True, exclude_none=True, mode="json") == {
            "id": "L4",
            "status": "COMPLETED",
            "signedUrl": "https://signed",
        }

    def test_accepts_alias_on_input(self):
        response = EpubStatusResponse.model_validate(
            {"id": "L4", "status": "COMPLETED", "signedUrl": "https://signed"}
        )

        assert response.signed_url == "https://signed"
