"""Tests for domain error handler to verify structured JSON error responses."""
import json
from datetime import datetime

import pytest
from fastapi.responses import JSONResponse

from mesoplan.core.error_handlers import ERROR_STATUS_MAP, domain_error_handler
from mesoplan.core.exceptions import (
    BusinessRuleError,
    ConflictError,
    DomainError,
    NotFoundError,
    StorageError,
    ValidationError,
)


class MockRequest:
    """Mock FastAPI Request object for testing."""

    def __init__(self, request_id: str = "test-request-123"):
        self.state = type('State', (), {'request_id': request_id})()


class TestDomainErrorExceptions:
    """Test domain exception classes and their error codes."""

    def test_not_found_error(self):
        error = NotFoundError("exercise", "Exercise ex_999 not found", {"exercise_id": "ex_999"})

        assert error.code == "NF_EXERCISE_001"
        assert error.message == "Exercise ex_999 not found"
        assert error.details == {"exercise_id": "ex_999"}

    def test_not_found_error_default_message(self):
        error = NotFoundError("Program")

        assert error.code == "NF_PROGRAM_001"
        assert error.message == "Program not found"
        assert error.details == {}

    def test_validation_error(self):
        error = ValidationError("overrides", "fields cannot be overridden: ['muscle']")

        assert error.code == "VAL_OVERRIDES_001"
        assert error.message.startswith("Validation failed for overrides:")
        assert error.details == {"field": "overrides"}

    def test_business_rule_error_custom_code(self):
        error = BusinessRuleError(
            "Program could not be generated",
            code="BR_GENERATION",
            details={"days_per_week": 7},
        )

        assert error.code == "BR_GENERATION"
        assert error.details == {"days_per_week": 7}

    def test_storage_error_default(self):
        error = StorageError("Program store is not valid JSON")

        assert error.code == "ST_001"
        assert error.details == {}


class TestErrorStatusMap:
    """Test ERROR_STATUS_MAP mapping."""

    def test_status_codes(self):
        assert ERROR_STATUS_MAP[NotFoundError] == 404
        assert ERROR_STATUS_MAP[ValidationError] == 400
        assert ERROR_STATUS_MAP[BusinessRuleError] == 422
        assert ERROR_STATUS_MAP[ConflictError] == 409

    def test_storage_error_is_unmapped(self):
        assert StorageError not in ERROR_STATUS_MAP


class TestDomainErrorHandler:
    """Test domain_error_handler function."""

    @pytest.mark.asyncio
    async def test_not_found_error_response(self):
        error = NotFoundError("week", "Week 9 not found in program prog_abc", {"week": 9})
        request = MockRequest(request_id="req-123")

        response = await domain_error_handler(request, error)

        assert isinstance(response, JSONResponse)
        assert response.status_code == 404

        data = json.loads(response.body.decode())
        assert data["data"] is None
        assert len(data["errors"]) == 1
        assert data["errors"][0] == {
            "code": "NF_WEEK_001",
            "message": "Week 9 not found in program prog_abc",
            "details": {"week": 9},
        }

    @pytest.mark.asyncio
    async def test_validation_error_response(self):
        error = ValidationError("overrides", "sets must be >= 1")
        response = await domain_error_handler(MockRequest(), error)

        assert response.status_code == 400
        data = json.loads(response.body.decode())
        assert data["errors"][0]["details"]["field"] == "overrides"

    @pytest.mark.asyncio
    async def test_storage_error_returns_500(self):
        error = StorageError("Program store version 9 is newer than supported version 3", details={"version": 9})
        response = await domain_error_handler(MockRequest(), error)

        assert response.status_code == 500
        data = json.loads(response.body.decode())
        assert data["errors"][0]["code"] == "ST_001"

    @pytest.mark.asyncio
    async def test_response_includes_metadata(self):
        error = NotFoundError("test_entity")
        request = MockRequest(request_id="test-request-id-12345")

        response = await domain_error_handler(request, error)
        data = json.loads(response.body.decode())

        assert data["meta"]["request_id"] == "test-request-id-12345"
        # Verify timestamp is a valid ISO datetime string
        datetime.fromisoformat(data["meta"]["timestamp"].replace('Z', '+00:00'))

    @pytest.mark.asyncio
    async def test_unknown_domain_error_returns_500(self):

        class CustomDomainError(DomainError):
            """Custom domain error not in status map."""

        error = CustomDomainError("CUSTOM_001", "Custom error message")
        response = await domain_error_handler(MockRequest(), error)

        assert response.status_code == 500
        data = json.loads(response.body.decode())
        assert data["errors"][0]["code"] == "CUSTOM_001"

    @pytest.mark.asyncio
    async def test_error_with_none_request_id(self):
        error = ValidationError("field", "Invalid field")

        # Create a mock request without request_id in state
        request = type('Request', (), {
            'state': type('State', (), {})()
        })()

        response = await domain_error_handler(request, error)
        data = json.loads(response.body.decode())

        assert data["meta"]["request_id"] is None


class TestEnvelopeHelpers:
    """Test error code normalisation and the APIError conversion."""

    def test_entity_with_spaces_normalised_in_code(self):
        error = NotFoundError("program week", "Week 9 not found")

        assert error.code == "NF_PROGRAM_WEEK_001"
        assert error.entity == "program week"

    def test_api_error_from_exception(self):
        from mesoplan.schemas.base import APIError

        error = BusinessRuleError("No split template for 7 days", details={"days_per_week": 7})
        api_error = APIError.from_exception(error)

        assert api_error.code == "BR_001"
        assert api_error.message == "No split template for 7 days"
        assert api_error.details == {"days_per_week": 7}


class TestSettings:
    """Test settings normalisation."""

    def test_log_level_is_uppercased(self):
        from mesoplan.config.settings import Settings

        assert Settings(log_level="debug").log_level == "DEBUG"
