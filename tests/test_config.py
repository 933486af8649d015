"""
Supermatech Backend: Settings and Middleware Tests
====================================================
"""

import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from supermatech.config import Settings
from supermatech.database import engine_options
from supermatech.middleware.logging import level_for_status


class TestSettings:

    def test_log_level_is_upper_cased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(log_level="chatty")

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_sync_driver_fails_production_check(self):
        settings = Settings(database_url="postgresql://u:p@db/shop")
        with pytest.raises(ValueError, match="async driver"):
            settings.validate_required_for_production()

    def test_async_driver_passes_production_check(self):
        Settings(database_url="postgresql+asyncpg://u:p@db/shop").validate_required_for_production()

    def test_sqlite_engine_has_no_pool_sizing(self):
        # conftest points DATABASE_URL at sqlite+aiosqlite
        assert "pool_size" not in engine_options()


class TestRequestMiddleware:

    def test_log_level_follows_status_class(self):
        assert level_for_status(201) == logging.INFO
        assert level_for_status(404) == logging.WARNING
        assert level_for_status(500) == logging.ERROR

    @pytest.mark.asyncio
    async def test_client_request_id_is_echoed(self, memory_client):
        response = await memory_client.get(
            "/api/order-lines", headers={"X-Request-ID": "cart-42"}
        )
        assert response.headers["X-Request-ID"] == "cart-42"

    @pytest.mark.asyncio
    async def test_error_body_carries_request_id(self, memory_client):
        response = await memory_client.get(
            "/api/order-lines/1", headers={"X-Request-ID": "trace-1"}
        )
        assert response.status_code == 404
        assert response.json()["request_id"] == "trace-1"


class TestHealthEndpoint:

    @pytest.mark.asyncio
    async def test_health_reports_database(self, memory_client):
        response = await memory_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
