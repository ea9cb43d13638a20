"""Unit tests for the domain error to HTTP mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from board.domain.error import (
    AuthenticationError,
    ConflictError,
    DataIntegrityError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from board.interface.error import (
    GENERIC_ERROR_MESSAGE,
    register_error_handlers,
    status_for,
)


class TestStatusFor:
    @pytest.mark.parametrize(
        "error, expected",
        [
            (ValidationError("bad"), 400),
            (AuthenticationError("who"), 401),
            (NotAuthorizedError("edit", "post", "p1", "u1"), 403),
            (NotFoundError("Post", "p1"), 404),
            (ConflictError("dup"), 409),
            (DataIntegrityError("broken"), 500),
        ],
    )
    def test_status_codes(self, error, expected):
        assert status_for(error)[0] == expected


class TestRegisteredHandlers:
    @pytest.fixture
    def client(self):
        app = FastAPI()
        register_error_handlers(app)

        @app.get("/not-found")
        async def not_found():
            raise NotFoundError("Post", "p1")

        @app.get("/integrity")
        async def integrity():
            raise DataIntegrityError("creator u1 missing")

        @app.get("/count")
        async def count(limit: int):
            return {"limit": limit}

        @app.get("/boom")
        async def boom():
            raise RuntimeError("connection string with secrets")

        return TestClient(app, raise_server_exceptions=False)

    def test_domain_error_message_is_shown(self, client):
        response = client.get("/not-found")

        assert response.status_code == 404
        assert response.json() == {
            "error": "not_found",
            "detail": "Post not found: p1",
        }

    def test_integrity_error_is_hidden(self, client):
        response = client.get("/integrity")

        assert response.status_code == 500
        assert response.json()["detail"] == GENERIC_ERROR_MESSAGE

    def test_unexpected_error_is_hidden(self, client):
        response = client.get("/boom")

        assert response.status_code == 500
        assert "secrets" not in response.text
        assert response.json()["detail"] == GENERIC_ERROR_MESSAGE

    def test_request_validation_error_is_400(self, client):
        response = client.get("/count", params={"limit": "many"})

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
