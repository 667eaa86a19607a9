"""Unit tests for HTTP error mapping and caller resolution."""

from uuid import uuid4

import pytest
from fastapi import HTTPException

from hivemind.domain.error import (
    AlreadyVotedError,
    ContentDeletedError,
    NotAuthorizedError,
    NotFoundError,
    StorageFailureError,
)
from hivemind.domain.service import JWTService
from hivemind.interface.api.errors import RETRY_AFTER_SECONDS, to_http_error
from hivemind.interface.api.identity import bearer_token, require_caller


class TestToHttpError:
    """Tests for to_http_error."""

    def test_not_found_depends_on_operation(self):
        """Missing entities are 400 on mutations and 404 on reads."""
        error = NotFoundError("Content", "abc")

        assert to_http_error(error).status_code == 400
        assert to_http_error(error, read=True).status_code == 404

    def test_not_authorized_is_forbidden(self):
        error = NotAuthorizedError("comment", "abc", "def")

        assert to_http_error(error).status_code == 403

    @pytest.mark.parametrize(
        "error",
        [
            AlreadyVotedError("content", "abc"),
            ContentDeletedError("comment", "abc"),
        ],
    )
    def test_conflicts_are_bad_requests(self, error):
        """Conflicts report 400 with the domain message."""
        http_error = to_http_error(error)

        assert http_error.status_code == 400
        assert http_error.detail == str(error)

    def test_storage_failure_is_retryable(self):
        """Storage failures are 500 with a Retry-After hint."""
        http_error = to_http_error(StorageFailureError("cast_vote", "TimeoutError"))

        assert http_error.status_code == 500
        assert http_error.headers == {"Retry-After": str(RETRY_AFTER_SECONDS)}


class TestCallerResolution:
    """Tests for bearer_token and require_caller."""

    @pytest.mark.parametrize(
        "header, expected",
        [
            ("Bearer abc.def", "abc.def"),
            ("bearer abc.def", "abc.def"),
            ("Basic abc.def", None),
            ("Bearer", None),
            (None, None),
        ],
    )
    def test_bearer_token(self, header, expected):
        assert bearer_token(header) == expected

    def test_missing_token_is_unauthorized(self, auth_settings):
        """No token aborts with 401 naming the action."""
        jwt_service = JWTService(auth_settings)

        with pytest.raises(HTTPException) as exc_info:
            require_caller(jwt_service, None, None, "vote")

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Authentication required to vote"

    def test_cookie_wins_over_header(self, auth_settings):
        """The cookie token is used when both are present."""
        # Arrange
        jwt_service = JWTService(auth_settings)
        cookie_id, header_id = str(uuid4()), str(uuid4())
        cookie = jwt_service.create_token(cookie_id, "cookie")
        header = f"Bearer {jwt_service.create_token(header_id, 'header')}"

        # Act
        identity = require_caller(jwt_service, cookie, header, "vote")

        # Assert
        assert str(identity.account_id) == cookie_id

    def test_header_used_without_cookie(self, auth_settings):
        jwt_service = JWTService(auth_settings)
        account_id = str(uuid4())
        header = f"Bearer {jwt_service.create_token(account_id, 'alice')}"

        identity = require_caller(jwt_service, None, header, "vote")

        assert str(identity.account_id) == account_id
