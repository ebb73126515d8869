"""Testes de parsing de erros e do resultado tipado do MailChimp."""

from __future__ import annotations

import pytest

from api.connectors.mailchimp import (
    MailChimpFailure,
    MailChimpResult,
    is_success_status,
    parse_mailchimp_error,
)


@pytest.mark.parametrize("status_code", [200, 201, 204, 299])
def test_is_success_status_true(status_code: int) -> None:
    assert is_success_status(status_code) is True


@pytest.mark.parametrize("status_code", [100, 199, 300, 301, 400, 404, 500])
def test_is_success_status_false(status_code: int) -> None:
    assert is_success_status(status_code) is False


def test_parse_mailchimp_error_problem_detail() -> None:
    body = {
        "type": "https://mailchimp.com/developer/marketing/docs/errors/",
        "title": "Member Exists",
        "status": 400,
        "detail": "jane@example.com is already a list member.",
        "instance": "995c5cb0-3280-4a6e-808b-3b096d0bb219",
    }

    error = parse_mailchimp_error(body, 400)

    assert error is not None
    assert error.title == "Member Exists"
    assert error.status == 400
    assert error.error_type.startswith("https://mailchimp.com/")


def test_parse_mailchimp_error_uses_http_status_when_missing() -> None:
    error = parse_mailchimp_error({"title": "Resource Not Found"}, 404)

    assert error is not None
    assert error.status == 404
    assert error.error_type == "unknown"


@pytest.mark.parametrize("body", [None, [], "text", {"status": "subscribed"}])
def test_parse_mailchimp_error_returns_none_for_other_bodies(body: object) -> None:
    assert parse_mailchimp_error(body, 500) is None


def test_result_ok_and_failed() -> None:
    ok = MailChimpResult(data={"id": "x"}, status_code=200)
    failed = MailChimpResult.failed(MailChimpFailure.HTTP_STATUS, status_code=500)

    assert ok.ok is True
    assert failed.ok is False
    assert failed.data is None
    assert failed.status_code == 500
    assert str(failed.failure) == "http_status"
