import pytest

from medrecords.errors import InvalidPayloadError, MissingFieldError
from medrecords.services.body_capture import CapturedBody
from medrecords.services.validation import (
    REQUIRED_FIELDS,
    ensure_required_fields,
    parse_create_request,
    validate_create_request,
)


def test_parse_create_request_keeps_all_fields():
    body = CapturedBody(raw=b'{"description": "flu", "id_patient": 42, "id_user": 7, "extra": [1]}')

    request = parse_create_request(body)

    assert request == {"description": "flu", "id_patient": 42, "id_user": 7, "extra": [1]}


@pytest.mark.parametrize(
    "raw",
    [
        b"",
        b"{not json",
        b'["description", "id_patient", "id_user"]',
        b'"just a string"',
        b"null",
        b'{"description": NaN, "id_patient": 1, "id_user": 2}',
        b"\xff\xfe\x00",
    ],
)
def test_parse_create_request_rejects_invalid_payloads(raw):
    with pytest.raises(InvalidPayloadError) as exc_info:
        parse_create_request(CapturedBody(raw=raw))

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Formato JSON inválido"


def test_required_fields_order():
    assert REQUIRED_FIELDS == ("description", "id_patient", "id_user")


def test_ensure_required_fields_reports_first_missing_field():
    with pytest.raises(MissingFieldError) as exc_info:
        ensure_required_fields({"id_patient": 42})

    assert exc_info.value.field == "description"
    assert exc_info.value.message == "Falta el campo: description"
    assert exc_info.value.status_code == 400


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_ensure_required_fields_each_field(field):
    request = {"description": "flu", "id_patient": 42, "id_user": 7}
    del request[field]

    with pytest.raises(MissingFieldError) as exc_info:
        ensure_required_fields(request)

    assert exc_info.value.field == field


def test_ensure_required_fields_accepts_null_and_any_type():
    ensure_required_fields({"description": None, "id_patient": "42", "id_user": {"nested": True}})


def test_validate_create_request_logs_decoded_request(caplog):
    caplog.set_level("INFO", logger="medrecords.services.validation")

    request = validate_create_request(
        CapturedBody(raw='{"description": "gripe estacional", "id_patient": 1, "id_user": 2}'.encode())
    )

    assert request["description"] == "gripe estacional"
    assert "gripe estacional" in caplog.text


def test_parse_create_request_rejects_excessive_nesting():
    depth = 100_000
    raw = b'{"description": ' + b"[" * depth + b"]" * depth + b', "id_patient": 1, "id_user": 2}'

    with pytest.raises(InvalidPayloadError) as exc_info:
        parse_create_request(CapturedBody(raw=raw))

    assert exc_info.value.status_code == 400
