"""
SubmissionService: submit, list and status.
"""
from datetime import datetime

import pytest

from contact_api.services.submission_service import SubmissionService
from contact_api.utils.exceptions import SubmissionStoreError, ValidationError
from contact_api.utils.helpers import SubmissionIdFactory, utc_now


def test_valid_submission_is_stored(service, store, valid_form):
    started = utc_now()
    submission = service.submit(valid_form)

    records = store.read_all()
    assert len(records) == 1
    record = records[0]
    assert record["id"] == submission.id
    assert record["fullName"] == "Jane Doe"
    assert record["phone"] == "612345678"
    assert record["status"] == "new"
    assert record["source"] == "website-form"
    assert record["privacyAccepted"] is False
    assert datetime.fromisoformat(record["submittedAt"]) >= started


def test_record_has_every_field_with_defaults(service, store, valid_form):
    service.submit(valid_form)
    record = store.read_all()[0]
    assert set(record) == {
        "id", "fullName", "phone", "email", "address", "city", "postalCode",
        "propertyType", "atticType", "privacyAccepted", "submittedAt", "status", "source",
    }
    for field in ("email", "address", "city", "postalCode", "propertyType", "atticType"):
        assert record[field] == ""


def test_example_payload_is_normalized(service, store):
    service.submit({"fullName": " A B ", "phone": "6 1234 5678"})
    record = store.read_all()[0]
    assert record["fullName"] == "A B"
    assert record["phone"] == "612345678"


@pytest.mark.parametrize("payload, field", [
    ({"phone": "612345678"}, "fullName"),
    ({"fullName": "  ", "phone": "612345678"}, "fullName"),
    ({"fullName": "Jane", "phone": "12345"}, "phone"),
    ({"fullName": "Jane", "phone": "123 456 78a"}, "phone"),
    ({"fullName": "Jane", "phone": ""}, "phone"),
])
def test_rejected_payload_leaves_store_unchanged(service, store, payload, field):
    service.submit({"fullName": "Existing", "phone": "600000000"})
    before = store.read_all()

    with pytest.raises(ValidationError) as exc_info:
        service.submit(payload)

    assert exc_info.value.field == field
    assert store.read_all() == before


def test_round_trip_preserves_order_and_fields(service, store):
    forms = [
        {
            "fullName": f" Cliente {i} ",
            "phone": f"6{i:02d} 123 456",
            "email": f"cliente{i}@correo.es",
            "city": "Valencia ",
            "postalCode": "46001",
            "propertyType": "piso",
            "atticType": "transitable",
            "privacyAccepted": True,
        }
        for i in range(5)
    ]
    for form in forms:
        service.submit(form)

    records = store.read_all()
    assert len(records) == len(forms)
    for i, record in enumerate(records):
        assert record["fullName"] == f"Cliente {i}"
        assert record["phone"] == f"6{i:02d}123456"
        assert record["email"] == f"cliente{i}@correo.es"
        assert record["city"] == "Valencia"
        assert record["propertyType"] == "piso"
        assert record["atticType"] == "transitable"
        assert record["privacyAccepted"] is True
    ids = [r["id"] for r in records]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)


def test_store_failure_surfaces_as_store_error(service, data_file, valid_form):
    data_file.parent.mkdir(parents=True)
    data_file.write_text("not json", encoding="utf-8")

    with pytest.raises(SubmissionStoreError):
        service.submit(valid_form)
    assert data_file.read_text(encoding="utf-8") == "not json"


def test_strict_service_checks_email(store):
    strict_service = SubmissionService(store, strict=True)
    with pytest.raises(ValidationError) as exc_info:
        strict_service.submit({"fullName": "Jane", "phone": "612345678", "email": "nope"})
    assert exc_info.value.field == "email"
    assert store.count() == 0


def test_status_is_stable(service):
    first = service.status()
    assert first["status"] == "ok"
    assert first["message"] == "Server is running"
    assert first["version"] == "test"
    assert service.status() == first


def test_list_submissions_is_idempotent(service, valid_form):
    service.submit(valid_form)
    assert service.list_submissions() == service.list_submissions()


def test_id_factory_never_repeats():
    factory = SubmissionIdFactory(clock=lambda: 1700000000.0)
    assert [factory.next_id() for _ in range(3)] == [1700000000000, 1700000000001, 1700000000002]


def test_id_factory_follows_clock():
    ticks = iter([1.0, 2.0])
    factory = SubmissionIdFactory(clock=lambda: next(ticks))
    assert factory.next_id() == 1000
    assert factory.next_id() == 2000
