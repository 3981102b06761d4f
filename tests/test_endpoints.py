"""Cada endpoint: método, ruta, query, cuerpo enviado y respuesta decodificada."""

import asyncio
import json
from datetime import date, datetime, timedelta, timezone

import httpx

from conftest import load_testdata, mock_client
from nursys import (
    ChangePasswordSubmitRequestMessage,
    LicenseType,
    ManageNurseListRequest,
    ManageNurseListSubmitRequestMessage,
    NotificationLookupSubmitRequestMessage,
    NurseLookupRequest,
    NurseLookupSubmitRequestMessage,
    NursysAPI,
    NursysClient,
    SubmissionActionCode,
    TransactionError,
)


def _run(handler, call):
    async def scenario():
        async with mock_client(handler) as client:
            return await call(client)

    return asyncio.run(scenario())


def _recorder(payload: bytes, seen: dict):
    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        seen["body"] = json.loads(request.content) if request.content else None
        return httpx.Response(200, content=payload, headers={"Content-Type": "application/json"})

    return handler


def test_client_satisfies_protocol():
    client = NursysClient("https://nursys.test/api", "acme", "1234!")
    assert isinstance(client, NursysAPI)
    asyncio.run(client.aclose())


def test_change_password(submit_response_json):
    seen: dict = {}
    request = ChangePasswordSubmitRequestMessage(new_password="MyN3wR34llyStr0ngAP1P4ssw0rd$1!0")

    resp = _run(_recorder(submit_response_json, seen), lambda c: c.change_password(request))

    assert seen["method"] == "POST"
    assert seen["path"] == "/api/changepassword"
    assert seen["body"] == {"NewPassword": "MyN3wR34llyStr0ngAP1P4ssw0rd$1!0"}

    tx = resp.transaction
    assert tx.transaction_id == "a523e0d4-01e1-4c8d-8dd9-54b269c315b7"
    assert tx.transaction_date == datetime(2024, 1, 4, 10, 18, 38, 966883, tzinfo=timezone(timedelta(hours=-6)))
    assert tx.transaction_comment == "Submit lookup successful. "
    assert tx.success_flag is True
    assert tx.errors == []


def test_change_password_rejected_is_a_business_failure_not_an_exception():
    seen: dict = {}
    payload = load_testdata("ChangePasswordSubmitResponseMessage_Failed.json")
    request = ChangePasswordSubmitRequestMessage(new_password="short")

    resp = _run(_recorder(payload, seen), lambda c: c.change_password(request))

    assert seen["body"] == {"NewPassword": "short"}
    tx = resp.transaction
    assert tx.transaction_id == "xfaca386-x034-41x8-90xf-96xd23318348"
    assert tx.transaction_date == datetime(2021, 8, 31, 15, 47, 0, 265942, tzinfo=timezone(timedelta(hours=-5)))
    assert tx.transaction_comment == ""
    assert tx.success_flag is False
    assert tx.errors == [
        TransactionError(error_id=210, error_message="Password must be between 8 and 50 characters in length.")
    ]


def test_manage_nurse_list_sends_required_fields_and_omits_empty_optionals(submit_response_json):
    seen: dict = {}
    request = ManageNurseListSubmitRequestMessage(
        requests=[
            ManageNurseListRequest(
                submission_action_code=SubmissionActionCode.ADD,
                jurisdiction_abbreviation="TX",
                license_type=LicenseType.RN,
                license_number="123456",
                address1="1 Main St",
                city="Austin",
                state="TX",
                zip="78701",
                last_four_ssn="1234",
                birth_year=1980,
                notifications_enabled="Y",
                reminders_enabled="N",
                record_id="emp-42",
            )
        ]
    )

    resp = _run(_recorder(submit_response_json, seen), lambda c: c.manage_nurse_list(request))

    assert seen["method"] == "POST"
    assert seen["path"] == "/api/managenurselist"
    assert seen["body"] == {
        "ManageNurseListRequests": [
            {
                "SubmissionActionCode": "A",
                "JurisdictionAbbreviation": "TX",
                "LicenseType": "RN",
                "LicenseNumber": "123456",
                "Address1": "1 Main St",
                "City": "Austin",
                "State": "TX",
                "Zip": "78701",
                "LastFourSSN": "1234",
                "BirthYear": 1980,
                "NotificationsEnabled": "Y",
                "RemindersEnabled": "N",
                "RecordId": "emp-42",
            }
        ]
    }
    assert resp.transaction.success_flag is True


def test_get_manage_nurse_list_result_accepts_empty_string_ids():
    seen: dict = {}
    payload = json.dumps(
        {
            "ProcessingCompleteFlag": True,
            "Transaction": {
                "TransactionId": "tx-1",
                "TransactionDate": "2024-01-04T10:18:38",
                "TransactionSuccessFlag": True,
            },
            "ManageNurseListResponses": [
                {
                    "SuccessFlag": False,
                    "Errors": [{"ErrorID": 101, "ErrorMessage": "Invalid license number."}],
                    "ManageNurseListRequest": {
                        "SubmissionActionCode": "A",
                        "NcsbnId": "",
                        "BirthYear": "",
                        "LicenseNumber": "X",
                    },
                }
            ],
        }
    ).encode()

    resp = _run(_recorder(payload, seen), lambda c: c.get_manage_nurse_list_result("tx-1"))

    assert seen["method"] == "GET"
    assert seen["path"] == "/api/managenurselist"
    assert seen["params"] == {"transactionId": "tx-1"}
    assert seen["body"] is None
    assert resp.processing_complete is True
    assert resp.transaction.transaction_date == datetime(2024, 1, 4, 10, 18, 38, tzinfo=timezone.utc)
    item = resp.responses[0]
    assert item.success_flag is False
    assert item.errors[0].error_id == 101
    assert item.request is not None
    assert item.request.ncsbn_id == ""
    assert item.request.birth_year == ""


def test_nurse_lookup(submit_response_json):
    seen: dict = {}
    request = NurseLookupSubmitRequestMessage(
        requests=[
            NurseLookupRequest(jurisdiction_abbreviation="TX", license_type="RN", license_number="123456"),
            NurseLookupRequest(ncsbn_id="99999999", record_id="emp-7"),
        ]
    )

    resp = _run(_recorder(submit_response_json, seen), lambda c: c.nurse_lookup(request))

    assert seen["method"] == "POST"
    assert seen["path"] == "/api/nurselookup"
    assert seen["body"] == {
        "NurseLookupRequests": [
            {"JurisdictionAbbreviation": "TX", "LicenseType": "RN", "LicenseNumber": "123456"},
            {"NcsbnId": "99999999", "RecordId": "emp-7"},
        ]
    }
    assert resp.transaction.transaction_id == "a523e0d4-01e1-4c8d-8dd9-54b269c315b7"


def test_get_nurse_lookup_result_decodes_nested_payload():
    seen: dict = {}
    payload = load_testdata("NurseLookupRetrieveResponseMessage.json")

    resp = _run(_recorder(payload, seen), lambda c: c.get_nurse_lookup_result("5b0c6a8e"))

    assert seen["path"] == "/api/nurselookup"
    assert seen["params"] == {"transactionId": "5b0c6a8e"}
    assert resp.processing_complete is True
    assert resp.transaction.errors == []
    assert resp.transaction.transaction_date == datetime(
        2024, 1, 4, 10, 20, 1, 500000, tzinfo=timezone(timedelta(hours=-6))
    )

    found, missing = resp.responses
    assert found.success_flag is True
    assert found.errors == []
    assert found.request is not None and found.request.record_id == "emp-42"

    lic = found.licenses[0]
    assert lic.license_status == "Current"
    assert lic.messages == []
    discipline = lic.disciplines[0]
    assert discipline.date_action_was_taken == datetime(2020, 2, 3, tzinfo=timezone.utc)
    action = discipline.initial_actions[0]
    assert action.start_date == datetime(2020, 2, 3, tzinfo=timezone(timedelta(hours=-6)))
    assert action.end_date is None
    assert discipline.initial_action_documents[0].document_id == "DOC-001"
    assert found.rn_authorizations_to_practice[0].code == "M"

    assert missing.success_flag is False
    assert missing.errors[0].error_message == "Nurse not found in nurse list."
    assert missing.licenses == []


def test_notification_lookup_sends_plain_dates(submit_response_json):
    seen: dict = {}
    request = NotificationLookupSubmitRequestMessage(start_date=date(2024, 1, 1), end_date=date(2024, 1, 31))

    _run(_recorder(submit_response_json, seen), lambda c: c.notification_lookup(request))

    assert seen["method"] == "POST"
    assert seen["path"] == "/api/notificationlookup"
    assert seen["body"] == {"StartDate": "2024-01-01", "EndDate": "2024-01-31"}


def test_get_notification_lookup_result():
    seen: dict = {}
    payload = json.dumps(
        {
            "ProcessingCompleteFlag": False,
            "Transaction": {
                "TransactionId": "tx-2",
                "TransactionDate": "2024-02-01T08:00:00.123-06:00",
                "TransactionSuccessFlag": True,
                "TransactionErrors": [],
            },
            "NotificationLookupResponses": [
                {
                    "JurisdictionAbbreviation": "CA",
                    "Jurisdiction": "California-RN",
                    "LicenseNumber": "555",
                    "LicenseType": "RN",
                    "FirstName": "JOHN",
                    "LastName": "ROE",
                    "NotificationDate": "2024-01-15 00:00:00",
                    "LicenseStatusChange": "Expired",
                }
            ],
        }
    ).encode()

    resp = _run(_recorder(payload, seen), lambda c: c.get_notification_lookup_result("tx-2"))

    assert seen["path"] == "/api/notificationlookup"
    assert seen["params"] == {"transactionId": "tx-2"}
    assert resp.processing_complete is False
    item = resp.responses[0]
    assert item.notification_date == datetime(2024, 1, 15, tzinfo=timezone.utc)
    assert item.license_status_change == "Expired"
    assert item.discipline_status_change is None


def test_retrieve_documents_joins_ids_with_commas():
    seen: dict = {}
    payload = json.dumps(
        {
            "Transaction": {
                "TransactionId": "tx-3",
                "TransactionDate": "2024-02-01T08:00:00-06:00",
                "TransactionSuccessFlag": True,
            },
            "Documents": [
                {"SuccessFlag": True, "DocumentId": "DOC-001", "DocumentName": "order.pdf", "DocumentContents": "JVBERi0="},
                {"SuccessFlag": False, "DocumentId": "DOC-002"},
            ],
        }
    ).encode()

    resp = _run(_recorder(payload, seen), lambda c: c.retrieve_documents(["DOC-001", "DOC-002"]))

    assert seen["method"] == "GET"
    assert seen["path"] == "/api/retrievedocuments"
    assert seen["params"] == {"documentIds": "DOC-001,DOC-002"}
    assert [d.document_id for d in resp.documents] == ["DOC-001", "DOC-002"]
    assert resp.documents[0].document_contents == "JVBERi0="
    assert resp.documents[1].success_flag is False


def test_missing_transaction_fields_take_empty_values():
    payload = b'{"ProcessingCompleteFlag": false, "Transaction": {"TransactionId": "tx-9"}}'

    resp = _run(_recorder(payload, {}), lambda c: c.get_nurse_lookup_result("tx-9"))

    tx = resp.transaction
    assert tx.transaction_id == "tx-9"
    assert tx.transaction_date is None
    assert tx.success_flag is False
    assert tx.errors == []
    assert resp.responses == []
