import pytest

from mtxstructs.encrypted import (
    Encrypted,
    KeyRequest,
    OlmCipherContent,
    OlmEncrypted,
    RequestAction,
    RoomKey,
)
from mtxstructs.event_types import EventType

ROOM_ID = "!room:example.com"

ENCRYPTED = {
    "algorithm": "m.megolm.v1.aes-sha2",
    "ciphertext": "ciphertext-body",
    "device_id": "DEVICEONE",
    "sender_key": "placeholder",
    "session_id": "session-1",
}

ROOM_KEY = {
    "algorithm": "m.megolm.v1.aes-sha2",
    "room_id": ROOM_ID,
    "session_id": "session-1",
    "session_key": "placeholder",
}

BODY = {
    "room_id": ROOM_ID,
    "sender_key": "placeholder",
    "session_id": "session-1",
    "algorithm": "m.megolm.v1.aes-sha2",
}


def _request(action, body=None):
    content = {"request_id": "req-1", "requesting_device_id": "DEVICEONE", "action": action}
    if body is not None:
        content["body"] = body
    return {"sender": "@alice:example.com", "type": "m.room_key_request", "content": content}


@pytest.mark.parametrize(
    "cls, content",
    [
        (OlmCipherContent, {"body": "ciphertext-body", "type": 1}),
        (Encrypted, ENCRYPTED),
        (RoomKey, ROOM_KEY),
        (KeyRequest, _request("request", BODY)),
        (KeyRequest, _request("request_cancellation")),
    ],
)
def test_round_trip(cls, content):
    assert cls.from_json(content).to_json() == content


@pytest.mark.parametrize(
    "cls, content, error",
    [
        (OlmCipherContent, {"body": "ciphertext-body", "type": "one"}, TypeError),
        (Encrypted, {"algorithm": "m.megolm.v1.aes-sha2"}, KeyError),
        (RoomKey, {**ROOM_KEY, "room_id": 7}, TypeError),
        (KeyRequest, _request("request"), KeyError),
    ],
)
def test_invalid_content(cls, content, error):
    with pytest.raises(error):
        cls.from_json(content)


def test_olm_encrypted_sets_algorithm():
    content = {
        "algorithm": "ignored",
        "sender_key": "placeholder",
        "ciphertext": {"placeholder": {"body": "ciphertext-body", "type": 0}},
    }
    msg = OlmEncrypted.from_json(content)
    assert msg.algorithm == "m.olm.v1.curve25519-aes-sha2"
    assert msg.ciphertext["placeholder"] == OlmCipherContent(body="ciphertext-body", type=0)
    assert msg.to_json() == {**content, "algorithm": "m.olm.v1.curve25519-aes-sha2"}


def test_key_request_fields():
    request = KeyRequest.from_json(_request("request", BODY))
    assert request.action is RequestAction.REQUEST
    assert request.type is EventType.ROOM_KEY_REQUEST
    assert (request.room_id, request.session_id) == (ROOM_ID, "session-1")


def test_key_request_serializes_megolm_algorithm():
    request = KeyRequest(sender="@alice:example.com", algorithm="other", room_id=ROOM_ID)
    assert request.to_json()["content"]["body"]["algorithm"] == "m.megolm.v1.aes-sha2"


def test_key_request_cancellation_has_no_body():
    request = KeyRequest.from_json(_request("request_cancellation"))
    assert request.action is RequestAction.CANCELLATION
    assert request.room_id == ""
    assert "body" not in request.to_json()["content"]