from mtxstructs.requests import (
    AvatarUrl,
    CreateRoom,
    DisplayName,
    Login,
    Preset,
    QueryKeys,
    RoomInvite,
    TypingNotification,
    UploadKeys,
    Visibility,
    preset_to_string,
    visibility_to_string,
)


def test_visibility_names():
    assert visibility_to_string(Visibility.PRIVATE) == "private"
    assert visibility_to_string(Visibility.PUBLIC) == "public"


def test_preset_names():
    assert preset_to_string(Preset.PRIVATE_CHAT) == "private_chat"
    assert preset_to_string(Preset.PUBLIC_CHAT) == "public_chat"
    assert preset_to_string(Preset.TRUSTED_PRIVATE_CHAT) == "trusted_private_chat"


def test_create_room_omits_empty_fields():
    obj = CreateRoom().to_json()
    assert set(obj) == {"is_direct", "preset", "visibility"}
    assert obj["is_direct"] is False


def test_create_room_full():
    request = CreateRoom(
        name="Lobby",
        topic="General talk",
        room_alias_name="lobby",
        invite=["@bob:example.com"],
        is_direct=True,
        preset=Preset.PUBLIC_CHAT,
        visibility=Visibility.PUBLIC,
    )
    assert request.to_json() == {
        "name": "Lobby",
        "topic": "General talk",
        "room_alias_name": "lobby",
        "invite": ["@bob:example.com"],
        "is_direct": True,
        "preset": "public_chat",
        "visibility": "public",
    }


def test_login_with_password():
    password = "password"
    obj = Login(user="alice", password=password).to_json()
    assert obj == {"password": password, "user": "alice", "type": "m.login.password"}


def test_login_omits_empty_optional_fields():
    obj = Login(user="alice", device_id="DEVICEID").to_json()
    assert "password" not in obj
    assert "token" not in obj
    assert obj["device_id"] == "DEVICEID"
    assert obj["user"] == "alice"


def test_simple_bodies():
    assert AvatarUrl("mxc://example.com/abc").to_json() == {"avatar_url": "mxc://example.com/abc"}
    assert DisplayName("Alice").to_json() == {"displayname": "Alice"}
    assert RoomInvite("@bob:example.com").to_json() == {"user_id": "@bob:example.com"}


def test_typing_notification():
    assert TypingNotification(typing=True, timeout=3000).to_json() == {
        "typing": True,
        "timeout": 3000,
    }


def test_upload_keys_empty():
    assert UploadKeys().to_json() == {}


def test_upload_keys_needs_user_id_for_device_keys():
    keys = {"device_id": "DEVICEID"}
    assert UploadKeys(device_keys=keys).to_json() == {}
    full = {"user_id": "@alice:example.com", "device_id": "DEVICEID"}
    otk = {"curve25519:AAAA": "placeholder"}
    obj = UploadKeys(device_keys=full, one_time_keys=otk).to_json()
    assert obj == {"device_keys": full, "one_time_keys": otk}


def test_query_keys():
    request = QueryKeys(timeout=5000, device_keys={"@alice:example.com": []}, token="token")
    assert request.to_json() == {
        "timeout": 5000,
        "device_keys": {"@alice:example.com": []},
        "token": "token",
    }