# mtxstructs

Plain Python data structures for the Matrix client-server protocol, with
conversion to and from the JSON objects the protocol uses.

The package has no runtime dependencies. Every structure is a dataclass.
Structures read from the wire have a `from_json` class method that takes a
parsed JSON object (a `dict`). Structures sent to the wire have a `to_json`
method that returns one.

## Modules

- `mtxstructs.errors`: `ErrorCode`, `Error` (with `Error.from_json`),
  `error_code_to_string` and `error_code_from_string`. An unknown code is
  read as `ErrorCode.M_UNRECOGNIZED`. So is `M_NOT_FOUND`: it can be written
  but is not recognised when it is parsed.
- `mtxstructs.event_types`: `EventType`, `MessageType`,
  `event_type_from_string`, `event_type_to_string`, `event_type_of` (reads
  an event's `"type"` field) and `message_type_from_string` and
  `message_type_of` (read a content's `"msgtype"` field). An unknown name is
  read as `EventType.UNSUPPORTED` or `MessageType.UNKNOWN`.
- `mtxstructs.requests`: the request bodies `CreateRoom`, `Login`,
  `AvatarUrl`, `DisplayName`, `RoomInvite`, `TypingNotification`,
  `UploadKeys` and `QueryKeys`. The module also has the enums `Visibility`
  and `Preset`, with `visibility_to_string` and `preset_to_string`.
  `CreateRoom` and `Login` leave out optional fields that are empty.
- `mtxstructs.media_info`: `ThumbnailInfo`, `ImageInfo`, `FileInfo`,
  `AudioInfo` and `VideoInfo`.
- `mtxstructs.state`: room state contents. These are `Aliases`, `Avatar`,
  `CanonicalAlias`, `Create`, `Encryption`, `GuestAccess`,
  `HistoryVisibility`, `JoinRules`, `Member`, `Name`, `PinnedEvents`,
  `PowerLevels` and `Topic`. Their enums are `AccessState`, `Visibility`,
  `JoinRule` and `Membership`, each with a `*_to_string` and a
  `string_to_*` function.
- `mtxstructs.account_data`: `Tag`.
- `mtxstructs.encrypted`: `OlmCipherContent`, `OlmEncrypted`, `Encrypted`,
  `RoomKey`, `KeyRequest` and the `RequestAction` enum.
- `mtxstructs.messages`: the message contents `Text`, `Notice`, `Emote`,
  `Image`, `StickerImage`, `File`, `Audio` and `Video`, and `Redaction`.
- `mtxstructs.responses`: `ClaimKeys`, `KeyChanges`, `JoinedGroups` and
  `GroupProfile`. These are read only, so they have `from_json` alone.

## Examples

Reading a message:

```python
from mtxstructs.event_types import MessageType, message_type_of
from mtxstructs.messages import Text

content = {"msgtype": "m.text", "body": "hello"}
assert message_type_of(content) is MessageType.TEXT

text = Text.from_json(content)
print(text.body)  # hello
```

Building a request body:

```python
from mtxstructs.requests import CreateRoom, Preset, Visibility

request = CreateRoom(name="Lobby", preset=Preset.PUBLIC_CHAT,
                     visibility=Visibility.PUBLIC)
body = request.to_json()
# {'name': 'Lobby', 'is_direct': False, 'preset': 'public_chat', 'visibility': 'public'}
```

Interpreting an error reply:

```python
from mtxstructs.errors import Error, ErrorCode

err = Error.from_json({"errcode": "M_FORBIDDEN", "error": "not allowed"})
assert err.errcode is ErrorCode.M_FORBIDDEN
```

## Errors

A required field that is missing raises `KeyError`, as a missing key does in
a dictionary lookup. A field that has the wrong JSON type raises `TypeError`.
An example is a number where a string is expected.

## What this package does not do

This package only converts data. It does not include these:

- An HTTP client, or any way to talk to a homeserver.
- Parsing of whole sync, timeline, login or registration responses.
- Any encryption or decryption: the structures in `mtxstructs.encrypted`
  only carry ciphertexts and keys.
- Storage.

## Running the tests

```
pip install -e ".[test]"
pytest
```