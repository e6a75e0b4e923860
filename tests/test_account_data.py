import pytest

from mtxstructs.account_data import Tag


def test_tag_round_trip():
    content = {"tags": {"m.favourite": {"order": 0.5}, "u.work": {}}}
    tag = Tag.from_json(content)
    assert tag.tags["m.favourite"] == {"order": 0.5}
    assert tag.to_json() == content


def test_tag_empty():
    assert Tag.from_json({"tags": {}}).to_json() == {"tags": {}}


def test_tag_missing_key():
    with pytest.raises(KeyError):
        Tag.from_json({})


def test_tag_wrong_type():
    with pytest.raises(TypeError):
        Tag.from_json({"tags": ["m.favourite"]})