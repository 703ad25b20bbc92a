import json

import pytest

from polyglot_content.langs import (
    EMPTY,
    EN,
    ES,
    Lang,
    UnknownLangError,
    is_valid,
    native_name,
    parse,
)


def test_is_valid_success():
    assert is_valid("en") is True


def test_is_valid_ignores_case():
    assert is_valid("EN-gb") is True


def test_is_valid_failure():
    assert is_valid("foo") is False


def test_native_name():
    assert native_name(EN) == "English"


def test_lang_string():
    assert str(EN) == "en"
    assert str(parse("EN-gb")) == "en-GB"
    assert EN.__str__() == "en"


def test_lang_json_marshal():
    assert json.loads(ES.to_json()) == "es"
    mapping = {ES: "es-content", EN: "en-content"}
    encoded = json.dumps({json.loads(k.to_json()): v for k, v in mapping.items()})
    assert json.loads(encoded) == {"en": "en-content", "es": "es-content"}


def test_lang_json_unmarshal():
    assert Lang.from_json('"es"') == ES
    raw = json.loads('{"en": "en-content", "es": "es-content"}')
    content = {Lang.from_json(json.dumps(k)): v for k, v in raw.items()}
    assert content == {ES: "es-content", EN: "en-content"}


def test_lang_json_unmarshal_unknown_is_empty():
    assert Lang.from_json(b'"xx"') == EMPTY


def test_lang_json_unmarshal_not_string():
    with pytest.raises(ValueError):
        Lang.from_json("12")


def test_lang_parse():
    assert parse("es") == ES
    with pytest.raises(UnknownLangError) as info:
        parse("foo")
    assert str(info.value) == 'langs: unknown code "foo"'
    assert info.value.code == "foo"


def test_parse_ignores_case():
    assert parse("ES").code == "es"


def test_from_text():
    assert Lang.from_text("en-us").code == "en-US"
    assert Lang.from_text("zz").is_empty()


def test_db_round_trip():
    assert Lang.from_db(ES.to_db()) == ES
    assert Lang.from_db(b"en") == EN


def test_from_db_none():
    with pytest.raises(TypeError):
        Lang.from_db(None)


def test_from_db_wrong_type():
    with pytest.raises(TypeError):
        Lang.from_db(42)


def test_is_empty():
    assert Lang().is_empty() is True
    assert EN.is_empty() is False