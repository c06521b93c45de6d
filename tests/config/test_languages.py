import re

import pytest
from docsite.config import LANGUAGES
from docsite.core.models import LanguageDescriptor, LanguageTable
from pydantic import ValidationError

TAG = re.compile(r"^[a-z]{2,3}(-[A-Za-z0-9]{2,8})*$")


def test_every_key_is_a_language_tag():
    assert LANGUAGES
    for code in LANGUAGES:
        assert TAG.match(code), code


def test_every_direction_is_ltr_or_rtl():
    assert {lang.dir for lang in LANGUAGES.values()} == {"ltr", "rtl"}


def test_every_descriptor_has_native_name():
    for code, lang in LANGUAGES.items():
        assert lang.native.strip(), code
        assert lang.name.strip(), code


def test_right_to_left_languages():
    rtl = sorted(code for code, lang in LANGUAGES.items() if lang.dir == "rtl")
    assert rtl == ["ar", "fa", "he"]


def test_region_tags_are_present():
    assert LANGUAGES["pt-BR"].native == "Português (Brasil)"
    assert LANGUAGES["zh-CN"].name == "Chinese (Simplified)"


def test_table_is_read_only():
    with pytest.raises(TypeError):
        LANGUAGES["xx"] = LanguageDescriptor(name="X", native="X")


def test_descriptor_is_frozen():
    with pytest.raises(ValidationError):
        LANGUAGES["en"].dir = "rtl"


class TestLanguageTableValidation:
    def test_rejects_unknown_direction(self):
        with pytest.raises(ValidationError):
            LanguageTable.validate_python(
                {"en": {"name": "English", "dir": "ttb", "native": "English"}}
            )

    def test_rejects_empty_native(self):
        with pytest.raises(ValidationError):
            LanguageTable.validate_python(
                {"en": {"name": "English", "dir": "ltr", "native": ""}}
            )

    @pytest.mark.parametrize("code", ["EN", "english", "en_US", "", "e"])
    def test_rejects_malformed_codes(self, code):
        with pytest.raises(ValidationError):
            LanguageTable.validate_python(
                {code: {"name": "English", "dir": "ltr", "native": "English"}}
            )

    def test_direction_defaults_to_ltr(self):
        table = LanguageTable.validate_python({"sv": {"name": "Swedish", "native": "Svenska"}})
        assert table["sv"].dir == "ltr"
