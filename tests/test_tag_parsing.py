"""Tests for field annotation parsing."""

import dataclasses
from dataclasses import dataclass, field

import pytest

from html_formgen.forms.exceptions import InvalidOptionSyntaxError, UnknownOptionKeyError
from html_formgen.forms.render_options import RenderOptions, form_field
from html_formgen.forms.tag_parsing import options_from_field, parse_options, parse_tag


@dataclass
class Annotated:
    plain: str = ""
    aliased: str = field(default="", metadata={"form": "email,type=email,class=wide,id=mail"})
    unnamed: str = field(default="", metadata={"form": ",type=password"})
    option_first: str = field(default="", metadata={"form": "type=hidden,value=x"})
    typed: int = form_field("age", type="range", css_class="slider", default=0)
    other_tag: str = field(default="", metadata={"forms": "renamed"})


def _field(name):
    return next(f for f in dataclasses.fields(Annotated) if f.name == name)


def test_parse_tag_splits_alias_and_options():
    assert parse_tag("username,type=text,class=wide") == ("username", ["type=text", "class=wide"])


def test_parse_tag_leading_comma_keeps_empty_alias():
    assert parse_tag(",type=password") == ("", ["type=password"])


def test_parse_tag_option_in_first_segment():
    """A first segment with '=' is an option, not a name."""
    assert parse_tag("type=password,id=pw") == ("", ["id=pw", "type=password"])


def test_parse_options_fills_every_key():
    options = parse_options(["type=text", "class=a b", "id=x", "value=hello"])
    assert options == RenderOptions(type="text", css_class="a b", id="x", value="hello")


@pytest.mark.parametrize("option", ["type", "type=a=b", ""])
def test_parse_options_rejects_malformed_option(option):
    with pytest.raises(InvalidOptionSyntaxError):
        parse_options([option])


def test_parse_options_rejects_unknown_key():
    with pytest.raises(UnknownOptionKeyError, match="placeholder"):
        parse_options(["placeholder=Your name"])


def test_options_from_field_without_annotation_uses_attribute_name():
    assert options_from_field(_field("plain")) == RenderOptions(name="plain")


def test_options_from_field_with_alias():
    options = options_from_field(_field("aliased"))
    assert options == RenderOptions(type="email", css_class="wide", id="mail", name="email")


def test_options_from_field_leading_comma_and_option_first():
    assert options_from_field(_field("unnamed")) == RenderOptions(type="password", name="unnamed")
    assert options_from_field(_field("option_first")) == RenderOptions(
        type="hidden", name="option_first", value="x"
    )


def test_options_from_field_typed_annotation():
    assert options_from_field(_field("typed")) == RenderOptions(type="range", css_class="slider", name="age")


def test_options_from_field_custom_tag_name():
    assert options_from_field(_field("other_tag")).name == "other_tag"
    assert options_from_field(_field("other_tag"), "forms").name == "renamed"


def test_options_from_field_error_names_the_field():
    @dataclass
    class Broken:
        bad: str = field(default="", metadata={"form": "bad,size=3"})

    with pytest.raises(UnknownOptionKeyError, match="field 'bad'"):
        options_from_field(dataclasses.fields(Broken)[0])


def test_form_field_rejects_non_string_options():
    with pytest.raises(InvalidOptionSyntaxError):
        form_field(type=3)


def test_options_from_field_rejects_non_string_annotation():
    @dataclass
    class Odd:
        size: int = field(default=0, metadata={"form": 3})

    with pytest.raises(InvalidOptionSyntaxError, match="field 'size' must be a string or RenderOptions, got int"):
        options_from_field(dataclasses.fields(Odd)[0])
