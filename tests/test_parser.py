"""Tests for spcial.parser."""

import textwrap

import pytest

from spcial.errors import SpcialSyntaxError, SpcialValueError
from spcial.parser import parse
from spcial.values import Nothing, VBool, VList, VNumber, VObject, VText


def src(text: str) -> str:
    return textwrap.dedent(text).lstrip("\n")


class TestAssignments:
    def test_scalars(self):
        obj = parse(src('''
            name = "Ada"
            age = 36
            active = True
            spouse = Nothing
        '''))
        assert obj == VObject({
            "name": VText("Ada"),
            "age": VNumber(36),
            "active": VBool(True),
            "spouse": Nothing,
        })

    def test_key_order_preserved(self):
        obj = parse("b = 1\na = 2\n")
        assert list(obj.entries) == ["b", "a"]

    def test_later_assignment_wins(self):
        assert parse("a = 1\na = 2")["a"] == VNumber(2)

    def test_trailing_comment(self):
        assert parse("age = 36 # years")["age"] == VNumber(36)

    def test_hash_inside_text(self):
        assert parse('tag = "#1"')["tag"] == VText("#1")

    def test_inline_array(self):
        assert parse('tags = ["lang","math"]')["tags"] == VList(
            [VText("lang"), VText("math")]
        )

    def test_key_with_spaces(self):
        assert parse("my key = 1")["my key"] == VNumber(1)

    def test_comments_and_blank_lines(self):
        obj = parse("# header\n\n  # indented comment\na = 1\n\n")
        assert obj == VObject({"a": VNumber(1)})

    def test_empty_document(self):
        assert parse("") == VObject()


class TestNestedObjects:
    def test_address_block(self):
        obj = parse(src('''
            address:
                city = "NYC"
                zip = 10001
        '''))
        assert obj == VObject({
            "address": VObject({"city": VText("NYC"), "zip": VNumber(10001)})
        })

    def test_line_after_block_is_parsed(self):
        obj = parse(src('''
            address:
                city = "NYC"
            name = "Ada"
        '''))
        assert obj["name"] == VText("Ada")
        assert obj["address"] == VObject({"city": VText("NYC")})

    def test_deep_nesting(self):
        obj = parse(src('''
            a:
                b:
                    c = 1
                d = 2
        '''))
        assert obj == VObject({
            "a": VObject({"b": VObject({"c": VNumber(1)}), "d": VNumber(2)})
        })

    def test_empty_object(self):
        assert parse("a:\nb = 1") == VObject({"a": VObject(), "b": VNumber(1)})

    def test_header_with_illegal_character(self):
        with pytest.raises(SpcialSyntaxError) as info:
            parse("a = 1\nmy-key:\n    x = 1")
        assert info.value.line_num == 1
        assert info.value.line == "my-key:"


class TestMultiLineArrays:
    def test_scalar_elements(self):
        obj = parse(src('''
            name = "Ada"
            age = 36
            active = True
            tags := 
                * lang
                * math
        '''))
        assert obj == VObject({
            "name": VText("Ada"),
            "age": VNumber(36),
            "active": VBool(True),
            "tags": VList([VText("lang"), VText("math")]),
        })

    def test_typed_elements(self):
        obj = parse("xs :=\n    * 1\n    * 2.5\n")
        assert obj["xs"] == VList([VNumber(1), VNumber(2.5)])

    def test_object_elements(self):
        obj = parse(src('''
            rows :=
                * :
                    id = 1
                    name = "a"
                * :
                    id = 2
                    name = "b"
            count = 2
        '''))
        assert obj == VObject({
            "rows": VList([
                VObject({"id": VNumber(1), "name": VText("a")}),
                VObject({"id": VNumber(2), "name": VText("b")}),
            ]),
            "count": VNumber(2),
        })

    def test_object_element_with_nested_object(self):
        obj = parse(src('''
            rows :=
                * :
                    meta:
                        ok = True
        '''))
        assert obj["rows"] == VList([
            VObject({"meta": VObject({"ok": VBool(True)})})
        ])

    def test_nested_array_inside_element(self):
        obj = parse(src('''
            rows :=
                * :
                    tags :=
                        * a
                        * b
                * :
                    tags :=
                        * c
        '''))
        assert obj["rows"] == VList([
            VObject({"tags": VList([VText("a"), VText("b")])}),
            VObject({"tags": VList([VText("c")])}),
        ])

    def test_empty_array(self):
        assert parse("xs :=\nn = 1") == VObject({"xs": VList(), "n": VNumber(1)})

    def test_mixed_elements_is_value_error(self):
        with pytest.raises(SpcialValueError):
            parse("xs :=\n    * 1\n    * \"a\"\n")

    def test_mixed_object_and_scalar_is_value_error(self):
        with pytest.raises(SpcialValueError):
            parse("xs :=\n    * 1\n    * :\n        a = 1\n")

    def test_child_without_marker(self):
        with pytest.raises(SpcialSyntaxError) as info:
            parse("xs :=\n    a = 1\n")
        assert info.value.line_num == 1

    def test_extra_line_in_scalar_element(self):
        with pytest.raises(SpcialSyntaxError) as info:
            parse("xs :=\n    * 1\n        2\n")
        assert info.value.line_num == 2

    def test_named_object_element(self):
        with pytest.raises(SpcialSyntaxError):
            parse("xs :=\n    * row:\n        a = 1\n")

    def test_bad_scalar_element_reports_marker_line(self):
        with pytest.raises(SpcialSyntaxError) as info:
            parse('xs :=\n    * "open\n')
        assert info.value.line_num == 1
        assert info.value.line == '    * "open'


class TestErrors:
    def test_stray_marker(self):
        with pytest.raises(SpcialSyntaxError) as info:
            parse("a = 1\n* lang\n")
        assert info.value.line_num == 1

    def test_unrecognised_line(self):
        with pytest.raises(SpcialSyntaxError) as info:
            parse("a = 1\njust words\n")
        assert info.value.line_num == 1
        assert info.value.line == "just words"

    def test_unterminated_text(self):
        with pytest.raises(SpcialSyntaxError) as info:
            parse('name = "Ada')
        assert info.value.line_num == 0
        assert info.value.line == 'name = "Ada'

    def test_nested_error_uses_absolute_line_number(self):
        with pytest.raises(SpcialSyntaxError) as info:
            parse("a:\n    b:\n        c = oops\n")
        assert info.value.line_num == 2

    def test_evaluator_error_is_chained(self):
        with pytest.raises(SpcialSyntaxError) as info:
            parse("a = [1,,2]")
        assert isinstance(info.value.__cause__, SpcialSyntaxError)
        assert info.value.line_num == 0

    def test_value_error_not_reannotated(self):
        with pytest.raises(SpcialValueError):
            parse('a = [1,"x"]')

    def test_non_finite_is_value_error(self):
        with pytest.raises(SpcialValueError):
            parse("a = NaN")

    def test_inline_object_is_syntax_error(self):
        with pytest.raises(SpcialSyntaxError):
            parse('a = [{"b": 1}]')
