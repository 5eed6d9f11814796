"""Tests for the generic tree adapter, the XML parser and the markup helpers."""

import pytest

from aeo_transform.errors import MalformedInputError, XmlParseError
from aeo_transform.markup import clean, esc, typed
from aeo_transform.tree import as_list, child, parse_value, parse_xml, to_number


class TestAsList:
    def test_absent_is_empty(self):
        assert as_list(None) == []

    def test_falsy_is_empty(self):
        assert as_list("") == []

    def test_list_is_returned_unchanged(self):
        items = [{"name": "a"}, {"name": "b"}]
        assert as_list(items) is items

    def test_single_node_is_wrapped(self):
        assert as_list({"name": "a"}) == [{"name": "a"}]
        assert as_list("https://example.com") == ["https://example.com"]

    def test_single_and_repeated_tags_read_the_same(self):
        one = parse_xml("<r><sameAs>a</sameAs></r>")["r"]
        many = parse_xml("<r><sameAs>a</sameAs><sameAs>b</sameAs></r>")["r"]
        assert as_list(one["sameAs"]) == ["a"]
        assert as_list(many["sameAs"]) == ["a", "b"]


class TestChild:
    def test_follows_nested_path(self):
        node = {"image": {"ImageObject": {"url": "x.png"}}}
        assert child(node, "image", "ImageObject", "url") == "x.png"

    def test_missing_step_gives_none(self):
        assert child({"image": {}}, "image", "ImageObject", "url") is None

    def test_non_mapping_gives_none(self):
        assert child("", "headline") is None
        assert child({"body": "text only"}, "body", "p") is None


class TestToNumber:
    def test_numeric_string(self):
        assert to_number("2") == 2
        assert isinstance(to_number("2"), int)
        assert to_number("2.5") == 2.5

    def test_numbers_pass_through(self):
        assert to_number(3) == 3

    @pytest.mark.parametrize("value", ["two", "", None, True])
    def test_non_numeric_raises(self, value):
        with pytest.raises(MalformedInputError):
            to_number(value, field="position")

    def test_malformed_input_is_a_value_error(self):
        with pytest.raises(ValueError):
            to_number("abc")


class TestParseValue:
    def test_integers_and_decimals(self):
        assert parse_value("42") == 42
        assert parse_value("19.99") == 19.99
        assert parse_value("20.00") == 20

    def test_leading_zeros_stay_text(self):
        assert parse_value("0012345678905") == "0012345678905"

    def test_other_text_unchanged(self):
        assert parse_value("PT30M") == "PT30M"
        assert parse_value("1.2.3") == "1.2.3"


class TestParseXml:
    def test_declaration_precedes_root(self):
        doc = parse_xml('<?xml version="1.0" encoding="UTF-8"?><Article><headline>Hi</headline></Article>')
        assert list(doc) == ["?xml", "Article"]
        assert doc["?xml"] == {"version": "1.0", "encoding": "UTF-8"}

    def test_declaration_after_byte_order_mark(self):
        doc = parse_xml(b'\xef\xbb\xbf<?xml version="1.0"?><Product/>')
        assert list(doc) == ["?xml", "Product"]
        assert doc["?xml"] == {"version": "1.0"}

    def test_text_input_ignores_declared_encoding(self):
        doc = parse_xml('<?xml version="1.0" encoding="ISO-8859-1"?><Article><headline>café</headline></Article>')
        assert doc["Article"]["headline"] == "café"
        assert doc["?xml"]["encoding"] == "ISO-8859-1"

    def test_bytes_input_uses_declared_encoding(self):
        raw = '<?xml version="1.0" encoding="ISO-8859-1"?><Article><headline>café</headline></Article>'
        doc = parse_xml(raw.encode("latin-1"))
        assert doc["Article"]["headline"] == "café"

    def test_processing_instructions_are_keyed(self):
        doc = parse_xml('<?xml-stylesheet href="a.xsl"?><Product/>')
        assert list(doc) == ["?xml-stylesheet", "Product"]

    def test_attributes_merge_with_children(self):
        doc = parse_xml('<Offer price="10"><priceCurrency>EUR</priceCurrency></Offer>')
        assert doc["Offer"] == {"price": "10", "priceCurrency": "EUR"}

    def test_text_next_to_attributes(self):
        doc = parse_xml('<r><name lang="en">Shop</name></r>')
        assert doc["r"]["name"] == {"lang": "en", "#text": "Shop"}

    def test_repeated_tags_keep_order(self):
        doc = parse_xml("<r><p>one</p><p>two</p><p>three</p></r>")
        assert doc["r"]["p"] == ["one", "two", "three"]

    def test_empty_element_is_empty_string(self):
        assert parse_xml("<r><p/></r>")["r"]["p"] == ""

    def test_numeric_text_parsed(self):
        doc = parse_xml("<r><position>2</position></r>")
        assert doc["r"]["position"] == 2

    def test_numeric_parsing_can_be_disabled(self):
        doc = parse_xml("<r><position>2</position></r>", parse_tag_values=False)
        assert doc["r"]["position"] == "2"

    def test_text_is_trimmed_and_entities_decoded(self):
        doc = parse_xml("<r><t>\n   Fish &amp; Chips  \n</t></r>")
        assert doc["r"]["t"] == "Fish & Chips"

    def test_comments_dropped(self):
        doc = parse_xml("<r><!-- note --><a>1</a></r>")
        assert doc["r"] == {"a": 1}

    def test_namespace_prefix_kept(self):
        doc = parse_xml('<r xmlns:x="urn:x"><x:a>v</x:a></r>')
        assert doc["r"]["x:a"] == "v"

    def test_syntax_error(self):
        with pytest.raises(XmlParseError):
            parse_xml("<Article><headline></Article>")


class TestEsc:
    def test_escapes_markup_characters(self):
        assert esc('<a href="x">Tom & Jerry</a>') == "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&lt;/a&gt;"

    def test_absent_value_is_empty(self):
        assert esc() == ""
        assert esc(None) == ""

    def test_numbers_become_text(self):
        assert esc(129.99) == "129.99"


class TestClean:
    def test_drops_none_and_empty_lists(self):
        obj = {"a": 1, "b": None, "c": [], "d": "", "e": [1]}
        assert clean(obj) == {"a": 1, "d": "", "e": [1]}

    def test_keeps_listed_keys(self):
        assert clean({"offers": [], "x": None}, keep=("offers",)) == {"offers": []}

    def test_idempotent(self):
        once = clean({"a": None, "b": [], "c": {"@type": "Thing"}, "d": 0})
        twice = clean(dict(once))
        assert once == twice

    def test_typed_prunes(self):
        assert typed("Person", name="Ann", url=None) == {"@type": "Person", "name": "Ann"}
