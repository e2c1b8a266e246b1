#!/usr/bin/env python3
"""Unit tests for the HAL XML to Document converter."""

import defusedxml.ElementTree as ET
import pytest

from hal_core import MalformedInputError, MissingRequiredAttributeError
from hal_core.services.domain.xml_to_document.converter import (
    decode_xml,
    document_from_xml,
    element_to_data,
)
from tests.fixtures.hal_fixtures import ORDERS_XML, nested_xml
from tests.utils.document_helpers import assert_link, embedded_depth


class TestXmlDecoding:
    """Test suite for decoding HAL XML resources."""

    def test_identity_from_href(self):
        doc = document_from_xml(ORDERS_XML)

        assert doc.get_uri() == "/orders"

    def test_missing_href_is_empty_identity(self):
        doc = document_from_xml("<resource><name>widget</name></resource>")

        assert doc.get_uri() == ""
        assert doc.get_data() == {"name": "widget"}

    def test_links_strip_rel_and_href(self):
        doc = document_from_xml(ORDERS_XML)

        assert_link(doc, "next", "/orders?page=2", {})
        assert_link(doc, "ea:find", "/orders{?id}", {"templated": "true"})
        assert_link(doc, "ea:admin", "/admins/2", {"title": "Fred"}, index=0)
        assert_link(doc, "ea:admin", "/admins/5", {"title": "Kate"}, index=1)

    def test_curie_resolution_after_decode(self):
        doc = document_from_xml(ORDERS_XML)

        assert doc.get_link("ea:widget")[0].target == "http://example.com/docs/rels/widget"

    def test_data_excludes_links_and_resources(self):
        doc = document_from_xml(ORDERS_XML, max_depth=1)

        assert doc.get_data() == {"currentlyProcessing": "14", "shippedToday": "20"}

    def test_depth_zero_drops_resources(self):
        doc = document_from_xml(ORDERS_XML, max_depth=0)

        assert doc.get_resources() == {}

    def test_embedded_identity_from_child_element(self):
        doc = document_from_xml(ORDERS_XML, max_depth=1)

        orders = doc.get_resources()["ea:order"]
        assert [order.get_uri() for order in orders] == ["/orders/123", "/orders/124"]
        assert orders[0].get_data() == {"total": "30.00", "currency": "USD", "status": "shipped"}
        assert_link(orders[0], "ea:basket", "/baskets/98712")

    @pytest.mark.parametrize("levels,max_depth", [(3, 0), (3, 1), (3, 3), (2, 4)])
    def test_depth_bound(self, levels, max_depth):
        doc = document_from_xml(nested_xml(levels), max_depth)

        assert embedded_depth(doc) == min(levels, max_depth)

    def test_accepts_parsed_element(self):
        root = ET.fromstring(ORDERS_XML)

        doc = document_from_xml(root, max_depth=1)

        assert doc.get_uri() == "/orders"
        assert len(doc.get_resources()["ea:order"]) == 2

    def test_decode_xml_on_element(self):
        root = ET.fromstring('<resource href="/a"><link rel="up" href="/"/></resource>')

        doc = decode_xml(root)

        assert_link(doc, "up", "/")


class TestXmlErrors:
    """Test suite for the XML error policy."""

    @pytest.mark.parametrize("text", ["", "<resource>", "<resource></other>", "not xml"])
    def test_malformed_xml(self, text):
        with pytest.raises(MalformedInputError):
            document_from_xml(text)

    def test_entity_declarations_rejected(self):
        text = """<?xml version="1.0"?>
<!DOCTYPE resource [<!ENTITY boom "boom">]>
<resource><name>&boom;</name></resource>"""

        with pytest.raises(MalformedInputError):
            document_from_xml(text)

    @pytest.mark.parametrize("link", ['<link href="/a"/>', '<link rel="next"/>'])
    def test_link_missing_required_attribute(self, link):
        with pytest.raises(MissingRequiredAttributeError):
            document_from_xml(f"<resource>{link}</resource>")

    def test_resource_missing_rel_when_expanded(self):
        text = '<resource><resource href="/child"/></resource>'

        with pytest.raises(MissingRequiredAttributeError) as exc_info:
            document_from_xml(text, max_depth=1)

        assert exc_info.value.attribute == "rel"
        assert "rel" in str(exc_info.value)

    def test_resource_missing_rel_ignored_at_depth_zero(self):
        text = '<resource><resource href="/child"/></resource>'

        assert document_from_xml(text, max_depth=0).get_resources() == {}


class TestElementToData:
    """Test suite for converting data elements to plain values."""

    def test_text_only_element_keeps_surrounding_spaces(self):
        assert element_to_data(ET.fromstring("<name> widget </name>")) == " widget "

    def test_mixed_content_text_is_stripped(self):
        elem = ET.fromstring("<price currency=\"USD\">\n  30\n</price>")

        assert element_to_data(elem) == {"@currency": "USD", "value": "30"}

    def test_empty_element(self):
        assert element_to_data(ET.fromstring("<name/>")) == ""

    def test_nested_and_repeated_elements(self):
        elem = ET.fromstring("<order><tag>a</tag><tag>b</tag><total>3</total></order>")

        assert element_to_data(elem) == {"tag": ["a", "b"], "total": "3"}

    def test_attributes_and_text(self):
        elem = ET.fromstring('<price currency="USD">30</price>')

        assert element_to_data(elem) == {"@currency": "USD", "value": "30"}
