"""
Tests for response parsing, Ack handling and error extraction.
"""

import logging

import pytest

from ebayr.adapters.xml_parser import XmlNode, parse_xml
from ebayr.core.domain.models import ErrorDetail, RawResponse
from ebayr.core.domain.record import Record
from ebayr.core.errors import CallError, MalformedResponseError
from ebayr.core.request import Request
from ebayr.core.response import Response, node_to_structure

from conftest import FAILURE_XML, SUCCESS_XML, WARNING_XML


def build(settings, body, command="GetItem", status_code=200):
    return Response.build(Request(command, settings), RawResponse(status_code=status_code, body=body))


def test_body_is_a_record(settings):
    response = build(settings, SUCCESS_XML)
    assert isinstance(response.record, Record)
    assert response.ack == "Success"
    assert response.version == "1235"
    assert response["Item"]["ItemID"] == "110012345678"
    assert response.item.title == "Widget"
    assert response.get("timestamp") == "2024-01-02T03:04:05.000Z"
    assert "item" in response


def test_repeated_tags_become_lists(settings):
    response = build(settings, SUCCESS_XML)
    assert response.item.picture_details.picture_url == [
        "https://example.com/a.jpg",
        "https://example.com/b.jpg",
    ]


def test_attributes_and_text(settings):
    price = build(settings, SUCCESS_XML).item.start_price
    assert price.currency_id == "USD"
    assert price.value == "9.99"


def test_empty_element_is_none(settings):
    response = build(settings, SUCCESS_XML)
    assert "description" in response.item
    assert response.item.description is None


def test_missing_field_is_none(settings):
    assert build(settings, SUCCESS_XML).item.subtitle is None


def test_success(settings):
    response = build(settings, SUCCESS_XML)
    assert response.success
    assert response.is_success()
    assert response.errors == []
    assert response.raise_for_ack() is response


def test_failure_exposes_errors(settings):
    response = build(settings, FAILURE_XML)
    assert response.ack == "Failure"
    assert not response.success

    errors = response.errors
    assert len(errors) == 2
    assert errors[0].short_message == "Item not found."
    assert errors[0].long_message == "The item 42 could not be found."
    assert errors[0].error_code == "17"
    assert errors[0].severity_code == "Error"
    assert errors[1].severity_code == "Warning"


def test_error_details(settings):
    details = build(settings, FAILURE_XML).error_details()
    assert details[0] == ErrorDetail(
        error_code="17",
        short_message="Item not found.",
        long_message="The item 42 could not be found.",
        severity_code="Error",
        error_classification="RequestError",
    )
    assert not details[0].is_warning
    assert details[1].is_warning
    assert str(details[0]) == "[17] The item 42 could not be found."


def test_raise_for_ack(settings):
    response = build(settings, FAILURE_XML)
    with pytest.raises(CallError) as excinfo:
        response.raise_for_ack()
    error = excinfo.value
    assert error.command == "GetItem"
    assert error.ack == "Failure"
    assert len(error.errors) == 2
    assert "[17] The item 42 could not be found." in str(error)
    assert "deprecated" not in str(error)


def test_warning_ack_is_successful_and_single_error_is_a_list(settings):
    response = build(settings, WARNING_XML, command="GeteBayOfficialTime")
    assert response.success
    assert len(response.errors) == 1
    assert response.errors[0].error_code == "21917053"
    assert [w.error_code for w in response.warnings] == ["21917053"]


@pytest.mark.parametrize(
    "ack, expected",
    [("Success", True), ("SUCCESS", True), ("warning", True), ("Failure", False), ("PartialFailure", False)],
)
def test_ack_is_compared_case_insensitively(settings, ack, expected):
    body = f"<GetItemResponse><Ack>{ack}</Ack></GetItemResponse>"
    assert build(settings, body).success is expected


def test_malformed_body_raises(settings):
    with pytest.raises(MalformedResponseError):
        build(settings, "<GetItemResponse><Ack>Success</GetItemResponse>")


def test_empty_body(settings):
    response = build(settings, "", status_code=503)
    assert response.ack is None
    assert not response.success
    assert response.errors == []
    assert response.status_code == 503


def test_unexpected_root_is_logged(settings, caplog):
    with caplog.at_level(logging.WARNING, logger="ebayr.core.response"):
        response = build(settings, "<OtherResponse><Ack>Success</Ack></OtherResponse>")
    assert response.success
    assert "OtherResponse" in caplog.text


def test_response_keeps_request_and_raw(settings):
    request = Request("GetItem", settings)
    raw = RawResponse(status_code=200, headers={"X-Test": "1"}, body=SUCCESS_XML)
    response = Response(request, raw)
    assert response.request is request
    assert response.raw is raw
    assert response.command == "GetItem"
    assert repr(response) == "<Response GetItem ack='Success' status=200>"


def test_parse_xml_strips_namespaces_and_prolog():
    node = parse_xml('<?xml version="1.0"?><a xmlns="urn:x"><b k="v">t</b><c/></a>')
    assert node == XmlNode(
        tag="a",
        children=[XmlNode(tag="b", attributes={"k": "v"}, text="t"), XmlNode(tag="c")],
    )


def test_node_to_structure():
    node = XmlNode(
        tag="Root",
        children=[
            XmlNode(tag="A", text="1"),
            XmlNode(tag="B", children=[XmlNode(tag="C", text="x")]),
            XmlNode(tag="A", text="2"),
            XmlNode(tag="D", attributes={"unit": "kg"}, text="3"),
            XmlNode(tag="E", attributes={"flag": "y"}),
        ],
    )
    assert node_to_structure(node) == {
        "A": ["1", "2"],
        "B": {"C": "x"},
        "D": {"unit": "kg", "value": "3"},
        "E": {"flag": "y"},
    }
    assert node_to_structure(XmlNode(tag="Leaf", text="t")) == "t"


def test_text_whitespace_is_preserved():
    node = parse_xml("<a><Description>  indented text \n</Description><Blank>  \n </Blank></a>")
    assert node.children[0].text == "  indented text \n"
    assert node.children[1].text is None
    assert node_to_structure(node) == {"Description": "  indented text \n", "Blank": None}
