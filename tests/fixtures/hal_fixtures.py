"""Sample HAL payloads shared by converter and renderer tests."""

import json

ORDERS_JSON = {
    "currentlyProcessing": 14,
    "shippedToday": 20,
    "_links": {
        "self": {"href": "/orders"},
        "curies": [{"name": "ea", "href": "http://example.com/docs/rels/{rel}", "templated": True}],
        "next": {"href": "/orders?page=2"},
        "ea:find": {"href": "/orders{?id}", "templated": True},
        "ea:admin": [
            {"href": "/admins/2", "title": "Fred"},
            {"href": "/admins/5", "title": "Kate"},
        ],
    },
    "_embedded": {
        "ea:order": [
            {
                "_links": {
                    "self": {"href": "/orders/123"},
                    "ea:basket": {"href": "/baskets/98712"},
                    "ea:customer": {"href": "/customers/7809"},
                },
                "total": 30.00,
                "currency": "USD",
                "status": "shipped",
            },
            {
                "_links": {
                    "self": {"href": "/orders/124"},
                    "ea:basket": {"href": "/baskets/97213"},
                    "ea:customer": {"href": "/customers/12369"},
                },
                "total": 20.00,
                "currency": "USD",
                "status": "processing",
            },
        ]
    },
}

ORDERS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<resource href="/orders">
    <link rel="curies" href="http://example.com/docs/rels/{rel}" name="ea" templated="true"/>
    <link rel="next" href="/orders?page=2"/>
    <link rel="ea:find" href="/orders{?id}" templated="true"/>
    <link rel="ea:admin" href="/admins/2" title="Fred"/>
    <link rel="ea:admin" href="/admins/5" title="Kate"/>
    <currentlyProcessing>14</currentlyProcessing>
    <shippedToday>20</shippedToday>
    <resource rel="ea:order" href="/orders/123">
        <link rel="ea:basket" href="/baskets/98712"/>
        <link rel="ea:customer" href="/customers/7809"/>
        <total>30.00</total>
        <currency>USD</currency>
        <status>shipped</status>
    </resource>
    <resource rel="ea:order" href="/orders/124">
        <link rel="ea:basket" href="/baskets/97213"/>
        <link rel="ea:customer" href="/customers/12369"/>
        <total>20.00</total>
        <currency>USD</currency>
        <status>processing</status>
    </resource>
</resource>"""


def nested_json(levels: int) -> dict:
    """
    Build a HAL JSON resource with `levels` of single embedded children.

    Level 0 is the top-level resource; each resource embeds the next one
    under the relation "child".

    Args:
        levels: Number of embedding levels below the top-level resource

    Returns:
        Parsed HAL JSON object
    """
    resource = {"_links": {"self": {"href": f"/level/{levels}"}}, "level": levels}
    for level in range(levels - 1, -1, -1):
        resource = {
            "_links": {"self": {"href": f"/level/{level}"}},
            "level": level,
            "_embedded": {"child": resource},
        }
    return resource


def nested_json_text(levels: int) -> str:
    return json.dumps(nested_json(levels))


def nested_xml(levels: int) -> str:
    """Build HAL XML with `levels` of embedded children, mirroring nested_json."""
    inner = f'<resource rel="child" href="/level/{levels}"><level>{levels}</level></resource>'
    for level in range(levels - 1, 0, -1):
        inner = f'<resource rel="child" href="/level/{level}"><level>{level}</level>{inner}</resource>'
    if levels == 0:
        return '<resource href="/level/0"><level>0</level></resource>'
    return f'<resource href="/level/0"><level>0</level>{inner}</resource>'
