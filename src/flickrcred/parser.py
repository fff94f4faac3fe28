"""Lenient XML-to-mapping conversion for Flickr responses.

Flickr's REST endpoint answers with a small ``<rsp>`` document::

    <rsp stat="ok">
      <auth>
        <token>45-76598454353455</token>
        <perms>read</perms>
        <user nsid="12037949754@N01" username="Bees" fullname="Cal H" />
      </auth>
    </rsp>

:func:`parse_response` turns that into nested dicts with the root element
dropped::

    {"stat": "ok",
     "auth": {"token": "45-76598454353455",
              "perms": "read",
              "user": {"nsid": "12037949754@N01",
                       "username": "Bees",
                       "fullname": "Cal H"}}}

Conversion rules:

- attributes and child elements both become keys;
- repeated child elements collapse into a list;
- an element holding only text becomes that string, an empty one ``""``;
- text next to attributes or children is kept under ``"_content"``.
"""

from __future__ import annotations

from typing import Any, Union

from lxml import etree

from flickrcred.exceptions import FlickrAPIError, ResponseError

CONTENT_KEY = "_content"


def _own_text(element: etree._Element) -> str:
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts).strip()


def _element_to_value(element: etree._Element) -> Union[str, dict[str, Any]]:
    value: dict[str, Any] = dict(element.attrib)

    for child in element:
        # Comments and processing instructions have non-string tags.
        if not isinstance(child.tag, str):
            continue
        name = etree.QName(child).localname
        child_value = _element_to_value(child)
        if name not in value:
            value[name] = child_value
        elif isinstance(value[name], list):
            value[name].append(child_value)
        else:
            value[name] = [value[name], child_value]

    text = _own_text(element)
    if not value:
        return text
    if text:
        value[CONTENT_KEY] = text
    return value


def parse_xml(body: Union[str, bytes]) -> dict[str, Any]:
    """Convert an XML document into nested dicts, dropping the root element.

    Args:
        body: The document. ``str`` input is encoded as UTF-8 first so that
            an XML declaration naming an encoding is accepted.

    Returns:
        The root element's content as a dict. A root holding only text
        yields ``{"_content": text}``.

    Raises:
        ResponseError: If *body* is not well-formed XML.
    """
    if isinstance(body, str):
        body = body.encode("utf-8")

    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(body, parser=parser)
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise ResponseError(f"Malformed Flickr response: {exc}") from exc

    value = _element_to_value(root)
    if isinstance(value, str):
        return {CONTENT_KEY: value} if value else {}
    return value


def parse_response(body: Union[str, bytes]) -> dict[str, Any]:
    """Parse a Flickr ``<rsp>`` document, raising on ``stat="fail"``.

    Args:
        body: The response body.

    Returns:
        The parsed response, see the module docstring for its shape.

    Raises:
        ResponseError: If the body is not well-formed XML.
        FlickrAPIError: If Flickr reports a failure.
    """
    data = parse_xml(body)
    if data.get("stat") == "fail":
        err = data.get("err")
        if not isinstance(err, dict):
            err = {}
        raise FlickrAPIError(err.get("code", ""), err.get("msg", ""))
    return data
