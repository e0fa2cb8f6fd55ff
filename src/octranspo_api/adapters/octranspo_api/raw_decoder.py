"""Decoding of response bodies into the raw wire models.

XML bodies are decoded with the charset their declaration names, parsed with
ElementTree, and flattened into nested dicts keyed by local element name:

    <Trip xmlns="http://octranspo.com"><BusType>6EB</BusType></Trip>
    -> {"#text": "", "@xmlns": "http://octranspo.com",
        "BusType": {"#text": "6EB", "@xmlns": "http://octranspo.com"}}

Decoding is lenient the way the feed needs: whitespace before the declaration
is skipped, and undefined entities such as &nbsp; are kept as literal text.

Repeated children become lists. The dicts are then validated into the raw
pydantic models, which ignore anything they do not name.
"""

import codecs
import logging
import re
import xml.etree.ElementTree as ET
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from octranspo_api.domain.errors import DecodeError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

ROOT_ELEMENT = "Envelope"

_DECLARATION_RE = re.compile(rb"""^<\?xml[^>]*?encoding\s*=\s*["']([^"']*)["']""")
_DECLARATION_TEXT_RE = re.compile(r"^<\?xml[^>]*\?>")

# An ampersand that does not start one of the five predefined entities or a
# character reference
_UNKNOWN_REFERENCE_RE = re.compile(r"&(?!(?:amp|lt|gt|quot|apos|#[0-9]+|#x[0-9a-fA-F]+);)")

# Labels that browsers and the feed treat as windows-1252
_CP1252_LABELS = frozenset(
    {
        "ascii",
        "cp1252",
        "iso-8859-1",
        "iso8859-1",
        "iso_8859-1",
        "l1",
        "latin1",
        "latin-1",
        "us-ascii",
        "windows-1252",
    }
)

_BOMS = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def _detect_encoding(body: bytes) -> str:
    """Return the Python codec for a body, from its BOM or XML declaration."""
    for bom, codec in _BOMS:
        if body.startswith(bom):
            return codec

    match = _DECLARATION_RE.match(body.lstrip())
    if not match:
        return "utf-8"

    label = match.group(1).decode("ascii", errors="replace").strip().lower()
    if label in _CP1252_LABELS:
        return "cp1252"
    try:
        return codecs.lookup(label).name
    except LookupError as e:
        raise DecodeError(f"unsupported charset in XML declaration: {label!r}") from e


def _decode_text(body: bytes) -> str:
    encoding = _detect_encoding(body)
    try:
        text = body.decode(encoding)
    except UnicodeDecodeError as e:
        raise DecodeError(f"response body is not valid {encoding}: {e}") from e
    # The body is already text; a leftover declaration would name the wrong charset
    text = _DECLARATION_TEXT_RE.sub("", text.lstrip(), count=1)
    # Undefined entities such as &nbsp; and stray ampersands stay literal text
    return _UNKNOWN_REFERENCE_RE.sub("&amp;", text)


def _split_tag(tag: str) -> tuple[str, str]:
    """Split an ElementTree tag into (namespace URI, local name)."""
    if tag.startswith("{"):
        namespace, _, local = tag[1:].partition("}")
        return namespace, local
    return "", tag


def element_to_dict(element: ET.Element) -> dict[str, Any]:
    """Convert an element and its descendants to nested dicts."""
    namespace, _ = _split_tag(element.tag)
    node: dict[str, Any] = {"#text": element.text or ""}
    if namespace:
        node["@xmlns"] = namespace
    for name, value in element.attrib.items():
        node[f"@{_split_tag(name)[1]}"] = value

    for child in element:
        _, name = _split_tag(child.tag)
        value = element_to_dict(child)
        existing = node.get(name)
        if existing is None:
            node[name] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            node[name] = [existing, value]

    return node


def decode_xml_envelope(body: bytes, model: type[ModelT]) -> ModelT:
    """Decode a SOAP response body into ``model``.

    Args:
        body: Raw response bytes.
        model: Raw envelope model to validate against.

    Returns:
        The validated raw envelope.

    Raises:
        DecodeError: If the charset is unsupported, the markup is malformed,
            the root is not a SOAP Envelope, or the shape does not fit.
    """
    text = _decode_text(body)
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        logger.warning(f"Malformed XML in {model.__name__} response: {e}")
        raise DecodeError(f"malformed XML: {e}") from e

    _, root_name = _split_tag(root.tag)
    if root_name != ROOT_ELEMENT:
        logger.warning(f"Unexpected root element {root_name!r} in {model.__name__} response")
        raise DecodeError(f"expected root element {ROOT_ELEMENT!r}, got {root_name!r}")

    try:
        return model.model_validate(element_to_dict(root))
    except ValidationError as e:
        logger.warning(f"XML response does not match {model.__name__}: {e}")
        raise DecodeError(f"unexpected XML shape for {model.__name__}: {e}") from e


def decode_json_table(body: bytes, model: type[ModelT]) -> ModelT:
    """Decode a tabular JSON response body into ``model``.

    Raises:
        DecodeError: If the body is not JSON or does not fit the model, for
            example when a column holds a number instead of a string.
    """
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        logger.warning(f"JSON response does not match {model.__name__}: {e}")
        raise DecodeError(f"unexpected JSON shape for {model.__name__}: {e}") from e
