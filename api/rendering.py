"""
Content negotiation.

Every page is available as HTML (Jinja2 template), JSON or XML. The
Accept header picks the representation; the records behind it are
the same Pydantic schemas in all three cases.
"""

import re
from enum import Enum
from http import HTTPStatus
from pathlib import Path
from typing import Any, Optional, Sequence, Union
from xml.etree.ElementTree import Element, SubElement, tostring

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel


TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

XML_MEDIA_TYPE = "application/xml"

Payload = Union[BaseModel, Sequence[BaseModel], None]


class ResponseFormat(str, Enum):
    """Representations a page can be rendered as."""
    HTML = "html"
    JSON = "json"
    XML = "xml"


_MEDIA_TYPES = {
    "application/json": ResponseFormat.JSON,
    "application/xml": ResponseFormat.XML,
    "text/xml": ResponseFormat.XML,
    "text/html": ResponseFormat.HTML,
    "application/xhtml+xml": ResponseFormat.HTML,
}


def negotiate(accept: Optional[str]) -> ResponseFormat:
    """
    Pick a representation from an Accept header.

    The first listed media type we know wins; quality values are
    ignored. Anything unrecognized falls back to HTML.
    """
    for part in (accept or "").split(","):
        media_type = part.split(";", 1)[0].strip().lower()
        if media_type in _MEDIA_TYPES:
            return _MEDIA_TYPES[media_type]
    return ResponseFormat.HTML


def _jsonable(payload: Payload, title: str) -> Any:
    if payload is None:
        return {"title": title}
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json")
    return [item.model_dump(mode="json") for item in payload]


# Code points outside the XML 1.0 Char production
_XML_INVALID_CHARS = re.compile(
    r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]"
)


def xml_text(value: str) -> str:
    """Drop characters an XML 1.0 document cannot carry."""
    return _XML_INVALID_CHARS.sub("", value)


def _model_element(tag: str, model: BaseModel) -> Element:
    element = Element(tag)
    for name, value in model.model_dump(mode="json").items():
        child = SubElement(element, name)
        child.text = "" if value is None else xml_text(str(value))
    return element


def to_xml(
    payload: Payload,
    title: str = "",
    schema: Optional[type[BaseModel]] = None,
) -> bytes:
    """
    Serialize a record or a list of records.

    A single record becomes <article>...</article>; a list becomes
    <articles> wrapping one element per record. The tag names come
    from the schema's xml_tag / xml_list_tag class attributes, so
    empty lists still get the right root element.
    """
    if payload is None:
        root = Element("page")
        SubElement(root, "title").text = xml_text(title)
    elif isinstance(payload, BaseModel):
        root = _model_element(getattr(payload, "xml_tag", "item"), payload)
    else:
        model_cls = schema or (type(payload[0]) if payload else None)
        list_tag = getattr(model_cls, "xml_list_tag", "items")
        item_tag = getattr(model_cls, "xml_tag", "item")
        root = Element(list_tag)
        for item in payload:
            root.append(_model_element(item_tag, item))
    return tostring(root, encoding="utf-8", xml_declaration=True)


def render(
    request: Request,
    template: str,
    *,
    title: str,
    is_logged_in: bool,
    payload: Payload = None,
    schema: Optional[type[BaseModel]] = None,
    status_code: int = 200,
    context: Optional[dict[str, Any]] = None,
) -> Response:
    """
    Render a page in the representation the client asked for.

    Args:
        request: Incoming request (Accept header, template URL helpers)
        template: Jinja2 template used for the HTML representation
        title: Page title
        is_logged_in: Session indicator, exposed to templates
        payload: Record or list of records shown on the page
        schema: Schema of list items, used to name empty XML lists
        status_code: HTTP status of the response
        context: Extra template variables (error messages and the like)
    """
    response_format = negotiate(request.headers.get("accept"))

    if response_format == ResponseFormat.JSON:
        return JSONResponse(
            content=_jsonable(payload, title),
            status_code=status_code,
        )

    if response_format == ResponseFormat.XML:
        return Response(
            content=to_xml(payload, title, schema),
            status_code=status_code,
            media_type=XML_MEDIA_TYPE,
        )

    template_context: dict[str, Any] = {
        "title": title,
        "payload": payload,
        "is_logged_in": is_logged_in,
    }
    if context:
        template_context.update(context)

    return templates.TemplateResponse(
        request=request,
        name=template,
        context=template_context,
        status_code=status_code,
    )


def render_error(
    request: Request,
    status_code: int,
    message: str,
    *,
    is_logged_in: bool,
) -> Response:
    """Render an error in the negotiated representation."""
    response_format = negotiate(request.headers.get("accept"))

    if response_format == ResponseFormat.JSON:
        return JSONResponse(content={"detail": message}, status_code=status_code)

    if response_format == ResponseFormat.XML:
        root = Element("error")
        SubElement(root, "detail").text = xml_text(message)
        return Response(
            content=tostring(root, encoding="utf-8", xml_declaration=True),
            status_code=status_code,
            media_type=XML_MEDIA_TYPE,
        )

    return templates.TemplateResponse(
        request=request,
        name="error.html",
        context={
            "title": HTTPStatus(status_code).phrase,
            "message": message,
            "status_code": status_code,
            "is_logged_in": is_logged_in,
        },
        status_code=status_code,
    )
