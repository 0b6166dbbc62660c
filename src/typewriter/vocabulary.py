# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""
HTML attribute and element names, with the metadata the builders dispatch on.

This module is data. Attribute and Document generate one method for each
entry in ATTRIBUTES, EVENT_ATTRIBUTES and ELEMENTS.
"""

from __future__ import annotations as _future_annotations

from typing import Final

import dataclasses
import enum
import keyword


class ValueKind(enum.Enum):
    BOOLEAN = "boolean"
    BOOLEAN_OR_STRING = "boolean_or_string"
    COLOR = "color"
    DATETIME = "datetime"
    ENUM = "enum"
    NUMBER = "number"
    NUMBER_OR_DATETIME = "number_or_datetime"
    NUMBER_OR_STRING = "number_or_string"
    STRING = "string"
    URL = "url"


class ElementShape(enum.Enum):
    CONTAINER = "container"
    VOID = "void"
    RAW = "raw"


@dataclasses.dataclass(frozen=True)
class AttributeInfo:
    name: str
    description: str
    kind: ValueKind
    values: tuple[str, ...] | None = None

    @property
    def method_name(self) -> str:
        return method_name(self.name)


def method_name(name: str) -> str:
    """Python method name for an HTML name: hyphens to underscores, keywords get a trailing underscore."""
    name = name.replace("-", "_")
    return f"{name}_" if keyword.iskeyword(name) else name


def _table(*infos: AttributeInfo) -> dict[str, AttributeInfo]:
    return {info.name: info for info in infos}


_A = AttributeInfo
_K = ValueKind

# "class" and "data" have hand-written methods on Attribute.
ATTRIBUTES: Final[dict[str, AttributeInfo]] = _table(
    _A("accept", "Specifies file types browser will accept", _K.STRING, ("audio/*", "video/*", "image/*")),
    _A("accept-charset", "Character encodings used for form submission", _K.STRING),
    _A("accesskey", "Keyboard shortcut to access element", _K.STRING),
    _A("action", "URL where form data is submitted", _K.URL),
    _A("align", "Alignment of content", _K.ENUM, ("left", "right", "center", "justify")),
    _A("alt", "Alternative text for images", _K.STRING),
    _A("async", "Script should execute asynchronously", _K.BOOLEAN),
    _A("autocomplete", "Form/input autocompletion", _K.ENUM, ("on", "off")),
    _A("autofocus", "Element should be focused on page load", _K.BOOLEAN),
    _A("autoplay", "Media will start playing automatically", _K.BOOLEAN),
    _A("bgcolor", "Background color of element", _K.COLOR),
    _A("border", "Border width in pixels", _K.NUMBER),
    _A("charset", "Character encoding of document", _K.STRING),
    _A("checked", "Whether checkbox/radio button is selected", _K.BOOLEAN),
    _A("cols", "Number of columns in textarea", _K.NUMBER),
    _A("colspan", "Number of columns a cell spans", _K.NUMBER),
    _A("content", "Content for meta tags", _K.STRING),
    _A("contenteditable", "Whether content is editable", _K.ENUM, ("true", "false")),
    _A("controls", "Show media playback controls", _K.BOOLEAN),
    _A("coords", "Coordinates for image maps", _K.STRING),
    _A("datetime", "Date/time of element content", _K.DATETIME),
    _A("default", "Default track for media", _K.BOOLEAN),
    _A("defer", "Script should execute after parsing", _K.BOOLEAN),
    _A("dir", "Text direction", _K.ENUM, ("ltr", "rtl", "auto")),
    _A("disabled", "Element is disabled", _K.BOOLEAN),
    _A("download", "Resource should be downloaded", _K.BOOLEAN_OR_STRING),
    _A("draggable", "Element can be dragged", _K.ENUM, ("true", "false", "auto")),
    _A(
        "enctype",
        "Form data encoding for submission",
        _K.ENUM,
        ("application/x-www-form-urlencoded", "multipart/form-data", "text/plain"),
    ),
    _A("for", "Associates label with form control", _K.STRING),
    _A("form", "Form the element belongs to", _K.STRING),
    _A("formaction", "URL for form submission", _K.URL),
    _A("headers", "Related header cells for data cell", _K.STRING),
    _A("height", "Height of element", _K.NUMBER_OR_STRING),
    _A("hidden", "Element is not displayed", _K.BOOLEAN),
    _A("high", "Upper range of meter", _K.NUMBER),
    _A("href", "URL of linked resource", _K.URL),
    _A("hreflang", "Language of linked resource", _K.STRING),
    _A("id", "Unique identifier for element", _K.STRING),
    _A("integrity", "Subresource integrity hash", _K.STRING),
    _A("ismap", "Image is server-side image map", _K.BOOLEAN),
    _A("kind", "Type of text track", _K.ENUM, ("captions", "chapters", "descriptions", "metadata", "subtitles")),
    _A("label", "Label for form control/option", _K.STRING),
    _A("lang", "Language of element content", _K.STRING),
    _A("list", "Links input to datalist options", _K.STRING),
    _A("loop", "Media will replay when finished", _K.BOOLEAN),
    _A("low", "Lower range of meter", _K.NUMBER),
    _A("max", "Maximum allowed value", _K.NUMBER_OR_DATETIME),
    _A("maxlength", "Maximum length of input", _K.NUMBER),
    _A("media", "Media type for resource", _K.STRING),
    _A("method", "HTTP method for form submission", _K.ENUM, ("get", "post")),
    _A("min", "Minimum allowed value", _K.NUMBER_OR_DATETIME),
    _A("multiple", "Multiple values can be selected", _K.BOOLEAN),
    _A("muted", "Media is muted by default", _K.BOOLEAN),
    _A("name", "Name of form control", _K.STRING),
    _A("novalidate", "Form validation is skipped", _K.BOOLEAN),
    _A("open", "Details element is expanded", _K.BOOLEAN),
    _A("optimum", "Optimal value for meter", _K.NUMBER),
    _A("pattern", "Regular expression pattern", _K.STRING),
    _A("placeholder", "Hint text for input field", _K.STRING),
    _A("poster", "Preview image for video", _K.URL),
    _A("preload", "How media should be loaded", _K.ENUM, ("auto", "metadata", "none")),
    _A("readonly", "Input field cannot be modified", _K.BOOLEAN),
    _A(
        "rel",
        "Relationship of linked resource",
        _K.ENUM,
        (
            "alternate", "author", "bookmark", "help", "license", "next",
            "nofollow", "noreferrer", "prefetch", "prev", "search", "tag",
            "stylesheet", "preload", "icon",
        ),
    ),
    _A("required", "Input must be filled out", _K.BOOLEAN),
    _A("reversed", "List is numbered in reverse", _K.BOOLEAN),
    _A("rows", "Number of rows in textarea", _K.NUMBER),
    _A("rowspan", "Number of rows a cell spans", _K.NUMBER),
    _A(
        "sandbox",
        "Security rules for iframe",
        _K.ENUM,
        (
            "allow-forms", "allow-pointer-lock", "allow-popups",
            "allow-same-origin", "allow-scripts", "allow-top-navigation",
        ),
    ),
    _A("span", "Number of consecutive columns a column group spans", _K.NUMBER),
    _A("scope", "Cells header element relates to", _K.ENUM, ("col", "colgroup", "row", "rowgroup")),
    _A("selected", "Option is pre-selected", _K.BOOLEAN),
    _A("shape", "Shape of image map area", _K.ENUM, ("default", "rect", "circle", "poly")),
    _A("size", "Size of input/select control", _K.NUMBER),
    _A("sizes", "Image sizes for different layouts", _K.STRING),
    _A("spellcheck", "Element should be spellchecked", _K.ENUM, ("true", "false")),
    _A("src", "URL of resource", _K.URL),
    _A("srcdoc", "Content for inline frame", _K.STRING),
    _A("srclang", "Language of text track", _K.STRING),
    _A("srcset", "Images to use in different situations", _K.STRING),
    _A("start", "Starting number for ordered list", _K.NUMBER),
    _A("step", "Increment for numeric input", _K.NUMBER_OR_STRING),
    _A("style", "Inline CSS styles", _K.STRING),
    _A("tabindex", "Position in tab order", _K.NUMBER),
    _A("target", "Where to open linked document", _K.ENUM, ("_blank", "_self", "_parent", "_top")),
    _A("title", "Advisory information about element", _K.STRING),
    _A("translate", "Whether to translate content", _K.ENUM, ("yes", "no")),
    _A("type", "Type of element or input", _K.STRING),
    _A("usemap", "Image map to use", _K.STRING),
    _A("value", "Value of form control", _K.STRING),
    _A("width", "Width of element", _K.NUMBER_OR_STRING),
    _A("wrap", "How text wraps in textarea", _K.ENUM, ("hard", "soft")),
)

# https://html.info.whatwg.org/multipage/webappapis.html#globaleventhandlers
EVENT_ATTRIBUTES: Final[dict[str, AttributeInfo]] = _table(
    *(
        _A(name, f"Script run for the {name.removeprefix('on')} event", _K.STRING)
        for name in (
            "onabort", "onauxclick", "onbeforeinput", "onbeforematch",
            "onbeforetoggle", "onblur", "oncancel", "oncanplay",
            "oncanplaythrough", "onchange", "onclick", "onclose",
            "oncontextlost", "oncontextmenu", "oncontextrestored", "oncopy",
            "oncuechange", "oncut", "ondblclick", "ondrag", "ondragend",
            "ondragenter", "ondragleave", "ondragover", "ondragstart",
            "ondrop", "ondurationchange", "onemptied", "onended", "onerror",
            "onfocus", "onformdata", "oninput", "oninvalid", "onkeydown",
            "onkeypress", "onkeyup", "onload", "onloadeddata",
            "onloadedmetadata", "onloadstart", "onmousedown", "onmouseenter",
            "onmouseleave", "onmousemove", "onmouseout", "onmouseover",
            "onmouseup", "onpaste", "onpause", "onplay", "onplaying",
            "onprogress", "onratechange", "onreset", "onresize", "onscroll",
            "onscrollend", "onsecuritypolicyviolation", "onseeked",
            "onseeking", "onselect", "onslotchange", "onstalled", "onsubmit",
            "onsuspend", "ontimeupdate", "ontoggle", "onvolumechange",
            "onwaiting", "onwheel",
        )
    ),
)

_VOID = (
    "area", "base", "br", "col", "embed", "hr", "img", "input", "link",
    "meta", "source", "track", "wbr",
)

_RAW = ("script", "style")

_CONTAINER = (
    "a", "abbr", "address", "article", "aside", "audio", "b", "bdi", "bdo",
    "blockquote", "body", "button", "canvas", "caption", "cite", "code",
    "colgroup", "data", "datalist", "dd", "del", "details", "dfn", "dialog",
    "div", "dl", "dt", "em", "fieldset", "figcaption", "figure", "footer",
    "form", "h1", "h2", "h3", "h4", "h5", "h6", "head", "header", "hgroup",
    "html", "i", "iframe", "ins", "kbd", "label", "legend", "li", "main",
    "map", "mark", "menu", "meter", "nav", "noscript", "object", "ol",
    "optgroup", "option", "output", "p", "picture", "pre", "progress", "q",
    "rp", "rt", "ruby", "s", "samp", "search", "section", "select", "slot",
    "small", "span", "strong", "sub", "summary", "sup", "table", "tbody",
    "td", "template", "textarea", "tfoot", "th", "thead", "time", "title",
    "tr", "u", "ul", "var", "video",
)

ELEMENTS: Final[dict[str, ElementShape]] = dict(
    sorted(
        [(tag, ElementShape.VOID) for tag in _VOID]
        + [(tag, ElementShape.RAW) for tag in _RAW]
        + [(tag, ElementShape.CONTAINER) for tag in _CONTAINER],
    ),
)


def attribute_info(name: str) -> AttributeInfo | None:
    return ATTRIBUTES.get(name) or EVENT_ATTRIBUTES.get(name)


__all__ = [
    "ATTRIBUTES",
    "ELEMENTS",
    "EVENT_ATTRIBUTES",
    "AttributeInfo",
    "ElementShape",
    "ValueKind",
    "attribute_info",
    "method_name",
]
