from typing import Any
import re
from xml.sax.saxutils import escape as _xml_escape

# & < > are handled by saxutils; the quote is added for attribute values.
_ENTITIES = {'"': "&quot;"}
# lone surrogates (e.g. from os.fsdecode) cannot be encoded as UTF-8
_SURROGATES = re.compile("[\ud800-\udfff]")

def to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    try:
        text = str(value)
    except Exception:
        # a broken __str__ must not take the whole report down
        text = object.__repr__(value)
    return _SURROGATES.sub("\ufffd", text)

def escape(value: Any) -> str:
    """Escape `&`, `<`, `>` and `"` for use in attributes and CDATA payloads.

    Accepts anything: None is the empty string, bytes are decoded with
    replacement characters, other objects go through str(). Lone
    surrogates become U+FFFD so the result always encodes as UTF-8.
    """
    return _xml_escape(to_text(value), _ENTITIES)
