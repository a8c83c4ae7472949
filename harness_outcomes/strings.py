"""String helpers for storing outcome output inside XML reports."""

import re
from collections.abc import Iterable

_LINE_ENDINGS = re.compile(r"\r\n?")

# "&" optionally followed by a reference it may already start.
_AMPERSAND = re.compile(
    r"&(?:(amp|lt|gt|quot|apos)|#([0-9]{1,7})|#x([0-9a-fA-F]{1,6}))?(;?)"
)

# Anything outside the XML 1.0 Char production.
_XML_INVALID = re.compile(r"[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _is_xml_char(code_point: int) -> bool:
    return (
        code_point in (0x9, 0xA, 0xD)
        or 0x20 <= code_point <= 0xD7FF
        or 0xE000 <= code_point <= 0xFFFD
        or 0x10000 <= code_point <= 0x10FFFF
    )


def _escape_ampersand(match: re.Match[str]) -> str:
    named, decimal, hexadecimal, semicolon = match.groups()
    if semicolon:
        if named:
            return match.group()
        if decimal and _is_xml_char(int(decimal)):
            return match.group()
        if hexadecimal and _is_xml_char(int(hexadecimal, 16)):
            return match.group()
    return "&amp;" + match.group()[1:]


def join(parts: Iterable[object], separator: str) -> str:
    """Join the string form of each part with separator."""
    return separator.join(str(part) for part in parts)


def normalize_line_endings(text: str) -> str:
    """Collapse CRLF and lone CR into LF."""
    return _LINE_ENDINGS.sub("\n", text)


def _escape_code_point(match: re.Match[str]) -> str:
    return f"U+{ord(match.group()):04X}"


def xml_sanitize(text: str) -> str:
    """Make text safe to embed as XML character data.

    Markup characters become entity references and characters XML cannot
    carry at all are spelled out as ``U+XXXX``. References to valid XML
    characters are left alone, so sanitizing twice gives the same text as
    sanitizing once.
    """
    text = _XML_INVALID.sub(_escape_code_point, text)
    text = _AMPERSAND.sub(_escape_ampersand, text)
    return text.replace("<", "&lt;").replace(">", "&gt;")


def sanitize_line(line: str) -> str:
    """Normalize line endings, then XML-sanitize."""
    return xml_sanitize(normalize_line_endings(line))


def sanitize_lines(lines: Iterable[str]) -> str:
    """Sanitize each line and join them with LF."""
    return join((sanitize_line(line) for line in lines), "\n")
