"""Block attribute list parsing using shlex.

Parses the text between the brackets of a block attribute line, e.g.
``[DEPRECATED#dep-1.custom, title="Use v2, not v1"]``, into the flat
string-to-string attribute bag that block processors receive.
"""

import re
import shlex

# Named entry key (id=..., title=...)
ATTRIBUTE_NAME_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_-]*$')

# Shorthand markers on the first positional entry: #id .role %option
SHORTHAND_PATTERN = re.compile(r'([#.%])([^#.%]+)')


def parse_block_attributes(text: str) -> dict[str, str]:
    """
    Parse a block attribute list.

    Supports:
    - Positional entries, stored as "1", "2", ...
    - Named entries (key=value)
    - Quoted values containing commas
    - Style shorthand on the first positional entry (STYLE#id.role%option)

    Args:
        text: Attribute list without the surrounding brackets

    Returns:
        New attribute dict
    """
    attrs: dict[str, str] = {}
    index = 0

    for entry in _split_entries(text):
        key, sep, value = entry.partition("=")
        if sep and ATTRIBUTE_NAME_PATTERN.match(key.strip()):
            attrs[key.strip()] = value.strip()
            continue
        index += 1
        attrs[str(index)] = entry

    if "1" in attrs:
        _apply_shorthand(attrs["1"], attrs)

    return attrs


def _split_entries(text: str) -> list[str]:
    """Split on commas, honoring quotes."""
    lexer = shlex.shlex(text, posix=True)
    lexer.whitespace = ","
    lexer.whitespace_split = True
    lexer.commenters = ""
    # Only quotes are interpreted, backslashes stay literal
    lexer.escape = ""
    try:
        entries = list(lexer)
    except ValueError:
        # Unbalanced quotes, fall back to a plain split
        entries = text.split(",")
    return [entry.strip() for entry in entries if entry.strip()]


def _apply_shorthand(first: str, attrs: dict[str, str]) -> None:
    """Expand STYLE#id.role%option into style, id, role and option attributes."""
    if " " in first:
        attrs["style"] = first
        return

    marker = SHORTHAND_PATTERN.search(first)
    style = first[:marker.start()] if marker else first
    if style:
        attrs["style"] = style

    roles: list[str] = []
    options: list[str] = []
    for kind, value in SHORTHAND_PATTERN.findall(first):
        if kind == "#":
            attrs.setdefault("id", value)
        elif kind == ".":
            roles.append(value)
        else:
            options.append(value)

    if roles:
        existing = attrs.get("role")
        attrs["role"] = " ".join(([existing] if existing else []) + roles)
    if options:
        for option in options:
            attrs[f"{option}-option"] = ""
        attrs["options"] = ",".join(options)
