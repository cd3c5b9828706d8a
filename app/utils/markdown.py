"""Telegram MarkdownV2 text helpers."""

import re

# Characters Telegram MarkdownV2 reserves outside of entities. The backslash
# is escaped too so literal backslashes in user text never act as escapes.
MARKDOWN_V2_RESERVED = "_*[]()~`>#+-=|{}.!\\"

ELLIPSIS = "..."

_RESERVED_PATTERN = re.compile("([" + re.escape(MARKDOWN_V2_RESERVED) + "])")
_URL_RESERVED_PATTERN = re.compile(r"([)\\])")


def escape_markdown(text: str) -> str:
    """
    Escape text for interpolation into a MarkdownV2 message.

    Example input: "Fix login (v2.1)!"
    Example output: "Fix login \\(v2\\.1\\)\\!"
    """
    return _RESERVED_PATTERN.sub(r"\\\1", text)


def truncate_text(text: str, max_length: int) -> str:
    """
    Cut text to max_length characters and append an ellipsis if needed.

    Applied to raw text before escaping, so the ellipsis gets escaped
    together with the rest.
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + ELLIPSIS


def link(text: str, url: str) -> str:
    """
    Build an inline link.

    The anchor text gets full MarkdownV2 escaping. Inside the URL part
    Telegram only treats ")" and "\\" as special, so just those two are
    escaped and the URL otherwise stays as is.
    """
    escaped_url = _URL_RESERVED_PATTERN.sub(r"\\\1", url)
    return f"[{escape_markdown(text)}]({escaped_url})"
