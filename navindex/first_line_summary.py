"""Reduce an analyzer doc comment to a one-line summary."""

import re

_WS_RE = re.compile(r"\s+")


def first_line_summary(text: object, max_length: int = 0) -> str:
    """Return the first paragraph of a doc comment collapsed onto one line.

    A ``max_length`` of 0 disables truncation; otherwise the summary is cut at a
    word boundary and suffixed with an ellipsis.
    """
    if text is None:
        return ""
    if isinstance(text, list):
        text = "\n".join(str(x) for x in text if x is not None)
    raw = str(text).strip()
    if not raw:
        return ""
    paragraph = re.split(r"\n\s*\n", raw, maxsplit=1)[0]
    line = _WS_RE.sub(" ", paragraph).strip()
    if max_length > 0 and len(line) > max_length:
        cut = line[:max_length].rsplit(" ", 1)[0] or line[:max_length]
        line = cut.rstrip(" ,;:") + "…"
    return line
