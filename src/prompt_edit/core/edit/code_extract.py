"""Code payload extraction from a model response."""

from __future__ import annotations

FENCE = "```"


def extract_code(text: str) -> str:
    """Return the fenced code in ``text``, or the whole text trimmed.

    Every fence line toggles an "inside" flag; lines seen while inside are
    kept, so several blocks are concatenated. Blank lines at the edges of
    the result are dropped.
    """
    text = text or ""
    inside = False
    found_fence = False
    kept: list[str] = []
    for line in text.splitlines():
        if line.lstrip().startswith(FENCE):
            inside = not inside
            found_fence = True
            continue
        if inside:
            kept.append(line)
    if not found_fence:
        return text.strip()
    return "\n".join(kept).strip("\n")
