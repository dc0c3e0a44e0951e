"""Markdown code-fence stripping for JSON replies.

Models often wrap JSON in ```json ... ``` blocks. Two patterns are in use:

- strip_json_fence: permissive. Any whitespace after the opening marker and
  before the closing marker is removed.
- strip_json_fence_strict: the opening marker must be followed by a newline
  and the closing marker preceded by one. Anything else is left in place.

Both anchor to the start and end of the whole reply and are no-ops on
unfenced text.
"""

import re

_FENCE_RE = re.compile(r"\A```json\s*|\s*```\Z")
_STRICT_FENCE_RE = re.compile(r"\A```json\s*\n|\n```\Z")


def strip_json_fence(text: str) -> str:
    return _FENCE_RE.sub("", text).strip()


def strip_json_fence_strict(text: str) -> str:
    return _STRICT_FENCE_RE.sub("", text).strip()
