"""
Compatibility shim for proposal metadata stored inside the content text.

Older records carry their metadata as a trailing HTML comment::

    <content>

    <!-- METADATA:{"category": "...", "city": "..."} -->

New records keep metadata in ``Proposal.metadata``; these helpers move it
in and out of the legacy form.
"""

import json
import logging
import re

logger = logging.getLogger(__name__)

MARKER_PREFIX = "<!-- METADATA:"
MARKER_SUFFIX = " -->"
MARKER_SEPARATOR = "\n\n"
MARKER_RE = re.compile(r"(?:\n\n)?<!-- METADATA:(.*?) -->", re.DOTALL)

METADATA_FIELDS = (
    "category",
    "location_mode",
    "state",
    "district",
    "city",
    "place_visited",
    "travel_time",
    "execution_time",
    "completion_date",
)


def has_marker(content: str) -> bool:
    return MARKER_PREFIX in (content or "")


def strip_metadata(content: str) -> str:
    """Content without any metadata marker or the separator written before it."""
    return MARKER_RE.sub("", content or "")


def extract_metadata(content: str) -> tuple[str, dict | None]:
    """
    Split content into its text and the embedded metadata.

    Returns the content unchanged and None when there is no marker. A
    marker that does not hold a JSON object is dropped from the text and
    yields None.
    """
    if not has_marker(content):
        return content, None
    match = MARKER_RE.search(content)
    metadata = None
    if match is not None:
        try:
            metadata = json.loads(match.group(1))
        except json.JSONDecodeError:
            logger.warning("Discarding unreadable metadata marker")
        if not isinstance(metadata, dict):
            metadata = None
    return strip_metadata(content), metadata


def embed_metadata(content: str, metadata: dict | None) -> str:
    """
    Append metadata to content as a marker, replacing any existing one.

    None leaves the text without a marker; an empty dict is still written
    so it reads back as ``{}``. Re-embedding the same metadata yields the
    same text.
    """
    text = strip_metadata(content)
    if metadata is None:
        return text
    # ">" is escaped so a value can never close the comment early
    payload = json.dumps(metadata).replace(">", "\\u003e")
    return f"{text}{MARKER_SEPARATOR}{MARKER_PREFIX}{payload}{MARKER_SUFFIX}"
