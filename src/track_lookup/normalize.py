"""Repairs for known-bad markup written by real-world GPX producers."""

import logging

logger = logging.getLogger(__name__)

# OsmAnd writes an empty <author> inside <copyright>, which is not valid GPX.
_EMPTY_AUTHOR_COPYRIGHT = "<copyright>\n            <author></author>\n        </copyright>"

KNOWN_BAD_FRAGMENTS = (
    _EMPTY_AUTHOR_COPYRIGHT,
    _EMPTY_AUTHOR_COPYRIGHT.replace("\n", "\r\n"),
)


def normalize_document(text: str) -> str:
    """Strip every known-bad fragment from ``text``, leaving all else untouched.

    Removal repeats until no fragment is left, so a second pass is always a no-op.
    """
    removed = 0
    changed = True
    while changed:
        changed = False
        for fragment in KNOWN_BAD_FRAGMENTS:
            if fragment in text:
                removed += text.count(fragment)
                text = text.replace(fragment, "")
                changed = True
    if removed:
        logger.debug("Removed %d empty copyright author fragment(s)", removed)
    return text
