"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Wildcard key patterns used for bulk deletion.
"""

from __future__ import annotations

import re

WILDCARD = "*"


def translate_pattern(pattern: str, *, strict: bool = False) -> str:
    """
    Translate a wildcard pattern into a regular expression body.

    Each ``*`` becomes ``.*``. In the default mode every other character is
    passed through untouched, so ``.``, ``+``, ``(`` and friends keep their
    regex meaning. With ``strict=True`` they are escaped and match literally.
    """
    if not strict:
        return pattern.replace(WILDCARD, ".*")
    return ".*".join(re.escape(part) for part in pattern.split(WILDCARD))


def compile_key_pattern(prefix: str, pattern: str, *, strict: bool = False) -> re.Pattern[str]:
    """
    Compile `pattern` into a matcher anchored against full (prefixed) keys.

    Args:
        prefix: Namespace prefix of the owning cache. Always matched literally.
        pattern: Wildcard pattern written in terms of logical keys.
        strict: Escape non-wildcard characters instead of passing them through.

    Raises:
        re.error: If the non-strict translation is not a valid expression.
    """
    # \Z instead of $ so a trailing newline in a key is not skipped over.
    return re.compile("^" + re.escape(prefix) + translate_pattern(pattern, strict=strict) + r"\Z")
