"""Precompiled identifier patterns shared by the segment classifier.

Every pattern is applied with ``fullmatch`` and uses explicit ASCII character
classes, so a trailing newline or a non-ASCII digit never counts as a match.
None of them nests quantifiers; matching cost stays linear in segment length.
"""

from __future__ import annotations

import re

# 8-4-4-4-12 hex groups, any case
UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)

NUMERIC_PATTERN = re.compile(r"[0-9]+")

# YYYY-MM-DD, optionally followed by [Tt]HH:MM:SS, an optional 1-9 digit
# fraction and an optional Z/z or +-HH:MM offset.
ISO_DATE_PATTERN = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}"
    r"(?:[Tt][0-9]{2}:[0-9]{2}:[0-9]{2}(?:\.[0-9]{1,9})?(?:[Zz]|[+-][0-9]{2}:[0-9]{2})?)?"
)

# Crockford Base32 excludes I, L, O and U.
ULID_PATTERN = re.compile(r"[0-9A-HJKMNP-TV-Za-hjkmnp-tv-z]{26}")

CUID_PATTERN = re.compile(r"c[a-z0-9]{24}")

CUID2_PATTERN = re.compile(r"[a-z][a-z0-9]{23}")

# 21 URL-safe characters, at least one of them a digit. Roughly 3% of random
# NanoIDs have no digit and are deliberately left unclassified.
NANOID_PATTERN = re.compile(r"(?=[A-Za-z_-]*[0-9])[A-Za-z0-9_-]{21}")

# Anything followed by a 1-15 character extension: index.html, app.min.js
FILE_PATTERN = re.compile(r".+\.\w{1,15}", re.ASCII)

SLUG_CHARSET_PATTERN = re.compile(r"[A-Za-z0-9_-]+")

PREFIX_PATTERN = re.compile(r"[A-Za-z0-9]+")

PREFIX_SEPARATORS = (":", "_")

# Shortest numeric suffix accepted after an underscore prefix (usr_123).
# Shorter ones (user_42) read as slugs.
MIN_PREFIXED_NUMERIC_LENGTH = 3
