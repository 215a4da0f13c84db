"""
Airport name utilities.

X-Plane airport names carry status indicators such as "[X]" for closed
airports or "[H]" for heliports. This module detects the closed and
military status from a name and normalizes its capitalization.
"""

import re
import logging

logger = logging.getLogger(__name__)

# Bracketed indicators removed from names before storage
NAME_INDICATOR = re.compile(r'\[(h|s|g|x|mil)\]', re.IGNORECASE)

_CLOSED_PATTERN = re.compile(r'\[x\]|\bclosed\b', re.IGNORECASE)

class AirportNameCleaner:
    """Utility for detecting flags in and normalizing airport names."""

    # Words identifying military airfields (case insensitive)
    MILITARY_WORDS = {
        'afb', 'aaf', 'nas', 'angb', 'arb', 'mcas', 'nab', 'naf', 'nolf',
        'air base', 'airbase', 'air force', 'military', 'army', 'navy',
        'heer', 'marine', 'raf', 'ab',
    }

    # Words kept upper case when capitalizing
    ABBREVIATIONS = {
        'afb', 'aaf', 'nas', 'angb', 'arb', 'mcas', 'nab', 'naf', 'nolf', 'raf',
        'ab', 'rcaf', 'usaf', 'intl', 'ii', 'iii', 'iv', 'ny', 'nyc', 'dc', 'usa', 'uk',
    }

    def __init__(self):
        self.military_pattern = re.compile(
            r'\[mil\]|\b(' + '|'.join(re.escape(word) for word in sorted(self.MILITARY_WORDS)) + r')\b',
            re.IGNORECASE
        )

    def is_closed(self, name: str) -> bool:
        """True if the name marks the airport as closed."""
        if not name:
            return False
        return _CLOSED_PATTERN.search(name) is not None

    def is_military(self, name: str) -> bool:
        """True if the name contains an indicator or word for a military airfield."""
        if not name:
            return False
        return self.military_pattern.search(name) is not None

    def strip_indicators(self, name: str) -> str:
        """Remove [H], [S], [G], [X] and [MIL] indicators."""
        if not name:
            return ""
        return re.sub(r'\s+', ' ', NAME_INDICATOR.sub('', name)).strip()

    def capitalize(self, name: str) -> str:
        """
        Capitalize each word of a name.

        Known abbreviations are written upper case, words mixing letters
        and digits are left unchanged.
        """
        if not name:
            return ""

        words = []
        for word in name.split():
            lower = word.lower()
            if lower.strip('().,-/') in self.ABBREVIATIONS:
                words.append(word.upper())
            elif any(char.isdigit() for char in word):
                words.append(word)
            else:
                words.append('-'.join(part[:1].upper() + part[1:].lower() for part in word.split('-')))
        return ' '.join(words)

    def clean_name(self, name: str) -> str:
        """Strip indicators and capitalize."""
        return self.capitalize(self.strip_indicators(name))
