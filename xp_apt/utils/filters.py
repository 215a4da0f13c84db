"""
Airport ident inclusion filter.

Filters are shell wildcard patterns ("ED*", "K???") matched against the
whole ident, ignoring case. With no patterns at all every ident is
included; an exclude match always wins over an include match.
"""

import fnmatch
import re
import logging
from typing import Iterable, List, Optional, Pattern

logger = logging.getLogger(__name__)

def _compile(patterns: Optional[Iterable[str]]) -> List[Pattern]:
    compiled = []
    for pattern in patterns or []:
        pattern = pattern.strip()
        if pattern:
            compiled.append(re.compile(fnmatch.translate(pattern), re.IGNORECASE))
    return compiled


class AirportFilter:
    """Include and exclude wildcard filter for airport idents."""

    def __init__(self, include: Optional[Iterable[str]] = None, exclude: Optional[Iterable[str]] = None):
        self.include_patterns = _compile(include)
        self.exclude_patterns = _compile(exclude)

    def is_included(self, ident: str) -> bool:
        """
        Check an airport ident against the filter.

        Args:
            ident: Airport ident from the header row

        Returns:
            True if the airport should be read
        """
        if not self.include_patterns and not self.exclude_patterns:
            return True

        if any(pattern.match(ident) for pattern in self.exclude_patterns):
            return False

        if not self.include_patterns:
            return True

        return any(pattern.match(ident) for pattern in self.include_patterns)

    def __repr__(self):
        return (f"AirportFilter(include={[p.pattern for p in self.include_patterns]}, "
                f"exclude={[p.pattern for p in self.exclude_patterns]})")
