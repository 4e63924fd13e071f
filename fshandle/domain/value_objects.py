"""Domain value objects for glob matching.

A glob is parsed into a flat sequence of tokens (literal runs, single stars,
double stars) before it is turned into a regular expression, so the grammar
does not depend on any one pattern engine's escaping rules.
"""

import re
from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Kinds of glob tokens."""

    LITERAL = "literal"
    STAR = "star"  # *   any run without a separator
    DOUBLE_STAR = "double_star"  # **  any run including separators
    DOUBLE_STAR_DIR = "double_star_dir"  # **/ zero or more whole directories


@dataclass(frozen=True)
class GlobToken:
    """One token of a parsed glob.

    Attributes:
        kind: Token kind.
        text: Source text for literal tokens, empty otherwise.
    """

    kind: TokenKind
    text: str = ""


@dataclass(frozen=True)
class GlobPattern:
    """Compiled glob matcher.

    Instances are built by ``fshandle.core.search.glob_translator.compile_glob``.
    Matching is anchored: the whole candidate has to match, not a substring.

    Attributes:
        glob: The glob as written by the caller.
        case_sensitive: Whether letters must match in case.
        tokens: Parsed token sequence.
        regex: Compiled regular expression equivalent to the tokens.
    """

    glob: str
    case_sensitive: bool
    tokens: tuple[GlobToken, ...]
    regex: re.Pattern[str]

    def matches(self, candidate: str) -> bool:
        """Check whether a ``/``-separated relative path matches this glob.

        Args:
            candidate: Path relative to the search root.

        Returns:
            True if the entire candidate matches.
        """
        return self.regex.fullmatch(candidate) is not None

    def __str__(self) -> str:
        return self.glob
