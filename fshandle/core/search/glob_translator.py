"""Glob to matcher translation.

Supported syntax:
    *    any run of characters except "/"
    **   any run of characters including "/"
    **/  zero or more whole directories (so "**/*.txt" also matches "c.txt"),
         only where "**" starts a segment; "x**/y" still needs a "/"

Backslashes are read as separators. A literal "." only matches itself. Any
other character is passed to the regular expression engine as written, so
"[ab]" works as a character class and a malformed glob raises ``re.error``.
"""

import re

from fshandle.domain.value_objects import GlobPattern, GlobToken, TokenKind

_EMITTERS = {
    TokenKind.STAR: "[^/]*",
    TokenKind.DOUBLE_STAR: ".*",
    TokenKind.DOUBLE_STAR_DIR: "(?:.*/)?",
}


def tokenize_glob(glob: str) -> tuple[GlobToken, ...]:
    """Split a glob into literal runs and wildcard tokens.

    Args:
        glob: Glob expression; backslashes are treated as "/".

    Returns:
        Token sequence. Adjacent literal characters are merged into one token.
    """
    text = glob.replace("\\", "/")
    tokens: list[GlobToken] = []
    literal: list[str] = []
    i = 0
    while i < len(text):
        if text.startswith("**", i):
            starts_segment = i == 0 or text[i - 1] == "/"
            kind = TokenKind.DOUBLE_STAR
            i += 2
            if starts_segment and text.startswith("/", i):
                kind = TokenKind.DOUBLE_STAR_DIR
                i += 1
        elif text[i] == "*":
            kind = TokenKind.STAR
            i += 1
        else:
            literal.append(text[i])
            i += 1
            continue
        if literal:
            tokens.append(GlobToken(TokenKind.LITERAL, "".join(literal)))
            literal = []
        tokens.append(GlobToken(kind))
    if literal:
        tokens.append(GlobToken(TokenKind.LITERAL, "".join(literal)))
    return tuple(tokens)


def tokens_to_regex(tokens: tuple[GlobToken, ...]) -> str:
    """Render tokens as an anchored regular expression source string."""
    parts = []
    for token in tokens:
        if token.kind is TokenKind.LITERAL:
            parts.append(token.text.replace(".", r"\."))
        else:
            parts.append(_EMITTERS[token.kind])
    return "^" + "".join(parts) + "$"


def compile_glob(glob: str, case_sensitive: bool = False) -> GlobPattern:
    """Compile a glob into a matcher.

    Args:
        glob: Glob expression, e.g. "src/**/*.py".
        case_sensitive: Match letter case exactly (default: False).

    Returns:
        GlobPattern whose ``matches`` tests "/"-separated relative paths.

    Raises:
        re.error: If the glob contains malformed regular expression syntax.
    """
    tokens = tokenize_glob(glob)
    flags = 0 if case_sensitive else re.IGNORECASE
    regex = re.compile(tokens_to_regex(tokens), flags)
    return GlobPattern(glob=glob, case_sensitive=case_sensitive, tokens=tokens, regex=regex)
