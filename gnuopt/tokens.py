# gnuopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token classification and `=` splitting for the parse engine.

- `classify_token`: decides whether a token is the `--` terminator, a cluster
  of short options, a long option or a positional parameter.
- `split_on_equals`: peels an inline `=value` off a token. Position 0 never
  splits, so a token such as `=x` stays whole.
"""
from __future__ import annotations

from enum import Enum
from typing import NamedTuple

TERMINATOR = "--"


class TokenKind(Enum):
    TERMINATOR = "terminator"
    SHORT_CLUSTER = "short_cluster"
    LONG_OPTION = "long_option"
    POSITIONAL = "positional"


class SplitToken(NamedTuple):
    """Result of splitting a token on its first `=`.

    `index` is the position of the `=` in the original token, or 0 when there
    is none. `value` may be empty even when `has_value` is true (`--name=`).
    """

    index: int
    name: str
    value: str

    @property
    def has_value(self) -> bool:
        return self.index > 0

    def rejoin(self, prefix: str = "") -> str:
        """Rebuild the original token, optionally with extra leading text."""
        if self.has_value:
            return f"{prefix}{self.name}={self.value}"
        return f"{prefix}{self.name}"


def split_on_equals(token: str) -> SplitToken:
    index = token.find("=", 1)
    if index > 0:
        return SplitToken(index, token[:index], token[index + 1 :])
    return SplitToken(0, token, "")


def classify_token(token: str) -> TokenKind:
    if token == TERMINATOR:
        return TokenKind.TERMINATOR
    if len(token) <= 1 or token[0] != "-":
        return TokenKind.POSITIONAL
    if token[1] == "-":
        return TokenKind.LONG_OPTION
    return TokenKind.SHORT_CLUSTER
