"""Turn-by-turn scanning of SAN game text."""

from __future__ import annotations

import re
from collections.abc import Iterator

from santree.core.notation.models import Turn

_MOVE_NUMBER = r"\d+\."
_RESULT_TOKEN = r"(?:1-0|0-1|1/2-1/2|\*)(?!\S)"

# "<N>." then white's token, then optionally black's token. Neither token may
# be the next move number, and black's may not be a game result marker.
TURN_PATTERN = re.compile(
    rf"(\d+)\.\s*(?!{_MOVE_NUMBER})(\S+)"
    rf"(?:\s+(?!{_MOVE_NUMBER})(?!{_RESULT_TOKEN})(\S+))?"
)


def iter_turns(text: str) -> Iterator[Turn]:
    """Yield every :class:`Turn` found in *text*, left to right.

    Text that does not form a turn is skipped without notice.
    """
    for match in TURN_PATTERN.finditer(text):
        number, white, black = match.groups()
        yield Turn(number=int(number), white=white, black=black)


def count_turn_headers(text: str) -> int:
    """Count ``"<N>. "`` headers in *text*."""
    return len(re.findall(r"(?<!\S)\d+\.(?=\s)", text))
