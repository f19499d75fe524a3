"""
Location extraction.

"lunch at Cafe Roma" → "Cafe Roma", "gym at the office" → "the office".
A place is either a run of capitalised words or one of the vocabulary's
known places, optionally preceded by "the". Anything else after "at"
("look at the report") is left alone.
"""
import re
from functools import lru_cache
from typing import Optional, Tuple
import logging

from taskvoice.config.temporal import alternation
from taskvoice.config.vocabulary import get_known_places
from taskvoice.extraction.normalization import remove_span

logger = logging.getLogger(__name__)

_NAME_WORD = r"[A-Z][\w'&\-]*"


@lru_cache(maxsize=8)
def _compile_location_pattern(places: Tuple[str, ...]) -> re.Pattern:
    known = rf"|(?i:{alternation(places)})" if places else ""
    return re.compile(
        r"(?<!\w)(?i:at)\s+"
        rf"(?P<place>(?i:the\s+)?(?:{_NAME_WORD}(?:\s+{_NAME_WORD})*{known}))"
        r"(?!\w)"
    )


def extract_location(text: str) -> Tuple[Optional[str], str]:
    """
    Extract the first "at <place>" phrase.

    Returns:
        (place as written without "at", remaining text)
    """
    pattern = _compile_location_pattern(tuple(get_known_places()))
    match = pattern.search(text)
    if match is None:
        return None, text
    place = match.group("place")
    logger.debug("Extracted location", extra={"stage": "location", "output": place})
    return place, remove_span(text, match.start(), match.end())
