# resume_match/ats/tokenizer.py
import re
import logging
from typing import List, Optional, FrozenSet

from nltk.tokenize import WhitespaceTokenizer

logger = logging.getLogger(__name__)

# Function words never treated as keywords
STOP_WORDS: FrozenSet[str] = frozenset([
    'a', 'an', 'the', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for', 'with',
    'by', 'about', 'as', 'of', 'is', 'was', 'be', 'been', 'being', 'that', 'this',
    'these', 'those', 'it', 'its', 'we', 'they', 'them', 'their', 'our', 'your',
    'my', 'will', 'shall', 'would', 'should', 'can', 'could', 'may', 'might',
    'must', 'have', 'has', 'had', 'having', 'do', 'does', 'did', 'doing',
    'are', 'were', 'from', 'into', 'than', 'then', 'there', 'which', 'who',
    'what', 'when', 'where', 'you',
])

MIN_TOKEN_LENGTH = 3

# ASCII word characters only ("café" -> "caf"); any Unicode whitespace is kept
_NON_WORD = re.compile(r'[^A-Za-z0-9_\s]')

_splitter = WhitespaceTokenizer()


def tokenize(text: Optional[str]) -> List[str]:
    """
    Split free-form text into keyword candidates

    Lowercases, strips punctuation (so "co-pilot" becomes "copilot"),
    splits on whitespace and drops short tokens and stop words.
    Order and duplicates are preserved.
    """
    if not text:
        return []

    cleaned = _NON_WORD.sub('', text.lower())

    return [
        token for token in _splitter.tokenize(cleaned)
        if len(token) >= MIN_TOKEN_LENGTH and token not in STOP_WORDS
    ]


def keyword_set(text: Optional[str]) -> FrozenSet[str]:
    """Unique keywords of a text"""
    return frozenset(tokenize(text))


def unique_keywords(text: Optional[str]) -> List[str]:
    """Unique keywords of a text in order of first appearance"""
    return list(dict.fromkeys(tokenize(text)))
