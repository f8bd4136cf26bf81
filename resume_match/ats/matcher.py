# resume_match/ats/matcher.py
import logging
from typing import List, Iterable, AbstractSet, Tuple

from resume_match.ats.models import Keyword, Importance
from resume_match.ats.categories import CategoryClassifier

logger = logging.getLogger(__name__)

HIGH_IMPORTANCE_COUNT = 5
MEDIUM_IMPORTANCE_COUNT = 2


def keyword_frequency(keyword: str, text: str) -> int:
    """Non-overlapping, case-insensitive occurrences of keyword in text"""
    if not keyword or not text:
        return 0
    return text.lower().count(keyword.lower())


def importance_of(keyword: str, job_text: str) -> Importance:
    count = keyword_frequency(keyword, job_text)
    if count >= HIGH_IMPORTANCE_COUNT:
        return Importance.HIGH
    elif count >= MEDIUM_IMPORTANCE_COUNT:
        return Importance.MEDIUM
    return Importance.LOW


class KeywordMatcher:
    """
    Compare resume keywords against job description keywords
    """

    def __init__(self, classifier: CategoryClassifier = None):
        self.classifier = classifier or CategoryClassifier()

    def match_keywords(
        self,
        resume_keywords: AbstractSet[str],
        job_keywords: Iterable[str],
        job_text: str
    ) -> Tuple[List[Keyword], List[Keyword]]:
        """
        Split job keywords into matched and missing

        Args:
            resume_keywords: Unique resume keywords
            job_keywords: Job description keywords (duplicates are ignored)
            job_text: Raw job description, used for importance counting

        Returns:
            Tuple of (matched, missing), each in job keyword order
        """
        matched = []
        missing = []

        for text in dict.fromkeys(job_keywords):
            keyword = self.build_keyword(text, job_text)
            if text in resume_keywords:
                matched.append(keyword)
            else:
                missing.append(keyword)

        logger.debug(f"Matched {len(matched)} of {len(matched) + len(missing)} job keywords")
        return matched, missing

    def build_keyword(self, text: str, job_text: str) -> Keyword:
        return Keyword(
            text=text,
            category=self.classifier.category_of(text),
            importance=importance_of(text, job_text)
        )
