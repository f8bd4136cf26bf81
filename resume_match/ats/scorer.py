# resume_match/ats/scorer.py
import logging
from typing import AbstractSet, Dict, Iterable, Mapping

from resume_match.ats.tokenizer import keyword_set

logger = logging.getLogger(__name__)

CANONICAL_SECTIONS = ('summary', 'experience', 'education', 'skills')


def similarity(a: AbstractSet[str], b: AbstractSet[str]) -> int:
    """
    Jaccard-style overlap of two keyword sets as a 0-100 percentage

    Symmetric; two empty sets score 0.
    """
    universe = len(a | b)
    if universe == 0:
        return 0
    return _round_half_up(len(a & b) * 100 / universe)


def _round_half_up(value: float) -> int:
    # half-up: 12.5 -> 13
    return int(value + 0.5)


def present_canonical_sections(section_names: Iterable[str]) -> Dict[str, str]:
    """
    Map each canonical section to the first resume section whose name contains it
    """
    names = list(section_names)
    found = {}
    for canonical in CANONICAL_SECTIONS:
        for name in names:
            if canonical in name.lower():
                found[canonical] = name
                break
    return found


class ATSScorer:
    """
    Heuristic ATS compatibility score
    """

    BASE_SCORE = 65
    SECTION_BONUS = 5
    MAX_SECTION_BONUS = 20

    # (matched keyword count must exceed, bonus); highest tier wins
    VOLUME_TIERS = (
        (20, 15),
        (10, 10),
        (5, 5),
    )

    def section_bonus(self, section_names: Iterable[str]) -> int:
        found = present_canonical_sections(section_names)
        return min(len(found) * self.SECTION_BONUS, self.MAX_SECTION_BONUS)

    def volume_bonus(self, matched_count: int) -> int:
        for threshold, bonus in self.VOLUME_TIERS:
            if matched_count > threshold:
                return bonus
        return 0

    def score(self, section_names: Iterable[str], matched_count: int) -> int:
        total = self.BASE_SCORE + self.section_bonus(section_names) + self.volume_bonus(matched_count)
        return min(total, 100)


class SectionScorer:
    """
    Score each resume section against the job description keywords
    """

    def score_sections(
        self,
        sections: Mapping[str, str],
        job_keywords: AbstractSet[str]
    ) -> Dict[str, int]:
        scores = {}
        for name, content in sections.items():
            scores[name] = similarity(keyword_set(content), job_keywords)
            logger.debug(f"Section '{name}' scored {scores[name]}")
        return scores
