# resume_match/ats/recommendations.py
import logging
from typing import Dict, List, Mapping, Iterable

from resume_match.ats.models import (
    Keyword, Importance, Metric, Suggestion,
    SectionRecommendation, SectionStatus
)
from resume_match.ats.scorer import present_canonical_sections

logger = logging.getLogger(__name__)

INDUSTRY_CATEGORY = 'Industry Knowledge'

SECTION_RECOMMENDATIONS = {
    'summary': (
        "Tailor your professional summary to this role: mention your years of "
        "experience, your most relevant skills and one or two notable achievements."
    ),
    'experience': (
        "Start each bullet with an action verb, quantify achievements with metrics "
        "and align your experience descriptions with the job requirements."
    ),
    'skills': (
        "Group skills by category (Technical, Soft Skills, Tools) and prioritize "
        "the skills mentioned in the job description."
    ),
    'education': (
        "Add relevant coursework or academic achievements if they relate to the "
        "job requirements."
    ),
}

OVERALL_SUGGESTIONS = (
    "Tailor your resume to the job description by mirroring its key requirements and terminology.",
    "Use industry-standard terminology and the exact skill names employers search for.",
    "Quantify your achievements with numbers and metrics (e.g. \"Increased sales by 23%\").",
    "Keep formatting consistent and ATS-friendly: standard section headings, no tables, images or unusual layouts.",
    "Add a professional summary that aligns your experience with the role's main requirements.",
)

FORMATTING_PLACEHOLDER = 100


def _tier(score: int, excellent: int, good: int) -> SectionStatus:
    if score >= excellent:
        return SectionStatus.EXCELLENT
    elif score >= good:
        return SectionStatus.GOOD
    return SectionStatus.IMPROVE


def _experience_feedback(status: SectionStatus) -> str:
    if status == SectionStatus.EXCELLENT:
        return ("Your experience section is well-aligned with the job requirements. "
                "The use of strong action verbs and specific achievements is effective.")
    elif status == SectionStatus.GOOD:
        return ("Your experience section is good but could be more tailored to this specific role. "
                "Try to incorporate more keywords from the job description.")
    return ("Your experience section needs significant improvements to match this job description. "
            "Focus on highlighting relevant responsibilities and achievements that align with the role.")


def _skills_feedback(status: SectionStatus) -> str:
    if status == SectionStatus.EXCELLENT:
        return ("Your skills section is well-aligned with the job requirements. "
                "The organization and relevance of skills is excellent.")
    elif status == SectionStatus.GOOD:
        return ("Your skills section contains many relevant skills, but could be better "
                "organized and prioritized based on the job description.")
    return ("Your skills section needs to be better aligned with the job requirements. "
            "Consider adding more of the technical and soft skills mentioned in the job description.")


class RecommendationGenerator:
    """
    Template-based recommendations. Output depends only on the inputs.
    """

    def section_recommendations(self, section_names: Iterable[str]) -> Dict[str, str]:
        """Plain recommendation per canonical section present in the resume"""
        found = present_canonical_sections(section_names)
        return {
            canonical: SECTION_RECOMMENDATIONS[canonical]
            for canonical in SECTION_RECOMMENDATIONS
            if canonical in found
        }

    def overall_suggestions(self) -> List[str]:
        return list(OVERALL_SUGGESTIONS)

    def section_details(self, section_scores: Mapping[str, int]) -> List[SectionRecommendation]:
        """
        Structured recommendations with a status per canonical section

        A missing experience section is reported; other absent sections are skipped.
        """
        found = present_canonical_sections(section_scores)
        details = []

        if 'experience' in found:
            status = _tier(section_scores[found['experience']], 80, 60)
            details.append(SectionRecommendation(
                section='experience',
                title='Professional Experience',
                status=status,
                feedback=_experience_feedback(status),
                suggestions=[
                    'Use action verbs at the beginning of each bullet point',
                    'Include quantifiable achievements with metrics',
                    'Align your experience descriptions with job requirements',
                ],
                example={
                    'before': 'Managed a team and improved performance',
                    'after': ('Led a cross-functional team of 8 engineers, improving sprint velocity '
                              'by 35% through agile methodology implementation'),
                }
            ))
        else:
            details.append(SectionRecommendation(
                section='experience',
                title='Professional Experience',
                status=SectionStatus.MISSING,
                feedback=('Your resume is missing a dedicated Professional Experience section, '
                          'which is critical for most job applications.'),
                suggestions=[
                    'Add a Professional Experience section with your work history',
                    'List positions in reverse chronological order',
                    'Include company name, your title, and dates of employment',
                    'Add 3-5 bullet points describing your responsibilities and achievements',
                ]
            ))

        if 'skills' in found:
            status = _tier(section_scores[found['skills']], 80, 60)
            details.append(SectionRecommendation(
                section='skills',
                title='Skills',
                status=status,
                feedback=_skills_feedback(status),
                suggestions=[
                    'Group skills by category (Technical, Soft Skills, Tools, etc.)',
                    'Prioritize skills mentioned in the job description',
                    'Remove outdated or irrelevant skills',
                ],
                example={
                    'context': 'Technical Skills Organization',
                    'content': ('Technical: React, Node.js, TypeScript, GraphQL\n'
                                'Tools: Git, Docker, AWS, Jira\n'
                                'Soft Skills: Team Leadership, Agile Methodology, Communication'),
                }
            ))

        if 'education' in found:
            details.append(SectionRecommendation(
                section='education',
                title='Education',
                status=SectionStatus.GOOD,
                feedback=('Your education section is well-structured, but consider adding relevant '
                          'coursework or achievements if they align with the job requirements.'),
                suggestions=[
                    "Include relevant coursework if you're a recent graduate",
                    'Add academic achievements if they relate to the job',
                ]
            ))

        if 'summary' in found:
            status = _tier(section_scores[found['summary']], 70, 50)
            details.append(SectionRecommendation(
                section='summary',
                title='Professional Summary',
                status=status,
                feedback=('Your professional summary should be tailored to the specific job and '
                          'highlight your most relevant qualifications.'),
                suggestions=[
                    'Keep it concise (3-4 sentences maximum)',
                    'Include your years of experience, key skills, and notable achievements',
                    'Tailor it to match the job description',
                ],
                example={
                    'before': 'Experienced software developer with a passion for coding and problem-solving.',
                    'after': ('Results-oriented Software Engineer with 5+ years of experience in full-stack '
                              'development using React and Node.js. Proven track record of delivering '
                              'scalable solutions that improved user engagement by 40% and reduced load '
                              'times by 60%.'),
                }
            ))

        return details

    def keyword_suggestions(self, missing: List[Keyword]) -> List[Suggestion]:
        suggestions = []

        critical = [k.text for k in missing if k.importance == Importance.HIGH]
        if critical:
            suggestions.append(Suggestion(
                title='Add Critical Keywords',
                text=(f"Add these {len(critical)} critical keywords to your resume: "
                      f"{', '.join(critical)}"),
                priority='high'
            ))

        industry = [k.text for k in missing if k.category == INDUSTRY_CATEGORY]
        if industry:
            suggestions.append(Suggestion(
                title='Add Industry-Specific Terms',
                text=f"Include industry terminology like: {', '.join(industry[:3])}",
                priority='low'
            ))

        return suggestions

    def metrics(
        self,
        match_score: int,
        ats_score: int,
        missing_count: int,
        strongest_section
    ) -> List[Metric]:
        return [
            Metric(
                name='Keyword Match Rate',
                value=match_score,
                description='Percentage of job keywords found in your resume'
            ),
            Metric(
                name='ATS Compatibility',
                value=ats_score,
                description='How well your resume will perform in ATS systems'
            ),
            Metric(
                name='Missing Keywords',
                value=missing_count,
                description='Number of job keywords not found in your resume'
            ),
            Metric(
                name='Strongest Section',
                value=strongest_section or 'None',
                description='Your resume section with the highest relevance'
            ),
            Metric(
                name='Formatting Quality',
                value=FORMATTING_PLACEHOLDER,
                description='Static placeholder: formatting is not analyzed, this value is not computed',
                static=True
            ),
        ]
