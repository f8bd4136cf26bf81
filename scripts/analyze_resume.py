# scripts/analyze_resume.py
#!/usr/bin/env python3
"""
Analyze a resume against a job description

Usage:
    python scripts/analyze_resume.py --resume data/resumes/resume.txt --job data/job_descriptions/backend.txt
    python scripts/analyze_resume.py --resume data/resumes/sections.yaml --job data/job_descriptions/backend.txt --output reports/analysis.json
"""

import argparse
import json
import logging
import sys
import yaml
from pathlib import Path
from typing import Dict

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_match.config import get_config, MatchConfig
from resume_match.section_splitter import SectionSplitter
from resume_match.ats import ResumeAnalyzer, AnalysisResult, ResumeMatchError, InvalidInputError

# Setup logging
logging.basicConfig(
    level=logging.WARNING,
    format='%(message)s'
)
logger = logging.getLogger(__name__)


def _read_text(path: Path, config: MatchConfig) -> str:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    text = path.read_text(encoding='utf-8')
    if len(text) > config.max_text_length:
        raise InvalidInputError(
            f"{path} is {len(text)} characters, limit is {config.max_text_length}"
        )
    return text


def load_resume_sections(resume_file: str, config: MatchConfig) -> Dict[str, str]:
    """Load resume sections from a YAML mapping or a plain-text resume"""
    path = Path(resume_file)
    text = _read_text(path, config)

    if path.suffix.lower() in ('.yaml', '.yml'):
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            raise InvalidInputError(f"{path} must contain a mapping of section name to text")
        return {
            str(name): (value.get('content', '') if isinstance(value, dict) else value)
            for name, value in data.items()
        }

    return SectionSplitter(config).split(text)


def print_summary(result: AnalysisResult):
    """Print formatted analysis summary"""
    print("\n" + "=" * 70)
    print(f"{'RESUME ANALYSIS':^70}")
    print("=" * 70)
    print()

    print(f"Match Score: {result.match_score}/100 ({result.match_label})")
    print(f"ATS Score:   {result.ats_score}/100")
    print(f"  {result.match_description}")
    print()

    if result.section_scores:
        print("Section Scores:")
        for name, score in result.section_scores.items():
            print(f"  {name:<16} {score:3d}/100  {'█' * (score // 10)}")
        print()

    print("=" * 70)
    print("KEYWORDS")
    print("=" * 70)
    print()

    for label, keywords, icon in (
        ("Matched", result.matched_keywords, '✓'),
        ("Missing", result.missing_keywords, '✗'),
    ):
        print(f"{label} ({len(keywords)}):")
        by_category: Dict[str, list] = {}
        for kw in keywords:
            by_category.setdefault(kw.category, []).append(kw)
        for category, items in by_category.items():
            words = ', '.join(f"{kw.text} [{kw.importance.value}]" for kw in items)
            print(f"  {icon} {category}: {words}")
        print()

    print("=" * 70)
    print("RECOMMENDATIONS")
    print("=" * 70)
    print()

    for suggestion in result.keyword_suggestions:
        print(f"  [{suggestion.priority.upper()}] {suggestion.title}: {suggestion.text}")
    for detail in result.section_details:
        print(f"  {detail.title} ({detail.status.value}): {detail.feedback}")
    print()
    for i, suggestion in enumerate(result.overall_suggestions, 1):
        print(f"  {i}. {suggestion}")
    print()


def save_report(result: AnalysisResult, output_file: str):
    """Save JSON report"""
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(result.to_dict(), f, indent=2)

    print(f"Report saved to: {output_path}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Analyze a resume against a job description'
    )
    parser.add_argument('--resume', required=True,
                        help='Plain-text resume, or YAML mapping of section -> text')
    parser.add_argument('--job', required=True, help='Job description text file')
    parser.add_argument('--output', help='Write JSON report to this path')
    parser.add_argument('--json', action='store_true', help='Print JSON instead of a summary')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose logging')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = get_config()

    try:
        sections = load_resume_sections(args.resume, config)
        job_text = _read_text(Path(args.job), config)

        analyzer = ResumeAnalyzer(config.load_categories())
        result = analyzer.analyze(sections, job_text)
    except (ResumeMatchError, OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.error(f"Analysis failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_summary(result)

    if args.output:
        save_report(result, args.output)

    return 0


if __name__ == '__main__':
    sys.exit(main())
