from resume_match.ats.matcher import KeywordMatcher, importance_of, keyword_frequency
from resume_match.ats.models import Importance


def test_frequency_is_case_insensitive_and_non_overlapping():
    assert keyword_frequency('python', 'Python and PYTHON, python') == 3
    assert keyword_frequency('aaa', 'aaaaaa') == 2
    assert keyword_frequency('sql', '') == 0


def test_importance_tiers():
    text = "python python python python python sql sql java"
    assert importance_of('python', text) == Importance.HIGH
    assert importance_of('sql', text) == Importance.MEDIUM
    assert importance_of('java', text) == Importance.LOW
    assert importance_of('rust', text) == Importance.LOW


def test_match_keywords_partitions_job_keywords():
    job_text = "python sql docker python"
    matched, missing = KeywordMatcher().match_keywords(
        {'python', 'java'}, ['python', 'sql', 'docker', 'python'], job_text
    )
    assert [k.text for k in matched] == ['python']
    assert [k.text for k in missing] == ['sql', 'docker']
    assert matched[0].importance == Importance.MEDIUM
    assert matched[0].category == 'Technical Skills'
