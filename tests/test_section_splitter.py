from resume_match.config import MatchConfig
from resume_match.section_splitter import SectionSplitter

RESUME = """Jane Doe
jane@example.com

SUMMARY
Backend engineer with 6 years of Python.

Work Experience:
Built REST APIs for payments.
Led a team of four.

## Skills
Python, SQL, Docker

Hobbies
Chess
"""


def test_split_on_headings():
    sections = SectionSplitter(MatchConfig()).split(RESUME)

    assert list(sections) == ['header', 'summary', 'experience', 'skills']
    assert sections['header'] == 'Jane Doe\njane@example.com'
    assert sections['experience'] == 'Built REST APIs for payments.\nLed a team of four.'
    # unknown headings stay in the current section
    assert sections['skills'].endswith('Hobbies\nChess')


def test_repeated_headings_merge_and_empty_dropped():
    text = "Skills\nPython\nEducation\n\nSkills\nSQL\n"
    sections = SectionSplitter(MatchConfig()).split(text)
    assert sections == {'skills': 'Python\nSQL'}


def test_custom_aliases():
    config = MatchConfig(section_aliases={'Stack': 'skills'})
    sections = SectionSplitter(config).split("stack\nGo, Rust")
    assert sections == {'skills': 'Go, Rust'}


def test_empty_text():
    assert SectionSplitter(MatchConfig()).split('') == {}
