# resume_match/ats/categories.py
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Tuple, FrozenSet, Union, Any

import yaml

from resume_match.ats.errors import ComputationError

logger = logging.getLogger(__name__)

OTHER_CATEGORY = 'Other'


class CategoryDictionary:
    """
    Ordered, read-only mapping of skill category -> canonical terms

    Built once and shared between analyses. Category order decides
    classification: the first category with a matching term wins.
    """

    __slots__ = ('_categories',)

    def __init__(self, categories: Iterable[Tuple[str, Iterable[str]]]):
        entries = []
        seen = set()
        for entry in categories:
            try:
                name, terms = entry
            except (TypeError, ValueError) as exc:
                raise ComputationError(f"Malformed category entry: {entry!r}") from exc

            if not isinstance(name, str) or not name.strip():
                raise ComputationError(f"Category name must be a non-empty string: {name!r}")
            if isinstance(terms, str) or terms is None:
                raise ComputationError(f"Category '{name}' terms must be a list of strings")
            if name in seen:
                raise ComputationError(f"Duplicate category: {name}")

            normalized = []
            for term in terms:
                if not isinstance(term, str) or not term.strip():
                    raise ComputationError(f"Category '{name}' has an invalid term: {term!r}")
                normalized.append(term.strip().lower())

            if not normalized:
                raise ComputationError(f"Category '{name}' has no terms")

            seen.add(name)
            entries.append((name, frozenset(normalized)))

        object.__setattr__(self, '_categories', tuple(entries))

    def __setattr__(self, name, value):
        raise AttributeError("CategoryDictionary is read-only")

    def __iter__(self):
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __repr__(self) -> str:
        return f"CategoryDictionary({list(self.names)!r})"

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self._categories)

    def terms(self, name: str) -> FrozenSet[str]:
        for category, terms in self._categories:
            if category == name:
                return terms
        raise KeyError(name)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'CategoryDictionary':
        """
        Load categories from a YAML file

        Expected layout::

            categories:
              - name: Technical Skills
                terms: [python, sql]
        """
        path = Path(path)
        if not path.exists():
            raise ComputationError(f"Category file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ComputationError(f"Invalid category file {path}: {exc}") from exc

        return cls.from_list(data.get('categories') if isinstance(data, dict) else None)

    @classmethod
    def from_list(cls, items: Any) -> 'CategoryDictionary':
        if not isinstance(items, list) or not items:
            raise ComputationError("'categories' must be a non-empty list")

        entries = []
        for item in items:
            if not isinstance(item, dict) or 'name' not in item or 'terms' not in item:
                raise ComputationError(f"Category entry needs 'name' and 'terms': {item!r}")
            entries.append((item['name'], item['terms']))

        return cls(entries)


DEFAULT_CATEGORIES = CategoryDictionary([
    ('Technical Skills', [
        'javascript', 'python', 'java', 'cpp', 'ruby', 'php', 'swift', 'golang',
        'react', 'angular', 'vue', 'node', 'express', 'django', 'flask', 'spring',
        'aws', 'azure', 'gcp', 'docker', 'kubernetes', 'terraform', 'jenkins',
        'sql', 'mongodb', 'postgresql', 'mysql', 'firebase', 'elasticsearch',
        'database', 'git', 'github', 'rest', 'graphql', 'api', 'frontend', 'backend',
        'fullstack', 'devops', 'cicd', 'testing', 'automation', 'algorithms',
        'data structures',
    ]),
    ('Soft Skills', [
        'communication', 'teamwork', 'collaboration', 'leadership', 'management',
        'problem solving', 'critical thinking', 'creativity', 'adaptability',
        'organization', 'time management', 'flexibility', 'interpersonal',
        'presentation', 'negotiation', 'conflict resolution', 'customer service',
        'mentoring', 'facilitation', 'delegation', 'strategic', 'planning',
    ]),
    ('Tools & Technologies', [
        'jira', 'trello', 'slack', 'asana', 'confluence', 'notion', 'microsoft',
        'photoshop', 'illustrator', 'figma', 'sketch', 'indesign', 'adobe',
        'tableau', 'power bi', 'excel', 'spss', 'r', 'sas', 'matlab', 'jupyter',
        'webpack', 'babel', 'npm', 'yarn', 'chrome', 'firefox', 'safari',
        'android', 'ios', 'mobile', 'responsive', 'wordpress', 'shopify',
    ]),
    ('Certifications', [
        'certified', 'certification', 'license', 'credential', 'certificate',
        'pmp', 'agile', 'scrum', 'comptia', 'cisco', 'mcsa', 'aws', 'google',
        'microsoft', 'oracle', 'cpa', 'cfa', 'series', 'six sigma', 'itil',
    ]),
    ('Industry Knowledge', [
        'finance', 'healthcare', 'education', 'manufacturing', 'retail', 'logistics',
        'ecommerce', 'saas', 'marketing', 'sales', 'legal', 'compliance', 'hr',
        'operations', 'business development', 'consulting', 'strategy', 'analytics',
    ]),
])


class CategoryClassifier:
    """
    Assign keywords to skill categories

    A keyword belongs to the first category (in dictionary order) where the
    keyword is contained in a canonical term or a term is contained in the
    keyword. Keywords matching nothing fall into "Other".
    """

    def __init__(self, categories: CategoryDictionary = None):
        self.categories = categories if categories is not None else DEFAULT_CATEGORIES

    def category_of(self, keyword: str) -> str:
        keyword = keyword.lower()
        for name, terms in self.categories:
            if any(keyword in term or term in keyword for term in terms):
                return name
        return OTHER_CATEGORY

    def classify(self, keywords: Iterable[str]) -> Dict[str, List[str]]:
        """
        Group keywords by category

        Returns:
            Mapping of category -> keywords, in order of first appearance
        """
        grouped: Dict[str, List[str]] = {}
        seen = set()

        for keyword in keywords:
            if keyword in seen:
                continue
            seen.add(keyword)
            grouped.setdefault(self.category_of(keyword), []).append(keyword)

        logger.debug(f"Classified {len(seen)} keywords into {len(grouped)} categories")
        return grouped
