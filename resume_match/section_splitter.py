# resume_match/section_splitter.py
import re
import logging
from typing import Dict, List, Optional

from resume_match.config import MatchConfig, get_config

logger = logging.getLogger(__name__)

HEADER_SECTION = 'header'


class SectionSplitter:
    """
    Split a plain-text resume into named sections on heading lines
    """

    # Headings are short lines, optionally decorated ("## Skills", "EXPERIENCE:", "- Education -")
    HEADING_PATTERN = re.compile(r'^[\s#*=\-_]*([A-Za-z][A-Za-z &/]{1,40}?)[\s:#*=\-_]*$')

    def __init__(self, config: MatchConfig = None):
        self.config = config or get_config()

    def split(self, text: str) -> Dict[str, str]:
        """
        Returns:
            Section name -> text, in document order. Text before the first
            heading is kept under "header"; repeated headings are merged.
        """
        sections: Dict[str, List[str]] = {}
        current = HEADER_SECTION

        for line in (text or '').splitlines():
            heading = self._heading_of(line)
            if heading:
                current = heading
                sections.setdefault(current, [])
                continue
            sections.setdefault(current, []).append(line)

        result = {}
        for name, lines in sections.items():
            content = '\n'.join(lines).strip()
            if content:
                result[name] = content

        logger.debug(f"Split resume into sections: {list(result)}")
        return result

    def _heading_of(self, line: str) -> Optional[str]:
        match = self.HEADING_PATTERN.match(line)
        if not match:
            return None
        title = ' '.join(match.group(1).lower().split())
        return self.config.section_aliases.get(title)
