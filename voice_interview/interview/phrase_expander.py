"""
Phrase Expander.

Produces acceptable alternate forms for a set of keywords:
- Singular/plural flip
- Curated abbreviations and synonyms
"""

from typing import Dict, List, Optional

from ..utils.config import ABBREVIATIONS
from ..utils.text_utils import unique


class PhraseExpander:
    """
    Expands keywords into alternate surface forms.

    The abbreviation table is injected so the expander stays pure and can be
    tested with any table.
    """

    def __init__(self, abbreviations: Optional[Dict[str, List[str]]] = None):
        """
        Initialize phrase expander.

        Args:
            abbreviations: Lower-case keyword -> alternates. Default: ABBREVIATIONS
        """
        if abbreviations is None:
            abbreviations = ABBREVIATIONS
        self.abbreviations = {k.lower(): list(v) for k, v in abbreviations.items()}

    def expand(self, keywords: List[str]) -> List[str]:
        """
        Expand keywords into de-duplicated acceptable phrases.

        Args:
            keywords: Keywords of one micro-question

        Returns:
            Alternate forms across all keywords (first-seen order)
        """
        phrases: List[str] = []

        for keyword in keywords:
            kw = keyword.lower()

            if kw.endswith('s'):
                phrases.append(kw[:-1])
            else:
                phrases.append(kw + 's')

            phrases.extend(self.abbreviations.get(kw, []))

        return unique(phrases)
