"""Application service answering questions about the LEGO set collection."""

import logging
from collections import Counter, defaultdict
from typing import Dict, List, Optional, Set

from brickset.domain.lego_set import LegoSet, PackagingType
from brickset.infrastructure.json_repository import JsonRepository

logger = logging.getLogger(__name__)

PIECES_THRESHOLD = 500


class LegoSetService:
    """Read-only queries over the sets held by a repository.

    Every query scans ``repository.get_all()`` from scratch and never
    mutates anything, so calling one twice yields the same answer.
    """

    def __init__(self, repository: JsonRepository[LegoSet]):
        """
        Initialize the service.

        Args:
            repository: Repository providing the LEGO sets
        """
        self.repository = repository

    def names_with_same_beginning_and_ending(self) -> List[str]:
        """
        Names whose lower-cased first character equals their last character.

        Only the first character is lower-cased, so "Ava" matches but "AvA" does not.
        """
        return [
            lego_set.name
            for lego_set in self.repository.get_all()
            if lego_set.name.lower()[0] == lego_set.name[-1]
        ]

    def names_starting_with(self, prefix: str) -> List[str]:
        """Names starting with the given prefix, ignoring case."""
        prefix = prefix.lower()
        return [
            lego_set.name
            for lego_set in self.repository.get_all()
            if lego_set.name.lower().startswith(prefix)
        ]

    def numbers_with_at_most_tags(self, max_tags: int) -> List[str]:
        """
        Catalog numbers of the sets having at most ``max_tags`` tags.

        Sets without tag information are skipped rather than counted as zero tags.
        """
        return [
            lego_set.number
            for lego_set in self.repository.get_all()
            if lego_set.tags is not None and len(lego_set.tags) <= max_tags
        ]

    def packaging_type_summary(self) -> Dict[PackagingType, int]:
        """How many sets use each packaging type present in the data."""
        return dict(Counter(lego_set.packaging for lego_set in self.repository.get_all()))

    def sum_of_pieces(self) -> Optional[int]:
        """Total piece count, or None when there are no sets."""
        sets = self.repository.get_all()
        if not sets:
            return None
        return sum(lego_set.pieces for lego_set in sets)

    def all_sets_have_at_most_pieces(self, max_pieces: int = PIECES_THRESHOLD) -> bool:
        return all(lego_set.pieces <= max_pieces for lego_set in self.repository.get_all())

    def sorted_distinct_tags_without_subtheme(self) -> List[str]:
        """Distinct tags of the sets that have tags but no subtheme, sorted."""
        tags: Set[str] = set()
        for lego_set in self.repository.get_all():
            if lego_set.subtheme is None and lego_set.tags is not None:
                tags.update(lego_set.tags)
        return sorted(tags)

    def theme_with_longest_name(self) -> Optional[str]:
        """
        The longest theme name, or None when there are no sets.

        On a tie the theme met first wins.
        """
        longest: Optional[str] = None
        for lego_set in self.repository.get_all():
            if longest is None or len(lego_set.theme) > len(longest):
                longest = lego_set.theme
        logger.debug(f"Longest theme name: {longest}")
        return longest

    def number_of_sets_by_theme(self) -> Dict[str, int]:
        return dict(Counter(lego_set.theme for lego_set in self.repository.get_all()))

    def subthemes_by_theme(self) -> Dict[str, Set[str]]:
        """
        Each theme mapped to its distinct subthemes.

        Missing subthemes are dropped, so a theme whose sets have none maps to an empty set.
        """
        subthemes: Dict[str, Set[str]] = defaultdict(set)
        for lego_set in self.repository.get_all():
            themed = subthemes[lego_set.theme]
            if lego_set.subtheme is not None:
                themed.add(lego_set.subtheme)
        return dict(subthemes)
