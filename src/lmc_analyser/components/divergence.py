"""
Компонент поиска расхождений: концепты, которые использует только один ответ.
"""

import logging
from typing import List, Sequence

from ..interfaces.analysis import Divergence, ResponseProfile

logger = logging.getLogger(__name__)


class DivergenceFinder:
    """Для каждого ответа находит концепты, отсутствующие у всех остальных."""

    def __init__(self, max_concepts: int = 15):
        self.max_concepts = max_concepts

    def find(self, profiles: Sequence[ResponseProfile]) -> List[Divergence]:
        """
        Args:
            profiles: Активные ответы

        Returns:
            Расхождения в порядке ответов; ответы без уникальных концептов пропускаются
        """
        if len(profiles) < 2:
            return []

        divergences = []
        for idx, profile in enumerate(profiles):
            others = set()
            for oidx, other in enumerate(profiles):
                if oidx != idx:
                    others.update(other.concept_words)

            unique = [w for w in profile.concept_words if w not in others][:self.max_concepts]
            if unique:
                divergences.append(Divergence(
                    response_id=profile.id,
                    display_name=profile.display_name,
                    unique_concepts=tuple(unique),
                    score=profile.score.lmc_score,
                ))

        logger.debug(f"Расхождения найдены у {len(divergences)} из {len(profiles)} ответов")
        return divergences
