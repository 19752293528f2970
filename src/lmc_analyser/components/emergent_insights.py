"""
Компонент поиска «эмерджентных» инсайтов.

Ищет пары редких концептов разных ответов, которые похожи по написанию,
но не совпадают: признак того, что ответы пришли к близкой идее
разными словами.
"""

import logging
from collections import Counter
from itertools import combinations
from typing import List, Optional, Sequence

from ..interfaces.analysis import EmergentInsight, ResponseProfile, SimilarityInterface
from .similarity import SimilarityEngine

logger = logging.getLogger(__name__)


class EmergentInsightMiner:
    """Пары редких похожих концептов из разных ответов."""

    def __init__(self,
                 similarity: Optional[SimilarityInterface] = None,
                 lower_bound: float = 0.65,
                 upper_bound: float = 0.92,
                 max_global_frequency: int = 2,
                 limit: int = 10):
        """
        Args:
            similarity: Метрики сходства слов
            lower_bound: Сходство должно быть строго больше
            upper_bound: Сходство должно быть строго меньше (отсекает совпадения)
            max_global_frequency: В скольких ответах максимум может встречаться концепт
            limit: Сколько пар возвращать
        """
        self.similarity = similarity or SimilarityEngine()
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        self.max_global_frequency = max_global_frequency
        self.limit = limit

    @staticmethod
    def global_frequency(profiles: Sequence[ResponseProfile]) -> Counter:
        """Число ответов, в концептах которых встречается слово."""
        frequency = Counter()
        for profile in profiles:
            frequency.update(set(profile.concept_words))
        return frequency

    def mine(self, profiles: Sequence[ResponseProfile]) -> List[EmergentInsight]:
        """
        Args:
            profiles: Активные ответы

        Returns:
            Не более limit пар по убыванию суммарной редкости
        """
        if len(profiles) < 2:
            return []

        frequency = self.global_frequency(profiles)
        insights: List[EmergentInsight] = []

        for first, second in combinations(profiles, 2):
            rare_a = [w for w in first.concept_words if frequency[w] <= self.max_global_frequency]
            rare_b = [w for w in second.concept_words if frequency[w] <= self.max_global_frequency]
            for word_a in rare_a:
                for word_b in rare_b:
                    sim = self.similarity.string_similarity(word_a, word_b)
                    if self.lower_bound < sim < self.upper_bound:
                        insights.append(EmergentInsight(
                            concept_a=word_a,
                            concept_b=word_b,
                            source_a=first.id,
                            source_b=second.id,
                            similarity=sim,
                            rarity_a=1 / frequency[word_a],
                            rarity_b=1 / frequency[word_b],
                        ))

        insights.sort(key=lambda i: i.rarity, reverse=True)
        logger.debug(f"Эмерджентные инсайты: найдено {len(insights)} пар")
        return insights[:self.limit]
