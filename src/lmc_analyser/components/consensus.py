"""
Компонент поиска консенсуса между ответами.

Отвечает за общие концепты всех активных ответов и утверждения,
которые поддерживают как минимум два разных источника.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..interfaces.analysis import Consensus, ConsensusClaim, ResponseProfile, SimilarityInterface
from .similarity import SimilarityEngine

logger = logging.getLogger(__name__)


class ConsensusFinder:
    """Находит общие концепты и поддержанные несколькими ответами утверждения."""

    def __init__(self,
                 similarity: Optional[SimilarityInterface] = None,
                 max_concepts: int = 25,
                 max_claims: int = 12,
                 dedup_prefix_length: int = 100,
                 max_claim_length: int = 250,
                 concept_pool_size: int = 40):
        """
        Args:
            similarity: Метрики сходства утверждений
            max_concepts: Сколько общих концептов возвращать
            max_claims: Сколько утверждений консенсуса возвращать
            dedup_prefix_length: Длина префикса для отсева дубликатов
            max_claim_length: Обрезка текста утверждения
            concept_pool_size: Размер списка концептов ответа (знаменатель общей уверенности)
        """
        self.similarity = similarity or SimilarityEngine()
        self.max_concepts = max_concepts
        self.max_claims = max_claims
        self.dedup_prefix_length = dedup_prefix_length
        self.max_claim_length = max_claim_length
        self.concept_pool_size = concept_pool_size

    def common_concepts(self, profiles: Sequence[ResponseProfile]) -> List[str]:
        """Пересечение наборов концептов всех ответов в порядке первого ответа."""
        if not profiles:
            return []
        common = profiles[0].concept_words
        for profile in profiles[1:]:
            words = set(profile.concept_words)
            common = [w for w in common if w in words]
        return common

    def supported_claims(self, profiles: Sequence[ResponseProfile], threshold: float) -> List[ConsensusClaim]:
        """
        Утверждения, поддержанные как минимум двумя источниками.

        Якорное утверждение пропускается, если его префикс уже встречался;
        сравнение же идёт со всеми последующими утверждениями списка.
        """
        all_claims: List[Tuple[str, str]] = [
            (claim, profile.id) for profile in profiles for claim in profile.claims
        ]
        seen = set()
        result: List[ConsensusClaim] = []

        for i, (claim, source_id) in enumerate(all_claims):
            prefix = claim.lower()[:self.dedup_prefix_length]
            if prefix in seen:
                continue
            seen.add(prefix)

            supporters = [source_id]
            for other_claim, other_id in all_claims[i + 1:]:
                if other_id in supporters:
                    continue
                if self.similarity.claims_similarity(claim, other_claim) > threshold:
                    supporters.append(other_id)

            if len(supporters) >= 2:
                result.append(ConsensusClaim(
                    text=claim[:self.max_claim_length],
                    supporting_ids=tuple(supporters),
                    confidence=len(supporters) / len(profiles),
                ))

        result.sort(key=lambda c: c.confidence, reverse=True)
        return result[:self.max_claims]

    def find(self, profiles: Sequence[ResponseProfile], similarity_threshold: float) -> Consensus:
        """
        Вычисляет консенсус активных ответов.

        Args:
            profiles: Активные ответы
            similarity_threshold: Порог сходства утверждений (строго больше)

        Returns:
            Consensus; пустой при менее чем двух ответах
        """
        if len(profiles) < 2:
            return Consensus()

        common = self.common_concepts(profiles)
        claims = self.supported_claims(profiles, similarity_threshold)
        confidence = len(common) / self.concept_pool_size if common else 0.0
        logger.debug(f"Консенсус: {len(common)} общих концептов, {len(claims)} утверждений")

        return Consensus(
            concepts=tuple(common[:self.max_concepts]),
            claims=tuple(claims),
            confidence=confidence,
        )
