"""
Компонент поиска уникальных утверждений ответа.

Утверждение уникально, если ни одно утверждение других ответов
не похоже на него сильнее порога.
"""

from typing import Dict, Optional, Sequence, Tuple

from ..interfaces.analysis import ResponseProfile, SimilarityInterface
from .similarity import SimilarityEngine


class UniqueInsightFinder:
    """Собирает уникальные утверждения каждого ответа."""

    def __init__(self,
                 similarity: Optional[SimilarityInterface] = None,
                 threshold: float = 0.55,
                 max_per_response: int = 5,
                 max_claim_length: int = 200):
        self.similarity = similarity or SimilarityEngine()
        self.threshold = threshold
        self.max_per_response = max_per_response
        self.max_claim_length = max_claim_length

    def is_unique(self, claim: str, other_claims: Sequence[str]) -> bool:
        return not any(
            self.similarity.claims_similarity(claim, other) > self.threshold
            for other in other_claims
        )

    def find(self, profiles: Sequence[ResponseProfile]) -> Dict[str, Tuple[str, ...]]:
        """
        Args:
            profiles: Активные ответы

        Returns:
            Отображаемое имя ответа → его уникальные утверждения (возможно пустые)
        """
        if len(profiles) < 2:
            return {}

        insights: Dict[str, Tuple[str, ...]] = {}
        for idx, profile in enumerate(profiles):
            other_claims = [
                claim
                for oidx, other in enumerate(profiles) if oidx != idx
                for claim in other.claims
            ]
            unique = [
                claim[:self.max_claim_length]
                for claim in profile.claims
                if self.is_unique(claim, other_claims)
            ]
            insights[profile.display_name] = tuple(unique[:self.max_per_response])
        return insights
