"""
Компонент сравнения двух ответов в режиме «дебатов».
"""

from typing import Optional

from ..interfaces.analysis import (
    Agreement,
    DebateResult,
    Disagreement,
    ResponseProfile,
    SimilarityInterface,
)
from .similarity import SimilarityEngine


class DebateComparator:
    """Сопоставляет утверждения двух ответов: совпадения и расхождения."""

    def __init__(self, similarity: Optional[SimilarityInterface] = None, threshold: float = 0.6):
        self.similarity = similarity or SimilarityEngine()
        self.threshold = threshold

    def compare(self, first: ResponseProfile, second: ResponseProfile) -> DebateResult:
        """
        Для каждого утверждения первого ответа ищет первое похожее во втором.
        Найденные пары — согласия; ненайденные — расхождения первого ответа.
        Утверждения второго ответа без пары в первом — расхождения второго.

        Args:
            first: Ответ A
            second: Ответ B

        Returns:
            DebateResult
        """
        agreements = []
        disagreements = []

        for claim_a in first.claims:
            match = None
            for claim_b in second.claims:
                sim = self.similarity.claims_similarity(claim_a, claim_b)
                if sim > self.threshold:
                    match = Agreement(claim_a=claim_a, claim_b=claim_b, similarity=sim)
                    break
            if match is not None:
                agreements.append(match)
            else:
                disagreements.append(Disagreement(claim=claim_a, source_id=first.id))

        for claim_b in second.claims:
            if not any(self.similarity.claims_similarity(claim_a, claim_b) > self.threshold
                       for claim_a in first.claims):
                disagreements.append(Disagreement(claim=claim_b, source_id=second.id))

        return DebateResult(agreements=tuple(agreements), disagreements=tuple(disagreements))
