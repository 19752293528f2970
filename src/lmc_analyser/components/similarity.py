"""
Метрики сходства: для отдельных слов и для утверждений.

- string_similarity: 1 − нормированное расстояние Левенштейна (rapidfuzz)
- claims_similarity: коэффициент Жаккара по множествам слов от 4 символов
"""

import re
import unicodedata
from typing import Optional, Set

from rapidfuzz.distance import Levenshtein

from ..interfaces.analysis import SimilarityInterface


class SimilarityEngine(SimilarityInterface):
    """Две независимые симметричные метрики со значениями в [0, 1]."""

    def __init__(self, claim_token_min_length: int = 4):
        self.claim_token_min_length = claim_token_min_length
        self._claim_token_pattern = re.compile(rf'\b\w{{{claim_token_min_length},}}\b')

    def string_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        """
        Сходство слов по расстоянию редактирования, нормированному длиной более длинного слова.

        Сравнение без учёта регистра. Две пустые строки считаются
        идентичными (1.0); если пуста только одна из строк, сходство равно 0.

        Args:
            a: Первое слово
            b: Второе слово

        Returns:
            Значение в [0, 1]
        """
        a = a or ''
        b = b or ''
        if not a and not b:
            return 1.0
        if not a or not b:
            return 0.0
        return Levenshtein.normalized_similarity(
            unicodedata.normalize('NFC', a).lower(),
            unicodedata.normalize('NFC', b).lower(),
        )

    def claim_tokens(self, claim: Optional[str]) -> Set[str]:
        if not claim:
            return set()
        normalized = unicodedata.normalize('NFC', claim).lower()
        return set(self._claim_token_pattern.findall(normalized))

    def claims_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        """
        Коэффициент Жаккара множеств слов двух утверждений.

        Args:
            a: Первое утверждение
            b: Второе утверждение

        Returns:
            Значение в [0, 1]; 0 если у одного из утверждений нет слов
        """
        tokens_a = self.claim_tokens(a)
        tokens_b = self.claim_tokens(b)
        if not tokens_a or not tokens_b:
            return 0.0
        return len(tokens_a & tokens_b) / len(tokens_a | tokens_b)
