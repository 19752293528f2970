"""
Оценки качества отдельного ответа: энтропия (H), связность (C) и LMC-оценка.

LMC (Least Model Complexity) = C / (H + epsilon): больше связности
на единицу информационной энтропии — выше оценка.
"""

import math
from collections import Counter
from typing import Optional

import numpy as np

from ..interfaces.analysis import InvalidConfigurationError, ResponseScore
from .lexicon import Lexicon, DEFAULT_LEXICON
from .sentence_splitter import SentenceSplitter
from .tokenizer import TokenProcessor

# Тексты короче этого порога слишком разрежены для оценки
MIN_SCORABLE_LENGTH = 50


class EntropyScorer:
    """Нормированная энтропия Шеннона распределения слов."""

    def __init__(self, tokenizer: Optional[TokenProcessor] = None, min_token_length: int = 3):
        self.tokenizer = tokenizer or TokenProcessor()
        self.min_token_length = min_token_length

    def entropy(self, text: Optional[str]) -> float:
        """
        Энтропия (log2) частот слов, делённая на 10 и ограниченная сверху единицей.

        Args:
            text: Исходный текст

        Returns:
            Значение в [0, 1]; 0 для текстов короче 50 символов
        """
        if not text or len(text) < MIN_SCORABLE_LENGTH:
            return 0.0
        counts = Counter(self.tokenizer.iter_tokens(text, self.min_token_length))
        if not counts:
            return 0.0
        frequencies = np.fromiter(counts.values(), dtype=np.float64)
        probabilities = frequencies / frequencies.sum()
        bits = float(-np.sum(probabilities * np.log2(probabilities)))
        return min(max(bits / 10.0, 0.0), 1.0)


class CoherenceScorer:
    """
    Эвристическая связность текста.

    Взвешенная сумма четырёх сигналов по словам от 4 символов:
    доля повторов (0.25), средняя длина предложения (0.35),
    доля содержательных слов (0.30) и бонус за отрицания (0.10).
    """

    REPETITION_WEIGHT = 0.25
    LENGTH_WEIGHT = 0.35
    CONTENT_WEIGHT = 0.30
    NEGATION_WEIGHT = 0.10

    def __init__(self,
                 lexicon: Lexicon = DEFAULT_LEXICON,
                 tokenizer: Optional[TokenProcessor] = None,
                 splitter: Optional[SentenceSplitter] = None,
                 min_token_length: int = 4):
        self.lexicon = lexicon
        self.tokenizer = tokenizer or TokenProcessor(alphabet=lexicon.alphabet)
        self.splitter = splitter or SentenceSplitter()
        self.min_token_length = min_token_length

    def coherence(self, text: Optional[str]) -> float:
        """
        Оценивает связность текста.

        Args:
            text: Исходный текст

        Returns:
            0 для текстов короче 50 символов, 0.5 если предложений меньше двух,
            иначе взвешенная сумма сигналов (обычно в [0, 1])
        """
        if not text or len(text) < MIN_SCORABLE_LENGTH:
            return 0.0

        sentences = self.splitter.candidate_sentences(text)
        if len(sentences) < 2:
            return 0.5

        words = self.tokenizer.tokenize(text, self.min_token_length)
        total = max(len(words), 1)

        repetition_rate = 1 - (len(set(words)) / total)
        length_coherence = min(len(words) / len(sentences) / 20, 1.0)
        content_ratio = sum(1 for w in words if not self.lexicon.is_stopword(w)) / total
        negation_bonus = min(self.lexicon.count_negations(text) / 10, 0.1)

        return (repetition_rate * self.REPETITION_WEIGHT
                + length_coherence * self.LENGTH_WEIGHT
                + content_ratio * self.CONTENT_WEIGHT
                + negation_bonus * self.NEGATION_WEIGHT)


class LMCScorer:
    """Сводит энтропию и связность в итоговую оценку ответа."""

    def __init__(self,
                 entropy_scorer: Optional[EntropyScorer] = None,
                 coherence_scorer: Optional[CoherenceScorer] = None):
        self.entropy_scorer = entropy_scorer or EntropyScorer()
        self.coherence_scorer = coherence_scorer or CoherenceScorer()

    @staticmethod
    def lmc(entropy: float, coherence: float, epsilon: float) -> float:
        """
        LMC-оценка: C / (H + epsilon).

        Raises:
            InvalidConfigurationError: если epsilon <= 0 или бесконечен
        """
        if not math.isfinite(epsilon) or not epsilon > 0:
            raise InvalidConfigurationError(f"epsilon должен быть конечным и > 0, получено: {epsilon}")
        return coherence / (entropy + epsilon)

    def score(self, text: Optional[str], epsilon: float) -> ResponseScore:
        """Вычисляет H, C и LMC-оценку текста (чистая функция от текста и epsilon)."""
        entropy = self.entropy_scorer.entropy(text)
        coherence = self.coherence_scorer.coherence(text)
        return ResponseScore(
            entropy=entropy,
            coherence=coherence,
            lmc_score=self.lmc(entropy, coherence, epsilon),
        )
