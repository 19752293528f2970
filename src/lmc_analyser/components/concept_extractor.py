"""
Компонент для извлечения концептов ответа.

Концепт — частое содержательное слово: токен длиной от 5 символов,
не входящий в стоп-слова. Отвечает за подсчёт частоты и отбор
самых частых слов.
"""

from collections import Counter
from typing import List, Optional
from ..interfaces.analysis import Concept, ConceptExtractorInterface
from .lexicon import Lexicon, DEFAULT_LEXICON
from .tokenizer import TokenProcessor


class ConceptExtractor(ConceptExtractorInterface):
    """Ранжирует слова ответа по частоте в ограниченный список концептов."""

    def __init__(self,
                 lexicon: Lexicon = DEFAULT_LEXICON,
                 tokenizer: Optional[TokenProcessor] = None,
                 min_length: int = 5,
                 max_concepts: int = 40,
                 min_text_length: int = 50):
        """
        Инициализирует экстрактор концептов.

        Args:
            lexicon: Словари стоп-слов
            tokenizer: Токенизатор (по умолчанию с алфавитом словаря)
            min_length: Минимальная длина слова-концепта
            max_concepts: Сколько самых частых слов оставлять
            min_text_length: Более короткие тексты не анализируются
        """
        self.lexicon = lexicon
        self.tokenizer = tokenizer or TokenProcessor(alphabet=lexicon.alphabet)
        self.min_length = min_length
        self.max_concepts = max_concepts
        self.min_text_length = min_text_length

    def count_frequency(self, text: Optional[str]) -> Counter:
        """
        Подсчитывает частоту содержательных слов.

        Args:
            text: Исходный текст

        Returns:
            Counter в порядке первого появления слов
        """
        tokens = self.tokenizer.iter_tokens(text, self.min_length)
        return Counter(t for t in tokens if not self.lexicon.is_concept_stopword(t))

    def extract(self, text: Optional[str]) -> List[Concept]:
        """
        Возвращает самые частые слова текста.

        При равной частоте сохраняется порядок первого появления
        (сортировка устойчива).

        Args:
            text: Исходный текст

        Returns:
            Не более max_concepts концептов по убыванию частоты
        """
        if not text or len(text) < self.min_text_length:
            return []
        frequencies = self.count_frequency(text)
        # Сортируем по частоте (убывание)
        ranked = sorted(frequencies.items(), key=lambda x: x[1], reverse=True)
        return [Concept(word=word, frequency=freq) for word, freq in ranked[:self.max_concepts]]
