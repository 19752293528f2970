"""
Компонент для разбиения текста на предложения.
"""

import re
from typing import List, Optional
from ..interfaces.analysis import SentenceSplitterInterface


class SentenceSplitter(SentenceSplitterInterface):
    """Разбивает текст на предложения по знакам конца предложения и пустым строкам."""

    # Конец предложения с пробелом после него либо серия пустых строк
    CLAIM_BOUNDARY = re.compile(r'[.!?]\s+|\n{2,}')
    SENTENCE_BOUNDARY = re.compile(r'[.!?]\s+')

    def __init__(self, min_length: int = 20, max_length: int = 500):
        """
        Args:
            min_length: Предложение должно быть строго длиннее
            max_length: Предложение должно быть строго короче
        """
        self.min_length = min_length
        self.max_length = max_length

    def split(self, text: Optional[str]) -> List[str]:
        """
        Возвращает очищенные предложения длиной в интервале (min_length, max_length).

        Args:
            text: Исходный текст

        Returns:
            Предложения в порядке следования
        """
        if not text:
            return []
        sentences = (part.strip() for part in self.CLAIM_BOUNDARY.split(text))
        return [s for s in sentences if self.min_length < len(s) < self.max_length]

    def candidate_sentences(self, text: Optional[str]) -> List[str]:
        """
        Грубое разбиение для оценки связности: только по знакам конца предложения,
        без очистки пробелов и без верхней границы длины.
        """
        if not text:
            return []
        return [s for s in self.SENTENCE_BOUNDARY.split(text) if len(s) > self.min_length]
