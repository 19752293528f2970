"""
Компонент для токенизации текста ответов.

Отвечает за разбивку текста на слова в нижнем регистре
и фильтрацию по минимальной длине.
"""

import re
import unicodedata
from typing import Iterator, List, Optional
from ..interfaces.analysis import TokenProcessorInterface
from .lexicon import DEFAULT_ALPHABET


class TokenProcessor(TokenProcessorInterface):
    """Процессор для токенизации текста."""

    def __init__(self, min_length: int = 3, alphabet: str = DEFAULT_ALPHABET):
        """
        Инициализирует процессор токенизации.

        Args:
            min_length: Минимальная длина токена по умолчанию
            alphabet: Класс символов регулярного выражения (в нижнем регистре)
        """
        self.min_length = min_length
        self.alphabet = alphabet
        self.word_pattern = re.compile(f'[{alphabet}]+')

    def iter_tokens(self, text: Optional[str], min_length: Optional[int] = None) -> Iterator[str]:
        """
        Лениво выдаёт токены текста.

        Args:
            text: Исходный текст
            min_length: Минимальная длина токена (по умолчанию из конструктора)

        Yields:
            Токены в нижнем регистре в порядке появления
        """
        if not text:
            return
        threshold = self.min_length if min_length is None else min_length
        # Единая Unicode-нормализация (NFC) до разбиения
        normalized = unicodedata.normalize('NFC', text).lower()
        for match in self.word_pattern.finditer(normalized):
            token = match.group(0)
            if len(token) >= threshold:
                yield token

    def tokenize(self, text: Optional[str], min_length: Optional[int] = None) -> List[str]:
        """
        Разбивает текст на токены.

        Args:
            text: Исходный текст
            min_length: Минимальная длина токена

        Returns:
            Список токенов
        """
        return list(self.iter_tokens(text, min_length))
