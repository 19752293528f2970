"""
Компонент для извлечения утверждений (claims) из ответа.

Утверждение — предложение, содержащее маркер утверждения/причинности
или маркер отрицания.
"""

from typing import List, Optional
from ..interfaces.analysis import ClaimExtractorInterface
from .lexicon import Lexicon, DEFAULT_LEXICON
from .sentence_splitter import SentenceSplitter


class ClaimExtractor(ClaimExtractorInterface):
    """Отбирает предложения-утверждения по словарям маркеров."""

    def __init__(self,
                 lexicon: Lexicon = DEFAULT_LEXICON,
                 splitter: Optional[SentenceSplitter] = None,
                 min_text_length: int = 100,
                 max_claims: int = 20):
        self.lexicon = lexicon
        self.splitter = splitter or SentenceSplitter()
        self.min_text_length = min_text_length
        self.max_claims = max_claims

    def is_claim(self, sentence: str) -> bool:
        return self.lexicon.has_claim_marker(sentence) or self.lexicon.has_negation_marker(sentence)

    def extract(self, text: Optional[str]) -> List[str]:
        """
        Извлекает утверждения из текста.

        Args:
            text: Исходный текст ответа

        Returns:
            Не более max_claims утверждений в порядке следования в тексте
        """
        if not text or len(text) < self.min_text_length:
            return []
        claims = []
        for sentence in self.splitter.split(text):
            if self.is_claim(sentence):
                claims.append(sentence)
                if len(claims) >= self.max_claims:
                    break
        return claims
