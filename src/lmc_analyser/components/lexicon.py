"""
Статические словари эвристик: алфавит, стоп-слова, маркеры утверждений и отрицаний.

Значения по умолчанию рассчитаны на французский текст, но набор
передаётся в компоненты явно и может быть заменён для другого языка.
"""

import re
import unicodedata
from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple


# Латиница плюс расширенный алфавит с диакритикой
DEFAULT_ALPHABET = "a-zàâäéèêëïîôöùûüœæç"

# Базовые стоп-слова (используются в оценке связности)
BASE_STOPWORDS = frozenset({
    'cette', 'comme', 'dans', 'pour', 'avec', 'sont', 'leurs', 'plus', 'peut',
    'être', 'fait', 'permet', 'avoir', 'faire', 'entre', 'donc', 'aussi', 'ainsi',
    'selon', 'toute', 'tous', 'était', 'serait', 'pourrait', 'existe', 'autres',
    'chaque', 'peuvent', 'encore', 'toujours', 'quelque', 'certains', 'plusieurs',
})

# Дополнительные служебные слова, которые не считаются концептами
CONCEPT_EXTRA_STOPWORDS = frozenset({
    'parce', 'lorsque', 'quand', 'comment', 'pourquoi', 'avant', 'après', 'pendant',
    'celui', 'celle', 'autre', 'votre', 'notre', 'même', 'très',
})

# Глаголы утверждения, причинности и вывода (ищутся как подстроки)
DEFAULT_CLAIM_MARKERS = (
    'est ', 'sont ', 'représente', 'correspond', 'signifie', 'implique',
    'démontre', 'prouve', 'permet', 'cause', 'entraîne', 'résulte',
    'montre', 'indique', 'suggère', 'confirme', 'révèle', 'favorise',
    'aide', 'améliore', 'réduit', 'augmente', 'consiste',
)

DEFAULT_NEGATION_MARKERS = (
    "n'est pas", 'ne sont pas', "n'a pas", 'ne peut pas', 'jamais', 'aucun',
)


def _fold(text: str) -> str:
    """NFC + нижний регистр для поиска маркеров."""
    return unicodedata.normalize('NFC', text).lower()


@dataclass(frozen=True)
class Lexicon:
    """Набор словарей для токенизации, фильтрации и поиска утверждений."""
    alphabet: str = DEFAULT_ALPHABET
    stopwords: FrozenSet[str] = BASE_STOPWORDS
    concept_stopwords: FrozenSet[str] = BASE_STOPWORDS | CONCEPT_EXTRA_STOPWORDS
    claim_markers: Tuple[str, ...] = DEFAULT_CLAIM_MARKERS
    negation_markers: Tuple[str, ...] = DEFAULT_NEGATION_MARKERS
    _negation_pattern: Optional[re.Pattern] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        pattern = None
        if self.negation_markers:
            pattern = re.compile(
                '|'.join(re.escape(m) for m in self.negation_markers),
                re.IGNORECASE,
            )
        object.__setattr__(self, '_negation_pattern', pattern)

    def is_stopword(self, token: str) -> bool:
        return token in self.stopwords

    def is_concept_stopword(self, token: str) -> bool:
        return token in self.concept_stopwords

    def count_negations(self, text: str) -> int:
        """Количество вхождений маркеров отрицания (без учёта регистра)."""
        if not text or self._negation_pattern is None:
            return 0
        return len(self._negation_pattern.findall(unicodedata.normalize('NFC', text)))

    def has_claim_marker(self, sentence: str) -> bool:
        lowered = _fold(sentence)
        return any(marker in lowered for marker in self.claim_markers)

    def has_negation_marker(self, sentence: str) -> bool:
        lowered = _fold(sentence)
        return any(marker in lowered for marker in self.negation_markers)


DEFAULT_LEXICON = Lexicon()
