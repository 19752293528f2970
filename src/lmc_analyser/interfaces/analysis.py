"""
Модель данных и абстрактные интерфейсы движка сравнения ответов.

Определяет входные/выходные структуры анализа (конфигурация, ответы,
оценки, консенсус, расхождения, инсайты, дебаты, итоговый синтез)
и контракты компонентов, чтобы реализации можно было подменять.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple


class InvalidConfigurationError(ValueError):
    """Некорректные параметры анализа (нарушение предусловия вызывающей стороны)."""


# Значения пресетов: (epsilon, similarity_threshold, min_content_length)
PRESETS: Dict[str, Tuple[float, float, int]] = {
    'academique': (0.05, 0.5, 200),
    'creatif': (0.2, 0.4, 100),
    'standard': (0.1, 0.45, 100),
    'strict': (0.01, 0.6, 150),
}

DEFAULT_PRESET = 'standard'


@dataclass(frozen=True)
class AnalysisConfig:
    """Параметры одного запуска анализа."""
    epsilon: float = 0.1
    similarity_threshold: float = 0.45
    min_content_length: int = 100

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Проверяет диапазоны параметров.

        Raises:
            InvalidConfigurationError: если epsilon <= 0 или бесконечен, порог вне [0, 1]
                или минимальная длина отрицательна
        """
        if isinstance(self.epsilon, bool) or not isinstance(self.epsilon, (int, float)):
            raise InvalidConfigurationError(f"epsilon должен быть числом, получено: {self.epsilon!r}")
        if not math.isfinite(self.epsilon) or not self.epsilon > 0:
            raise InvalidConfigurationError(f"epsilon должен быть конечным и > 0, получено: {self.epsilon}")
        if isinstance(self.similarity_threshold, bool) or not isinstance(self.similarity_threshold, (int, float)):
            raise InvalidConfigurationError(
                f"similarity_threshold должен быть числом, получено: {self.similarity_threshold!r}"
            )
        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise InvalidConfigurationError(
                f"similarity_threshold должен быть в [0, 1], получено: {self.similarity_threshold}"
            )
        if isinstance(self.min_content_length, bool) or not isinstance(self.min_content_length, int):
            raise InvalidConfigurationError(
                f"min_content_length должен быть целым, получено: {self.min_content_length!r}"
            )
        if self.min_content_length < 0:
            raise InvalidConfigurationError(
                f"min_content_length должен быть >= 0, получено: {self.min_content_length}"
            )

    @classmethod
    def from_preset(cls, name: str) -> 'AnalysisConfig':
        """
        Создаёт конфигурацию по имени пресета.

        Args:
            name: Имя пресета (academique, creatif, standard, strict)

        Returns:
            Конфигурация пресета
        """
        key = (name or '').strip().lower()
        if key not in PRESETS:
            raise InvalidConfigurationError(
                f"Неизвестный пресет '{name}'. Доступны: {', '.join(sorted(PRESETS))}"
            )
        epsilon, threshold, min_length = PRESETS[key]
        return cls(epsilon=epsilon, similarity_threshold=threshold, min_content_length=min_length)


@dataclass(frozen=True)
class ResponseInput:
    """Ответ одного участника (ассистента)."""
    id: str
    display_name: str
    text: str

    def is_active(self, min_content_length: int) -> bool:
        """Ответ участвует в анализе, если длина очищенного текста больше порога."""
        return len((self.text or '').strip()) > min_content_length

    def truncated(self, max_text_length: int, max_name_length: int) -> 'ResponseInput':
        """Возвращает копию с обрезанными текстом и именем (ограничения формы ввода)."""
        return replace(
            self,
            display_name=(self.display_name or '')[:max_name_length],
            text=(self.text or '')[:max_text_length],
        )


@dataclass(frozen=True)
class ResponseScore:
    """Оценки качества одного ответа."""
    entropy: float
    coherence: float
    lmc_score: float


class ConceptTag(Enum):
    """Пометка концепта, которую ставит пользователь (не движок)."""
    NONE = 'none'
    IMPORTANT = 'important'
    VERIFY = 'verify'


_TAG_CYCLE = {
    ConceptTag.NONE: ConceptTag.IMPORTANT,
    ConceptTag.IMPORTANT: ConceptTag.VERIFY,
    ConceptTag.VERIFY: ConceptTag.NONE,
}


def next_tag(current: Optional[ConceptTag]) -> ConceptTag:
    """Следующая пометка по кругу: none → important → verify → none."""
    return _TAG_CYCLE[current or ConceptTag.NONE]


@dataclass(frozen=True)
class Concept:
    """Частое содержательное слово ответа."""
    word: str
    frequency: int
    tag: ConceptTag = ConceptTag.NONE


def apply_tags(concepts: Sequence[Concept], tags: Mapping[str, ConceptTag]) -> List[Concept]:
    """Проставляет пользовательские пометки из словаря слово → пометка."""
    return [replace(c, tag=tags.get(c.word, ConceptTag.NONE)) for c in concepts]


@dataclass(frozen=True)
class ResponseProfile:
    """Производные данные активного ответа, общие для всех агрегаторов."""
    id: str
    display_name: str
    text: str
    score: ResponseScore
    concepts: Tuple[Concept, ...]
    claims: Tuple[str, ...]

    @property
    def concept_words(self) -> List[str]:
        return [c.word for c in self.concepts]


@dataclass(frozen=True)
class ConsensusClaim:
    text: str
    supporting_ids: Tuple[str, ...]
    confidence: float


@dataclass(frozen=True)
class Consensus:
    concepts: Tuple[str, ...] = ()
    claims: Tuple[ConsensusClaim, ...] = ()
    confidence: float = 0.0


@dataclass(frozen=True)
class Divergence:
    response_id: str
    display_name: str
    unique_concepts: Tuple[str, ...]
    score: float


@dataclass(frozen=True)
class EmergentInsight:
    concept_a: str
    concept_b: str
    source_a: str
    source_b: str
    similarity: float
    rarity_a: float
    rarity_b: float

    @property
    def rarity(self) -> float:
        return self.rarity_a + self.rarity_b


@dataclass(frozen=True)
class Agreement:
    claim_a: str
    claim_b: str
    similarity: float


@dataclass(frozen=True)
class Disagreement:
    claim: str
    source_id: str
    kind: str = 'unique'


@dataclass(frozen=True)
class DebateResult:
    agreements: Tuple[Agreement, ...] = ()
    disagreements: Tuple[Disagreement, ...] = ()


@dataclass(frozen=True)
class Synthesis:
    """Полный результат одного запуска анализа."""
    config: AnalysisConfig
    responses: Tuple[ResponseInput, ...]
    active_ids: Tuple[str, ...]
    scores: Mapping[str, ResponseScore]
    concepts: Mapping[str, Tuple[Concept, ...]]
    consensus: Consensus
    divergences: Tuple[Divergence, ...]
    insights: Mapping[str, Tuple[str, ...]]
    emergent_insights: Tuple[EmergentInsight, ...]
    debate: Optional[DebateResult] = None
    # Метку времени проставляет вызывающий слой, движок её не трогает
    timestamp: Optional[str] = None

    def __post_init__(self):
        # Словари копируются и отдаются только на чтение
        for name in ('scores', 'concepts', 'insights'):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))
        object.__setattr__(self, 'responses', tuple(self.responses))
        object.__setattr__(self, 'active_ids', tuple(self.active_ids))

    def ranked_scores(self) -> List[Tuple[ResponseInput, ResponseScore]]:
        """Активные ответы, отсортированные по LMC-оценке (по убыванию)."""
        by_id = {r.id: r for r in self.responses}
        ranked = [(by_id[rid], self.scores[rid]) for rid in self.active_ids]
        ranked.sort(key=lambda pair: pair[1].lmc_score, reverse=True)
        return ranked


class TokenProcessorInterface(ABC):
    """Интерфейс для токенизации текста."""

    @abstractmethod
    def iter_tokens(self, text: Optional[str], min_length: Optional[int] = None) -> Iterator[str]:
        """Лениво выдаёт токены текста."""
        pass

    @abstractmethod
    def tokenize(self, text: Optional[str], min_length: Optional[int] = None) -> List[str]:
        """Разбивает текст на токены."""
        pass


class SentenceSplitterInterface(ABC):
    """Интерфейс для разбиения текста на предложения."""

    @abstractmethod
    def split(self, text: Optional[str]) -> List[str]:
        """Возвращает предложения-кандидаты."""
        pass


class ClaimExtractorInterface(ABC):
    """Интерфейс для извлечения утверждений."""

    @abstractmethod
    def extract(self, text: Optional[str]) -> List[str]:
        """Возвращает утверждения в порядке следования в тексте."""
        pass


class ConceptExtractorInterface(ABC):
    """Интерфейс для извлечения концептов."""

    @abstractmethod
    def extract(self, text: Optional[str]) -> List[Concept]:
        """Возвращает концепты, упорядоченные по частоте."""
        pass


class SimilarityInterface(ABC):
    """Интерфейс метрик сходства."""

    @abstractmethod
    def string_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        """Сходство двух слов по расстоянию редактирования."""
        pass

    @abstractmethod
    def claims_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        """Сходство двух утверждений по множествам токенов."""
        pass


class ScoreCacheInterface(ABC):
    """Интерфейс кэша оценок ответов."""

    @abstractmethod
    def get(self, response_id: str, text: str, epsilon: float) -> Optional[ResponseScore]:
        """Возвращает оценку из кэша или None."""
        pass

    @abstractmethod
    def put(self, response_id: str, text: str, epsilon: float, score: ResponseScore) -> None:
        """Сохраняет оценку в кэш."""
        pass
