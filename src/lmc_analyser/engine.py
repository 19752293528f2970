"""
Движок сравнения ответов разных ассистентов

Предоставляет функциональность для:
- Оценки каждого ответа (энтропия, связность, LMC)
- Извлечения концептов и утверждений
- Поиска консенсуса, расхождений, уникальных и эмерджентных инсайтов
- Сравнения двух ответов в режиме дебатов

Движок не хранит состояние между запусками: конфигурация передаётся
в каждый вызов, единственное разделяемое состояние — необязательный
кэш оценок.
"""

import logging
from typing import List, Optional, Sequence

from .components.lexicon import Lexicon, DEFAULT_LEXICON
from .components.tokenizer import TokenProcessor
from .components.sentence_splitter import SentenceSplitter
from .components.claim_extractor import ClaimExtractor
from .components.concept_extractor import ConceptExtractor
from .components.similarity import SimilarityEngine
from .components.scorers import EntropyScorer, CoherenceScorer, LMCScorer
from .components.consensus import ConsensusFinder
from .components.divergence import DivergenceFinder
from .components.unique_insights import UniqueInsightFinder
from .components.emergent_insights import EmergentInsightMiner
from .components.debate import DebateComparator
from .interfaces.analysis import (
    AnalysisConfig,
    DebateResult,
    ResponseInput,
    ResponseProfile,
    ResponseScore,
    ScoreCacheInterface,
    Synthesis,
)

logger = logging.getLogger(__name__)


class AnalysisEngine:
    """Оркестратор: из набора ответов и конфигурации строит один Synthesis."""

    def __init__(self,
                 lexicon: Lexicon = DEFAULT_LEXICON,
                 score_cache: Optional[ScoreCacheInterface] = None,
                 concept_extractor: Optional[ConceptExtractor] = None,
                 claim_extractor: Optional[ClaimExtractor] = None,
                 similarity: Optional[SimilarityEngine] = None):
        """
        Инициализация движка.

        Args:
            lexicon: Словари стоп-слов и маркеров
            score_cache: Кэш оценок (None — без кэширования)
            concept_extractor: Экстрактор концептов (по умолчанию слова от 5 символов, топ-40)
            claim_extractor: Экстрактор утверждений
            similarity: Метрики сходства
        """
        self.lexicon = lexicon
        self.score_cache = score_cache

        tokenizer = TokenProcessor(alphabet=lexicon.alphabet)
        splitter = SentenceSplitter()
        self.similarity = similarity or SimilarityEngine()
        self.concept_extractor = concept_extractor or ConceptExtractor(lexicon=lexicon, tokenizer=tokenizer)
        self.claim_extractor = claim_extractor or ClaimExtractor(lexicon=lexicon, splitter=splitter)
        self.scorer = LMCScorer(
            entropy_scorer=EntropyScorer(tokenizer=tokenizer),
            coherence_scorer=CoherenceScorer(lexicon=lexicon, tokenizer=tokenizer, splitter=splitter),
        )

        self.consensus_finder = ConsensusFinder(similarity=self.similarity)
        self.divergence_finder = DivergenceFinder()
        self.unique_finder = UniqueInsightFinder(similarity=self.similarity)
        self.emergent_miner = EmergentInsightMiner(similarity=self.similarity)
        self.debate_comparator = DebateComparator(similarity=self.similarity)

    # ===== Оценки =====

    def score_response(self, response: ResponseInput, epsilon: float) -> ResponseScore:
        """
        Оценка ответа с использованием кэша, если он задан.

        Args:
            response: Ответ
            epsilon: Сглаживающая константа LMC

        Returns:
            ResponseScore
        """
        if self.score_cache is not None:
            cached = self.score_cache.get(response.id, response.text, epsilon)
            if cached is not None:
                logger.debug(f"Оценка '{response.id}' взята из кэша")
                return cached

        score = self.scorer.score(response.text, epsilon)
        if self.score_cache is not None:
            self.score_cache.put(response.id, response.text, epsilon, score)
        return score

    def build_profile(self, response: ResponseInput, epsilon: float) -> ResponseProfile:
        """Собирает оценки, концепты и утверждения ответа."""
        return ResponseProfile(
            id=response.id,
            display_name=response.display_name,
            text=response.text,
            score=self.score_response(response, epsilon),
            concepts=tuple(self.concept_extractor.extract(response.text)),
            claims=tuple(self.claim_extractor.extract(response.text)),
        )

    @staticmethod
    def active_responses(responses: Sequence[ResponseInput], config: AnalysisConfig) -> List[ResponseInput]:
        """Ответы, длина очищенного текста которых больше min_content_length."""
        return [r for r in responses if r.is_active(config.min_content_length)]

    # ===== Основной анализ =====

    def run(self,
            responses: Sequence[ResponseInput],
            config: AnalysisConfig,
            timestamp: Optional[str] = None) -> Synthesis:
        """
        Выполняет полный анализ набора ответов.

        Args:
            responses: Ответы в порядке ввода
            config: Параметры анализа
            timestamp: Метка времени, которую проставляет вызывающий слой

        Returns:
            Synthesis; при менее чем двух активных ответах все агрегаты пустые

        Raises:
            InvalidConfigurationError: если конфигурация некорректна
        """
        config.validate()
        responses = tuple(responses)
        active = self.active_responses(responses, config)
        logger.info(f"Анализ: активных ответов {len(active)} из {len(responses)}")

        profiles = [self.build_profile(r, config.epsilon) for r in active]

        consensus = self.consensus_finder.find(profiles, config.similarity_threshold)
        divergences = self.divergence_finder.find(profiles)
        insights = self.unique_finder.find(profiles)
        emergent = self.emergent_miner.mine(profiles)
        # По умолчанию дебаты между первыми двумя активными ответами
        debate = self.debate_comparator.compare(profiles[0], profiles[1]) if len(profiles) >= 2 else None

        logger.debug(
            f"Итог: консенсус {len(consensus.claims)} утв., расхождений {len(divergences)}, "
            f"эмерджентных пар {len(emergent)}"
        )

        return Synthesis(
            config=config,
            responses=responses,
            active_ids=tuple(p.id for p in profiles),
            scores={p.id: p.score for p in profiles},
            concepts={p.id: p.concepts for p in profiles},
            consensus=consensus,
            divergences=tuple(divergences),
            insights=insights,
            emergent_insights=tuple(emergent),
            debate=debate,
            timestamp=timestamp,
        )

    def compare(self,
                responses: Sequence[ResponseInput],
                response_id_a: str,
                response_id_b: str,
                config: AnalysisConfig) -> DebateResult:
        """
        Сравнивает два выбранных ответа (режим дебатов).

        Args:
            responses: Набор ответов
            response_id_a: id ответа A
            response_id_b: id ответа B
            config: Параметры анализа (epsilon для оценок профиля)

        Returns:
            DebateResult

        Raises:
            KeyError: если id нет среди ответов
        """
        config.validate()
        by_id = {r.id: r for r in responses}
        for response_id in (response_id_a, response_id_b):
            if response_id not in by_id:
                raise KeyError(f"Ответ с id '{response_id}' не найден")
        first = self.build_profile(by_id[response_id_a], config.epsilon)
        second = self.build_profile(by_id[response_id_b], config.epsilon)
        return self.debate_comparator.compare(first, second)
