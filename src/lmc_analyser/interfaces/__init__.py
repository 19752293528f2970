"""
Модель данных и интерфейсы для компонентов анализа ответов.

Определяет структуры результатов и абстрактные базовые классы компонентов,
обеспечивая единообразный API и возможность замены реализаций.
"""

from .analysis import (
    AnalysisConfig,
    ResponseInput,
    ResponseScore,
    ResponseProfile,
    Concept,
    ConceptTag,
    ConsensusClaim,
    Consensus,
    Divergence,
    EmergentInsight,
    Agreement,
    Disagreement,
    DebateResult,
    Synthesis,
    InvalidConfigurationError,
    PRESETS,
    DEFAULT_PRESET,
    next_tag,
    apply_tags,
    TokenProcessorInterface,
    SentenceSplitterInterface,
    ClaimExtractorInterface,
    ConceptExtractorInterface,
    SimilarityInterface,
    ScoreCacheInterface,
)

__all__ = [
    'AnalysisConfig',
    'ResponseInput',
    'ResponseScore',
    'ResponseProfile',
    'Concept',
    'ConceptTag',
    'ConsensusClaim',
    'Consensus',
    'Divergence',
    'EmergentInsight',
    'Agreement',
    'Disagreement',
    'DebateResult',
    'Synthesis',
    'InvalidConfigurationError',
    'PRESETS',
    'DEFAULT_PRESET',
    'next_tag',
    'apply_tags',
    'TokenProcessorInterface',
    'SentenceSplitterInterface',
    'ClaimExtractorInterface',
    'ConceptExtractorInterface',
    'SimilarityInterface',
    'ScoreCacheInterface',
]
