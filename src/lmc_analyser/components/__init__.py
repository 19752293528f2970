"""
Компоненты для анализа и сравнения ответов.

Каждый компонент отвечает за одну конкретную задачу:
- Lexicon - стоп-слова и маркеры утверждений/отрицаний
- TokenProcessor - токенизация текста
- SentenceSplitter - разбиение на предложения
- ClaimExtractor - извлечение утверждений
- ConceptExtractor - частотные концепты ответа
- SimilarityEngine - сходство слов и утверждений
- EntropyScorer, CoherenceScorer, LMCScorer - оценки ответа
- ScoreCache - кэш оценок
- ConsensusFinder, DivergenceFinder, UniqueInsightFinder,
  EmergentInsightMiner, DebateComparator - агрегаторы по нескольким ответам
- SynthesisExporter - представление результатов
"""

from .lexicon import Lexicon, DEFAULT_LEXICON
from .tokenizer import TokenProcessor
from .sentence_splitter import SentenceSplitter
from .claim_extractor import ClaimExtractor
from .concept_extractor import ConceptExtractor
from .similarity import SimilarityEngine
from .scorers import EntropyScorer, CoherenceScorer, LMCScorer
from .score_cache import ScoreCache, content_fingerprint
from .consensus import ConsensusFinder
from .divergence import DivergenceFinder
from .unique_insights import UniqueInsightFinder
from .emergent_insights import EmergentInsightMiner
from .debate import DebateComparator
from .exporter import SynthesisExporter

__all__ = [
    'Lexicon',
    'DEFAULT_LEXICON',
    'TokenProcessor',
    'SentenceSplitter',
    'ClaimExtractor',
    'ConceptExtractor',
    'SimilarityEngine',
    'EntropyScorer',
    'CoherenceScorer',
    'LMCScorer',
    'ScoreCache',
    'content_fingerprint',
    'ConsensusFinder',
    'DivergenceFinder',
    'UniqueInsightFinder',
    'EmergentInsightMiner',
    'DebateComparator',
    'SynthesisExporter',
]
