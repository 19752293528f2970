"""
LMC Analyser - сравнение и синтез ответов разных ИИ-ассистентов

Этот модуль предоставляет инструменты для:
- Оценки качества каждого ответа (энтропия, связность, LMC)
- Поиска консенсуса и расхождений между ответами
- Выделения уникальных и эмерджентных инсайтов
- Сравнения двух ответов в режиме дебатов
"""

__version__ = "0.1.0"

from .interfaces.analysis import (
    AnalysisConfig,
    ResponseInput,
    Synthesis,
    ConceptTag,
    InvalidConfigurationError,
    next_tag,
)
from .components.score_cache import ScoreCache
from .engine import AnalysisEngine

__all__ = [
    "AnalysisEngine",
    "AnalysisConfig",
    "ResponseInput",
    "Synthesis",
    "ConceptTag",
    "InvalidConfigurationError",
    "ScoreCache",
    "next_tag",
]
