"""
Компонент для представления результатов синтеза.

Отвечает за преобразование Synthesis в JSON-совместимую структуру
и в таблицы pandas для отчётов и интерфейса. Запись в файлы и
рендеринг Markdown выполняют внешние потребители.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Dict

import pandas as pd

from ..interfaces.analysis import Synthesis

logger = logging.getLogger(__name__)


def _jsonable(value: Any) -> Any:
    """Рекурсивно приводит значения к типам, поддерживаемым json."""
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _jsonable(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


class SynthesisExporter:
    """Экспортёр результатов синтеза."""

    def to_dict(self, synthesis: Synthesis) -> Dict[str, Any]:
        """
        Преобразует синтез в словарь из примитивных типов.

        Args:
            synthesis: Результат анализа

        Returns:
            Словарь, пригодный для json.dumps
        """
        if not is_dataclass(synthesis):
            raise TypeError(f"Ожидался Synthesis, получено: {type(synthesis).__name__}")
        return _jsonable(synthesis)

    def to_json(self, synthesis: Synthesis, indent: int = 2) -> str:
        """Сериализует синтез в JSON (без экранирования не-ASCII символов)."""
        return json.dumps(self.to_dict(synthesis), ensure_ascii=False, indent=indent)

    def scores_frame(self, synthesis: Synthesis) -> pd.DataFrame:
        """
        Таблица оценок активных ответов, отсортированная по LMC-оценке.

        Returns:
            DataFrame с колонками id, name, entropy, coherence, lmc_score
        """
        rows = [
            {
                'id': response.id,
                'name': response.display_name,
                'entropy': score.entropy,
                'coherence': score.coherence,
                'lmc_score': score.lmc_score,
            }
            for response, score in synthesis.ranked_scores()
        ]
        return pd.DataFrame(rows, columns=['id', 'name', 'entropy', 'coherence', 'lmc_score'])

    def consensus_frame(self, synthesis: Synthesis) -> pd.DataFrame:
        """Таблица утверждений консенсуса с именами поддержавших ответов."""
        names = {r.id: r.display_name for r in synthesis.responses}
        rows = [
            {
                'claim': claim.text,
                'support': len(claim.supporting_ids),
                'sources': ', '.join(names.get(i, i) for i in claim.supporting_ids),
                'confidence': claim.confidence,
            }
            for claim in synthesis.consensus.claims
        ]
        if not rows:
            logger.info("Нет утверждений консенсуса для таблицы")
        return pd.DataFrame(rows, columns=['claim', 'support', 'sources', 'confidence'])

    def emergent_frame(self, synthesis: Synthesis) -> pd.DataFrame:
        """Таблица эмерджентных инсайтов."""
        names = {r.id: r.display_name for r in synthesis.responses}
        rows = [
            {
                'concept_a': insight.concept_a,
                'source_a': names.get(insight.source_a, insight.source_a),
                'concept_b': insight.concept_b,
                'source_b': names.get(insight.source_b, insight.source_b),
                'similarity': insight.similarity,
                'rarity': insight.rarity,
            }
            for insight in synthesis.emergent_insights
        ]
        return pd.DataFrame(
            rows,
            columns=['concept_a', 'source_a', 'concept_b', 'source_b', 'similarity', 'rarity'],
        )
