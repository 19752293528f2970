import pytest

from lmc_analyser.components.exporter import SynthesisExporter
from lmc_analyser.engine import AnalysisEngine
from lmc_analyser.interfaces.analysis import AnalysisConfig
from lmc_analyser.samples import example_responses


@pytest.mark.integration
def test_example_pipeline_end_to_end():
    """Проверяет полный пайплайн на встроенном примере: оценки → агрегаты → JSON/таблицы."""
    responses = example_responses()
    config = AnalysisConfig.from_preset("standard")
    synthesis = AnalysisEngine().run(responses, config, timestamp="2024-01-01T00:00:00+00:00")

    # 1) Все три ответа достаточно длинные
    assert synthesis.active_ids == ("ai_0", "ai_1", "ai_2")
    for score in synthesis.scores.values():
        assert 0.0 <= score.entropy <= 1.0
        assert score.coherence >= 0.0
        assert score.lmc_score == pytest.approx(score.coherence / (score.entropy + config.epsilon))

    # 2) Совет обратиться к врачу при затяжном кашле есть у всех
    assert "persiste" in synthesis.consensus.concepts
    for claim in synthesis.consensus.claims:
        assert len(set(claim.supporting_ids)) >= 2
        assert claim.confidence == pytest.approx(len(claim.supporting_ids) / 3)

    # 3) Эмерджентные пары лежат в полосе сходства и идут из разных ответов
    for insight in synthesis.emergent_insights:
        assert 0.65 < insight.similarity < 0.92
        assert insight.source_a != insight.source_b
    rarities = [i.rarity for i in synthesis.emergent_insights]
    assert rarities == sorted(rarities, reverse=True)

    # 4) Экспорт
    exporter = SynthesisExporter()
    assert len(exporter.scores_frame(synthesis)) == 3
    assert '"persiste"' in exporter.to_json(synthesis)


@pytest.mark.integration
def test_presets_change_activity_not_concepts():
    """Пресет academique требует ответов длиннее 200 символов."""
    responses = example_responses()
    engine = AnalysisEngine()

    standard = engine.run(responses, AnalysisConfig.from_preset("standard"))
    academic = engine.run(responses, AnalysisConfig.from_preset("academique"))

    assert standard.active_ids == academic.active_ids
    assert standard.concepts == academic.concepts
    assert standard.consensus.concepts == academic.consensus.concepts
