"""
Тесты движка анализа.
"""

import dataclasses

import pytest

from lmc_analyser.components.concept_extractor import ConceptExtractor
from lmc_analyser.engine import AnalysisEngine
from lmc_analyser.interfaces.analysis import (
    AnalysisConfig,
    Consensus,
    InvalidConfigurationError,
    ResponseInput,
)
from lmc_analyser.samples import example_responses


class TestAnalysisEngine:
    """Тесты для AnalysisEngine."""

    def test_honey_pair_consensus(self, engine, honey_pair, standard_config, sample_texts):
        synthesis = engine.run(honey_pair, standard_config)

        assert synthesis.active_ids == ("a", "b")
        claims = synthesis.consensus.claims
        assert len(claims) == 1
        assert claims[0].text == "Le miel apaise la toux et réduit l'irritation de la gorge"
        assert claims[0].supporting_ids == ("a", "b")
        assert claims[0].confidence == 1.0
        assert synthesis.consensus.concepts == ("réduit", "irritation", "gorge")

    def test_honey_pair_divergences_and_insights(self, engine, honey_pair, standard_config):
        synthesis = engine.run(honey_pair, standard_config)

        by_id = {d.response_id: d for d in synthesis.divergences}
        assert by_id["a"].unique_concepts == ("apaise", "pensez", "boire", "tiède", "journée")
        assert "tisane" in by_id["b"].unique_concepts
        assert by_id["a"].score == synthesis.scores["a"].lmc_score
        # Утверждение о мёде есть у обоих, уникальных утверждений нет
        assert synthesis.insights == {"Claude": (), "ChatGPT": ()}

    def test_debate_between_first_two_active(self, engine, honey_pair, standard_config):
        synthesis = engine.run(honey_pair, standard_config)
        assert synthesis.debate is not None
        assert len(synthesis.debate.agreements) == 1
        assert synthesis.debate.agreements[0].similarity == pytest.approx(5 / 7)
        assert synthesis.debate.disagreements == ()

    def test_short_response_is_excluded(self, engine, honey_pair, standard_config, sample_texts):
        responses = honey_pair + [ResponseInput("c", "Gemini", sample_texts["short"])]
        synthesis = engine.run(responses, standard_config)

        assert synthesis.active_ids == ("a", "b")
        assert len(synthesis.responses) == 3
        assert "c" not in synthesis.scores
        assert all("c" not in claim.supporting_ids for claim in synthesis.consensus.claims)
        assert all(d.response_id != "c" for d in synthesis.divergences)
        assert "Gemini" not in synthesis.insights

    def test_fewer_than_two_active(self, engine, honey_pair, standard_config, sample_texts):
        responses = [honey_pair[0], ResponseInput("c", "Gemini", sample_texts["short"])]
        synthesis = engine.run(responses, standard_config)

        assert synthesis.active_ids == ("a",)
        assert set(synthesis.scores) == {"a"}
        assert synthesis.consensus == Consensus()
        assert synthesis.divergences == ()
        assert synthesis.insights == {}
        assert synthesis.emergent_insights == ()
        assert synthesis.debate is None

    def test_empty_input(self, engine, standard_config):
        synthesis = engine.run([], standard_config)
        assert synthesis.active_ids == ()
        assert synthesis.scores == {}

    def test_idempotent(self, engine, standard_config):
        responses = example_responses()
        assert engine.run(responses, standard_config) == engine.run(responses, standard_config)

    def test_timestamp_is_passed_through(self, engine, honey_pair, standard_config):
        assert engine.run(honey_pair, standard_config).timestamp is None
        stamped = engine.run(honey_pair, standard_config, timestamp="2024-01-01T00:00:00Z")
        assert stamped.timestamp == "2024-01-01T00:00:00Z"

    def test_threshold_one_disables_consensus_claims(self, engine, honey_pair):
        config = AnalysisConfig(similarity_threshold=1.0)
        assert engine.run(honey_pair, config).consensus.claims == ()

    def test_min_content_length_controls_activity(self, engine, honey_pair):
        config = AnalysisConfig(min_content_length=200)
        assert engine.run(honey_pair, config).active_ids == ()

    def test_invalid_config_is_rejected(self, engine, honey_pair):
        config = AnalysisConfig()
        object.__setattr__(config, "epsilon", 0)
        with pytest.raises(InvalidConfigurationError):
            engine.run(honey_pair, config)

    def test_epsilon_changes_only_lmc(self, engine, honey_pair):
        low = engine.run(honey_pair, AnalysisConfig(epsilon=0.05))
        high = engine.run(honey_pair, AnalysisConfig(epsilon=0.2))
        assert low.scores["a"].entropy == high.scores["a"].entropy
        assert low.scores["a"].lmc_score > high.scores["a"].lmc_score
        assert low.consensus == high.consensus

    def test_custom_concept_length_finds_short_shared_word(self, standard_config):
        """С концептами от 4 символов общее слово «miel» попадает в консенсус."""
        engine = AnalysisEngine(concept_extractor=ConceptExtractor(min_length=4))
        synthesis = engine.run(example_responses(), standard_config)
        assert "miel" in synthesis.consensus.concepts
        assert "toux" in synthesis.consensus.concepts


    def test_synthesis_is_read_only(self, engine, standard_config):
        synthesis = engine.run(example_responses(), standard_config)

        with pytest.raises(TypeError):
            synthesis.scores["ai_0"] = None
        with pytest.raises(TypeError):
            synthesis.insights["x"] = ("y",)
        with pytest.raises(TypeError):
            del synthesis.concepts["ai_0"]
        with pytest.raises(AttributeError):
            synthesis.scores.clear()
        assert set(synthesis.scores) == {"ai_0", "ai_1", "ai_2"}

    def test_synthesis_does_not_share_caller_dicts(self, engine, honey_pair, standard_config):
        synthesis = engine.run(honey_pair, standard_config)
        rebuilt = dataclasses.replace(synthesis, timestamp="t")
        source = dict(synthesis.scores)
        copy = dataclasses.replace(synthesis, scores=source)
        source.clear()
        assert set(copy.scores) == {"a", "b"}
        assert rebuilt.scores == synthesis.scores


class TestCompare:
    """Режим дебатов для произвольной пары ответов."""

    def test_compare_selected_pair(self, engine, honey_pair, standard_config):
        result = engine.compare(honey_pair, "b", "a", standard_config)
        assert result.agreements[0].claim_a.startswith("Le miel calme")
        assert result.agreements[0].claim_b.startswith("Le miel apaise")

    def test_compare_unknown_id(self, engine, honey_pair, standard_config):
        with pytest.raises(KeyError):
            engine.compare(honey_pair, "a", "zzz", standard_config)
