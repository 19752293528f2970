from typing import Any, Dict, Sequence

import pytest

from lmc_analyser.components.scorers import LMCScorer
from lmc_analyser.config import Config
from lmc_analyser.engine import AnalysisEngine
from lmc_analyser.interfaces.analysis import (
    AnalysisConfig,
    Concept,
    ResponseInput,
    ResponseProfile,
    ResponseScore,
)


@pytest.fixture(scope="session")
def test_config() -> Dict[str, Any]:
    """Возвращает раздел `testing` из config.yaml (пороги производительности и т.п.)."""
    cfg = Config()
    return cfg.get("testing", {}) or {}


@pytest.fixture(scope="session")
def sample_texts():
    """Тексты для тестов."""
    from .fixtures import sample_texts as st

    return {
        "honey_soothes": st.HONEY_SOOTHES,
        "honey_calms": st.HONEY_CALMS,
        "short": st.SHORT_ANSWER,
        "claims": st.CLAIMS_TEXT,
        "bees": st.REPEATED_BEES,
    }


@pytest.fixture
def standard_config() -> AnalysisConfig:
    return AnalysisConfig.from_preset("standard")


@pytest.fixture
def engine() -> AnalysisEngine:
    return AnalysisEngine()


@pytest.fixture
def honey_pair(sample_texts):
    """Два ответа с похожим утверждением о мёде."""
    return [
        ResponseInput(id="a", display_name="Claude", text=sample_texts["honey_soothes"]),
        ResponseInput(id="b", display_name="ChatGPT", text=sample_texts["honey_calms"]),
    ]


@pytest.fixture
def make_profile():
    """Фабрика ResponseProfile для прямых тестов агрегаторов."""

    def _make(response_id: str,
              claims: Sequence[str] = (),
              concepts: Sequence[str] = (),
              lmc: float = 0.0,
              name: str = None) -> ResponseProfile:
        return ResponseProfile(
            id=response_id,
            display_name=name or response_id.upper(),
            text="",
            score=ResponseScore(entropy=0.0, coherence=0.0, lmc_score=lmc),
            concepts=tuple(Concept(word=w, frequency=1) for w in concepts),
            claims=tuple(claims),
        )

    return _make


@pytest.fixture
def scorer() -> LMCScorer:
    return LMCScorer()


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
    config.addinivalue_line("markers", "performance: тесты производительности")
