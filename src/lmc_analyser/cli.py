#!/usr/bin/env python3
"""
Интерфейс командной строки для LMC Analyser

Каждый файл — ответ одного ассистента (имя ответа = имя файла без расширения,
для '-' читается stdin). Выводит таблицу оценок, консенсус, расхождения,
уникальные и эмерджентные инсайты либо полный результат в JSON.
"""

import os
import sys
import argparse
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from .interfaces.analysis import AnalysisConfig, InvalidConfigurationError, PRESETS, ResponseInput, Synthesis


def read_responses(paths: List[str], max_text_length: int, max_name_length: int) -> List[ResponseInput]:
    """
    Читает ответы из файлов.

    Args:
        paths: Пути к файлам ('-' — стандартный ввод)
        max_text_length: Обрезка текста ответа
        max_name_length: Обрезка имени ответа

    Returns:
        Список ответов с id ai_0, ai_1, ...
    """
    from .samples import default_name

    responses = []
    for i, raw_path in enumerate(paths):
        if raw_path == '-':
            text = sys.stdin.read()
            name = default_name(i)
        else:
            path = Path(raw_path)
            text = path.read_text(encoding='utf-8')
            name = path.stem
        response = ResponseInput(id=f"ai_{i}", display_name=name, text=text)
        responses.append(response.truncated(max_text_length, max_name_length))
    return responses


def print_report(synthesis: Synthesis) -> None:
    """Печатает краткий отчёт по результатам синтеза"""
    from .components.exporter import SynthesisExporter

    exporter = SynthesisExporter()
    names = {r.id: r.display_name for r in synthesis.responses}
    cfg = synthesis.config

    print(f"⚙️  Параметры: ε={cfg.epsilon}, порог={cfg.similarity_threshold}, мин. длина={cfg.min_content_length}")
    print(f"📥 Активных ответов: {len(synthesis.active_ids)} из {len(synthesis.responses)}")

    print("\n📊 Оценки LMC:")
    scores = exporter.scores_frame(synthesis)
    if scores.empty:
        print("   —")
    else:
        print(scores.round(3).to_string(index=False))

    print("\n✅ Консенсус:")
    if synthesis.consensus.claims:
        for claim in synthesis.consensus.claims:
            sources = ', '.join(names.get(i, i) for i in claim.supporting_ids)
            print(f"   [{round(claim.confidence * 100)}% | {sources}] {claim.text}")
    else:
        print("   Консенсус не найден.")
    if synthesis.consensus.concepts:
        print(f"   Общие концепты: {', '.join(synthesis.consensus.concepts)}")

    print("\n💡 Уникальные инсайты:")
    for name, claims in synthesis.insights.items():
        if claims:
            print(f"   {name}:")
            for claim in claims:
                print(f"     - {claim}")

    print("\n🔥 Расхождения:")
    for div in synthesis.divergences:
        print(f"   {div.display_name}: {', '.join(div.unique_concepts)}")

    if synthesis.emergent_insights:
        print("\n🌱 Эмерджентные инсайты:")
        for insight in synthesis.emergent_insights:
            print(
                f"   {names.get(insight.source_a)} (\"{insight.concept_a}\") ↔ "
                f"{names.get(insight.source_b)} (\"{insight.concept_b}\") — {round(insight.similarity * 100)}%"
            )

    if synthesis.debate is not None:
        print(
            f"\n⚔️  Дебаты: согласий {len(synthesis.debate.agreements)}, "
            f"расхождений {len(synthesis.debate.disagreements)}"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="LMC Analyser - сравнение ответов разных ассистентов",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  python -m lmc_analyser.cli claude.txt gpt.txt gemini.txt
  python -m lmc_analyser.cli a.txt b.txt --preset strict --json
  python -m lmc_analyser.cli --example
        """
    )
    parser.add_argument('files', nargs='*', help="Файлы с ответами ('-' — stdin)")
    parser.add_argument('--preset', choices=sorted(PRESETS), help='Пресет параметров анализа')
    parser.add_argument('--json', action='store_true', help='Вывести результат в JSON')
    parser.add_argument('--example', action='store_true', help='Проанализировать встроенный пример')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Основная функция CLI"""
    from .config import config

    # LMC_ANALYSER_DEBUG=1 принудительно включает DEBUG
    if os.environ.get('LMC_ANALYSER_DEBUG') == '1':
        config._set_nested(config.config_data, 'logging.console_level', 'DEBUG')
    config._configure_logging_if_needed(force=True)

    args = build_parser().parse_args(argv)

    try:
        analysis_config: AnalysisConfig = config.get_analysis_config(args.preset)
    except InvalidConfigurationError as e:
        print(f"❌ Ошибка конфигурации: {e}")
        return 2

    if args.example:
        from .samples import example_responses
        responses = example_responses()
    elif args.files:
        try:
            responses = read_responses(args.files, config.get_max_content_length(), config.get_max_name_length())
        except (OSError, UnicodeDecodeError) as e:
            print(f"❌ Не удалось прочитать файл: {e}")
            return 1
    else:
        print("❌ Укажите файлы с ответами или --example")
        return 1

    from .engine import AnalysisEngine
    from .components.exporter import SynthesisExporter

    timestamp = datetime.now(timezone.utc).isoformat()
    synthesis = AnalysisEngine().run(responses, analysis_config, timestamp=timestamp)

    if len(synthesis.active_ids) < 2:
        print(f"⚠️ Нужно минимум 2 ответа длиннее {analysis_config.min_content_length} символов")

    if args.json:
        print(SynthesisExporter().to_json(synthesis))
    else:
        print_report(synthesis)
    return 0


if __name__ == "__main__":
    sys.exit(main())
