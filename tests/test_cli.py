"""
Тесты интерфейса командной строки.
"""

import io
import json

import pytest

from lmc_analyser.cli import build_parser, main, read_responses


def test_example_json_output(capsys):
    """--example --json печатает валидный JSON с тремя активными ответами."""
    assert main(["--example", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["active_ids"] == ["ai_0", "ai_1", "ai_2"]
    assert data["timestamp"]
    assert "persiste" in data["consensus"]["concepts"]


def test_text_report_from_files(tmp_path, capsys, sample_texts):
    first = tmp_path / "claude.txt"
    second = tmp_path / "gpt.txt"
    first.write_text(sample_texts["honey_soothes"], encoding="utf-8")
    second.write_text(sample_texts["honey_calms"], encoding="utf-8")

    assert main([str(first), str(second), "--preset", "standard"]) == 0
    out = capsys.readouterr().out
    assert "Консенсус" in out
    assert "[100% | claude, gpt]" in out


def test_too_few_active_responses_warns(tmp_path, capsys, sample_texts):
    path = tmp_path / "seul.txt"
    path.write_text(sample_texts["short"], encoding="utf-8")

    assert main([str(path)]) == 0
    assert "Нужно минимум 2 ответа" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Не удалось прочитать файл" in capsys.readouterr().out


def test_file_not_in_utf8(tmp_path, capsys, sample_texts):
    """Файл в другой кодировке даёт сообщение и код 1, а не трассировку."""
    good = tmp_path / "claude.txt"
    bad = tmp_path / "latin1.txt"
    good.write_text(sample_texts["honey_soothes"], encoding="utf-8")
    bad.write_bytes(sample_texts["honey_calms"].encode("latin-1"))

    assert main([str(good), str(bad)]) == 1
    assert "Не удалось прочитать файл" in capsys.readouterr().out


def test_no_input(capsys):
    assert main([]) == 1


def test_read_responses_truncates_and_names(tmp_path, monkeypatch):
    path = tmp_path / "un_nom_de_fichier_long.txt"
    path.write_text("x" * 50, encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("texte depuis stdin"))

    responses = read_responses([str(path), "-"], max_text_length=20, max_name_length=6)

    assert [r.id for r in responses] == ["ai_0", "ai_1"]
    assert responses[0].display_name == "un_nom"
    assert responses[0].text == "x" * 20
    # Для stdin берётся имя по умолчанию по позиции
    assert responses[1].display_name == "ChatGP"
    assert responses[1].text == "texte depuis stdin"


def test_parser_rejects_unknown_preset():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--preset", "inconnu"])
