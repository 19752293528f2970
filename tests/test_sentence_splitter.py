"""
Тесты разбиения текста на предложения.
"""

from lmc_analyser.components.sentence_splitter import SentenceSplitter


class TestSentenceSplitter:
    """Тесты для SentenceSplitter."""

    def test_split_on_terminators_and_blank_lines(self):
        splitter = SentenceSplitter()
        text = (
            "Première phrase assez longue ici. Deuxième phrase assez longue aussi!\n\n"
            "Troisième bloc de texte plutôt long"
        )
        assert splitter.split(text) == [
            "Première phrase assez longue ici",
            "Deuxième phrase assez longue aussi",
            "Troisième bloc de texte plutôt long",
        ]

    def test_short_and_long_fragments_are_dropped(self):
        splitter = SentenceSplitter()
        text = "Oui. " + "a" * 600 + ". Une phrase de taille tout à fait normale."
        assert splitter.split(text) == ["Une phrase de taille tout à fait normale."]

    def test_boundaries_are_strict(self):
        splitter = SentenceSplitter(min_length=5, max_length=10)
        assert splitter.split("abcde. abcdef. abcdefghij") == ["abcdef"]

    def test_empty_text(self):
        splitter = SentenceSplitter()
        assert splitter.split("") == []
        assert splitter.split(None) == []
        assert splitter.candidate_sentences(None) == []

    def test_candidate_sentences_keep_raw_fragments(self):
        """Для оценки связности пустые строки не считаются границей."""
        splitter = SentenceSplitter()
        text = "Première phrase assez longue ici.\n\nDeuxième phrase assez longue aussi"
        assert splitter.candidate_sentences(text) == [
            "Première phrase assez longue ici",
            "Deuxième phrase assez longue aussi",
        ]
        text = "Un bloc sans ponctuation finale\n\nsuivi d'un autre bloc"
        assert len(splitter.candidate_sentences(text)) == 1
