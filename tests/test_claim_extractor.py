"""
Тесты извлечения утверждений.
"""

from lmc_analyser.components.claim_extractor import ClaimExtractor


class TestClaimExtractor:
    """Тесты для ClaimExtractor."""

    def test_extracts_marker_and_negation_sentences(self, sample_texts):
        extractor = ClaimExtractor()
        claims = extractor.extract(sample_texts["claims"])
        assert claims == [
            "Le miel est un remède ancien et très apprécié",
            "Ce sirop n'a pas d'effet secondaire connu chez l'adulte.",
        ]

    def test_short_text_has_no_claims(self, sample_texts):
        """Тексты короче 100 символов не анализируются, даже если содержат маркеры."""
        extractor = ClaimExtractor()
        assert extractor.extract("Le miel est un remède ancien et très apprécié.") == []
        assert extractor.extract(sample_texts["short"]) == []
        assert extractor.extract(None) == []

    def test_claims_are_capped(self):
        extractor = ClaimExtractor()
        text = " ".join(f"Le remède numéro {i} est efficace contre la toux." for i in range(1, 31))
        claims = extractor.extract(text)
        assert len(claims) == 20
        assert claims[0] == "Le remède numéro 1 est efficace contre la toux"

    def test_is_claim(self):
        extractor = ClaimExtractor()
        assert extractor.is_claim("Le repos aide le corps à récupérer")
        assert extractor.is_claim("Il ne faut jamais donner de miel à un bébé")
        assert not extractor.is_claim("Buvez une tisane chaude avant le coucher")
