"""
Unit tests for core.domain.language
"""
import pytest

from core.domain.language import _TERMS, Language
from core.domain.models import RadioReceiver


class TestLanguage:
    def test_default(self):
        assert Language.default() is Language.ENGLISH

    @pytest.mark.parametrize("language", list(Language))
    def test_every_language_has_all_terms(self, language):
        assert set(_TERMS[language]) == set(_TERMS[Language.ENGLISH])

    def test_unknown_term_fails(self):
        with pytest.raises(KeyError):
            Language.SPANISH.term("weight")

    def test_yes_no(self):
        assert Language.SPANISH.yes_no(True) == "sí"
        assert Language.RUSSIAN.yes_no(False) == "нет"

    def test_spanish_radio_describe(self):
        text = RadioReceiver(brand="Sony", model="XDR", band="DAB", min_frequency_mhz=174.928, max_frequency_mhz=239.2).describe(Language.SPANISH)
        assert text.startswith("Radiorreceptor: Sony XDR, banda: DAB, 174.928-239.2 MHz, RDS: sí")
