import pytest

from codedanswer.answer import CodedOrFreeTextAnswer
from codedanswer.concept.concept import Concept, ConceptName


@pytest.fixture
def mi_preferred_in_english():
    """Concept where MI is itself the preferred English name"""
    return Concept(6, names=[
        ConceptName("MI", "en", locale_preferred=True, concept_name_id=61),
        ConceptName("Myocardial Infarction", "en", concept_name_id=62),
        ConceptName("Infarctus du myocarde", "fr", locale_preferred=True, concept_name_id=63),
    ])


class TestFormatWithoutSpecificAnswer:
    def test_ignores_specific_name(self, mi_name):
        answer = CodedOrFreeTextAnswer(mi_name)
        assert answer.format_without_specific_answer("en") == "Myocardial Infarction"

    def test_concept(self, mi_concept):
        answer = CodedOrFreeTextAnswer(mi_concept)
        assert answer.format_without_specific_answer("fr") == "Infarctus du myocarde"

    def test_free_text(self):
        assert CodedOrFreeTextAnswer("Heart attack").format_without_specific_answer("en") == "Heart attack"

    def test_no_name_in_locale(self, cholera):
        assert CodedOrFreeTextAnswer(cholera).format_without_specific_answer("fr") == "?"


class TestFormat:
    def test_free_text(self):
        assert CodedOrFreeTextAnswer("Heart attack").format("fr") == "Heart attack"

    def test_concept(self, mi_concept):
        assert CodedOrFreeTextAnswer(mi_concept).format("en") == "Myocardial Infarction"
        assert CodedOrFreeTextAnswer(mi_concept).format("fr") == "Infarctus du myocarde"

    def test_specific_name_joined_with_preferred(self, mi_name):
        answer = CodedOrFreeTextAnswer(mi_name)
        assert answer.format("en") == "MI → Myocardial Infarction"

    def test_locale_preferred_name_in_other_locale(self, mi_preferred_in_english):
        answer = CodedOrFreeTextAnswer(mi_preferred_in_english.names[0])
        assert answer.format("fr") == "MI → Infarctus du myocarde"

    def test_locale_preferred_name_in_its_locale(self, mi_preferred_in_english):
        answer = CodedOrFreeTextAnswer(mi_preferred_in_english.names[0])
        assert answer.format("en") == "MI"

    def test_locale_preferred_needs_exact_locale(self, mi_preferred_in_english):
        # en_GB falls back to the preferred English name, which is the
        # specific name itself, so there is nothing to join
        answer = CodedOrFreeTextAnswer(mi_preferred_in_english.names[0])
        assert answer.format("en_GB") == "MI"

        answer = CodedOrFreeTextAnswer(mi_preferred_in_english.names[1])
        assert answer.format("en_GB") == "Myocardial Infarction → MI"

    def test_specific_name_is_the_preferred_name(self, mi_concept):
        # Not flagged as preferred, but it is the only French name
        concept = Concept(8, names=[
            ConceptName("Fièvre", "fr", concept_name_id=81),
            ConceptName("Fever", "en", locale_preferred=True, concept_name_id=82),
        ])
        answer = CodedOrFreeTextAnswer(concept.names[0])
        assert answer.format("fr") == "Fièvre"

        answer = CodedOrFreeTextAnswer(mi_concept.names[0])
        assert answer.format("en") == "Myocardial Infarction"

    def test_no_preferred_name_in_locale(self, mi_name):
        answer = CodedOrFreeTextAnswer(mi_name)
        assert answer.format("es") == "MI"

    def test_no_name_in_locale(self, cholera):
        assert CodedOrFreeTextAnswer(cholera).format("fr") == "?"

    def test_name_without_concept(self):
        orphan = ConceptName("Orphan", "en", locale_preferred=True)
        assert CodedOrFreeTextAnswer(orphan).format("en") == "?"


class TestEmptyAnswer:
    def test_all_formats(self, icd10):
        answer = CodedOrFreeTextAnswer()
        assert answer.format_without_specific_answer("en") == "?"
        assert answer.format("en") == "?"
        assert answer.format_with_code("en", [icd10]) == "?"
