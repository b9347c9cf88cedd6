import pytest
from pathlib import Path

from codedanswer.concept.concept import Concept, ConceptName
from codedanswer.concept.mapping import ConceptSource, ConceptReferenceTerm, ConceptMap
from codedanswer.concept.service import ConceptDictionary
from codedanswer.constants import common_map_types

SAMPLE_DIR = Path(__file__).resolve().parent.parent / "sample"


@pytest.fixture
def sample_dir():
    return SAMPLE_DIR

@pytest.fixture
def icd10():
    return ConceptSource("ICD-10-WHO", hl7_code="ICD-10-WHO")

@pytest.fixture
def snomed():
    return ConceptSource("SNOMED CT", hl7_code="SCT")

@pytest.fixture
def same_as():
    return common_map_types["SAME-AS"]

@pytest.fixture
def narrower_than():
    return common_map_types["NARROWER-THAN"]

@pytest.fixture
def mi_concept():
    """Myocardial infarction, with MI as a non preferred English synonym"""
    return Concept(5, names=[
        ConceptName("Myocardial Infarction", "en", locale_preferred=True, concept_name_id=51),
        ConceptName("MI", "en", concept_name_id=52),
        ConceptName("Infarctus du myocarde", "fr", locale_preferred=True, concept_name_id=53),
    ])

@pytest.fixture
def mi_name(mi_concept):
    return mi_concept.names[1]

@pytest.fixture
def cholera():
    return Concept(7, names=[
        ConceptName("Cholera", "en", locale_preferred=True, concept_name_id=71),
    ])

@pytest.fixture
def dictionary(mi_concept, cholera):
    dictionary = ConceptDictionary()
    dictionary.add_concept(mi_concept)
    dictionary.add_concept(cholera)
    return dictionary

@pytest.fixture
def make_mapping():
    def make(source, code, map_type):
        return ConceptMap(ConceptReferenceTerm(source, code), map_type)
    return make
