"""
Lookup of concepts and concept names by id.

ConceptService is the capability an answer needs in order to be parsed from
its serialized form. Production code is expected to back it with the real
terminology store; ConceptDictionary is a simple in-memory version that can be
populated from a YAML file, which is what the command line and the tests use.

YAML layout:

    sources:
      - key: ICD10
        name: ICD-10-WHO
        hl7_code: ICD-10-WHO
    concepts:
      - id: 5
        names:
          - id: 51
            name: Myocardial Infarction
            locale: en
            preferred: true
        mappings:
          - source: ICD10
            code: I21.9
            type: SAME-AS
"""

import logging

from yaml import safe_load

from codedanswer import UnknownConcept, UnknownConceptName, UnknownConceptSource, BadDictionaryEntry
from codedanswer.concept.concept import Concept, ConceptName
from codedanswer.concept.mapping import ConceptSource, ConceptReferenceTerm, ConceptMap
from codedanswer import constants

logger = logging.getLogger(__name__)

class ConceptService:
    def get_concept(self, concept_id):
        raise NotImplementedError()

    def get_concept_name(self, concept_name_id):
        raise NotImplementedError()

class ConceptDictionary(ConceptService):
    def __init__(self):
        self.concepts = {}          # concept_id => Concept
        self.concept_names = {}     # concept_name_id => ConceptName
        self.sources = {}           # key => ConceptSource

    def add_source(self, key, source):
        self.sources[key] = source
        return source

    def get_source(self, key):
        """Sources declared in the dictionary win over the common ones"""
        if key in self.sources:
            return self.sources[key]
        if key in constants.common_sources:
            return constants.common_sources[key]
        raise UnknownConceptSource(key)

    def add_concept(self, concept):
        if concept.concept_id in self.concepts:
            raise BadDictionaryEntry(concept, f"duplicate concept id {concept.concept_id}")
        seen = set()
        for name in concept.names:
            if name.concept_name_id is None:
                continue
            if name.concept_name_id in self.concept_names or name.concept_name_id in seen:
                raise BadDictionaryEntry(name, f"duplicate concept name id {name.concept_name_id}")
            seen.add(name.concept_name_id)

        self.concepts[concept.concept_id] = concept
        for name in concept.names:
            if name.concept_name_id is not None:
                self.concept_names[name.concept_name_id] = name
        return concept

    def get_concept(self, concept_id):
        if concept_id not in self.concepts:
            raise UnknownConcept(concept_id)
        return self.concepts[concept_id]

    def get_concept_name(self, concept_name_id):
        if concept_name_id not in self.concept_names:
            raise UnknownConceptName(concept_name_id)
        return self.concept_names[concept_name_id]

    def __len__(self):
        return len(self.concepts)

    @classmethod
    def from_yaml(cls, stream):
        cfg = safe_load(stream) or {}
        dictionary = cls()

        for entry in cfg.get('sources') or []:
            if 'key' not in entry or 'name' not in entry:
                raise BadDictionaryEntry(entry, "sources require both key and name")
            source = ConceptSource(entry['name'],
                                   hl7_code=entry.get('hl7_code'),
                                   uuid=entry.get('uuid'))
            dictionary.add_source(entry['key'], source)

        for entry in cfg.get('concepts') or []:
            dictionary.add_concept(dictionary.build_concept(entry))

        logger.debug(f"{len(dictionary.concepts)} concepts and {len(dictionary.concept_names)} names loaded")
        return dictionary

    def build_concept(self, entry):
        if 'id' not in entry:
            raise BadDictionaryEntry(entry, "concepts require an id")
        concept = Concept(_entry_id(entry, entry['id']), uuid=entry.get('uuid'))

        for name in entry.get('names') or []:
            if 'name' not in name or 'locale' not in name:
                raise BadDictionaryEntry(name, "names require both name and locale")
            name_id = name.get('id')
            if name_id is not None:
                name_id = _entry_id(name, name_id)
            concept.add_name(ConceptName(name['name'],
                                         str(name['locale']),
                                         locale_preferred=bool(name.get('preferred', False)),
                                         concept_name_id=name_id,
                                         uuid=name.get('uuid')))

        for mapping in entry.get('mappings') or []:
            try:
                source = self.get_source(mapping['source'])
            except (KeyError, UnknownConceptSource) as e:
                raise BadDictionaryEntry(mapping, "mapping source is missing or unknown") from e

            map_type = constants.map_type(mapping.get('type', 'SAME-AS'))
            if map_type is None:
                raise BadDictionaryEntry(mapping, f"unknown map type {mapping.get('type')}")
            if 'code' not in mapping:
                raise BadDictionaryEntry(mapping, "mappings require a code")

            term = ConceptReferenceTerm(source, str(mapping['code']), name=mapping.get('name'))
            concept.add_mapping(ConceptMap(term, map_type))

        return concept

def _entry_id(entry, value):
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise BadDictionaryEntry(entry, f"id {value!r} is not an integer") from e
