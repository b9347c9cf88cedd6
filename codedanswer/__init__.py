__version__="0.1.0"

# Prefixes for the serialized form of an answer. ConceptName must be checked
# before Concept since the latter is a prefix of the former.
CONCEPT_NAME_PREFIX = "ConceptName:"
CONCEPT_PREFIX = "Concept:"
NON_CODED_PREFIX = "Non-Coded:"


class UnknownAnswerFormat(ValueError):
    def __init__(self, spec):
        super().__init__(f"Unknown format: {spec}")
        self.spec = spec

class UnknownConcept(LookupError):
    def __init__(self, concept_id):
        super().__init__(f"No Concept found with id == {concept_id}")
        self.concept_id = concept_id

class UnknownConceptName(LookupError):
    def __init__(self, concept_name_id):
        super().__init__(f"No ConceptName found with id == {concept_name_id}")
        self.concept_name_id = concept_name_id

class UnknownConceptSource(LookupError):
    def __init__(self, key):
        super().__init__(f"No ConceptSource found matching {key}")
        self.key = key

class BadDictionaryEntry(ValueError):
    def __init__(self, entry, reason):
        super().__init__(f"Bad dictionary entry: {reason} ({entry})")
        self.entry = entry
        self.reason = reason
