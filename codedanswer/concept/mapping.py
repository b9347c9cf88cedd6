"""
Links between a concept and the terms of external terminology systems
(ICD-10, SNOMED CT, ...)
"""

from codedanswer.concept import MetadataObject

class ConceptSource(MetadataObject):
    def __init__(self, name, hl7_code=None, uuid=None):
        super().__init__(uuid)
        self.name = name
        self.hl7_code = hl7_code

    def __repr__(self):
        return f"ConceptSource({self.name!r})"

class ConceptReferenceTerm(MetadataObject):
    def __init__(self, source, code, name=None, uuid=None):
        super().__init__(uuid)
        self.source = source
        self.code = code
        self.name = name

    def __repr__(self):
        return f"ConceptReferenceTerm({self.source.name}:{self.code})"

class ConceptMapType(MetadataObject):
    def __init__(self, name, uuid=None):
        super().__init__(uuid)
        self.name = name

    def __repr__(self):
        return f"ConceptMapType({self.name!r})"

class ConceptMap(MetadataObject):
    def __init__(self, term, map_type, uuid=None):
        super().__init__(uuid)
        self.term = term                    # ConceptReferenceTerm being mapped to
        self.map_type = map_type            # SAME-AS, NARROWER-THAN, etc

    @property
    def source(self):
        return self.term.source

    def __repr__(self):
        return f"ConceptMap({self.map_type.name} {self.term.source.name}:{self.term.code})"
