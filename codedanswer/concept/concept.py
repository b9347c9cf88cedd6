"""
Concepts and their localized names
"""

from codedanswer.concept import MetadataObject

def language(locale):
    """en_GB => en"""
    return locale.replace("-", "_").split("_")[0]

class ConceptName(MetadataObject):
    def __init__(self, name, locale, locale_preferred=False, concept_name_id=None, uuid=None):
        super().__init__(uuid)
        self.concept_name_id = concept_name_id
        self.name = name
        self.locale = locale
        self.locale_preferred = locale_preferred

        # Assigned when the name is added to a concept
        self.concept = None

    def __repr__(self):
        return f"ConceptName({self.name!r}, {self.locale!r})"

class Concept(MetadataObject):
    def __init__(self, concept_id=None, names=None, mappings=None, uuid=None):
        super().__init__(uuid)
        self.concept_id = concept_id
        self.names = []
        self.mappings = []

        for name in names or []:
            self.add_name(name)
        for mapping in mappings or []:
            self.add_mapping(mapping)

    def add_name(self, name):
        name.concept = self
        self.names.append(name)
        return name

    def add_mapping(self, mapping):
        self.mappings.append(mapping)
        return mapping

    def get_name(self, locale):
        """Return the name to display for the locale, or None if the concept """
        """has no name in that locale's language."""
        exact = [x for x in self.names if x.locale == locale]
        for name in exact:
            if name.locale_preferred:
                return name
        if len(exact) > 0:
            return exact[0]

        # Fall back to the bare language (en_GB => en) but never to another
        # language entirely
        lang = language(locale)
        if lang != locale:
            for name in self.names:
                if name.locale == lang and name.locale_preferred:
                    return name
        return None

    def __repr__(self):
        return f"Concept({self.concept_id!r})"
