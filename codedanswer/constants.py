"""
Well known concept map types and terminology sources. The map type uuids are
the stable identifiers shared by every concept dictionary, so comparisons
against a ConceptMapType should always be made by uuid, never by name.
"""

from codedanswer.concept.mapping import ConceptMapType, ConceptSource

SAME_AS_CONCEPT_MAP_TYPE_UUID = "35543629-7d8c-11e1-909d-c80aa9edcf4e"
NARROWER_THAN_CONCEPT_MAP_TYPE_UUID = "43ac5109-7d8c-11e1-909d-c80aa9edcf4e"
BROADER_THAN_CONCEPT_MAP_TYPE_UUID = "4b9d9421-7d8c-11e1-909d-c80aa9edcf4e"

common_map_types = None
common_sources = None

def add_common_map_type(key, uuid):
    global common_map_types
    if common_map_types is None:
        common_map_types = {}

    common_map_types[key] = ConceptMapType(key, uuid=uuid)

def add_common_source(key, name, hl7_code=None):
    global common_sources
    if common_sources is None:
        common_sources = {}

    common_sources[key] = ConceptSource(name, hl7_code=hl7_code)

def map_type(key):
    """Look up a common map type by name (SAME-AS) or by uuid"""
    if key in common_map_types:
        return common_map_types[key]
    for mtype in common_map_types.values():
        if mtype.uuid == key:
            return mtype
    return None

add_common_map_type("SAME-AS", SAME_AS_CONCEPT_MAP_TYPE_UUID)
add_common_map_type("NARROWER-THAN", NARROWER_THAN_CONCEPT_MAP_TYPE_UUID)
add_common_map_type("BROADER-THAN", BROADER_THAN_CONCEPT_MAP_TYPE_UUID)

add_common_source("ICD10", "ICD-10-WHO", "ICD-10-WHO")
add_common_source("SNOMED-CT", "SNOMED CT", "SCT")
add_common_source("CIEL", "CIEL", "CIEL")
