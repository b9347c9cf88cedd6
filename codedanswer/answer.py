"""
An answer that is either coded (as a Concept, or as the more specific
ConceptName it was recorded with) or free text.

Internally the answer is exactly one of three cases (or nothing at all):

    GeneralAnswer(concept)
    SpecificAnswer(name, concept)   concept is always name.concept
    FreeTextAnswer(text)

so the coded answer can never disagree with the specific name it came from.
"""

import logging
from collections import namedtuple

from codedanswer import CONCEPT_NAME_PREFIX, CONCEPT_PREFIX, NON_CODED_PREFIX, UnknownAnswerFormat
from codedanswer.concept.concept import Concept, ConceptName
from codedanswer.constants import SAME_AS_CONCEPT_MAP_TYPE_UUID, NARROWER_THAN_CONCEPT_MAP_TYPE_UUID

logger = logging.getLogger(__name__)

GeneralAnswer = namedtuple("GeneralAnswer", ["concept"])
SpecificAnswer = namedtuple("SpecificAnswer", ["name", "concept"])
FreeTextAnswer = namedtuple("FreeTextAnswer", ["text"])

UNKNOWN = "?"
ARROW = " → "

class CodedOrFreeTextAnswer:
    def __init__(self, answer=None):
        self._answer = None

        if isinstance(answer, ConceptName):
            self.specific_coded_answer = answer
        elif isinstance(answer, Concept):
            self.coded_answer = answer
        elif isinstance(answer, str):
            self.non_coded_answer = answer
        elif answer is not None:
            raise TypeError(f"Can't build an answer from {type(answer).__name__}")

    @classmethod
    def from_concept(cls, concept):
        return cls(concept)

    @classmethod
    def from_concept_name(cls, concept_name):
        return cls(concept_name)

    @classmethod
    def from_text(cls, text):
        return cls(text)

    @classmethod
    def parse(cls, spec, concept_service):
        """Build an answer from ConceptName:<id>, Concept:<id> or Non-Coded:<text>.

        Lookup failures raised by concept_service are not caught here.
        """
        answer = cls()
        if spec.startswith(CONCEPT_NAME_PREFIX):
            name_id = _parse_id(spec, CONCEPT_NAME_PREFIX)
            answer.specific_coded_answer = concept_service.get_concept_name(name_id)
        elif spec.startswith(CONCEPT_PREFIX):
            concept_id = _parse_id(spec, CONCEPT_PREFIX)
            answer.coded_answer = concept_service.get_concept(concept_id)
        elif spec.startswith(NON_CODED_PREFIX):
            answer.non_coded_answer = spec[len(NON_CODED_PREFIX):]
        else:
            raise UnknownAnswerFormat(spec)

        logger.debug(f"Parsed {spec!r} as {answer!r}")
        return answer

    @property
    def coded_answer(self):
        if isinstance(self._answer, (GeneralAnswer, SpecificAnswer)):
            return self._answer.concept
        return None

    @coded_answer.setter
    def coded_answer(self, concept):
        if concept is not None:
            self._answer = GeneralAnswer(concept)
        elif isinstance(self._answer, (GeneralAnswer, SpecificAnswer)):
            self._answer = None

    @property
    def specific_coded_answer(self):
        if isinstance(self._answer, SpecificAnswer):
            return self._answer.name
        return None

    @specific_coded_answer.setter
    def specific_coded_answer(self, concept_name):
        if concept_name is None:
            # Drop back to the general concept; free text is left alone
            if isinstance(self._answer, SpecificAnswer):
                self.coded_answer = self._answer.concept
        else:
            self._answer = SpecificAnswer(concept_name, concept_name.concept)

    @property
    def non_coded_answer(self):
        if isinstance(self._answer, FreeTextAnswer):
            return self._answer.text
        return None

    @non_coded_answer.setter
    def non_coded_answer(self, text):
        if text is not None:
            self._answer = FreeTextAnswer(text)
        elif isinstance(self._answer, FreeTextAnswer):
            self._answer = None

    @property
    def spec(self):
        """The serialized form understood by parse(), or None if empty or """
        """the coded answer has no id to refer to it by"""
        if isinstance(self._answer, SpecificAnswer):
            if self._answer.name.concept_name_id is None:
                return None
            return f"{CONCEPT_NAME_PREFIX}{self._answer.name.concept_name_id}"
        if isinstance(self._answer, GeneralAnswer):
            if self._answer.concept.concept_id is None:
                return None
            return f"{CONCEPT_PREFIX}{self._answer.concept.concept_id}"
        if isinstance(self._answer, FreeTextAnswer):
            return f"{NON_CODED_PREFIX}{self._answer.text}"
        return None

    def __eq__(self, other):
        if not isinstance(other, CodedOrFreeTextAnswer):
            return NotImplemented
        return (self.coded_answer == other.coded_answer and
                self.specific_coded_answer == other.specific_coded_answer and
                self.non_coded_answer == other.non_coded_answer)

    def __hash__(self):
        return hash((self.coded_answer, self.specific_coded_answer, self.non_coded_answer))

    def __repr__(self):
        if self._answer is None:
            return "CodedOrFreeTextAnswer()"
        return f"CodedOrFreeTextAnswer({self._answer!r})"

    def format_without_specific_answer(self, locale):
        """Either the free text or the concept's preferred name in locale. """
        """The specific answer is never shown, even when it is set."""
        if self.non_coded_answer is not None:
            return self.non_coded_answer
        if self.coded_answer is None:
            return UNKNOWN
        return _display(self.coded_answer, locale)

    def format(self, locale):
        """Format as one of:

            free text
            concept's preferred name in locale
            specific name → concept's preferred name in locale
        """
        if self.non_coded_answer is not None:
            return self.non_coded_answer
        if self.coded_answer is None:
            return UNKNOWN

        specific = self.specific_coded_answer
        if specific is None:
            return _display(self.coded_answer, locale)

        if specific.locale_preferred and specific.locale == locale:
            return specific.name

        preferred = self.coded_answer.get_name(locale)
        if preferred is None or preferred == specific:
            return specific.name
        return f"{specific.name}{ARROW}{preferred.name}"

    def format_with_code(self, locale, code_sources):
        """Like format(), but for coded answers also append the code of the """
        """best mapping into one of code_sources, ie: "Cholera [A00]" """
        formatted = self.format(locale)
        if self.coded_answer is None:
            return formatted

        term = _best_mapping(self.coded_answer, code_sources)
        if term is None:
            return formatted
        return f"{formatted} [{term.code}]"


def _parse_id(spec, prefix):
    try:
        return int(spec[len(prefix):])
    except ValueError as e:
        raise UnknownAnswerFormat(spec) from e

def _display(concept, locale):
    name = concept.get_name(locale)
    if name is None:
        return UNKNOWN
    return name.name

def _best_mapping(concept, code_sources):
    """Return the reference term of the first SAME-AS mapping into one of """
    """code_sources. Failing that, the last NARROWER-THAN mapping."""
    next_best = None
    for candidate in concept.mappings:
        if candidate.term.source in code_sources:
            if candidate.map_type.uuid == SAME_AS_CONCEPT_MAP_TYPE_UUID:
                logger.debug(f"{concept!r}: using {candidate!r}")
                return candidate.term
            elif candidate.map_type.uuid == NARROWER_THAN_CONCEPT_MAP_TYPE_UUID:
                # Later NARROWER-THAN mappings replace earlier ones
                next_best = candidate.term
    if next_best is not None:
        logger.debug(f"{concept!r}: no SAME-AS mapping, using {next_best.source.name}:{next_best.code}")
    return next_best
