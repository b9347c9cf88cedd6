"""
Display configuration for rendering answers. We keep the same YAML approach
used for the rest of our configuration:

    dictionary: concepts.yaml
    locale: en
    code_sources:
      - ICD10
      - SNOMED-CT

The dictionary path is relative to the config file itself. code_sources are
the keys of the terminology sources whose codes may be appended to a coded
answer, in order of preference.
"""

from pathlib import Path

from yaml import safe_load

DEFAULT_LOCALE = "en"

class AnswerConfig:
    def __init__(self, cfile=None):
        self.cfg = {}
        self.base_dir = Path.cwd()

        if cfile is not None:
            self.cfg = safe_load(cfile) or {}
            # Streams opened from disk know where they came from
            if hasattr(cfile, 'name'):
                self.base_dir = Path(cfile.name).parent

        self.locale = str(self.cfg.get('locale', DEFAULT_LOCALE))
        self.code_sources = self.cfg.get('code_sources')
        if self.code_sources is None:
            self.code_sources = []
        elif isinstance(self.code_sources, str):
            self.code_sources = self.code_sources.split(",")

        self.dictionary = self.cfg.get('dictionary')
        if self.dictionary is not None:
            self.dictionary = self.base_dir / self.dictionary

    def code_sources_from(self, dictionary):
        """Resolve our source keys against the concept dictionary"""
        return [dictionary.get_source(key) for key in self.code_sources]
