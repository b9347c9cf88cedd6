#!/usr/bin/env python

"""
Render one or more serialized answers (ConceptName:<id>, Concept:<id> or
Non-Coded:<text>) the way they would be displayed to a clinician.

Concepts are resolved against a YAML concept dictionary. The display locale
and the terminology sources whose codes get appended can come from a config
file (ANSWER_CONFIG, defaulting to answer_config.yaml) or from the command
line, which wins.

    format_answers.py -d concepts.yaml -l fr -s ICD10 ConceptName:51 Concept:5
"""

import logging
import sys
from os import getenv
from pathlib import Path
from argparse import ArgumentParser, FileType

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from codedanswer import __version__, UnknownConceptSource
from codedanswer.answer import CodedOrFreeTextAnswer
from codedanswer.config import AnswerConfig
from codedanswer.concept.service import ConceptDictionary

logger = logging.getLogger("format_answers")

def format_answers(specs, dictionary, locale, code_sources, plain=False, with_code=True):
    """Returns a list of (spec, rendering, error) for each spec"""
    results = []
    for spec in specs:
        try:
            answer = CodedOrFreeTextAnswer.parse(spec, dictionary)
        except (ValueError, LookupError) as e:
            logger.error(f"{spec}: {e}")
            results.append((spec, None, str(e)))
            continue

        if plain:
            rendered = answer.format_without_specific_answer(locale)
        elif with_code:
            rendered = answer.format_with_code(locale, code_sources)
        else:
            rendered = answer.format(locale)
        results.append((spec, rendered, None))
    return results

if __name__ == '__main__':
    default_config = Path(getenv("ANSWER_CONFIG", "answer_config.yaml"))

    parser = ArgumentParser(description=f"Answer formatter {__version__}")
    parser.add_argument("-c",
                "--config",
                type=FileType('rt'),
                help=f"YAML display configuration (default {default_config} when present)")
    parser.add_argument("-d",
                "--dictionary",
                type=FileType('rt'),
                help="YAML concept dictionary used to resolve ids")
    parser.add_argument("-l",
                "--locale",
                type=str,
                help="Locale to display names in, ie en, fr, en_GB")
    parser.add_argument("-s",
                "--source",
                type=str,
                default=[],
                action='append',
                help="Terminology source whose codes may be appended (repeatable)")
    parser.add_argument("--no-code",
                action='store_true',
                help="Don't append codes")
    parser.add_argument("--plain",
                action='store_true',
                help="Ignore the specific name an answer was recorded with")
    parser.add_argument("-v",
                "--verbose",
                action='store_true',
                help="Log debug details")
    parser.add_argument("specs",
                nargs='+',
                help="Serialized answers, ie Concept:5")

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(message)s",
                        handlers=[RichHandler()])

    config_file = args.config
    if config_file is None and default_config.exists():
        config_file = default_config.open("rt")
    config = AnswerConfig(config_file)

    dictionary_file = args.dictionary
    if dictionary_file is None:
        if config.dictionary is None:
            parser.error("A concept dictionary is required, either -d or 'dictionary' in the config")
        dictionary_file = config.dictionary.open("rt")
    dictionary = ConceptDictionary.from_yaml(dictionary_file)
    logger.info(f"{len(dictionary)} concepts loaded from {dictionary_file.name}")

    locale = args.locale or config.locale
    if len(args.source) > 0:
        config.code_sources = args.source
    try:
        code_sources = config.code_sources_from(dictionary)
    except UnknownConceptSource as e:
        parser.error(str(e))

    results = format_answers(args.specs,
                             dictionary,
                             locale,
                             code_sources,
                             plain=args.plain,
                             with_code=not args.no_code)

    table = Table(title=f"Answers ({locale})")
    table.add_column("Spec", style="cyan")
    table.add_column("Display")
    failures = 0
    for spec, rendered, error in results:
        if error is None:
            table.add_row(escape(spec), escape(rendered))
        else:
            failures += 1
            table.add_row(escape(spec), f"[red]{escape(error)}[/red]")

    Console().print(table)
    if failures > 0:
        sys.exit(1)
