import csv
from typing import List, Sequence, TextIO

from .rules import EXTRACTOR_RULES
from .types import ExtractedRow, ExtractorRule


def build_header(rules: Sequence[ExtractorRule]) -> List[str]:
    return [rule.header_name for rule in rules]


def build_row(extracted: ExtractedRow, rules: Sequence[ExtractorRule]) -> List[str]:
    # Column order is rule order, not dict order
    return [extracted.get(rule.name, "") for rule in rules]


class CsvEmitter:
    """
    Writes the CSV document: one header row, then one row per
    extracted line.

    Values are raw matched text. The csv module quotes anything
    containing a delimiter, quote or newline.
    """

    def __init__(
        self,
        stream: TextIO,
        rules: Sequence[ExtractorRule] = EXTRACTOR_RULES,
    ):
        self.rules = tuple(rules)
        self._stream = stream
        self._writer = csv.writer(stream, lineterminator="\n")

    def write_header(self):
        self._writer.writerow(build_header(self.rules))

    def write_row(self, extracted: ExtractedRow):
        self._writer.writerow(build_row(extracted, self.rules))

    def flush(self):
        self._stream.flush()
