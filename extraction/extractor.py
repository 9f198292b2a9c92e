from typing import Optional, Sequence

from .rules import EXTRACTOR_RULES
from .types import ExtractedRow, ExtractorRule


def extract_line(
    line: str,
    rules: Sequence[ExtractorRule] = EXTRACTOR_RULES,
) -> Optional[ExtractedRow]:
    """
    Run every rule against a single line.

    Each rule searches independently (first match anywhere in the line),
    so one line can fill several fields.

    Returns:
      - a mapping rule name -> matched text for the rules that matched
      - None when no rule matched, so the caller can skip the line

    A rule whose capture group did not take part in the match counts
    as not matched.
    """
    extracted: ExtractedRow = {}

    for rule in rules:
        m = rule.pattern.search(line)
        if not m:
            continue

        value = m.group(rule.group)
        if value is None:
            continue

        extracted[rule.name] = value

    if not extracted:
        return None

    return extracted
