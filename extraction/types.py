import re
from dataclasses import dataclass
from typing import Dict


# rule name -> matched text, only for rules that matched the line
ExtractedRow = Dict[str, str]


@dataclass(frozen=True)
class ExtractorRule:
    """
    One named field extractor.

    - name: stable key used in ExtractedRow
    - header_name: column title shown in the CSV header
    - pattern: searched anywhere in the line
    - group: capture group whose text is kept (0 = whole match)
    """
    name: str
    header_name: str
    pattern: re.Pattern
    group: int = 0

    def __post_init__(self):
        if not self.name:
            raise ValueError("extractor rule needs a name")

        if not 0 <= self.group <= self.pattern.groups:
            raise ValueError(
                f"rule {self.name!r}: group {self.group} not in pattern "
                f"{self.pattern.pattern!r} ({self.pattern.groups} groups)"
            )
