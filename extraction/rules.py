import re
from typing import Tuple

from .types import ExtractorRule


# Ordered extractor rules.
# Order is the CSV column order.
# re.ASCII keeps \d and \w to ASCII characters.
EXTRACTOR_RULES: Tuple[ExtractorRule, ...] = (
    # [10/Oct/2023:13:55:36 +0000], brackets dropped
    ExtractorRule(
        name="date1",
        header_name="Date (Apache)",
        pattern=re.compile(
            r"\[(\d{2}/\w+/\d{4}:\d{2}:\d{2}:\d{2} \+\d{4})\]",
            re.ASCII,
        ),
        group=1,
    ),

    # 2023-10-10 or 2023-10-10 14:00:00
    ExtractorRule(
        name="date2",
        header_name="Date and Time",
        pattern=re.compile(
            r"(\d{4}-\d{2}-\d{2}( \d{2}:\d{2}:\d{2})?)",
            re.ASCII,
        ),
        group=1,
    ),

    # IPv4, no octet range check
    ExtractorRule(
        name="ip",
        header_name="IP Address",
        pattern=re.compile(
            r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}",
            re.ASCII,
        ),
        group=0,
    ),

    # Email addresses
    ExtractorRule(
        name="email",
        header_name="Email Address",
        pattern=re.compile(
            r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}",
            re.ASCII,
        ),
        group=0,
    ),
)
