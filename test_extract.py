import io
import re

import pytest

from extraction.emitter import CsvEmitter, build_row
from extraction.extractor import extract_line
from extraction.rules import EXTRACTOR_RULES
from extraction.types import ExtractorRule


APACHE_LINE = (
    '192.168.1.1 - - [10/Oct/2023:13:55:36 +0000] "GET / HTTP/1.1" 200 user@example.com'
)


# ---------- Rule set ----------

def test_rule_order_and_headers():
    assert [r.name for r in EXTRACTOR_RULES] == ["date1", "date2", "ip", "email"]
    assert [r.header_name for r in EXTRACTOR_RULES] == [
        "Date (Apache)",
        "Date and Time",
        "IP Address",
        "Email Address",
    ]


def test_rule_rejects_group_outside_pattern():
    with pytest.raises(ValueError):
        ExtractorRule(name="bad", header_name="Bad", pattern=re.compile(r"(a)"), group=2)

    with pytest.raises(ValueError):
        ExtractorRule(name="bad", header_name="Bad", pattern=re.compile(r"a"), group=-1)


def test_rule_is_immutable():
    rule = EXTRACTOR_RULES[0]
    with pytest.raises(AttributeError):
        rule.group = 0


# ---------- Line extraction ----------

def test_apache_line_fills_three_fields():
    assert extract_line(APACHE_LINE) == {
        "date1": "10/Oct/2023:13:55:36 +0000",
        "ip": "192.168.1.1",
        "email": "user@example.com",
    }


def test_iso_datetime_and_ip():
    assert extract_line("Login at 2023-10-10 14:00:00 from 10.0.0.5") == {
        "date2": "2023-10-10 14:00:00",
        "ip": "10.0.0.5",
    }


def test_iso_date_without_time():
    assert extract_line("deployed 2023-10-10 by ops") == {"date2": "2023-10-10"}


def test_no_identifiers_returns_none():
    assert extract_line("Hello world, no identifiers here.") is None
    assert extract_line("") is None


def test_ip_octets_are_not_range_checked():
    assert extract_line("peer 999.999.999.999") == {"ip": "999.999.999.999"}


def test_first_match_wins():
    assert extract_line("10.0.0.1 then 10.0.0.2") == {"ip": "10.0.0.1"}


def test_digits_are_ascii_only():
    # Arabic-Indic digits
    assert extract_line("٢٠٢٣-١٠-١٠") is None


def test_non_participating_group_is_not_recorded():
    rules = [
        ExtractorRule(name="x", header_name="X", pattern=re.compile(r"(a)|(b)"), group=2),
    ]

    assert extract_line("a", rules) is None
    assert extract_line("b", rules) == {"x": "b"}


def test_empty_rule_set_never_matches():
    assert extract_line(APACHE_LINE, ()) is None


# ---------- CSV emission ----------

def test_build_row_follows_rule_order():
    extracted = {"email": "user@example.com", "date1": "10/Oct/2023:13:55:36 +0000"}

    assert build_row(extracted, EXTRACTOR_RULES) == [
        "10/Oct/2023:13:55:36 +0000",
        "",
        "",
        "user@example.com",
    ]


def test_emitter_writes_header_and_rows():
    out = io.StringIO()
    emitter = CsvEmitter(out)

    emitter.write_header()
    emitter.write_row(extract_line(APACHE_LINE))
    emitter.write_row(extract_line("Login at 2023-10-10 14:00:00 from 10.0.0.5"))

    assert out.getvalue() == (
        "Date (Apache),Date and Time,IP Address,Email Address\n"
        "10/Oct/2023:13:55:36 +0000,,192.168.1.1,user@example.com\n"
        ",2023-10-10 14:00:00,10.0.0.5,\n"
    )


def test_emitter_quotes_delimiters_and_quotes():
    rules = [
        ExtractorRule(
            name="name",
            header_name="Name, full",
            pattern=re.compile(r"name=([^;]*)"),
            group=1,
        ),
        ExtractorRule(name="ip", header_name="IP", pattern=re.compile(r"\d+\.\d+\.\d+\.\d+")),
    ]
    out = io.StringIO()
    emitter = CsvEmitter(out, rules)

    emitter.write_header()
    emitter.write_row(extract_line('name=a "b", c;', rules))

    assert out.getvalue() == '"Name, full",IP\n"a ""b"", c",\n'
