"""Tests for the identifier codec."""

import re
from datetime import datetime

import pytest

from tether.identifier import (
    INLINE_ID_RE,
    NamedEntity,
    embed,
    extract,
    generate,
    is_identifier,
    parse_name,
    place,
    strip,
)

ID = "20240101T120000"


class TestGenerate:
    def test_format(self):
        assert generate(datetime(2024, 3, 5, 7, 8, 9)) == "20240305T070809"

    def test_now_is_valid(self):
        assert is_identifier(generate())
        assert re.fullmatch(r"\d{8}T\d{6}", generate())


class TestExtract:
    def test_primary(self):
        assert extract(f"{ID}--notes.org") == ID

    def test_signature(self):
        assert extract(f"{ID}==a1b2--notes.org") == f"{ID}==a1b2"

    def test_legacy_twelve_digits(self):
        assert extract("202401011200-old.txt") == "202401011200"

    def test_first_match_wins(self):
        assert extract(f"{ID} and 20250101T000000") == ID

    def test_absent(self):
        assert extract("notes.org") is None
        assert extract("") is None

    def test_inline_marker(self):
        line = f"see [[id:{ID}][notes]] and 20250101T000000"
        assert extract(line, INLINE_ID_RE) == ID

    def test_inline_marker_absent(self):
        assert extract(f"plain {ID}", INLINE_ID_RE) is None

    def test_custom_pattern_without_group(self):
        assert extract("ref:202401011200", r"\d{12}") == "202401011200"


class TestEmbed:
    def test_head_file(self):
        assert embed("notes.org", identifier=ID) == f"{ID}--notes.org"

    def test_head_directory(self):
        assert embed("projects", is_directory=True, identifier=ID) == f"{ID}--projects"

    def test_tail_file(self):
        assert embed("notes.org", identifier=ID, position="tail") == f"notes--{ID}.org"

    def test_tail_directory(self):
        name = embed("v1.2", is_directory=True, identifier=ID, position="tail")
        assert name == f"v1.2--{ID}"

    def test_tail_without_extension(self):
        assert embed("README", identifier=ID, position="tail") == f"README--{ID}"

    def test_invalid_explicit_identifier_generates(self):
        name = embed("notes.org", identifier="not-an-id")
        assert "not-an-id" not in name
        assert is_identifier(extract(name))

    def test_already_identified_is_unchanged(self):
        assert embed(f"{ID}--notes.org", identifier="20990101T000000") == f"{ID}--notes.org"

    @pytest.mark.parametrize("position", ["head", "tail"])
    @pytest.mark.parametrize("is_dir", [False, True])
    def test_idempotent(self, position, is_dir):
        once = embed("report.pdf", is_directory=is_dir, position=position)
        assert embed(once, is_directory=is_dir, position=position) == once
        assert extract(once) is not None


class TestStrip:
    def test_head(self):
        assert strip(f"{ID}--notes.org") == "notes.org"

    def test_head_legacy_separator(self):
        assert strip(f"{ID}-notes.org") == "notes.org"

    def test_tail(self):
        assert strip(f"notes--{ID}.org") == "notes.org"

    def test_tail_directory(self):
        assert strip(f"projects--{ID}") == "projects"

    def test_head_with_digit_run_in_title(self):
        assert strip(f"{ID}--scan-202301011230.pdf") == "scan-202301011230.pdf"

    def test_head_with_digit_run_directory(self):
        assert strip(f"{ID}--batch-202301011230") == "batch-202301011230"

    def test_tail_signature(self):
        assert strip(f"notes--{ID}==x9.org") == "notes.org"

    def test_elsewhere_leaves_separators(self):
        assert strip(f"a-{ID}-b.txt") == "a--b.txt"

    def test_no_identifier(self):
        assert strip("notes.org") == "notes.org"

    @pytest.mark.parametrize("position", ["head", "tail"])
    def test_strip_undoes_embed(self, position):
        for name in ["report.pdf", "final-report.tar.gz", "README"]:
            assert strip(embed(name, position=position)) == name


class TestParseName:
    def test_head(self):
        entity = parse_name(f"{ID}--final-report.pdf")
        assert entity == NamedEntity(
            stem="final-report", identifier=ID, separator="--", extension=".pdf"
        )

    def test_tail(self):
        entity = parse_name(f"final-report--{ID}.pdf")
        assert entity.identifier == ID
        assert entity.stem == "final-report"
        assert entity.extension == ".pdf"

    def test_plain(self):
        entity = parse_name("notes.org")
        assert entity.identifier is None
        assert entity.bare_name == "notes.org"

    def test_stem_has_no_identifier(self):
        entity = parse_name(f"{ID}--notes.org")
        assert extract(entity.stem) is None

    def test_head_wins_over_later_digit_run(self):
        entity = parse_name(f"{ID}--scan-202301011230.pdf")
        assert entity == NamedEntity(
            stem="scan-202301011230", identifier=ID, separator="--", extension=".pdf"
        )

    def test_legacy_tail_still_parsed(self):
        entity = parse_name("scan--202301011230.pdf")
        assert entity.identifier == "202301011230"
        assert entity.bare_name == "scan.pdf"


class TestPlace:
    def test_ignores_existing_digit_run(self):
        assert place("scan-202301011230.pdf", ID) == f"{ID}--scan-202301011230.pdf"

    def test_tail(self):
        assert place("scan.pdf", ID, position="tail") == f"scan--{ID}.pdf"
