"""Tests for the listing parsers (core/parser.py).

Coverage:
* Header skipping, including leading blank lines.
* Required-field counts for containers (4) and images (5).
* Optional trailing ``ports``.
* Order preservation and blank-line tolerance.
* Empty and header-only input.
"""

from __future__ import annotations

import pytest

from docker_report.core.models import ContainerRecord, ImageRecord
from docker_report.core.parser import iter_data_rows, parse_containers, parse_images

from conftest import CONTAINER_HEADER, IMAGE_HEADER


# ---------------------------------------------------------------------------
# Row splitting
# ---------------------------------------------------------------------------

class TestIterDataRows:
    def test_header_is_skipped(self) -> None:
        rows = list(iter_data_rows("H1\tH2\na\tb\n"))
        assert rows == [["a", "b"]]

    def test_first_non_empty_line_is_the_header(self) -> None:
        rows = list(iter_data_rows("\n\nH1\tH2\na\tb\n"))
        assert rows == [["a", "b"]]

    def test_blank_lines_are_ignored(self) -> None:
        rows = list(iter_data_rows("H\n\na\n\n\nb\n"))
        assert rows == [["a"], ["b"]]

    def test_crlf_line_endings(self) -> None:
        rows = list(iter_data_rows("H\r\na\tb\r\n"))
        assert rows == [["a", "b"]]

    @pytest.mark.parametrize("char", ["\x0b", "\x0c", "\x1c", "\x85", "\u2028"])
    def test_only_newline_ends_a_row(self, char: str) -> None:
        rows = list(iter_data_rows(f"H\na{char}b\tc\n"))
        assert rows == [[f"a{char}b", "c"]]

    @pytest.mark.parametrize("text", ["", "\n", "\n\n\n"])
    def test_empty_input_yields_nothing(self, text: str) -> None:
        assert list(iter_data_rows(text)) == []


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

class TestParseContainers:
    def test_typical_line(self) -> None:
        text = (
            "ID\tNAMES\tIMAGE\tSTATUS\tPORTS\n"
            "abc123456789\tweb\tnginx:latest\tUp 5 minutes\t0.0.0.0:80->80/tcp\n"
        )
        records = parse_containers(text)
        assert records == (
            ContainerRecord(
                id="abc123456789",
                name="web",
                image="nginx:latest",
                status="Up 5 minutes",
                ports="0.0.0.0:80->80/tcp",
            ),
        )

    def test_four_fields_yield_empty_ports(self) -> None:
        text = f"{CONTAINER_HEADER}\nabc\tweb\tnginx\tCreated\n"
        (record,) = parse_containers(text)
        assert record.ports == ""
        assert record.status == "Created"

    def test_trailing_empty_ports_field(self) -> None:
        text = f"{CONTAINER_HEADER}\nabc\tweb\tnginx\tUp 1 second\t\n"
        (record,) = parse_containers(text)
        assert record.ports == ""

    @pytest.mark.parametrize(
        "line",
        ["abc", "abc\tweb", "abc\tweb\tnginx"],
    )
    def test_fewer_than_four_fields_dropped(self, line: str) -> None:
        text = f"{CONTAINER_HEADER}\n{line}\n"
        assert parse_containers(text) == ()

    def test_malformed_line_does_not_abort_parse(self) -> None:
        text = (
            f"{CONTAINER_HEADER}\n"
            "one\ta\tx\tUp\n"
            "broken line without tabs\n"
            "two\tb\ty\tExited (1) 1 minute ago\n"
        )
        records = parse_containers(text)
        assert [r.id for r in records] == ["one", "two"]

    def test_extra_fields_ignored(self) -> None:
        text = f"{CONTAINER_HEADER}\nabc\tweb\tnginx\tUp\t80/tcp\tsurplus\n"
        (record,) = parse_containers(text)
        assert record.ports == "80/tcp"

    def test_order_preserved(self) -> None:
        ids = ["c3", "c1", "c2", "c1"]
        body = "".join(f"{i}\tn\timg\tUp\n" for i in ids)
        records = parse_containers(f"{CONTAINER_HEADER}\n{body}")
        assert [r.id for r in records] == ids

    def test_header_never_appears_in_records(self) -> None:
        # A header shaped exactly like a data row is still discarded.
        text = "hdr\tname\timage\tUp\nabc\tweb\tnginx\tUp\n"
        records = parse_containers(text)
        assert [r.id for r in records] == ["abc"]

    @pytest.mark.parametrize("text", ["", CONTAINER_HEADER, f"{CONTAINER_HEADER}\n\n"])
    def test_empty_or_header_only(self, text: str) -> None:
        assert parse_containers(text) == ()

    def test_returns_tuple(self) -> None:
        assert isinstance(parse_containers(""), tuple)


# ---------------------------------------------------------------------------
# Images
# ---------------------------------------------------------------------------

class TestParseImages:
    def test_typical_line(self) -> None:
        text = f"{IMAGE_HEADER}\nnginx\tlatest\t605c77e624dd\t2 weeks ago\t141MB\n"
        assert parse_images(text) == (
            ImageRecord(
                repository="nginx",
                tag="latest",
                image_id="605c77e624dd",
                created="2 weeks ago",
                size="141MB",
            ),
        )

    @pytest.mark.parametrize(
        "line",
        [
            "nginx",
            "nginx\tlatest",
            "nginx\tlatest\t605c77e624dd",
            "nginx\tlatest\t605c77e624dd\t2 weeks ago",
        ],
    )
    def test_fewer_than_five_fields_dropped(self, line: str) -> None:
        assert parse_images(f"{IMAGE_HEADER}\n{line}\n") == ()

    def test_fields_kept_verbatim(self) -> None:
        text = f"{IMAGE_HEADER}\n<none>\t<none>\tdeadbeef\t2024-01-01 10:00:00 +0000 UTC\t1.2GB\n"
        (record,) = parse_images(text)
        assert record.repository == "<none>"
        assert record.created == "2024-01-01 10:00:00 +0000 UTC"
        assert record.size == "1.2GB"

    def test_order_preserved_with_blank_lines(self) -> None:
        text = (
            f"{IMAGE_HEADER}\n"
            "b\t1\tid1\tc\t1MB\n"
            "\n"
            "a\t2\tid2\tc\t2MB\n"
        )
        assert [r.repository for r in parse_images(text)] == ["b", "a"]

    def test_header_only(self) -> None:
        assert parse_images(IMAGE_HEADER + "\n") == ()
