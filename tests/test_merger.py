"""merger 模块的测试。"""

from hostswitch.merger import OWNERSHIP_COMMENT, find_unterminated_section, merge
from hostswitch.models import HostEntry
from hostswitch.parser import SECTION_END, SECTION_START, parse

ENTRIES = [
    HostEntry("1.2.3.4", "example.com"),
    HostEntry("10.0.0.1", "test.local", enabled=False, comment="note"),
    HostEntry("::1", "v6.local", comment="loopback"),
]

RAW_WITH_SECTION = (
    "##\n127.0.0.1\tlocalhost\n"
    f"{SECTION_START}\n"
    "9.9.9.9 stale.local\n"
    "garbage\n"
    f"{SECTION_END}\n"
    "192.168.1.5 printer\n"
)


def _outside_lines(content: str) -> list:
    lines = []
    inside = False
    for line in content.split("\n"):
        if SECTION_START in line:
            inside = True
            continue
        if SECTION_END in line:
            inside = False
            continue
        if not inside:
            lines.append(line)
    return lines


def test_end_to_end_without_section() -> None:
    out = merge("127.0.0.1\tlocalhost\n", [HostEntry("1.2.3.4", "example.com")])
    assert out.split("\n") == [
        "127.0.0.1\tlocalhost",
        "",
        OWNERSHIP_COMMENT,
        SECTION_START,
        "1.2.3.4\texample.com",
        SECTION_END,
        "",
    ]


def test_section_created_without_trailing_newline() -> None:
    out = merge("127.0.0.1 localhost", ENTRIES)
    assert out == "\n".join([
        "127.0.0.1 localhost",
        "",
        OWNERSHIP_COMMENT,
        SECTION_START,
        "1.2.3.4\texample.com",
        "# 10.0.0.1\ttest.local # note",
        "::1\tv6.local # loopback",
        SECTION_END,
    ])


def test_section_created_in_empty_file() -> None:
    out = merge("", [])
    assert out == f"\n{OWNERSHIP_COMMENT}\n{SECTION_START}\n{SECTION_END}\n"


def test_replaces_existing_section() -> None:
    out = merge(RAW_WITH_SECTION, ENTRIES)
    assert "stale.local" not in out
    assert "garbage" not in out
    assert OWNERSHIP_COMMENT not in out
    assert out.split("\n")[2:7] == [
        SECTION_START,
        "1.2.3.4\texample.com",
        "# 10.0.0.1\ttest.local # note",
        "::1\tv6.local # loopback",
        SECTION_END,
    ]


def test_round_trip() -> None:
    for raw in ["", "127.0.0.1 localhost\n", RAW_WITH_SECTION]:
        assert parse(merge(raw, ENTRIES)) == ENTRIES


def test_round_trip_empty_list() -> None:
    assert parse(merge(RAW_WITH_SECTION, [])) == []


def test_non_interference() -> None:
    out = merge(RAW_WITH_SECTION, ENTRIES)
    assert _outside_lines(out) == _outside_lines(RAW_WITH_SECTION)


def test_sentinel_lines_kept_verbatim() -> None:
    raw = f"a\n  {SECTION_START}  \nold 1.1.1.1\n\t{SECTION_END} x\nb"
    out = merge(raw, [HostEntry("1.2.3.4", "h")])
    assert out == f"a\n  {SECTION_START}  \n1.2.3.4\th\n\t{SECTION_END} x\nb"


def test_idempotent() -> None:
    for raw in ["", "127.0.0.1 localhost\n", "no newline", RAW_WITH_SECTION]:
        once = merge(raw, ENTRIES)
        assert merge(once, ENTRIES) == once


def test_crlf_lines_are_rejoined_with_lf() -> None:
    out = merge(f"a\r\n{SECTION_START}\r\n{SECTION_END}\r\nb", [])
    assert out == f"a\n{SECTION_START}\n{SECTION_END}\nb"


def test_missing_end_sentinel_stops_copying() -> None:
    raw = f"keep\n{SECTION_START}\n1.1.1.1 a\nlost line\n"
    out = merge(raw, [HostEntry("1.2.3.4", "h")])
    assert out == f"keep\n{SECTION_START}\n1.2.3.4\th"


def test_find_unterminated_section() -> None:
    assert find_unterminated_section(RAW_WITH_SECTION) is None
    assert find_unterminated_section("no section") is None
    assert find_unterminated_section(f"x\n{SECTION_START}\n1.1.1.1 a\n") == 2
    assert find_unterminated_section(
        f"{SECTION_START}\n{SECTION_END}\n{SECTION_START}\n"
    ) == 3
