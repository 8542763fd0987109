"""Unit tests for CLI command handling."""

from __future__ import annotations

from cli.main import main
from tests.fixture_paths import fixture_path


def _run(tmp_path, capsys, *args: str) -> tuple[int, str]:
    exit_code = main(["--data-root", str(tmp_path), *args])
    return exit_code, capsys.readouterr().out.strip()


def test_cli_submit_prints_index(tmp_path, capsys) -> None:
    """Submit should print the index of each appended record."""
    _run(tmp_path, capsys, "submit", "--series", "btc", "--value", "64000", "--timestamp", "10")

    exit_code, output = _run(
        tmp_path, capsys, "submit", "--series", "btc", "--value", "64010", "--timestamp", "12"
    )

    assert exit_code == 0 and output == "index=1"


def test_cli_submit_defaults_timestamp_to_now(tmp_path, capsys) -> None:
    """Submit without timestamp should stamp the record with current time."""
    _run(tmp_path, capsys, "submit", "--series", "btc", "--value", "64000")

    exit_code, output = _run(tmp_path, capsys, "current", "--series", "btc")

    assert exit_code == 0 and output.startswith("found=true index=0 timestamp=1")


def test_cli_lookup_resolves_last_value_at_or_before(tmp_path, capsys) -> None:
    """Lookup should print the last record at or before the timestamp."""
    for timestamp, value in ((10, "a"), (10, "b"), (20, "c")):
        args = ("submit", "--series", "btc", "--value", value, "--timestamp", str(timestamp))
        _run(tmp_path, capsys, *args)

    exit_code, output = _run(tmp_path, capsys, "lookup", "--series", "btc", "--timestamp", "15")

    assert exit_code == 0 and output == "found=true index=1 timestamp=10 value=b"


def test_cli_lookup_strict_excludes_exact_timestamp(tmp_path, capsys) -> None:
    """Strict lookup should only match records before the timestamp."""
    _run(tmp_path, capsys, "submit", "--series", "btc", "--value", "a", "--timestamp", "10")

    _, output = _run(tmp_path, capsys, "lookup", "--series", "btc", "--timestamp", "10", "--strict")

    assert output == "found=false index=- timestamp=- value=-"


def test_cli_submit_out_of_order_reports_error(tmp_path, capsys) -> None:
    """Decreasing submissions should exit with an error line."""
    _run(tmp_path, capsys, "submit", "--series", "btc", "--value", "a", "--timestamp", "10")

    exit_code, output = _run(
        tmp_path, capsys, "submit", "--series", "btc", "--value", "b", "--timestamp", "9"
    )

    assert exit_code == 1 and output.startswith("error=")


def test_cli_import_and_series_listing(tmp_path, capsys) -> None:
    """Import should append spec records and series should list their counts."""
    _run(tmp_path, capsys, "import", str(fixture_path("series/oracle_feeds.yaml")))

    exit_code, output = _run(tmp_path, capsys, "series")

    assert exit_code == 0 and output.splitlines() == ["btc-usd\t4", "eth-usd\t1"]


def test_cli_import_decreasing_spec_fails(tmp_path, capsys) -> None:
    """Import should stop at the first non-monotonic record."""
    spec_path = str(fixture_path("series/decreasing.yaml"))

    exit_code, output = _run(tmp_path, capsys, "import", spec_path)

    assert exit_code == 1 and "error=" in output


def test_cli_import_decreasing_spec_writes_nothing(tmp_path, capsys) -> None:
    """A rejected import should leave no series behind."""
    spec_path = str(fixture_path("series/decreasing.yaml"))
    _run(tmp_path, capsys, "import", spec_path)

    exit_code, output = _run(tmp_path, capsys, "series")

    assert exit_code == 0 and output == ""


def test_cli_import_older_than_stored_series_writes_nothing(tmp_path, capsys) -> None:
    """An import starting before stored data should fail without touching any series."""
    _run(tmp_path, capsys, "submit", "--series", "btc-usd", "--value", "1", "--timestamp", "200")
    spec_path = str(fixture_path("series/oracle_feeds.yaml"))

    exit_code, output = _run(tmp_path, capsys, "import", spec_path)
    _, listing = _run(tmp_path, capsys, "series")

    assert exit_code == 1 and "error=" in output
    assert listing == "btc-usd\t1"


def test_cli_lookup_strict_returns_earlier_record(tmp_path, capsys) -> None:
    """Strict lookup should resolve the record before an exact match."""
    _run(tmp_path, capsys, "submit", "--series", "btc-usd", "--value", "a", "--timestamp", "10")
    _run(tmp_path, capsys, "submit", "--series", "btc-usd", "--value", "b", "--timestamp", "20")

    exit_code, output = _run(
        tmp_path, capsys, "lookup", "--series", "btc-usd", "--timestamp", "20", "--strict"
    )

    assert exit_code == 0 and output == "found=true index=0 timestamp=10 value=a"
