"""Tests for the command-line entry point."""
from __future__ import annotations

import json

import pytest

import main as cli
from cache_latency_lab.backends import NullStore


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep CACHE_LAB_* settings and .env files out of CLI tests."""
    for name in (
        "CACHE_LAB_RUNS",
        "CACHE_LAB_TTL",
        "CACHE_LAB_FIXTURES_DIR",
        "CACHE_LAB_FILE_PATH",
        "CACHE_LAB_STORES",
        "CACHE_LAB_SEED",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CACHE_LAB_FILE_PATH", str(tmp_path / "file-cache"))
    monkeypatch.setattr(cli, "load_dotenv", lambda: None)
    monkeypatch.chdir(tmp_path)


class TestMain:
    def test_unknown_store_exits(self, capsys) -> None:
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["redis", "--no-color"])

        assert excinfo.value.code == 1
        assert "Missing / unsupported cache store 'redis'" in capsys.readouterr().err

    def test_missing_store_exits(self, capsys) -> None:
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["--no-color"])

        assert excinfo.value.code == 1
        assert "Missing / unsupported cache store ''" in capsys.readouterr().err

    def test_runs_array_store(self, capsys) -> None:
        cli.main(["array", "--runs", "5", "--seed", "1", "--no-color"])

        out = capsys.readouterr().out
        assert "Cache Store: array" in out
        for test in ("Integer", "Stats", "Paragraph", "Article", "Webpage"):
            assert test in out

    def test_only_selected_workloads(self, capsys) -> None:
        cli.main(["null", "--runs", "2", "--only", "integer", "--no-color"])

        out = capsys.readouterr().out
        assert "Integer" in out
        assert "Webpage" not in out

    def test_missing_fixture_exits(self, tmp_path, capsys) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()

        with pytest.raises(SystemExit) as excinfo:
            cli.main(["null", "--runs", "2", "--fixtures-dir", str(empty), "--no-color"])

        assert excinfo.value.code == 1
        assert "Unable to load fixture" in capsys.readouterr().err

    def test_invalid_run_count_exits(self, capsys) -> None:
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["array", "--runs", "0", "--no-color"])

        assert excinfo.value.code == 1
        assert "Run count" in capsys.readouterr().err

    def test_json_output(self, tmp_path, capsys) -> None:
        out_dir = tmp_path / "results"

        cli.main(["file", "--runs", "3", "--json", "--output-dir", str(out_dir), "--no-color"])

        files = list(out_dir.glob("file_*.json"))
        assert len(files) == 1
        data = json.loads(files[0].read_text())
        assert data["store"] == "file"
        assert data["runs"] == 3
        assert data["config"]["runs"] == 3
        assert [r["test"] for r in data["results"]] == [
            "integer", "stats", "paragraph", "article", "webpage",
        ]

    def test_env_run_count(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("CACHE_LAB_RUNS", "2")

        report = cli.run_cache_test(cli.build_parser().parse_args(["null", "--no-color"]))

        assert report.runs == 2


class TestStoreLifetime:
    """The CLI opens the store only for the run and always closes it."""

    @pytest.fixture
    def opened(self, monkeypatch):
        stores = []

        class TrackingStore(NullStore):
            closed = False

            def close(self) -> None:
                self.closed = True

        def fake_resolve(name, config):
            store = TrackingStore()
            stores.append(store)
            return store

        monkeypatch.setattr(cli, "resolve_store", fake_resolve)
        return stores

    def test_closed_after_run(self, opened, capsys) -> None:
        cli.main(["null", "--runs", "2", "--only", "integer", "--no-color"])

        assert len(opened) == 1
        assert opened[0].closed

    def test_closed_when_run_fails(self, opened, tmp_path, capsys) -> None:
        with pytest.raises(SystemExit):
            cli.main(["null", "--runs", "2", "--fixtures-dir", str(tmp_path), "--no-color"])

        assert len(opened) == 1
        assert opened[0].closed

    def test_not_opened_for_invalid_run_count(self, opened, capsys) -> None:
        with pytest.raises(SystemExit):
            cli.main(["null", "--runs", "0", "--no-color"])

        assert opened == []

    def test_not_opened_when_generator_setup_fails(self, opened, monkeypatch, capsys) -> None:
        def broken_generator(**kwargs):
            raise RuntimeError("no word source")

        monkeypatch.setattr(cli, "PayloadGenerator", broken_generator)

        with pytest.raises(SystemExit):
            cli.main(["null", "--runs", "2", "--no-color"])

        assert opened == []
        assert "no word source" in capsys.readouterr().err
