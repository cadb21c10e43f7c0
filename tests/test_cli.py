import json
from pathlib import Path

from typer.testing import CliRunner

from path_pruner import cli

runner = CliRunner()


def _make_dist(root: Path) -> None:
    (root / "dist" / "styles" / "css").mkdir(parents=True)
    (root / "dist" / "styles" / "popup.css").write_text("x", encoding="utf-8")
    (root / "dist" / "manifest.json").write_text("x", encoding="utf-8")


def test_prune_prints_json_report(tmp_path: Path) -> None:
    _make_dist(tmp_path)

    result = runner.invoke(
        cli.app,
        [
            "prune",
            "--dir",
            str(tmp_path / "dist" / "styles" / "css"),
            "--dir",
            str(tmp_path / "dist" / "styles"),
            "--file",
            str(tmp_path / "dist" / "styles" / "popup.css"),
            "--file",
            str(tmp_path / "dist" / "manifest.json"),
            "--trim-root",
            str(tmp_path),
            "--json",
        ],
    )

    assert result.exit_code == 0, result.output
    report = json.loads(result.output)
    assert report["directories"] == ["/dist/styles"]
    assert report["files"] == ["/dist/manifest.json"]
    assert report["removed_directories"] == ["/dist/styles/css"]
    assert report["removed_files"] == ["/dist/styles/popup.css"]


def test_prune_reads_request_file_and_trim_root_env(tmp_path: Path) -> None:
    _make_dist(tmp_path)
    request = tmp_path / "request.json"
    request.write_text(
        json.dumps(
            {
                "directories": [str(tmp_path / "dist")],
                "files": [str(tmp_path / "dist" / "manifest.json")],
            }
        ),
        encoding="utf-8",
    )

    result = runner.invoke(
        cli.app,
        ["prune", "--request", str(request), "--json"],
        env={"PATH_PRUNER_TRIM_ROOT": str(tmp_path)},
    )

    assert result.exit_code == 0, result.output
    report = json.loads(result.output)
    assert report["directories"] == ["/dist"]
    assert report["files"] == []
    assert report["trim_root"] == str(tmp_path)


def test_prune_collects_glob_patterns(tmp_path: Path) -> None:
    _make_dist(tmp_path)

    result = runner.invoke(
        cli.app,
        ["prune", "--root", str(tmp_path), "--pattern", "dist/*", "--pattern", "dist/styles/*", "--json"],
    )

    assert result.exit_code == 0, result.output
    report = json.loads(result.output)
    assert report["directories"] == [str(tmp_path / "dist" / "styles")]
    assert report["files"] == [str(tmp_path / "dist" / "manifest.json")]


def test_prune_listing_mentions_covered_entries(tmp_path: Path) -> None:
    _make_dist(tmp_path)

    result = runner.invoke(
        cli.app,
        [
            "prune",
            "--dir",
            str(tmp_path / "dist"),
            "--file",
            str(tmp_path / "dist" / "manifest.json"),
            "--trim-root",
            str(tmp_path),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Directories (1)" in result.output
    assert "Files (0)" in result.output
    assert "Covered by a listed directory (1)" in result.output
    assert "/dist/manifest.json" in result.output


def test_prune_missing_path_exits_with_error(tmp_path: Path) -> None:
    result = runner.invoke(cli.app, ["prune", "--dir", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_prune_invalid_request_exits_with_error(tmp_path: Path) -> None:
    request = tmp_path / "request.json"
    request.write_text(json.dumps({"folders": []}), encoding="utf-8")

    result = runner.invoke(cli.app, ["prune", "--request", str(request)])

    assert result.exit_code == 1
    assert "Invalid request" in result.output


def test_prune_without_paths_is_noop() -> None:
    result = runner.invoke(cli.app, ["prune"])

    assert result.exit_code == 0
    assert "nothing to do" in result.output
