"""Tests for preloadhints CLI entrypoints."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import preloadhints.main as main

BUNDLE = {
    "assets/index.js": {
        "type": "chunk",
        "name": "index",
        "imports": ["assets/vendor.js"],
        "dynamicImports": ["assets/about.js"],
    },
    "assets/vendor.js": {"type": "chunk", "name": "vendor"},
    "assets/about.js": {"type": "chunk", "name": "about"},
}

HTML = """<html>
  <head>
    <script type="module" src="/assets/index.js"></script>
  </head>
</html>
"""


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)


def _write_inputs(tmp_path: Path) -> tuple[Path, Path]:
    bundle_path = tmp_path / "bundle.json"
    bundle_path.write_text(json.dumps(BUNDLE), encoding="utf-8")
    html_path = tmp_path / "index.html"
    html_path.write_text(HTML, encoding="utf-8")
    return bundle_path, html_path


def test_main_requires_command(capsys: pytest.CaptureFixture[str]) -> None:
    """Missing subcommands make the CLI print help and fail."""
    exit_code = main.main([])

    assert exit_code == 1
    assert "Preloadhints" in capsys.readouterr().out


def test_main_dispatches_inject_command(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    captured: dict[str, object] = {}

    def fake_inject_command(args) -> int:
        captured["args"] = args
        return 0

    monkeypatch.setattr(main, "inject_command", fake_inject_command)

    exit_code = main.main(
        ["inject", str(tmp_path / "index.html"), "-b", "bundle.json", "-e", "a.js"]
    )

    assert exit_code == 0
    parsed = captured["args"]
    assert parsed.html == str(tmp_path / "index.html")
    assert parsed.base == "/"
    assert parsed.include is None


def test_resolve_prints_candidates(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    bundle_path, _ = _write_inputs(tmp_path)

    exit_code = main.main(
        ["resolve", "-b", str(bundle_path), "-e", "assets/index.js", "--include", "initial"]
    )

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "assets/vendor.js" in out
    assert "assets/index.js" in out
    assert "assets/about.js" not in out


def test_resolve_by_names(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bundle_path, _ = _write_inputs(tmp_path)

    exit_code = main.main(
        ["resolve", "-b", str(bundle_path), "-e", "assets/index.js", "--names", "about"]
    )

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "assets/about.js" in out
    assert "assets/vendor.js" not in out


def test_inject_writes_output_file(tmp_path: Path) -> None:
    bundle_path, html_path = _write_inputs(tmp_path)
    out_path = tmp_path / "dist" / "index.html"

    exit_code = main.main(
        [
            "inject",
            str(html_path),
            "-b",
            str(bundle_path),
            "-e",
            "assets/index.js",
            "--include",
            "initial",
            "-o",
            str(out_path),
        ]
    )

    assert exit_code == 0
    result = out_path.read_text(encoding="utf-8")
    assert '<link rel="modulepreload" href="/assets/vendor.js">' in result
    assert result.count("/assets/index.js") == 1


def test_inject_to_stdout_with_config_and_overrides(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    bundle_path, html_path = _write_inputs(tmp_path)
    config_path = tmp_path / "preload.toml"
    config_path.write_text('[preload]\nrel = "prefetch"\n', encoding="utf-8")

    exit_code = main.main(
        [
            "inject",
            str(html_path),
            "-b",
            str(bundle_path),
            "-e",
            "assets/index.js",
            "-c",
            str(config_path),
            "--media",
            "screen",
            "--base",
            "https://cdn.example.com/",
        ]
    )

    assert exit_code == 0
    out = capsys.readouterr().out
    assert (
        '<link rel="prefetch" href="https://cdn.example.com/assets/about.js" media="screen">'
        in out
    )


def test_inject_unknown_entry_fails(tmp_path: Path) -> None:
    bundle_path, html_path = _write_inputs(tmp_path)

    exit_code = main.main(
        ["inject", str(html_path), "-b", str(bundle_path), "-e", "assets/missing.js"]
    )

    assert exit_code == 1


def test_inject_requires_entry_for_bundle_dumps(tmp_path: Path) -> None:
    bundle_path, html_path = _write_inputs(tmp_path)

    assert main.main(["inject", str(html_path), "-b", str(bundle_path)]) == 1


def test_inject_uses_single_manifest_entry(tmp_path: Path) -> None:
    manifest_path = tmp_path / "manifest.json"
    manifest_path.write_text(
        json.dumps(
            {
                "index.html": {
                    "file": "assets/index.js",
                    "isEntry": True,
                    "dynamicImports": ["src/about.ts"],
                },
                "src/about.ts": {"file": "assets/about.js"},
            }
        ),
        encoding="utf-8",
    )
    html_path = tmp_path / "index.html"
    html_path.write_text(HTML, encoding="utf-8")
    out_path = tmp_path / "out.html"

    exit_code = main.main(
        ["inject", str(html_path), "-b", str(manifest_path), "--manifest", "-o", str(out_path)]
    )

    assert exit_code == 0
    assert '<link rel="modulepreload" href="/assets/about.js">' in out_path.read_text(
        encoding="utf-8"
    )


def test_export_writes_node_link_json(tmp_path: Path) -> None:
    bundle_path, _ = _write_inputs(tmp_path)
    out_path = tmp_path / "graph.json"

    exit_code = main.main(["export", "-b", str(bundle_path), "-o", str(out_path)])

    assert exit_code == 0
    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert {node["id"] for node in data["nodes"]} == set(BUNDLE)
    assert {(e["source"], e["target"], e["kind"]) for e in data["edges"]} == {
        ("assets/index.js", "assets/vendor.js", "static_import"),
        ("assets/index.js", "assets/about.js", "dynamic_import"),
    }


def test_export_reports_bad_bundle(tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text("{", encoding="utf-8")

    assert main.main(["export", "-b", str(bad), "-o", str(tmp_path / "g.json")]) == 1
