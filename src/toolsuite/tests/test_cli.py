"""Tests for the ToolSuite CLI."""

import json

import pytest
import requests

from toolsuite.cli import main


def run_cli(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestCLI:
    def test_list(self, capsys):
        assert run_cli(["list"]) == 0
        out = capsys.readouterr().out
        assert "case-converter" in out
        assert "spell-checker" not in out

    def test_list_all(self, capsys):
        assert run_cli(["list", "--all"]) == 0
        assert "spell-checker" in capsys.readouterr().out

    def test_list_category(self, capsys):
        assert run_cli(["list", "--category", "seo-tools"]) == 0
        out = capsys.readouterr().out
        assert "meta-tag-generator" in out
        assert "case-converter" not in out

    def test_categories(self, capsys):
        assert run_cli(["categories"]) == 0
        out = capsys.readouterr().out
        assert "Text Tools" in out
        assert "GIF Tools" not in out

    def test_run(self, capsys):
        assert run_cli(["run", "case-converter", "Hello World", '{"caseType": "upper"}']) == 0
        assert capsys.readouterr().out.strip() == "HELLO WORLD"

    def test_run_with_kwargs(self, capsys):
        code = run_cli(["run", "text-summarizer", "One. Two. Three.", "--kwargs", '{"max_sentences": 1}'])
        assert code == 0
        assert capsys.readouterr().out.strip() == "One..."

    def test_run_unknown(self, capsys):
        assert run_cli(["run", "does-not-exist"]) == 1
        assert "does-not-exist" in capsys.readouterr().err

    def test_run_bad_input(self, capsys):
        assert run_cli(["run", "case-converter", "text", '{"caseType": "shouty"}']) == 2

    def test_run_invalid_kwargs(self, capsys):
        assert run_cli(["run", "case-converter", "hi", "--kwargs", "{not json"]) == 1
        assert "❌ Invalid --kwargs" in capsys.readouterr().err

    def test_run_kwargs_must_be_object(self, capsys):
        assert run_cli(["run", "case-converter", "hi", "--kwargs", "[1]"]) == 1
        assert "expected a JSON object" in capsys.readouterr().err

    def test_run_tool_failure(self, monkeypatch, capsys):
        from toolsuite.logic import seo

        def fake_get(url, **kwargs):
            raise requests.ConnectionError("unreachable")

        monkeypatch.setattr(seo.requests, "get", fake_get)
        assert run_cli(["run", "seo-audit", "https://example.com"]) == 1
        err = capsys.readouterr().err
        assert "❌ Tool failed" in err
        assert "unreachable" in err

    def test_list_unknown_category(self, capsys):
        assert run_cli(["list", "--category", "knitting-tools"]) == 1
        err = capsys.readouterr().err
        assert "Unknown category: knitting-tools" in err
        assert "text-tools" in err

    def test_export(self, tmp_path, capsys):
        out = tmp_path / "tools-public.json"
        assert run_cli(["export", "--output", str(out)]) == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert "case-converter" in [e["slug"] for e in data]
        assert "spell-checker" not in [e["slug"] for e in data]


class TestScripts:
    def test_build_public_index(self, tmp_path, monkeypatch, capsys):
        from toolsuite import scripts

        out = tmp_path / "index.json"
        monkeypatch.setattr(scripts.sys, "argv", ["toolsuite-export", str(out)])
        scripts.build_public_index()

        data = json.loads(out.read_text(encoding="utf-8"))
        assert {e["slug"] for e in data} >= {"case-converter", "meta-tag-generator"}
        assert "Wrote" in capsys.readouterr().out
