"""Tests for the command-line interface."""

import io
import unicodedata

import pytest

from latin_to_greek.cli import ILIAD, main


def _nfc(text: str) -> str:
    return unicodedata.normalize("NFC", text)


class TestMain:
    def test_arguments(self, capsys):
        assert main(["lo/gos", "A)cilley/s"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == [_nfc("λόγος"), _nfc("Ἀχιλλεύς")]

    def test_file(self, tmp_path, capsys):
        path = tmp_path / "input.txt"
        path.write_text("fai/nei\ne)nqa/de.\n", encoding="utf-8")
        assert main(["-f", str(path)]) == 0
        assert capsys.readouterr().out.splitlines() == [_nfc("φαίνει"), _nfc("ἐνθάδε.")]

    def test_missing_file(self, tmp_path, capsys):
        assert main(["-f", str(tmp_path / "missing.txt")]) == 1
        assert "cannot read" in capsys.readouterr().err

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("qeo/s\n"))
        assert main([]) == 0
        assert capsys.readouterr().out.splitlines() == [_nfc("θεός")]

    def test_no_final_sigma(self, capsys):
        assert main(["--no-final-sigma", "qeo/s"]) == 0
        assert capsys.readouterr().out.strip() == _nfc("θεόσ")

    def test_example(self, capsys):
        assert main(["--example"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[:7] == ILIAD.splitlines()
        assert out[8] == _nfc("μῆνιν ἄειδε θεὰ Πηληϊάδεω Ἀχιλῆος")
        assert len(out) == 15

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert "latin-to-greek" in capsys.readouterr().out

    def test_help_explains_elided_consonants(self, capsys):
        with pytest.raises(SystemExit):
            main(["--help"])
        out = capsys.readouterr().out
        assert "koronis" in out
        assert "d' cannot carry one" in out

    def test_example_shows_elided_consonant_as_typed(self, capsys):
        main(["--example"])
        out = capsys.readouterr().out
        assert _nfc("πολλὰς d' ἰφθίμους") in out
