import io
import json

import pytest

from punctmerge import __version__
from punctmerge.cli import main


def test_merges_argument_sentence(capsys):
    main(["他_n 说_v …_w …_w 完_v 了_u"])

    assert capsys.readouterr().out.strip() == "他_n 说_v ……_w 完_v 了_u"


def test_reads_sentences_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("…_w …_w\n\n你_r 好_a\n"))

    main([])

    assert capsys.readouterr().out.splitlines() == ["……_w", "你_r 好_a"]


def test_json_output(capsys):
    main(["--json", "好_a -_x -_x"])

    assert json.loads(capsys.readouterr().out) == [
        {"text": "好", "tag": "a"},
        {"text": "--", "tag": "w"},
    ]


def test_custom_dictionary_and_separator(capsys, tmp_path):
    path = tmp_path / "punctuation.txt"
    path.write_text("~~\n", encoding="utf-8")

    main(["--dict", str(path), "--separator", "/", "~/x ~/x …/w …/w"])

    assert capsys.readouterr().out.strip() == "~~/w …/w …/w"


def test_missing_dictionary_exits_with_error(capsys, tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--dict", str(tmp_path / "missing.txt"), "他_n"])

    assert excinfo.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])

    assert __version__ in capsys.readouterr().out


def test_malformed_dictionary_exits_with_error(capsys, tmp_path):
    path = tmp_path / "broken.dic"
    path.write_bytes(b"not a marisa trie at all")

    with pytest.raises(SystemExit) as excinfo:
        main(["--dict", str(path), "他_n"])

    assert excinfo.value.code == 1
    assert "Malformed" in capsys.readouterr().err
