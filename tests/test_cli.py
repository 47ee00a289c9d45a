import os

from sptconv.app.cli import main
from sptconv.app.messages import MessageCatalog, resolve_locale

from .conftest import make_spt


def test_missing_path_prints_help(capsys):
    assert main(["--lang", "en"]) == 2
    assert "Usage: sptconv" in capsys.readouterr().err


def test_converts_directory(tmp_path, capsys):
    (tmp_path / "pic.spt").write_bytes(make_spt(8, 1, [0xAA]))
    assert main([str(tmp_path), "--lang", "en"]) == 0
    assert os.path.isfile(tmp_path / "pic.png")
    assert "Finished: 1 converted, 0 failed." in capsys.readouterr().out


def test_failed_file_sets_exit_status(tmp_path, capsys):
    (tmp_path / "bad.spt").write_bytes(make_spt(8, 1, [0x01], compressed=True))
    (tmp_path / "good.spt").write_bytes(make_spt(8, 1, [0xFF]))
    assert main([str(tmp_path), "--lang", "en", "--jobs", "2"]) == 1
    assert "1 converted, 1 failed" in capsys.readouterr().out


def test_chinese_messages(tmp_path, capsys):
    assert main([str(tmp_path / "missing"), "--lang", "zh_CN.UTF-8"]) == 0
    assert "不存在" in capsys.readouterr().out


def test_resolve_locale_from_environment(monkeypatch):
    monkeypatch.delenv("LC_ALL", raising=False)
    monkeypatch.setenv("LANG", "zh_CN.UTF-8")
    assert resolve_locale(None, ["en", "zh"]) == "zh"
    monkeypatch.setenv("LANG", "fr_FR.UTF-8")
    assert resolve_locale(None, ["en", "zh"]) == "en"


def test_catalog_falls_back_to_english():
    catalog = MessageCatalog.load("de")
    assert catalog.locale == "en"
    assert catalog.format("ConvertProgress", source="a.spt", target="a.png") == "a.spt ==> a.png"
