"""Tests for the command-line entry point."""

import pytest
from pathlib import Path

from tether.__main__ import main
from tether.identifier import is_identifier

ID = "20240101T120000"


@pytest.fixture
def store_dir(tmp_path: Path, monkeypatch) -> Path:
    store = tmp_path / "store"
    store.mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("TETHER_STORE_DIRS", str(store))
    monkeypatch.delenv("TETHER_SEARCH_DIRS", raising=False)
    monkeypatch.delenv("TETHER_ID_POSITION", raising=False)
    (tmp_path / "tether.toml").write_text("[search]\nuse_tool = false\n")
    return store


class TestCLI:
    def test_id(self, store_dir: Path, capsys):
        assert main(["id"]) == 0
        assert is_identifier(capsys.readouterr().out.strip())

    def test_embed_and_strip(self, store_dir: Path, capsys):
        main(["embed", "notes.org", "--id", ID])
        assert capsys.readouterr().out.strip() == f"{ID}--notes.org"

        main(["strip", f"{ID}--notes.org"])
        assert capsys.readouterr().out.strip() == "notes.org"

    def test_embed_tail_from_env(self, store_dir: Path, capsys, monkeypatch):
        monkeypatch.setenv("TETHER_ID_POSITION", "tail")
        main(["embed", "projects", "--dir", "--id", ID])
        assert capsys.readouterr().out.strip() == f"projects--{ID}"

    def test_extract(self, store_dir: Path, capsys):
        assert main(["extract", f"see id:{ID}", "--inline"]) == 0
        assert capsys.readouterr().out.strip() == ID
        assert main(["extract", "nothing"]) == 1

    def test_resolve(self, store_dir: Path, tmp_path: Path, capsys):
        target = store_dir / f"{ID}--notes.org"
        target.write_text("x")

        assert main(["resolve", str(tmp_path / "old" / f"{ID}--notes.org")]) == 0
        assert capsys.readouterr().out.strip() == str(target)

    def test_resolve_not_found(self, store_dir: Path, tmp_path: Path, capsys):
        assert main(["resolve", str(tmp_path / "old" / "notes.org")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_store_and_rename(self, store_dir: Path, tmp_path: Path, capsys):
        src = tmp_path / f"{ID}--draft.md"
        src.write_text("x")

        assert main(["store", str(src)]) == 0
        stored = Path(capsys.readouterr().out.strip())
        assert stored == store_dir / f"{ID}--draft.md"

        assert main(["rename", str(stored), "final.md"]) == 0
        assert Path(capsys.readouterr().out.strip()) == store_dir / f"{ID}--final.md"
