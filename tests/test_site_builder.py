from importlib import resources
from pathlib import Path
import logging

import pytest

from sember.config import load_config, parse_config
from sember.errors import BuildError
from sember.util import filesystem, remove_tree
from sember.web import build_site, builder, copy_photo, copy_static_assets


def _snapshot(root: Path) -> dict:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def test_end_to_end_minimal_site(sample_project: dict) -> None:
    config = load_config(sample_project["path"])
    output = sample_project["output"]

    report = build_site(config, output, base_dir=sample_project["project"])

    index_html = (output / "index.html").read_text(encoding="utf-8")
    cv_html = (output / "cv" / "index.html").read_text(encoding="utf-8")
    assert "<title>Jane Doe</title>" in index_html
    assert "#000" in index_html
    assert "<title>Jane Doe — Résumé</title>" in cv_html
    assert "Acme Corp" in cv_html
    assert "Staff Engineer" in cv_html
    assert report.pages_written == [output / "index.html", output / "cv" / "index.html"]


def test_static_assets_are_copied(sample_project: dict) -> None:
    config = load_config(sample_project["path"])
    output = sample_project["output"]

    report = build_site(config, output, base_dir=sample_project["project"])

    bundled_css = resources.files("sember").joinpath("assets", "css", "style.css").read_text(encoding="utf-8")
    assert (output / "css" / "style.css").read_text(encoding="utf-8") == bundled_css
    assert (output / "favicon.svg").exists()
    assert output / "css" / "style.css" in report.assets_copied


def test_build_is_idempotent(sample_project: dict) -> None:
    config = load_config(sample_project["path"])
    output = sample_project["output"]

    build_site(config, output, base_dir=sample_project["project"])
    first = _snapshot(output)
    build_site(config, output, base_dir=sample_project["project"])
    second = _snapshot(output)

    assert first == second
    assert "index.html" in first
    assert not any(name.endswith(".lock") for name in first)


def test_missing_photo_is_skipped(sample_project: dict) -> None:
    config = load_config(sample_project["path"])
    output = sample_project["output"]

    report = build_site(config, output, base_dir=sample_project["project"])

    assert report.photo_copied is None
    assert not (output / "img").exists()


def test_existing_photo_is_copied(sample_project: dict) -> None:
    photo = sample_project["project"] / "img" / "jane.jpg"
    photo.parent.mkdir()
    photo.write_bytes(b"\xff\xd8\xff\xe0fake-jpeg")
    config = load_config(sample_project["path"])
    output = sample_project["output"]

    report = build_site(config, output, base_dir=sample_project["project"])

    assert report.photo_copied == output / "img" / "jane.jpg"
    assert (output / "img" / "jane.jpg").read_bytes() == b"\xff\xd8\xff\xe0fake-jpeg"


def test_photo_outside_project_is_skipped(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    project = tmp_path / "project"
    project.mkdir()
    (tmp_path / "secret.jpg").write_bytes(b"secret")
    config = parse_config('[about]\nname = "Jane"\nphoto = "../secret.jpg"\n')
    caplog.set_level(logging.WARNING)

    assert copy_photo(config, tmp_path / "out", project) is None
    assert "outside the project directory" in caplog.text


def test_previous_output_is_replaced(sample_project: dict) -> None:
    output = sample_project["output"]
    (output / "old").mkdir(parents=True)
    (output / "old" / "stale.html").write_text("stale", encoding="utf-8")
    config = load_config(sample_project["path"])

    report = build_site(config, output, base_dir=sample_project["project"])

    assert report.previous_removed is True
    assert not (output / "old").exists()
    assert (output / "index.html").exists()


def test_refuses_to_replace_project_directory(sample_project: dict) -> None:
    config = load_config(sample_project["path"])

    with pytest.raises(BuildError):
        build_site(config, sample_project["project"], base_dir=sample_project["project"])

    assert sample_project["path"].exists()


def test_binary_assets_are_copied_byte_for_byte(tmp_path: Path) -> None:
    assets = tmp_path.resolve() / "assets"
    (assets / "fonts").mkdir(parents=True)
    (assets / "css").mkdir()
    font_bytes = bytes(range(256)) + b"\x00wOF2\xff\xfe"
    (assets / "fonts" / "inter.woff2").write_bytes(font_bytes)
    (assets / "fonts" / "inter.woff").write_bytes(font_bytes[::-1])
    (assets / "css" / "fonts.css").write_text("@font-face { font-family: Inter; }\n", encoding="utf-8")
    output = tmp_path.resolve() / "public"

    copied = copy_static_assets(output, assets)

    assert (output / "fonts" / "inter.woff2").read_bytes() == font_bytes
    assert (output / "fonts" / "inter.woff").read_bytes() == font_bytes[::-1]
    assert (output / "css" / "fonts.css").read_text(encoding="utf-8") == "@font-face { font-family: Inter; }\n"
    assert copied == [
        output / "css" / "fonts.css",
        output / "fonts" / "inter.woff",
        output / "fonts" / "inter.woff2",
    ]


def test_remove_tree_is_best_effort(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    target = tmp_path / "public"
    target.mkdir()

    def fail_rmtree(path, *args, **kwargs):
        raise PermissionError(f"permission denied: {path}")

    monkeypatch.setattr(filesystem.shutil, "rmtree", fail_rmtree)
    caplog.set_level(logging.WARNING)

    assert remove_tree(target) is False
    assert remove_tree(tmp_path / "missing") is False
    assert "Could not remove" in caplog.text


def test_write_failure_becomes_build_error(sample_project: dict, monkeypatch: pytest.MonkeyPatch) -> None:
    config = load_config(sample_project["path"])

    def fail_write(path, content, encoding="utf-8"):
        raise OSError("disk full")

    monkeypatch.setattr(builder, "write_text_file", fail_write)

    with pytest.raises(BuildError) as exc:
        build_site(config, sample_project["output"], base_dir=sample_project["project"])

    assert "disk full" in str(exc.value)
