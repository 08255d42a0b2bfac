import json

import blogbuild.main as main_module
from blogbuild.main import build_site, main, write_manifest
from blogbuild.settings import Settings
from tests.conftest import post_markdown


def write_content(root, files):
    for relative, text in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")


def make_settings(tmp_path, **overrides):
    return Settings(
        CONTENT_DIR=str(tmp_path / "content"),
        MANIFEST_PATH=str(tmp_path / "dist" / "routes.json"),
        **overrides,
    )


def test_build_site_reads_content_directory(tmp_path):
    write_content(
        tmp_path / "content",
        {
            "blog/a.md": post_markdown(title="A", pub_date="2024-01-01", tags="[rust]"),
            "blog/b.md": post_markdown(title="B", pub_date="2024-06-01", tags="[python]"),
        },
    )

    plan = build_site(make_settings(tmp_path))

    assert [p.slug for p in plan.posts] == ["b", "a"]
    assert plan.tags == ["python", "rust"]


def test_main_writes_manifest(tmp_path, monkeypatch):
    monkeypatch.setattr(main_module, "configure_logging", lambda s: None)
    write_content(
        tmp_path / "content",
        {
            "blog/hello.md": post_markdown(title="Hello", tags="[python]"),
            "code/gist.md": post_markdown(
                title="Gist", pub_date="2023-01-01", extra="url: https://example.com/g"
            ),
        },
    )
    settings = make_settings(tmp_path)

    assert main(settings) == 0

    rows = json.loads((tmp_path / "dist" / "routes.json").read_text(encoding="utf-8"))
    assert rows == [
        {
            "path": "/hello/",
            "kind": "post",
            "title": "Hello",
            "source": "blog/hello.md",
            "external": False,
            "posts": [],
        },
        {
            "path": "https://example.com/g",
            "kind": "post",
            "title": "Gist",
            "source": "code/gist.md",
            "external": True,
            "posts": [],
        },
        {
            "path": "/tags/python/",
            "kind": "tag",
            "title": "python",
            "source": None,
            "external": False,
            "posts": ["blog/hello.md"],
        },
    ]


def test_main_returns_error_code_on_build_error(tmp_path, monkeypatch):
    monkeypatch.setattr(main_module, "configure_logging", lambda s: None)
    write_content(tmp_path / "content", {"blog/bad.md": "---\ntitle: Bad\n---\nbody\n"})
    settings = make_settings(tmp_path)

    assert main(settings) == 1
    assert not (tmp_path / "dist" / "routes.json").exists()


def test_main_returns_error_code_on_non_utf8_file(tmp_path, monkeypatch):
    monkeypatch.setattr(main_module, "configure_logging", lambda s: None)
    bad = tmp_path / "content" / "blog" / "bad.md"
    bad.parent.mkdir(parents=True)
    bad.write_bytes(b"---\ntitle: caf\xe9\n---\nbody\n")
    settings = make_settings(tmp_path)

    assert main(settings) == 1
    assert not (tmp_path / "dist" / "routes.json").exists()


def test_write_manifest_creates_parent_directories(tmp_path):
    plan = build_site(make_settings(tmp_path))
    target = tmp_path / "nested" / "deeper" / "routes.json"

    write_manifest(plan, target)

    assert json.loads(target.read_text(encoding="utf-8")) == []
