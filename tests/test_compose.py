import json
import logging

import pytest

from blogcraft.compose import log, main

POST = """---
title: Launch Day
tags: news, launch
---
We **shipped** it.
"""


@pytest.fixture()
def post(tmp_path):
    path = tmp_path / "post.md"
    path.write_text(POST, encoding="utf-8")
    return path


def test_slug_command(capsys):
    main(["slug", "Hello, World!"])
    assert capsys.readouterr().out == "hello-world\n"


def test_stats_command(post, capsys):
    main(["stats", str(post)])
    assert "post.md" in capsys.readouterr().out


def test_preview_command(post, tmp_path):
    out = tmp_path / "out.html"
    main(["preview", str(post), "--out", str(out)])
    page = out.read_text(encoding="utf-8")
    assert "<h1>Launch Day</h1>" in page
    assert "<strong>shipped</strong>" in page


def test_preview_many_posts_into_folder(post, tmp_path):
    second = tmp_path / "second.md"
    second.write_text("plain", encoding="utf-8")
    out_dir = tmp_path / "site"
    main(["preview", str(post), str(second), "--out", str(out_dir)])
    assert (out_dir / "post.html").exists()
    assert (out_dir / "second.html").exists()


def test_record_command(post, tmp_path):
    image = tmp_path / "hero.png"
    image.write_bytes(b"\x89PNG")
    out = tmp_path / "record.json"
    main(["record", str(post), "--publish", "--image", str(image),
          "--video", "https://youtu.be/abc", "--out", str(out)])

    record = json.loads(out.read_text(encoding="utf-8"))
    assert record["slug"] == "launch-day"
    assert record["tags"] == ["news", "launch"]
    assert "![hero.png](data:image/png;base64,iVBORw==)" in record["body"]
    assert record["body"].endswith("\n[video](https://youtu.be/abc)\n")
    assert "publishedAt" in record


def test_format_command_keeps_front_matter(post):
    main(["format", str(post), "--start", "3", "--end", "14", "--as", "italic"])
    text = post.read_text(encoding="utf-8")
    assert text.startswith("---\ntitle: Launch Day\n")
    assert text.endswith("We *" + "**shipped**" + "* it.\n")


def test_missing_file_exits_with_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["stats", str(tmp_path / "missing.md")])
    assert excinfo.value.code == 1
    assert "Error" in capsys.readouterr().err


def test_unquoted_colour_in_style_file_exits_with_error(post, tmp_path, capsys):
    style = tmp_path / "style.yaml"
    style.write_text("text_color: #1f2937\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["preview", str(post), "--style", str(style)])
    assert excinfo.value.code == 1
    assert "text_color" in capsys.readouterr().err
    assert not post.with_suffix(".html").exists()


def test_verbose_flag_switches_loggers_to_debug(capsys):
    try:
        main(["--verbose", "slug", "A B"])
        assert log.level == logging.DEBUG
    finally:
        main(["slug", "A B"])
    assert capsys.readouterr().out == "a-b\na-b\n"


def test_preview_defaults_next_to_the_post(post):
    main(["preview", str(post)])
    assert "<h1>Launch Day</h1>" in post.with_suffix(".html").read_text(encoding="utf-8")
