from pathlib import Path

from api_docs_kit.checks.links import (
    extract_links,
    find_content_files,
    resolve_link,
    validate_links,
)
from api_docs_kit.config import DocsConfig

INTRO = """# Intro

See [setup](../guides/setup) and [home](/docs/index).
Jump to [the top](#top) or visit [our site](https://example.com).
<a href="mailto:team@example.com">Mail us</a>
<a href='./other#section'>Other</a>
"""


def _make_tree(root: Path) -> None:
    (root / "docs").mkdir()
    (root / "docs" / "intro.mdx").write_text(INTRO, encoding="utf-8")
    (root / "docs" / "index.mdx").write_text("# Home\n", encoding="utf-8")
    (root / "docs" / "other.md").write_text("# Other\n", encoding="utf-8")


class TestExtractLinks:
    def test_patterns_and_skips(self):
        assert extract_links(INTRO) == ["../guides/setup", "/docs/index", "./other#section"]

    def test_markdown_link_title_dropped(self):
        assert extract_links('[Guide](guide "The guide")') == ["guide"]

    def test_other_schemes_are_external(self):
        assert extract_links('[a](http://x.io) [b](tel:123) <a href="ftp://f">f</a>') == []


class TestFindContentFiles:
    def test_walks_configured_folders(self, tmp_path):
        _make_tree(tmp_path)
        (tmp_path / "resources" / "deep").mkdir(parents=True)
        (tmp_path / "resources" / "deep" / "faq.mdx").write_text("faq")
        (tmp_path / "blog").mkdir()
        (tmp_path / "blog" / "post.mdx").write_text("post")

        files = find_content_files(tmp_path, ["docs", "api-reference", "resources"])

        assert files == [
            Path("docs/index.mdx"),
            Path("docs/intro.mdx"),
            Path("resources/deep/faq.mdx"),
        ]


class TestResolveLink:
    def test_relative_missing(self, tmp_path):
        _make_tree(tmp_path)
        assert resolve_link("../guides/setup", Path("docs/intro.mdx"), tmp_path) is None

    def test_absolute_from_root_with_extension(self, tmp_path):
        _make_tree(tmp_path)
        resolved = resolve_link("/docs/index", Path("docs/intro.mdx"), tmp_path)
        assert resolved == (tmp_path / "docs" / "index.mdx").resolve()

    def test_relative_with_fragment_and_md(self, tmp_path):
        _make_tree(tmp_path)
        resolved = resolve_link("./other#section", Path("docs/intro.mdx"), tmp_path)
        assert resolved == (tmp_path / "docs" / "other.md").resolve()

    def test_bare_path_is_root_relative(self, tmp_path):
        _make_tree(tmp_path)
        assert resolve_link("docs/other", Path("docs/intro.mdx"), tmp_path) is not None

    def test_directory_index(self, tmp_path):
        (tmp_path / "guides" / "setup").mkdir(parents=True)
        (tmp_path / "guides" / "setup" / "index.md").write_text("setup")
        resolved = resolve_link("../guides/setup", Path("docs/intro.mdx"), tmp_path)
        assert resolved == (tmp_path / "guides" / "setup" / "index.md").resolve()

    def test_directory_without_index(self, tmp_path):
        (tmp_path / "guides" / "setup").mkdir(parents=True)
        assert resolve_link("/guides/setup", Path("docs/intro.mdx"), tmp_path) is None

    def test_anchor_only(self, tmp_path):
        assert resolve_link("#top", Path("docs/intro.mdx"), tmp_path) is None


class TestValidateLinks:
    def test_reports_single_broken_link(self, tmp_path):
        _make_tree(tmp_path)
        report = validate_links(DocsConfig(root=tmp_path))

        assert report.files_checked == 2
        assert report.links_checked == 3
        assert not report.ok
        assert len(report.broken) == 1
        broken = report.broken[0]
        assert broken.file == "docs/intro.mdx"
        assert broken.link == "../guides/setup"
        assert broken.reason == "Link target not found"

    def test_all_valid(self, tmp_path):
        _make_tree(tmp_path)
        (tmp_path / "guides").mkdir()
        (tmp_path / "guides" / "setup.mdx").write_text("setup")
        report = validate_links(DocsConfig(root=tmp_path))
        assert report.ok

    def test_invalid_utf8_file_is_still_checked(self, tmp_path):
        (tmp_path / "docs").mkdir()
        (tmp_path / "docs" / "a.mdx").write_bytes(b"caf\xe9 [x](./missing)\n")
        (tmp_path / "docs" / "b.mdx").write_text("[y](./gone)\n", encoding="utf-8")

        report = validate_links(DocsConfig(root=tmp_path))

        assert report.files_checked == 2
        assert [(b.file, b.link) for b in report.broken] == [
            ("docs/a.mdx", "./missing"),
            ("docs/b.mdx", "./gone"),
        ]

    def test_empty_tree(self, tmp_path):
        report = validate_links(DocsConfig(root=tmp_path))
        assert report.files_checked == 0
        assert report.ok
