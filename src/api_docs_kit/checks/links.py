"""Internal link validation for the documentation content tree."""

import re
from pathlib import Path

import click
from pydantic import BaseModel

from api_docs_kit.config import DocsConfig

LINK_PATTERNS = (
    re.compile(r"\[([^\]]+)\]\(([^)]+)\)"),  # [text](url)
    re.compile(r'href="([^"]+)"'),
    re.compile(r"href='([^']+)'"),
)

# Anything with a URI scheme (http:, https:, mailto:, tel:, ...) is external.
EXTERNAL_LINK = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")

INDEX_NAMES = ("index.mdx", "index.md")
SUFFIXES = (".mdx", ".md")


class BrokenLink(BaseModel):
    file: str
    link: str
    reason: str = "Link target not found"


class LinkReport(BaseModel):
    files_checked: int = 0
    links_checked: int = 0
    broken: list[BrokenLink] = []

    @property
    def ok(self) -> bool:
        return not self.broken


def find_content_files(root: Path, folders: list[str], extension: str = ".mdx") -> list[Path]:
    """Content files under *folders*, relative to *root*. Missing folders are skipped."""
    files = []
    for folder in folders:
        base = root / folder
        if not base.is_dir():
            continue
        files.extend(p.relative_to(root) for p in base.rglob(f"*{extension}") if p.is_file())
    return sorted(files)


def extract_links(text: str) -> list[str]:
    """Internal link targets found in a content file, in pattern order."""
    links = []
    for pattern in LINK_PATTERNS:
        for match in pattern.finditer(text):
            url = match.group(match.re.groups).strip()
            # [text](path "title")
            url = url.split()[0] if url else url
            if not url or url.startswith("#") or EXTERNAL_LINK.match(url):
                continue
            links.append(url)
    return links


def resolve_link(link: str, from_file: Path, root: Path) -> Path | None:
    """The file a link points at, or None when no candidate exists.

    *from_file* is relative to *root*. Anchor-only links also give None;
    callers skip those before resolving.
    """
    target = link.split("#", 1)[0]
    if not target:
        return None

    if target.startswith(("./", "../")):
        base = root / from_file.parent / target
    else:
        base = root / target.lstrip("/")

    candidates = [
        base,
        *(Path(f"{base}{suffix}") for suffix in SUFFIXES),
        *(base / name for name in INDEX_NAMES),
    ]
    for candidate in candidates:
        if candidate.is_file():
            return candidate.resolve()
    return None


def check_file(root: Path, file: Path) -> tuple[int, list[BrokenLink]]:
    """Check every internal link of one content file."""
    text = (root / file).read_text(encoding="utf-8", errors="replace")
    broken = []
    checked = 0
    for link in extract_links(text):
        if not link.split("#", 1)[0]:
            continue
        checked += 1
        if resolve_link(link, file, root) is None:
            broken.append(BrokenLink(file=file.as_posix(), link=link))
    return checked, broken


def validate_links(config: DocsConfig) -> LinkReport:
    """Walk the content folders and collect every unresolvable link."""
    root = config.root
    click.echo("Validating documentation links...")

    files = find_content_files(root, config.content_folders, config.content_extension)
    click.echo(f"Found {len(files)} {config.content_extension} files")

    report = LinkReport(files_checked=len(files))
    for file in files:
        checked, broken = check_file(root, file)
        report.links_checked += checked
        report.broken.extend(broken)

    click.echo(f"Checked {report.links_checked} internal links")
    return report
