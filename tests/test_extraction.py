import pytest

from data_model import ConfigError, PipelineIOError
from wps.extraction import DocumentStatus, extract_all, load_document, process_document


def _snapshot(root):
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


def test_extracts_and_rewrites_documents(project):
    pages, snippets = project / "pages", project / "snippets"

    report = extract_all(pages, snippets)

    assert [d.path.name for d in report.documents] == ["Resource-Audit.mdx", "TTFB.mdx", "index.mdx"]
    assert [d.status for d in report.documents] == [
        DocumentStatus.UPDATED,
        DocumentStatus.UPDATED,
        DocumentStatus.NO_BLOCKS,
    ]
    assert sorted(p.name for p in (snippets / "Loading").iterdir()) == [
        "Resource-Audit-Scripts.js",
        "Resource-Audit.js",
        "TTFB-Sub-Parts.js",
        "TTFB.js",
    ]
    assert (snippets / "Loading" / "Resource-Audit.js").read_text(encoding="utf-8") == "console.log('fonts')\n"

    ttfb = (pages / "Loading" / "TTFB.mdx").read_text(encoding="utf-8")
    assert ttfb.startswith("import snippet from '../../snippets/Loading/TTFB.js?raw'\n")
    assert "<Snippet code={snippet2} />" in ttfb
    assert "```js copy" not in ttfb


def test_document_without_blocks_is_untouched(project):
    index = project / "pages" / "index.mdx"
    before = index.read_bytes()

    extract_all(project / "pages", project / "snippets")

    assert index.read_bytes() == before


def test_second_run_changes_nothing(project):
    pages, snippets = project / "pages", project / "snippets"
    extract_all(pages, snippets)
    before = _snapshot(project)

    report = extract_all(pages, snippets)

    assert report.artifacts == []
    assert [d.status for d in report.documents] == [
        DocumentStatus.REWRITTEN,
        DocumentStatus.REWRITTEN,
        DocumentStatus.NO_BLOCKS,
    ]
    assert _snapshot(project) == before


def test_dry_run_writes_nothing(project):
    before = _snapshot(project)

    report = extract_all(project / "pages", project / "snippets", dry_run=True)

    assert len(report.artifacts) == 4
    assert len(report.with_status(DocumentStatus.PLANNED)) == 2
    assert not (project / "snippets").exists()
    assert _snapshot(project) == before


def test_root_document_artifacts_go_to_snippets_root(tmp_path):
    pages = tmp_path / "pages"
    pages.mkdir()
    (pages / "index.mdx").write_text("# Home\n\n### Snippet\n\n```js copy\nhome()\n```\n", encoding="utf-8")

    report = extract_all(pages, tmp_path / "snippets")

    [artifact] = report.artifacts
    assert artifact.category == "."
    assert (tmp_path / "snippets" / "index.js").read_text(encoding="utf-8") == "home()\n"
    assert (pages / "index.mdx").read_text(encoding="utf-8").startswith(
        "import snippet from '../snippets/index.js?raw'\n"
    )


def test_new_block_in_rewritten_document_is_reported(project):
    pages, snippets = project / "pages", project / "snippets"
    extract_all(pages, snippets)
    path = pages / "Loading" / "TTFB.mdx"
    path.write_text(
        path.read_text(encoding="utf-8") + "\n### Snippet\n\n```js copy\nlate()\n```\n",
        encoding="utf-8",
    )

    result = process_document(load_document(pages, path), snippets)

    assert result.status == DocumentStatus.REWRITTEN
    assert result.pending_blocks == 1
    assert result.artifacts == []


def test_missing_pages_dir(tmp_path):
    with pytest.raises(ConfigError):
        extract_all(tmp_path / "pages", tmp_path / "snippets")


def test_unwritable_snippets_dir_aborts_batch(project):
    (project / "snippets").write_text("not a directory", encoding="utf-8")

    with pytest.raises(PipelineIOError):
        extract_all(project / "pages", project / "snippets")

    assert "```js copy" in (project / "pages" / "Loading" / "Resource-Audit.mdx").read_text(encoding="utf-8")
