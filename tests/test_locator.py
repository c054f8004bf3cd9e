from pathlib import Path

from data_model import Document, DocumentScope
from mdx import extract_blocks, plan_artifacts, rewrite_document
from miner import category_documents, classify_scope, find_document_for_artifact, import_bindings, locate_import


def _rewritten(text: str, basename: str, category: str = "Loading") -> str:
    doc = Document(path=Path(f"{basename}.mdx"), text=text, category=category, basename=basename)
    blocks = extract_blocks(text)
    return rewrite_document(text, category, plan_artifacts(doc, blocks), blocks)


def test_first_and_second_identifier(ttfb_mdx):
    docs = [(Path("TTFB.mdx"), _rewritten(ttfb_mdx, "TTFB"))]

    first = locate_import("TTFB.js", docs)
    second = locate_import("TTFB-Sub-Parts.js", docs)

    assert first.identifier == "snippet"
    assert second.identifier == "snippet2"
    assert first.path == Path("TTFB.mdx")


def test_filename_must_match_exactly(shared_mdx):
    docs = [(Path("Resource-Audit.mdx"), _rewritten(shared_mdx, "Resource-Audit"))]

    assert locate_import("Resource-Audit.js", docs).identifier == "snippet"
    assert locate_import("Resource-Audit-Scripts.js", docs).identifier == "snippet2"
    assert locate_import("Audit.js", docs) is None


def test_not_found_is_none_not_error():
    docs = [(Path("a.mdx"), "# A\n\nno imports\n")]
    assert locate_import("Missing.js", docs) is None
    assert locate_import("Missing.js", []) is None


def test_first_match_in_given_order_wins():
    line = "import snippet3 from '../../snippets/Loading/Dup.js?raw'\n"
    other = "import snippet from '../../snippets/Loading/Dup.js?raw'\n"
    docs = [(Path("a.mdx"), line), (Path("b.mdx"), other)]

    assert locate_import("Dup.js", docs).path == Path("a.mdx")
    assert locate_import("Dup.js", list(reversed(docs))).path == Path("b.mdx")


def test_scope_classification(ttfb_mdx):
    single = "import snippet from '../../snippets/Loading/A.js?raw'\n\n# A\n"

    assert classify_scope(single) is DocumentScope.SINGLE
    assert classify_scope(_rewritten(ttfb_mdx, "TTFB")) is DocumentScope.SHARED
    assert classify_scope("# no imports\n") is DocumentScope.SINGLE


def test_category_documents_sorted_and_flat(tmp_path):
    cat = tmp_path / "Media"
    (cat / "nested").mkdir(parents=True)
    (cat / "b.mdx").write_text("b", encoding="utf-8")
    (cat / "a.mdx").write_text("a", encoding="utf-8")
    (cat / "notes.md").write_text("x", encoding="utf-8")
    (cat / "nested" / "c.mdx").write_text("c", encoding="utf-8")

    docs = category_documents(tmp_path, "Media")

    assert [p.name for p, _ in docs] == ["a.mdx", "b.mdx"]
    assert category_documents(tmp_path, "Missing") == []


def test_find_document_for_artifact(tmp_path, shared_mdx):
    cat = tmp_path / "Loading"
    cat.mkdir()
    (cat / "Resource-Audit.mdx").write_text(_rewritten(shared_mdx, "Resource-Audit"), encoding="utf-8")

    located = find_document_for_artifact(tmp_path, "Loading", "Resource-Audit-Scripts.js")

    assert located.identifier == "snippet2"
    assert located.scope is DocumentScope.SHARED
    assert find_document_for_artifact(tmp_path, "Loading", "Orphan.js") is None


def test_import_bindings(shared_mdx):
    assert import_bindings(_rewritten(shared_mdx, "Resource-Audit")) == {
        "Resource-Audit.js": "snippet",
        "Resource-Audit-Scripts.js": "snippet2",
    }
    assert import_bindings(_rewritten("### Snippet\n\n```js copy\nx()\n```\n", "index", ".")) == {"index.js": "snippet"}
