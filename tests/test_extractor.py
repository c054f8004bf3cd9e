from mdx import LineIndex, extract_blocks


def test_blocks_and_heading_context(ttfb_mdx):
    blocks = extract_blocks(ttfb_mdx)

    assert len(blocks) == 2
    assert blocks[0].heading is None
    assert blocks[1].heading == "Measure TTFB sub-parts"
    assert blocks[1].code == "console.table(performance.getEntriesByType('navigation'))"
    assert blocks[0].code.startswith("new PerformanceObserver")
    assert blocks[0].code.endswith("buffered: true })")


def test_block_span_covers_both_fences(ttfb_mdx):
    block = extract_blocks(ttfb_mdx)[1]
    span = ttfb_mdx[block.start:block.end]

    assert span.startswith("```js copy\n")
    assert span.endswith("\n```")
    assert block.code in span


def test_heading_without_fence_yields_nothing():
    text = "# T\n\n### Snippet\n\nNo code here.\n\n```bash\nls\n```\n"
    assert extract_blocks(text) == []


def test_document_without_markers_is_empty():
    assert extract_blocks("# Plain\n\n```js copy\nx()\n```\n") == []
    assert extract_blocks("") == []


def test_fence_after_next_marker_belongs_to_next_heading():
    text = (
        "### Snippet\n\nnothing\n\n"
        "### Snippet\n\n```js copy\nsecond()\n```\n"
    )
    blocks = extract_blocks(text)

    assert [b.code for b in blocks] == ["second()"]


def test_marker_must_be_the_whole_line():
    text = "### Snippets\n\n```js copy\na()\n```\n\n#### Snippet\n\n```js copy\nb()\n```\n"
    assert extract_blocks(text) == []


def test_line_index_heading_lookups():
    text = "# Title\n\n## A\n\ntext\n\n## B\n\nmore\n"
    index = LineIndex(text)
    pos_more = text.index("more")

    assert index.first(level=1).text == "Title"
    assert index.preceding(pos_more, level=2).text == "B"
    assert index.following(text.index("## A"), level=2).text == "B"
    assert index.following(pos_more, level=2) is None
    assert index.preceding(0, level=2) is None
