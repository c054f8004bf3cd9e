import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


TTFB_MDX = """\
# Time To First Byte

Measure the time to first byte, from the [navigation](https://example.com) start.

### Snippet

```js copy
new PerformanceObserver((list) => {
  console.log(list.getEntries()[0].responseStart)
}).observe({ type: 'navigation', buffered: true })
```

**Thresholds:**

| Rating | Value |
|--------|-------|
| 🟢 Good | < 800ms |
| 🔴 Poor | > 1800ms |

## Measure TTFB sub-parts

Breaks `TTFB` down into **DNS**, connection and request time.

### Snippet

```js copy
console.table(performance.getEntriesByType('navigation'))
```
"""


SHARED_MDX = """\
# Resource Audit

Intro text that belongs to the whole page.

## Check fonts

Lists every font file loaded by the page.

### Snippet

```js copy
console.log('fonts')
```

## Check scripts

### Snippet

```js copy
console.log('scripts')
```

Trailing prose after the scripts block.
"""


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Minimal project: pages/Loading/{TTFB,Resource-Audit}.mdx + pages/index.mdx."""
    pages = tmp_path / "pages"
    (pages / "Loading").mkdir(parents=True)
    (pages / "Loading" / "TTFB.mdx").write_text(TTFB_MDX, encoding="utf-8")
    (pages / "Loading" / "Resource-Audit.mdx").write_text(SHARED_MDX, encoding="utf-8")
    (pages / "index.mdx").write_text("# Home\n\nNo snippets here.\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def ttfb_mdx() -> str:
    return TTFB_MDX


@pytest.fixture
def shared_mdx() -> str:
    return SHARED_MDX


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Zmienne WPS_* z otoczenia nie mogą wpływać na testy."""
    for name in ("WPS_ROOT", "WPS_PAGES_DIR", "WPS_SNIPPETS_DIR", "WPS_SKILLS_DIR", "WPS_CATEGORIES"):
        monkeypatch.delenv(name, raising=False)
