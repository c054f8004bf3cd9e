import json

import pytest

from data_model import ConfigError
from manifest import DEFAULT_TOOLKIT, load_toolkit, toolkit_from_dict


def test_default_categories():
    keys = [c.key for c in DEFAULT_TOOLKIT.categories]

    assert keys == ["CoreWebVitals", "Loading", "Interaction", "Media", "Resources"]
    assert all(c.skill.startswith("webperf-") for c in DEFAULT_TOOLKIT.categories)
    assert load_toolkit(None) is DEFAULT_TOOLKIT


def test_minimal_config_keeps_toolkit_defaults():
    toolkit = toolkit_from_dict({
        "categories": [
            {"key": "Loading", "skill": "perf-loading", "name": "Loading", "description": "Load.",
             "triggers": [["TTFB", "slow"]]},
        ],
    })

    assert toolkit.skill == DEFAULT_TOOLKIT.skill
    assert toolkit.heading_prefix == "WebPerf"
    [category] = toolkit.categories
    assert category.triggers == (("TTFB", "slow"),)
    assert category.frontmatter() == {"name": "perf-loading", "description": "Load."}


def test_load_from_file(tmp_path):
    path = tmp_path / "categories.json"
    path.write_text(json.dumps({
        "toolkit": {"skill": "perf", "title": "Perf", "description": "All.", "heading_prefix": "Perf"},
        "categories": [{"key": "Media", "skill": "perf-media", "name": "Media", "description": "Img."}],
    }), encoding="utf-8")

    toolkit = load_toolkit(path)

    assert toolkit.skill == "perf"
    assert toolkit.heading_prefix == "Perf"
    assert toolkit.frontmatter_entries() == [
        ("perf-media", {"name": "perf-media", "description": "Img."}),
        ("perf", {"name": "perf", "description": "All."}),
    ]


def test_invalid_config_lists_problems():
    with pytest.raises(ConfigError) as exc:
        toolkit_from_dict({"categories": [{"key": "Media", "name": "Media", "description": "x", "extra": 1}]})

    message = str(exc.value)
    assert "skill" in message
    assert "extra" in message


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_malformed_file(tmp_path, content):
    path = tmp_path / "categories.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_toolkit(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_toolkit(tmp_path / "nope.json")
