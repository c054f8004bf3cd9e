import json

import pytest

from wps._config import get_settings
from wps.cli import build_parser, main


def test_extract_then_generate(project):
    main(["extract", "--root", str(project)])
    main(["generate", "--root", str(project), "--show"])

    assert (project / "snippets" / "Loading" / "TTFB.js").is_file()
    assert (project / "skills" / "webperf-loading" / "SKILL.md").is_file()
    assert (project / "skills" / "webperf" / "SKILL.md").is_file()


def test_extract_dry_run(project):
    main(["extract", "--root", str(project), "--dry-run"])

    assert not (project / "snippets").exists()


def test_generate_validation_failure_exits_1(project, tmp_path, capsys):
    config = tmp_path / "categories.json"
    config.write_text(json.dumps({
        "categories": [
            {"key": "Loading", "skill": "l" * 70, "name": "Loading", "description": "ok"},
        ],
    }), encoding="utf-8")
    main(["extract", "--root", str(project)])

    with pytest.raises(SystemExit) as exc:
        main(["generate", "--root", str(project), "-c", str(config)])

    assert exc.value.code == 1
    assert not (project / "skills").exists()
    assert "70" in capsys.readouterr().out


def test_missing_pages_exits_1(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["extract", "--root", str(tmp_path / "nowhere")])
    assert exc.value.code == 1


def test_install_locally(project):
    main(["extract", "--root", str(project)])
    main(["install", "--root", str(project)])

    assert (project / ".claude" / "skills" / "webperf-loading" / "SKILL.md").is_file()
    settings = json.loads((project / ".claude" / "settings.json").read_text(encoding="utf-8"))
    assert {"path": "./skills/webperf"} in settings["skills"]


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_settings_precedence(tmp_path, monkeypatch):
    monkeypatch.setenv("WPS_SKILLS_DIR", str(tmp_path / "env-skills"))

    settings = get_settings(root=tmp_path, snippets_dir=tmp_path / "out")

    assert settings.pages_dir == tmp_path / "pages"
    assert settings.snippets_dir == tmp_path / "out"
    assert settings.skills_dir == tmp_path / "env-skills"
    assert settings.categories_file is None
