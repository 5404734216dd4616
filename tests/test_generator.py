"""Tests for CommandGenerator — argv templating and subprocess failures."""

import sys

import pytest

from mdl_render.exceptions import ConfigError, GenerationError
from mdl_render.views import load_views
from mdl_render.views.generator import CommandGenerator


WRITE_VIEW_SCRIPT = (
    "import json, pathlib, sys; "
    "pathlib.Path(sys.argv[2], 'view.json').write_text("
    "json.dumps({'Key': 'Generated', 'Title': sys.argv[1]}))"
)


def test_build_argv_substitutes_placeholders(tmp_path):
    generator = CommandGenerator("mdl gen {package} --out {out}", debug_flag="--debug")

    argv = generator.build_argv("example.com/design", tmp_path, debug=False)

    assert argv == ["mdl", "gen", "example.com/design", "--out", str(tmp_path)]


def test_build_argv_appends_debug_flag(tmp_path):
    generator = CommandGenerator(["gen", "{package}"], debug_flag="-v")

    assert generator.build_argv("pkg", tmp_path, debug=True) == ["gen", "pkg", "-v"]
    assert generator.build_argv("pkg", tmp_path, debug=False) == ["gen", "pkg"]


def test_command_output_is_loaded(tmp_path):
    out_dir = tmp_path / "out"
    generator = CommandGenerator([sys.executable, "-c", WRITE_VIEW_SCRIPT, "{package}", "{out}"])

    views = load_views("example.com/design", out_dir, generator=generator)

    assert list(views) == ["Generated"]
    assert views["Generated"].title == "example.com/design"


def test_nonzero_exit_raises_with_stderr(tmp_path):
    script = "import sys; sys.stderr.write('no such package'); sys.exit(3)"
    generator = CommandGenerator([sys.executable, "-c", script])

    with pytest.raises(GenerationError) as exc_info:
        generator("pkg", tmp_path, debug=False)

    assert "exit code 3" in exc_info.value.message
    assert exc_info.value.stderr == "no such package"


def test_missing_executable_raises(tmp_path):
    generator = CommandGenerator(["mdl-render-no-such-command-xyz"])

    with pytest.raises(GenerationError, match="not found"):
        generator("pkg", tmp_path, debug=False)


def test_timeout_raises(tmp_path):
    generator = CommandGenerator([sys.executable, "-c", "import time; time.sleep(5)"], timeout=0.2)

    with pytest.raises(GenerationError, match="timed out"):
        generator("pkg", tmp_path, debug=False)


def test_empty_command_raises(tmp_path):
    with pytest.raises(GenerationError):
        CommandGenerator("")("pkg", tmp_path, debug=False)


def test_timeout_defaults_from_environment(monkeypatch):
    monkeypatch.setenv("MDL_GEN_TIMEOUT", "7")
    assert CommandGenerator(["gen"]).timeout == 7.0


def test_malformed_timeout_in_environment_raises_config_error(monkeypatch):
    monkeypatch.setenv("MDL_GEN_TIMEOUT", "never")

    with pytest.raises(ConfigError):
        CommandGenerator(["gen"])
