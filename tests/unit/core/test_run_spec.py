"""Unit tests for query-spec parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import RunSpecError
from core.run_spec import load_query_spec
from tests.fixture_paths import fixture_path


def test_load_query_spec_valid_parses_steps() -> None:
    """Valid query spec should parse commands, defaults and args."""
    spec = load_query_spec(str(fixture_path("query_spec/valid_queries.yaml")))

    assert tuple(step.command for step in spec.steps) == ("top", "years-active", "names-in-year")
    assert spec.defaults.dataset_path == "tests/fixtures/games/valid.csv"
    assert spec.steps[2].args == {"year": 2008}


def test_load_query_spec_invalid_command_raises_error() -> None:
    """Unsupported command name should raise a query-spec error."""
    with pytest.raises(RunSpecError, match="recommend"):
        load_query_spec(str(fixture_path("query_spec/invalid_command.yaml")))


def test_load_query_spec_invalid_defaults_key_raises_error() -> None:
    """Unknown defaults field should be rejected."""
    with pytest.raises(RunSpecError, match="delimiter"):
        load_query_spec(str(fixture_path("query_spec/invalid_defaults_key.yaml")))


def test_load_query_spec_mixed_args_raises_error() -> None:
    """Inline keys next to 'args' should be rejected."""
    with pytest.raises(RunSpecError):
        load_query_spec(str(fixture_path("query_spec/mixed_args.yaml")))


def test_load_query_spec_missing_file_raises_error(tmp_path: Path) -> None:
    """A missing spec file should raise a query-spec error."""
    with pytest.raises(RunSpecError):
        load_query_spec(str(tmp_path / "missing.yaml"))


@pytest.mark.parametrize(
    "content",
    [
        "",
        "version: 2\nsteps:\n  - command: all\n",
        "version: '1'\nsteps:\n  - command: all\n",
        "version: 1\n",
        "version: 1\nsteps: []\n",
        "version: 1\nsteps:\n  - all\n",
        "version: 1\nextra: true\nsteps:\n  - command: all\n",
        "version: 1\nsteps: [\n",
    ],
)
def test_load_query_spec_rejects_invalid_documents(tmp_path: Path, content: str) -> None:
    """Schema violations and YAML syntax errors should raise query-spec errors."""
    spec_file = tmp_path / "spec.yaml"
    spec_file.write_text(content, encoding="utf-8")

    with pytest.raises(RunSpecError):
        load_query_spec(str(spec_file))
