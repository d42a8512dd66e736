"""Unit tests for the command plumbing: StageResult, schema registry and output validation."""

from collections.abc import Iterator

import pytest
from pydantic import BaseModel

from tests.conftest import run_cmd
from wlc.api.config.cmd_show import cmd_show
from wlc.api.config.cmd_version import cmd_version
from wlc.api.schema_registry import SchemaRegistry, schema_registry
from wlc.api.StageResult import StageResult
from wlc.api.validate_output import validate_output


class MockOutput(BaseModel):
    key: str
    optional: str = "default"


def mock_cmd_func():
    pass


mock_cmd_func.__module__ = "wlc.api.test_domain"
mock_cmd_func.__name__ = "cmd_mock_command"


def test_stage_result_initialization():
    def progress_gen(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (1.0, "Complete")
        result.result = "Done"
        result.output = {"test": True}
        result.success = True

    result = StageResult(announce="Testing", progress_callback=progress_gen)
    assert result.result == ""
    assert result.output == {}
    assert result.success is False

    progress = list(result.progress_callback(result))
    assert progress == [(1.0, "Complete")]
    assert result.success is True


def test_schema_registry_rejects_duplicates():
    registry = SchemaRegistry()
    registry.register_output_schema("d", "c", MockOutput)
    assert registry.get_output_schema("d", "c") is MockOutput
    assert registry.get_output_schema("d", "missing") is None
    with pytest.raises(ValueError, match="already registered"):
        registry.register_output_schema("d", "c", MockOutput)


def test_links_schemas_registered():
    validate_output(mock_cmd_func, {"key": "x"})
    for command in ("scan", "clean", "clean_file", "show", "orphans", "empty"):
        assert schema_registry.get_output_schema("links", command) is not None


def test_validate_output_success(monkeypatch):
    monkeypatch.setattr(schema_registry, "get_output_schema", lambda d, c: MockOutput)

    assert validate_output(mock_cmd_func, {"key": "value"}) == {"key": "value", "optional": "default"}


def test_validate_output_failure(monkeypatch):
    monkeypatch.setattr(schema_registry, "get_output_schema", lambda d, c: MockOutput)

    with pytest.raises(ValueError, match="Output validation failed"):
        validate_output(mock_cmd_func, {"wrong": "value"})


def test_validate_output_skips_non_commands():
    def helper():
        pass

    assert validate_output(helper, {"anything": 1}) == {"anything": 1}


@pytest.mark.config
def test_cmd_version(monkeypatch):
    monkeypatch.setattr("wlc.api.config.cmd_version.get_package_version", lambda: "0.3.0")

    result = run_cmd(cmd_version)

    assert result.success is True
    assert result.output["version"] == "0.3.0"
    assert validate_output(cmd_version, result.output) == result.output


@pytest.mark.config
def test_cmd_show_lists_sections(wlc_home):
    result = run_cmd(cmd_show)

    assert result.success is True
    assert result.output["content"] == {"sections": ["vault", "links", "log"]}


@pytest.mark.config
def test_cmd_show_section(wlc_home):
    result = run_cmd(cmd_show, "links")

    assert result.success is True
    assert result.output["content"] == {"broken_links_file": "broken links output.md", "delete_text": False}


@pytest.mark.config
def test_cmd_show_unknown_section(wlc_home):
    result = run_cmd(cmd_show, "nope")

    assert result.success is False
    assert result.output["errors"] == ["Unknown section: nope"]
