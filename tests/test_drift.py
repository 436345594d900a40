import json
from pathlib import Path

import pytest

from api_docs_kit.checks.drift import check_drift, normalize_json
from api_docs_kit.config import DocsConfig
from api_docs_kit.errors import DriftDetected, SourceUnavailable, SpecFileNotFound

SPEC = {"openapi": "3.0.3", "paths": {"/widgets": {"get": {"operationId": "getAllWidgets"}}}}


def _setup(tmp_path, source: str | None, target: str | None) -> DocsConfig:
    config = DocsConfig(
        root=tmp_path,
        source_path=tmp_path / "upstream.json",
        target_path=Path("openapi/spec.json"),
    )
    if source is not None:
        config.source_file.write_text(source, encoding="utf-8")
    if target is not None:
        config.target_file.parent.mkdir(parents=True, exist_ok=True)
        config.target_file.write_text(target, encoding="utf-8")
    return config


class TestNormalizeJson:
    def test_idempotent(self):
        text = json.dumps(SPEC, indent=4)
        once = normalize_json(text)
        assert normalize_json(once) == once

    def test_whitespace_is_ignored(self):
        assert normalize_json(json.dumps(SPEC, indent=2)) == normalize_json(json.dumps(SPEC))

    def test_compact_output(self):
        assert normalize_json('{ "a" : [1, 2] }') == '{"a":[1,2]}'

    def test_key_order_matters(self):
        assert normalize_json('{"a": 1, "b": 2}') != normalize_json('{"b": 2, "a": 1}')

    def test_numbers_compare_by_value(self):
        assert normalize_json('{"v": 1.0}') == normalize_json('{"v": 1}') == '{"v":1}'
        assert normalize_json('{"v": 1e2}') == '{"v":100}'
        assert normalize_json('{"v": 1.5}') == '{"v":1.5}'
        assert normalize_json('{"v": 1.5}') != normalize_json('{"v": 2}')

    def test_unicode_kept(self):
        assert normalize_json('{"t": "caf\\u00e9"}') == '{"t":"café"}'


class TestCheckDrift:
    def test_in_sync_despite_formatting(self, tmp_path, capsys):
        config = _setup(tmp_path, json.dumps(SPEC), json.dumps(SPEC, indent=2))
        check_drift(config)
        assert "OpenAPI spec is in sync." in capsys.readouterr().out

    def test_value_change_is_drift(self, tmp_path):
        changed = json.loads(json.dumps(SPEC))
        changed["paths"]["/widgets"]["get"]["operationId"] = "listWidgets"
        config = _setup(tmp_path, json.dumps(SPEC), json.dumps(changed))

        with pytest.raises(DriftDetected) as exc:
            check_drift(config)
        assert "api-docs-kit sync" in str(exc.value)

    def test_integral_float_is_not_drift(self, tmp_path, capsys):
        config = _setup(tmp_path, '{"minimum": 1.0}', '{"minimum": 1}')
        check_drift(config)
        assert "OpenAPI spec is in sync." in capsys.readouterr().out

    def test_key_order_change_is_drift(self, tmp_path):
        config = _setup(tmp_path, '{"a": 1, "b": 2}', '{"b": 2, "a": 1}')
        with pytest.raises(DriftDetected):
            check_drift(config)

    def test_missing_target(self, tmp_path):
        config = _setup(tmp_path, json.dumps(SPEC), None)
        with pytest.raises(SpecFileNotFound, match="File not found"):
            check_drift(config)

    def test_missing_source(self, tmp_path):
        config = _setup(tmp_path, None, json.dumps(SPEC))
        with pytest.raises(SpecFileNotFound) as exc:
            check_drift(config)
        assert isinstance(exc.value, SourceUnavailable)
