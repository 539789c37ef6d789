import io
import json
from types import SimpleNamespace

import httpx
import openai
import pytest

from korvocab.common import logging as vlog
from korvocab.common.config import (
    CONFIG_FILENAME,
    PipelineConfig,
    clear_output_dir,
    load_config,
    write_config,
)
from korvocab.common.openai import OpenAIClient, make_client
from korvocab.common.utils import find_korean_runs, keep_only_hangul, unique_preserve_order


# utils

def test_find_korean_runs():
    assert find_korean_runs("가방(bag), 학교!") == ["가방", "학교"]
    assert find_korean_runs("no korean") == []


def test_keep_only_hangul():
    assert keep_only_hangul("a가b방c") == "가방"


def test_unique_preserve_order():
    assert unique_preserve_order(["나", "가", "나"]) == ["나", "가"]


# config

def test_config_defaults():
    config = PipelineConfig()
    assert config.batch_size == 100
    assert config.mode == "all"
    assert config.cache_dir == ".cache"
    assert config.clear_output is False


def test_config_validation():
    with pytest.raises(ValueError):
        PipelineConfig(mode="everything")
    with pytest.raises(ValueError):
        PipelineConfig(batch_size=0)


def test_load_config_missing_returns_none(tmp_path):
    assert load_config(tmp_path / CONFIG_FILENAME) is None


def test_load_config_ignores_unknown_keys(tmp_path):
    path = tmp_path / CONFIG_FILENAME
    path.write_text(json.dumps({"mode": "sections", "batch_size": 10, "colour": "blue"}), encoding="utf-8")
    config = load_config(path)
    assert config.mode == "sections"
    assert config.batch_size == 10


def test_write_then_load_config(tmp_path):
    config = PipelineConfig(output_dir="out", top_n=5, model="gpt-4o")
    path = write_config(tmp_path / CONFIG_FILENAME, config)
    assert load_config(path) == config


ARTIFACTS = ("korean_words.csv", "korean-practice.html")


def test_clear_output_dir_removes_only_named_files(tmp_path):
    out = tmp_path / "output"
    (out / "nested").mkdir(parents=True)
    (out / "korean_words.csv").write_text("x", encoding="utf-8")
    (out / "notes.md").write_text("keep", encoding="utf-8")
    config = PipelineConfig(output_dir=str(out), cache_dir=str(tmp_path / ".cache"))

    assert clear_output_dir(config, ARTIFACTS) == 1
    assert sorted(p.name for p in out.iterdir()) == ["nested", "notes.md"]
    assert clear_output_dir(PipelineConfig(output_dir=str(tmp_path / "absent")), ARTIFACTS) == 0


def test_clear_output_dir_keeps_cache_inside_output(tmp_path, capsys):
    out = tmp_path / "output"
    out.mkdir()
    (out / "korean_words.csv").write_text("x", encoding="utf-8")
    config = PipelineConfig(output_dir=str(out), cache_dir=str(out / ".cache"))

    assert clear_output_dir(config, ARTIFACTS) == 0
    assert (out / "korean_words.csv").exists()
    assert "Not clearing" in capsys.readouterr().err


def test_clear_output_dir_refuses_working_directory(tmp_path, monkeypatch):
    (tmp_path / "korean_words.csv").write_text("x", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    config = PipelineConfig(output_dir=".", cache_dir=str(tmp_path.parent / "cache"))

    assert clear_output_dir(config, ARTIFACTS) == 0
    assert (tmp_path / "korean_words.csv").exists()


def test_clear_output_dir_refuses_protected_directory(tmp_path):
    out = tmp_path / "output"
    out.mkdir()
    (out / "korean_words.csv").write_text("source", encoding="utf-8")
    config = PipelineConfig(output_dir=str(out), cache_dir=str(tmp_path / ".cache"))

    assert clear_output_dir(config, ARTIFACTS, protected=[out]) == 0
    assert (out / "korean_words.csv").read_text(encoding="utf-8") == "source"


# logging

def test_log_warning_and_error_go_to_stderr(capsys):
    vlog.log_warning("careful")
    vlog.log_error("broken")
    captured = capsys.readouterr()
    assert captured.err == "[warn] careful\n[error] broken\n"
    assert captured.out == ""


def test_log_debug_only_when_enabled(capsys):
    vlog.log_debug(False, "hidden")
    vlog.log_debug(True, "shown")
    assert capsys.readouterr().out == "[debug] shown\n"


def test_stage_prefixed_writer():
    buf = io.StringIO()
    writer = vlog._StagePrefixedWriter(buf)
    vlog.set_log_context("translate")
    try:
        writer.write("[cache-hit] 가방\nplain line\n")
    finally:
        vlog.set_log_context(None)
    writer.write("done")
    assert buf.getvalue() == "[translate] [cache-hit] 🎯 가방\n[translate] plain line\n[main] done"


# openai client

def _fake_completion(content, finish_reason="stop"):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message, finish_reason=finish_reason)])


class _FakeCompletions:
    def __init__(self, *contents):
        self.contents = list(contents)
        self.requests = []

    def create(self, **kwargs):
        self.requests.append(kwargs)
        content = self.contents.pop(0)
        if isinstance(content, Exception):
            raise content
        return _fake_completion(content)


def _client_with(monkeypatch, *contents):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    client = OpenAIClient(model="test-model", timeout=5.0)
    completions = _FakeCompletions(*contents)
    client.client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return client, completions


def test_make_client_without_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    assert make_client() is None


def test_client_requires_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    with pytest.raises(RuntimeError):
        OpenAIClient()


def test_complete_json_parses_object(monkeypatch):
    client, completions = _client_with(monkeypatch, '{"translations": []}')
    assert client.complete_json("system", "user") == {"translations": []}
    request = completions.requests[0]
    assert request["model"] == "test-model"
    assert request["response_format"] == {"type": "json_object"}
    assert request["messages"][1] == {"role": "user", "content": "user"}


def test_complete_json_strips_code_fences(monkeypatch):
    client, _ = _client_with(monkeypatch, '```json\n{"words": [1]}\n```')
    assert client.complete_json("system", "user") == {"words": [1]}


def test_complete_json_retries_empty_reply_once(monkeypatch, capsys):
    client, completions = _client_with(monkeypatch, "{}", '{"translations": [{"korean": "가방"}]}')
    assert client.complete_json("system", "user") == {"translations": [{"korean": "가방"}]}
    assert len(completions.requests) == 2
    assert "Retry succeeded" in capsys.readouterr().out


def test_client_disables_sdk_retries(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    client = OpenAIClient(timeout=5.0)
    assert client.client.max_retries == 0


def test_malformed_reply_is_not_retried(monkeypatch):
    client, completions = _client_with(monkeypatch, "not json", '{"translations": []}')
    with pytest.raises(json.JSONDecodeError):
        client.complete_json("system", "user")
    assert len(completions.requests) == 1


def test_connection_error_is_retried(monkeypatch):
    monkeypatch.setattr(OpenAIClient.complete_json.retry, "sleep", lambda seconds: None)
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    client, completions = _client_with(
        monkeypatch, openai.APIConnectionError(request=request), '{"translations": []}'
    )
    assert client.complete_json("system", "user") == {"translations": []}
    assert len(completions.requests) == 2
