import logging

import pytest

from markov_text.markov_chain import build_table
from markov_text.sample_source import ConsoleSampleSource, FileSampleSource
from markov_text.utils import describe_table, format_table, read_sample_files


def test_format_table_lists_keys_in_order():
    table = build_table("abab", 2)
    assert format_table(table) == "'ab' -> 'ab'\n'ba' -> 'b'\n'b' ->"


def test_describe_table_counts():
    table = build_table("abab", 2)
    assert describe_table(table) == {'states': 3, 'transitions': 2, 'dead_ends': 1}


def test_read_sample_files_joins_contents(tmp_path):
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    first.write_text("hello\n", encoding='utf-8')
    second.write_text("world\n", encoding='utf-8')
    assert read_sample_files([first, second]) == "hello world"


def test_read_sample_files_skips_missing(tmp_path, caplog):
    present = tmp_path / "present.txt"
    present.write_text("only me", encoding='utf-8')
    with caplog.at_level(logging.WARNING):
        sample = read_sample_files([tmp_path / "missing.txt", present])
    assert sample == "only me"
    assert "missing.txt" in caplog.text


def test_file_sample_source(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text("aa ba bbaac abc\n", encoding='utf-8')
    source = FileSampleSource(path)
    assert source.read() == "aa ba bbaac abc"
    assert source.description == "file"


def test_file_sample_source_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileSampleSource(tmp_path / "nope.txt").read()


def test_console_sample_source_uses_prompt():
    prompts = []

    def fake_prompt(text, type=None):
        prompts.append(text)
        return "typed sample"

    source = ConsoleSampleSource(prompt=fake_prompt)
    assert source.read() == "typed sample"
    assert prompts == ["Enter sample text"]
