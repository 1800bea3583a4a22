"""
Providers of sample text for the interactive menu.

Each source yields one finalized sample string per call to `read()`;
nothing here knows about orders or transition tables.
"""
from pathlib import Path

import click


class SampleSource:
    description = "sample"

    def read(self):
        raise NotImplementedError


class ConsoleSampleSource(SampleSource):
    description = "console"

    def __init__(self, prompt=click.prompt):
        self.prompt = prompt

    def read(self):
        return self.prompt("Enter sample text", type=str)


class FileSampleSource(SampleSource):
    description = "file"

    def __init__(self, path, encoding='utf-8'):
        self.path = Path(path)
        self.encoding = encoding

    def read(self):
        # FileNotFoundError propagates so the caller can report it and re-prompt
        return self.path.read_text(encoding=self.encoding).rstrip('\r\n')
