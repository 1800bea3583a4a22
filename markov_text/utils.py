"""
Shared helpers for the command-line surfaces: reading samples from disk
and rendering a transition table for diagnostic output.
"""
import logging
from pathlib import Path

from tqdm import tqdm

logger = logging.getLogger(__name__)


def read_sample_files(paths, encoding='utf-8'):
    """
    Reads several text files and joins them into a single sample.
    Trailing newlines are stripped from each file and the contents are joined
    with a single space. Files that cannot be read are skipped with a warning.
    """
    parts = []
    for path in tqdm(paths, desc="Reading samples", disable=len(paths) < 2):
        path = Path(path)
        try:
            content = path.read_text(encoding=encoding).rstrip('\r\n')
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Skipping {path}: {e}")
            continue
        if content:
            parts.append(content)
    return " ".join(parts)


def describe_table(table):
    """Summary counts for a transition table."""
    transitions = sum(len(next_states) for next_states in table.values())
    dead_ends = sum(1 for next_states in table.values() if not next_states)
    return {
        'states': len(table),
        'transitions': transitions,
        'dead_ends': dead_ends,
    }


def format_table(table):
    lines = []
    for state, next_states in table.items():
        successors = " ".join(repr(next_state) for next_state in next_states)
        lines.append(f"{state!r} -> {successors}".rstrip())
    return "\n".join(lines)
