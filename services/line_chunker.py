from typing import List, Sequence

WORDS_PER_LINE = 5
VISIBLE_LINES = 3


def chunk_lines(words: Sequence[str], per_line: int = WORDS_PER_LINE) -> List[str]:
    """
    Group consecutive words into lines of `per_line` words.
    Every word, including the last one on a line, is followed by a single space.
    """
    if per_line < 1:
        raise ValueError(f"per_line must be at least 1, got {per_line}")
    lines = []
    for i in range(0, len(words), per_line):
        lines.append("".join(w + " " for w in words[i:i + per_line]))
    return lines


def visible_window(lines: Sequence[str], offset: int, size: int = VISIBLE_LINES) -> List[str]:
    offset = max(0, offset)
    return list(lines[offset:min(offset + size, len(lines))])
