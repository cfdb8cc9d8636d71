"""Line-oriented substring search."""

from collections.abc import Iterator, Sequence

BOLD_ON = "\x1b[1m"
BOLD_OFF = "\x1b[0m"


def split_lines(content: str) -> Iterator[str]:
    r"""Yield the lines of ``content`` without their terminators.

    Lines end at ``\n``; a ``\r`` directly before it is part of the terminator.
    A final terminator does not start a new, empty line.
    """
    start = 0
    while start < len(content):
        end = content.find("\n", start)
        if end == -1:
            yield content[start:]
            return
        line_end = end - 1 if end > start and content[end - 1] == "\r" else end
        yield content[start:line_end]
        start = end + 1


def _lower_with_offsets(line: str) -> tuple[str, Sequence[int]]:
    """Lowercase ``line`` and map every lowered offset to its source index."""
    lowered = line.lower()
    if len(lowered) == len(line):
        return lowered, range(len(line))

    # Some characters lower to more than one, e.g. "İ" -> "i̇". Lengths are per
    # character, but the text must stay the whole-line form (final sigma).
    origins: list[int] = []
    for i, char in enumerate(line):
        origins.extend([i] * len(char.lower()))
    return lowered, origins


def highlight_line(line: str, query: str, ignore_case: bool = False) -> str:
    """Wrap the first occurrence of ``query`` in ``line`` with bold escape codes.

    Returns the line unchanged if the query does not occur.
    """
    if not ignore_case:
        start = line.find(query)
        if start == -1:
            return line
        end = start + len(query)
    else:
        lowered, origins = _lower_with_offsets(line)
        needle = query.lower()
        found = lowered.find(needle)
        if found == -1:
            return line
        if not needle:
            start = end = 0
        else:
            # Widen to whole source characters.
            start = origins[found]
            end = origins[found + len(needle) - 1] + 1
    return f"{line[:start]}{BOLD_ON}{line[start:end]}{BOLD_OFF}{line[end:]}"


def search(query: str, content: str, ignore_case: bool = False, highlight: bool = False) -> list[str]:
    """Return the lines of ``content`` containing ``query``, in order."""
    needle = query.lower() if ignore_case else query
    results: list[str] = []
    for line in split_lines(content):
        haystack = line.lower() if ignore_case else line
        if needle not in haystack:
            continue
        results.append(highlight_line(line, query, ignore_case) if highlight else line)
    return results


def search_case_sensitive(query: str, content: str) -> list[str]:
    """Plain case-sensitive search."""
    return search(query, content)


def search_case_insensitive(query: str, content: str) -> list[str]:
    """Plain case-insensitive search."""
    return search(query, content, ignore_case=True)
