"""Table of read/write counts per algorithm and memory size."""

from __future__ import annotations

import re
from os import PathLike
from typing import Iterable

CSV_HEADER = "algo,ramSize,elements,reads,writes"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class ResultsFormatError(ValueError):
    """Raised when a results CSV cannot be loaded."""


def _leading_int(text: str, what: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ResultsFormatError(f"invalid {what}: {text!r}")
    return int(match.group(1))


class ResultTable:
    """Reads and writes recorded for each algorithm at each memory size."""

    def __init__(self, elements: int) -> None:
        self.elements = elements
        self.ram_sizes: set[int] = set()
        self._results: dict[str, dict[int, tuple[int, int]]] = {}

    def has_values(self, algo: str) -> bool:
        return algo in self._results

    def has_value(self, algo: str, ram_size: int) -> bool:
        return ram_size in self._results.get(algo, {})

    def has_all_values(self, algo: str) -> bool:
        """True if ``algo`` has a result for every known memory size."""
        if not self.ram_sizes:
            return False
        return all(self.has_value(algo, size) for size in self.ram_sizes)

    def missing_values(self, algo: str) -> set[int]:
        return {size for size in self.ram_sizes if not self.has_value(algo, size)}

    def get_values(self, algo: str) -> dict[int, tuple[int, int]]:
        """Return the results of ``algo``; raise KeyError if it has none."""
        if algo not in self._results:
            raise KeyError(algo)
        return self._results[algo]

    def values_for(self, algo: str) -> dict[int, tuple[int, int]]:
        """Return the results of ``algo``, creating an empty entry if needed."""
        return self._results.setdefault(algo, {})

    def load_csv(self, lines: Iterable[str]) -> None:
        """Merge rows of a previously written results CSV into the table."""
        rows = iter(lines)
        header = next(rows, None)
        if header is None:
            return
        if header.rstrip("\n") != CSV_HEADER:
            raise ResultsFormatError(f"unexpected header {header.rstrip(chr(10))!r}")
        for raw in rows:
            fields = raw.rstrip("\n").split(",")
            fields += [""] * (5 - len(fields))
            algo, ram_text, elements_text, reads_text, writes_text = fields[:5]
            ram_size = _leading_int(ram_text, "ram size")
            elements = _leading_int(elements_text, "element count")
            if elements != self.elements:
                raise ResultsFormatError(
                    f"results were computed for {elements} elements, "
                    f"trace has {self.elements}"
                )
            reads = _leading_int(reads_text, "read count")
            writes = _leading_int(writes_text, "write count")
            self.values_for(algo)[ram_size] = (reads, writes)
            self.ram_sizes.add(ram_size)

    def to_csv_lines(self) -> list[str]:
        """Render the table as CSV lines, header first, without newlines."""
        lines = [CSV_HEADER]
        for algo in sorted(self._results):
            entries = self._results[algo]
            for ram_size in sorted(entries):
                reads, writes = entries[ram_size]
                lines.append(f"{algo},{ram_size},{self.elements},{reads},{writes}")
        return lines

    def write_csv(self, path: str | PathLike[str]) -> None:
        with open(path, "w", encoding="utf-8") as handle:
            for line in self.to_csv_lines():
                handle.write(line + "\n")