"""Running eviction strategies over a trace and collecting their I/O counts."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from os import PathLike
from pathlib import Path
from typing import Callable, Iterable, MutableMapping, Sequence

from .results import ResultTable
from .trace import Access, read_trace


class EvictStrategy(ABC):
    """A page-eviction strategy that can be replayed against a trace."""

    @abstractmethod
    def evaluate_one(self, data: Sequence[Access], ram_size: int) -> tuple[int, int]:
        """Replay ``data`` with ``ram_size`` pages of memory; return (reads, writes)."""

    def evaluate_ram_list(
        self,
        data: Sequence[Access],
        ram_sizes: Iterable[int],
        results: MutableMapping[int, tuple[int, int]],
    ) -> None:
        """Evaluate every memory size in ``ram_sizes`` and store the results."""
        for ram_size in sorted(ram_sizes):
            results[ram_size] = self.evaluate_one(data, ram_size)


class EvalAccessTable:
    """Evaluates strategies over one trace, keeping results in a CSV file."""

    def __init__(self, filename: str | PathLike[str], output_dir: str | PathLike[str]) -> None:
        self.filename = Path(filename)
        self.output_dir = Path(output_dir)
        self.output_file = self.output_dir / "output.csv"
        self.data: list[Access] = []
        self.results = ResultTable(elements=0)

    def init(self, baseline: EvictStrategy, ignore_last_run: bool = False) -> None:
        """Load the trace, resume earlier results, and run the ``lru`` baseline.

        The baseline is expected to fill in the memory sizes to evaluate.
        """
        self.data = read_trace(self.filename)
        self.results = ResultTable(elements=len(self.data))
        if self.output_file.is_file() and not ignore_last_run:
            with open(self.output_file, encoding="utf-8") as handle:
                self.results.load_csv(handle)
        else:
            print("No old files found")
            self.output_dir.mkdir(exist_ok=True)
        self.run_algorithm_non_parallel("lru", baseline)

    def has_values(self, algo: str) -> bool:
        return self.results.has_values(algo)

    def has_value(self, algo: str, ram_size: int) -> bool:
        return self.results.has_value(algo, ram_size)

    def has_all_values(self, algo: str) -> bool:
        return self.results.has_all_values(algo)

    def missing_values(self, algo: str) -> set[int]:
        return self.results.missing_values(algo)

    def get_values(self, algo: str) -> dict[int, tuple[int, int]]:
        return self.results.get_values(algo)

    def run_algorithm(
        self,
        name: str,
        generator: Callable[[], EvictStrategy],
        parallel: bool = True,
    ) -> bool:
        """Evaluate a strategy unless all its results are known; return whether it ran."""
        if self.has_all_values(name):
            return False
        print(name)
        start = time.perf_counter()
        results = self.results.values_for(name)
        if parallel:
            missing = sorted(self.missing_values(name))
            with ThreadPoolExecutor() as pool:
                futures = {
                    ram_size: pool.submit(
                        lambda size: generator().evaluate_one(self.data, size), ram_size
                    )
                    for ram_size in missing
                }
                for ram_size, future in futures.items():
                    results[ram_size] = future.result()
        else:
            generator().evaluate_ram_list(self.data, self.results.ram_sizes, results)
        self.print_to_file()
        print(f"{time.perf_counter() - start} seconds")
        return True

    def run_algorithm_non_parallel(self, name: str, executor: EvictStrategy) -> bool:
        """Evaluate ``executor`` sequentially unless all its results are known."""
        if self.has_all_values(name):
            return False
        print(name)
        start = time.perf_counter()
        executor.evaluate_ram_list(
            self.data, self.results.ram_sizes, self.results.values_for(name)
        )
        self.print_to_file()
        print(f"{time.perf_counter() - start} seconds")
        return True

    def print_to_file(self) -> None:
        """Write all results to the output CSV, replacing its contents."""
        self.results.write_csv(self.output_file)