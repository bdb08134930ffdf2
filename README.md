# accesseval

`accesseval` replays a page-access trace against page eviction strategies.
For each strategy it records how many page reads and page writes happen at
each buffer (RAM) size. Results are kept in a CSV file. When a run is started
again, the saved results are loaded, and strategies that already have results
for every RAM size are skipped.

## Installation

```
pip install .
```

Use `pip install .[test]` to install the test dependencies as well.

## Trace format

A trace is a CSV file. Its first line must be exactly `pages,is_write`.
Each line after that is one access. The first column is the page id; its
leading integer is used. The access is a write if the rest of the line
contains `rue`, as in `true` or `True`.

```
pages,is_write
1,false
2,true
1,false
```

`accesseval.trace.read_trace(path)` reads a trace file.
`accesseval.trace.parse_trace(lines)` parses lines that are already in
memory; an empty input gives an empty list. Both return a list of `Access`
records with these fields:

- `pid`: the page id;
- `write`: whether the access is a write;
- `pos`: its position in the trace, counting from 0;
- `last_ref`: the position of the previous access to the same page, or -1;
- `next_ref`: the position of the next access to the same page, or the trace
  length if there is none.

A wrong header or a page id without a leading integer raises
`TraceFormatError` (a `ValueError`).

## Results table

`accesseval.results.ResultTable(elements)` holds `(reads, writes)` pairs
keyed by algorithm name and RAM size. `elements` is the number of accesses in
the trace. The table also keeps `ram_sizes`, the set of RAM sizes known to it.

- `has_values(algo)`, `has_value(algo, ram_size)`: whether results exist.
- `has_all_values(algo)`: true if `algo` has a result for every known RAM
  size; always false while `ram_sizes` is empty.
- `missing_values(algo)`: the known RAM sizes without a result for `algo`.
- `get_values(algo)`: the results of `algo`; raises `KeyError` if it has none.
- `values_for(algo)`: the results of `algo`, created empty if needed.
- `load_csv(lines)`, `to_csv_lines()`, `write_csv(path)`: read and write the
  CSV form.

The CSV layout is:

```
algo,ramSize,elements,reads,writes
```

Rows are written sorted by algorithm name, then RAM size. `load_csv` merges
rows into the table and adds their RAM sizes to `ram_sizes`. It raises
`ResultsFormatError` (a `ValueError`) on a wrong header, a field without a
leading integer, or an `elements` value that differs from the table's.

## Evaluating strategies

A strategy subclasses `accesseval.evaluator.EvictStrategy` and implements
`evaluate_one(data, ram_size)`. That method returns a `(reads, writes)` pair
for one RAM size. The default `evaluate_ram_list(data, ram_sizes, results)`
calls `evaluate_one` for each size in ascending order and stores the pairs in
`results`.

`accesseval.evaluator.EvalAccessTable(filename, output_dir)` runs the
evaluation for one trace file. Results go to `output_dir/output.csv`.

- `init(baseline, ignore_last_run=False)` reads the trace. If `output.csv`
  exists and `ignore_last_run` is false, it loads the saved results.
  Otherwise it prints `No old files found` and creates the output directory.
  It then runs `baseline` under the name `lru` unless that name already has
  results for every RAM size.
- The baseline decides which RAM sizes are evaluated. Its
  `evaluate_ram_list` receives the table's `ram_sizes` set, which is empty
  on a fresh run, and must add the sizes to it.
- `run_algorithm(name, generator, parallel=True)` takes a zero-argument
  factory that builds a fresh strategy. It does nothing and returns `False`
  if `name` already has every result. Otherwise it evaluates and returns
  `True`:
  - with `parallel=True`, only the missing sizes are evaluated, in a thread
    pool, using a new strategy for each size;
  - with `parallel=False`, one strategy evaluates every known size.
- `run_algorithm_non_parallel(name, executor)` evaluates an existing
  strategy object sequentially, under the same skip rule.
- Every run prints the algorithm name and the time taken. It then writes
  `output.csv` through `print_to_file()`.
- `has_values`, `has_value`, `has_all_values`, `missing_values` and
  `get_values` forward to the results table.

```python
from collections import OrderedDict

from accesseval.evaluator import EvalAccessTable, EvictStrategy


class Lru(EvictStrategy):
    def evaluate_one(self, data, ram_size):
        cache = OrderedDict()
        reads = writes = 0
        for access in data:
            if access.pid in cache:
                cache.move_to_end(access.pid)
                cache[access.pid] = cache[access.pid] or access.write
            else:
                reads += 1
                if len(cache) >= ram_size:
                    _, dirty = cache.popitem(last=False)
                    writes += dirty
                cache[access.pid] = access.write
        return reads, writes


class LruBaseline(Lru):
    def evaluate_ram_list(self, data, ram_sizes, results):
        ram_sizes.update({10, 100, 1000})
        super().evaluate_ram_list(data, ram_sizes, results)


table = EvalAccessTable("trace.csv", "out")
table.init(LruBaseline())
table.run_algorithm("my-lru", Lru)
print(table.get_values("my-lru"))
```

## What it does not do

The package comes with no eviction strategies and no command-line program.
You supply every strategy, including the baseline that picks the RAM sizes,
and drive the evaluation from your own Python code.