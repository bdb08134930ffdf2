import pytest

from accesseval.evaluator import EvalAccessTable, EvictStrategy
from accesseval.results import CSV_HEADER, ResultsFormatError

TRACE = "pages,is_write\n1,False\n2,True\n1,False\n3,True\n"
SIZES = (1, 2, 3)


class SizeEcho(EvictStrategy):
    def evaluate_one(self, data, ram_size):
        return ram_size, len(data)


class Baseline(SizeEcho):
    """Registers the memory sizes, as a stack-distance baseline would."""

    def evaluate_ram_list(self, data, ram_sizes, results):
        ram_sizes.update(SIZES)
        super().evaluate_ram_list(data, ram_sizes, results)


@pytest.fixture
def trace_file(tmp_path):
    path = tmp_path / "trace.csv"
    path.write_text(TRACE, encoding="utf-8")
    return path


@pytest.fixture
def table(trace_file, tmp_path):
    evaluator = EvalAccessTable(trace_file, tmp_path / "out")
    evaluator.init(Baseline(), ignore_last_run=True)
    return evaluator


def test_init_runs_baseline(table):
    assert len(table.data) == 4
    assert table.has_all_values("lru")
    assert table.get_values("lru") == {size: (size, 4) for size in SIZES}
    assert table.output_file.is_file()


def test_evaluate_ram_list_default():
    results = {}
    strategy = SizeEcho()
    EvictStrategy.evaluate_ram_list(strategy, [], [2, 1], results)
    assert results == {1: (1, 0), 2: (2, 0)}


@pytest.mark.parametrize("parallel", [True, False])
def test_run_algorithm_fills_all_sizes(table, parallel):
    assert table.run_algorithm("echo", SizeEcho, parallel)
    assert table.has_all_values("echo")
    assert table.get_values("echo") == table.get_values("lru")
    lines = table.output_file.read_text(encoding="utf-8").splitlines()
    assert lines[0] == CSV_HEADER
    assert sum(line.startswith("echo,") for line in lines) == len(SIZES)


def test_run_algorithm_skips_known(table):
    calls = []

    def generator():
        calls.append(1)
        return SizeEcho()

    assert table.run_algorithm("echo", generator)
    count = len(calls)
    assert not table.run_algorithm("echo", generator)
    assert len(calls) == count


def test_run_algorithm_only_missing(table):
    table.results.values_for("echo")[1] = (0, 0)
    assert table.missing_values("echo") == {2, 3}
    table.run_algorithm("echo", SizeEcho)
    assert table.get_values("echo")[1] == (0, 0)
    assert table.get_values("echo")[2] == (2, 4)


def test_resume_from_previous_output(trace_file, tmp_path):
    first = EvalAccessTable(trace_file, tmp_path / "out")
    first.init(Baseline(), ignore_last_run=True)
    first.run_algorithm("echo", SizeEcho)

    second = EvalAccessTable(trace_file, tmp_path / "out")
    second.init(Baseline(), ignore_last_run=False)
    assert second.has_all_values("echo")
    assert second.get_values("echo") == first.get_values("echo")
    assert not second.run_algorithm("echo", SizeEcho)


def test_resume_rejects_other_trace(trace_file, tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    (out / "output.csv").write_text(CSV_HEADER + "\nlru,1,99,1,1\n", encoding="utf-8")
    evaluator = EvalAccessTable(trace_file, out)
    with pytest.raises(ResultsFormatError):
        evaluator.init(Baseline(), ignore_last_run=False)


def test_has_value_delegates(table):
    assert table.has_value("lru", 2)
    assert not table.has_value("lru", 99)
    assert not table.has_values("missing")
    with pytest.raises(KeyError):
        table.get_values("missing")