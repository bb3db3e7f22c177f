from click.testing import CliRunner

from rlwe._cli import main
from rlwe.extension.benchmarks import BenchmarkResultMetricType
from rlwe.extension.benchmarks.bench import benchreg
from rlwe.extension.benchmarks.bench.homomorphic_ops import HomomorphicOpsBenchmark


def test_version_command():
    result = CliRunner().invoke(main, ["version"])
    assert result.exit_code == 0
    assert "rlwe version" in result.output


def test_benchmark_is_registered():
    assert "Homomorphic Ops" in benchreg.keys()
    bench = benchreg["Homomorphic Ops"]()
    assert set(bench.get_option_name2desc()) == {"toy", "small", "medium"}


def test_benchmark_lists_options():
    result = CliRunner().invoke(main, ["benchmark"])
    assert result.exit_code == 0
    assert "toy" in result.output
    assert "medium" in result.output


def test_benchmark_runs_toy_option():
    result = CliRunner().invoke(
        main,
        ["benchmark", "--name", "Homomorphic Ops", "--option", "toy", "--seed", "0"],
    )
    assert result.exit_code == 0
    assert "encrypt" in result.output


def test_benchmark_unknown_name():
    result = CliRunner().invoke(main, ["benchmark", "--name", "nope"])
    assert result.exit_code != 0


def test_benchmark_result_metrics():
    result = HomomorphicOpsBenchmark().run("toy", seed=1)
    assert result.get_metric("Correct", series="noise") is True
    assert result.get_metric("Headroom after mul (bits)", series="noise") > 0
    rows = result.get_metric("Latency", series="latency")
    assert rows[0] == ["Operation", "Mean (ms)", "Max (ms)"]
    assert len(rows) == 6
    assert BenchmarkResultMetricType.TABLE in result.metrics
