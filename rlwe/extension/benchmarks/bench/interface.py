from collections import defaultdict
from enum import Enum


class BenchmarkResultMetricType(Enum):
    SCALAR = "scalar"  # A single value metric
    TABLE = (
        "table"  # A 2D list/array, the first row will be treated as the header
    )


class BenchmarkResult:
    """
    A class to represent the result of a benchmark run.

    Attributes
    ----------
    metrics : dict
        A dictionary containing the metrics of the benchmark run.
    misc : dict
        A dictionary containing any miscellaneous information related to the benchmark run.
    """

    def __init__(self):
        self.metrics = defaultdict(dict)
        self.misc = {}

    def add_metric(
        self,
        name: str,
        metric_type: BenchmarkResultMetricType,
        value: any,
        series: str | None = None,
        description: str | None = None,
    ):
        """
        Add a metric to the benchmark result.

        Parameters
        ----------
        name : str
            The name of the metric, should be unique within the series.
        series : str
            The series of the metric, metrics with the same series will be grouped together.
        metric_type : BenchmarkResultMetricType
            The type of the metric (scalar or table).
        value : any
            The value of the metric.
        description : str | None
            A description of the metric (optional).
        """
        if not isinstance(metric_type, BenchmarkResultMetricType):
            raise ValueError(
                f"Invalid metric type: {metric_type}. Must be one of {list(BenchmarkResultMetricType)}"
            )

        if series is None:
            series = "default"

        self.metrics[metric_type].setdefault(series, []).append(
            {
                "name": name,
                "value": value,
                "description": description,
            }
        )

    def get_metric(self, name: str, series: str = "default"):
        for metrics in self.metrics.values():
            for metric in metrics.get(series, []):
                if metric["name"] == name:
                    return metric["value"]
        raise KeyError(f"No metric {name!r} in series {series!r}")

    def __repr__(self):
        return f"BenchmarkResult(metrics={dict(self.metrics)}, misc={self.misc})"


class BenchmarkBase:
    """
    A class to represent a benchmark.

    Attributes
    ----------
    name : str
        The name of the benchmark.
    description : str
        A brief description of the benchmark.

    Decorate subclasses with the shared registry so that the cli can discover them:
    ```python
    from rlwe.extension.benchmarks.bench.registry import benchreg

    @benchreg.register(name="your benchmark name")
    class YourBenchmark(BenchmarkBase):
        def get_option_name2desc(self):
            return {"option": "description"}

        def run(self, option_name: str, seed: int | None = None) -> BenchmarkResult:
            ...
    ```
    """

    name: str
    description: str

    def get_option_name2desc(self) -> dict[str, str]:
        """
        Should return a dict mapping every option name that can be passed to
        ``run`` to its description.
        """
        raise NotImplementedError(
            "get_option_name2desc() must be implemented in subclasses"
        )

    def run(self, option_name: str, seed: int | None = None) -> BenchmarkResult:
        """
        Should run the benchmark with the given option, drawing randomness from a
        generator seeded with ``seed`` when given, and return a
        BenchmarkResult filled through ``add_metric``.
        """
        raise NotImplementedError("run() must be implemented in subclasses")
