from rich.console import Console
from rich.table import Table

from ..bench.interface import BenchmarkResult, BenchmarkResultMetricType

console = Console()

# format of metrics, see @BenchmarkResult.add_metric
# {
#     metric_type(BenchmarkResultMetricType): {
#         series(str): [
#             {"name": str, "value": any, "description": str | None},
#             ...
#         ],
#     }
# }


def _handle_table(metrics: dict):
    for series, metrics_list in metrics.items():
        for metric in metrics_list:
            name = metric["name"]
            value = metric["value"]  # the first row is the header
            description = metric.get("description") or ""
            table = Table(
                title=f"{series} - {name}" if series != "default" else name
            )
            for header in value[0]:
                table.add_column(header)
            for row in value[1:]:
                table.add_row(*[str(cell) for cell in row])
            console.print(table)
            if description:
                console.print(
                    f"[bold]Table note[/bold]: {description}", style="dim"
                )


def _handle_scalar(metrics: dict):
    # handle as table, each metric is a single value
    table = Table(title="Scalar Metrics")
    table.add_column("Name")
    table.add_column("Value")
    table.add_column("Description", justify="right")
    for series, metrics_list in metrics.items():
        for metric in metrics_list:
            name = (
                f"{series} - {metric['name']}"
                if series != "default"
                else metric["name"]
            )
            table.add_row(name, str(metric["value"]), metric.get("description") or "")
    console.print(table)


METRIC_TYPE_2_HANDLER = {
    BenchmarkResultMetricType.SCALAR: _handle_scalar,
    BenchmarkResultMetricType.TABLE: _handle_table,
}


def visualize_benchmark_result(benchmark_result: BenchmarkResult):
    for metric_type, metrics in benchmark_result.metrics.items():
        if metric_type not in METRIC_TYPE_2_HANDLER:
            console.print(
                f"[bold red]Unsupported metric type: {metric_type}[/bold red]"
            )
            continue
        METRIC_TYPE_2_HANDLER[metric_type](metrics)
