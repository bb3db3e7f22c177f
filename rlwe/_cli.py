import os

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


@click.group()
@click.pass_context
def main(ctx):
    ctx.ensure_object(dict)


@main.command(name="version")
def version_command():
    """Print the version of rlwe"""
    import rlwe

    console.print(
        Panel(
            f"rlwe version: {rlwe.__version__}",
            title="Version",
            title_align="left",
            border_style="cyan",
        )
    )


def _print_benchmarks(benchreg):
    table = Table(title="Benchmarks")
    table.add_column("Name")
    table.add_column("Option")
    table.add_column("Description")
    for name in benchreg.keys():
        bench = benchreg[name]()
        for option, description in bench.get_option_name2desc().items():
            table.add_row(name, option, description)
    console.print(table)


@main.command(name="benchmark")
@click.option("--name", "bench_name", default=None, help="Name of the benchmark to run.")
@click.option(
    "--option",
    "option_name",
    default=None,
    help="Benchmark option, the first one if not provided.",
)
@click.option("--seed", type=int, default=None, help="Seed of the generator.")
@click.option(
    "--file",
    required=False,
    help="Path to a python file registering extra benchmarks.",
)
def benchmark_command(
    bench_name: str | None = None,
    option_name: str | None = None,
    seed: int | None = None,
    file: str | None = None,
):
    """List benchmarks, or run one and print its metrics"""
    if file:
        file_path = os.path.abspath(file)
        if not os.path.isfile(file_path):
            click.echo(f"[Error] File not found: {file_path}", err=True)
            raise click.Abort
        click.echo(f"[Info] Loading benchmark file: {file_path}")
        # import the benchmark file so that it registers itself
        import importlib.util

        spec = importlib.util.spec_from_file_location("benchmark", file_path)
        if spec is None:
            click.echo(f"[Error] Could not load benchmark file: {file_path}", err=True)
            raise click.Abort
        benchmark_module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(benchmark_module)

    from rlwe.extension.benchmarks.bench import benchreg
    from rlwe.extension.benchmarks.cli.print_bench_result_vis import (
        visualize_benchmark_result,
    )

    if bench_name is None:
        _print_benchmarks(benchreg)
        return

    if bench_name not in benchreg.keys():
        click.echo(f"[Error] Unknown benchmark: {bench_name}", err=True)
        raise click.Abort
    bench = benchreg[bench_name]()
    options = bench.get_option_name2desc()
    option_name = option_name or next(iter(options))
    if option_name not in options:
        click.echo(f"[Error] Unknown option {option_name} for {bench_name}", err=True)
        raise click.Abort

    result = bench.run(option_name, seed=seed)
    visualize_benchmark_result(result)


if __name__ == "__main__":
    main()
