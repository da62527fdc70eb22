import os
from typing import List

import click

from minpq.eval.benchmark import BenchmarkConfig, plot_results, run_benchmark, write_results
from minpq.eval.compare import compare_implementations
from minpq.eval.workload import generate_workload
from minpq.utilities.get_out_path import get_out_path
from minpq.utilities.status_logger import TimedStatusLogger


def parse_sizes(ctx, param, value: str) -> List[int]:
    try:
        sizes = [int(size) for size in value.split(",") if size.strip()]
    except ValueError:
        raise click.BadParameter("Expected a comma separated list of integers.")
    if not sizes or any(size <= 0 for size in sizes):
        raise click.BadParameter("Expected at least one positive size.")
    return sizes


@click.group()
def main():
    pass


@click.command(name="compare",
               help="Replay a random workload on both implementations and compare the removed priorities.")
@click.option("--operations", default=10000, show_default=True, type=click.IntRange(min=0))
@click.option("--seed", default=0, show_default=True, type=int)
@click.option("--integer-priorities", is_flag=True,
              help="Draw integral priorities. Ties make the removed elements implementation-defined.")
def compare(operations: int, seed: int, integer_priorities: bool):
    with TimedStatusLogger("Generating workload...", "Generated workload"):
        workload = generate_workload(
            operations,
            seed=seed,
            integer_priorities=integer_priorities,
        )
    result = compare_implementations(workload, compare_elements=not integer_priorities)
    click.echo(
        f"{result.candidate} vs {result.reference}: "
        f"{result.operations} operations, {result.removals} removals"
    )
    if not result.matches:
        if result.first_mismatch is not None:
            raise click.ClickException(f"Removed priorities differ at removal #{result.first_mismatch}.")
        raise click.ClickException("The removed elements differ.")
    click.echo("Implementations agree.")


@click.command(name="benchmark", help="Time both implementations on random workloads of growing size.")
@click.option("--sizes", default="100,1000,10000", show_default=True, callback=parse_sizes,
              help="Comma separated queue sizes.")
@click.option("--repeat", default=3, show_default=True, type=click.IntRange(min=1))
@click.option("--seed", default=0, show_default=True, type=int)
@click.option("--output-folder", default=None, type=click.Path(file_okay=False),
              help="Defaults to $MINPQ_OUT_DIR or ./out")
@click.option("--plot/--no-plot", default=True, show_default=True)
def benchmark(sizes: List[int], repeat: int, seed: int, output_folder: str, plot: bool):
    config = BenchmarkConfig(sizes=sizes, repeat=repeat, seed=seed, plot=plot)
    out_dir = get_out_path(output_folder)
    results = run_benchmark(config)
    for result in results:
        click.echo(
            f"{result.implementation:<16} | Size: {result.size:<8} | "
            f"Avg Time: {result.mean_secs * 1000:.3f} ms | Std: {result.std_secs * 1000:.3f} ms"
        )
    click.echo(f"Results saved to {write_results(results, out_dir)}")
    if config.plot:
        click.echo(f"Plot saved to {plot_results(results, os.path.join(out_dir, 'benchmark.png'))}")


main.add_command(compare)
main.add_command(benchmark)

if __name__ == "__main__":
    main()
