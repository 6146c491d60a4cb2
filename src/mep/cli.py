"""Typer CLI for mep-genome."""
from __future__ import annotations
import typer
from pathlib import Path
from rich.console import Console
from rich.table import Table

from mep.config import load_config, ConfigSchema
from mep.core.rng import make_rng
from mep.errors import MepError
from mep.genome import Mep
from mep.instructions import instruction_mutator, random_instructions, reduce_arithmetic

DEFAULT_CONFIG = Path(__file__).resolve().parent / "config" / "defaults.yaml"

app = typer.Typer(help="Multi-expression program genome CLI")
console = Console()


def _configure(config: Path, seed: int | None, length: int | None, outputs: int | None) -> ConfigSchema:
    cfg = load_config(config)
    if seed is not None:
        cfg.seed = seed
    if length is not None:
        cfg.genome.length = length
    if outputs is not None:
        cfg.evaluation.outputs = outputs
    return cfg


def _random_genome(cfg: ConfigSchema, rng) -> Mep:
    return Mep.from_config(cfg.genome, rng, random_instructions(rng, cfg.genome.length))


def _operations_table(genome: Mep) -> Table:
    table = Table(title=f"genome: {len(genome)} ops, {genome.inputs} inputs")
    table.add_column("address", justify="right")
    table.add_column("op")
    table.add_column("first", justify="right")
    table.add_column("second", justify="right")
    for index, op in enumerate(genome.operations):
        table.add_row(str(genome.inputs + index), op.instruction.value, str(op.first), str(op.second))
    return table


@app.command()
def run(
    config: Path = typer.Option(DEFAULT_CONFIG, help="YAML config path"),
    seed: int = typer.Option(None, help="Override seed"),
    length: int = typer.Option(None, help="Override genome length"),
    outputs: int = typer.Option(None, help="Override number of outputs"),
    point_mode: str = typer.Option(None, help="uniform|trait"),
):
    """Cross two random parents, mutate the child and evaluate it."""
    cfg = _configure(config, seed, length, outputs)
    if point_mode is not None:
        if point_mode not in ("uniform", "trait"):
            raise typer.BadParameter("point_mode must be uniform or trait")
        cfg.crossover.point_mode = point_mode
    rng = make_rng(cfg.seed)
    try:
        parents = (_random_genome(cfg, rng), _random_genome(cfg, rng))
        child = Mep.mate(parents, rng, point_mode=cfg.crossover.point_mode)
        mutated = child.mutate(rng, instruction_mutator(rng))
        values = list(child.execute(cfg.evaluation.inputs, cfg.evaluation.outputs, reduce_arithmetic))
    except MepError as exc:
        console.print(f"[red]error:[/red] {exc}")
        raise typer.Exit(code=1)
    table = Table(title=f"outputs (seed={cfg.seed}, sites mutated={mutated})")
    table.add_column("address", justify="right")
    table.add_column("value", justify="right")
    for address, value in zip(child.output_addresses(cfg.evaluation.outputs), values):
        table.add_row(str(address), f"{value:.6g}")
    console.print(table)
    console.print(
        {"mutation_intensity": child.mutation_intensity, "crossover_points": child.crossover_points}
    )


@app.command()
def show(
    config: Path = typer.Option(DEFAULT_CONFIG, help="YAML config path"),
    seed: int = typer.Option(None, help="Override seed"),
    length: int = typer.Option(None, help="Override genome length"),
):
    """Print the operations of one random genome."""
    cfg = _configure(config, seed, length, None)
    genome = _random_genome(cfg, make_rng(cfg.seed))
    console.print(_operations_table(genome))


if __name__ == "__main__":
    app()
