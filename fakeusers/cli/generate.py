"""Print one page of fake user records.

Loads the default (or given) YAML configuration, applies command line
overrides and renders the page as a table, or as JSON for piping.
"""

import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ..config import GenerationConfig, Region, load_config_dict
from ..core import ErrorInjector, assemble_page
from ..exceptions import FakeUsersError

console = Console()


def _build_generation_config(config_file, overrides) -> GenerationConfig:
    config_dict = load_config_dict(config_file).get("generation", {}) or {}
    config_dict.update({k: v for k, v in overrides.items() if v is not None})
    return GenerationConfig(**config_dict)


@click.command()
@click.option(
    "--region",
    type=click.Choice([r.value for r in Region], case_sensitive=False),
    default=None,
    help="Region profile (default from config)",
)
@click.option(
    "--errors",
    "error_rate",
    type=float,
    default=None,
    help="Expected number of typos per record, may be fractional",
)
@click.option("--seed", type=str, default=None, help="Seed string")
@click.option("--page", type=int, default=0, show_default=True, help="Page index")
@click.option("--page-size", type=int, default=None, help="Records per page")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration YAML file",
)
@click.option("--json", "as_json", is_flag=True, help="Print records as JSON")
@click.option("--stats", is_flag=True, help="Print error injection statistics")
def main(
    region: str | None,
    error_rate: float | None,
    seed: str | None,
    page: int,
    page_size: int | None,
    config_file: Path | None,
    as_json: bool,
    stats: bool,
):
    """Generate one page of fake user records."""
    try:
        config = _build_generation_config(
            config_file,
            {
                "region": region,
                "error_rate": error_rate,
                "seed": seed,
                "page_size": page_size,
            },
        )
        records, error_log = assemble_page(
            config.region, config.error_rate, config.seed, page, config.page_size
        )
    except (FakeUsersError, ValidationError) as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if as_json:
        click.echo(
            json.dumps(
                [r.model_dump(by_alias=True) for r in records],
                ensure_ascii=False,
                indent=2,
            )
        )
    else:
        table = Table(
            title=f"{config.region.value} · page {page} · seed {config.seed!r}"
        )
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Id", style="dim")
        table.add_column("Full name")
        table.add_column("Address")
        table.add_column("Phone")
        for r in records:
            table.add_row(str(r.number), r.id, r.full_name, r.address, r.phone)
        console.print(table)

    if stats:
        error_stats = ErrorInjector(config.region, config.error_rate).get_error_statistics(
            error_log
        )
        console.print(f"\n  Total Errors: {error_stats['total_errors']}")
        console.print(f"  Visible Errors: {error_stats['visible_errors']}")
        console.print(f"  Records with Errors: {error_stats['records_with_errors']}")
        console.print(f"  By Type: {error_stats['errors_by_type']}")
        console.print(f"  By Field: {error_stats['errors_by_field']}")


if __name__ == "__main__":
    main()
