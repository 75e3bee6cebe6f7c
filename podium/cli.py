"""
podium.cli - Typer CLI entry point.

Thin wrapper around the analysis engine: reads a provider transcript JSON,
prints a summary, and writes metrics JSON or an HTML report.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from podium import __version__
from podium.analyze.engine import compute
from podium.analyze.fluency import get_fluency_label, get_wpm_label
from podium.config import (
    CONFIG_FILENAME,
    EngineConfig,
    create_default_config,
    load_config,
    write_config,
)
from podium.exceptions import PodiumError
from podium.io import load_transcript, write_json
from podium.logging import configure_logging
from podium.models import DeliveryMetrics
from podium.utils import format_duration_ms, format_timestamp_ms

app = typer.Typer(
    name="podium",
    help="Speech delivery analytics.\n\n"
    "Computes pace, pauses, filler usage, fluency, clarity, and critical "
    "moments from a word-level transcript.",
    add_completion=False,
)
console = Console()


def find_config(explicit: str | None) -> EngineConfig:
    """Load config from an explicit path, else podium.yaml in the cwd, else defaults."""
    if explicit:
        return load_config(Path(explicit))
    local = Path.cwd() / CONFIG_FILENAME
    if local.exists():
        return load_config(local)
    return EngineConfig()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"podium {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Podium - speech delivery analytics."""
    pass


def _analyze_file(transcript_path: str, config_path: str | None) -> DeliveryMetrics:
    config = find_config(config_path)
    transcript = load_transcript(Path(transcript_path))
    return compute(transcript.words, transcript.text, config=config)


def _print_summary(metrics: DeliveryMetrics, name: str) -> None:
    table = Table(title=f"Delivery Metrics: {name}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Notes", style="dim")

    table.add_row("Fluency", str(metrics.fluency_score), get_fluency_label(metrics.fluency_score))
    table.add_row("Pace", f"{metrics.overall_wpm} wpm", get_wpm_label(metrics.overall_wpm))
    table.add_row(
        "Silence",
        f"{metrics.silence_ratio * 100:.1f}%",
        format_duration_ms(metrics.total_silence_ms),
    )
    table.add_row(
        "Pauses",
        str(metrics.pause_count),
        f"avg {metrics.avg_pause_duration_ms} ms",
    )
    table.add_row(
        "Fillers",
        f"{metrics.filler_per_minute}/min",
        ", ".join(metrics.filler_words[:5]),
    )

    optional = [
        ("Clarity", metrics.clarity_score, ""),
        ("Confidence", metrics.confidence_score, ""),
        ("Momentum", metrics.momentum_score, ">100 speeding up, <100 slowing down"),
        ("Rhythm variation", metrics.rhythm_variation, "WPM std dev"),
    ]
    for label, value, note in optional:
        if value is not None:
            table.add_row(label, str(value), note)

    for speaker, ms in metrics.talk_time_by_speaker_ms.items():
        table.add_row(f"Talk time ({speaker})", format_duration_ms(ms), "")

    console.print(table)

    if metrics.critical_moments:
        moments = Table(title="Critical Moments")
        moments.add_column("At", style="cyan")
        moments.add_column("Issue")
        moments.add_column("Severity")
        moments.add_column("Details", style="dim")
        for m in metrics.critical_moments:
            color = "red" if m.severity == "high" else "yellow"
            moments.add_row(
                format_timestamp_ms(m.timestamp),
                m.issue,
                f"[{color}]{m.severity}[/{color}]",
                m.details,
            )
        console.print(moments)


@app.command("analyze")
def analyze(
    transcript: str = typer.Argument(..., help="Transcript JSON with 'words' and 'text'"),
    output: str | None = typer.Option(None, "--output", "-o", help="Write metrics JSON here"),
    config: str | None = typer.Option(None, "--config", "-c", help="Path to podium.yaml"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Compute delivery metrics for a transcript."""
    configure_logging(verbose)

    try:
        metrics = _analyze_file(transcript, config)
    except PodiumError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    _print_summary(metrics, Path(transcript).name)

    if output:
        write_json(Path(output), metrics.to_dict())
        console.print(f"[green]✓[/green] Wrote metrics to {output}")


@app.command("report")
def report(
    transcript: str = typer.Argument(..., help="Transcript JSON with 'words' and 'text'"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output HTML path"),
    config: str | None = typer.Option(None, "--config", "-c", help="Path to podium.yaml"),
    open_browser: bool = typer.Option(False, "--open", help="Open the report in a browser"),
) -> None:
    """Generate an HTML delivery report for a transcript."""
    from podium.reports.delivery import generate_delivery_report

    transcript_path = Path(transcript)
    output_path = Path(output) if output else transcript_path.with_suffix(".delivery.html")

    try:
        metrics = _analyze_file(transcript, config)
        path = generate_delivery_report(
            metrics,
            output_path,
            title=f"Delivery Insights: {transcript_path.stem}",
            open_browser=open_browser,
        )
    except PodiumError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Report written to {path}")


@app.command("compare")
def compare(
    transcript: str = typer.Argument(..., help="Transcript JSON with 'words' and 'text'"),
    config: str | None = typer.Option(None, "--config", "-c", help="Path to podium.yaml"),
) -> None:
    """Compare pace and fluency against typical speaking contexts."""
    from podium.benchmarks import compare_to_benchmarks, format_diff

    try:
        metrics = _analyze_file(transcript, config)
    except PodiumError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title="How You Compare")
    table.add_column("Context", style="cyan")
    table.add_column("WPM")
    table.add_column("Fluency")

    table.add_row("[bold]You[/bold]", str(metrics.overall_wpm), str(metrics.fluency_score))
    for b in compare_to_benchmarks(metrics.overall_wpm, metrics.fluency_score):
        table.add_row(
            b["label"],
            f"{b['wpm']} ({format_diff(b['wpm_diff'])})",
            f"{b['fluency']} ({format_diff(b['fluency_diff'])})",
        )

    console.print(table)
    console.print("[dim]Benchmarks are approximate averages from various speech contexts[/dim]")


@app.command("validate")
def validate(
    transcript: str = typer.Argument(..., help="Transcript JSON with 'words' and 'text'"),
) -> None:
    """Check a transcript's word timings before analysis."""
    from podium.validation import validate_words

    try:
        data = load_transcript(Path(transcript))
    except PodiumError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    result = validate_words(data.words)

    console.print(f"[cyan]{result['word_count']} word(s)[/cyan]")
    for warning in result["warnings"]:
        console.print(f"[yellow]⚠ {warning}[/yellow]")

    if result["valid"]:
        console.print("[green]✓ Transcript is valid[/green]")
    else:
        raise typer.Exit(1)


@app.command("init-config")
def init_config(
    path: str = typer.Argument(CONFIG_FILENAME, help="Where to write the config file"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a podium.yaml with every threshold at its default."""
    config_path = Path(path)

    if config_path.exists() and not force:
        console.print(f"[red]Error: '{config_path}' already exists[/red]")
        raise typer.Exit(1)

    write_config(create_default_config(), config_path)
    console.print(f"[green]✓[/green] Wrote default config to {config_path}")
