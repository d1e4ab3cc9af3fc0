#!/usr/bin/env python3
"""
Normalize a raw model response into a dashboard record.

Reads raw model output from a file (or stdin with "-"), runs it through the
feature's normalization pipeline and prints the record as JSON on stdout.
Logs go to stderr and to a timestamped log directory.

Usage:
    python scripts/normalize_response.py job_fit response.txt
    cat response.txt | python scripts/normalize_response.py match_score -
    python scripts/normalize_response.py interview_prep response.txt --policy propagate
    python scripts/normalize_response.py rewrite response.txt --original "Led a team of 5"
"""

import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from jobjumper.contexts.features import handlers
from jobjumper.contexts.features.logger import setup_features_logger
from jobjumper.contexts.normalization.exceptions import StructuralParseError
from jobjumper.utils.config import FAILURE_POLICIES, ConfigError, get_pipeline_config

# Feature name (as used in pipeline.yaml) -> handler taking (raw_text, policy)
FEATURE_HANDLERS = {
    "match_score": handlers.score_match,
    "job_fit": handlers.analyze_job_fit,
    "company_research": handlers.research_company,
    "interview_prep": handlers.prepare_interview,
    "resume": handlers.enhance_resume,
    "document": handlers.generate_document,
}
FEATURES = sorted([*FEATURE_HANDLERS, "rewrite"])

app = typer.Typer(
    help="Normalize raw model output into a typed dashboard record",
    add_completion=False,
)


def read_input(input_path: str) -> str:
    """Read raw text from a file path, or stdin when input_path is '-'."""
    if input_path == "-":
        return sys.stdin.read()
    path = Path(input_path)
    if not path.is_file():
        raise typer.BadParameter(f"Input file not found: {input_path}")
    return path.read_text(encoding="utf-8")


@app.command()
def main(
    feature: Annotated[
        str,
        typer.Argument(help=f"Feature to normalize for. Options: {', '.join(FEATURES)}"),
    ],
    input_path: Annotated[
        str,
        typer.Argument(help="File holding the raw model response ('-' for stdin)"),
    ],
    policy: Annotated[
        Optional[str],
        typer.Option(
            "--policy",
            "-p",
            help=f"Override the configured failure policy ({' | '.join(FAILURE_POLICIES)})",
        ),
    ] = None,
    original: Annotated[
        str,
        typer.Option("--original", help="Original text kept when a rewrite fails (rewrite only)"),
    ] = "",
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Directory for the log file (default: timestamped under LOGS_PATH)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug messages on the console"),
    ] = False,
):
    """Normalize one model response and print the record as JSON."""
    if feature not in FEATURES:
        raise typer.BadParameter(
            f"Unknown feature '{feature}'. Valid features are: {', '.join(FEATURES)}"
        )
    if policy is not None and policy not in FAILURE_POLICIES:
        raise typer.BadParameter(
            f"Invalid policy '{policy}'. Valid policies are: {', '.join(FAILURE_POLICIES)}"
        )

    try:
        config = get_pipeline_config()
    except (FileNotFoundError, ConfigError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    raw_text = read_input(input_path)

    if log_dir is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_dir = config.log_dir / f"normalize_{timestamp}"
    setup_features_logger(feature, log_dir=log_dir, verbose=verbose)

    try:
        if feature == "rewrite":
            record = handlers.rewrite_text(raw_text, original, policy=policy)
        else:
            record = FEATURE_HANDLERS[feature](raw_text, policy=policy)
    except StructuralParseError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(record.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    app()
