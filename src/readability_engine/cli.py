from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Tuple, TypedDict

import typer
import yaml

from .config import ReadabilityConfig, load_config
from .constraints import has_blocking_issues
from .documents import DocumentLoadError, load_documents
from .models import ContentIssue, Document, ReadabilityReport
from .pipeline import analyze_corpus
from .reporting import report_to_dict, reports_to_frame, write_report

app = typer.Typer(help="Readability Engine CLI.", no_args_is_help=True)

LOGGER = logging.getLogger(__name__)


class IssuePayload(TypedDict):
    code: str
    message: str


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log per-document details to stderr."
    ),
) -> None:
    """Score text content for readability."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def score(
    text: str | None = typer.Argument(None, help="Inline text to score."),
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    strip_markup: bool | None = typer.Option(
        None,
        "--strip-markup/--keep-markup",
        help="Remove HTML tags before scoring.",
    ),
    breakdown: bool = typer.Option(
        False, "--breakdown", help="Include sub-scores and text metrics."
    ),
) -> None:
    """Score inline text or files and emit a JSON summary."""
    cfg = load_config(config)
    _apply_overrides(cfg, strip_markup, breakdown)
    documents = _resolve_documents(text, input_path, cfg)
    results = analyze_corpus(documents, cfg)
    typer.echo(json.dumps({"documents": _build_summary(results)}, indent=2))


@app.command()
def check(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    min_score: float | None = typer.Option(
        None, "--min-score", help="Flag documents scoring below this value."
    ),
    min_chars: int | None = typer.Option(
        None, "--min-chars", help="Minimum content length in characters."
    ),
    strip_markup: bool | None = typer.Option(
        None,
        "--strip-markup/--keep-markup",
        help="Remove HTML tags before checking.",
    ),
) -> None:
    """Check documents against publishing rules; exit 1 on blocking issues."""
    cfg = load_config(config)
    _apply_overrides(cfg, strip_markup, False)
    if min_score is not None:
        cfg.min_readability_score = min_score
    if min_chars is not None:
        cfg.min_content_chars = min_chars
    documents = _resolve_documents(None, input_path, cfg)
    results = analyze_corpus(documents, cfg)

    blocking = False
    for doc_id, (report, issues) in sorted(results.items()):
        status = "FAIL" if has_blocking_issues(issues) else ("WARN" if issues else "OK")
        typer.echo(f"{status} {doc_id} {report.score:.1f} ({report.level})")
        for issue in issues:
            typer.echo(f"  - {issue.code}: {issue.message}")
        blocking = blocking or has_blocking_issues(issues)

    if blocking:
        raise typer.Exit(code=1)


@app.command()
def report(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    output: Path = typer.Option(..., "--output", "-o", dir_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
    strip_markup: bool | None = typer.Option(
        None,
        "--strip-markup/--keep-markup",
        help="Remove HTML tags before scoring.",
    ),
) -> None:
    """Write a per-document table (CSV or Parquet) with sub-scores."""
    cfg = load_config(config)
    _apply_overrides(cfg, strip_markup, True)
    documents = _resolve_documents(None, input_path, cfg)
    results = analyze_corpus(documents, cfg)
    reports = [results[doc_id][0] for doc_id in sorted(results)]
    try:
        write_report(reports_to_frame(reports), output)
    except ImportError as exc:
        # Parquet output needs the optional pyarrow extra.
        raise typer.BadParameter(
            f"Cannot write {output.suffix or 'no suffix'} output: {exc}. "
            "Use a .csv path or install the parquet extra.",
            param_hint="--output",
        ) from exc
    typer.echo(f"Wrote {len(reports)} rows to {output}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ReadabilityConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: ReadabilityConfig,
    strip_markup: bool | None,
    include_breakdown: bool,
) -> None:
    """Apply CLI overrides to the loaded configuration."""
    if strip_markup is not None:
        config.strip_markup = strip_markup
    if include_breakdown:
        config.include_breakdown = True


def _resolve_documents(
    text: str | None, input_path: Path | None, config: ReadabilityConfig
) -> List[Document]:
    """Turn the inline text argument or input path into documents."""
    if text is not None and input_path is not None:
        raise typer.BadParameter("Pass either inline text or --input-path, not both.")
    if text is not None:
        return [Document(doc_id="<inline>", text=text)]
    if input_path is None:
        raise typer.BadParameter("Provide inline text or --input-path.")
    try:
        documents = load_documents(input_path, config.input_extensions)
    except DocumentLoadError as exc:
        raise typer.BadParameter(str(exc)) from exc
    LOGGER.info("Loaded %d documents from %s", len(documents), input_path)
    return documents


def _build_summary(
    results: Dict[str, Tuple[ReadabilityReport, List[ContentIssue]]],
) -> List[dict]:
    """Create a JSON-serializable summary for each processed document."""
    summary: List[dict] = []
    for _, (report_item, issues) in sorted(results.items()):
        entry = report_to_dict(report_item)
        entry["issues"] = [_issue_dict(issue) for issue in issues]
        summary.append(entry)
    return summary


def _issue_dict(issue: ContentIssue) -> IssuePayload:
    return {"code": issue.code, "message": issue.message}


if __name__ == "__main__":
    main()
