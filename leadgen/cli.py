from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.table import Table

from leadgen.config import enrichment_options_from_config, load_config, persona_from_config
from leadgen.email_builder import EmailBuilder
from leadgen.models import Lead, ScoredLead, SearchFilters
from leadgen.outputs.csv_writer import EXPORT_FILENAMES, read_export_csv, write_export
from leadgen.outputs.report import write_markdown_report
from leadgen.outputs.webhook import sync_webhook
from leadgen.run import build_enricher, build_scorer, run_pipeline
from leadgen.sources import FixtureSource
from leadgen.templates import TEMPLATE_TYPES, TONES

DEFAULT_CONFIG = "config/leadgen.yaml"


def _add_filter_args(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--keywords", default="", help="Match company name, description or industry")
    cmd.add_argument("--industry", default="")
    cmd.add_argument("--size", default="", help="Company size bucket, e.g. 51-200")
    cmd.add_argument("--country", default="")
    cmd.add_argument("--tech", action="append", default=[], help="Required technology (repeatable)")
    cmd.add_argument("--enrich", action="store_true", help="Enrich leads before scoring")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="leadgen", description="B2B lead search, scoring and outreach")
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="Path to YAML config")
    sub = parser.add_subparsers(dest="command", required=True)

    search_cmd = sub.add_parser("search", help="Search leads and show scores")
    _add_filter_args(search_cmd)

    score_cmd = sub.add_parser("score", help="Show the score breakdown for one lead")
    score_cmd.add_argument("lead_id")

    email_cmd = sub.add_parser("email", help="Generate outreach emails for one lead")
    email_cmd.add_argument("lead_id")
    email_cmd.add_argument("--type", dest="template_type", choices=TEMPLATE_TYPES, default=None)
    email_cmd.add_argument("--tone", choices=TONES, default="professional")

    enrich_cmd = sub.add_parser("enrich", help="Enrich one domain")
    enrich_cmd.add_argument("domain")
    enrich_cmd.add_argument("--email", default=None)

    export_cmd = sub.add_parser("export", help="Export scored leads")
    export_cmd.add_argument("--format", choices=sorted(EXPORT_FILENAMES) + ["markdown"], default="csv")
    export_cmd.add_argument("--output", default=None, help="Output file path")
    _add_filter_args(export_cmd)

    sync_cmd = sub.add_parser("sync", help="POST scored leads to a webhook")
    sync_cmd.add_argument("--webhook", default=None)
    _add_filter_args(sync_cmd)

    stats_cmd = sub.add_parser("stats", help="Show category counts of an exported CSV")
    stats_cmd.add_argument("csv_path")

    return parser


def _filters(args: argparse.Namespace) -> SearchFilters:
    return SearchFilters(
        keywords=args.keywords,
        industry=args.industry,
        company_size=args.size,
        country=args.country,
        tech_stack=list(args.tech),
    )


def _print_leads(console: Console, leads: list[ScoredLead]) -> None:
    table = Table(title="Leads")
    table.add_column("ID")
    table.add_column("Company")
    table.add_column("Industry")
    table.add_column("Size")
    table.add_column("Country")
    table.add_column("Score", justify="right")
    table.add_column("Category")
    for item in leads:
        table.add_row(
            item.lead.id,
            item.lead.company_name,
            item.lead.industry,
            item.lead.company_size,
            item.lead.country,
            str(item.score.display_score),
            item.score.category,
        )
    console.print(table)


def cmd_search(args: argparse.Namespace) -> int:
    result = run_pipeline(args.config, _filters(args), enrich=args.enrich)
    _print_leads(Console(), result["leads"])
    return 0


def _find_lead(console: Console, lead_id: str) -> Lead | None:
    try:
        return FixtureSource().get(lead_id)
    except KeyError:
        console.print(f"[red]No lead with id {lead_id!r}[/red]")
        return None


def cmd_score(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    console = Console()
    lead = _find_lead(console, args.lead_id)
    if lead is None:
        return 1
    score = build_scorer(config).score(lead)

    table = Table(title=f"{lead.company_name}: {score.display_score} ({score.category})")
    table.add_column("Factor")
    table.add_column("Score", justify="right")
    for name, value in score.factors.as_dict().items():
        table.add_row(name.replace("_", " "), f"{value:.1f}")
    console.print(table)
    for reason in score.reasoning:
        console.print(f"- {reason}")
    return 0


def cmd_email(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    persona = persona_from_config(config)
    console = Console()
    missing = persona.missing_fields()
    if missing:
        console.print(f"[red]Persona is missing required fields: {', '.join(missing)}[/red]")
        return 2

    lead = _find_lead(console, args.lead_id)
    if lead is None:
        return 1
    builder = EmailBuilder()
    if args.template_type:
        templates = [builder.generate(lead, persona, args.template_type, args.tone)]
    else:
        templates = builder.generate_all_tones(lead, persona)

    for template in templates:
        console.rule(f"{template.template_type} / {template.tone}")
        console.print(f"[bold]Subject:[/bold] {template.subject}")
        console.print(template.body, markup=False)
    return 0


def cmd_enrich(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    result = build_enricher(config).enrich(args.domain, args.email, enrichment_options_from_config(config))
    console = Console()
    if not result.success or result.data is None:
        console.print(f"[red]Enrichment failed: {result.error}[/red]")
        return 1

    table = Table(title=f"Enrichment: {args.domain}")
    table.add_column("Field")
    table.add_column("Value")
    for field_name, value in vars(result.data).items():
        if value is None:
            continue
        if field_name == "social_profiles":
            value = ", ".join(url for url in vars(value).values() if url)
        elif isinstance(value, list):
            value = ", ".join(value)
        table.add_row(field_name.replace("_", " "), str(value))
    console.print(table)
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    result = run_pipeline(args.config, _filters(args), enrich=args.enrich)
    out_dir = Path(result["config"]["output"]["dir"])
    if args.format == "markdown":
        path = write_markdown_report(args.output or str(out_dir / "lead-report.md"), result["leads"])
    else:
        path = write_export(args.format, args.output or str(out_dir / EXPORT_FILENAMES[args.format]), result["leads"])
    Console().print(f"Exported {len(result['leads'])} leads to {path}")
    return 0


def cmd_sync(args: argparse.Namespace) -> int:
    result = run_pipeline(args.config, _filters(args), enrich=args.enrich)
    url = args.webhook or result["config"]["output"]["webhook_url"]
    if not url:
        Console().print("[red]No webhook URL given[/red]")
        return 2
    ok = sync_webhook(url, result["leads"])
    Console().print(f"Synced {len(result['leads'])} leads" if ok else "Webhook sync failed")
    return 0 if ok else 1


def cmd_stats(csv_path: str) -> int:
    rows = read_export_csv(csv_path)

    table = Table(title="Lead Export Stats")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("CSV Path", csv_path)
    table.add_row("Total Leads", str(len(rows)))
    for category in ("High Potential", "Warm", "Cold", "Early-Stage"):
        table.add_row(category, str(sum(1 for row in rows if row.get("Score Category") == category)))
    Console().print(table)
    return 0


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    parser = _build_parser()
    args = parser.parse_args()

    handlers = {
        "search": cmd_search,
        "score": cmd_score,
        "email": cmd_email,
        "enrich": cmd_enrich,
        "export": cmd_export,
        "sync": cmd_sync,
    }
    if args.command in handlers:
        raise SystemExit(handlers[args.command](args))

    if args.command == "stats":
        raise SystemExit(cmd_stats(args.csv_path))

    raise SystemExit(1)
