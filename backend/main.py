import argparse

from rich.console import Console
from rich.table import Table

from progress_dashboard.core.utils import now
from progress_dashboard.db.seed_data import load_challenges
from progress_dashboard.models.challenge import FilterState
from progress_dashboard.services.challenge_filters import SORT_KEYS
from progress_dashboard.services.dashboard import build_challenge_detail, build_dashboard
from progress_dashboard.services.progress_table import export_table

console = Console()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Challenge progress dashboard")
    parser.add_argument("--status", default="all")
    parser.add_argument("--category", default="all")
    parser.add_argument("--difficulty", default="all")
    parser.add_argument("--priority", default="all")
    parser.add_argument("--tag", action="append", default=[], dest="tags")
    parser.add_argument("--search", default="")
    parser.add_argument("--sort-by", default="start_date", choices=list(SORT_KEYS))
    parser.add_argument("--sort-order", default="desc", choices=["asc", "desc"])
    parser.add_argument("--detail", metavar="CHALLENGE_ID", help="show one challenge")
    parser.add_argument("--export", choices=["xlsx", "csv"], help="export the detail table")
    return parser.parse_args(argv)


def render_dashboard(view) -> None:
    stats = view.statistics
    console.print(
        f"[bold]{stats.total_challenges}[/bold] challenges · "
        f"{stats.active_challenges} active · {stats.pending_challenges} pending · "
        f"{stats.completed_challenges} completed · "
        f"{stats.completion_rate:.1f}% completion rate"
    )

    table = Table(title=f"Challenges ({view.result_count})")
    columns = ("Title", "Category", "Difficulty", "Priority", "Status", "Start", "End", "Days left", "Progress")
    for column in columns:
        table.add_column(column)
    for card in view.cards:
        c, p = card.challenge, card.progress
        # Barre de la carte : progression déclarée (completed_days)
        progress = p.manual_progress_percent or 0.0
        table.add_row(
            c.title, c.category, c.difficulty, c.priority, c.status,
            p.start_date_display, p.end_date_display,
            str(p.display_days_remaining), f"{progress:.0f}%",
        )
    console.print(table)


def render_detail(view) -> None:
    p = view.progress
    console.print(f"[bold]{view.challenge.title}[/bold]: {view.challenge.description}")
    console.print(
        f"{view.challenge.total_days} total days · {p.days_elapsed} elapsed · "
        f"{p.display_days_remaining} remaining · {p.time_progress_percent:.1f}% complete"
    )
    if p.manual_progress_percent is not None:
        console.print(f"Tracked progress: {p.manual_progress_percent:.1f}%")

    if not view.table:
        return
    table = Table()
    for column in view.table[0]:
        table.add_column(str(column))
    for row in view.table[1:]:
        table.add_row(*(str(cell) for cell in row))
    console.print(table)


def main(argv=None) -> None:
    args = parse_args(argv)
    challenges = load_challenges()
    current = now()

    if args.detail:
        view = build_challenge_detail(challenges, args.detail, current)
        render_detail(view)
        if args.export:
            path = export_table(view.table, view.export_filename, args.export)
            console.print(f"✅ Exported to {path}")
        return

    filters = FilterState(
        status=args.status,
        category=args.category,
        difficulty=args.difficulty,
        priority=args.priority,
        tags=args.tags,
        search=args.search,
        sort_by=args.sort_by,
        sort_order=args.sort_order,
    )
    render_dashboard(build_dashboard(challenges, filters, current))


if __name__ == "__main__":
    main()
