"""
Console report: win rates and best streaks per character and combined.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import CHARACTER_LABELS, CHARACTERS, DEFAULT_ASCENSION_LEVEL
from .dates import format_spire_date, parse_spire_date
from .errors import RunStatsError
from .predicates import filter_ascension
from .records import RunRecord
from .run_source import RunSource, load_runs
from .streaks import longest_rotating_streak, longest_streak, sort_by_longest_winstreaks, summarize_streaks
from .win_rate import WinRateSummary, ascension_win_rate

logger = logging.getLogger(__name__)


@dataclass
class StreakReport:
    label: str
    length: int = 0
    dates: List[str] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class SectionReport:
    title: str
    ascension_level: int
    win_rate: Optional[WinRateSummary] = None
    win_rate_error: Optional[str] = None
    streak: Optional[StreakReport] = None


class ReportGenerator:
    """
    Builds and prints the report for a run source.

    Run collections are loaded the first time a character is needed and kept
    for the lifetime of the generator.
    """

    def __init__(self, source: RunSource, characters: Sequence[str] = CHARACTERS,
                 ascension_level: int = DEFAULT_ASCENSION_LEVEL,
                 console: Optional[Console] = None):
        self.source = source
        self.characters = list(characters)
        self.ascension_level = ascension_level
        self.console = console or Console(highlight=False)
        self._runs: Dict[str, List[RunRecord]] = {}

    def runs_for(self, character: str) -> List[RunRecord]:
        if character not in self._runs:
            self._runs[character] = load_runs(self.source, character)
        return self._runs[character]

    def all_runs(self) -> List[RunRecord]:
        runs: List[RunRecord] = []
        for character in self.characters:
            runs.extend(self.runs_for(character))
        return runs

    def _win_rate(self, section: SectionReport, runs: List[RunRecord]) -> None:
        try:
            section.win_rate = ascension_win_rate(runs, self.ascension_level)
        except RunStatsError as e:
            logger.warning(f"{section.title}: win rate unavailable: {e.message}")
            section.win_rate_error = e.message

    @staticmethod
    def _streak(label: str, find_streak, runs: List[RunRecord]) -> StreakReport:
        try:
            streak = find_streak(runs)
            return StreakReport(
                label=label,
                length=len(streak),
                dates=[format_spire_date(run.local_time) for run in streak],
            )
        except RunStatsError as e:
            logger.warning(f"{label}: streak unavailable: {e.message}")
            return StreakReport(label=label, error=e.message)

    def combined_section(self) -> SectionReport:
        runs = self.all_runs()
        section = SectionReport(title="Combined", ascension_level=self.ascension_level)
        self._win_rate(section, runs)

        ascension_runs = filter_ascension(runs, self.ascension_level)
        section.streak = self._streak(
            f"The longest rotating A{self.ascension_level} winstreak is",
            longest_rotating_streak,
            ascension_runs,
        )
        return section

    def character_section(self, character: str) -> SectionReport:
        runs = self.runs_for(character)
        section = SectionReport(
            title=CHARACTER_LABELS.get(character, character),
            ascension_level=self.ascension_level,
        )
        self._win_rate(section, runs)
        section.streak = self._streak("The longest streak is", longest_streak, runs)
        return section

    def build(self) -> List[SectionReport]:
        sections = [self.combined_section()]
        sections.extend(self.character_section(character) for character in self.characters)
        return sections

    def render(self, sections: List[SectionReport]) -> None:
        for section in sections:
            render_section(section, self.console)

    def run(self) -> List[SectionReport]:
        sections = self.build()
        self.render(sections)
        return sections


def render_section(section: SectionReport, console: Console) -> None:
    """Print one report section."""
    console.print("")
    console.print(f"[bold]------- {section.title} win rate. -------[/bold]")

    if section.win_rate is not None:
        console.print(f"Total A{section.ascension_level} Runs: {section.win_rate.total}")
        console.print(f"WinRate: {section.win_rate.win_rate_percent:.1f}%")
    else:
        console.print(f"[yellow]{escape(section.win_rate_error)}[/yellow]")
    console.print("")

    streak = section.streak
    if streak is None:
        return
    if streak.error is not None:
        console.print(f"[red]Could not compute streak: {escape(streak.error)}[/red]")
        return

    console.print(f"{streak.label}: {streak.length}")
    if streak.dates:
        console.print("The streak happened on these dates:")
        for date in streak.dates:
            console.print(date)
    else:
        console.print("[yellow]No winning streak found.[/yellow]")


def render_streak_table(character: str, runs: List[RunRecord], console: Console) -> Dict:
    """
    Print every win streak for a set of runs, longest first, plus a summary.

    Returns:
        The streak summary from summarize_streaks
    """
    streaks = sort_by_longest_winstreaks(runs)
    summary = summarize_streaks(streaks)

    table = Table(title=f"{CHARACTER_LABELS.get(character, character)} Win Streaks", box=box.ROUNDED)
    table.add_column("Length", style="magenta", justify="right")
    table.add_column("First Win", style="cyan")
    table.add_column("Last Win", style="cyan")

    for streak in reversed(streaks):
        first = parse_spire_date(streak[0].local_time)
        last = parse_spire_date(streak[-1].local_time)
        table.add_row(str(len(streak)), f"{first:%Y-%m-%d %H:%M}", f"{last:%Y-%m-%d %H:%M}")

    console.print(table)

    summary_table = Table(title="Streak Summary", box=box.ROUNDED)
    summary_table.add_column("Metric", style="cyan", no_wrap=True)
    summary_table.add_column("Value", style="magenta")
    summary_table.add_row("Total Streaks", str(summary['total_streaks']))
    summary_table.add_row("Total Wins", str(summary['total_wins']))
    summary_table.add_row("Maximum Length", str(summary['max_length']))
    summary_table.add_row("Average Length", f"{summary['avg_length']:.1f}")
    console.print(summary_table)

    return summary
