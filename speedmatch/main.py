from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.table import Table

from .connections import ConnectionStore
from .directory import ProfileDirectory
from .exceptions import SpeedMatchError
from .logger import setup_logging
from .matching_models import MatchLevel, MatchResult
from .recommender import SORT_KEYS, filter_by_level, rank_candidates, sort_matches
from .scan import ScanSession
from .scoring import compute_match
from .settings import Settings


app = typer.Typer(help="Speed networking match CLI")
connections_app = typer.Typer(help="Manage saved connections")
app.add_typer(connections_app, name="connections")

LEVEL_STYLES = {
	MatchLevel.EXCELLENT: "green",
	MatchLevel.GOOD: "yellow",
	MatchLevel.POTENTIAL: "red",
}


@dataclass
class AppContext:
	settings: Settings

	def directory(self) -> ProfileDirectory:
		if self.settings.profiles_path is not None:
			return ProfileDirectory.from_file(self.settings.profiles_path)
		return ProfileDirectory.sample()

	def store(self) -> ConnectionStore:
		return ConnectionStore(self.settings.connections_path)


def _fail(err: SpeedMatchError) -> typer.Exit:
	print(f"[red]Error:[/red] {err.message}")
	return typer.Exit(code=1)


def _parse_level(level: Optional[str]) -> Optional[MatchLevel]:
	# name lookup so the LOW alias is accepted alongside the real members
	if level is None:
		return None
	try:
		return MatchLevel[level.strip().upper()]
	except KeyError:
		names = ", ".join(name.lower() for name in MatchLevel.__members__)
		print(f"[red]Error:[/red] --level must be one of {names}")
		raise typer.Exit(code=2)


def _render_match(result: MatchResult, title: str) -> None:
	style = LEVEL_STYLES[result.match_level]
	print(f"[bold]{title}[/bold]")
	print(f"  score: [{style}]{result.score}[/{style}]  ({result.match_level.label})")
	if result.reasons:
		for reason in result.reasons:
			print(f"  - {reason}")
	else:
		print("  - no shared factors")


@app.callback()
def main(
	ctx: typer.Context,
	profiles: Optional[Path] = typer.Option(None, "--profiles", help="Attendee data (.json/.csv); defaults to the bundled sample"),
	connections: Optional[Path] = typer.Option(None, "--connections", help="Connection store JSON file"),
	log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ERROR"),
):
	"""Score attendees against each other and keep track of connections."""
	try:
		settings = Settings.from_env()
	except SpeedMatchError as e:
		raise _fail(e)
	overrides = {}
	if profiles is not None:
		overrides["profiles_path"] = profiles
	if connections is not None:
		overrides["connections_path"] = connections
	if log_level is not None:
		overrides["log_level"] = log_level
	settings = replace(settings, **overrides)
	try:
		setup_logging(settings.log_level)
	except SpeedMatchError as e:
		raise _fail(e)
	ctx.obj = AppContext(settings=settings)


@app.command()
def match(
	ctx: typer.Context,
	first_id: str = typer.Argument(..., help="Participant id of the first attendee"),
	second_id: str = typer.Argument(..., help="Participant id of the second attendee"),
):
	"""Score two attendees."""
	app_ctx: AppContext = ctx.obj
	try:
		directory = app_ctx.directory()
		a = directory.require(first_id)
		b = directory.require(second_id)
		result = compute_match(a, b, app_ctx.settings.match_config())
	except SpeedMatchError as e:
		raise _fail(e)
	_render_match(result, f"{a.name} ↔ {b.name}")


@app.command()
def directory(
	ctx: typer.Context,
	user: str = typer.Option(..., "--user", help="Participant id of the current user"),
	level: Optional[str] = typer.Option(None, "--level", help="Only show one tier: excellent, good, potential (or low)"),
	sort: str = typer.Option("match", "--sort", help="Sort by 'match', 'name' or 'company'"),
	query: Optional[str] = typer.Option(None, "--query", help="Free-text search"),
	top: Optional[int] = typer.Option(None, "--top", help="Show at most this many rows"),
):
	"""List attendees ranked against the current user."""
	app_ctx: AppContext = ctx.obj
	if sort not in SORT_KEYS:
		print(f"[red]Error:[/red] --sort must be one of {', '.join(SORT_KEYS)}")
		raise typer.Exit(code=2)
	tier = _parse_level(level)
	try:
		people = app_ctx.directory()
		current = people.require(user)
		config = app_ctx.settings.match_config()
	except SpeedMatchError as e:
		raise _fail(e)
	candidates = people.search(query) if query else people.all()
	ranked = rank_candidates(current, candidates, config)
	ranked = sort_matches(filter_by_level(ranked, tier), sort)
	if top is not None:
		ranked = ranked.head(top)

	table = Table("id", "name", "role", "company", "score", "level", "reasons")
	for _, r in ranked.iterrows():
		style = LEVEL_STYLES[MatchLevel(r["match_level"])]
		table.add_row(
			str(r["id"]),
			str(r["name"]),
			str(r["role"]),
			str(r["company"]),
			f"[{style}]{r['match_score']}[/{style}]",
			str(r["match_level"]),
			", ".join(r["reasons"]),
		)
	print(table)
	print(f"[bold]{len(ranked)} attendees[/bold]")


@app.command()
def scan(
	ctx: typer.Context,
	code: str = typer.Argument(..., help="Decoded badge text, e.g. XRNODE:p003"),
	user: str = typer.Option(..., "--user", help="Participant id of the current user"),
	connect: bool = typer.Option(False, "--connect/--no-connect", help="Save the connection after scoring"),
):
	"""Resolve a scanned badge and score it against the current user."""
	app_ctx: AppContext = ctx.obj
	try:
		people = app_ctx.directory()
		current = people.require(user)
		with ScanSession(people, current, app_ctx.settings.match_config(), app_ctx.settings.qr_prefix) as session:
			outcome = session.scan(code)
	except SpeedMatchError as e:
		raise _fail(e)
	profile = outcome.profile
	_render_match(outcome.match, f"{profile.name} · {profile.role} @ {profile.company}")
	if connect:
		conn = app_ctx.store().save(profile, outcome.match.score)
		print(f"[green]Connected[/green] ({conn.id})")


@connections_app.command("list")
def list_connections(
	ctx: typer.Context,
	sort: str = typer.Option("date", "--sort", help="Sort by 'date' or 'score'"),
):
	"""Show saved connections."""
	store = ctx.obj.store()
	if sort == "score":
		items = store.sorted_by_score()
	elif sort == "date":
		items = store.sorted_by_date()
	else:
		print("[red]Error:[/red] --sort must be 'date' or 'score'")
		raise typer.Exit(code=2)
	table = Table("id", "name", "company", "score", "connected", "appreciations")
	for c in items:
		table.add_row(
			c.id,
			c.profile.name,
			c.profile.company,
			str(c.match_score),
			c.connected_at.strftime("%Y-%m-%d %H:%M"),
			str(c.appreciation_count),
		)
	print(table)
	print(f"[bold]{len(items)} connections[/bold]")


@connections_app.command()
def appreciate(ctx: typer.Context, profile_id: str = typer.Argument(..., help="Participant id")):
	"""Send appreciation to a connection."""
	conn = ctx.obj.store().send_appreciation(profile_id)
	if conn is None:
		print(f"[red]Error:[/red] Not connected to {profile_id}")
		raise typer.Exit(code=1)
	print(f"[green]Appreciated[/green] {conn.profile.name} ({conn.appreciation_count})")


@connections_app.command()
def remove(ctx: typer.Context, connection_id: str = typer.Argument(..., help="Connection id")):
	"""Delete a connection."""
	if not ctx.obj.store().remove(connection_id):
		print(f"[red]Error:[/red] No connection {connection_id}")
		raise typer.Exit(code=1)
	print(f"[green]Removed[/green] {connection_id}")


@connections_app.command()
def export(
	ctx: typer.Context,
	out_path: Optional[Path] = typer.Option(None, "--out", help="Write JSON here instead of stdout"),
):
	"""Export connections as JSON."""
	payload = ctx.obj.store().export_json()
	if out_path:
		out_path.write_text(payload, encoding="utf-8")
		print(f"[green]Saved connections to[/green] {out_path}")
	else:
		typer.echo(payload)


@connections_app.command()
def clear(ctx: typer.Context):
	"""Remove every saved connection."""
	ctx.obj.store().clear()
	print("[green]Cleared connections[/green]")


if __name__ == "__main__":
	app()
