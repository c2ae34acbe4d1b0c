# LinkCanon — CLI (Typer)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import typer
from typing import List, Optional
from rich import print
from rich.markup import escape as escape_markup

from .config import Settings
from .core.domains import domain_from_url, domain_from_url_no_filtering
from .core.linkedin import extract_linkedin_slug, linkedin_url_cleaner_err
from .core.urn import entity_urn, urn_extractor
from .errors import LinkCanonError, NotLinkedInURLError
from .logging_config import configure_logging
from .utils.urls import extract_host_and_path, generate_url_combinations

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main_callback(
	log_level: Optional[str] = typer.Option(None, help="Log level (overrides env)"),
	log_dir: Optional[str] = typer.Option(None, help="Also write a rotating log file here (overrides env)"),
):
	cfg = Settings()
	configure_logging(level=log_level or cfg.log_level, log_dir=log_dir or cfg.log_dir)


@app.command()
def clean(
	url: List[str] = typer.Argument(..., help="LinkedIn URL(s) to clean"),
	escape: bool = typer.Option(False, help="Percent-encode the handle"),
):
	"""Clean LinkedIn URL(s) down to scheme, host, type and handle."""
	failed = False
	for u in url:
		try:
			print(escape_markup(linkedin_url_cleaner_err(u, escape)))
		except NotLinkedInURLError as e:
			failed = True
			print(f"[red]{e}:[/red] {escape_markup(e.value)}")
	if failed:
		raise typer.Exit(code=1)


@app.command()
def slug(value: List[str] = typer.Argument(..., help="LinkedIn URL(s) or free text")):
	"""Extract LinkedIn handle(s)."""
	for v in value:
		print(escape_markup(extract_linkedin_slug(v)))


@app.command()
def urn(
	value: str = typer.Argument(..., help="LinkedIn URN"),
	strict: bool = typer.Option(False, help="Require the (profile id, auth type, auth token) form"),
):
	"""Extract the id from a URN, or parse the full tuple with --strict."""
	if not strict:
		print(escape_markup(urn_extractor(value)))
		return
	try:
		parsed = entity_urn(value)
	except LinkCanonError as e:
		print(f"[red]{escape_markup(str(e))}[/red]")
		raise typer.Exit(code=1)
	print({"profile_id": parsed.profile_id, "auth_type": parsed.auth_type, "auth_token": parsed.auth_token})


@app.command()
def domain(
	value: List[str] = typer.Argument(..., help="URL(s) or hostname(s)"),
	no_filtering: bool = typer.Option(False, help="Skip shortener resolution and public-domain filtering"),
	timeout: Optional[float] = typer.Option(None, help="HTTP timeout for shortener lookups (seconds)"),
):
	"""Print the registrable domain (eTLD+1) of each value."""
	for v in value:
		if not no_filtering:
			print(escape_markup(domain_from_url(v, timeout=timeout)))
			continue
		try:
			print(escape_markup(domain_from_url_no_filtering(v)))
		except LinkCanonError as e:
			print(f"[red]{escape_markup(str(e))}[/red]")


@app.command()
def combinations(url: str = typer.Argument(..., help="URL to expand")):
	"""Print the canonical key and the 8 scheme/www/slash variants of a URL."""
	print(f"[bold]{escape_markup(extract_host_and_path(url))}[/bold]")
	for c in generate_url_combinations(url):
		print(escape_markup(c))


@app.command("print-config")
def print_config():
	"""Print effective configuration from environment."""
	cfg = Settings()
	print(cfg.model_dump())


def main():
	app()


if __name__ == "__main__":
	main()
