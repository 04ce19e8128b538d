"""CLI for careernet."""

from datetime import datetime
import logging
from pathlib import Path

import click

from .matching.loader import job_from_dict, load_yaml, profile_from_dict
from .matching.scorer import calculate_job_match
from .network.builder import RelationshipGraph
from .network.config import DEFAULT_NETWORK_CONFIG
from .network.filters import filter_alumni, filter_influencers
from .network.loader import NetworkData, NetworkFileError, load_network
from .network.pathfinder import degree_counts, find_connection_path
from .network.types import Contact
from .referrals.timing import (
    ReferralStatus,
    calculate_optimal_referral_timing,
    should_follow_up,
)

network_option = click.option(
    "--network",
    "-n",
    "network_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="CAREERNET_NETWORK_FILE",
    required=True,
    help="YAML or JSON file with contacts and connections",
)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="CAREERNET_LOG_LEVEL",
    help="Logging verbosity",
)
def cli(log_level: str):
    """careernet - Networking and job-matching toolkit for job seekers."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load(network_file: Path) -> NetworkData:
    try:
        return load_network(network_file)
    except (FileNotFoundError, NetworkFileError) as exc:
        raise SystemExit(str(exc)) from exc


def _describe_contact(contact: Contact) -> str:
    details = [part for part in (contact.role, contact.company) if part]
    if details:
        return f"{contact.name} ({', '.join(details)})"
    return contact.name


@cli.command()
@network_option
@click.argument("target_id", type=str)
@click.option(
    "--max-degree",
    type=click.IntRange(1, DEFAULT_NETWORK_CONFIG.max_degree),
    default=DEFAULT_NETWORK_CONFIG.max_degree,
    help="Maximum degree of separation to search",
)
def path(network_file: Path, target_id: str, max_degree: int):
    """Find how you can reach a person through your contacts."""
    data = _load(network_file)
    result = find_connection_path(
        data.contacts,
        target_id,
        data.connections,
        people=data.people,
        max_degree=max_degree,
    )

    if result is None:
        click.echo(f"No connection to {target_id} within {max_degree} degrees.")
        return

    click.echo(f"Target: {_describe_contact(result.target)}")
    click.echo(f"Degree: {result.degree}")
    click.echo(f"Path:   {' -> '.join(result.path)}")
    click.echo(result.path_description)


@cli.command()
@network_option
@click.option(
    "--school",
    "-s",
    "schools",
    multiple=True,
    required=True,
    help="A school you attended (repeatable)",
)
def alumni(network_file: Path, schools: tuple[str, ...]):
    """List contacts who share a school with you."""
    data = _load(network_file)
    matches = filter_alumni(data.contacts, list(schools))

    click.echo(f"Found {len(matches)} alumni:\n")
    for contact in matches:
        year = f" ({contact.graduation_year})" if contact.graduation_year else ""
        click.echo(f"  {_describe_contact(contact)} - {contact.school}{year}")


@cli.command()
@network_option
@click.option(
    "--min-score",
    type=float,
    default=DEFAULT_NETWORK_CONFIG.min_influence_score,
    envvar="CAREERNET_MIN_INFLUENCE",
    help="Minimum influence score",
)
def influencers(network_file: Path, min_score: float):
    """List influencers and industry leaders, most influential first."""
    data = _load(network_file)
    ranked = filter_influencers(data.contacts, min_score)

    click.echo(f"Found {len(ranked)} influencers:\n")
    for i, contact in enumerate(ranked, 1):
        flags = []
        if contact.is_influencer:
            flags.append("influencer")
        if contact.is_industry_leader:
            flags.append("leader")
        click.echo(
            f"{i}. [{contact.effective_influence:g}] {_describe_contact(contact)} "
            f"({', '.join(flags)})"
        )


@cli.command()
@network_option
@click.option(
    "--save",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write the relationship graph as node-link JSON",
)
def stats(network_file: Path, save: Path | None):
    """Summarize the relationship graph and reach by degree."""
    data = _load(network_file)
    graph = RelationshipGraph.from_edges(data.connections)

    click.echo(str(graph.get_stats()))
    for degree, count in degree_counts(data.contacts, data.connections).items():
        click.echo(f"  Degree {degree}: {count}")

    if save:
        graph.save(save)
        click.echo(f"Saved graph: {save}")


@cli.command()
@network_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default="output/network.html",
    help="Where to write the HTML page",
)
@click.option("--highlight", type=str, default=None, help="Target id to highlight")
def visualize(network_file: Path, output: Path, highlight: str | None):
    """Render the contact network as an interactive HTML page."""
    from .network.visualize import create_web_visualization

    data = _load(network_file)
    highlighted = None
    if highlight:
        highlighted = find_connection_path(
            data.contacts, highlight, data.connections, people=data.people
        )
        if highlighted is None:
            click.echo(f"No connection to {highlight}; rendering without highlight.")

    written = create_web_visualization(
        data.contacts,
        data.connections,
        output,
        people=data.people,
        highlight=highlighted,
    )
    click.echo(f"Wrote {written}")


@cli.command("referral-timing")
@click.option(
    "--strength",
    type=click.IntRange(1, 5),
    required=True,
    help="Relationship strength from 1 (weak) to 5 (strong)",
)
@click.option("--last-contacted", type=click.DateTime(), default=None)
@click.option("--deadline", type=click.DateTime(), default=None)
@click.option("--job-created", type=click.DateTime(), required=True)
@click.option("--now", type=click.DateTime(), default=None, help="Reference time")
def referral_timing(
    strength: int,
    last_contacted: datetime | None,
    deadline: datetime | None,
    job_created: datetime,
    now: datetime | None,
):
    """Suggest when to send a referral request."""
    suggestion = calculate_optimal_referral_timing(
        strength, last_contacted, deadline, job_created, now=now
    )

    click.echo(f"Send:       {suggestion.optimal_send_time:%Y-%m-%d}")
    click.echo(f"Follow up:  {suggestion.follow_up_time:%Y-%m-%d}")
    click.echo(f"Confidence: {suggestion.confidence}")
    click.echo("\nReasoning:")
    for reason in suggestion.reasoning:
        click.echo(f"  - {reason}")


@cli.command("follow-up")
@click.option(
    "--status",
    type=click.Choice([s.value for s in ReferralStatus]),
    required=True,
)
@click.option("--sent-at", type=click.DateTime(), default=None)
@click.option("--now", type=click.DateTime(), default=None, help="Reference time")
def follow_up(status: str, sent_at: datetime | None, now: datetime | None):
    """Check whether a referral request needs a follow-up."""
    decision = should_follow_up(status, sent_at, now=now)
    verdict = "yes" if decision.should_follow_up else "no"
    click.echo(f"Follow up: {verdict} - {decision.reason}")


@cli.command()
@click.argument("job_file", type=click.Path(exists=True, path_type=Path))
@click.argument("profile_file", type=click.Path(exists=True, path_type=Path))
def match(job_file: Path, profile_file: Path):
    """Score how well a job posting matches your profile."""
    try:
        job = job_from_dict(load_yaml(job_file))
        profile = profile_from_dict(load_yaml(profile_file))
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    result = calculate_job_match(job, profile)

    click.echo(f"Overall:    {result.overall_score}")
    click.echo(f"Skills:     {result.skills_score}")
    click.echo(f"Experience: {result.experience_score}")
    click.echo(f"Education:  {result.education_score}")
    click.echo(f"Location:   {result.location_score}")
    for title, lines in (
        ("Strengths", result.strengths),
        ("Gaps", result.gaps),
        ("Recommendations", result.recommendations),
    ):
        if lines:
            click.echo(f"\n{title}:")
            for line in lines:
                click.echo(f"  - {line}")


if __name__ == "__main__":
    cli()
