"""CLI for manual refreshes and cache inspection."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from datetime import UTC, datetime

import click
import redis.asyncio as redis

from homework_feed_core.errors import FeedError
from homework_feed_core.freshness import RefreshSchedule
from homework_feed_core.schemas import RefreshTrigger

from .config import settings

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


@click.group()
def cli() -> None:
    """Zhixue homework calendar CLI."""


@cli.command("refresh")
@click.option("--json-output", is_flag=True, help="Output as JSON")
def refresh(json_output: bool) -> None:
    """Fetch homework and overwrite the cached calendar."""
    from .pipeline.refresh_job import run_refresh

    outcome = asyncio.run(run_refresh(RefreshTrigger.MANUAL))
    if json_output:
        click.echo(json.dumps(outcome.model_dump(mode="json"), indent=2))
    else:
        click.echo(
            f"Status: {outcome.status.value} | Items: {outcome.item_count} | "
            f"Duration: {outcome.duration_ms}ms"
        )
        if outcome.error:
            click.echo(f"Error: {outcome.error}", err=True)
    if not outcome.success:
        sys.exit(1)


@cli.command("status")
def status() -> None:
    """Show the refresh schedule and whether the cached calendar is fresh."""
    from homework_feed_store.artifact_store import ArtifactStore
    from homework_feed_store.redis_client import RedisKeyValueStore

    schedule = RefreshSchedule(settings.refresh_hours)
    now = datetime.now(tz=UTC)

    async def _run():  # type: ignore[return]
        client = redis.from_url(settings.redis_url, decode_responses=True)
        try:
            store = ArtifactStore(RedisKeyValueStore(client))
            return await store.load()
        finally:
            await client.aclose()

    generation = asyncio.run(_run())
    hours = ", ".join(f"{h:02d}:00" for h in schedule.hours)
    click.echo(f"Schedule (UTC): {hours}")
    click.echo(f"Last scheduled: {schedule.last_scheduled_instant(now):%Y-%m-%d %H:%M}Z")
    click.echo(f"Next scheduled: {schedule.next_scheduled_instant(now):%Y-%m-%d %H:%M}Z")
    if generation is None:
        click.echo("Cache: empty or incomplete")
        return
    meta = generation.metadata
    fresh = schedule.is_fresh(meta.last_updated, now)
    current = generation.deployment_marker == settings.deployment_marker
    click.echo(f"Last updated: {meta.last_updated.isoformat()} | Items: {meta.item_count}")
    click.echo(
        f"Deployment: {generation.deployment_marker}"
        f" ({'current' if current else f'expected {settings.deployment_marker}'})"
    )
    click.echo(f"Cache: {'FRESH' if fresh and current else 'STALE'}")


@cli.command("fetch")
@click.option("--ics", "as_ics", is_flag=True, help="Print the rendered calendar")
@click.option("--json-output", is_flag=True, help="Output items as JSON")
def fetch(as_ics: bool, json_output: bool) -> None:
    """Fetch homework without touching the cache."""
    from .zhixue.producer import ZhixueFeedProducer

    async def _run():  # type: ignore[return]
        producer = ZhixueFeedProducer()
        try:
            items = await producer.fetch_homework()
            return items, producer.serialize(items)
        finally:
            await producer.close()

    try:
        items, text = asyncio.run(_run())
    except FeedError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if as_ics:
        click.echo(text)
    elif json_output:
        click.echo(json.dumps([i.model_dump(mode="json") for i in items], indent=2, ensure_ascii=False))
    else:
        if not items:
            click.echo("No homework found.")
            return
        click.echo(f"\nFound {len(items)} assignment(s):\n")
        for i, item in enumerate(items, 1):
            click.echo(
                f"  {i}. [{item.subject}] {item.title} | due {item.due_at:%Y-%m-%d %H:%M} | "
                f"{item.state_name}"
            )


if __name__ == "__main__":
    cli()
