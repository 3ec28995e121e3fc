"""
Command-line interface for fleet resolution.
Provides commands for listing fleet options, categories and vehicle lookups.
"""

import asyncio
import logging
import os

import click

from .service import FleetResolverService
from .models import ServiceType


logger = logging.getLogger(__name__)

SERVICE_TYPES = [t.value for t in ServiceType]


@click.group()
@click.option('--config', default=None, help='Configuration file path (default: bundled params.yaml)')
@click.option('--latency-ms', type=int, default=None, help='Override simulated resolver latency')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def main(ctx, config: str, latency_ms: int, verbose: bool):
    """Fleet Resolver CLI."""
    # Setup logging
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Store options in context
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config
    ctx.obj['latency_ms'] = latency_ms


def _build_service(ctx) -> FleetResolverService:
    try:
        return FleetResolverService(ctx.obj['config_path'], latency_ms=ctx.obj['latency_ms'])
    except Exception as e:
        logger.error(f"Failed to start resolver: {e}")
        raise click.ClickException(str(e))


@main.command()
@click.argument('service_type', type=click.Choice(SERVICE_TYPES))
@click.argument('sub_option', required=False)
@click.pass_context
def options(ctx, service_type: str, sub_option: str):
    """Show ranked vehicle options for a selection."""
    service = _build_service(ctx)

    offers = asyncio.run(service.get_fleet_options(service_type, sub_option))

    if not offers:
        click.echo(f"No vehicles available for {service_type} / {sub_option or '-'}.")
        return

    click.echo(f"Fleet options for {service_type} / {sub_option}:")
    for i, offer in enumerate(offers):
        was = f" (was {offer.original_price:.0f})" if offer.original_price is not None else ""
        badge = f" [{offer.badge.value}]" if offer.badge else ""
        click.echo(f"\n  {i+1}. {offer.icon} {offer.name}{badge}")
        click.echo(f"     {offer.description} - capacity {offer.capacity}")
        click.echo(f"     Price: {offer.price:.0f}{was}  ETA: {offer.eta}")
        click.echo(f"     Id: {offer.id}")


@main.command(name='sub-options')
@click.argument('service_type', type=click.Choice(SERVICE_TYPES))
@click.pass_context
def sub_options(ctx, service_type: str):
    """List sub-option keys for a service type."""
    service = _build_service(ctx)

    keys = service.list_sub_options(service_type)
    if not keys:
        click.echo(f"No sub-options configured for {service_type}.")
        return
    for key in keys:
        click.echo(key)


@main.command()
@click.argument('identifier')
@click.pass_context
def describe(ctx, identifier: str):
    """Show the display name and icon for a vehicle id."""
    service = _build_service(ctx)

    info = service.describe_vehicle(identifier)
    click.echo(f"{info.icon} {info.name}")


@main.command()
@click.pass_context
def categories(ctx):
    """List send-screen categories and where they lead."""
    service = _build_service(ctx)

    for category in service.list_categories():
        destination = service.resolve_category(category.id)
        if destination is None:
            target = "(not available)"
        elif destination.service_type:
            target = f"{destination.route} [{destination.service_type.value}]"
        else:
            target = destination.route
        click.echo(f"{category.icon} {category.label:<18} {category.id:<15} -> {target}")


@main.command()
@click.option('--host', default='0.0.0.0', help='Bind address')
@click.option('--port', default=8000, type=int, help='Bind port')
@click.pass_context
def serve(ctx, host: str, port: int):
    """Start the FastAPI server."""
    # The reloader imports the app afresh; hand overrides over via the environment
    if ctx.obj['config_path']:
        os.environ['FLEET_CONFIG_PATH'] = ctx.obj['config_path']
    if ctx.obj['latency_ms'] is not None:
        os.environ['FLEET_SIMULATED_LATENCY_MS'] = str(ctx.obj['latency_ms'])

    try:
        import uvicorn

        click.echo("Starting Fleet Resolver API server...")
        click.echo(f"API documentation: http://localhost:{port}/docs")

        uvicorn.run("fleet_resolver.api:app", host=host, port=port, reload=True)

    except ImportError:
        raise click.ClickException("uvicorn not installed. Run: pip install uvicorn")
    except Exception as e:
        logger.error(f"Server failed to start: {e}")
        raise click.ClickException(str(e))


if __name__ == '__main__':
    main()
