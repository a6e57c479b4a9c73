"""CLI interface for domain analysis and valuation."""

import click
import logging
import warnings
from contextlib import nullcontext
from rich.console import Console
from rich.logging import RichHandler

# Suppress noisy library warnings/errors (socket, whois, dns)
warnings.filterwarnings("ignore")
logging.getLogger("whois").setLevel(logging.CRITICAL)
logging.getLogger("dns").setLevel(logging.CRITICAL)

from . import __version__
from .checkers import AnalysisService, DNSChecker, WhoisChecker
from .config import Settings, DEFAULT_CONFIG_PATH
from .exceptions import ConfigError, DomainValueError
from .output import Formatter, FORMATS
from .scoring import DomainScorer, ValuationEngine


console = Console()
err_console = Console(stderr=True)

format_option = click.option(
    '--format', '-f', 'output_format',
    type=click.Choice(FORMATS), default=None,
    help='Output format (default from config, else table)'
)


def setup_logging(level: str):
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True
    )


def clean_domain(domain: str) -> str:
    """Trim and lower-case a domain argument; blank input is a usage error."""
    cleaned = domain.strip().lower()
    if not cleaned:
        raise click.UsageError("Domain cannot be empty")
    return cleaned


def build_engine(settings: Settings) -> ValuationEngine:
    scorer = DomainScorer(
        suffix_premiums=settings.suffix_premiums,
        premium_words=settings.premium_words
    )
    return ValuationEngine(scorer=scorer)


@click.group()
@click.version_option(version=__version__)
@click.option('--config', '-c', 'config_path', default=DEFAULT_CONFIG_PATH, help='Path to YAML config')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, config_path, verbose):
    """domainvalue - Analyze and estimate the value of domain names."""
    try:
        settings = Settings.load(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e))

    setup_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@cli.command()
@click.argument('domain')
@format_option
@click.pass_obj
def analyze(settings, domain, output_format):
    """Check DNS, WHOIS, blockchain and tokenization data, then value a domain."""
    domain = clean_domain(domain)

    service = AnalysisService(
        dns_checker=DNSChecker(timeout=settings.dns_timeout, max_concurrent=settings.dns_max_concurrent),
        whois_checker=WhoisChecker(
            rate_limit_delay=settings.whois_rate_limit_delay,
            backoff_delay=settings.whois_backoff_delay
        ),
        engine=build_engine(settings)
    )

    try:
        formatter = Formatter(output_format or settings.output_format, console=console)
        status = console.status(f"[bold green]Analyzing {domain}...") if formatter.output_format == 'table' else nullcontext()
        with status:
            result = service.analyze(domain)
        formatter.display(result)
    except DomainValueError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.argument('domain')
@format_option
@click.pass_obj
def value(settings, domain, output_format):
    """Estimate a domain's value from its name alone."""
    domain = clean_domain(domain)
    engine = build_engine(settings)

    try:
        formatter = Formatter(output_format or settings.output_format, console=console)
    except DomainValueError as e:
        raise click.ClickException(str(e))

    formatter.display(engine.evaluate(domain))


def main():
    cli()


if __name__ == '__main__':
    main()
