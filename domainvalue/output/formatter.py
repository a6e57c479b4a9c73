"""Table and JSON rendering of analysis results."""

import json
from datetime import datetime
from typing import Optional, Union
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from ..checkers import AnalysisResult
from ..scoring import ValuationResult, Confidence
from ..exceptions import UnsupportedFormatError


FORMATS = ('table', 'json')

CONFIDENCE_STYLES = {
    Confidence.HIGH: "green",
    Confidence.MEDIUM: "yellow",
    Confidence.LOW: "red",
}


def _status(available: Optional[bool]) -> str:
    if available is None:
        return "[yellow]Unknown[/yellow]"
    return "[green]Available[/green]" if available else "[red]Taken[/red]"


def _check(flag: bool) -> str:
    return "[green]Yes[/green]" if flag else "[red]No[/red]"


def _date(value: Optional[datetime]) -> str:
    return value.strftime("%Y-%m-%d") if value else "-"


def _section(title: str) -> Table:
    table = Table(title=title, title_justify="left", show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="bold")
    table.add_column("Value")
    return table


class Formatter:
    """Renders results as a labelled report or as JSON."""

    def __init__(self, output_format: str = "table", console: Optional[Console] = None):
        if output_format not in FORMATS:
            raise UnsupportedFormatError(f"unsupported format: {output_format}")
        self.output_format = output_format
        self.console = console or Console()

    @staticmethod
    def render_json(result: Union[AnalysisResult, ValuationResult]) -> str:
        return json.dumps(result.to_dict(), indent=2)

    def display(self, result: Union[AnalysisResult, ValuationResult]):
        if self.output_format == 'json':
            self.console.out(self.render_json(result), highlight=False)
            return

        if isinstance(result, ValuationResult):
            self.console.print(self.valuation_table(result))
        else:
            self.display_analysis(result)

    def display_analysis(self, result: AnalysisResult):
        self.console.print("\n[bold]DOMAIN ANALYSIS REPORT[/bold]")
        self.console.print(f"[bold]Domain:[/bold]   {escape(result.domain)}")
        self.console.print(f"[bold]Analyzed:[/bold] {result.timestamp.strftime('%Y-%m-%d %H:%M:%S %Z')}\n")

        if result.dns_availability is not None:
            self.console.print(self.dns_table(result))
        if result.blockchain_data is not None:
            self.console.print(self.blockchain_table(result))
        if result.tokenization_data is not None:
            self.console.print(self.tokenization_table(result))
        if result.whois_data is not None:
            self.console.print(self.whois_table(result))
        if result.valuation_data is not None:
            self.console.print(self.valuation_table(result.valuation_data))

    def dns_table(self, result: AnalysisResult) -> Table:
        dns = result.dns_availability
        table = _section("DNS AVAILABILITY")
        table.add_row("Status", _status(dns.available))
        table.add_row("TLD", escape(dns.tld or "-"))
        if dns.has_records:
            table.add_row("Records", ", ".join(dns.record_types))
        if dns.error:
            table.add_row("Error", escape(dns.error))
        return table

    def blockchain_table(self, result: AnalysisResult) -> Table:
        chain = result.blockchain_data
        table = _section("BLOCKCHAIN DATA")
        table.add_row("Status", _status(chain.available))
        table.add_row("Type", escape(chain.type or "-"))
        if chain.owner:
            table.add_row("Owner", escape(chain.owner))
        if chain.resolver:
            table.add_row("Resolver", escape(chain.resolver))
        for key, value in sorted(chain.records.items()):
            table.add_row(f"  {escape(key)}", escape(value))
        if chain.expiry_date:
            table.add_row("Expires", _date(chain.expiry_date))
        if chain.error:
            table.add_row("Error", escape(chain.error))
        return table

    def tokenization_table(self, result: AnalysisResult) -> Table:
        tokens = result.tokenization_data
        table = _section("TOKENIZATION (DOMA)")
        table.add_row("Tokenized", _check(tokens.is_tokenized))
        if tokens.tokenization_chain:
            table.add_row("Chain", escape(tokens.tokenization_chain))
        if tokens.doma_record:
            table.add_row("Token ID", escape(tokens.doma_record.token_id))
            table.add_row("Sync Status", tokens.doma_record.sync_status)
        if tokens.token_rights:
            rights = tokens.token_rights
            table.add_row("Token Rights", f"{rights.available}/{rights.total} available, {rights.locked} locked")
        if tokens.defi_status and tokens.defi_status.is_collateral:
            defi = tokens.defi_status
            table.add_row(
                "DeFi Collateral",
                f"${defi.collateral_value:,.2f} on {escape(defi.lending_platform or '-')} (${defi.borrowed_amount:,.2f} borrowed)"
            )
        if tokens.cross_chain_data:
            table.add_row("Chains", ", ".join(sorted(tokens.cross_chain_data)))
        if tokens.error:
            table.add_row("Error", escape(tokens.error))
        return table

    def whois_table(self, result: AnalysisResult) -> Table:
        whois = result.whois_data
        table = _section("WHOIS DATA")
        table.add_row("Status", _status(whois.available))
        if whois.registrar:
            table.add_row("Registrar", escape(whois.registrar))
        if whois.registration_date:
            table.add_row("Created", _date(whois.registration_date))
        if whois.expiry_date:
            table.add_row("Expires", _date(whois.expiry_date))
        if whois.updated_date:
            table.add_row("Updated", _date(whois.updated_date))
        if whois.name_servers:
            table.add_row("Name Servers", escape(", ".join(whois.name_servers)))
        if whois.status:
            table.add_row("Domain Status", escape(", ".join(whois.status)))
        if whois.error:
            table.add_row("Error", escape(whois.error))
        return table

    def valuation_table(self, valuation: ValuationResult) -> Table:
        factors = valuation.factors
        style = CONFIDENCE_STYLES[valuation.confidence]

        table = _section("DOMAIN VALUATION")
        table.add_row("Estimated Value", f"${valuation.estimated_value:,} {valuation.currency}")
        table.add_row("Confidence", f"[{style}]{valuation.confidence.value.title()}[/{style}]")
        table.add_row("Reasoning", escape(valuation.reasoning))
        table.add_row("Length", f"{factors.length} chars (Score: {factors.length_score:.1f}/10)")
        table.add_row("Character Quality", f"{factors.character_score:.1f}")
        table.add_row("Word Value", f"{factors.word_score:.1f}")
        table.add_row("Suffix Value", f"{factors.suffix_score:.1f}/5")
        table.add_row("Brandable", _check(factors.brandable))
        table.add_row("Pronounceable", _check(factors.pronounceable))
        if factors.has_digits:
            table.add_row("Contains Numbers", "[red]Yes[/red] (reduces value)")
        if factors.has_hyphen:
            table.add_row("Contains Hyphens", "[red]Yes[/red] (reduces value)")
        return table
