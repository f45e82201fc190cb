import datetime

from django.core.management.base import BaseCommand, CommandError

from ledger_core.models import Cheque, Client, Company
from ledger_core.services import (build_client_statement, ledger_metrics,
                                  project_after_cheques)
from ledger_core.services.statement import client_records


def parse_day(value):
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise CommandError(f"Invalid date {value!r}, expected YYYY-MM-DD")


class Command(BaseCommand):
    help = "Print a client's account statement (plain text)."

    def add_arguments(self, parser):
        parser.add_argument("client", help="Client name")
        parser.add_argument(
            "--company", required=True, help="Company slug")
        parser.add_argument("--from", dest="date_from", type=parse_day,
                            help="First day of the window (YYYY-MM-DD)")
        parser.add_argument("--to", dest="date_to", type=parse_day,
                            help="Last day of the window (YYYY-MM-DD)")

    def handle(self, *args, **options):
        try:
            company = Company.objects.get(slug=options["company"])
            client = Client.objects.for_company(company).get(
                name=options["client"])
        except (Company.DoesNotExist, Client.DoesNotExist) as exc:
            raise CommandError(str(exc))

        statement = build_client_statement(
            client, options["date_from"], options["date_to"])

        out = self.stdout
        out.write(f"Statement for {client.name} ({company.currency_code})")
        out.write(f"Opening balance: {statement.opening_balance}")
        for row in statement.rows:
            out.write(
                f"{row.date:%Y-%m-%d}  {row.entry_type:<18} "
                f"{row.debit:>12} {row.credit:>12} {row.balance:>12}  "
                f"{row.description}"
            )
        out.write(
            f"Totals: debit {statement.total_debit} / "
            f"credit {statement.total_credit}")
        out.write(self.style.SUCCESS(
            f"Final balance: {statement.final_balance}"))

        cheques = Cheque.objects.for_party(company, client.name)
        projection = project_after_cheques(statement.final_balance, cheques)
        if projection.pending:
            out.write(
                f"Pending cheques: in {projection.incoming_total} / "
                f"out {projection.outgoing_total} -> "
                f"{projection.balance_after_cheques}")

        entries, _ = client_records(client)
        metrics = ledger_metrics(entries)
        out.write(
            f"Sales {metrics.total_sales}, purchases "
            f"{metrics.total_purchases}, loans receivable "
            f"{metrics.loans_receivable}, loans payable {metrics.loans_payable}"
        )
