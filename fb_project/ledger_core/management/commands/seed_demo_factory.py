import datetime
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils.text import slugify

from ledger_core.constants import (CUSTOMER_ADVANCE, LOAN_GRANTED,
                                   LOANS_GIVEN, ChequeStatus, ChequeType,
                                   EntryType, PaymentType)
from ledger_core.models import Cheque, Client, Company, LedgerEntry
from ledger_core.services import record_payment


class Command(BaseCommand):
    help = (
        "Create a demo factory with clients, ledger entries, payments "
        "and cheques for trying out statements."
    )

    # Define command-line arguments
    def add_arguments(self, parser):
        parser.add_argument(
            "--company-name",  # Define flag
            default="Demo Factory",
            help="Name of the demo company to create.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        company_name = options["company_name"]

        # Generate unique slug for company
        def unique_slug_for_company(name, max_tries=100):
            # Convert company name into a slug (e.g., "Demo Factory" → "demo-factory")
            base = slugify(name) or "company"
            slug = base
            i = 1  # add numbers if needed
            # If plain slug is taken, append -1, -2, etc.
            while Company.objects.filter(slug=slug).exists():
                slug = f"{base}-{i}"
                i += 1
                if i > max_tries:
                    raise RuntimeError("Couldn't generate unique slug")
            return slug

        # 1. Create company
        company, _ = Company.objects.get_or_create(
            name=company_name,
            defaults={"slug": unique_slug_for_company(company_name)},
        )
        self.stdout.write(self.style.SUCCESS(f"Company: {company}"))

        # 2. Create clients (opening balance = what they owed before)
        customer, _ = Client.objects.get_or_create(
            company=company, name="Al-Noor Trading",
            defaults={"balance": Decimal("250.00")},
        )
        supplier, _ = Client.objects.get_or_create(
            company=company, name="Steel Supplies Co",
        )

        today = datetime.date.today()
        start = today - datetime.timedelta(days=60)

        # 3. Ledger entries
        def entry(txn, **kwargs):
            obj, _ = LedgerEntry.objects.get_or_create(
                company=company, transaction_id=txn, defaults=kwargs)
            return obj

        invoice = entry(
            "TXN-DEMO-0001", type=EntryType.INCOME, amount=Decimal("1500.00"),
            date=start, category="sales_revenue", sub_category="products",
            associated_party=customer.name, description="Aluminium profiles",
            is_arap_entry=True,
        )
        entry(
            "TXN-DEMO-0002", type=EntryType.INCOME, amount=Decimal("300.00"),
            date=start + datetime.timedelta(days=5),
            category=CUSTOMER_ADVANCE, associated_party=customer.name,
            description="Advance on next order",
        )
        purchase = entry(
            "TXN-DEMO-0003", type=EntryType.EXPENSE, amount=Decimal("800.00"),
            date=start + datetime.timedelta(days=10), category="cogs",
            sub_category="raw_materials", associated_party=supplier.name,
            description="Steel sheets", is_arap_entry=True,
        )
        entry(
            "TXN-DEMO-0004", type=EntryType.EXPENSE, amount=Decimal("400.00"),
            date=start + datetime.timedelta(days=20), category=LOANS_GIVEN,
            sub_category=LOAN_GRANTED, associated_party=supplier.name,
            description="Short-term loan to supplier",
        )

        # 4. Payments (posted through the AR/AP updater)
        if not invoice.total_paid:
            record_payment(
                company=company, client_name=customer.name,
                type=PaymentType.RECEIPT, amount=Decimal("600.00"),
                date=start + datetime.timedelta(days=15),
                notes="Bank transfer", linked_transaction_id=invoice.transaction_id,
            )
        if not purchase.total_paid:
            record_payment(
                company=company, client_name=supplier.name,
                type=PaymentType.DISBURSEMENT, amount=Decimal("800.00"),
                date=start + datetime.timedelta(days=25),
                notes="Cash", linked_transaction_id=purchase.transaction_id,
            )

        # 5. Cheques
        Cheque.objects.get_or_create(
            company=company, cheque_number="100234",
            defaults={
                "client_name": customer.name, "amount": Decimal("400.00"),
                "issue_date": today, "type": ChequeType.INCOMING,
                "status": ChequeStatus.PENDING, "bank_name": "Arab Bank",
                "due_date": today + datetime.timedelta(days=30),
            },
        )

        self.stdout.write(self.style.SUCCESS(
            f"Seeded clients: {customer}, {supplier}"))
