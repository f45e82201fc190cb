from decimal import Decimal

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Company",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200)),
                ("slug", models.SlugField(max_length=80, unique=True)),
                ("currency_code", models.CharField(default="JOD", max_length=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name_plural": "companies",
            },
        ),
        migrations.CreateModel(
            name="Client",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200)),
                ("phone", models.CharField(blank=True, default="", max_length=32)),
                ("email", models.EmailField(blank=True, max_length=254, null=True)),
                ("balance", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=18)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("company", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="ledger_core.company")),
            ],
            options={
                "indexes": [models.Index(fields=["company", "name"], name="client_company_name_idx")],
                "constraints": [models.UniqueConstraint(fields=("company", "name"), name="uq_client_company_name")],
            },
        ),
        migrations.CreateModel(
            name="LedgerEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("transaction_id", models.CharField(blank=True, max_length=40, null=True)),
                ("description", models.TextField(blank=True, default="")),
                ("type", models.CharField(choices=[("income", "Income"), ("revenue", "Revenue (legacy)"), ("expense", "Expense"), ("equity", "Equity movement"), ("loan", "Loan")], max_length=16)),
                ("amount", models.DecimalField(decimal_places=2, max_digits=18)),
                ("date", models.DateField()),
                ("category", models.CharField(blank=True, default="", max_length=100)),
                ("sub_category", models.CharField(blank=True, default="", max_length=100)),
                ("associated_party", models.CharField(blank=True, default="", max_length=200)),
                ("reference", models.CharField(blank=True, default="", max_length=64)),
                ("notes", models.TextField(blank=True, default="")),
                ("total_discount", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=18)),
                ("writeoff_amount", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=18)),
                ("writeoff_reason", models.CharField(blank=True, default="", max_length=255)),
                ("total_paid_from_advances", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=18)),
                ("linked_payment_id", models.CharField(blank=True, max_length=64, null=True)),
                ("is_arap_entry", models.BooleanField(default=False)),
                ("total_paid", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=18)),
                ("remaining_balance", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=18)),
                ("payment_status", models.CharField(choices=[("unpaid", "Unpaid"), ("partial", "Partially paid"), ("paid", "Paid")], default="unpaid", max_length=10)),
                ("version", models.PositiveIntegerField(default=1)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("company", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="ledger_core.company")),
            ],
            options={
                "verbose_name_plural": "ledger entries",
                "indexes": [
                    models.Index(fields=["company", "associated_party"], name="ledger_company_party_idx"),
                    models.Index(fields=["company", "transaction_id"], name="ledger_company_txn_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(condition=models.Q(("transaction_id__isnull", False)), fields=("company", "transaction_id"), name="uq_ledger_company_txn"),
                    models.CheckConstraint(condition=models.Q(("amount__gt", 0)), name="ledger_amount_positive"),
                    models.CheckConstraint(condition=models.Q(("total_paid__gte", 0), ("total_discount__gte", 0), ("writeoff_amount__gte", 0)), name="ledger_settlements_non_negative"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Payment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("client_name", models.CharField(max_length=200)),
                ("type", models.CharField(choices=[("receipt", "Receipt"), ("disbursement", "Disbursement")], max_length=16)),
                ("amount", models.DecimalField(decimal_places=2, max_digits=18)),
                ("date", models.DateField()),
                ("notes", models.TextField(blank=True, default="")),
                ("description", models.TextField(blank=True, default="")),
                ("linked_transaction_id", models.CharField(blank=True, max_length=40, null=True)),
                ("is_endorsement", models.BooleanField(default=False)),
                ("discount_amount", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=18)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("company", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="ledger_core.company")),
            ],
            options={
                "indexes": [
                    models.Index(fields=["company", "client_name"], name="payment_company_client_idx"),
                    models.Index(fields=["company", "linked_transaction_id"], name="payment_company_link_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("amount__gte", 0), ("discount_amount__gte", 0)), name="payment_non_negative_amounts"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Cheque",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("client_name", models.CharField(max_length=200)),
                ("cheque_number", models.CharField(max_length=64)),
                ("bank_name", models.CharField(blank=True, default="", max_length=120)),
                ("amount", models.DecimalField(decimal_places=2, max_digits=18)),
                ("issue_date", models.DateField()),
                ("due_date", models.DateField(blank=True, null=True)),
                ("type", models.CharField(choices=[("incoming", "Incoming"), ("outgoing", "Outgoing")], max_length=10)),
                ("status", models.CharField(choices=[("pending", "Pending"), ("cleared", "Cleared"), ("bounced", "Bounced"), ("endorsed", "Endorsed"), ("returned", "Returned")], default="pending", max_length=10)),
                ("is_endorsed_cheque", models.BooleanField(default=False)),
                ("endorsed_to", models.CharField(blank=True, default="", max_length=200)),
                ("linked_transaction_id", models.CharField(blank=True, max_length=40, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("company", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="ledger_core.company")),
            ],
            options={
                "indexes": [
                    models.Index(fields=["company", "client_name"], name="cheque_company_client_idx"),
                    models.Index(fields=["company", "status"], name="cheque_company_status_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("amount__gt", 0)), name="cheque_amount_positive"),
                ],
            },
        ),
        migrations.CreateModel(
            name="AuditLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("action", models.CharField(max_length=50)),
                ("object_type", models.CharField(max_length=100)),
                ("object_id", models.CharField(max_length=100)),
                ("changes", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("company", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to="ledger_core.company")),
                ("user", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "indexes": [
                    models.Index(fields=["company", "user"], name="auditlog_company_user_idx"),
                    models.Index(fields=["company", "created_at"], name="auditlog_company_created_idx"),
                ],
            },
        ),
    ]
