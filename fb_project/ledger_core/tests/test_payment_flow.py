import datetime
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import transaction
from django.test import TestCase

from ..constants import (CUSTOMER_ADVANCE, EntryType, PaymentStatus,
                         PaymentType)
from ..exceptions import DataIntegrityViolation, EntryNotFound
from ..models import LedgerEntry, Payment
from ..services import delete_payment, record_payment
from .helpers import create_company

D = Decimal


class PaymentFlowTests(TestCase):
    def setUp(self):
        self.company = create_company()
        self.day = datetime.date(2025, 4, 1)
        self.invoice = LedgerEntry.objects.create(
            company=self.company,
            transaction_id="TXN-INV-1",
            type=EntryType.INCOME,
            amount=D("500.00"),
            date=self.day,
            associated_party="Client A",
            is_arap_entry=True,
        )

    def record(self, amount, **kwargs):
        """Helper: record a receipt from Client A."""
        kwargs.setdefault("linked_transaction_id", "TXN-INV-1")
        return record_payment(
            company=self.company,
            client_name="Client A",
            type=PaymentType.RECEIPT,
            amount=D(amount),
            date=self.day,
            **kwargs,
        )

    def test_record_payment_updates_linked_entry(self):
        payment, result = self.record("200.00")

        self.assertIsNotNone(payment.pk)
        self.assertEqual(result.payment_status, PaymentStatus.PARTIAL)

        self.invoice.refresh_from_db()
        self.assertEqual(self.invoice.total_paid, D("200.00"))
        self.assertEqual(self.invoice.remaining_balance, D("300.00"))

    def test_discount_rides_along_with_the_payment(self):
        _, result = self.record("400.00", discount_amount=D("100.00"))
        self.assertEqual(result.payment_status, PaymentStatus.PAID)

        self.invoice.refresh_from_db()
        self.assertEqual(self.invoice.total_discount, D("100.00"))

    def test_unlinked_payment_leaves_entries_alone(self):
        payment, result = self.record("50.00", linked_transaction_id=None)
        self.assertIsNone(result)
        self.assertTrue(Payment.objects.filter(pk=payment.pk).exists())

    def test_payment_into_untracked_advance(self):
        LedgerEntry.objects.create(
            company=self.company, transaction_id="TXN-ADV-1",
            type=EntryType.INCOME, category=CUSTOMER_ADVANCE,
            amount=D("300.00"), date=self.day, associated_party="Client A",
        )
        payment, result = self.record(
            "300.00", linked_transaction_id="TXN-ADV-1")
        self.assertIsNone(result)
        self.assertIsNotNone(payment.pk)

    def test_missing_link_rolls_back_the_payment(self):
        with self.assertRaises(EntryNotFound):
            self.record("50.00", linked_transaction_id="TXN-NOPE")

        # payment row was not kept
        self.assertFalse(Payment.objects.for_company(self.company).exists())

    def test_delete_payment_reverses_it(self):
        payment, _ = self.record("200.00")
        result = delete_payment(payment)

        self.assertEqual(result.total_paid, D("0.00"))
        self.assertEqual(result.payment_status, PaymentStatus.UNPAID)
        self.assertFalse(Payment.objects.filter(pk=payment.pk).exists())

    def test_failed_reversal_keeps_the_payment(self):
        payment, _ = self.record("200.00")
        # the entry was corrected by hand behind the payment's back
        LedgerEntry.objects.filter(pk=self.invoice.pk).update(
            total_paid=D("0.00"))

        with self.assertRaises(DataIntegrityViolation):
            delete_payment(payment)

        self.assertTrue(Payment.objects.filter(pk=payment.pk).exists())

    def test_payments_are_immutable(self):
        payment, _ = self.record("200.00")
        payment.amount = D("250.00")
        with self.assertRaises(ValidationError):
            payment.save()

    def test_payment_needs_amount_or_discount(self):
        with self.assertRaises(ValidationError):
            self.record("0.00")


class EntryDeletionGuardTests(TestCase):
    def setUp(self):
        self.company = create_company()
        self.entry = LedgerEntry.objects.create(
            company=self.company, transaction_id="TXN-1",
            type=EntryType.INCOME, amount=D("100.00"),
            date=datetime.date(2025, 4, 1), is_arap_entry=True,
        )

    def record_linked_payment(self):
        return record_payment(
            company=self.company, client_name="Client A",
            type=PaymentType.RECEIPT, amount=D("10.00"),
            date=datetime.date(2025, 4, 2), linked_transaction_id="TXN-1",
        )

    def test_entry_with_payments_cannot_be_deleted(self):
        self.record_linked_payment()
        with self.assertRaises(ValidationError):
            self.entry.delete()
        self.assertTrue(LedgerEntry.objects.filter(pk=self.entry.pk).exists())

    def test_refused_delete_keeps_outer_transaction_usable(self):
        self.record_linked_payment()
        with transaction.atomic():
            with self.assertRaises(ValidationError):
                self.entry.delete()
            # still inside the same transaction, queries keep working
            self.assertEqual(
                LedgerEntry.objects.for_company(self.company).count(), 1)

    def test_queryset_delete_is_blocked_too(self):
        self.record_linked_payment()
        # bulk deletes skip LedgerEntry.delete(); the pre_delete signal
        # refuses instead (inside Django's own delete transaction)
        with self.assertRaises(ValidationError):
            with transaction.atomic():
                LedgerEntry.objects.filter(pk=self.entry.pk).delete()
        self.assertTrue(LedgerEntry.objects.filter(pk=self.entry.pk).exists())

    def test_entry_without_payments_can_be_deleted(self):
        self.entry.delete()
        self.assertFalse(LedgerEntry.objects.filter(pk=self.entry.pk).exists())
