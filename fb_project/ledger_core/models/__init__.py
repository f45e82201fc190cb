from .auditlog import AuditLog
from .cheque import Cheque
from .client import Client
from .company import Company
from .ledger import LedgerEntry
from .payment import Payment
