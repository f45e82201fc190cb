from django.conf import settings

# Fallbacks for the ledger knobs when settings.py does not define them
DEFAULTS = {
    "LEDGER_ARAP_MAX_RETRIES": 5,
    "LEDGER_ARAP_RETRY_BACKOFF": 0.01,
}


def get_setting(name):
    """Return a ledger setting, falling back to DEFAULTS."""
    return getattr(settings, name, DEFAULTS[name])
