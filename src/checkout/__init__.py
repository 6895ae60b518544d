"""COD checkout — OTP-gated order creation.

Provides get_orchestrator() / reset_orchestrator(). The orchestrator is
built from the configured session store, commerce client and channel.
"""

from checkout.orchestrator import CheckoutOrchestrator
from checkout.session import get_session_store
from commerce import get_commerce_client
from notifications.notifier import Notifier

_orchestrator: CheckoutOrchestrator | None = None


def get_orchestrator() -> CheckoutOrchestrator:
    """Return the process-wide orchestrator (singleton)."""
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = CheckoutOrchestrator(
            store=get_session_store(),
            commerce=get_commerce_client(),
            notifier=Notifier(),
        )
    return _orchestrator


def reset_orchestrator() -> None:
    """Drop the orchestrator so the next access rebuilds it from the current adapters."""
    global _orchestrator
    _orchestrator = None
