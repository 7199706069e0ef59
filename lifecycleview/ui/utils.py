"""Signal helpers shared by the window and widgets."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from PySide6.QtCore import SignalInstance

Connection = tuple[SignalInstance, Optional[Callable]]


def safe_disconnect(signal: SignalInstance, slot: Optional[Callable] = None) -> bool:
    """Disconnect ``slot`` (or every slot) from ``signal``.

    Returns False when the pair was not connected or the sender is gone.
    """
    try:
        if slot is not None:
            signal.disconnect(slot)
        else:
            signal.disconnect()
        return True
    except (RuntimeError, TypeError):
        return False


def safe_disconnect_multiple(connections: Iterable[Connection]) -> int:
    """Disconnect each (signal, slot) pair; return how many were connected."""
    return sum(1 for signal, slot in connections if safe_disconnect(signal, slot))
