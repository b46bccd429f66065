"""Input-layer public API for key decoding, key sources, and key handling.

Low-level terminal decoding (`read_key`) is kept separate from the
navigation handler so the handler can be driven by queued synthetic keys.
"""

from .key_registry import KeyBinding, KeyMap
from .navigation import NavigationContext, handle_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .sources import QueuedKeySource, TerminalKeySource

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyBinding",
    "KeyMap",
    "NavigationContext",
    "handle_key",
    "QueuedKeySource",
    "TerminalKeySource",
]
