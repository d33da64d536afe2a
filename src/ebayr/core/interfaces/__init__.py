"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- The core depends on these, not on httpx.
"""

from ebayr.core.interfaces.transport import Transport

__all__ = ["Transport"]
