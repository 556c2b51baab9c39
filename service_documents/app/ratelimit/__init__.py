"""
Rate limiting package for the document submitter.

Holds the permit gate that caps outgoing requests per window using a
periodically reset permit pool, plus the time units the window is expressed in.
"""

from .permit_gate import PermitGate
from .time_unit import TimeUnit

__all__ = ["PermitGate", "TimeUnit"]
