"""
Policy factory: maps selector codes to scheduler classes.

The selector is the single character given to the -s flag:
N=FIFO, S=SSTF, L=LOOK, C=CLOOK, F=FLOOK.
"""
from .fifo import FIFO
from .sstf import SSTF
from .look import LOOK
from .clook import CLOOK
from .flook import FLOOK


POLICY_CODES = {
    "N": FIFO,
    "S": SSTF,
    "L": LOOK,
    "C": CLOOK,
    "F": FLOOK,
}

POLICY_NAMES = {cls.name: cls for cls in POLICY_CODES.values()}


def create_scheduler(code):
    """
    Create a scheduler from a selector code.

    Only the first character counts (like getopt's optarg[0]). Returns None for
    a missing or unknown code; the Simulator refuses to run without a policy.
    """
    if not code:
        return None
    cls = POLICY_CODES.get(code[0])
    return cls() if cls is not None else None


def create_scheduler_by_name(name):
    """Create a scheduler from its display name ("FIFO", "SSTF", ...)."""
    cls = POLICY_NAMES.get(name)
    if cls is None:
        raise ValueError(f"Unknown scheduling policy: {name}")
    return cls()
