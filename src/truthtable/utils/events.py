"""
Light progress printing for exploration and narrowing steps.
"""


def log_event(msg: str):
    """Minimal consistent log printer for truth-table steps."""
    print(f"[truthtable] {msg}")
