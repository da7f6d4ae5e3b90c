"""Transfer point domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TransferPoint:
    """A registered stop where switching routes is sanctioned."""

    id: str
    stop_id: str
    name: str
    wait_time: int  # Minutes added when switching routes here
