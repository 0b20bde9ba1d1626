"""Evolution helpers."""
from .selection import SelectionMethod, selection_roulette, selection_tournament, select_parents
from .variation import reproduce

__all__ = ["SelectionMethod", "selection_roulette", "selection_tournament", "select_parents", "reproduce"]
