"""Posting — движок проводок транзакций на балансы.

Validator → Normalizer → Poster (before → начисление → пересчёт → after).
"""

from .errors import InvalidAmount, InvalidDirection, PostingError
from .locking import BalanceBook, UnknownBalanceError
from .normalizer import normalize_amount
from .poster import BalancePoster, PosterConfig, PostingResult, post_transaction
from .validator import validate_transaction

__all__ = [
    # Errors
    "PostingError",
    "InvalidAmount",
    "InvalidDirection",
    # Steps
    "validate_transaction",
    "normalize_amount",
    # Poster
    "post_transaction",
    "BalancePoster",
    "PosterConfig",
    "PostingResult",
    # Concurrency
    "BalanceBook",
    "UnknownBalanceError",
]
