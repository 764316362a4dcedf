from .majority import (
    ALGORITHM_NAME,
    MajorityVoteEngine,
    VoteResult,
    find_majority,
    find_majority_approximate,
    find_majority_assume_exists,
    has_majority,
)

__all__ = [
    "ALGORITHM_NAME",
    "MajorityVoteEngine",
    "VoteResult",
    "find_majority",
    "find_majority_approximate",
    "find_majority_assume_exists",
    "has_majority",
]
