"""Puzzle answer hashing.

Only the digest of an answer is stored on a treasure, so the clue can be
shown publicly without revealing the solution.
"""
from __future__ import annotations

import hashlib
import hmac


def normalize_solution(solution: str) -> str:
    return " ".join(solution.split()).lower()


def hash_solution(solution: str) -> str:
    return hashlib.sha256(normalize_solution(solution).encode("utf-8")).hexdigest()


def solution_matches(puzzle_hash: str, solution: str) -> bool:
    return hmac.compare_digest(puzzle_hash, hash_solution(solution))
