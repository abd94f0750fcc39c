from treasurehunt.domain.puzzles import hash_solution, normalize_solution, solution_matches


def test_normalize_collapses_whitespace_and_case() -> None:
    assert normalize_solution("  The   Old\tMill ") == "the old mill"


def test_hash_is_stable_sha256_hex() -> None:
    digest = hash_solution("Echo")

    assert len(digest) == 64
    assert digest == hash_solution("echo")
    assert digest != hash_solution("echoes")


def test_solution_matches() -> None:
    digest = hash_solution("river stone")

    assert solution_matches(digest, "River  Stone")
    assert not solution_matches(digest, "riverstone")
