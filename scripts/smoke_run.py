from navalbattle.generation import generate_with_retries, new_rng, run_lengths
from navalbattle.layouts import reference_fleet


def main() -> None:
    fleet = reference_fleet()
    outcome = generate_with_retries(fleet, new_rng(0))
    print(outcome.grid.to_text())
    print(f"Smoke OK: attempts={outcome.attempts} runs={run_lengths(outcome.grid)}")


if __name__ == "__main__":
    main()
