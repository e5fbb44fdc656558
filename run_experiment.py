import argparse
import random
import sys
import time
from typing import Tuple

from tsp_chromosome import CitySet, Tour, costs, sort_by_cost
from tsp_chromosome.operators.mutation import MUTATION_OPERATORS


def run_one(
    cities: CitySet,
    operator: str,
    seed: int,
    n_steps: int,
    n_offspring: int,
) -> Tuple[float, Tour, float]:
    """
    Mutate a random tour for n_steps, keeping the cheapest offspring.

    Returns:
        Tuple of (initial cost, final tour, elapsed seconds)
    """
    rng = random.Random(seed)
    mutation = MUTATION_OPERATORS[operator]
    current = Tour.random(cities, rng)
    start_cost = current.cost
    t0 = time.perf_counter()
    for _ in range(n_steps):
        candidates = [current] + [mutation(current, cities, rng) for _ in range(n_offspring)]
        sort_by_cost(candidates)
        current = candidates[0]
    elapsed = time.perf_counter() - t0
    return start_cost, current, elapsed


def main(argv=None):
    ap = argparse.ArgumentParser(description="Compare tour mutation operators on random cities.")
    ap.add_argument("--n_cities", type=int, default=50, help="Number of cities")
    ap.add_argument("--n_seeds", type=int, default=3, help="Seeds per operator")
    ap.add_argument("--steps", type=int, default=500, help="Mutation steps per run")
    ap.add_argument("--offspring", type=int, default=8, help="Offspring per step")
    ap.add_argument("--city_seed", type=int, default=42)
    ap.add_argument("--operator", choices=("inversion", "three_point", "both"), default="both")
    args = ap.parse_args(argv)

    cities = CitySet.random(args.n_cities, seed=args.city_seed)
    operators = list(MUTATION_OPERATORS) if args.operator == "both" else [args.operator]

    lines = []
    lines.append("")
    lines.append(f"### Mutation comparison ({cities!r})")
    lines.append("")
    lines.append(f"- n_seeds={args.n_seeds}, steps={args.steps}, offspring={args.offspring}")
    total_time = 0.0
    for name in operators:
        finals = []
        start_sum = time_sum = 0.0
        for seed in range(args.n_seeds):
            start, final, elapsed = run_one(cities, name, seed, args.steps, args.offspring)
            start_sum += start
            time_sum += elapsed
            finals.append(final)
        total_time += time_sum
        sort_by_cost(finals)
        final_costs = costs(finals)
        start_mean = start_sum / args.n_seeds
        final_mean = sum(final_costs) / len(final_costs)
        improve = 100 * (start_mean - final_mean) / start_mean if start_mean > 0 else 0
        lines.append(
            f"  - {name}: start={start_mean:.3f} final={final_mean:.3f} "
            f"best={final_costs[0]:.3f} improve%={improve:.1f}% "
            f"time_mean={time_sum / args.n_seeds:.2f}s"
        )
    lines.append(f"- total time: {total_time:.1f}s")
    lines.append("")
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
