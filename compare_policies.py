"""
Multi-seed comparison of disk scheduling policies.

Uses Common Random Numbers (CRN) for variance reduction across policies:
every seed generates ONE synthetic trace and all five policies replay it.
Reports mean ± 95% confidence intervals per policy and load level, and
exports per-seed results and summary statistics for plot_results.py.

Usage:
    python compare_policies.py                      # Default 20 seeds
    python compare_policies.py --seeds 50           # Override to 50 seeds
    python compare_policies.py --base-seed 42       # Reproducible seed range
    python compare_policies.py --help               # Show options
"""

import argparse
import csv
import json
import numpy as np
from datetime import datetime

from workload import generate_trace
from simulator import Simulator
from schedulers.registry import create_scheduler_by_name
import metrics

DEBUG = False

POLICY_ORDER = ["FIFO", "SSTF", "LOOK", "CLOOK", "FLOOK"]
METRIC_NAMES = ['avg_wait', 'max_wait', 'p95_wait', 'avg_turnaround', 'avg_movement']

# Offered load = arrival rate × mean service time. Mean service time under
# FIFO is about a third of the track range, so these rates span idle to saturated.
LOAD_LEVELS = {
    "Light Load": 0.3,
    "Medium Load": 0.7,
    "Heavy Load": 1.2,
}


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Multi-seed disk scheduling policy comparison with CRN",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python compare_policies.py                  # Default: 20 seeds, random base
  python compare_policies.py --seeds 50       # Run 50 seeds
  python compare_policies.py --base-seed 42   # Reproducible: seeds 42-61
        """
    )
    parser.add_argument('--seeds', type=int, default=20,
                        help='Number of seeds to run (default: 20)')
    parser.add_argument('--base-seed', type=int, default=None,
                        help='Base seed for reproducibility (default: random). Seeds will be base_seed to base_seed+N-1')
    parser.add_argument('--num-requests', type=int, default=200,
                        help='Requests per trace (default: 200)')
    parser.add_argument('--max-track', type=int, default=199,
                        help='Highest track a request may target (default: 199)')
    parser.add_argument('--burst-probability', type=float, default=0.1,
                        help='Chance a request arrives in the same tick as the previous one (default: 0.1)')
    parser.add_argument('--output-prefix', default='policy',
                        help='Prefix for the exported JSON/CSV files (default: policy)')

    return parser.parse_args(argv)


def get_scenarios(max_track):
    """One scenario per load level, with arrival rate scaled to the track range."""
    mean_service = max_track / 3.0
    return [
        {"name": name, "arrival_rate": load / mean_service, "target_load": load}
        for name, load in LOAD_LEVELS.items()
    ]


def run_single_trial(scenario, seed, num_requests, max_track, burst_probability):
    """Run all policies on the same trace (CRN)."""
    trace = generate_trace(
        num_requests=num_requests,
        arrival_rate=scenario['arrival_rate'],
        max_track=max_track,
        burst_probability=burst_probability,
        seed=seed
    )

    results = {}
    for name in POLICY_ORDER:
        sim = Simulator(trace, create_scheduler_by_name(name), verbose=DEBUG)
        finished = sim.run()
        summary = metrics.summarize(sim)

        results[name] = {
            'avg_wait': summary['avg_wait'],
            'max_wait': summary['max_wait'],
            'p95_wait': metrics.p95_wait(finished),
            'avg_turnaround': summary['avg_turnaround'],
            'avg_movement': summary['avg_movement'],
            'finished': len(finished),
        }

    return results


def mean_ci(values, z=1.96):
    """Mean, standard error and normal-approximation CI bounds."""
    values = np.asarray(values, dtype=float)
    mean = float(np.mean(values))
    if len(values) < 2:
        return mean, 0.0, mean, mean
    std_err = float(np.std(values, ddof=1) / np.sqrt(len(values)))
    return mean, std_err, mean - z * std_err, mean + z * std_err


def bootstrap_ci(data, func=np.median, n_bootstrap=2000, ci=0.95, seed=0):
    """
    Compute bootstrap confidence interval.

    Returns: (point_estimate, lower, upper)
    """
    data = np.asarray(data, dtype=float)
    rng = np.random.default_rng(seed)
    point_est = func(data)

    indices = rng.integers(0, len(data), size=(n_bootstrap, len(data)))
    bootstrap_stats = np.array([func(data[row]) for row in indices])
    alpha = (1 - ci) / 2
    lower = np.percentile(bootstrap_stats, alpha * 100)
    upper = np.percentile(bootstrap_stats, (1 - alpha) * 100)

    return float(point_est), float(lower), float(upper)


def compute_stats(all_results):
    """(scenario, policy, metric) -> summary statistics over seeds."""
    stats = {}
    for scenario_name, policies in all_results.items():
        for name, per_metric in policies.items():
            for metric_name in METRIC_NAMES:
                vals = per_metric[metric_name]
                mean, std_err, ci_lower, ci_upper = mean_ci(vals)
                stats[(scenario_name, name, metric_name)] = {
                    'mean': mean,
                    'std_err': std_err,
                    'ci_lower': ci_lower,
                    'ci_upper': ci_upper,
                    'median': float(np.median(vals)),
                }
    return stats


def write_stats_csv(stats, path):
    with open(path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['Load', 'Policy', 'Metric', 'Mean', 'StdErr', 'CILower', 'CIUpper', 'Median'])

        for (load, policy, metric), stat in sorted(stats.items()):
            writer.writerow([
                load, policy, metric,
                f"{stat['mean']:.6f}",
                f"{stat['std_err']:.6f}",
                f"{stat['ci_lower']:.6f}",
                f"{stat['ci_upper']:.6f}",
                f"{stat['median']:.6f}",
            ])


def convert_to_serializable(obj):
    """Convert numpy values to plain Python and tuple keys to strings recursively."""
    if isinstance(obj, dict):
        return {str(k): convert_to_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [convert_to_serializable(item) for item in obj]
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, (np.integer, np.floating)):
        return float(obj)
    else:
        return obj


def run_comparison(max_seeds, base_seed, num_requests, max_track, burst_probability):
    """
    Run every scenario for max_seeds seeds.

    Returns:
        {scenario_name: {policy: {metric: [value per seed]}}}
    """
    all_results = {}

    for scenario in get_scenarios(max_track):
        all_results[scenario['name']] = {name: {metric: [] for metric in METRIC_NAMES + ['finished']}
                                         for name in POLICY_ORDER}

        print(f"\n{'=' * 100}")
        print(f"{scenario['name']} (arrival rate {scenario['arrival_rate']:.4f}/tick, "
              f"{num_requests} requests, tracks 0-{max_track})")
        print("=" * 100)
        print(f"{'Seed':>4}  " + "".join(f"{name:>10} " for name in POLICY_ORDER) + "  (avg wait)")
        print("-" * 100)

        for seed_idx in range(max_seeds):
            trial_seed = base_seed + seed_idx
            trial = run_single_trial(scenario, trial_seed, num_requests, max_track, burst_probability)

            for name in POLICY_ORDER:
                for metric, value in trial[name].items():
                    all_results[scenario['name']][name][metric].append(value)

            print(f"{seed_idx + 1:>4}  " + "".join(f"{trial[name]['avg_wait']:>10.2f} " for name in POLICY_ORDER))

    return all_results


def print_summary(stats):
    for load in LOAD_LEVELS:
        print(f"\n📊 Summary Statistics: {load}")
        print("-" * 100)
        print(f"{'Policy':<8}  {'Avg Wait':>16}  {'Max Wait':>16}  {'P95 Wait':>16}  "
              f"{'Turnaround':>16}  {'Move/Tick':>14}")
        print("-" * 100)
        for name in POLICY_ORDER:
            row = f"{name:<8}  "
            for metric in METRIC_NAMES:
                stat = stats[(load, name, metric)]
                half_width = stat['ci_upper'] - stat['mean']
                precision = 3 if metric == 'avg_movement' else 1
                row += f"{stat['mean']:.{precision}f}±{half_width:.{precision}f}".rjust(16) + "  "
            print(row)


def main(argv=None):
    args = parse_args(argv)
    max_seeds = args.seeds
    base_seed = args.base_seed if args.base_seed is not None else int(np.random.default_rng().integers(0, 2**31))

    print("=" * 100)
    print(f"Multi-Seed Disk Scheduling Comparison: {max_seeds} Seeds with Common Random Numbers (CRN)")
    print("=" * 100)
    print(f"\n📊 Configuration:")
    print(f"  Seeds: {max_seeds}")
    print(f"  Base seed: {base_seed}")
    print(f"  Seed range: {base_seed} to {base_seed + max_seeds - 1}")
    print(f"  Timestamp: {datetime.now().isoformat()}")

    all_results = run_comparison(max_seeds, base_seed, args.num_requests,
                                 args.max_track, args.burst_probability)
    stats = compute_stats(all_results)
    print_summary(stats)

    # Tail wait gets a bootstrap CI on the median, which is more robust across seeds
    print("\n📈 Median max wait (95% bootstrap CI):")
    for load in LOAD_LEVELS:
        row = f"{load:<14}"
        for name in POLICY_ORDER:
            med, lower, upper = bootstrap_ci(all_results[load][name]['max_wait'])
            row += f"{name}={med:.0f}({lower:.0f}-{upper:.0f})  "
        print(row)

    results_file = f"{args.output_prefix}_results.json"
    metadata_file = f"{args.output_prefix}_metadata.json"
    stats_file = f"{args.output_prefix}_stats.csv"

    with open(results_file, 'w') as f:
        json.dump(convert_to_serializable(all_results), f, indent=2)
    print(f"\n✓ Results saved to {results_file}")

    metadata = {
        'max_seeds': max_seeds,
        'base_seed': base_seed,
        'num_requests': args.num_requests,
        'max_track': args.max_track,
        'burst_probability': args.burst_probability,
        'scenarios': get_scenarios(args.max_track),
        'timestamp': datetime.now().isoformat(),
    }
    with open(metadata_file, 'w') as f:
        json.dump(metadata, f, indent=2)
    print(f"✓ Metadata saved to {metadata_file}")
    print(f"  Reproducibility: Run with --base-seed {base_seed} to recreate")

    write_stats_csv(stats, stats_file)
    print(f"✓ Pre-computed stats saved to {stats_file}")
    print(f"  Run: python plot_results.py --csv {stats_file}")

    return 0


if __name__ == "__main__":
    main()
