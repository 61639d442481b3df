#!/usr/bin/env python3
"""
Load policy comparison statistics from CSV and generate tables and figures.

Figures:
1. Average and P95 wait by load level
2. Head movement per tick by load level
"""
import argparse
import csv
import os
import sys
import numpy as np

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt


# Global styling, consistent across all figures
COLORS = {
    'FIFO': '#808080',    # gray
    'SSTF': '#ff7f0e',    # orange
    'LOOK': '#1f77b4',    # blue
    'CLOOK': '#aec7e8',   # light blue
    'FLOOK': '#d62728',   # red
}

POLICY_ORDER = ["FIFO", "SSTF", "LOOK", "CLOOK", "FLOOK"]
LOAD_ORDER = ['Light Load', 'Medium Load', 'Heavy Load']


def load_stats(csv_file="policy_stats.csv"):
    """Load pre-computed stats written by compare_policies.py."""
    if not os.path.exists(csv_file):
        print(f"✗ {csv_file} not found", file=sys.stderr)
        print(f"  Run: python compare_policies.py", file=sys.stderr)
        sys.exit(1)

    stats = {}
    with open(csv_file, 'r', newline='') as f:
        reader = csv.DictReader(f)
        for row in reader:
            key = (row['Load'], row['Policy'], row['Metric'])
            stats[key] = {
                'mean': float(row['Mean']),
                'std_err': float(row['StdErr']),
                'ci_lower': float(row['CILower']),
                'ci_upper': float(row['CIUpper']),
                'median': float(row['Median']),
            }

    print(f"✓ Loaded pre-computed stats from {csv_file}")
    return stats


def get_stat(stats, load, policy, metric):
    """Retrieve a stat, zeros if the combination was not run."""
    key = (load, policy, metric)
    if key in stats:
        return stats[key]
    return {'mean': 0, 'std_err': 0, 'median': 0, 'ci_lower': 0, 'ci_upper': 0}


def print_tables(stats, loads=LOAD_ORDER, policies=POLICY_ORDER):
    """Print mean values per load and policy for each metric."""
    for title, metric, fmt in [
        ("AVERAGE WAIT", 'avg_wait', "{:.2f}"),
        ("P95 WAIT", 'p95_wait', "{:.1f}"),
        ("MAX WAIT", 'max_wait', "{:.1f}"),
        ("AVERAGE TURNAROUND", 'avg_turnaround', "{:.2f}"),
        ("MOVEMENT PER TICK", 'avg_movement', "{:.4f}"),
    ]:
        print("\n" + "=" * 80)
        print(f"{title} BY LOAD")
        print("=" * 80)
        print("Load".ljust(16) + "".join(p.rjust(12) for p in policies))
        print("-" * 80)
        for load in loads:
            row = load.ljust(16)
            for policy in policies:
                row += fmt.format(get_stat(stats, load, policy, metric)['mean']).rjust(12)
            print(row)


def _grouped_bars(ax, stats, metric, loads, policies):
    x_pos = np.arange(len(loads))
    width = 0.8 / len(policies)

    for idx, policy in enumerate(policies):
        vals = []
        ci_lower = []
        ci_upper = []
        for load in loads:
            stat = get_stat(stats, load, policy, metric)
            vals.append(stat['mean'])
            ci_lower.append(stat['ci_lower'])
            ci_upper.append(stat['ci_upper'])

        # Error bar heights, clipped so a lower bound below zero does not flip the bar
        errors = [np.clip(np.array(vals) - np.array(ci_lower), 0, None),
                  np.clip(np.array(ci_upper) - np.array(vals), 0, None)]

        offset = (idx - (len(policies) - 1) / 2) * width
        ax.bar(x_pos + offset, vals, width, label=policy, color=COLORS.get(policy), alpha=0.8,
               edgecolor='black', linewidth=0.8, yerr=errors, capsize=3,
               error_kw={'elinewidth': 0.8, 'alpha': 0.6})

    ax.set_xticks(x_pos)
    ax.set_xticklabels(loads, fontsize=10)
    ax.grid(True, alpha=0.2, axis='y', linestyle='--')
    ax.legend(fontsize=9, loc='upper left', framealpha=0.95)


def fig_wait(stats, loads, policies, out='fig_wait.png'):
    """Average and P95 wait by load (grouped bars with 95% CI error bars)."""
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))

    _grouped_bars(axes[0], stats, 'avg_wait', loads, policies)
    axes[0].set_ylabel("Average wait (ticks)", fontsize=11, fontweight='bold')
    axes[0].set_title("Average Wait", fontsize=12, fontweight='bold')

    _grouped_bars(axes[1], stats, 'p95_wait', loads, policies)
    axes[1].set_ylabel("P95 wait (ticks)", fontsize=11, fontweight='bold')
    axes[1].set_title("Tail Wait (P95)", fontsize=12, fontweight='bold')

    plt.tight_layout()
    plt.savefig(out, dpi=150, bbox_inches='tight')
    print(f"✓ Generated {out}")
    plt.close(fig)


def fig_movement(stats, loads, policies, out='fig_movement.png'):
    """Head movement per tick by load."""
    fig, ax = plt.subplots(figsize=(8, 5))

    _grouped_bars(ax, stats, 'avg_movement', loads, policies)
    ax.set_ylabel("Tracks moved per tick", fontsize=11, fontweight='bold')
    ax.set_title("Head Movement", fontsize=12, fontweight='bold')
    ax.set_ylim([0.0, 1.05])

    plt.tight_layout()
    plt.savefig(out, dpi=150, bbox_inches='tight')
    print(f"✓ Generated {out}")
    plt.close(fig)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Plot disk scheduling comparison results")
    parser.add_argument('--csv', default='policy_stats.csv',
                        help='Stats CSV written by compare_policies.py (default: policy_stats.csv)')
    parser.add_argument('--out-dir', default='.',
                        help='Directory for generated figures (default: current directory)')
    args = parser.parse_args(argv)

    stats = load_stats(args.csv)
    loads = [load for load in LOAD_ORDER if any(key[0] == load for key in stats)]
    print_tables(stats, loads)

    fig_wait(stats, loads, POLICY_ORDER, out=os.path.join(args.out_dir, 'fig_wait.png'))
    fig_movement(stats, loads, POLICY_ORDER, out=os.path.join(args.out_dir, 'fig_movement.png'))
    return 0


if __name__ == "__main__":
    main()
