#!/usr/bin/env python3
"""
Plot final and mean cooperation fraction against the temptation payoff b.
Reads the CSV written by scripts/sweep_b.py.
"""
import csv
import os
import numpy as np
import matplotlib.pyplot as plt
import argparse


def load_sweep(path):
    rows = []
    with open(path, 'r', newline='') as f:
        reader = csv.DictReader(f)
        for row in reader:
            rows.append(row)
    if not rows:
        raise ValueError(f"No rows found in {path}")
    rows.sort(key=lambda r: float(r['b']))
    b = np.array([float(r['b']) for r in rows])
    final = np.array([float(r['final_cooperation']) for r in rows])
    mean = np.array([float(r['mean_cooperation']) for r in rows])
    return b, final, mean


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Plot cooperation level against temptation payoff b."
    )
    parser.add_argument('--sweep_csv', type=str, default='sweep_b.csv',
                        help='input CSV from scripts/sweep_b.py')
    parser.add_argument('--out_fig', type=str, default='./figures/cooperation_vs_b.png',
                        help='output line plot')
    args = parser.parse_args(argv)

    b, final, mean = load_sweep(args.sweep_csv)

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(b, final, 'o-', label='Final', color='tab:blue')
    ax.plot(b, mean, 's--', label='Mean over history', color='tab:orange')
    ax.set_xlabel('Temptation payoff b')
    ax.set_ylabel('Fraction of cooperators')
    ax.set_ylim(0, 1)
    ax.legend()
    plt.tight_layout()
    out_dir = os.path.dirname(args.out_fig)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.savefig(args.out_fig)
    plt.close(fig)
    print(f"Saved plot to: {args.out_fig}")


if __name__ == '__main__':
    main()
