#!/usr/bin/env python3
"""
Sweep the temptation payoff b, run a tournament for each value from the same
initial board, and append summary metrics to a CSV for easy comparison.
"""
import argparse
import csv
import os
import sys

# ensure repo root in path for imports
script_dir = os.path.dirname(os.path.abspath(__file__))
repo_root = os.path.abspath(os.path.join(script_dir, '..'))
sys.path.insert(0, repo_root)

from spatial_game.board import random_board
from spatial_game.board_io import read_board
from spatial_game.tournament import play_tournament
from spatial_game.metrics import summarize_history

FIELDS = ['board', 'b', 'num_gens', 'initial_cooperation', 'final_cooperation',
          'mean_cooperation', 'period', 'category']


def parse_args(argv=None):
    parser = argparse.ArgumentParser("Sweep temptation payoff b")
    parser.add_argument('--board_file', type=str, default=None,
                        help='initial board; a random board is used when omitted')
    parser.add_argument('--rows', type=int, default=50)
    parser.add_argument('--cols', type=int, default=50)
    parser.add_argument('--defect_prob', type=float, default=0.1)
    parser.add_argument('--seed', type=int, default=42)
    parser.add_argument('--b_values', type=float, nargs='+', default=[1.1, 1.3, 1.5, 1.7, 1.85, 2.0, 2.5])
    parser.add_argument('--num_gens', type=int, default=100)
    parser.add_argument('--output_csv', type=str, default='sweep_b.csv')
    return parser.parse_args(argv)


def sweep(board, b_values, num_gens):
    rows = []
    for b in b_values:
        summary = summarize_history(play_tournament(board, b, num_gens))
        summary['b'] = b
        rows.append(summary)
        print(f"b={b:.3f}: final cooperation {summary['final_cooperation']:.3f} ({summary['category']})")
    return rows


def main(argv=None):
    args = parse_args(argv)
    if args.board_file:
        board = read_board(args.board_file)
        board_name = args.board_file
    else:
        board = random_board(args.rows, args.cols, args.defect_prob, seed=args.seed)
        board_name = f'random_{args.rows}x{args.cols}_p{args.defect_prob}_s{args.seed}'

    rows = sweep(board, args.b_values, args.num_gens)

    # ensure output directory exists
    out_dir = os.path.dirname(args.output_csv)
    if out_dir and not os.path.isdir(out_dir):
        os.makedirs(out_dir, exist_ok=True)

    write_header = not os.path.isfile(args.output_csv)
    with open(args.output_csv, 'a', newline='') as f:
        writer = csv.writer(f)
        if write_header:
            writer.writerow(FIELDS)
        for r in rows:
            writer.writerow([board_name, r['b'], r['num_gens'],
                             f"{r['initial_cooperation']:.6f}", f"{r['final_cooperation']:.6f}",
                             f"{r['mean_cooperation']:.6f}",
                             '' if r['period'] is None else r['period'], r['category']])
    print(f"Results appended to {args.output_csv}")


if __name__ == '__main__':
    main()
