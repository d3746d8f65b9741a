#!/usr/bin/env python3
"""
Generate initial boards for tournaments: random mixes of cooperators and defectors,
or a single defector in a field of cooperators.
"""
import os
import sys
# ensure project root is on sys.path for sibling imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
import argparse
from spatial_game.board import random_board, single_defector_board
from spatial_game.board_io import write_board


def main():
    parser = argparse.ArgumentParser(description='Generate initial boards for the spatial dilemma')
    parser.add_argument('--output_dir', type=str, default=os.path.join(os.path.dirname(__file__), 'boards'),
                        help='folder to write board .txt files to')
    parser.add_argument('--num_boards', type=int, default=10, help='number of random boards')
    parser.add_argument('--rows', type=int, default=99)
    parser.add_argument('--cols', type=int, default=99)
    parser.add_argument('--defect_prob', type=float, default=0.1, help='probability a cell starts as a defector')
    parser.add_argument('--seed', type=int, default=42)
    parser.add_argument('--single_defector', action='store_true',
                        help='write one board with a single central defector instead')
    args = parser.parse_args()

    os.makedirs(args.output_dir, exist_ok=True)
    if args.single_defector:
        path = os.path.join(args.output_dir, f'single_defector_{args.rows}x{args.cols}.txt')
        write_board(single_defector_board(args.rows, args.cols), path)
        print(f"Saved {path}")
        return

    for i in range(args.num_boards):
        board = random_board(args.rows, args.cols, args.defect_prob, seed=args.seed + i)
        write_board(board, os.path.join(args.output_dir, f'board_{i:03d}.txt'))
    print(f"Saved {args.num_boards} boards to {args.output_dir}")


if __name__ == '__main__':
    main()
