#!/usr/bin/env python3
"""
Play a spatial prisoner's dilemma tournament from a board file and save the
history as an animated GIF plus a PNG of the final board.
"""
import os, sys, argparse
import warnings

# ensure local imports
sys.path.append(os.path.dirname(os.path.abspath(__file__)))
from spatial_game.board_io import read_board
from spatial_game.tournament import play_tournament
from spatial_game.render import render_history, save_gif, save_png
from spatial_game.metrics import summarize_history


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Spatial prisoner's dilemma tournament")
    p.add_argument('board_file', type=str, help='initial board text file')
    p.add_argument('b', type=float, help='temptation payoff for defecting against a cooperator')
    p.add_argument('num_gens', type=int, help='number of rounds to play')
    p.add_argument('--out_dir', type=str, default='.', help='output directory')
    p.add_argument('--gif_name', type=str, default='out', help='animated GIF name (without .gif)')
    p.add_argument('--png_name', type=str, default='Prisoners.png', help='PNG of the final board')
    p.add_argument('--cell_size', type=int, default=5, help='pixels per cell')
    p.add_argument('--duration', type=float, default=0.1, help='GIF frame delay in seconds')
    p.add_argument('--transitions', action='store_true',
                   help='colour cells by strategy change (C->D yellow, D->C green)')
    p.add_argument('--no_gif', action='store_true', help='skip rendering')
    args = p.parse_args(argv)
    if args.num_gens < 0:
        p.error(f"num_gens must be non-negative, got {args.num_gens}")
    if args.cell_size < 1:
        p.error(f"cell_size must be >= 1, got {args.cell_size}")
    return args


def main(argv=None):
    args = parse_args(argv)
    if args.b <= 1.0:
        warnings.warn(f"b={args.b} <= 1: defection never pays more than mutual cooperation")

    initial_board = read_board(args.board_file)
    print(f"Loaded {initial_board.rows}x{initial_board.cols} board from {args.board_file}")

    print("Playing the tournament.")
    boards = play_tournament(initial_board, args.b, args.num_gens)
    summary = summarize_history(boards)
    print(f"Tournament played: final cooperation {summary['final_cooperation']:.3f}, "
          f"mean {summary['mean_cooperation']:.3f}, category {summary['category']}")

    if args.no_gif:
        return summary

    print("Now, drawing images.")
    imgs = render_history(boards, cell_size=args.cell_size, transitions=args.transitions)
    print("Boards drawn to images! Now, convert to animated GIF.")

    os.makedirs(args.out_dir, exist_ok=True)
    gif_path = os.path.join(args.out_dir, f"{args.gif_name}.gif")
    save_gif(imgs, gif_path, duration=args.duration)
    png_path = os.path.join(args.out_dir, args.png_name)
    save_png(imgs[-1], png_path)
    print(f"Success! GIF saved to {gif_path}, final board to {png_path}")
    return summary


if __name__ == '__main__':
    main()
