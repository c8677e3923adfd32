#!/usr/bin/env python3
"""Watch a random player work through a minefield session."""
import time
import os

import numpy as np

from minefield import BoardConfig, MinefieldEnv


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, size: int = 10, seed: int = 0):
    """Run demo games choosing uniformly among valid actions."""
    config = BoardConfig(rows=size, cols=size)
    env = MinefieldEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(seed)
    cells = size * size

    print(f"Board: {size}x{size} with {config.hazard_probability}% hazard chance")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, info = env.reset(seed=seed + game)
        done = info["game_state"] != "IN_PROGRESS"
        step = 0

        while not done:
            valid = np.flatnonzero(env.get_action_mask())
            action = int(rng.choice(valid))
            kind = "reveal" if action < cells else "flag"
            row, col = divmod(action % cells, size)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: {kind} ({row}, {col}), reward {reward:+.1f}\n")
            print(env.render())

            if done:
                if info["game_state"] == "WON":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (hit a hazard) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=10, help="Board size (NxN)")
    parser.add_argument("--seed", type=int, default=0, help="Base seed")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, size=args.size, seed=args.seed)
