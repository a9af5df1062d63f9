"""
Evaluation script for scripted policies on ShooterEnv.
Writes one CSV row per episode and prints a summary.
"""

import argparse
import csv
import os
from typing import Callable, Dict, List, Optional

import numpy as np

from game.starfall import ShooterEnv
from rl.configs.shooter_config import ENV_CONFIG, EVAL_CONFIG, REWARD_CONFIG, REWARD_CONFIGS

Policy = Callable[[np.ndarray, ShooterEnv], np.ndarray]

CSV_HEADER = ["episode", "seed", "return", "length", "score", "kills", "lives_left"]

# Nearest-enemy x offset (normalized) inside which the tracker stops steering
TRACK_DEADZONE = 0.01


def random_policy(obs: np.ndarray, env: ShooterEnv) -> np.ndarray:
    return env.action_space.sample()


def tracker_policy(obs: np.ndarray, env: ShooterEnv) -> np.ndarray:
    """Slide under the nearest enemy and keep the trigger held"""
    # obs[3] is the nearest enemy's x offset; all-zero slot means no enemies
    dx = float(obs[3])
    if dx < -TRACK_DEADZONE:
        move = 1
    elif dx > TRACK_DEADZONE:
        move = 2
    else:
        move = 0
    return np.array([move, 1], dtype=np.int64)


POLICIES: Dict[str, Policy] = {
    "random": random_policy,
    "tracker": tracker_policy,
}


def evaluate_policy(
    policy: str = "tracker",
    n_episodes: int = 10,
    seed: Optional[int] = 42,
    log_dir: Optional[str] = None,
    env_config: Optional[dict] = None,
    reward_config: Optional[dict] = None,
    verbose: int = 1,
) -> Dict[str, float]:
    """
    Run a scripted policy for several episodes

    Args:
        policy: Policy name ('random' or 'tracker')
        n_episodes: Number of episodes to evaluate
        seed: Base seed; episode i uses seed + i
        log_dir: Directory for the per-episode CSV (None to skip)
        env_config: ShooterEnv keyword arguments (default: ENV_CONFIG)
        reward_config: Reward shaping dict (default: REWARD_CONFIG)
        verbose: Print per-episode lines when > 0
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    if n_episodes < 1:
        raise ValueError(f"n_episodes must be >= 1, got {n_episodes}")
    act = POLICIES[policy]

    env = ShooterEnv(reward_config=reward_config or REWARD_CONFIG, **(env_config or ENV_CONFIG))

    rows: List[list] = []
    for ep in range(n_episodes):
        ep_seed = None if seed is None else seed + ep
        obs, info = env.reset(seed=ep_seed)
        env.action_space.seed(ep_seed)

        done = False
        ep_return = 0.0
        while not done:
            obs, reward, terminated, truncated, info = env.step(act(obs, env))
            ep_return += reward
            done = terminated or truncated

        rows.append([ep + 1, ep_seed, ep_return, info["step"], info["score"], info["kills"], info["lives"]])
        if verbose > 0:
            print(f"[{policy}] Episode {ep + 1}/{n_episodes}: "
                  f"return={ep_return:.2f} score={info['score']} steps={info['step']}")

    env.close()

    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        csv_path = os.path.join(log_dir, f"{policy}_eval.csv")
        with open(csv_path, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)
            writer.writerows(rows)
        if verbose > 0:
            print(f"[evaluate] Saved {len(rows)} episodes to {csv_path}")

    returns = np.array([r[2] for r in rows], dtype=np.float64)
    scores = np.array([r[4] for r in rows], dtype=np.float64)
    lengths = np.array([r[3] for r in rows], dtype=np.float64)
    summary = {
        "mean_return": float(np.mean(returns)),
        "std_return": float(np.std(returns)),
        "mean_score": float(np.mean(scores)),
        "mean_length": float(np.mean(lengths)),
        "episodes": n_episodes,
    }

    if verbose > 0:
        print(f"\n{'='*60}")
        print(f"Policy: {policy}")
        print(f"Mean Return: {summary['mean_return']:.2f} ± {summary['std_return']:.2f}")
        print(f"Mean Score: {summary['mean_score']:.1f}")
        print(f"Mean Length: {summary['mean_length']:.0f} steps")
        print(f"{'='*60}\n")

    return summary


def main(argv=None):
    parser = argparse.ArgumentParser(description="Evaluate scripted policies on ShooterEnv")
    parser.add_argument(
        "--policy",
        type=str,
        default="tracker",
        choices=list(POLICIES) + ["all"],
        help="Policy to evaluate (default: tracker)",
    )
    parser.add_argument(
        "--episodes",
        type=int,
        default=EVAL_CONFIG["n_episodes"],
        help=f"Number of episodes (default: {EVAL_CONFIG['n_episodes']})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EVAL_CONFIG["seed"],
        help=f"Base random seed (default: {EVAL_CONFIG['seed']})",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=EVAL_CONFIG["log_dir"],
        help=f"Directory for CSV output (default: {EVAL_CONFIG['log_dir']})",
    )
    parser.add_argument(
        "--reward",
        type=str,
        default=REWARD_CONFIG["name"],
        choices=list(REWARD_CONFIGS),
        help=f"Reward shaping config (default: {REWARD_CONFIG['name']})",
    )

    args = parser.parse_args(argv)

    policies = EVAL_CONFIG["policies"] if args.policy == "all" else [args.policy]
    for name in policies:
        evaluate_policy(
            policy=name,
            n_episodes=args.episodes,
            seed=args.seed,
            log_dir=args.log_dir,
            reward_config=REWARD_CONFIGS[args.reward],
        )


if __name__ == "__main__":
    main()
