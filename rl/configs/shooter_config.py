"""
Environment, reward and evaluation configuration for ShooterEnv
"""

# Environment parameters (game keys are forwarded to GameConfig)
ENV_CONFIG = {
    # "render_mode": None,  # headless; use "human" to watch an episode
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_enemies": 5,
    "spawn_chance": 0.02,
    "start_lives": 3,
}

# ==============================================================================
# REWARD SHAPING CONFIGURATIONS
# ==============================================================================

# Baseline: points matter, losing a life costs about as much as four kills
REWARD_CONFIG_BASELINE = {
    "name": "baseline",
    "description": "Balanced scoring vs. survival",
    "R_POINT": 0.1,      # Per point scored (10-25 per kill)
    "R_LIFE": 5.0,       # Penalty per life lost
    "R_SHOT": 0.01,      # Penalty per shot fired
    "R_TIME": 0.001,     # Small per-step penalty
    "R_GAME_OVER": 10.0, # Extra penalty when the last life goes
}

# Survival: dodging first, shooting second
REWARD_CONFIG_SURVIVAL = {
    "name": "survival",
    "description": "Prioritize survival - heavier life and game-over penalties",
    "R_POINT": 0.05,
    "R_LIFE": 10.0,
    "R_SHOT": 0.02,
    "R_TIME": 0.0,
    "R_GAME_OVER": 25.0,
}

REWARD_CONFIGS = {
    "baseline": REWARD_CONFIG_BASELINE,
    "survival": REWARD_CONFIG_SURVIVAL,
}

REWARD_CONFIG = REWARD_CONFIG_BASELINE

# ==============================================================================
# EVALUATION SETTINGS
# ==============================================================================

EVAL_CONFIG = {
    "n_episodes": 10,
    "seed": 42,
    "policies": ["random", "tracker"],
    "log_dir": "./logs/eval",
}
