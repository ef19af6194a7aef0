"""Settings read from environment variables."""

import logging
import os
import random

BUNDLED_NAMES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                                 "names")


def get_log_level():
    if os.getenv("NAMEMAKER_DEBUG"):
        return logging.DEBUG
    return logging.INFO


def setup_logging():
    logging.basicConfig(level=get_log_level())


def get_names_dir():
    """Directory holding M.txt, F.txt and S.txt."""
    return os.getenv("NAMEMAKER_NAMES_DIR") or BUNDLED_NAMES_DIR


def get_seed():
    seed = os.getenv("NAMEMAKER_SEED")
    if not seed:
        return None
    try:
        return int(seed)
    except ValueError:
        raise ValueError(f"NAMEMAKER_SEED must be an integer, got {seed!r}")


def get_rng():
    """Seeded random source when NAMEMAKER_SEED is set, otherwise None."""
    seed = get_seed()
    if seed is None:
        return None
    logging.debug(f"Using random seed {seed}")
    return random.Random(seed)


def get_guild_ids():
    guild_ids = os.getenv("DISCORD_GUILDS")
    return [int(x) for x in guild_ids.split(",")] if guild_ids else None
