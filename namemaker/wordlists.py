import logging
import os

from . import config
from .name_generator import NameGenerator

NAME_TYPES = {
    "M": "male first names",
    "F": "female first names",
    "S": "surnames",
}


def load_names(name_type, names_dir=None):
    """Read the list of names of the given type ("M", "F" or "S").

    Lines are stripped and blank lines skipped.
    """
    if name_type not in NAME_TYPES:
        raise ValueError(f"Unknown name type: {name_type}")
    names_dir = names_dir or config.get_names_dir()
    path = os.path.join(names_dir, f"{name_type}.txt")

    with open(path, encoding="utf-8") as inf:
        names = [name.strip() for name in inf.readlines()]
    names = [name for name in names if name]

    logging.debug(f"Loaded {len(names)} {NAME_TYPES[name_type]} from {path}")
    return names


def load_generator(names_dir=None, rng=None):
    return NameGenerator(load_names("M", names_dir),
                         load_names("F", names_dir),
                         load_names("S", names_dir),
                         rng=rng)
