"""Random names for a person, a group of people or a family."""

from .name_generator import (
    DEFAULT_NAME,
    EmptyNameBankError,
    Gender,
    InvalidAmountError,
    Name,
    NameBank,
    NameGenerator,
    NameGeneratorError,
)
from .wordlists import load_generator, load_names

__all__ = [
    "DEFAULT_NAME",
    "EmptyNameBankError",
    "Gender",
    "InvalidAmountError",
    "Name",
    "NameBank",
    "NameGenerator",
    "NameGeneratorError",
    "load_generator",
    "load_names",
]
