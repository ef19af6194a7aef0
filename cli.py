#!/usr/bin/env python3
"""
Command-line name generator.

    namemaker                 one random name
    namemaker 5               five random names
    namemaker -f 3            three female names
    namemaker --many 2 3      two male names, then three female names
    namemaker --family 1 2    parents, one son and two daughters
"""

import argparse
import logging
import sys

from namemaker import config
from namemaker.name_generator import Gender
from namemaker.wordlists import load_generator

USAGE = """USAGE:
\tnamemaker [amount]
\tnamemaker -m|--male|-f|--female [amount]
\tnamemaker -M|--many|-F|--family [amount|male_amount female_amount]"""

PARSE_AMOUNT_ERROR = "Could not parse the amount of names to be generated."
PARSE_MALE_AMOUNT_ERROR = \
    "Could not parse the amount of male names to be generated."
PARSE_FEMALE_AMOUNT_ERROR = \
    "Could not parse the amount of female names to be generated."
TOO_FEW_ARGUMENTS_ERROR = "Too few command arguments."
TOO_MANY_ARGUMENTS_ERROR = "Too many command arguments."
INVALID_COMMAND_ERROR = "Not a valid command."


class CommandError(Exception):
    pass


class CommandParser(argparse.ArgumentParser):

    def error(self, message):
        logging.debug(f"Argument parsing failed: {message}")
        raise CommandError(INVALID_COMMAND_ERROR)


def build_parser():
    parser = CommandParser(prog="namemaker", add_help=False, allow_abbrev=False)
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-h", "--help", action="store_true")
    group.add_argument("-m", "--male", nargs="*")
    group.add_argument("-f", "--female", nargs="*")
    group.add_argument("-M", "--many", nargs="*")
    group.add_argument("-F", "--family", nargs="*")
    parser.add_argument("amount", nargs="*")
    return parser


def parse_amount(value, message=PARSE_AMOUNT_ERROR):
    try:
        amount = int(value)
    except ValueError:
        raise CommandError(message)
    if amount < 0:
        raise CommandError(message)
    return amount


def parse_split(values):
    """Parse [amount] or [male_amount, female_amount]."""
    if len(values) < 1:
        raise CommandError(TOO_FEW_ARGUMENTS_ERROR)
    if len(values) > 2:
        raise CommandError(TOO_MANY_ARGUMENTS_ERROR)
    if len(values) == 1:
        return parse_amount(values[0]), None
    return (parse_amount(values[0], PARSE_MALE_AMOUNT_ERROR),
            parse_amount(values[1], PARSE_FEMALE_AMOUNT_ERROR))


def generate_specific(generator, gender, values):
    if not values:
        return [generator.generate_specific(gender)]
    if len(values) > 1:
        raise CommandError(TOO_MANY_ARGUMENTS_ERROR)
    amount = parse_amount(values[0])
    if gender is Gender.MALE:
        return generator.generate_many_specific(amount, 0)
    return generator.generate_many_specific(0, amount)


def generate_many(generator, values):
    amount, female_amount = parse_split(values)
    if female_amount is None:
        return generator.generate_many(amount)
    return generator.generate_many_specific(amount, female_amount)


def generate_family(generator, values):
    amount, female_amount = parse_split(values)
    if female_amount is None:
        return generator.generate_family(amount)
    return generator.generate_family_specific(amount, female_amount)


def select_names(args, generator):
    """Return the names requested by the parsed arguments, or None if zero
    names were asked for."""
    flags = [args.male, args.female, args.many, args.family]
    if args.amount and any(flag is not None for flag in flags):
        raise CommandError(TOO_MANY_ARGUMENTS_ERROR)

    if args.male is not None:
        return generate_specific(generator, Gender.MALE, args.male)
    if args.female is not None:
        return generate_specific(generator, Gender.FEMALE, args.female)
    if args.many is not None:
        return generate_many(generator, args.many)
    if args.family is not None:
        return generate_family(generator, args.family)

    if not args.amount:
        return [generator.generate()]
    if len(args.amount) > 1:
        raise CommandError(TOO_MANY_ARGUMENTS_ERROR)
    return generator.generate_many(parse_amount(args.amount[0]))


def print_usage():
    print(USAGE)


def main(argv=None, generator=None):
    config.setup_logging()
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
        if args.help:
            print_usage()
            return
        if generator is None:
            generator = load_generator(rng=config.get_rng())
        names = select_names(args, generator)
    except CommandError as e:
        print(e, file=sys.stderr)
        print_usage()
        return

    if names is None:
        logging.debug("No names requested.")
        return

    for name in names:
        print(name)


if __name__ == "__main__":
    main()
