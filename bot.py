import logging
import os
import subprocess

import nextcord
from nextcord.ext import commands

from namemaker import config
from namemaker.name_generator import Gender, NameGeneratorError
from namemaker.wordlists import load_generator

MAX_NAMES = 50

FAMILY_ROLES = ("Father", "Mother")


def get_version():
    version = None

    try:
        with open('.version') as version_file:
            version = version_file.readline().strip()
    except FileNotFoundError:
        pass

    if not version:
        try:
            version = subprocess.run(["git", "rev-parse", "HEAD"],
                                     capture_output=True,
                                     text=True).stdout.strip()
        except FileNotFoundError:
            pass

    return version or "?"


def format_name(name, gender=None):
    if gender is None:
        return str(name)
    return f"{gender.symbol} {name}"


def format_names(names, genders):
    return "\n".join(format_name(name, gender)
                     for name, gender in zip(names, genders))


def format_family(family, children_genders):
    lines = []
    for role, name in zip(FAMILY_ROLES, family):
        lines.append(f"{role}: {name}")
    for name, gender in zip(family[len(FAMILY_ROLES):], children_genders):
        lines.append(f"Child: {format_name(name, gender)}")
    return "\n".join(lines)


class NamesCog(commands.Cog):
    def __init__(self, bot, generator):
        self.bot = bot
        self.generator = generator

    @commands.Cog.listener()
    async def on_ready(self):
        logging.info("Names cog initialized.")

    def names_response(self, gender_text="", number=1):
        if number < 1:
            return "Ask for at least one name."
        if number > MAX_NAMES:
            return f"I can only come up with {MAX_NAMES} names at a time."

        gender = Gender.parse(gender_text)
        if gender is Gender.MALE:
            names = self.generator.generate_many_specific(number, 0)
            genders = [gender] * number
        elif gender is Gender.FEMALE:
            names = self.generator.generate_many_specific(0, number)
            genders = [gender] * number
        else:
            genders = [self.generator.random_gender() for _ in range(number)]
            names = [self.generator.generate_specific(g) for g in genders]
        return format_names(names, genders)

    def family_response(self, children=0, male_children=0, female_children=0):
        try:
            if male_children or female_children:
                if male_children + female_children + 2 > MAX_NAMES:
                    return "That family is too big."
                family = self.generator.generate_family_specific(
                    male_children, female_children)
                genders = [Gender.MALE] * male_children \
                    + [Gender.FEMALE] * female_children
            else:
                if children + 2 > MAX_NAMES:
                    return "That family is too big."
                family = self.generator.generate_family(children)
                # generate_family doesn't report the children's genders.
                genders = [None] * children
        except NameGeneratorError as e:
            logging.debug(f"Family request failed: {e}")
            return str(e)
        return format_family(family, genders)

    @nextcord.slash_command(name="name", description="Generate a name",
                            guild_ids=config.get_guild_ids())
    async def name_command(self, interaction: nextcord.Interaction,
                           gender: str = "", number: int = 1):
        await interaction.send(self.names_response(gender, number))

    @nextcord.slash_command(name="family", description="Generate a family",
                            guild_ids=config.get_guild_ids())
    async def family_command(self, interaction: nextcord.Interaction,
                             children: int = 0, male_children: int = 0,
                             female_children: int = 0):
        await interaction.send(
            self.family_response(children, male_children, female_children))

    @nextcord.slash_command(name="version", description="Version",
                            guild_ids=config.get_guild_ids())
    async def version_command(self, interaction: nextcord.Interaction):
        await interaction.send(get_version())


def create_bot(generator):
    intents = nextcord.Intents.default()
    bot = commands.Bot(command_prefix="!", intents=intents)

    @bot.event
    async def on_ready():
        logging.info("Howdy folks.")

    bot.add_cog(NamesCog(bot, generator))
    return bot


def main():
    config.setup_logging()
    # This will intentionally cause the bot to fail fast with a KeyError
    # exception if the token is not found.
    token = os.environ["DISCORD_TOKEN"]
    generator = load_generator(rng=config.get_rng())
    bot = create_bot(generator)
    bot.run(token)


if __name__ == "__main__":
    main()
