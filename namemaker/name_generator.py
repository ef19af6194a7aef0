import enum
import random
from dataclasses import dataclass


class NameGeneratorError(Exception):
    pass


class EmptyNameBankError(NameGeneratorError):

    def __init__(self, bank_name):
        self.bank_name = bank_name

    def __str__(self):
        return f"Name bank {self.bank_name} is empty"


class InvalidAmountError(NameGeneratorError):

    def __init__(self, amount):
        self.amount = amount

    def __str__(self):
        return f"Invalid amount of names: {self.amount}"


class Gender(enum.Enum):
    MALE = "M"
    FEMALE = "F"

    @classmethod
    def parse(cls, text):
        """Return the Gender for text ("m", "Male", "F", ...), or None."""
        if not text:
            return None
        code = text.strip().upper()[:1]
        for gender in cls:
            if gender.value == code:
                return gender
        return None

    @property
    def symbol(self):
        return "♂" if self is Gender.MALE else "♀"


@dataclass(frozen=True)
class Name:
    first_name: str
    last_name: str

    def __str__(self):
        return f"{self.first_name} {self.last_name}"


DEFAULT_NAME = Name("John", "Doe")


class NameBank:
    """An immutable, non-empty list of names of one kind."""

    def __init__(self, bank_name, names):
        self.bank_name = bank_name
        self._names = tuple(names)
        if not self._names:
            raise EmptyNameBankError(bank_name)

    def __repr__(self):
        return f"NameBank({self.bank_name}, {len(self)} names)"

    def __len__(self):
        return len(self._names)

    def __getitem__(self, index):
        return self._names[index]

    def __iter__(self):
        return iter(self._names)

    def __contains__(self, name):
        return name in self._names

    def pick(self, rng=random):
        # Draws with replacement; every index is equally likely.
        return self._names[rng.randrange(len(self._names))]


def _check_amounts(*amounts):
    for amount in amounts:
        if amount < 0:
            raise InvalidAmountError(amount)


class NameGenerator:
    """Generates random names, batches of names and families.

    The three banks are fixed at construction and never modified, so one
    generator can be shared freely. Pass a seeded ``random.Random`` as
    ``rng`` for reproducible output; by default the module-level ``random``
    functions are used.

    Example::

        generator = NameGenerator(["John"], ["Jane"], ["Smith", "Jones"])
        generator.generate()                    # Name("Jane", "Jones")
        generator.generate_many_specific(2, 1)  # two men, then one woman
        generator.generate_family(3)            # father, mother, 3 children
    """

    def __init__(self, male_first_names, female_first_names, surnames,
                 rng=None):
        self.male_first_names = NameBank("male first names", male_first_names)
        self.female_first_names = NameBank("female first names",
                                           female_first_names)
        self.surnames = NameBank("surnames", surnames)
        self.rng = rng or random

    def first_names(self, gender):
        if gender is Gender.FEMALE:
            return self.female_first_names
        return self.male_first_names

    def random_gender(self):
        return self.rng.choice((Gender.MALE, Gender.FEMALE))

    def generate(self):
        """Return a name with a randomly chosen gender."""
        return self.generate_specific(self.random_gender())

    def generate_specific(self, gender):
        """Return a name whose first name matches gender."""
        first_name = self.first_names(gender).pick(self.rng)
        last_name = self.surnames.pick(self.rng)
        return Name(first_name, last_name)

    def generate_many(self, amount):
        """Return a list of amount random names, or None if amount is 0."""
        _check_amounts(amount)
        if amount == 0:
            return None
        return [self.generate() for _ in range(amount)]

    def generate_many_specific(self, male_amount, female_amount):
        """Return male_amount male names followed by female_amount female
        names, or None if both are 0.

        Male names always come first so callers can split the list by
        position.
        """
        _check_amounts(male_amount, female_amount)
        if male_amount == 0 and female_amount == 0:
            return None

        names = []
        for _ in range(male_amount):
            names.append(self.generate_specific(Gender.MALE))
        for _ in range(female_amount):
            names.append(self.generate_specific(Gender.FEMALE))
        return names

    def generate_family(self, children_amount):
        """Return a family sharing one surname: father, mother, then
        children_amount children of random gender.

        Unlike generate_many this never returns None, since the parents are
        always present.
        """
        _check_amounts(children_amount)
        genders = [self.random_gender() for _ in range(children_amount)]
        return self._family(genders)

    def generate_family_specific(self, male_children_amount,
                                 female_children_amount):
        """Return father, mother, the male children, then the female
        children, all sharing one surname."""
        _check_amounts(male_children_amount, female_children_amount)
        genders = [Gender.MALE] * male_children_amount \
            + [Gender.FEMALE] * female_children_amount
        return self._family(genders)

    def _family(self, children_genders):
        last_name = self.surnames.pick(self.rng)
        family = [
            self._family_member(Gender.MALE, last_name),
            self._family_member(Gender.FEMALE, last_name),
        ]
        for gender in children_genders:
            family.append(self._family_member(gender, last_name))
        return family

    def _family_member(self, gender, last_name):
        return Name(self.first_names(gender).pick(self.rng), last_name)

    @staticmethod
    def default_name():
        """Return the placeholder name John Doe."""
        return DEFAULT_NAME
