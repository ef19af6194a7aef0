import os
import random
import tempfile
import unittest
from unittest.mock import patch

from namemaker import config
from namemaker.name_generator import (DEFAULT_NAME, EmptyNameBankError, Gender,
                                      InvalidAmountError, Name, NameBank,
                                      NameGenerator)
from namemaker.wordlists import load_generator, load_names

MALE_NAMES = ["John", "Aiden", "Silas"]
FEMALE_NAMES = ["Jane", "Mary", "Opal"]
SURNAMES = ["Doe", "Smith", "Brown", "Patel"]


class TestName(unittest.TestCase):
    def test_str(self):
        self.assertEqual("Mary Brown", str(Name("Mary", "Brown")))

    def test_equality(self):
        self.assertEqual(Name("Mary", "Brown"), Name("Mary", "Brown"))
        self.assertNotEqual(Name("Mary", "Brown"), Name("Brown", "Mary"))

    def test_immutable(self):
        name = Name("Mary", "Brown")
        with self.assertRaises(AttributeError):
            name.first_name = "Jane"

    def test_default_name(self):
        self.assertEqual(Name("John", "Doe"), DEFAULT_NAME)
        self.assertEqual(DEFAULT_NAME, NameGenerator.default_name())
        self.assertEqual("John Doe", str(NameGenerator.default_name()))


class TestGender(unittest.TestCase):
    def test_parse(self):
        self.assertIs(Gender.MALE, Gender.parse("M"))
        self.assertIs(Gender.MALE, Gender.parse("male"))
        self.assertIs(Gender.FEMALE, Gender.parse("f"))
        self.assertIs(Gender.FEMALE, Gender.parse(" Female"))

    def test_parse_unknown(self):
        self.assertIsNone(Gender.parse(""))
        self.assertIsNone(Gender.parse(None))
        self.assertIsNone(Gender.parse("x"))

    def test_symbol(self):
        self.assertEqual("♂", Gender.MALE.symbol)
        self.assertEqual("♀", Gender.FEMALE.symbol)


class TestNameBank(unittest.TestCase):
    def test_empty_bank(self):
        with self.assertRaises(EmptyNameBankError) as cm:
            NameBank("surnames", [])
        self.assertEqual("Name bank surnames is empty", str(cm.exception))

    def test_sequence(self):
        bank = NameBank("surnames", SURNAMES)
        self.assertEqual(4, len(bank))
        self.assertEqual("Brown", bank[2])
        self.assertIn("Patel", bank)
        self.assertEqual(SURNAMES, list(bank))

    def test_copies_names(self):
        names = list(SURNAMES)
        bank = NameBank("surnames", names)
        names.append("Jones")
        self.assertNotIn("Jones", bank)

    @patch("random.randrange")
    def test_pick(self, mock_randrange):
        mock_randrange.return_value = 3
        bank = NameBank("surnames", SURNAMES)
        self.assertEqual("Patel", bank.pick())
        mock_randrange.assert_called_once_with(4)

    def test_pick_covers_every_name(self):
        bank = NameBank("surnames", SURNAMES)
        rng = random.Random(1)
        picked = {bank.pick(rng) for _ in range(200)}
        self.assertEqual(set(SURNAMES), picked)


class TestNameGenerator(unittest.TestCase):

    def setUp(self):
        self.generator = NameGenerator(MALE_NAMES, FEMALE_NAMES, SURNAMES)

    def assertMale(self, name):
        self.assertIn(name.first_name, MALE_NAMES)
        self.assertIn(name.last_name, SURNAMES)

    def assertFemale(self, name):
        self.assertIn(name.first_name, FEMALE_NAMES)
        self.assertIn(name.last_name, SURNAMES)

    def test_empty_banks(self):
        with self.assertRaises(EmptyNameBankError):
            NameGenerator([], FEMALE_NAMES, SURNAMES)
        with self.assertRaises(EmptyNameBankError):
            NameGenerator(MALE_NAMES, [], SURNAMES)
        with self.assertRaises(EmptyNameBankError):
            NameGenerator(MALE_NAMES, FEMALE_NAMES, [])

    @patch("random.randrange")
    def test_generate_specific_male(self, mock_randrange):
        mock_randrange.side_effect = [0, 0]
        result = self.generator.generate_specific(Gender.MALE)
        self.assertEqual(Name("John", "Doe"), result)

    @patch("random.randrange")
    def test_generate_specific_female(self, mock_randrange):
        mock_randrange.side_effect = [0, 1]
        result = self.generator.generate_specific(Gender.FEMALE)
        self.assertEqual(Name("Jane", "Smith"), result)

    @patch("random.randrange")
    @patch("random.choice")
    def test_generate_random_gender(self, mock_choice, mock_randrange):
        mock_choice.side_effect = [Gender.FEMALE]
        mock_randrange.side_effect = [1, 2]
        result = self.generator.generate()
        self.assertEqual(Name("Mary", "Brown"), result)

    def test_generate_specific_membership(self):
        for _ in range(50):
            self.assertMale(self.generator.generate_specific(Gender.MALE))
            self.assertFemale(self.generator.generate_specific(Gender.FEMALE))

    def test_generate_membership(self):
        for _ in range(50):
            name = self.generator.generate()
            self.assertIn(name.first_name, MALE_NAMES + FEMALE_NAMES)
            self.assertIn(name.last_name, SURNAMES)

    def test_generate_many_zero(self):
        self.assertIsNone(self.generator.generate_many(0))

    def test_generate_many(self):
        names = self.generator.generate_many(7)
        self.assertEqual(7, len(names))
        for name in names:
            self.assertIsInstance(name, Name)

    @patch("random.randrange")
    @patch("random.choice")
    def test_generate_many_order(self, mock_choice, mock_randrange):
        mock_choice.side_effect = [Gender.FEMALE, Gender.MALE]
        mock_randrange.side_effect = [1, 2, 1, 3]
        names = self.generator.generate_many(2)
        self.assertEqual([Name("Mary", "Brown"), Name("Aiden", "Patel")],
                         names)

    def test_generate_many_specific_zero(self):
        self.assertIsNone(self.generator.generate_many_specific(0, 0))

    def test_generate_many_specific(self):
        names = self.generator.generate_many_specific(3, 4)
        self.assertEqual(7, len(names))
        for name in names[:3]:
            self.assertMale(name)
        for name in names[3:]:
            self.assertFemale(name)

    def test_generate_many_specific_one_gender(self):
        names = self.generator.generate_many_specific(0, 2)
        self.assertEqual(2, len(names))
        for name in names:
            self.assertFemale(name)

        names = self.generator.generate_many_specific(2, 0)
        self.assertEqual(2, len(names))
        for name in names:
            self.assertMale(name)

    def test_negative_amounts(self):
        with self.assertRaises(InvalidAmountError):
            self.generator.generate_many(-1)
        with self.assertRaises(InvalidAmountError):
            self.generator.generate_many_specific(2, -1)
        with self.assertRaises(InvalidAmountError):
            self.generator.generate_family(-3)
        with self.assertRaises(InvalidAmountError) as cm:
            self.generator.generate_family_specific(-2, 0)
        self.assertEqual("Invalid amount of names: -2", str(cm.exception))

    def test_generate_family_no_children(self):
        family = self.generator.generate_family(0)
        self.assertEqual(2, len(family))
        self.assertMale(family[0])
        self.assertFemale(family[1])
        self.assertEqual(family[0].last_name, family[1].last_name)

    def test_generate_family(self):
        family = self.generator.generate_family(5)
        self.assertEqual(7, len(family))
        self.assertMale(family[0])
        self.assertFemale(family[1])
        self.assertEqual(1, len({name.last_name for name in family}))
        for child in family[2:]:
            self.assertIn(child.first_name, MALE_NAMES + FEMALE_NAMES)

    @patch("random.randrange")
    @patch("random.choice")
    def test_generate_family_children_genders(self, mock_choice,
                                              mock_randrange):
        mock_choice.side_effect = [Gender.FEMALE, Gender.MALE]
        # surname, father, mother, first child, second child
        mock_randrange.side_effect = [3, 2, 1, 2, 1]
        family = self.generator.generate_family(2)
        self.assertEqual([Name("Silas", "Patel"), Name("Mary", "Patel"),
                          Name("Opal", "Patel"), Name("Aiden", "Patel")],
                         family)

    def test_generate_family_specific(self):
        family = self.generator.generate_family_specific(2, 3)
        self.assertEqual(7, len(family))
        self.assertMale(family[0])
        self.assertFemale(family[1])
        for child in family[2:4]:
            self.assertMale(child)
        for child in family[4:]:
            self.assertFemale(child)
        self.assertEqual(1, len({name.last_name for name in family}))

    def test_generate_family_specific_no_children(self):
        family = self.generator.generate_family_specific(0, 0)
        self.assertEqual(2, len(family))
        self.assertEqual(family[0].last_name, family[1].last_name)

    def test_seeded_generators_match(self):
        first = NameGenerator(MALE_NAMES, FEMALE_NAMES, SURNAMES,
                              rng=random.Random(1234))
        second = NameGenerator(MALE_NAMES, FEMALE_NAMES, SURNAMES,
                               rng=random.Random(1234))
        for generator_calls in (lambda g: [g.generate()],
                                lambda g: g.generate_many(10),
                                lambda g: g.generate_many_specific(3, 3),
                                lambda g: g.generate_family(4),
                                lambda g: g.generate_family_specific(1, 2)):
            self.assertEqual(generator_calls(first), generator_calls(second))


class TestWordLists(unittest.TestCase):

    def setUp(self):
        self.tempdir = tempfile.TemporaryDirectory()
        self.names_dir = self.tempdir.name
        self.write_names("M", "  John \n\nAiden\n")
        self.write_names("F", "Jane\nMary\n   \n")
        self.write_names("S", "Doe")

    def tearDown(self):
        self.tempdir.cleanup()

    def write_names(self, name_type, text):
        path = os.path.join(self.names_dir, f"{name_type}.txt")
        with open(path, "w", encoding="utf-8") as outf:
            outf.write(text)

    def test_load_names(self):
        self.assertEqual(["John", "Aiden"], load_names("M", self.names_dir))
        self.assertEqual(["Jane", "Mary"], load_names("F", self.names_dir))
        self.assertEqual(["Doe"], load_names("S", self.names_dir))

    def test_unknown_name_type(self):
        with self.assertRaises(ValueError):
            load_names("X", self.names_dir)

    def test_missing_file(self):
        os.remove(os.path.join(self.names_dir, "S.txt"))
        with self.assertRaises(FileNotFoundError):
            load_names("S", self.names_dir)

    def test_empty_file(self):
        self.write_names("S", "\n\n")
        with self.assertRaises(EmptyNameBankError):
            load_generator(self.names_dir)

    def test_load_generator(self):
        generator = load_generator(self.names_dir)
        family = generator.generate_family_specific(1, 1)
        self.assertEqual(4, len(family))
        for name in family:
            self.assertEqual("Doe", name.last_name)
        self.assertIn(family[0].first_name, ["John", "Aiden"])
        self.assertIn(family[1].first_name, ["Jane", "Mary"])

    def test_names_dir_from_environment(self):
        with patch.dict(os.environ, {"NAMEMAKER_NAMES_DIR": self.names_dir}):
            self.assertEqual(["Doe"], load_names("S"))

    def test_bundled_names(self):
        with patch.dict(os.environ, {"NAMEMAKER_NAMES_DIR": ""}):
            for name_type in ("M", "F", "S"):
                names = load_names(name_type)
                self.assertGreater(len(names), 50)
                for name in names:
                    self.assertEqual(name.strip(), name)
                    self.assertTrue(name)


class TestConfig(unittest.TestCase):

    @patch.dict(os.environ, {"NAMEMAKER_DEBUG": "1"})
    def test_debug_log_level(self):
        self.assertEqual(config.logging.DEBUG, config.get_log_level())

    @patch.dict(os.environ, {"NAMEMAKER_DEBUG": ""})
    def test_default_log_level(self):
        self.assertEqual(config.logging.INFO, config.get_log_level())

    @patch.dict(os.environ, {"NAMEMAKER_NAMES_DIR": ""})
    def test_default_names_dir(self):
        self.assertEqual(config.BUNDLED_NAMES_DIR, config.get_names_dir())

    @patch.dict(os.environ, {"NAMEMAKER_SEED": ""})
    def test_no_seed(self):
        self.assertIsNone(config.get_seed())
        self.assertIsNone(config.get_rng())

    @patch.dict(os.environ, {"NAMEMAKER_SEED": "42"})
    def test_seed(self):
        self.assertEqual(42, config.get_seed())
        self.assertEqual(random.Random(42).random(), config.get_rng().random())

    @patch.dict(os.environ, {"NAMEMAKER_SEED": "forty-two"})
    def test_bad_seed(self):
        with self.assertRaises(ValueError):
            config.get_seed()

    @patch.dict(os.environ, {"DISCORD_GUILDS": "123,456"})
    def test_guild_ids(self):
        self.assertEqual([123, 456], config.get_guild_ids())

    @patch.dict(os.environ, {"DISCORD_GUILDS": ""})
    def test_no_guild_ids(self):
        self.assertIsNone(config.get_guild_ids())


if __name__ == "__main__":
    unittest.main()
