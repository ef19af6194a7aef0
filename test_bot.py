import unittest
from unittest.mock import MagicMock, mock_open, patch

from bot import MAX_NAMES, NamesCog, format_family, format_names, get_version
from namemaker.name_generator import Gender, Name, NameGenerator


class TestFormatting(unittest.TestCase):
    def test_format_names(self):
        names = [Name("John", "Doe"), Name("Jane", "Smith")]
        result = format_names(names, [Gender.MALE, Gender.FEMALE])
        self.assertEqual("♂ John Doe\n♀ Jane Smith", result)

    def test_format_family(self):
        family = [Name("John", "Doe"), Name("Jane", "Doe"),
                  Name("Mary", "Doe"), Name("Aiden", "Doe")]
        result = format_family(family, [Gender.FEMALE, None])
        self.assertEqual("Father: John Doe\nMother: Jane Doe\n"
                         "Child: ♀ Mary Doe\nChild: Aiden Doe", result)


class TestNamesCog(unittest.TestCase):
    def setUp(self):
        self.generator = NameGenerator(["John"], ["Jane"], ["Doe"])
        self.cog = NamesCog(MagicMock(), self.generator)

    def test_male_names(self):
        self.assertEqual("♂ John Doe\n♂ John Doe",
                         self.cog.names_response("male", 2))

    def test_female_name(self):
        self.assertEqual("♀ Jane Doe", self.cog.names_response("F"))

    @patch("random.choice")
    def test_random_gender_names(self, mock_choice):
        mock_choice.side_effect = [Gender.FEMALE, Gender.MALE]
        self.assertEqual("♀ Jane Doe\n♂ John Doe",
                         self.cog.names_response("", 2))

    def test_unknown_gender_is_random(self):
        lines = self.cog.names_response("x", 3).splitlines()
        self.assertEqual(3, len(lines))
        for line in lines:
            self.assertIn(line, ["♂ John Doe", "♀ Jane Doe"])

    def test_number_limits(self):
        self.assertEqual("Ask for at least one name.",
                         self.cog.names_response("", 0))
        self.assertEqual(f"I can only come up with {MAX_NAMES} names at a time.",
                         self.cog.names_response("", MAX_NAMES + 1))

    def test_family(self):
        self.assertEqual("Father: John Doe\nMother: Jane Doe",
                         self.cog.family_response())
        lines = self.cog.family_response(children=2).splitlines()
        self.assertEqual(4, len(lines))
        for line in lines[2:]:
            self.assertIn(line, ["Child: John Doe", "Child: Jane Doe"])

    def test_family_specific(self):
        self.assertEqual("Father: John Doe\nMother: Jane Doe\n"
                         "Child: ♂ John Doe\nChild: ♀ Jane Doe\n"
                         "Child: ♀ Jane Doe",
                         self.cog.family_response(male_children=1,
                                                  female_children=2))

    def test_family_errors(self):
        self.assertEqual("Invalid amount of names: -1",
                         self.cog.family_response(children=-1))
        self.assertEqual("That family is too big.",
                         self.cog.family_response(children=MAX_NAMES))
        self.assertEqual("That family is too big.",
                         self.cog.family_response(male_children=MAX_NAMES))


class TestVersion(unittest.TestCase):
    @patch("builtins.open", mock_open(read_data="abc123\n"))
    def test_version_file(self):
        self.assertEqual("abc123", get_version())

    @patch("subprocess.run")
    @patch("builtins.open", side_effect=FileNotFoundError)
    def test_git_version(self, mock_file, mock_run):
        mock_run.return_value.stdout = "def456\n"
        self.assertEqual("def456", get_version())

    @patch("subprocess.run", side_effect=FileNotFoundError)
    @patch("builtins.open", side_effect=FileNotFoundError)
    def test_unknown_version(self, mock_file, mock_run):
        self.assertEqual("?", get_version())


if __name__ == "__main__":
    unittest.main()
