import io
import unittest
from unittest.mock import patch

import cli
from namemaker.name_generator import NameGenerator


class TestCli(unittest.TestCase):
    def setUp(self):
        # One name per bank so the output only depends on gender.
        self.generator = NameGenerator(["John"], ["Jane"], ["Doe"])

    def run_cli(self, *argv):
        with patch("sys.stdout", new_callable=io.StringIO) as stdout, \
                patch("sys.stderr", new_callable=io.StringIO) as stderr:
            cli.main(list(argv), generator=self.generator)
        return stdout.getvalue(), stderr.getvalue()

    def assertCommandError(self, message, *argv):
        stdout, stderr = self.run_cli(*argv)
        self.assertEqual(message + "\n", stderr)
        self.assertEqual(cli.USAGE + "\n", stdout)

    def test_no_arguments(self):
        stdout, stderr = self.run_cli()
        self.assertIn(stdout, ["John Doe\n", "Jane Doe\n"])
        self.assertEqual("", stderr)

    def test_amount(self):
        stdout, _ = self.run_cli("3")
        lines = stdout.splitlines()
        self.assertEqual(3, len(lines))
        for line in lines:
            self.assertIn(line, ["John Doe", "Jane Doe"])

    def test_zero_amount(self):
        self.assertEqual(("", ""), self.run_cli("0"))

    def test_male(self):
        self.assertEqual(("John Doe\n", ""), self.run_cli("-m"))
        self.assertEqual(("John Doe\nJohn Doe\n", ""),
                         self.run_cli("--male", "2"))

    def test_female(self):
        self.assertEqual(("Jane Doe\n", ""), self.run_cli("--female"))
        self.assertEqual(("Jane Doe\nJane Doe\n", ""),
                         self.run_cli("-f", "2"))
        self.assertEqual(("", ""), self.run_cli("-f", "0"))

    def test_many(self):
        stdout, _ = self.run_cli("--many", "4")
        self.assertEqual(4, len(stdout.splitlines()))
        self.assertEqual(("John Doe\nJane Doe\nJane Doe\n", ""),
                         self.run_cli("-M", "1", "2"))
        self.assertEqual(("", ""), self.run_cli("-M", "0", "0"))

    def test_family(self):
        stdout, _ = self.run_cli("--family", "0")
        self.assertEqual("John Doe\nJane Doe\n", stdout)
        stdout, _ = self.run_cli("-F", "3")
        self.assertEqual(5, len(stdout.splitlines()))

    def test_family_specific(self):
        self.assertEqual(("John Doe\nJane Doe\nJohn Doe\nJane Doe\n", ""),
                         self.run_cli("-F", "1", "1"))
        self.assertEqual(("John Doe\nJane Doe\n", ""),
                         self.run_cli("-F", "0", "0"))

    def test_help(self):
        self.assertEqual((cli.USAGE + "\n", ""), self.run_cli("-h"))
        self.assertEqual((cli.USAGE + "\n", ""), self.run_cli("--help"))

    def test_bad_amount(self):
        self.assertCommandError(cli.PARSE_AMOUNT_ERROR, "abc")
        self.assertCommandError(cli.PARSE_AMOUNT_ERROR, "-m", "two")
        self.assertCommandError(cli.PARSE_AMOUNT_ERROR, "--many", "x")

    def test_negative_amount(self):
        self.assertCommandError(cli.PARSE_AMOUNT_ERROR, "-f", "-3")

    def test_bad_split(self):
        self.assertCommandError(cli.PARSE_MALE_AMOUNT_ERROR, "-M", "x", "1")
        self.assertCommandError(cli.PARSE_FEMALE_AMOUNT_ERROR, "-F", "1", "x")

    def test_too_few_arguments(self):
        self.assertCommandError(cli.TOO_FEW_ARGUMENTS_ERROR, "--many")
        self.assertCommandError(cli.TOO_FEW_ARGUMENTS_ERROR, "-F")

    def test_too_many_arguments(self):
        self.assertCommandError(cli.TOO_MANY_ARGUMENTS_ERROR, "-m", "1", "2")
        self.assertCommandError(cli.TOO_MANY_ARGUMENTS_ERROR,
                                "-M", "1", "2", "3")
        self.assertCommandError(cli.TOO_MANY_ARGUMENTS_ERROR, "1", "2")

    def test_invalid_command(self):
        self.assertCommandError(cli.INVALID_COMMAND_ERROR, "--bogus")
        self.assertCommandError(cli.INVALID_COMMAND_ERROR,
                                "-m", "1", "-f", "1")

    def test_loads_bundled_names(self):
        with patch("cli.load_generator") as mock_load:
            mock_load.return_value = self.generator
            with patch("sys.stdout", new_callable=io.StringIO) as stdout:
                cli.main(["-m"])
        mock_load.assert_called_once()
        self.assertEqual("John Doe\n", stdout.getvalue())


if __name__ == "__main__":
    unittest.main()
