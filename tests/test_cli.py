import json
import tempfile
import unittest
from pathlib import Path

from click.testing import CliRunner

from plateup.cli import cli


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)
        self.source = self.root / "source.json"
        self.index = self.root / "public" / "data" / "articles.json"
        self.articles = self.root / "public" / "articles"

    def tearDown(self):
        self.tmp.cleanup()

    def generate(self, *extra):
        return self.runner.invoke(
            cli,
            [
                "generate",
                "--source", str(self.source),
                "--index", str(self.index),
                "--articles-dir", str(self.articles),
                *extra,
            ],
        )

    def test_generate_default_source(self):
        result = self.generate()

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Created default source.json", result.output)
        self.assertIn("Created: 5 articles", result.output)
        self.assertIn("Done.", result.output)
        self.assertEqual(len(json.loads(self.index.read_text(encoding="utf-8"))["list"]), 5)

    def test_generate_twice_skips(self):
        self.generate()
        result = self.generate()

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Skipping existing: tuna-wrap", result.output)
        self.assertIn("Created: 0 articles", result.output)
        self.assertIn("Skipped: 5 articles", result.output)

    def test_generate_invalid_source_exits_non_zero(self):
        self.source.write_text("{ nope", encoding="utf-8")
        result = self.generate()

        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("Failed to parse source.json", result.output)
        self.assertFalse(self.index.exists())
        self.assertEqual(list(self.articles.glob("*.html")), [])

    def test_generate_escape_html(self):
        self.source.write_text(
            json.dumps({"categories": [{"name": "Mains", "items": ["Mac & Cheese"]}]}),
            encoding="utf-8",
        )
        result = self.generate("--escape-html")

        self.assertEqual(result.exit_code, 0, result.output)
        page = (self.articles / "mac-cheese.html").read_text(encoding="utf-8")
        self.assertIn("<h1>Mac &amp; Cheese</h1>", page)

    def test_paths_from_environment(self):
        result = self.runner.invoke(
            cli,
            ["generate"],
            env={
                "PLATEUP_SOURCE": str(self.source),
                "PLATEUP_INDEX": str(self.index),
                "PLATEUP_ARTICLES_DIR": str(self.articles),
            },
        )

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue((self.articles / "beans-pasta.html").exists())

    def test_no_command_runs_generate(self):
        result = self.runner.invoke(
            cli,
            [],
            env={
                "PLATEUP_SOURCE": str(self.source),
                "PLATEUP_INDEX": str(self.index),
                "PLATEUP_ARTICLES_DIR": str(self.articles),
            },
        )

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Done.", result.output)
        self.assertEqual(len(json.loads(self.index.read_text(encoding="utf-8"))["list"]), 5)

    def test_no_command_with_invalid_source_exits_non_zero(self):
        self.source.write_text("{ nope", encoding="utf-8")
        result = self.runner.invoke(
            cli,
            [],
            env={
                "PLATEUP_SOURCE": str(self.source),
                "PLATEUP_INDEX": str(self.index),
                "PLATEUP_ARTICLES_DIR": str(self.articles),
            },
        )

        self.assertEqual(result.exit_code, 1)
        self.assertFalse(self.index.exists())

    def test_numeric_items_generate(self):
        self.source.write_text(
            json.dumps({"categories": [{"name": "Nums", "items": [2024]}]}),
            encoding="utf-8",
        )
        result = self.generate()

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue((self.articles / "2024.html").exists())

    def test_init_refuses_to_overwrite(self):
        self.source.write_text("{}", encoding="utf-8")
        result = self.runner.invoke(cli, ["init", "--source", str(self.source)])

        self.assertNotEqual(result.exit_code, 0)
        self.assertEqual(self.source.read_text(encoding="utf-8"), "{}")
        self.assertIn("already exists", result.output)

        result = self.runner.invoke(cli, ["init", "--source", str(self.source), "--force"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(self.source.read_text(encoding="utf-8"))["domain"], "https://plateup.pro")

    def test_list(self):
        self.generate()
        result = self.runner.invoke(cli, ["list", "--index", str(self.index)])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("cheap-chicken-rice  Cheap Chicken Rice  (Budget Cooking)", result.output)
        self.assertIn("Total: 5 articles", result.output)

        result = self.runner.invoke(
            cli, ["list", "--index", str(self.index), "--category", "Desserts"]
        )
        self.assertIn("Total: 0 articles", result.output)

    def test_list_json(self):
        self.generate()
        result = self.runner.invoke(cli, ["list", "--index", str(self.index), "--json"])

        records = json.loads(result.output)
        self.assertEqual(records[-1]["slug"], "tuna-wrap")


if __name__ == "__main__":
    unittest.main()
