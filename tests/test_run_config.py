"""
Tests for run configuration loading and validation.
"""

import tempfile
import unittest
from pathlib import Path

import scraper_config
from run_config import ScraperConfig, load_config, validate_config


class TestScraperConfigFromDict(unittest.TestCase):

    def test_defaults(self):
        """An empty dict gives the module defaults."""
        config = ScraperConfig.from_dict({})

        self.assertIsNone(config.mode)
        self.assertEqual(config.year, "")
        self.assertEqual(config.listing_url, scraper_config.LISTING_URL)
        self.assertEqual(config.page_param, "pagina")
        self.assertEqual(config.start_page, 1)
        self.assertFalse(config.continue_on_error)

    def test_unquoted_year(self):
        """YAML reads 2020 as an int; it should become a string."""
        config = ScraperConfig.from_dict({'year': 2020})
        self.assertEqual(config.year, "2020")

    def test_zero_timeout_disables_timeout(self):
        config = ScraperConfig.from_dict({'timeout': 0})
        self.assertIsNone(config.timeout)

    def test_invalid_values(self):
        invalid = [
            {'mode': 'everything'},
            {'listing_url': ''},
            {'start_page': -1},
            {'max_pages': 0},
            {'timeout': 'soon'},
            {'continue_on_error': 'yes'},
            {'unknown_field': 1},
        ]
        for data in invalid:
            with self.subTest(data=data):
                with self.assertRaises(ValueError):
                    ScraperConfig.from_dict(data)


class TestLoadConfig(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.dir = Path(self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    def _write(self, text):
        path = self.dir / "config.yaml"
        path.write_text(text, encoding='utf-8')
        return str(path)

    def test_load_yaml(self):
        path = self._write("mode: records\nyear: '2019'\nmax_pages: 5\ncontinue_on_error: true\n")

        config = load_config(path)

        self.assertEqual(config.mode, 'records')
        self.assertEqual(config.year, "2019")
        self.assertEqual(config.max_pages, 5)
        self.assertTrue(config.continue_on_error)

    def test_empty_file_uses_defaults(self):
        config = load_config(self._write(""))
        self.assertEqual(config.listing_url, scraper_config.LISTING_URL)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config(str(self.dir / "missing.yaml"))

    def test_not_a_mapping(self):
        with self.assertRaises(ValueError):
            load_config(self._write("- a\n- b\n"))

    def test_example_config_is_valid(self):
        example = Path(__file__).parent.parent / "configs" / "example.yaml"

        config = load_config(str(example))

        self.assertEqual(config.mode, 'links')
        self.assertEqual(validate_config(config), [])


class TestValidateConfig(unittest.TestCase):

    def test_defaults_have_no_warnings(self):
        self.assertEqual(validate_config(ScraperConfig()), [])

    def test_warnings(self):
        config = ScraperConfig(listing_url="ftp://example.com", year="20",
                               max_pages=5000, timeout=None)

        warnings = validate_config(config)

        self.assertEqual(len(warnings), 4)


if __name__ == '__main__':
    unittest.main()
