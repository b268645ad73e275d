"""
Tests for the HTTP fetcher.

The curl_cffi session is replaced with a mock, no request leaves the machine.
"""

import unittest
from unittest import mock

from curl_cffi.requests import exceptions as requests_exceptions

from errors import FetchError
from fetcher import PageFetcher
from run_config import ScraperConfig


class TestPageFetcher(unittest.TestCase):

    def setUp(self):
        patcher = mock.patch("fetcher.requests.Session")
        self.session_cls = patcher.start()
        self.addCleanup(patcher.stop)
        self.session = self.session_cls.return_value

    def test_returns_text_on_200(self):
        self.session.get.return_value = mock.Mock(status_code=200, text="<html></html>")
        fetcher = PageFetcher(impersonate="chrome120", timeout=10)

        html = fetcher.fetch("http://example.com/a")

        self.assertEqual(html, "<html></html>")
        self.session.get.assert_called_once_with(
            "http://example.com/a", impersonate="chrome120", timeout=10
        )

    def test_non_200_raises(self):
        """Any status other than 200 is fatal, including redirects and 404."""
        for status in (301, 404, 500):
            self.session.get.return_value = mock.Mock(status_code=status, text="")
            fetcher = PageFetcher()

            with self.assertRaises(FetchError) as ctx:
                fetcher.fetch("http://example.com/a")

            self.assertEqual(ctx.exception.status_code, status)
            self.assertEqual(ctx.exception.url, "http://example.com/a")

    def test_transport_error_raises(self):
        self.session.get.side_effect = requests_exceptions.RequestException("connection refused")
        fetcher = PageFetcher()

        with self.assertRaises(FetchError) as ctx:
            fetcher.fetch("http://example.com/a")

        self.assertIsNone(ctx.exception.status_code)
        self.assertIn("connection refused", str(ctx.exception))

    def test_from_config(self):
        config = ScraperConfig(impersonate="chrome110", timeout=None)

        fetcher = PageFetcher.from_config(config)

        self.assertEqual(fetcher.impersonate, "chrome110")
        self.assertIsNone(fetcher.timeout)

    def test_close_releases_session(self):
        fetcher = PageFetcher()
        fetcher.close()
        self.session.close.assert_called_once_with()


if __name__ == '__main__':
    unittest.main()
