from __future__ import annotations

import json
import unittest
from unittest.mock import Mock

import requests

from bymr_launcher.common.config import RuntimeConfig
from bymr_launcher.common.errors import ConnectionFailed, HttpError, ParseError
from bymr_launcher.launcher.update_service import ManifestResolver


MANIFEST = {
    "currentGameVersion": "1.2.3",
    "currentLauncherVersion": "0.5.0",
    "builds": {"stable": "u1", "http": "u2", "local": "u3"},
    "flashRuntimes": {"windows": "w.exe", "darwin": "d.dmg", "linux": "l.tar.gz"},
}


def _response(status: int = 200, body: str | None = None) -> Mock:
    resp = Mock()
    resp.status_code = status
    resp.text = json.dumps(MANIFEST) if body is None else body
    resp.url = "https://api.example.test/launcher.json"
    return resp


class ManifestResolverTests(unittest.TestCase):
    def setUp(self) -> None:
        self.runtime = RuntimeConfig(manifest_endpoint="api.example.test/launcher.json")
        self.events: list[str] = []
        self.session = Mock()

    def _resolver(self) -> ManifestResolver:
        return ManifestResolver(self.runtime, sink=self.events.append, session=self.session)

    def _requested_urls(self) -> list[str]:
        return [c.args[0] for c in self.session.get.call_args_list]

    def test_https_success_skips_http(self) -> None:
        self.session.get.return_value = _response()
        manifest = self._resolver().resolve()
        self.assertTrue(manifest.https_worked)
        self.assertEqual(manifest.current_game_version, "1.2.3")
        self.assertEqual(self._requested_urls(), ["https://api.example.test/launcher.json"])
        self.assertEqual(self.events, ["Launcher successfully connected over https"])

    def test_falls_back_to_http_on_connection_error(self) -> None:
        self.session.get.side_effect = [requests.ConnectionError("tls handshake failed"), _response()]
        manifest = self._resolver().resolve()
        self.assertFalse(manifest.https_worked)
        self.assertEqual(
            self._requested_urls(),
            ["https://api.example.test/launcher.json", "http://api.example.test/launcher.json"],
        )
        self.assertEqual(len(self.events), 1)
        self.assertTrue(self.events[0].startswith("Could not access over https, attempting http:"))
        self.assertIn("tls handshake failed", self.events[0])

    def test_both_transports_fail(self) -> None:
        self.session.get.side_effect = [
            requests.ConnectionError("https down"),
            requests.Timeout("http down"),
        ]
        with self.assertRaises(ConnectionFailed) as ctx:
            self._resolver().resolve()
        self.assertEqual(ctx.exception.transport, "http")
        self.assertIsNone(ctx.exception.status)
        self.assertIn("http down", str(ctx.exception))
        self.assertEqual(len(self.events), 2)
        self.assertIn("please check the server status", self.events[1])

    def test_http_error_status_does_not_fall_back(self) -> None:
        self.session.get.return_value = _response(status=503, body="")
        with self.assertRaises(HttpError) as ctx:
            self._resolver().resolve()
        self.assertEqual(ctx.exception.status, 503)
        self.assertEqual(str(ctx.exception), "Error code: 503")
        self.assertEqual(self.session.get.call_count, 1)

    def test_http_error_after_fallback(self) -> None:
        self.session.get.side_effect = [requests.ConnectionError("refused"), _response(status=404, body="")]
        with self.assertRaises(HttpError):
            self._resolver().resolve()
        self.assertEqual(self.session.get.call_count, 2)

    def test_malformed_body_is_parse_error(self) -> None:
        self.session.get.return_value = _response(body="<html>maintenance</html>")
        with self.assertRaises(ParseError):
            self._resolver().resolve()
        self.assertEqual(self.session.get.call_count, 1)

    def test_sink_failure_does_not_break_resolution(self) -> None:
        def broken_sink(message: str) -> None:
            raise RuntimeError("ui closed")

        self.session.get.return_value = _response()
        resolver = ManifestResolver(self.runtime, sink=broken_sink, session=self.session)
        with self.assertLogs("bymr_launcher.common.events", level="ERROR"):
            manifest = resolver.resolve()
        self.assertTrue(manifest.https_worked)


if __name__ == "__main__":
    unittest.main()
