"""
Tests for the regutils.config module
"""
import base64
import json
import os
import tempfile
import unittest
from unittest.mock import patch

from regutils.config import config_dir, load_config, parse_config
from regutils.exceptions import ConfigLoadError
from regutils.models import AuthConfig


class ConfigTest(unittest.TestCase):
    """
    regutils.config tests
    """

    def test_config_dir(self):
        """
        Test that DOCKER_CONFIG overrides the home directory default.
        """
        with patch.dict(os.environ, {"DOCKER_CONFIG": "/etc/docker-cfg"}):
            self.assertEqual(config_dir(), "/etc/docker-cfg")
        with patch.dict(os.environ, {"HOME": "/home/me"}):
            os.environ.pop("DOCKER_CONFIG", None)
            self.assertEqual(config_dir(), os.path.join("/home/me", ".docker"))

    def test_parse_auths(self):
        """
        Test decoding of the auths section.
        """
        dcfg = parse_config(
            {
                "auths": {
                    "test.io": {
                        "auth": base64.b64encode(b"myuser:my:pass").decode(),
                        "email": "me@test.io",
                    },
                    "token.io": {"identitytoken": "tok"},
                    "https://index.docker.io/v1/": {},
                },
                "credsStore": "desktop",
                "credHelpers": {"gcr.io": "gcloud"},
            }
        )
        self.assertEqual(
            dcfg.auth_configs["test.io"],
            AuthConfig(
                username="myuser",
                password="my:pass",
                server_address="test.io",
                email="me@test.io",
            ),
        )
        self.assertEqual(
            dcfg.auth_configs["token.io"],
            AuthConfig(server_address="token.io", identity_token="tok"),
        )
        self.assertEqual(
            dcfg.auth_configs["https://index.docker.io/v1/"],
            AuthConfig(server_address="https://index.docker.io/v1/"),
        )
        self.assertEqual(dcfg.credentials_store, "desktop")
        self.assertEqual(dcfg.credential_helpers, {"gcr.io": "gcloud"})
        self.assertTrue(dcfg.contains_auth())

    def test_parse_empty(self):
        """
        Test that configs without credentials report no auth.
        """
        self.assertFalse(parse_config({}).contains_auth())
        self.assertFalse(parse_config({"auths": {}, "psFormat": "x"}).contains_auth())
        self.assertTrue(parse_config({"credHelpers": {"r": "h"}}).contains_auth())

    def test_parse_errors(self):
        """
        Test that malformed content raises ConfigLoadError.
        """
        bad_configs = [
            [],
            {"auths": {"r1": "notadict"}},
            {"auths": {"r1": {"auth": "!!!notbase64"}}},
            {"auths": {"r1": {"auth": base64.b64encode(b"nocolon").decode()}}},
            {"auths": ["r1"]},
            {"auths": {"r1": {"auth": 5}}},
            {"auths": {"r1": {"email": ["me@test.io"]}}},
            {"credHelpers": "x"},
            {"credHelpers": {"r1": 5}},
            {"credsStore": 5},
        ]
        for content in bad_configs:
            with self.assertRaises(ConfigLoadError):
                parse_config(content, "config.json")

    def test_load_config(self):
        """
        Test loading config.json from a directory.
        """
        with tempfile.TemporaryDirectory() as tmpdir:
            dcfg = load_config(tmpdir)
            self.assertFalse(dcfg.contains_auth())

            filename = os.path.join(tmpdir, "config.json")
            with open(filename, "w") as fconfig:
                json.dump({"auths": {"a.io": {}, "b.io": {}}}, fconfig)
            dcfg = load_config(tmpdir)
            self.assertEqual(list(dcfg.auth_configs), ["a.io", "b.io"])
            self.assertEqual(dcfg.filename, filename)

            with open(filename, "w") as fconfig:
                fconfig.write("{")
            with self.assertRaises(ConfigLoadError) as ctx:
                load_config(tmpdir)
            self.assertIn(filename, str(ctx.exception))
            self.assertIsInstance(ctx.exception.__cause__, ValueError)


if __name__ == "__main__":
    unittest.main()
