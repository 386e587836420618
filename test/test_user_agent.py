#!/usr/bin/env python3

import types
import unittest
import unittest.mock as mock

import requests

from armcli.pipeline import user_agent
from armcli.version import VERSION

USER_AGENT_HEADER = "user-agent"


class TestUserAgentInterceptor(unittest.TestCase):
    def test_sets_user_agent(self):
        request = types.SimpleNamespace(headers={})
        mocknext = mock.MagicMock()

        user_agent_func = user_agent.create("AzureXplatCLI")
        user_agent_func(request, mocknext)

        self.assertEqual(request.headers[USER_AGENT_HEADER], "AzureXplatCLI")
        mocknext.assert_called_once_with(request)

    def test_overwrites_user_agent(self):
        request = types.SimpleNamespace(
            headers={"user-agent": "Some-Custom-Header"}
        )
        mocknext = mock.MagicMock()

        user_agent_func = user_agent.create("AzureXplatCLI")
        user_agent_func(request, mocknext)

        self.assertEqual(request.headers[USER_AGENT_HEADER], "AzureXplatCLI")

    def test_applying_twice_yields_same_value(self):
        request = types.SimpleNamespace(headers={})
        user_agent_func = user_agent.create("AzureXplatCLI")

        user_agent_func(request, mock.MagicMock())
        user_agent_func(request, mock.MagicMock())

        self.assertEqual(request.headers, {USER_AGENT_HEADER: "AzureXplatCLI"})

    def test_overwrite_ignores_header_case(self):
        request = requests.Request(
            "GET",
            "https://management.azure.com",
            headers={"User-Agent": "python-requests"},
        ).prepare()

        user_agent.create("AzureXplatCLI")(request, mock.MagicMock())

        self.assertEqual(request.headers["User-Agent"], "AzureXplatCLI")
        self.assertEqual(len(request.headers), 1)

    def test_returns_next_stage_response(self):
        mocknext = mock.MagicMock(return_value="response")
        result = user_agent.create("AzureXplatCLI")(
            types.SimpleNamespace(headers={}), mocknext
        )
        self.assertEqual(result, "response")

    def test_rejects_empty_identifier(self):
        with self.assertRaises(ValueError):
            user_agent.create("")


class TestUserAgentData(unittest.TestCase):
    @mock.patch("armcli.pipeline.user_agent.platform")
    def test_user_agent_data(self, mock_platform):
        mock_platform.system.return_value = "WindowsNT"
        mock_platform.release.return_value = "2.0"
        mock_platform.python_version.return_value = "3.12.1"

        data = user_agent.get_user_agent_data()

        self.assertEqual(
            data,
            {
                "cliVersion": VERSION,
                "osType": "WindowsNT",
                "osVersion": "2.0",
                "pythonVersion": "3.12.1",
            },
        )
        self.assertEqual(
            user_agent.get_user_agent(),
            f"armcli/{VERSION} (WindowsNT 2.0; Python 3.12.1)",
        )

    def test_user_agent_values_are_strings(self):
        data = user_agent.get_user_agent_data()
        for key in ("cliVersion", "osType", "osVersion", "pythonVersion"):
            self.assertIsInstance(data[key], str)
        self.assertTrue(user_agent.get_user_agent().startswith("armcli/"))


if __name__ == "__main__":
    unittest.main()
