"""
Unit Tests for Request Context Middleware helpers.
"""

import pytest

from fittrack.backend.core.middleware import KNOWN_FRONTENDS, resolve_frontend


class TestResolveFrontend:

    @pytest.mark.parametrize("header", ["cli", "CLI", " cli "])
    def test_cli_is_recognised(self, header):
        assert resolve_frontend(header) == "cli"

    @pytest.mark.parametrize("header", [None, "", "web", "telegram"])
    def test_everything_else_is_unknown(self, header):
        assert resolve_frontend(header) == "unknown"

    def test_cli_is_the_only_known_frontend(self):
        assert KNOWN_FRONTENDS == {"cli"}
