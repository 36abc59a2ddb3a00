"""
Tests for the command line tool
"""

import logging

from pya2s.cli import main


class TestCli:
    """Test pya2s-query output"""

    def test_prints_server_details(self, mock_server, capsys):
        assert main([f"127.0.0.1:{mock_server.port}", "--timeout", "1", "--rules", "1"]) == 0
        out = capsys.readouterr().out
        assert "Server: Mock Server" in out
        assert "Map: de_dust2" in out
        assert "Players: 2/16 (0 bots)" in out
        assert "Players online: 2" in out
        assert "alice (Score: 10)" in out
        assert "mp_timelimit = 30" in out
        assert "... and 1 more" in out

    def test_bad_address(self, capsys):
        assert main(["not-an-address"]) == 1

    def test_unreachable_info(self, mock_server):
        mock_server.scenario.info_response = None
        assert main([f"127.0.0.1:{mock_server.port}", "--timeout", "0.2"]) == 1

    def test_verbose_sets_debug_level(self, mock_server):
        assert main([f"127.0.0.1:{mock_server.port}", "--timeout", "1", "-v"]) == 0
        assert logging.getLogger("pya2s.client").getEffectiveLevel() == logging.DEBUG
        assert logging.getLogger("pya2s.cli").getEffectiveLevel() == logging.DEBUG

    def test_quiet_by_default(self, mock_server):
        assert main([f"127.0.0.1:{mock_server.port}", "--timeout", "1"]) == 0
        assert logging.getLogger("pya2s.client").getEffectiveLevel() == logging.WARNING
