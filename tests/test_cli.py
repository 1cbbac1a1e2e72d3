"""Command line entry point tests."""

from __future__ import annotations

import main


class TestCli:
    def test_parses_phrases(self, capsys) -> None:
        exit_code = main.main(["plus one thousand three hundred thirty seven"])
        assert exit_code == 0
        assert "1337u16" in capsys.readouterr().out

    def test_failure_sets_exit_code(self, capsys) -> None:
        exit_code = main.main(["ten", "seven fifty"])
        assert exit_code == 1
        out = capsys.readouterr().out
        assert "10i8" in out
        assert "MALFORMED_NUMBER" in out

    def test_policy_flag(self, capsys) -> None:
        main.main(["--policy", "always_signed", "plus one"])
        assert "1i8" in capsys.readouterr().out

    def test_render(self, capsys) -> None:
        assert main.main(["--render", "5700"]) == 0
        assert capsys.readouterr().out.strip() == "five thousand seven hundred"

    def test_render_rejects_garbage(self) -> None:
        assert main.main(["--render", "lots"]) == 1
