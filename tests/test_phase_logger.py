# Area: Shared Tests
"""Tests for the phase logger."""

from hotseat_show._game.events import SocketEvent
from hotseat_show._shared.logging_formatters import disable_phase_mode, enable_phase_mode
from hotseat_show._shared.phase_logger import (
    ADVANCED_BY,
    GREEN,
    ORANGE,
    RED,
    RESET,
    PhaseLogger,
    get_phase_logger,
)

from conftest import advance_until, at, join


class TestPhaseLines:
    """Line formats while phase mode is on."""

    def test_phase_line(self, capsys):
        enable_phase_mode()
        phase_logger = PhaseLogger()
        phase_logger.set_round(2)
        phase_logger.log_phase("showHostRevealHotSeatChoice", "showHost",
                               next_event="hotSeatChoose", wait_ms=1500)
        out = capsys.readouterr().out
        assert out.startswith(GREEN)
        assert out.rstrip().endswith(RESET)
        assert "ROUND:   2" in out
        assert "BY: SHOW-HOST" in out
        assert "NEXT: hotSeatChoose" in out
        assert "WAIT: 1500ms" in out

    def test_button_wait(self, capsys):
        enable_phase_mode()
        PhaseLogger().log_phase("hotSeatChoose", "hotSeat", next_event="hotSeatFinalAnswer")
        assert "WAIT: CLICK" in capsys.readouterr().out

    def test_phase_without_timer(self, capsys):
        enable_phase_mode()
        PhaseLogger().log_phase("hotSeatChoose", "hotSeat")
        out = capsys.readouterr().out
        assert "NEXT: -" in out
        assert "WAIT: N/A" in out

    def test_unknown_advancer_uppercased(self, capsys):
        enable_phase_mode()
        PhaseLogger().log_phase("showHostShowScores", "replay")
        assert "BY: REPLAY" in capsys.readouterr().out

    def test_event_line(self, capsys):
        enable_phase_mode()
        PhaseLogger().log_event("alice", "contestantChoose")
        out = capsys.readouterr().out
        assert out.startswith(ORANGE)
        assert "FROM: alice" in out

    def test_rejections_and_errors_on_stderr(self, capsys):
        enable_phase_mode()
        phase_logger = PhaseLogger()
        phase_logger.log_rejected(None, "hotSeatChoose", "only the hot seat player may answer")
        phase_logger.log_error("GameStateError: No hot seat player")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith(RED + "[REJECTED]")
        assert "FROM: unknown" in captured.err
        assert "[ERROR]" in captured.err


class TestPhaseMode:
    """Nothing is printed outside phase mode."""

    def test_silent_when_disabled(self, capsys):
        disable_phase_mode()
        phase_logger = PhaseLogger()
        phase_logger.log_phase("showHostCueHotSeatRules")
        phase_logger.log_event("alice", "contestantChoose")
        phase_logger.log_error("boom")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_singleton(self):
        assert get_phase_logger() is get_phase_logger()

    def test_advanced_by_covers_roles(self):
        assert set(ADVANCED_BY) == {"timer", "forced", "showHost", "hotSeat", "contestant"}


class TestGameServerPhaseLines:
    """Each phase line names what advances the game next."""

    def phase_line(self, out, socket_event):
        return next(line for line in out.splitlines() if f"| {socket_event} " in line)

    def test_timer_advancement(self, server, clock, capsys):
        enable_phase_mode()
        join(server, "c1")
        server.start_game()
        line = self.phase_line(capsys.readouterr().out, "showHostShowFastestFingerRules")
        assert "NEXT: showHostCueFastestFingerQuestion" in line
        assert "WAIT: 5000ms" in line
        assert "WAIT: N/A" not in line

    def test_host_button_advancement(self, server, clock, capsys):
        enable_phase_mode()
        join(server, "host", "c1")
        server.start_game({"show_host_username": "host"})
        line = self.phase_line(capsys.readouterr().out, "showHostShowFastestFingerRules")
        assert "NEXT: showHostCueFastestFingerQuestion" in line
        assert "WAIT: CLICK" in line

    def test_forced_advancement(self, server, clock, capsys):
        enable_phase_mode()
        join(server, "c1")
        server.start_game()
        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_CUE_FASTEST_FINGER_THREE_STRIKES))
        line = self.phase_line(capsys.readouterr().out, "showHostCueFastestFingerThreeStrikes")
        assert "NEXT: showHostRevealFastestFingerQuestionChoices" in line
        assert "WAIT: 2500ms" in line

    def test_answer_window_advancement(self, server, clock, capsys):
        enable_phase_mode()
        join(server, "c1")
        server.start_game()
        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_QUESTION_CHOICES))
        line = self.phase_line(capsys.readouterr().out, "showHostRevealFastestFingerQuestionChoices")
        assert "NEXT: fastestFingerTimeUp" in line
        assert "WAIT: 10000ms" in line
