# Area: Players Tests
"""Tests for Player and PlayerMap — joins, rejoins and broadcast."""

from unittest.mock import Mock

from hotseat_show._players.player import Player
from hotseat_show._players.player_map import PlayerMap
from hotseat_show._players.sockets import LocalSocket
from hotseat_show._question.choices import Choice
from hotseat_show._question.lifelines import Confidence


class TestPlayer:
    """Tests for per-player answer state."""

    def test_fastest_finger_locks_at_four(self):
        player = Player("alice")
        for choice, elapsed in zip([Choice.B, Choice.A, Choice.D], [1.0, 2.0, 3.0]):
            assert player.choose_fastest_finger(choice, elapsed) is True
        assert player.fastest_finger_locked() is False
        assert player.fastest_finger_time is None

        assert player.choose_fastest_finger(Choice.C, 4.2) is True
        assert player.fastest_finger_locked() is True
        assert player.fastest_finger_time == 4.2

    def test_locked_ordering_cannot_change(self):
        player = Player("alice")
        for choice in [Choice.A, Choice.B, Choice.C, Choice.D]:
            player.choose_fastest_finger(choice, 1.0)
        assert player.choose_fastest_finger(Choice.A, 2.0) is False
        assert player.fastest_finger_choices == [Choice.A, Choice.B, Choice.C, Choice.D]

    def test_duplicate_choice_refused(self):
        player = Player("alice")
        player.choose_fastest_finger(Choice.A)
        assert player.choose_fastest_finger(Choice.A) is False

    def test_clear_all_answers_keeps_money(self):
        player = Player("alice", money=500, correct_answers=2)
        player.choose_hot_seat(Choice.B, 1.5)
        player.set_confidence(Confidence.CERTAIN)
        player.clear_all_answers()
        assert player.hot_seat_choice is None
        assert player.confidence is None
        assert player.money == 500

    def test_reset_clears_winnings(self):
        player = Player("alice", money=500, correct_answers=2)
        player.reset()
        assert player.money == 0
        assert player.correct_answers == 0

    def test_compressed_never_shows_answers(self):
        player = Player("alice")
        player.choose_hot_seat(Choice.B)
        compressed = player.to_compressed()
        assert "hot_seat_choice" not in compressed
        assert "fastest_finger_choices" not in compressed
        assert compressed["username"] == "alice"


class TestMembership:
    """Joins, rejoins, disconnects."""

    def test_add_player(self):
        players = PlayerMap()
        socket = LocalSocket()
        player = players.add_player("alice", socket)
        assert "alice" in players
        assert players.get_player_by_socket(socket) is player
        assert players.get_player_by_username("alice") is player

    def test_rejoin_rebinds_socket_and_keeps_state(self):
        players = PlayerMap()
        first, second = LocalSocket(), LocalSocket()
        player = players.add_player("alice", first)
        player.money = 1000
        players.deactivate_player(first)
        assert player.active is False
        assert player.socket is None

        rejoined = players.add_player("alice", second)
        assert rejoined is player
        assert rejoined.active is True
        assert rejoined.socket is second
        assert rejoined.money == 1000
        assert len(players) == 1

    def test_deactivate_unknown_socket(self):
        assert PlayerMap().deactivate_player(LocalSocket()) is None

    def test_remove_inactive_players(self):
        players = PlayerMap()
        gone = LocalSocket()
        players.add_player("alice", LocalSocket())
        players.add_player("bob", gone)
        players.deactivate_player(gone)
        assert players.remove_inactive_players() == ["bob"]
        assert [p.username for p in players] == ["alice"]

    def test_active_count(self):
        players = PlayerMap()
        gone = LocalSocket()
        players.add_player("alice", LocalSocket())
        players.add_player("bob", gone)
        players.deactivate_player(gone)
        assert players.get_active_player_count() == 1

    def test_lookup_by_none(self):
        players = PlayerMap()
        assert players.get_player_by_socket(None) is None
        assert players.get_player_by_username(None) is None


class TestBroadcast:
    """Per-socket fire-and-forget broadcast."""

    def test_emit_to_all_active(self):
        players = PlayerMap()
        alice, bob, gone = LocalSocket(), LocalSocket(), LocalSocket()
        players.add_player("alice", alice)
        players.add_player("bob", bob)
        players.add_player("carol", gone)
        players.deactivate_player(gone)

        players.emit_to_all("ping", {"n": 1})
        assert alice.outbox == [("ping", {"n": 1})]
        assert bob.outbox == [("ping", {"n": 1})]
        assert gone.outbox == []

    def test_custom_payload_per_player(self):
        players = PlayerMap()
        alice, bob = LocalSocket(), LocalSocket()
        players.add_player("alice", alice)
        players.add_player("bob", bob)
        players.emit_custom_to_all("hello", lambda p: p.username)
        assert alice.last("hello") == "alice"
        assert bob.last("hello") == "bob"

    def test_failing_socket_does_not_stop_others(self):
        players = PlayerMap()
        broken = Mock(sid="broken")
        broken.emit.side_effect = ConnectionError("gone")
        healthy = LocalSocket()
        players.add_player("alice", broken)
        players.add_player("bob", healthy)

        players.emit_to_all("ping", {})
        broken.emit.assert_called_once()
        assert healthy.last("ping") == {}
