# Area: Game Tests
"""End-to-end rounds over in-memory sockets, with and without a show host."""

from unittest.mock import Mock

import pytest

from hotseat_show._game.events import GAME_ERROR, SocketEvent
from hotseat_show._game.timers import SHOW_HOST_DIALOG
from hotseat_show._question.choices import ALL_CHOICES, Choice
from hotseat_show._question.fastest_finger_question import FastestFingerQuestion
from hotseat_show._question.hot_seat_question import PAYOUTS
from hotseat_show._question.question import Question, QuestionContent
from hotseat_show._shared import strings

from conftest import advance_until, at, join, last_update, perfect_ordering, send, submit_ordering


def open_fastest_finger(server, clock):
    advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_QUESTION_CHOICES))


def play_fastest_finger(server, clock, sockets, order, ordering=None):
    """Submit orderings half a second apart, in the given order."""
    open_fastest_finger(server, clock)
    ordering = ordering or perfect_ordering(server)
    for username in order:
        clock.advance(500)
        submit_ordering(sockets[username], ordering)


def reach_hot_seat_choice(server, clock):
    advance_until(server, clock, lambda: server.state.awaiting_hot_seat_choice())


def pick(server, correct=True):
    question = server.state.hot_seat_question
    if correct:
        return question.get_correct_choice()
    return next(c for c in ALL_CHOICES if not question.answer_is_correct(c))


def answer(server, socket, correct=True):
    """Hot seat answers and confirms (no host present)."""
    send(socket, SocketEvent.HOT_SEAT_CHOOSE, {"choice": int(pick(server, correct))})
    send(socket, SocketEvent.HOT_SEAT_FINAL_ANSWER)


def climb_to(server, clock, socket, index):
    """Answer correctly until the hot seat faces question ``index``."""
    reach_hot_seat_choice(server, clock)
    while server.state.hot_seat_question_index < index:
        answer(server, socket)
        reach_hot_seat_choice(server, clock)


@pytest.fixture
def show(server):
    sockets = join(server, "c1", "c2", "c3")
    server.start_game()
    return sockets


class TestFastestFingerRound:
    """Picking the hot seat player."""

    def test_fastest_perfect_ordering_wins(self, server, clock, show):
        play_fastest_finger(server, clock, show, ["c2", "c1", "c3"])
        assert server.current_socket_event is SocketEvent.FASTEST_FINGER_TIME_UP

        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_ACCEPT_HOT_SEAT_PLAYER))
        players = server.player_map
        assert server.state.hot_seat_player is players.get_player_by_username("c2")
        assert players.get_player_by_username("c2").fastest_finger_time == pytest.approx(0.5)
        assert players.get_player_by_username("c3").fastest_finger_time == pytest.approx(1.5)
        assert all(p.fastest_finger_score == 10 for p in players)
        assert server.state.celebration_banner == {"header": strings.FASTEST_FINGER_WINNER, "text": "c2"}
        assert last_update(show["c1"])["hot_seat_player"] == "c2"

    def test_score_beats_speed(self, server, clock, show):
        open_fastest_finger(server, clock)
        correct = perfect_ordering(server)
        sloppy = [correct[1], correct[0], correct[2], correct[3]]
        clock.advance(500)
        submit_ordering(show["c1"], sloppy)
        clock.advance(500)
        submit_ordering(show["c3"], correct)

        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_ACCEPT_HOT_SEAT_PLAYER))
        assert server.state.hot_seat_player.username == "c3"
        assert server.player_map.get_player_by_username("c1").fastest_finger_score == 5
        assert server.player_map.get_player_by_username("c2").fastest_finger_score == 0

    def test_answers_revealed_one_by_one(self, server, clock, show):
        play_fastest_finger(server, clock, show, ["c1", "c2", "c3"])
        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_ANSWER))
        assert server.state.fastest_finger_question.revealed_answer_count == 1
        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_RESULTS))
        assert server.state.fastest_finger_question.revealed_all_answers()

    def test_nobody_qualifies_asks_again(self, server, clock, show):
        open_fastest_finger(server, clock)
        first = server.state.fastest_finger_question
        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_RESULTS))
        assert server.state.hot_seat_player is None
        assert server.state.celebration_banner["header"] == strings.NO_FASTEST_FINGER_WINNER

        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_SHOW_FASTEST_FINGER_QUESTION_TEXT))
        assert server.state.fastest_finger_question is not first
        assert server.state.round_number == 1
        assert server.state.celebration_banner is None


class TestHotSeatRound:
    """Climbing the money ladder without a host."""

    def test_choices_revealed_then_clock_starts(self, server, clock, show):
        play_fastest_finger(server, clock, show, ["c1", "c2", "c3"])
        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_SHOW_HOT_SEAT_QUESTION_TEXT))
        assert server.state.hot_seat_question_index == 0

        reach_hot_seat_choice(server, clock)
        question = server.state.hot_seat_question
        assert question.all_choices_revealed()
        assert question.start_time is not None
        assert server.state.show_host_step_dialog is None
        assert server.state.hot_seat_step_dialog is None
        assert len(server.timers) == 0

    def test_choose_asks_hot_seat_to_confirm(self, server, clock, show):
        play_fastest_finger(server, clock, show, ["c1", "c2", "c3"])
        reach_hot_seat_choice(server, clock)
        send(show["c1"], SocketEvent.HOT_SEAT_CHOOSE, {"choice": 0})

        update = last_update(show["c1"])
        assert update["step_dialog"]["header"] == strings.HOT_SEAT_FINAL_ANSWER
        assert [a["socket_event"] for a in update["step_dialog"]["actions"]] == [
            "hotSeatFinalAnswer", "showHostRevealHotSeatChoice"]
        assert update["hot_seat_question"]["choice_locked"] is True

    def test_backing_out_clears_choice(self, server, clock, show):
        play_fastest_finger(server, clock, show, ["c1", "c2", "c3"])
        reach_hot_seat_choice(server, clock)
        send(show["c1"], SocketEvent.HOT_SEAT_CHOOSE, {"choice": 0})
        send(show["c1"], SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_CHOICE)

        assert server.state.hot_seat_player.hot_seat_choice is None
        assert server.state.awaiting_hot_seat_choice()
        send(show["c1"], SocketEvent.HOT_SEAT_CHOOSE, {"choice": 1})
        assert server.state.hot_seat_player.hot_seat_choice == 1

    def test_second_choice_before_confirming_rejected(self, server, clock, show):
        play_fastest_finger(server, clock, show, ["c1", "c2", "c3"])
        reach_hot_seat_choice(server, clock)
        send(show["c1"], SocketEvent.HOT_SEAT_CHOOSE, {"choice": 0})
        send(show["c1"], SocketEvent.HOT_SEAT_CHOOSE, {"choice": 2})
        assert show["c1"].last(GAME_ERROR)["error_type"] == "INVALID_INPUT"
        assert server.state.hot_seat_player.hot_seat_choice == 0

    def test_only_hot_seat_answers(self, server, clock, show):
        play_fastest_finger(server, clock, show, ["c1", "c2", "c3"])
        reach_hot_seat_choice(server, clock)
        send(show["c2"], SocketEvent.HOT_SEAT_CHOOSE, {"choice": 0})
        assert show["c2"].last(GAME_ERROR)["error_type"] == "UNAUTHORIZED_EVENT"

    def test_correct_answer_moves_up_the_ladder(self, server, clock, show):
        play_fastest_finger(server, clock, show, ["c1", "c2", "c3"])
        reach_hot_seat_choice(server, clock)
        answer(server, show["c1"])
        assert server.current_socket_event is SocketEvent.HOT_SEAT_FINAL_ANSWER
        assert "correct_choice" not in last_update(show["c1"])["hot_seat_question"]

        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_QUESTION_VICTORY))
        assert "correct_choice" in last_update(show["c2"])["hot_seat_question"]

        advance_until(server, clock, lambda: server.state.round_winnings == PAYOUTS[0])
        assert server.state.celebration_banner == {"header": "", "text": "$100"}
        assert server.state.hot_seat_question is None

        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_CUE_HOT_SEAT_QUESTION))
        assert server.state.hot_seat_question_index == 1

    def test_wrong_answer_waits_then_loses(self, server, clock, show):
        play_fastest_finger(server, clock, show, ["c1", "c2", "c3"])
        climb_to(server, clock, show["c1"], 4)
        assert server.state.round_winnings == PAYOUTS[3]

        answer(server, show["c1"], correct=False)
        assert server.timers.remaining_ms(SHOW_HOST_DIALOG) == pytest.approx(1500)
        clock.advance(1500)
        server.tick()
        assert server.current_socket_event is SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_QUESTION_LOSS
        assert server.state.round_winnings == 0
        assert server.state.celebration_banner == {"header": strings.TOTAL_WINNINGS, "text": "$0"}

        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_SHOW_FASTEST_FINGER_RULES))
        assert server.state.round_number == 2
        assert server.state.hot_seat_player is None
        assert server.player_map.get_player_by_username("c1").money == 0

    def test_loss_after_milestone_keeps_safe_haven(self, server, clock, show):
        play_fastest_finger(server, clock, show, ["c1", "c2", "c3"])
        climb_to(server, clock, show["c1"], 6)
        answer(server, show["c1"], correct=False)
        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_QUESTION_LOSS))
        assert server.state.round_winnings == PAYOUTS[4]

        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_SHOW_SCORES))
        assert server.player_map.get_player_by_username("c1").money == PAYOUTS[4]

    def test_top_prize_goes_to_scores(self, server, clock, show):
        play_fastest_finger(server, clock, show, ["c1", "c2", "c3"])
        climb_to(server, clock, show["c1"], 14)
        answer(server, show["c1"])
        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_SHOW_SCORES))
        assert server.player_map.get_player_by_username("c1").money == PAYOUTS[14]
        assert server.is_in_game() is True


class TestPlayAlong:
    """Contestants answer alongside the hot seat."""

    def test_correct_play_along_counted(self, server, clock, show):
        play_fastest_finger(server, clock, show, ["c1", "c2", "c3"])
        reach_hot_seat_choice(server, clock)
        send(show["c2"], SocketEvent.CONTESTANT_CHOOSE, {"choice": int(pick(server))})
        send(show["c3"], SocketEvent.CONTESTANT_CHOOSE, {"choice": int(pick(server, correct=False))})
        answer(server, show["c1"])
        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_QUESTION_VICTORY))

        players = server.player_map
        assert players.get_player_by_username("c2").correct_answers == 1
        assert players.get_player_by_username("c3").correct_answers == 0
        assert players.get_player_by_username("c1").correct_answers == 0

    def test_play_along_locked(self, server, clock, show):
        play_fastest_finger(server, clock, show, ["c1", "c2", "c3"])
        reach_hot_seat_choice(server, clock)
        send(show["c2"], SocketEvent.CONTESTANT_CHOOSE, {"choice": 0})
        send(show["c2"], SocketEvent.CONTESTANT_CHOOSE, {"choice": 1})
        assert show["c2"].last(GAME_ERROR)["error_type"] == "INVALID_INPUT"
        assert server.player_map.get_player_by_username("c2").hot_seat_choice == 0

    def test_hot_seat_cannot_play_along(self, server, clock, show):
        play_fastest_finger(server, clock, show, ["c1", "c2", "c3"])
        reach_hot_seat_choice(server, clock)
        send(show["c1"], SocketEvent.CONTESTANT_CHOOSE, {"choice": 0})
        assert show["c1"].last(GAME_ERROR)["error_type"] == "UNAUTHORIZED_EVENT"

    def test_too_early_rejected(self, server, clock, show):
        play_fastest_finger(server, clock, show, ["c1", "c2", "c3"])
        advance_until(server, clock, at(server, SocketEvent.SHOW_HOST_SHOW_HOT_SEAT_QUESTION_TEXT))
        send(show["c2"], SocketEvent.CONTESTANT_CHOOSE, {"choice": 0})
        assert show["c2"].last(GAME_ERROR)["error_type"] == "LATE_SUBMISSION"


class TestHostedShow:
    """The host presses every button and takes the final answer."""

    def drive(self, server, clock, host, condition):
        for _ in range(1000):
            if condition():
                return
            dialog = server.state.show_host_step_dialog
            if dialog is not None and dialog.actions:
                send(host, dialog.actions[-1].socket_event)
            else:
                clock.advance(250)
                server.tick()
        raise AssertionError(f"stuck at {server.current_socket_event}")

    def test_host_confirms_final_answer(self, server, clock):
        sockets = join(server, "host", "c1", "c2")
        server.start_game({"show_host_username": "host"})
        host = sockets["host"]
        self.drive(server, clock, host, at(server, SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_QUESTION_CHOICES))
        ordering = perfect_ordering(server)
        submit_ordering(sockets["c2"], ordering)
        submit_ordering(sockets["c1"], ordering)
        self.drive(server, clock, host, lambda: server.state.awaiting_hot_seat_choice())
        assert server.state.hot_seat_player.username == "c2"

        send(sockets["c2"], SocketEvent.HOT_SEAT_CHOOSE, {"choice": int(pick(server))})
        assert server.state.hot_seat_step_dialog is None
        assert server.state.show_host_step_dialog.offers(SocketEvent.HOT_SEAT_FINAL_ANSWER)

        send(sockets["c2"], SocketEvent.HOT_SEAT_FINAL_ANSWER)
        assert sockets["c2"].last(GAME_ERROR)["error_type"] == "UNAUTHORIZED_EVENT"

        send(host, SocketEvent.HOT_SEAT_FINAL_ANSWER)
        assert server.current_socket_event is SocketEvent.HOT_SEAT_FINAL_ANSWER
        assert "correct_choice" in last_update(host)["hot_seat_question"]
        assert "correct_choice" not in last_update(sockets["c2"])["hot_seat_question"]
        assert server.state.show_host_step_dialog.offers(SocketEvent.SHOW_HOST_REVEAL_HOT_SEAT_QUESTION_VICTORY)

    def test_host_highlights_lifelines(self, server, clock):
        sockets = join(server, "host", "c1")
        server.start_game({"show_host_username": "host"})
        host = sockets["host"]
        self.drive(server, clock, host, at(server, SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_QUESTION_CHOICES))
        submit_ordering(sockets["c1"], perfect_ordering(server))
        self.drive(server, clock, host, at(server, SocketEvent.SHOW_HOST_CUE_HOT_SEAT_RULES))

        for expected in ("fiftyFifty", "phoneAFriend", "askTheAudience"):
            send(host, SocketEvent.SHOW_HOST_HIGHLIGHT_LIFELINE)
            assert last_update(host)["highlighted_lifeline"] == expected
        dialog = server.state.show_host_step_dialog
        assert [a.socket_event for a in dialog.actions] == [SocketEvent.SHOW_HOST_CUE_HOT_SEAT_QUESTION]

        send(host, SocketEvent.SHOW_HOST_CUE_HOT_SEAT_QUESTION)
        assert server.state.highlighted_lifeline is None

    def test_partial_orderings_ranked_by_score(self, server, clock):
        sockets = join(server, "host", "c1", "c2", "c3")
        content = QuestionContent(text="Order these", choices=("one", "two", "three", "four"))
        server.fastest_finger_session.get_new_question = Mock(return_value=FastestFingerQuestion(
            Question(content, ordered_choices=[Choice.C, Choice.A, Choice.B, Choice.D],
                     shuffled_choices=[0, 1, 2, 3])))
        server.start_game({"show_host_username": "host"})
        host = sockets["host"]
        self.drive(server, clock, host, at(server, SocketEvent.SHOW_HOST_REVEAL_FASTEST_FINGER_QUESTION_CHOICES))

        submit_ordering(sockets["c1"], [Choice.A, Choice.B, Choice.C, Choice.D])
        submit_ordering(sockets["c2"], [Choice.B, Choice.A, Choice.C, Choice.D])
        submit_ordering(sockets["c3"], [Choice.D, Choice.C, Choice.B, Choice.A])
        assert server.current_socket_event is SocketEvent.FASTEST_FINGER_TIME_UP

        # The 10 s window was closed early and must not fire
        clock.advance(20000)
        assert server.tick() == 0
        assert server.current_socket_event is SocketEvent.FASTEST_FINGER_TIME_UP

        self.drive(server, clock, host, at(server, SocketEvent.SHOW_HOST_ACCEPT_HOT_SEAT_PLAYER))
        scores = {p.username: p.fastest_finger_score for p in server.state.fastest_finger_contestants()}
        assert scores == {"c1": 4, "c2": 3, "c3": 2}
        assert server.state.hot_seat_player.username == "c1"
        assert last_update(sockets["c3"])["hot_seat_player"] == "c1"
