"""Tests for turn scanning of game text."""

import pytest

from santree.core.enums import Color
from santree.core.move import Move
from santree.core.notation import Turn, count_turn_headers, iter_turns


class TestIterTurns:
    def test_full_turns(self) -> None:
        assert list(iter_turns("1. e4 e5 2. Nf3 Nc6")) == [
            Turn(1, "e4", "e5"),
            Turn(2, "Nf3", "Nc6"),
        ]

    def test_final_turn_without_black_move(self) -> None:
        turns = list(iter_turns("1. d4 d5 2. c4"))
        assert turns[-1] == Turn(2, "c4", None)

    def test_no_space_after_number(self) -> None:
        assert list(iter_turns("1.e4 e5 2.d4")) == [
            Turn(1, "e4", "e5"),
            Turn(2, "d4", None),
        ]

    def test_newlines_and_extra_whitespace(self) -> None:
        text = "1.  e4\te5\n2. Nf3\n   Nc6\n"
        assert list(iter_turns(text)) == [Turn(1, "e4", "e5"), Turn(2, "Nf3", "Nc6")]

    def test_black_token_never_swallows_next_move_number(self) -> None:
        assert list(iter_turns("1. e4 2. d4")) == [Turn(1, "e4", None), Turn(2, "d4", None)]

    @pytest.mark.parametrize("result", ["1-0", "0-1", "1/2-1/2", "*"])
    def test_result_marker_is_not_black_move(self, result: str) -> None:
        turns = list(iter_turns(f"1. e4 e5 2. Qh5 {result}"))
        assert turns == [Turn(1, "e4", "e5"), Turn(2, "Qh5", None)]

    def test_header_without_move_is_skipped(self) -> None:
        assert list(iter_turns("1. 2. e4 e5")) == [Turn(2, "e4", "e5")]

    def test_non_matching_text_is_skipped(self) -> None:
        assert list(iter_turns("white to play: 1. e4 e5 what now")) == [
            Turn(1, "e4", "e5"),
        ]

    def test_multi_digit_turn_numbers(self) -> None:
        turns = list(iter_turns("35. Qxc8+ Kh7 36. Qf5"))
        assert [turn.number for turn in turns] == [35, 36]

    @pytest.mark.parametrize("text", ["", "   ", "e4 e5 Nf3", "hello"])
    def test_no_turns(self, text: str) -> None:
        assert list(iter_turns(text)) == []

    def test_invalid_tokens_are_still_scanned(self) -> None:
        assert list(iter_turns("1. e4 e9")) == [Turn(1, "e4", "e9")]


class TestTurn:
    def test_moves_in_ply_order(self) -> None:
        assert list(Turn(3, "Bb5", "a6").moves()) == [
            Move("Bb5", Color.WHITE),
            Move("a6", Color.BLACK),
        ]

    def test_moves_without_black(self) -> None:
        assert list(Turn(2, "c4").moves()) == [Move("c4", Color.WHITE)]

    def test_moves_with_absent_white(self) -> None:
        assert list(Turn(2, None, None).moves()) == []


class TestTurnHeaderCount:
    @pytest.mark.parametrize(
        "text",
        [
            "1. e4 e5 2. Nf3 Nc6",
            "1. d4 d5 2. c4",
            "1. e4",
            "1. d4 Nf6 2. c4 e6 3. Nc3 Bb4 4. Qc2 O-O 5. a3 Bxc3+ 6. Qxc3",
        ],
    )
    def test_scanned_turns_match_headers(self, text: str) -> None:
        assert len(list(iter_turns(text))) == count_turn_headers(text)
