"""Tests for SAN syntax validation."""

import pytest

from santree.core.enums import Color
from santree.core.move import Move
from santree.core.notation import is_valid_san


class TestValidSan:
    @pytest.mark.parametrize("san", ["e4", "a3", "h8", "d5"])
    def test_pawn_advance(self, san: str) -> None:
        assert is_valid_san(san)

    @pytest.mark.parametrize("san", ["exd5", "axb6", "hxg1"])
    def test_pawn_capture(self, san: str) -> None:
        assert is_valid_san(san)

    @pytest.mark.parametrize("san", ["e8=Q", "a1=N", "dxc8=R", "bxa1=B"])
    def test_promotion(self, san: str) -> None:
        assert is_valid_san(san)

    @pytest.mark.parametrize("san", ["Nf3", "Bb5", "Qxd8", "Kxe2", "Rh1"])
    def test_piece_move_without_disambiguation(self, san: str) -> None:
        assert is_valid_san(san)

    @pytest.mark.parametrize("san", ["Nbd7", "R1e2", "Rfxe1", "N5xf3"])
    def test_piece_move_with_single_disambiguation(self, san: str) -> None:
        assert is_valid_san(san)

    @pytest.mark.parametrize("san", ["Qh4e1", "Qh4xe1", "Nb1d2"])
    def test_piece_move_with_square_disambiguation(self, san: str) -> None:
        assert is_valid_san(san)

    @pytest.mark.parametrize("san", ["O-O", "O-O-O"])
    def test_castling(self, san: str) -> None:
        assert is_valid_san(san)

    @pytest.mark.parametrize(
        "san", ["e4+", "Qxf7#", "O-O+", "O-O-O#", "e8=Q+", "exd8=N#", "Nbd7+"]
    )
    def test_check_and_mate_suffixes(self, san: str) -> None:
        assert is_valid_san(san)


class TestInvalidSan:
    @pytest.mark.parametrize("san", ["e9", "i4", "e0", "Nf9", "Nj3", "exi5"])
    def test_out_of_range_squares(self, san: str) -> None:
        assert not is_valid_san(san)

    @pytest.mark.parametrize("san", ["N", "Nx", "Nb", "Bx5", "exd", "x"])
    def test_missing_destination(self, san: str) -> None:
        assert not is_valid_san(san)

    @pytest.mark.parametrize("san", ["O-O-O-O", "O-", "0-0", "o-o", "O-O-"])
    def test_malformed_castling(self, san: str) -> None:
        assert not is_valid_san(san)

    @pytest.mark.parametrize("san", ["nf3", "bb5", "qxd8", "kxe2"])
    def test_lowercase_piece_letter(self, san: str) -> None:
        assert not is_valid_san(san)

    @pytest.mark.parametrize("san", ["e8=K", "e8=P", "e8Q", "e8=q"])
    def test_bad_promotion(self, san: str) -> None:
        assert not is_valid_san(san)

    @pytest.mark.parametrize("san", ["e4++", "e4#+", "e4!", " e4", "e4 ", "e4\n", ""])
    def test_trailing_or_surrounding_junk(self, san: str) -> None:
        assert not is_valid_san(san)

    def test_non_string_returns_false(self) -> None:
        assert is_valid_san(None) is False  # type: ignore[arg-type]
        assert is_valid_san(42) is False  # type: ignore[arg-type]


class TestSideIndependence:
    @pytest.mark.parametrize("san", ["e4", "Nf3", "O-O", "e9", "nf3"])
    def test_side_does_not_change_result(self, san: str) -> None:
        assert is_valid_san(san, Color.WHITE) == is_valid_san(san, Color.BLACK)

    def test_move_is_valid_delegates(self) -> None:
        assert Move("Nf3", Color.WHITE).is_valid
        assert not Move("e9", Color.BLACK).is_valid

    def test_illegal_but_well_formed_move_is_accepted(self) -> None:
        # A king jump across the board is still well-formed SAN.
        assert Move("Ke5", Color.WHITE).is_valid


class TestMoveValue:
    def test_equality_by_fields(self) -> None:
        assert Move("e4", Color.WHITE) == Move("e4", Color.WHITE)
        assert Move("e4", Color.WHITE) != Move("e4", Color.BLACK)

    def test_immutable(self) -> None:
        move = Move("e4", Color.WHITE)
        with pytest.raises(AttributeError):
            move.notation = "d4"  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(Move("Nf3", Color.WHITE)) == "Nf3"
        assert str(Color.BLACK) == "black"
