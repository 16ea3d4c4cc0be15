"""Tests for move parsing and shape priority."""

import logging
import pickle

import pytest

from kiaak.core.enums import Color, Profession
from kiaak.core.notation import (
    NoStepAndNoStick,
    NoStepAndWaterStick,
    NotationError,
    Parachute,
    ParseErrorKind,
    StepAndBridgeStick,
    StepAndBridgeStickAndWaterStick,
    StepAndNoStick,
    StepAndWaterStick,
    TamNoStep,
    TamStepDuringFormer,
    TamStepDuringLatter,
    TamStepUnspecified,
    move_from_notation,
    parse_move,
    parse_moves,
    parse_tam_bracket,
)
from kiaak.core.notation import movement
from kiaak.core.types import coord


class TestOrdinaryMoves:
    def test_no_step_no_stick(self) -> None:
        assert parse_move("XU兵XY無撃裁") == (
            "",
            NoStepAndNoStick(coord("XU"), Profession.KAUK2, coord("XY")),
        )

    def test_no_step_water_stick_successful(self) -> None:
        assert parse_move("LY弓ZY水五") == (
            "",
            NoStepAndWaterStick(coord("LY"), Profession.GUA2, coord("ZY"), 5, True),
        )

    def test_no_step_water_stick_unspecified(self) -> None:
        _, move = parse_move("LY弓ZY水或")
        assert move == NoStepAndWaterStick(
            coord("LY"), Profession.GUA2, coord("ZY"), None, True
        )
        _, move = parse_move("LY弓ZY水或此無")
        assert move == NoStepAndWaterStick(
            coord("LY"), Profession.GUA2, coord("ZY"), None, False
        )

    def test_no_step_water_stick_failed(self) -> None:
        _, move = parse_move("LY弓ZY水一此無")
        assert move == NoStepAndWaterStick(
            coord("LY"), Profession.GUA2, coord("ZY"), 1, False
        )

    def test_step_no_stick(self) -> None:
        assert parse_move("XU兵XYXAU無撃裁") == (
            "",
            StepAndNoStick(coord("XU"), Profession.KAUK2, coord("XY"), coord("XAU")),
        )

    def test_step_water_stick(self) -> None:
        assert parse_move("NY巫CYCO水五") == (
            "",
            StepAndWaterStick(
                coord("NY"), Profession.TUK2, coord("CY"), coord("CO"), 5, True
            ),
        )

    def test_step_bridge_stick(self) -> None:
        assert parse_move("ME弓MIMU橋四") == (
            "",
            StepAndBridgeStick(
                coord("ME"), Profession.GUA2, coord("MI"), coord("MU"), 4, True
            ),
        )

    def test_step_bridge_stick_unspecified_failed(self) -> None:
        assert parse_move("ME弓MIMY橋或此無") == (
            "",
            StepAndBridgeStick(
                coord("ME"), Profession.GUA2, coord("MI"), coord("MY"), None, False
            ),
        )

    def test_step_bridge_stick_zero_failed(self) -> None:
        _, move = parse_move("ME弓MIMY橋無此無")
        assert move == StepAndBridgeStick(
            coord("ME"), Profession.GUA2, coord("MI"), coord("MY"), 0, False
        )

    def test_step_bridge_and_water(self) -> None:
        assert parse_move("LO弓NOCO橋四水五") == (
            "",
            StepAndBridgeStickAndWaterStick(
                coord("LO"), Profession.GUA2, coord("NO"), coord("CO"), 4, 5, True
            ),
        )
        _, move = parse_move("LO弓NOCO橋四水一此無")
        assert move == StepAndBridgeStickAndWaterStick(
            coord("LO"), Profession.GUA2, coord("NO"), coord("CO"), 4, 1, False
        )

    def test_wildcard_profession(self) -> None:
        _, move = parse_move("KE片KI無撃裁")
        assert move == NoStepAndNoStick(coord("KE"), None, coord("KI"))


class TestBridgeOutcome:
    def test_success_iff_no_failure_marker(self) -> None:
        sizes = {"或": None, "無": 0, "一": 1, "二": 2, "三": 3, "四": 4, "五": 5}
        for symbol, size in sizes.items():
            for suffix, successful in (("", True), ("此無", False)):
                text = f"ME弓MIMY橋{symbol}{suffix}"
                assert parse_move(text) == (
                    "",
                    StepAndBridgeStick(
                        coord("ME"),
                        Profession.GUA2,
                        coord("MI"),
                        coord("MY"),
                        size,
                        successful,
                    ),
                ), text

    def test_low_bridge_sizes_decode_as_successful(self) -> None:
        # Unlike water sticks, a bridge throw of 0-2 without 此無 is accepted.
        for symbol in "無一二":
            _, move = parse_move(f"ME弓MIMY橋{symbol}")
            assert isinstance(move, StepAndBridgeStick)
            assert move.bridge_stick_successful


class TestTamMoves:
    def test_no_step(self) -> None:
        assert parse_move("KE皇KI") == (
            "",
            TamNoStep(coord("KE"), None, coord("KI")),
        )

    def test_no_step_unspecified_bracket(self) -> None:
        assert parse_move("KE皇[或]KI") == (
            "",
            TamNoStep(coord("KE"), None, coord("KI")),
        )

    def test_no_step_square_bracket(self) -> None:
        assert parse_move("KE皇[LE]KI") == (
            "",
            TamNoStep(coord("KE"), coord("LE"), coord("KI")),
        )

    def test_step_unspecified(self) -> None:
        assert parse_move("PAU皇CAIMAU") == (
            "",
            TamStepUnspecified(coord("PAU"), coord("CAI"), coord("MAU")),
        )

    def test_step_during_latter(self) -> None:
        assert parse_move("PAU皇[MAU]CAIMAU") == (
            "",
            TamStepDuringLatter(coord("PAU"), coord("MAU"), coord("CAI"), coord("MAU")),
        )
        _, move = parse_move("PAU皇[或]CAIMAU")
        assert move == TamStepDuringLatter(coord("PAU"), None, coord("CAI"), coord("MAU"))

    def test_step_during_former(self) -> None:
        assert parse_move("KE皇LI[KE]KA") == (
            "",
            TamStepDuringFormer(coord("KE"), coord("LI"), coord("KE"), coord("KA")),
        )
        _, move = parse_move("KE皇LI[或]KA")
        assert move == TamStepDuringFormer(coord("KE"), coord("LI"), None, coord("KA"))

    def test_tam_bracket(self) -> None:
        assert parse_tam_bracket("[TY]") == ("", coord("TY"))
        assert parse_tam_bracket("[或]KI") == ("KI", None)

    def test_tam_bracket_unclosed(self) -> None:
        with pytest.raises(NotationError):
            parse_tam_bracket("[TY")

    def test_tam_has_no_profession(self) -> None:
        with pytest.raises(NotationError):
            move_from_notation("KE皇片KI")


class TestParachute:
    def test_black(self) -> None:
        assert parse_move("黒弓MY") == (
            "",
            Parachute(Color.HUOK2, Profession.GUA2, coord("MY")),
        )

    def test_red(self) -> None:
        assert parse_move("赤車CI") == (
            "",
            Parachute(Color.KOK1, Profession.KAUN1, coord("CI")),
        )

    def test_wildcard_not_allowed(self) -> None:
        with pytest.raises(NotationError) as info:
            parse_move("黒片MY")
        assert info.value.kind == ParseErrorKind.NO_MATCHING_SHAPE


class TestPriority:
    def test_bracketed_hint_beats_no_step(self) -> None:
        # The no-step shape alone would stop after CAI and leave MAU behind.
        assert movement._parse_tam_no_step("PAU皇[MAU]CAIMAU") == (
            "MAU",
            TamNoStep(coord("PAU"), coord("MAU"), coord("CAI")),
        )
        rem, move = parse_move("PAU皇[MAU]CAIMAU")
        assert rem == ""
        assert isinstance(move, TamStepDuringLatter)

    def test_bridge_and_water_beats_bridge(self) -> None:
        rem, _ = movement._parse_step_and_bridge_stick("LO弓NOCO橋四水五")
        assert rem == "水五"
        rem, move = parse_move("LO弓NOCO橋四水五")
        assert rem == ""
        assert isinstance(move, StepAndBridgeStickAndWaterStick)

    def test_parachute_is_tried_first(self) -> None:
        assert movement._SHAPES[0] is movement._parse_parachute
        assert len(movement._SHAPES) == 11

    def test_remainder_is_returned(self) -> None:
        rem, move = parse_move("XU兵XY無撃裁 KE皇KI")
        assert rem == " KE皇KI"
        assert isinstance(move, NoStepAndNoStick)

    def test_rejections_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="kiaak.core.notation.movement"):
            parse_move("XU兵XY無撃裁")
        assert "_parse_no_step_and_water_stick rejected" in caplog.text


class TestMalformed:
    def test_unknown_column(self) -> None:
        with pytest.raises(NotationError) as info:
            parse_move("QU兵XY無撃裁")
        assert info.value.kind == ParseErrorKind.NO_MATCHING_SHAPE
        assert info.value.cause is not None
        assert info.value.cause.kind == ParseErrorKind.UNEXPECTED_SYMBOL

    def test_illegal_water_run(self) -> None:
        with pytest.raises(NotationError) as info:
            parse_move("LY弓ZY水三此無")
        assert info.value.kind == ParseErrorKind.NO_MATCHING_SHAPE
        assert info.value.cause is not None
        assert info.value.cause.kind == ParseErrorKind.MALFORMED_STICK_THROW
        assert isinstance(info.value.__cause__, NotationError)

    def test_invalid_coordinate(self) -> None:
        with pytest.raises(NotationError) as info:
            parse_move("KEY兵XY無撃裁")
        assert info.value.cause is not None
        assert info.value.cause.kind == ParseErrorKind.INVALID_COORDINATE

    def test_missing_terminator(self) -> None:
        with pytest.raises(ValueError, match="no matching move shape"):
            parse_move("XU兵XY")

    def test_empty_input(self) -> None:
        with pytest.raises(NotationError):
            parse_move("")

    def test_error_survives_pickling(self) -> None:
        with pytest.raises(NotationError) as info:
            parse_move("QU")
        restored = pickle.loads(pickle.dumps(info.value))
        assert isinstance(restored, NotationError)
        assert restored.kind == ParseErrorKind.NO_MATCHING_SHAPE
        assert restored.remainder == "QU"
        assert str(restored) == str(info.value)
        assert restored.cause is not None
        assert restored.cause.kind == ParseErrorKind.UNEXPECTED_SYMBOL


class TestMoveFromNotation:
    def test_whole_text(self) -> None:
        assert move_from_notation("黒弓MY") == Parachute(
            Color.HUOK2, Profession.GUA2, coord("MY")
        )

    def test_trailing_input_rejected(self) -> None:
        with pytest.raises(NotationError) as info:
            move_from_notation("XU兵XY無撃裁 ")
        assert info.value.kind == ParseErrorKind.UNEXPECTED_SYMBOL
        assert info.value.remainder == " "


class TestParseMoves:
    def test_record(self, sample_record: str) -> None:
        assert parse_moves(sample_record) == [
            NoStepAndNoStick(coord("XU"), Profession.KAUK2, coord("XY")),
            TamNoStep(coord("KE"), None, coord("KI")),
            Parachute(Color.HUOK2, Profession.GUA2, coord("MY")),
            NoStepAndWaterStick(coord("LY"), Profession.GUA2, coord("ZY"), 5, True),
        ]

    def test_empty(self) -> None:
        assert parse_moves("") == []
        assert parse_moves(" \n\t") == []

    def test_missing_separator(self) -> None:
        with pytest.raises(NotationError) as info:
            parse_moves("XU兵XY無撃裁KE皇KI")
        assert info.value.kind == ParseErrorKind.UNEXPECTED_SYMBOL
        assert info.value.remainder == "KE皇KI"

    def test_bad_move_in_record(self) -> None:
        with pytest.raises(NotationError) as info:
            parse_moves("XU兵XY無撃裁 QU兵XY無撃裁")
        assert info.value.kind == ParseErrorKind.NO_MATCHING_SHAPE
        assert info.value.remainder == "QU兵XY無撃裁"
