import pytest

from rpd.core.ops import OP_ARITY, OpKind, PathOp, coerce_op_kind, cubic_to, line_to, move_to, quad_to
from rpd.path.writer import format_number, to_path_data


class TestPathOp:
    def test_arity_is_enforced(self) -> None:
        with pytest.raises(ValueError):
            PathOp(OpKind.LINE_TO, (1.0,))
        with pytest.raises(ValueError):
            PathOp(OpKind.CLOSE_PATH, (1.0, 2.0))

    def test_every_kind_has_arity(self) -> None:
        assert set(OP_ARITY) == set(OpKind)

    def test_end_and_last_control(self) -> None:
        op = cubic_to(1, 2, 3, 4, 5, 6)
        assert op.end == (5.0, 6.0)
        assert op.last_control == (3.0, 4.0)
        assert quad_to(1, 2, 3, 4).last_control == (1.0, 2.0)
        assert line_to(1, 2).last_control is None

    def test_dict_round_trip(self) -> None:
        op = quad_to(1, 2, 3, 4)
        assert op.to_dict() == {"kind": "quadraticCurveTo", "args": [1.0, 2.0, 3.0, 4.0]}
        assert PathOp.from_dict(op.to_dict()) == op

    def test_coerce_kind(self) -> None:
        assert coerce_op_kind("L") is OpKind.LINE_TO
        assert coerce_op_kind("c") is OpKind.CUBIC_CURVE_TO
        assert coerce_op_kind("moveTo") is OpKind.MOVE_TO
        with pytest.raises(ValueError):
            coerce_op_kind("arcTo")


class TestWriter:
    def test_format_number(self) -> None:
        assert format_number(3.0) == "3"
        assert format_number(-0.5) == "-0.5"

    def test_to_path_data(self) -> None:
        ops = [move_to(0, 0), line_to(1.5, 2), cubic_to(1, 2, 3, 4, 5, 6)]
        assert to_path_data(ops) == "M 0 0 L 1.5 2 C 1 2 3 4 5 6"

    def test_empty(self) -> None:
        assert to_path_data([]) == ""
