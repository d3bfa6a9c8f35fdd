from battlegrid.core.models import AttackResult, Coord, ShipSpan, is_straight_line


def test_coord_formats_as_point() -> None:
    assert str(Coord(1, 5)) == "(1, 5)"


def test_ship_span_normalizes_reversed_corners() -> None:
    span = ShipSpan.between(Coord(2, 1), Coord(0, 1))
    assert span == ShipSpan(min_x=0, min_y=1, max_x=2, max_y=1)
    assert span.cells() == [Coord(0, 1), Coord(1, 1), Coord(2, 1)]


def test_ship_span_single_cell() -> None:
    assert ShipSpan.between(Coord(1, 1), Coord(1, 1)).cells() == [Coord(1, 1)]


def test_is_straight_line() -> None:
    assert is_straight_line(Coord(0, 0), Coord(0, 2))
    assert is_straight_line(Coord(0, 1), Coord(2, 1))
    assert is_straight_line(Coord(1, 1), Coord(1, 1))
    assert not is_straight_line(Coord(0, 0), Coord(2, 2))


def test_attack_result_values() -> None:
    assert AttackResult.HIT == "HIT"
    assert AttackResult.MISS == "MISS"
