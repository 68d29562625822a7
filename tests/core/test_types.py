"""Tests for core type definitions."""

import pytest
from bgengine.core.types import (
    Bar,
    BearOff,
    Color,
    Move,
    OnPoint,
    Phase,
    TurnLogEntry,
    rules_for,
)


class TestColor:
    """Tests for Color enum."""

    def test_opposite(self):
        """Test opposite() method."""
        assert Color.WHITE.opposite() == Color.BLACK
        assert Color.BLACK.opposite() == Color.WHITE

    def test_string_representation(self):
        """Test string conversion."""
        assert str(Color.WHITE) == "white"
        assert str(Color.BLACK) == "black"


class TestBoardPosition:
    """Tests for the position variants."""

    def test_on_point_range(self):
        """Valid indices are 0-23."""
        assert OnPoint(0).index == 0
        assert OnPoint(23).index == 23

        with pytest.raises(ValueError):
            OnPoint(24)
        with pytest.raises(ValueError):
            OnPoint(-1)

    def test_positions_compare_by_value(self):
        """Positions of the same kind compare by their fields."""
        assert OnPoint(5) == OnPoint(5)
        assert Bar(Color.WHITE) == Bar(Color.WHITE)
        assert Bar(Color.WHITE) != Bar(Color.BLACK)
        assert BearOff(Color.BLACK) != Bar(Color.BLACK)
        assert OnPoint(0) != BearOff(Color.WHITE)

    def test_positions_are_immutable(self):
        """Frozen dataclasses reject assignment."""
        point = OnPoint(3)
        with pytest.raises(AttributeError):
            point.index = 4


class TestMove:
    """Tests for Move."""

    def test_equality_and_hash(self):
        """Moves with the same endpoints are equal and hash alike."""
        a = Move(OnPoint(12), OnPoint(7))
        b = Move(OnPoint(12), OnPoint(7))
        c = Move(OnPoint(12), OnPoint(8))

        assert a == b
        assert hash(a) == hash(b)
        assert a != c
        assert len({a, b, c}) == 2

    def test_string_representation(self):
        """Moves render as 'from -> to'."""
        assert str(Move(Bar(Color.WHITE), OnPoint(19))) == "bar -> 19"
        assert str(Move(OnPoint(4), BearOff(Color.WHITE))) == "4 -> off"


class TestColorRules:
    """Tests for per-color movement geometry."""

    def test_white_geometry(self):
        """White moves down, enters on 18-23 and bears off past 0."""
        rules = rules_for(Color.WHITE)
        assert rules.direction == -1
        assert list(rules.home_board) == [0, 1, 2, 3, 4, 5]
        assert list(rules.entry_range) == [18, 19, 20, 21, 22, 23]
        assert rules.entry_index(1) == 23
        assert rules.entry_index(6) == 18
        assert rules.entry_distance(20) == 4
        assert rules.off_distance(0) == 1
        assert rules.off_distance(5) == 6
        assert rules.advance(12, 5) == 7
        assert rules.distance(12, 7) == 5

    def test_black_geometry(self):
        """Black moves up, enters on 0-5 and bears off past 23."""
        rules = rules_for(Color.BLACK)
        assert rules.direction == 1
        assert list(rules.home_board) == [18, 19, 20, 21, 22, 23]
        assert list(rules.entry_range) == [0, 1, 2, 3, 4, 5]
        assert rules.entry_index(1) == 0
        assert rules.entry_index(6) == 5
        assert rules.entry_distance(3) == 4
        assert rules.off_distance(23) == 1
        assert rules.off_distance(18) == 6
        assert rules.advance(11, 5) == 16
        assert rules.distance(11, 16) == 5

    def test_entry_and_off_are_consistent(self):
        """Every die enters inside the entry range, for both colors."""
        for color in Color:
            rules = rules_for(color)
            for die in range(1, 7):
                index = rules.entry_index(die)
                assert index in rules.entry_range
                assert rules.entry_distance(index) == die


class TestMiscTypes:
    """Tests for Phase and TurnLogEntry."""

    def test_phase_values(self):
        assert {p.value for p in Phase} == {"not_started", "in_progress", "finished"}

    def test_turn_log_entry_defaults(self):
        entry = TurnLogEntry(move=Move(OnPoint(5), OnPoint(3)), die_used=2)
        assert entry.hit is False
