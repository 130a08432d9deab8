"""Tests for coordinate parsing and the walkthrough session.

These tests verify that:
1. Fractions parse only when both parts are numbers and the denominator is non-zero
2. Unparsable text keeps the last good coordinate but is still shown
3. Editing vectors never moves the step
4. Dimension changes and resets behave as in the visualizer
"""

import logging

import pytest

from gramstep.linalg import Vector
from gramstep.walkthrough import (
    Dimension,
    Session,
    StepState,
    WalkthroughConfig,
    parse_coordinate,
)


class TestParseCoordinate:
    """Test coordinate text parsing."""

    @pytest.mark.parametrize("text,expected", [
        ("3", 3.0),
        (" -2.5 ", -2.5),
        ("1/2", 0.5),
        ("-3/4", -0.75),
        (" 1 / 4 ", 0.25),
        ("1e2", 100.0),
    ])
    def test_parses(self, text, expected):
        assert parse_coordinate(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "   ", "abc", "a/2", "x4", "nan", "inf", "-", ".", "1e400"])
    def test_unparsable(self, text):
        assert parse_coordinate(text) is None

    @pytest.mark.parametrize("text,expected", [
        ("1/0", 1.0),
        ("2/", 2.0),
        ("4x", 4.0),
        ("1/2/3", 1.0),
        ("3.5abc", 3.5),
        ("1e", 1.0),
        ("-.5/", -0.5),
    ])
    def test_leading_number_fallback(self, text, expected):
        """Text that is not a clean number or fraction uses its leading number."""
        assert parse_coordinate(text) == pytest.approx(expected)

    def test_fraction_thirds(self):
        assert parse_coordinate("1/3") == pytest.approx(1 / 3)


class TestSessionDefaults:
    """Test session construction."""

    def test_starts_in_2d(self):
        session = Session()
        assert session.dimension is Dimension.TWO
        assert session.state == StepState(step=0, max_step=4)
        assert session.vectors == (Vector(3, 1, 0), Vector(2, 4, 0))
        assert session.raw_inputs == [["3", "1", "0"], ["2", "4", "0"]]

    def test_config_3d(self):
        session = Session(WalkthroughConfig.for_3d())
        assert session.dimension is Dimension.THREE
        assert len(session.vectors) == 3
        assert session.state.max_step == 6

    def test_custom_vectors(self):
        session = Session(vectors=[[1, 2], [3, 4]])
        assert session.vectors == (Vector(1, 2, 0), Vector(3, 4, 0))

    def test_bad_config(self):
        with pytest.raises(ValueError):
            WalkthroughConfig(default_dimension=4)
        with pytest.raises(ValueError):
            WalkthroughConfig(precision=-1)


class TestSessionEdits:
    """Test coordinate edits."""

    def test_edit_recomputes(self):
        session = Session()
        before = session.result

        changed = session.edit_coordinate(1, 0, "5/2")

        assert changed
        assert session.vectors[1] == Vector(2.5, 4, 0)
        assert session.result is not before
        assert session.result.orthogonal[1] != before.orthogonal[1]

    def test_unparsable_keeps_last_value(self):
        session = Session()

        changed = session.edit_coordinate(1, 1, "x4")

        assert not changed
        assert session.vectors[1] == Vector(2, 4, 0)
        assert session.raw_inputs[1][1] == "x4"

    def test_trailing_junk_uses_leading_number(self):
        session = Session()

        changed = session.edit_coordinate(1, 1, "7x")

        assert changed
        assert session.vectors[1] == Vector(2, 7, 0)
        assert session.raw_inputs[1][1] == "7x"

    def test_unparsable_logged(self, caplog):
        session = Session()
        with caplog.at_level(logging.DEBUG, logger="gramstep"):
            session.edit_coordinate(0, 0, "oops")
        assert "oops" in caplog.text

    def test_partial_typing_sequence(self):
        """Typing "1/" then "1/3" keeps 1 then switches to a third."""
        session = Session()
        session.edit_coordinate(0, 0, "1")
        session.edit_coordinate(0, 0, "1/")
        assert session.vectors[0].x == 1.0
        session.edit_coordinate(0, 0, "1/3")
        assert session.vectors[0].x == pytest.approx(1 / 3)

    def test_edit_keeps_step(self):
        session = Session()
        session.next()
        session.next()
        session.edit_coordinate(0, 1, "7")
        assert session.step == 2

    def test_z_not_editable_in_2d(self):
        session = Session()
        with pytest.raises(IndexError):
            session.edit_coordinate(0, 2, "1")

    def test_z_editable_in_3d(self):
        session = Session(WalkthroughConfig.for_3d())
        session.edit_coordinate(2, 2, "-1")
        assert session.vectors[2] == Vector(2, 2, -1)

    def test_bad_index(self):
        with pytest.raises(IndexError):
            Session().edit_coordinate(2, 0, "1")

    def test_result_cached_until_change(self):
        session = Session()
        assert session.result is session.result
        session.edit_coordinate(0, 0, "3")  # same value
        first = session.result
        assert session.result is first

    def test_set_vectors_count_checked(self):
        session = Session()
        with pytest.raises(ValueError):
            session.set_vectors([[1, 0, 0], [0, 1, 0], [0, 0, 1]])

    def test_set_vectors_drops_z_in_2d(self):
        session = Session()
        session.set_vectors([[1, 2, 9], [3, 4, 9]])
        assert session.vectors == (Vector(1, 2, 0), Vector(3, 4, 0))


class TestSessionNavigation:
    """Test step navigation, reset and dimension changes."""

    def test_next_prev(self):
        session = Session()
        for _ in range(10):
            session.next()
        assert session.step == 4
        for _ in range(10):
            session.prev()
        assert session.step == 0

    def test_reset_keeps_vectors(self):
        session = Session()
        session.edit_coordinate(0, 0, "-1")
        session.next()

        state = session.reset()

        assert state.step == 0
        assert session.vectors[0] == Vector(-1, 1, 0)

    def test_restore_defaults(self):
        session = Session()
        session.edit_coordinate(0, 0, "-1")
        session.next()

        session.restore_defaults()

        assert session.step == 0
        assert session.vectors == (Vector(3, 1, 0), Vector(2, 4, 0))
        assert session.raw_inputs[0][0] == "3"

    def test_set_dimension(self):
        session = Session()
        session.next()
        session.next()

        state = session.set_dimension(3)

        assert state == StepState(step=0, max_step=6)
        assert session.vectors == (Vector(2, 0, 0), Vector(2, 2, 0), Vector(2, 2, 2))
        assert session.raw_inputs == [["2", "0", "0"], ["2", "2", "0"], ["2", "2", "2"]]
        assert len(session.result) == 3

    def test_set_dimension_back_to_2d(self):
        session = Session(WalkthroughConfig.for_3d())
        session.next()
        session.set_dimension(2)
        assert session.step == 0
        assert session.vectors == (Vector(3, 1, 0), Vector(2, 4, 0))

    def test_disclosure(self):
        session = Session()
        session.next()
        assert session.disclosure().u == 1

    def test_is_orthogonal(self):
        session = Session()
        assert session.is_orthogonal()
        session.set_vectors([[1, 0], [2, 0]])
        assert session.is_orthogonal()
        assert session.result.rank == 1

    def test_is_orthogonal_scale_invariant(self):
        """Large inputs leave rounding residue that is small relative to their size."""
        session = Session(WalkthroughConfig.for_3d())
        session.set_vectors([[1e8, 3e7, 2e7], [2e8, 4.1e8, 7e7], [3.3e8, -1.7e8, 9.1e8]])
        assert session.is_orthogonal()

    def test_is_orthogonal_exact_with_zero_tolerance(self):
        session = Session(WalkthroughConfig(orthogonality_tolerance=0.0))
        session.set_vectors([[1e-8, 0], [0, 1e-8]])
        assert session.is_orthogonal()
