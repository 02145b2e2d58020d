"""
Tests for ChainCursor: deref, advance, equality, copying.
"""

import copy

import pytest

from chainrange import ChainCursor, ChainRange


class TestAdvance:
    """Tests for pre- and post-advance."""

    def test_pre_advance(self, records):
        """Test advance() steps through each record then reaches end."""
        chain = ChainRange(records[0])
        cursor = chain.begin()

        assert cursor.deref().value == 100
        cursor.advance()
        assert cursor.deref().value == 200
        cursor.advance()
        assert cursor.deref().value == 300
        cursor.advance()
        assert cursor == chain.end()

    def test_advance_returns_self(self, records):
        """Test advance() returns the same cursor, after moving."""
        cursor = ChainRange(records[0]).begin()
        assert cursor.advance() is cursor
        assert cursor.deref() is records[1]

    def test_post_advance(self, records):
        """Test post_advance() returns the position held before moving."""
        cursor = ChainRange(records[0]).begin()

        previous = cursor.post_advance()

        assert previous.deref().value == 100
        assert cursor.deref().value == 200

    def test_advance_past_end_is_noop(self, single_record):
        """Test advancing at the end leaves the cursor at the end."""
        chain = ChainRange(single_record)
        cursor = chain.begin()

        cursor.advance()
        assert cursor == chain.end()
        cursor.advance()
        assert cursor == chain.end()
        assert cursor.post_advance() == chain.end()

    def test_deref_at_end_returns_none(self):
        """Test deref at the end sentinel yields None rather than raising."""
        cursor = ChainRange(None).end()

        assert cursor.at_end()
        assert cursor.deref() is None
        assert cursor.current is None

    def test_current_property(self, records):
        """Test current mirrors deref()."""
        cursor = ChainRange(records[0]).begin()
        assert cursor.current is cursor.deref() is records[0]


class TestEquality:
    """Tests for identity-based equality."""

    def test_same_position_equal(self, records):
        """Test two fresh begin() cursors compare equal."""
        chain = ChainRange(records[0])
        assert chain.begin() == chain.begin()

    def test_different_position_unequal(self, records):
        """Test cursors at different records compare unequal."""
        chain = ChainRange(records[0])
        first = chain.begin()
        second = chain.begin().advance()

        assert first != second

    def test_end_sentinels_equal(self, records, custom_records):
        """Test null positions compare equal across ranges."""
        assert ChainRange(records[0]).end() == ChainRange(None).end()
        assert ChainRange(None).end() == ChainRange(custom_records[0]).end()

    def test_value_equal_records_are_distinct(self, make_chain):
        """Test equal-valued records at different addresses are not the same position."""
        left = make_chain([7])
        right = make_chain([7])

        assert left[0].value == right[0].value
        assert ChainRange(left[0]).begin() != ChainRange(right[0]).begin()

    def test_ordering_not_supported(self, records):
        """Test relational comparison between cursors is rejected."""
        chain = ChainRange(records[0])
        first = chain.begin()
        second = chain.begin().advance()

        with pytest.raises(TypeError):
            first < second
        with pytest.raises(TypeError):
            first >= second

    def test_not_equal_to_other_types(self, records):
        """Test a cursor never equals a raw record."""
        cursor = ChainRange(records[0]).begin()
        assert cursor != records[0]

    def test_cursors_are_unhashable(self, records):
        """Test cursors cannot be set members, since advance() changes their position."""
        cursor = ChainRange(records[0]).begin()

        with pytest.raises(TypeError):
            {cursor}
        with pytest.raises(TypeError):
            hash(cursor)


class TestIndependence:
    """Tests for independent, copyable cursors."""

    def test_multiple_independent_cursors(self, records):
        """Test advancing one cursor never moves another."""
        chain = ChainRange(records[0])
        a = chain.begin()
        b = chain.begin()

        a.advance()
        assert a.deref().value == 200
        assert b.deref().value == 100

        b.advance().advance()
        assert a.deref().value == 200
        assert b.deref().value == 300

    def test_copy_and_assignment(self, records):
        """Test copies keep their position and assign() takes another's."""
        chain = ChainRange(records[0])
        original = chain.begin()
        duplicate = original.copy()

        assert original == duplicate

        original.advance()
        third = chain.begin()
        third.assign(original)

        assert original == third
        assert duplicate != third
        assert duplicate.deref() is records[0]

    def test_copy_module(self, records):
        """Test copy.copy produces an independent cursor."""
        cursor = ChainRange(records[0]).begin()
        duplicate = copy.copy(cursor)

        cursor.advance()
        assert duplicate.deref() is records[0]
        assert isinstance(duplicate, ChainCursor)

    def test_iteration_does_not_move_begin(self, records):
        """Test iterating a range leaves previously obtained cursors alone."""
        chain = ChainRange(records[0])
        cursor = chain.begin()

        list(chain)
        assert cursor.deref() is records[0]

    def test_repr(self, records):
        """Test repr distinguishes end from a live position."""
        chain = ChainRange(records[0])
        assert "end" in repr(chain.end())
        assert "ExtensionRecord" in repr(chain.begin())
