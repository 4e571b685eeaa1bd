"""Unit tests for quantity controls."""
from food_details.services.ordering.quantity import QuantityController


class TestBaseQuantity:
    """Test base food quantity."""

    def test_starts_at_one(self):
        assert QuantityController([]).base_quantity == 1

    def test_increment_unbounded(self):
        controller = QuantityController([])
        for _ in range(50):
            assert controller.increment_base() is True
        assert controller.base_quantity == 51

    def test_decrement_at_floor_is_noop(self):
        """Test that decrementing at 1 keeps the quantity at 1."""
        controller = QuantityController([])

        assert controller.decrement_base() is False
        assert controller.decrement_base() is False
        assert controller.base_quantity == 1

    def test_decrement_above_floor(self):
        controller = QuantityController([])
        controller.increment_base()
        controller.increment_base()

        assert controller.decrement_base() is True
        assert controller.base_quantity == 2


class TestExtraQuantity:
    """Test extra quantities."""

    def test_extras_start_at_zero(self):
        controller = QuantityController([1, 2])
        assert controller.extra_quantity(1) == 0
        assert controller.extra_quantity(2) == 0

    def test_increment_and_decrement(self):
        controller = QuantityController([1])
        controller.increment_extra(1)
        controller.increment_extra(1)
        controller.decrement_extra(1)

        assert controller.extra_quantity(1) == 1

    def test_decrement_at_zero_is_noop(self):
        """Test that decrementing an extra at 0 keeps it at 0."""
        controller = QuantityController([1])

        assert controller.decrement_extra(1) is False
        assert controller.extra_quantity(1) == 0

    def test_unknown_extra_is_noop(self):
        """Test that unknown ids change nothing and are not added."""
        controller = QuantityController([1])

        assert controller.increment_extra(99) is False
        assert controller.decrement_extra(99) is False
        assert controller.has_extra(99) is False
        assert controller.extra_quantity(1) == 0
        assert controller.base_quantity == 1

    def test_extras_are_independent(self):
        """Test that mutating one extra leaves the others alone, in any order."""
        first = QuantityController([1, 2])
        first.increment_extra(1)
        first.increment_extra(2)
        first.increment_extra(2)

        second = QuantityController([1, 2])
        second.increment_extra(2)
        second.increment_extra(1)
        second.increment_extra(2)

        assert first.extra_quantity(1) == second.extra_quantity(1) == 1
        assert first.extra_quantity(2) == second.extra_quantity(2) == 2
        assert first.base_quantity == 1
