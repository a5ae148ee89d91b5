"""Tests for the pricing engine."""

from decimal import Decimal

import pytest

from app.models import LineItem
from app.services.pricing import calculate_pricing, percent_of, volume_discount_rate
from app.services.sample_data import initial_pricing


def items(arms: int = 1, modules: int = 1, install_days: int = 5) -> list[LineItem]:
    return [
        LineItem(id="1", name="Robotic Arm", price=Decimal("15000"), quantity=arms),
        LineItem(id="2", name="ML Quality Module", price=Decimal("12000"), quantity=modules),
        LineItem(id="3", name="Onsite Install (Days)", price=Decimal("800"), quantity=install_days),
    ]


class TestCalculatePricing:
    """Tests for calculate_pricing."""

    def test_initial_draft_totals(self):
        """Preset draft pricing without discounts."""
        summary = calculate_pricing(initial_pricing())

        assert summary.subtotal == Decimal("31000")
        assert summary.volume_discount_amount == 0
        assert summary.manual_discount_amount == 0
        assert summary.total == Decimal("31000")
        assert not summary.volume_discount_applied

    def test_subtotal_is_exact_sum(self):
        line_items = [
            LineItem(id="a", name="Widget", price=Decimal("19.99"), quantity=3),
            LineItem(id="b", name="Gadget", price=Decimal("0.01"), quantity=7),
        ]
        summary = calculate_pricing(line_items)
        assert summary.subtotal == Decimal("59.97") + Decimal("0.07")

    def test_empty_pricing(self):
        summary = calculate_pricing([], discount=10)
        assert summary.subtotal == 0
        assert summary.total == 0

    def test_volume_discount_at_threshold(self):
        """Three robotic arms earn exactly 5% off the subtotal."""
        summary = calculate_pricing(items(arms=3))

        assert summary.subtotal == Decimal("61000")
        assert summary.volume_discount_rate == Decimal("5")
        assert summary.volume_discount_amount == Decimal("3050.00")
        assert summary.total == Decimal("57950.00")
        assert summary.volume_discount_applied

    def test_no_volume_discount_below_threshold(self):
        summary = calculate_pricing(items(arms=2))
        assert summary.volume_discount_amount == 0
        assert summary.volume_discount_rate == 0

    def test_volume_discount_only_for_designated_item(self):
        summary = calculate_pricing(items(arms=1, modules=5))
        assert summary.volume_discount_amount == 0

    def test_manual_discount(self):
        summary = calculate_pricing(items(), discount=10)
        assert summary.manual_discount_amount == Decimal("3100.00")
        assert summary.total == Decimal("27900.00")

    def test_both_discounts_apply_to_subtotal(self):
        summary = calculate_pricing(items(arms=4), discount=15)

        assert summary.subtotal == Decimal("76000")
        assert summary.volume_discount_amount == Decimal("3800.00")
        assert summary.manual_discount_amount == Decimal("11400.00")
        assert summary.total == Decimal("60800.00")

    @pytest.mark.parametrize("discount", [0, 1, 7, 13, 15, 33])
    def test_total_identity_holds(self, discount):
        line_items = [
            LineItem(id="a", name="Robotic Arm", price=Decimal("333.33"), quantity=3),
            LineItem(id="b", name="Cable", price=Decimal("0.07"), quantity=11),
        ]
        summary = calculate_pricing(line_items, discount=discount)

        assert summary.subtotal == sum(i.price * i.quantity for i in line_items)
        assert summary.total == (
            summary.subtotal - summary.volume_discount_amount - summary.manual_discount_amount
        )


class TestHelpers:
    """Tests for rounding and the volume rule."""

    def test_percent_of_rounds_half_up_to_cents(self):
        assert percent_of(Decimal("0.10"), Decimal("5")) == Decimal("0.01")
        assert percent_of(Decimal("0.30"), Decimal("5")) == Decimal("0.02")
        assert percent_of(Decimal("100"), Decimal("0")) == Decimal("0.00")

    def test_volume_rule_is_configurable(self):
        line_items = [LineItem(id="1", name="Sensor", price=Decimal("10"), quantity=10)]

        assert volume_discount_rate(line_items) == 0
        assert volume_discount_rate(line_items, item_name="Sensor", threshold=10, rate=Decimal("7")) == 7

    def test_line_item_clamps_negative_quantity(self):
        item = LineItem(id="x", name="X", price=Decimal("1"), quantity=-4)
        assert item.quantity == 0
