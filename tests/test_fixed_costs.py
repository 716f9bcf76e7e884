"""Tests für die Umrechnung der Fixkosten"""
import pytest
from datetime import date

from app.services.fixed_costs import monthly_amount, is_active, get_monthly_fixed_costs

AS_OF = date(2024, 6, 15)


@pytest.mark.unit
class TestMonthlyAmount:
    """Tests für die Umrechnung pro Intervall"""

    @pytest.mark.parametrize("frequency, expected", [
        ("monthly", 120.0),
        ("quarterly", 40.0),
        ("yearly", 10.0),
    ])
    def test_frequencies(self, frequency, expected):
        """Test: monatlich / vierteljährlich / jährlich"""
        assert monthly_amount({"amount": 120.0, "frequency": frequency}) == pytest.approx(expected)

    def test_unknown_frequency_treated_as_monthly(self):
        """Test: Unbekanntes Intervall wird als monatlich gerechnet"""
        assert monthly_amount({"amount": 50.0, "frequency": "weekly"}) == 50.0


@pytest.mark.unit
class TestActiveExpenses:
    """Tests für die Aktiv-Prüfung am Stichtag"""

    def test_open_ended(self):
        """Test: Ohne Enddatum aktiv ab Start"""
        assert is_active({"start_date": date(2024, 1, 1), "end_date": None}, AS_OF)

    def test_not_started_yet(self):
        """Test: Beginn in der Zukunft ist nicht aktiv"""
        assert not is_active({"start_date": date(2024, 7, 1)}, AS_OF)

    def test_ended(self):
        """Test: Abgelaufene Position ist nicht aktiv"""
        assert not is_active({"start_date": date(2023, 1, 1), "end_date": date(2024, 6, 14)}, AS_OF)

    def test_ends_on_as_of(self):
        """Test: Enddatum = Stichtag zählt noch"""
        assert is_active({"start_date": date(2023, 1, 1), "end_date": AS_OF}, AS_OF)

    def test_sum_for_car(self):
        """Test: Summe nur der aktiven Positionen des Fahrzeugs"""
        expenses = [
            {"car_id": 1, "amount": 1200.0, "frequency": "yearly", "start_date": date(2024, 1, 1)},
            {"car_id": 1, "amount": 300.0, "frequency": "quarterly", "start_date": date(2024, 1, 1)},
            {"car_id": 1, "amount": 999.0, "frequency": "monthly", "start_date": date(2023, 1, 1),
             "end_date": date(2023, 12, 31)},
            {"car_id": 2, "amount": 500.0, "frequency": "monthly", "start_date": date(2024, 1, 1)},
        ]
        assert get_monthly_fixed_costs(expenses, car_id=1, as_of=AS_OF) == pytest.approx(200.0)
        assert get_monthly_fixed_costs(expenses, as_of=AS_OF) == pytest.approx(700.0)

    def test_empty(self):
        """Test: Keine Fixkosten ergeben 0"""
        assert get_monthly_fixed_costs([], car_id=1, as_of=AS_OF) == 0.0
