"""Tests für die Gesamtübersicht über alle Fahrzeuge"""
import pytest
from datetime import date

from app.services.car_analytics import CarAnalytics
from app.services.portfolio import summarize_portfolio


@pytest.fixture
def portfolio_data():
    """Zwei Fahrzeuge, die zufällig dieselbe Trip-ID verwenden"""
    earnings = [
        {"car_id": 1, "trip_id": "T1", "amount": 300.0, "client_profit_percentage": None,
         "earning_period_start": date(2024, 3, 1), "earning_period_end": date(2024, 3, 3)},
        {"car_id": 1, "trip_id": "T2", "amount": 100.0, "client_profit_percentage": 60,
         "earning_period_start": date(2024, 3, 5), "earning_period_end": date(2024, 3, 6)},
        {"car_id": 2, "trip_id": "T1", "amount": 200.0, "client_profit_percentage": None,
         "earning_period_start": date(2024, 3, 1), "earning_period_end": date(2024, 3, 2)},
    ]
    expenses = [
        {"car_id": 1, "trip_id": "T1", "amount": 50.0, "toll_cost": 10.0},
        {"car_id": 2, "trip_id": "T1", "amount": 100.0},
        {"car_id": 2, "trip_id": None, "amount": 30.0},
    ]
    claims = [
        {"car_id": 1, "claim_status": "approved", "claim_amount": 400.0},
        {"car_id": 1, "claim_status": None, "claim_amount": 50.0},
        {"car_id": 2, "claim_status": "pending", "claim_amount": None},
        {"car_id": 2, "claim_status": "denied", "claim_amount": 80.0},
    ]
    return earnings, expenses, claims


@pytest.mark.unit
class TestPortfolioSummary:
    """Unit-Tests für summarize_portfolio"""

    def test_empty_portfolio(self):
        """Test: Keine Daten ergeben Nullwerte"""
        summary = summarize_portfolio([], [], [])
        assert summary.total_earnings == 0
        assert summary.total_trips == 0
        assert summary.average_per_trip == 0
        assert summary.pending_claims == 0

    def test_expenses_matched_per_car(self, portfolio_data):
        """Test: Gleiche Trip-ID auf zwei Fahrzeugen vermischt sich nicht"""
        earnings, expenses, claims = portfolio_data
        summary = summarize_portfolio(earnings, expenses, claims)
        # Auto 1: (300 - 60) × 70% + 100 × 60% = 168 + 60
        # Auto 2: (200 - 100) × 70% = 70
        assert summary.total_earnings == pytest.approx(298.0)

    def test_totals(self, portfolio_data):
        """Test: Ausgaben, Gewinn, Fahrten, aktive Tage"""
        earnings, expenses, claims = portfolio_data
        summary = summarize_portfolio(earnings, expenses, claims)
        assert summary.total_expenses == pytest.approx(190.0)
        assert summary.net_profit == pytest.approx(298.0 - 190.0)
        assert summary.total_trips == 3
        assert summary.average_per_trip == pytest.approx(298.0 / 3)
        # 01.03. kommt bei beiden Fahrzeugen vor
        assert summary.active_days == 2

    def test_claims(self, portfolio_data):
        """Test: Fehlender Status zählt als pending"""
        earnings, expenses, claims = portfolio_data
        summary = summarize_portfolio(earnings, expenses, claims)
        assert summary.total_claims == 4
        assert summary.pending_claims == 2
        assert summary.total_claim_amount == pytest.approx(530.0)
        assert summary.approved_claims_amount == pytest.approx(400.0)

    def test_sum_of_cars_equals_portfolio(self, portfolio_data):
        """Test: Summe der Fahrzeug-Kennzahlen = Gesamtübersicht"""
        earnings, expenses, claims = portfolio_data
        summary = summarize_portfolio(earnings, expenses, claims)

        per_car_total = 0.0
        per_car_trips = 0
        per_car_expenses = 0.0
        per_car_claims = 0
        per_car_pending = 0
        per_car_claims_amount = 0.0
        for car_id in (1, 2):
            perf = CarAnalytics.calculate_performance(
                [e for e in earnings if e["car_id"] == car_id],
                [e for e in expenses if e["car_id"] == car_id],
                [c for c in claims if c["car_id"] == car_id],
                as_of=date(2024, 3, 31)
            )
            per_car_total += perf.total_earnings
            per_car_trips += perf.total_trips
            per_car_expenses += perf.total_expenses
            per_car_claims += perf.total_claims
            per_car_pending += perf.pending_claims
            per_car_claims_amount += perf.claims_amount

        assert per_car_total == pytest.approx(summary.total_earnings)
        assert per_car_trips == summary.total_trips
        assert per_car_expenses == pytest.approx(summary.total_expenses)
        assert per_car_claims == summary.total_claims == 4
        assert per_car_pending == summary.pending_claims == 2
        assert per_car_claims_amount == pytest.approx(summary.total_claim_amount)
