"""Tests für die Zuordnung von Ausgaben zu Einnahmen"""
import pytest

from app.services.expense_matching import (
    expense_total,
    get_trip_expenses_total,
    get_net_earning_amount,
    get_client_share,
    get_host_share,
    earning_client_share,
)


@pytest.fixture
def trip_expenses():
    """Ausgaben zu zwei Trips und eine ohne Trip"""
    return [
        {"trip_id": "T1", "amount": 20.0, "toll_cost": 5.0, "delivery_cost": None,
         "carwash_cost": 10.0, "ev_charge_cost": 0.0},
        {"trip_id": "T1", "amount": 0.0, "ev_charge_cost": 15.0},
        {"trip_id": "T2", "amount": 40.0},
        {"trip_id": None, "amount": 99.0},
    ]


@pytest.mark.unit
class TestExpenseTotal:
    """Tests für die Summe der Kostenbestandteile"""

    def test_sums_all_components(self):
        """Test: Alle fünf Bestandteile werden addiert"""
        expense = {"amount": 10, "toll_cost": 1, "delivery_cost": 2, "carwash_cost": 3, "ev_charge_cost": 4}
        assert expense_total(expense) == 20.0

    def test_none_components_count_as_zero(self):
        """Test: NULL-Bestandteile zählen als 0"""
        expense = {"amount": 10, "toll_cost": None, "delivery_cost": None}
        assert expense_total(expense) == 10.0

    def test_works_with_objects(self, sample_expenses):
        """Test: Funktioniert auch mit ORM-Objekten"""
        assert expense_total(sample_expenses[0]) == 40.0
        assert sample_expenses[0].total_cost == 40.0


@pytest.mark.unit
class TestTripMatching:
    """Tests für die Trip-Zuordnung"""

    def test_matches_only_same_trip(self, trip_expenses):
        """Test: Nur Ausgaben mit gleicher Trip-ID werden summiert"""
        assert get_trip_expenses_total("T1", trip_expenses) == 50.0
        assert get_trip_expenses_total("T2", trip_expenses) == 40.0

    def test_missing_trip_id_matches_nothing(self, trip_expenses):
        """Test: Ohne Trip-ID keine Zuordnung (auch nicht zu Ausgaben ohne Trip)"""
        assert get_trip_expenses_total(None, trip_expenses) == 0.0
        assert get_trip_expenses_total("", trip_expenses) == 0.0

    def test_unknown_trip(self, trip_expenses):
        """Test: Unbekannte Trip-ID ergibt 0"""
        assert get_trip_expenses_total("T9", trip_expenses) == 0.0

    def test_net_amount(self, trip_expenses):
        """Test: Netto = brutto - Trip-Ausgaben"""
        assert get_net_earning_amount(200.0, "T1", trip_expenses) == 150.0
        assert get_net_earning_amount(None, None, trip_expenses) == 0.0


@pytest.mark.unit
class TestClientShare:
    """Tests für Kunden- und Host-Anteil"""

    def test_default_percentage_is_70(self):
        """Test: Fehlender Prozentsatz ergibt 70%"""
        assert get_client_share(100.0, None, None, []) == pytest.approx(70.0)

    def test_zero_percentage_falls_back_to_70(self):
        """Test: 0% wird wie ein fehlender Wert behandelt"""
        assert get_client_share(100.0, 0, None, []) == pytest.approx(70.0)

    def test_explicit_percentage_with_expenses(self):
        """Test: (100 - 20) × 50 / 100 = 40"""
        expenses = [{"trip_id": "T1", "amount": 20}]
        assert get_client_share(100.0, 50, "T1", expenses) == pytest.approx(40.0)

    def test_expenses_larger_than_gross(self):
        """Test: Negative Anteile sind möglich"""
        expenses = [{"trip_id": "T1", "amount": 150}]
        assert get_client_share(100.0, 100, "T1", expenses) == pytest.approx(-50.0)

    def test_host_share_default_30(self, trip_expenses):
        """Test: Host-Anteil Standard 30% vom Netto"""
        assert get_host_share(150.0, None, "T1", trip_expenses) == pytest.approx(30.0)

    def test_client_and_host_share_add_up_to_net(self, trip_expenses):
        """Test: 70% + 30% ergeben den Nettobetrag"""
        client = get_client_share(250.0, None, "T2", trip_expenses)
        host = get_host_share(250.0, None, "T2", trip_expenses)
        assert client + host == pytest.approx(210.0)

    def test_earning_client_share_from_record(self, trip_expenses):
        """Test: Kundenanteil direkt aus einem Datensatz"""
        earning = {"amount": 150.0, "client_profit_percentage": 80, "trip_id": "T1"}
        assert earning_client_share(earning, trip_expenses) == pytest.approx(80.0)
