"""
Tests for reconciliation of fetched holidays against stored ones.
"""

from datetime import date
from types import SimpleNamespace

from holiday_calendar.models.enums import CandidateStatusEnum
from holiday_calendar.models.holiday import SourceHoliday
from holiday_calendar.services.reconciliation import holiday_key, reconcile, temporary_id


def source(fecha, nombre, tipo="inamovible"):
    return SourceHoliday.model_validate({"fecha": fecha, "tipo": tipo, "nombre": nombre})


class TestReconcile:
    """Test cases for reconcile."""

    def test_marks_existing_and_new(self):
        existing = [SimpleNamespace(start_date=date(2025, 1, 1), name="Año Nuevo")]
        candidates = [source("2025-01-01", "Año Nuevo"), source("2025-05-01", "Día del Trabajador")]

        result = reconcile(candidates, existing)

        first, second = result.holidays
        assert first.exists_in_db is True
        assert first.status == CandidateStatusEnum.EXISTING
        assert second.exists_in_db is False
        assert second.status == CandidateStatusEnum.APPROVED
        assert result.stats.model_dump() == {"total": 2, "new": 1, "existing": 1}

    def test_preserves_input_order(self):
        candidates = [
            source("2025-01-01", "Año Nuevo"),
            source("2025-03-03", "Carnaval"),
            source("2025-03-04", "Carnaval"),
        ]
        result = reconcile(candidates, [])
        assert [(h.name, h.start_date) for h in result.holidays] == [
            ("Año Nuevo", date(2025, 1, 1)),
            ("Carnaval", date(2025, 3, 3)),
            ("Carnaval", date(2025, 3, 4)),
        ]

    def test_same_name_other_date_is_new(self):
        existing = [SimpleNamespace(start_date=date(2025, 3, 3), name="Carnaval")]
        result = reconcile([source("2025-03-04", "Carnaval")], existing)
        assert result.holidays[0].exists_in_db is False

    def test_same_date_other_name_is_new(self):
        existing = [SimpleNamespace(start_date=date(2025, 1, 1), name="Año Nuevo")]
        result = reconcile([source("2025-01-01", "Año nuevo")], existing)
        assert result.holidays[0].exists_in_db is False

    def test_candidate_fields(self):
        result = reconcile([source("2025-07-09", "Día de la Independencia")], [])
        candidate = result.holidays[0]
        assert candidate.start_date == candidate.end_date == date(2025, 7, 9)
        assert candidate.description == "Feriado oficial (inamovible)"
        assert candidate.id.startswith("temp_")

    def test_wire_shape(self):
        result = reconcile([source("2025-07-09", "Día de la Independencia")], [])
        wire = result.holidays[0].model_dump(by_alias=True, mode="json")
        assert wire["startDate"] == "2025-07-09"
        assert wire["endDate"] == "2025-07-09"
        assert wire["existsInDB"] is False
        assert wire["status"] == "approved"

    def test_empty_input(self):
        result = reconcile([], [SimpleNamespace(start_date=date(2025, 1, 1), name="Año Nuevo")])
        assert result.holidays == []
        assert result.stats.model_dump() == {"total": 0, "new": 0, "existing": 0}

    def test_does_not_touch_inputs(self):
        existing = [SimpleNamespace(start_date=date(2025, 1, 1), name="Año Nuevo")]
        candidates = [source("2025-01-01", "Año Nuevo")]
        reconcile(candidates, existing)
        reconcile(candidates, existing)
        assert existing[0].name == "Año Nuevo"
        assert candidates[0].name == "Año Nuevo"

    def test_message(self):
        result = reconcile([source("2025-01-01", "Año Nuevo")], [])
        assert result.message == "Found 1 holidays: 1 new, 0 already exist in database"


class TestKeys:
    def test_holiday_key(self):
        assert holiday_key(date(2025, 1, 1), "Año Nuevo") == "2025-01-01_Año Nuevo"

    def test_temporary_ids_are_unique(self):
        ids = {temporary_id() for _ in range(50)}
        assert len(ids) == 50
