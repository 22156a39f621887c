"""Bundled Colombian holiday data (festivos), 2023-2026.

Movable holidays already reflect the Emiliani rule (moved to the following
Monday). Years outside the table are not guessed: asking for one raises.
"""

from __future__ import annotations

from shiftpay.core.exceptions import HolidayLookupError
from shiftpay.models.holiday import HolidayDate

COLOMBIAN_HOLIDAYS: dict[int, list[tuple[int, int, str]]] = {
    2023: [
        (1, 1, "Año Nuevo"), (1, 9, "Reyes Magos"), (3, 20, "San José"),
        (4, 6, "Jueves Santo"), (4, 7, "Viernes Santo"), (5, 1, "Día del Trabajo"),
        (5, 22, "Ascensión del Señor"), (6, 12, "Corpus Christi"),
        (6, 19, "Sagrado Corazón"), (7, 3, "San Pedro y San Pablo"),
        (7, 20, "Independencia"), (8, 7, "Batalla de Boyacá"),
        (8, 21, "Asunción de la Virgen"), (10, 16, "Día de la Raza"),
        (11, 6, "Todos los Santos"), (11, 13, "Independencia de Cartagena"),
        (12, 8, "Inmaculada Concepción"), (12, 25, "Navidad"),
    ],
    2024: [
        (1, 1, "Año Nuevo"), (1, 8, "Reyes Magos"), (3, 25, "San José"),
        (3, 28, "Jueves Santo"), (3, 29, "Viernes Santo"), (5, 1, "Día del Trabajo"),
        (5, 13, "Ascensión del Señor"), (6, 3, "Corpus Christi"),
        (6, 10, "Sagrado Corazón"), (7, 1, "San Pedro y San Pablo"),
        (7, 20, "Independencia"), (8, 7, "Batalla de Boyacá"),
        (8, 19, "Asunción de la Virgen"), (10, 14, "Día de la Raza"),
        (11, 4, "Todos los Santos"), (11, 11, "Independencia de Cartagena"),
        (12, 8, "Inmaculada Concepción"), (12, 25, "Navidad"),
    ],
    2025: [
        (1, 1, "Año Nuevo"), (1, 6, "Reyes Magos"), (3, 24, "San José"),
        (4, 17, "Jueves Santo"), (4, 18, "Viernes Santo"), (5, 1, "Día del Trabajo"),
        (6, 2, "Ascensión del Señor"), (6, 23, "Corpus Christi"),
        (6, 30, "Sagrado Corazón"), (7, 20, "Independencia"),
        (8, 7, "Batalla de Boyacá"), (8, 18, "Asunción de la Virgen"),
        (10, 13, "Día de la Raza"), (11, 3, "Todos los Santos"),
        (11, 17, "Independencia de Cartagena"), (12, 8, "Inmaculada Concepción"),
        (12, 25, "Navidad"),
    ],
    2026: [
        (1, 1, "Año Nuevo"), (1, 12, "Reyes Magos"), (3, 23, "San José"),
        (4, 2, "Jueves Santo"), (4, 3, "Viernes Santo"), (5, 1, "Día del Trabajo"),
        (5, 18, "Ascensión del Señor"), (6, 8, "Corpus Christi"),
        (6, 15, "Sagrado Corazón"), (7, 1, "San Pedro y San Pablo"),
        (7, 20, "Independencia"), (8, 7, "Batalla de Boyacá"),
        (8, 17, "Asunción de la Virgen"), (10, 12, "Día de la Raza"),
        (11, 2, "Todos los Santos"), (11, 16, "Independencia de Cartagena"),
        (12, 8, "Inmaculada Concepción"), (12, 25, "Navidad"),
    ],
}


class StaticHolidayProvider:
    """IHolidayProvider serving the bundled table."""

    def __init__(self, table: dict[int, list[tuple[int, int, str]]] | None = None) -> None:
        self._table = COLOMBIAN_HOLIDAYS if table is None else table

    @property
    def years(self) -> list[int]:
        return sorted(self._table)

    def get_holidays(self, year: int) -> list[HolidayDate]:
        if year not in self._table:
            raise HolidayLookupError(year, "no holiday data bundled for this year")
        return [
            HolidayDate(year=year, month=month, day=day, name=name)
            for month, day, name in self._table[year]
        ]
