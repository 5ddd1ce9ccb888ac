"""German federal states and per-state result entries."""

from dataclasses import dataclass, field

from .holiday_period import HolidayPeriod


@dataclass(frozen=True)
class GermanState:
    """A German federal state (Bundesland)."""

    code: str
    name: str

    @property
    def subdivision_code(self) -> str:
        """ISO 3166-2 subdivision code, e.g. DE-BW."""
        return f"DE-{self.code}"


GERMAN_STATES: tuple[GermanState, ...] = (
    GermanState("BW", "Baden-Württemberg"),
    GermanState("BY", "Bayern"),
    GermanState("BE", "Berlin"),
    GermanState("BB", "Brandenburg"),
    GermanState("HB", "Bremen"),
    GermanState("HH", "Hamburg"),
    GermanState("HE", "Hessen"),
    GermanState("MV", "Mecklenburg-Vorpommern"),
    GermanState("NI", "Niedersachsen"),
    GermanState("NW", "Nordrhein-Westfalen"),
    GermanState("RP", "Rheinland-Pfalz"),
    GermanState("SL", "Saarland"),
    GermanState("SN", "Sachsen"),
    GermanState("ST", "Sachsen-Anhalt"),
    GermanState("SH", "Schleswig-Holstein"),
    GermanState("TH", "Thüringen"),
)

GERMAN_STATES_BY_CODE: dict[str, GermanState] = {state.code: state for state in GERMAN_STATES}


@dataclass(frozen=True)
class RegionEntry:
    """Overlapping holidays for one German state.

    Attributes:
        state_code: Two-letter state code from GERMAN_STATES
        state_name: German name of the state
        periods: Holidays of this state that overlap the queried range
    """

    state_code: str
    state_name: str
    periods: tuple[HolidayPeriod, ...] = field(default_factory=tuple)
