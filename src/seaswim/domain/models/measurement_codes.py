"""Reference data for RWS/Aquo measurement codes.

Compartments describe *where* a measurement is taken, quantities ("grootheden")
describe *what* is measured. Both tables are read-only and shared process-wide.
See https://www.aquo.nl/ for the authoritative lists.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class CompartmentCode:
    """Description of an RWS compartment code."""

    dutch: str
    english: str
    description: str


@dataclass(frozen=True)
class QuantityCode:
    """Description of an RWS quantity (measurement capability) code."""

    dutch: str
    english: str
    unit: str | None
    description: str
    category: str


WATER_HEIGHT = "WATHTE"
WAVE_HEIGHT = "Hm0"
WAVE_PERIOD = "Tm02"
WAVE_DIRECTION = "Th3"
TEMPERATURE = "T"

COMPARTMENTS: Mapping[str, CompartmentCode] = MappingProxyType(
    {
        "OW": CompartmentCode("Oppervlaktewater", "Surface water", "Water in rivers, lakes, seas, canals"),
        "LT": CompartmentCode("Lucht", "Air", "Atmospheric measurements"),
        "BS": CompartmentCode("Bodem/Sediment", "Soil/Sediment", "Bottom sediment or soil"),
        "ZS": CompartmentCode("Zwevende Stof", "Suspended matter", "Particles suspended in water"),
        "OE": CompartmentCode("Oever", "Shore/Bank", "Riverbank or shore measurements"),
        "OR": CompartmentCode("Organisme", "Organism", "Biota/organism samples"),
        "NVT": CompartmentCode("Niet Van Toepassing", "Not applicable", "No compartment applies"),
        "NT": CompartmentCode("Niet Te Bepalen", "Not determined", "Cannot be determined"),
        "PM": CompartmentCode("Particulate Matter", "Particulate matter", "Air quality particles"),
    }
)

CATEGORIES: Mapping[str, str] = MappingProxyType(
    {
        "water_level": "Water Level & Tides",
        "waves": "Waves",
        "temperature": "Temperature",
        "wind": "Wind",
        "current": "Current & Flow",
        "water_quality": "Water Quality",
        "atmospheric": "Atmospheric",
        "other": "Other",
    }
)

QUANTITIES: Mapping[str, QuantityCode] = MappingProxyType(
    {
        # Water level & tides
        "WATHTE": QuantityCode("Waterhoogte", "Water height", "cm", "Water level relative to NAP", "water_level"),
        "GGH": QuantityCode("Gemiddeld Getij Hoogwater", "Mean high water", "cm", "Average high tide level", "water_level"),
        "GGT": QuantityCode("Gemiddeld Getij", "Mean tide", "cm", "Average tide level", "water_level"),
        "HH": QuantityCode("Hoogste Hoogwater", "Highest high water", "cm", "Maximum recorded high water", "water_level"),
        "LG": QuantityCode("Laagste Laagwater", "Lowest low water", "cm", "Minimum recorded low water", "water_level"),
        "NG": QuantityCode("Normaal Getij", "Normal tide", "cm", "Normal tide level", "water_level"),
        "SPGH": QuantityCode("Spring Hoogwater", "Spring high water", "cm", "Spring tide high water", "water_level"),
        "GETVVG": QuantityCode("Getijverschuiving", "Tidal shift", "min", "Tidal time difference", "water_level"),
        # Waves
        "Hm0": QuantityCode("Spectrale golfhoogte", "Significant wave height", "cm", "From energy spectrum 30-500 mHz (4x std dev)", "waves"),
        "Hmax": QuantityCode("Maximale golfhoogte", "Maximum wave height", "cm", "Highest individual wave", "waves"),
        "H1/3": QuantityCode("Significante golfhoogte", "Significant wave height", "cm", "Average of highest 1/3 of waves", "waves"),
        "H1/10": QuantityCode("Golfhoogte 1/10", "Wave height 1/10", "cm", "Average of highest 1/10 of waves", "waves"),
        "GOLFHTE": QuantityCode("Golfhoogte", "Wave height", "cm", "General wave height", "waves"),
        "Tm02": QuantityCode("Gemiddelde golfperiode", "Mean wave period", "s", "Zero-crossing period from spectrum", "waves"),
        "Tm-10": QuantityCode("Golfperiode", "Energy wave period", "s", "Energy period (-1/0 spectral moment)", "waves"),
        "T1/3": QuantityCode("Significante golfperiode", "Significant wave period", "s", "Average period of highest 1/3", "waves"),
        "Th0": QuantityCode("Gemiddelde golfrichting", "Mean wave direction", "°", "Spectral mean direction (from true N)", "waves"),
        "Th3": QuantityCode("Golfrichting", "Wave direction", "°", "Mean direction of H1/3 waves (from true N)", "waves"),
        "Fp": QuantityCode("Piekfrequentie", "Peak frequency", "Hz", "Dominant wave frequency", "waves"),
        # Temperature
        "T": QuantityCode("Temperatuur", "Temperature", "°C", "Water or air temperature", "temperature"),
        "TE3": QuantityCode("Temperatuur 3m", "Temperature at 3m", "°C", "Temperature at 3 meter depth", "temperature"),
        # Wind
        "WINDSHD": QuantityCode("Windsnelheid", "Wind speed", "m/s", "Wind speed", "wind"),
        "WINDRTG": QuantityCode("Windrichting", "Wind direction", "°", "Direction wind comes from (0=N)", "wind"),
        "WINDST": QuantityCode("Windstoot", "Wind gust", "m/s", "Maximum gust speed", "wind"),
        # Current & flow
        "STROOMSHD": QuantityCode("Stroomsnelheid", "Current speed", "m/s", "Water current velocity", "current"),
        "STROOMRTG": QuantityCode("Stroomrichting", "Current direction", "°", "Direction current flows to", "current"),
        "Q": QuantityCode("Debiet", "Discharge", "m³/s", "Water flow rate", "current"),
        # Water quality
        "SALNTT": QuantityCode("Saliniteit", "Salinity", "g/kg", "Salt concentration", "water_quality"),
        "TROEBHD": QuantityCode("Troebelheid", "Turbidity", "NTU", "Water clarity/turbidity", "water_quality"),
        "pH": QuantityCode("Zuurgraad", "pH value", None, "Acidity/alkalinity", "water_quality"),
        "ZICHT": QuantityCode("Zicht", "Visibility", "m", "Secchi depth / visibility", "water_quality"),
        "GELDHD": QuantityCode("Geleidbaarheid", "Conductivity", "mS/cm", "Electrical conductivity", "water_quality"),
        # Atmospheric
        "LUCHTDK": QuantityCode("Luchtdruk", "Air pressure", "hPa", "Atmospheric pressure", "atmospheric"),
        # Other
        "NVT": QuantityCode("Niet Van Toepassing", "Not applicable", None, "No measurement type applies", "other"),
    }
)


def describe_compartment(code: str) -> CompartmentCode | None:
    """Look up a compartment code (exact, case-sensitive)."""
    return COMPARTMENTS.get(code)


def describe_quantity(code: str) -> QuantityCode | None:
    """Look up a quantity code (exact, case-sensitive)."""
    return QUANTITIES.get(code)
