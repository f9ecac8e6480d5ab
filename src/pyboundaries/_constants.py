"""Internal constants shared across the library."""

# GADM 4.1, Ecuador, level 2 (cantons with their province in NAME_1).
DEFAULT_SOURCE = "https://geodata.ucdavis.edu/gadm/gadm4.1/json/gadm41_ECU_2.json"
DEFAULT_TIMEOUT_S: float = 60.0
DEFAULT_PROVINCE = "Guayas"

# ------------------------------------------------------------------
# Property fallback chains (first present, non-empty value wins)
# ------------------------------------------------------------------

# GADM uses NAME_1, HDX/INEC exports use ADM1_ES.
PROVINCE_KEYS: tuple[str, ...] = ("NAME_1", "ADM1_ES")
CANTON_NAME_KEYS: tuple[str, ...] = ("NAME_2", "name")
UNNAMED = "unnamed"

# ------------------------------------------------------------------
# The 24 cantons of Guayas, as they appear in the boundary datasets
# ------------------------------------------------------------------

KNOWN_CANTON_NAMES: tuple[str, ...] = (
    "Guayaquil",
    "Durán",
    "Samborondón",
    "Daule",
    "Milagro",
    "Naranjal",
    "Playas",
    "Yaguachi",
    "Balao",
    "Balzar",
    "Colimes",
    "El Empalme",
    "El Triunfo",
    "General Antonio Elizalde",
    "Isidro Ayora",
    "Lomas de Sargentillo",
    "Marcelino Maridueña",
    "Naranjito",
    "Nobol",
    "Palestina",
    "Pedro Carbo",
    "Salitre",
    "Santa Lucía",
    "Simón Bolívar",
)


def list_known_canton_names() -> list[str]:
    """Return the known canton names, in their fixed order.

    A fresh list is returned on every call; no I/O is performed.
    """
    return list(KNOWN_CANTON_NAMES)
