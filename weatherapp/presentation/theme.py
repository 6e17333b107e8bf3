"""Theme derivation from current conditions and local hour."""

from weatherapp.models.weather import CurrentWeather, Theme

RAINY_KEYWORDS = ("rain", "drizzle", "thunderstorm")
CLOUDY_KEYWORDS = ("cloud", "mist", "fog")


def derive_theme(
    current: CurrentWeather | None,
    hour: int,
    night_start_hour: int = 20,
    night_end_hour: int = 6,
) -> Theme | None:
    """Pick the display theme.

    Night wins over the description: any hour before night_end_hour or after
    night_start_hour is night. Otherwise the first keyword group found in the
    lower-cased description decides, falling back to sunny.
    """
    if current is None:
        return None
    if hour < night_end_hour or hour > night_start_hour:
        return Theme.NIGHT

    description = current.description.lower()
    if any(k in description for k in RAINY_KEYWORDS):
        return Theme.RAINY
    if any(k in description for k in CLOUDY_KEYWORDS):
        return Theme.CLOUDY
    return Theme.SUNNY
