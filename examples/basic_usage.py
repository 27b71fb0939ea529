"""Basic usage examples for the Skycast client and service."""

from skycast import Settings, WeatherClient, WeatherService


def main() -> None:
    settings = Settings.from_env()

    with WeatherClient(base_url=settings.base_url, api_key=settings.api_key) as client:
        # Resolve a city to coordinates (first match wins)
        print("=== Geocoding ===")
        coords = client.geocode("Boston")
        print(f"  Boston -> {coords.latitude}, {coords.longitude}")

        # Raw 3-hour forecast series
        print("\n=== Raw forecast ===")
        forecast = client.forecast(coords)
        print(f"  {forecast.city.name}: {len(forecast.entries)} slices")
        for entry in forecast.entries[:4]:
            print(f"  {entry.dt_txt}  {entry.main.temp:.2f} K  {entry.weather[0].description}")

    # Current conditions plus one midday record per day
    print("\n=== Weather for Boston ===")
    with WeatherService.from_settings(settings) as service:
        current, *days = service.get_weather_for_city("Boston")
    print(f"  Now ({current.date}): {current.temp_f} °F, {current.icon_description}")
    for day in days:
        print(f"  {day.date}: {day.temp_f} °F, wind {day.wind_speed}, humidity {day.humidity}%")


if __name__ == "__main__":
    main()
