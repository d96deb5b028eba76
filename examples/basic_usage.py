"""Basic usage example for the weatherfinder client."""

import os
import sys

from weatherfinder import ClientError, WeatherClient
from weatherfinder.formatters import format_reading, location_title


def main() -> None:
    api_key = os.environ.get("OPENWEATHER_API_KEY", "")
    query = " ".join(sys.argv[1:]) or "Paris"

    with WeatherClient(api_key=api_key) as client:
        try:
            places = client.search_locations(query)
        except ClientError as exc:
            print(f"Search failed: {exc}")
            return

        if not places:
            print(f"No locations found for '{query}'.")
            return

        print(f"=== Matches for '{query}' ===")
        for place in places:
            print(f"  {location_title(place)} ({place.lat:.4f}, {place.lon:.4f})")

        # Take the first match
        print("\n=== Current Weather ===")
        try:
            reading = client.get_current_weather(places[0])
        except ClientError as exc:
            print(f"  {exc}")
            return
        print(format_reading(reading))


if __name__ == "__main__":
    main()
