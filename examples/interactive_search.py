"""Interactive search: enter a key, search, pick a match, see the weather."""

import asyncio
import getpass

from weatherfinder import AsyncWeatherClient, ClientError
from weatherfinder.formatters import format_reading, icon_url, location_key, location_label


async def choose_and_show(client: AsyncWeatherClient, query: str) -> None:
    """Search for ``query``, let the user pick a match, print its weather."""
    try:
        places = await client.search_locations(query)
    except ClientError as exc:
        print(f"Error: {exc}")
        return

    if not places:
        print("No locations found for this search")
        return

    for index, place in enumerate(places):
        print(f"  [{index + 1}] {place.name} ({location_label(place)})")

    choice = input("Pick a number (Enter for 1): ").strip() or "1"
    if not choice.isdigit() or not 1 <= int(choice) <= len(places):
        print(f"'{choice}' is not one of the listed locations")
        return
    place = places[int(choice) - 1]

    try:
        reading = await client.get_current_weather(place)
    except ClientError as exc:
        print(f"Error: {exc}")
        return
    print(f"\n{format_reading(reading)}")
    print(f"Icon: {icon_url(reading.icon)}")
    print(f"({location_key(place, int(choice) - 1)})")


async def main() -> None:
    async with AsyncWeatherClient() as client:
        client.set_credential(getpass.getpass("OpenWeatherMap API key: ").strip())
        while True:
            query = input("\nCity (blank to quit): ")
            # Blank searches never reach the provider
            if not query.strip():
                break
            await choose_and_show(client, query)


if __name__ == "__main__":
    asyncio.run(main())
