# customers/management/commands/load_countries.py
from django.core.management.base import BaseCommand

from customers.models import Country

US_STATES = {
    "AL": "Alabama", "AK": "Alaska", "AZ": "Arizona", "AR": "Arkansas",
    "CA": "California", "CO": "Colorado", "CT": "Connecticut",
    "DE": "Delaware", "DC": "District Of Columbia", "FL": "Florida",
    "GA": "Georgia", "HI": "Hawaii", "ID": "Idaho", "IL": "Illinois",
    "IN": "Indiana", "IA": "Iowa", "KS": "Kansas", "KY": "Kentucky",
    "LA": "Louisiana", "ME": "Maine", "MD": "Maryland",
    "MA": "Massachusetts", "MI": "Michigan", "MN": "Minnesota",
    "MS": "Mississippi", "MO": "Missouri", "MT": "Montana",
    "NE": "Nebraska", "NV": "Nevada", "NH": "New Hampshire",
    "NJ": "New Jersey", "NM": "New Mexico", "NY": "New York",
    "NC": "North Carolina", "ND": "North Dakota", "OH": "Ohio",
    "OK": "Oklahoma", "OR": "Oregon", "PA": "Pennsylvania",
    "RI": "Rhode Island", "SC": "South Carolina", "SD": "South Dakota",
    "TN": "Tennessee", "TX": "Texas", "UT": "Utah", "VT": "Vermont",
    "VA": "Virginia", "WA": "Washington", "WV": "West Virginia",
    "WI": "Wisconsin", "WY": "Wyoming",
}

COUNTRIES = [
    {"code": "USA", "name": "United States of America", "states": US_STATES},
    {"code": "CAN", "name": "Canada", "states": None},
    {"code": "GBR", "name": "United Kingdom", "states": None},
    {"code": "DEU", "name": "Germany", "states": None},
    {"code": "FRA", "name": "France", "states": None},
    {"code": "GEO", "name": "Georgia", "states": None},
    {"code": "IND", "name": "India", "states": None},
    {"code": "AUS", "name": "Australia", "states": None},
]


class Command(BaseCommand):
    help = "Create the reference list of countries used by customer addresses"

    def handle(self, *args, **options):
        created_count = 0
        for country_data in COUNTRIES:
            country, created = Country.objects.get_or_create(
                code=country_data["code"],
                defaults={
                    "name": country_data["name"],
                    "states": country_data["states"],
                }
            )
            if created:
                created_count += 1
                self.stdout.write(
                    self.style.SUCCESS(f"Created country: {country.name}")
                )
            else:
                self.stdout.write(
                    self.style.WARNING(f"Country already exists: {country.name}")
                )

        self.stdout.write(
            self.style.SUCCESS(f"Successfully created {created_count} countries")
        )
