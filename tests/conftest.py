"""Shared fixtures: one campaign on its subdomain with two politicians."""
import pytest
from django.conf import settings
from django.test import Client

from lobby.models import Argument, Campaign, Person, Politician, Region


@pytest.fixture
def campaign_host():
    return f"klima.{settings.LOBBY_DOMAIN}"


@pytest.fixture
def campaign_client(campaign_host):
    return Client(HTTP_HOST=campaign_host)


@pytest.fixture
def zurich(db):
    return Region.objects.create(name="Zürich", slug="zh")


@pytest.fixture
def vaud(db):
    return Region.objects.create(name="Vaud", slug="vd")


@pytest.fixture
def campaign(db, zurich):
    campaign = Campaign.objects.create(
        name="Klimaschutz jetzt",
        slug="klima",
        politician_type=Politician.TYPE_NATIONAL_COUNCIL,
    )
    campaign.regions.add(zurich)
    return campaign


@pytest.fixture
def politician(db, zurich):
    politician = Politician.objects.create(
        first_name="Anna",
        last_name="Muster",
        slug="anna-muster",
        party="SP",
        politician_type=Politician.TYPE_NATIONAL_COUNCIL,
    )
    politician.regions.add(zurich)
    return politician


@pytest.fixture
def other_politician(db, zurich):
    politician = Politician.objects.create(
        first_name="Beat",
        last_name="Beispiel",
        slug="beat.beispiel",
        politician_type=Politician.TYPE_NATIONAL_COUNCIL,
    )
    politician.regions.add(zurich)
    return politician


@pytest.fixture
def argument(campaign):
    return Argument.objects.create(campaign=campaign, text="Bitte stimmen Sie für das CO2-Gesetz.")


@pytest.fixture
def second_argument(campaign):
    return Argument.objects.create(campaign=campaign, text="Die nächste Generation zählt auf Sie.", display_order=1)


@pytest.fixture
def form_data(argument):
    return {
        "first_name": "Hans",
        "last_name": "Meier",
        "email": "hans.meier@example.org",
        "city": "Winterthur",
        "argument": argument.id,
    }


@pytest.fixture
def confirmed_person(db):
    return Person.objects.create(
        email="hans.meier@example.org",
        first_name="Hans",
        last_name="Meier",
        city="Winterthur",
        confirmed=True,
    )
