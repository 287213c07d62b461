import logging
import random

from django.core.paginator import Paginator
from django.db import transaction
from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_GET, require_http_methods

from .decorators import campaign_view, localized, localized_url
from .emails import send_confirmation_mail, send_thanks_mail
from .exceptions import CampaignEntryNotFound, ConfirmationTokenExpired, ConfirmationTokenNotFound
from .forms import PersonForm
from .models import CampaignEntry, Person, Politician, Region, WipCount

logger = logging.getLogger(__name__)

STATEMENTS_PER_PAGE = 20


def _listing_context(campaign, politicians):
    entries = CampaignEntry.objects.latest_for(campaign, limit=10)
    random.shuffle(entries)
    wip_counts = {
        wip.politician_id: wip
        for wip in WipCount.objects.filter(campaign=campaign)
    }
    politicians = list(politicians)
    for politician in politicians:
        politician.wip = wip_counts.get(politician.id)
    return {
        'campaign': campaign,
        'politicians': politicians,
        'latest_entries': entries,
        'total': CampaignEntry.objects.filter(campaign=campaign).count(),
        'wip_counts': wip_counts,
    }


@require_GET
@campaign_view
@localized('campaign_index')
def index(request: HttpRequest, campaign) -> HttpResponse:
    context = _listing_context(campaign, Politician.objects.for_campaign(campaign))
    return render(request, 'lobby/index.html', context)


@require_GET
@campaign_view
@localized('campaign_region_redirect')
def region_redirect(request: HttpRequest, campaign, region_id: int) -> HttpResponse:
    """Old numeric region links point to the slug based listing."""
    region = get_object_or_404(Region, id=region_id)
    return redirect(localized_url('campaign_region', request.LANGUAGE_CODE, region=region.slug))


@require_GET
@campaign_view
@localized('campaign_region')
def region(request: HttpRequest, campaign, region: str) -> HttpResponse:
    region = get_object_or_404(Region, slug__iexact=region)
    politicians = Politician.objects.by_type_and_regions(campaign.politician_type, [region])
    context = _listing_context(campaign, politicians)
    context['region'] = region
    return render(request, 'lobby/index.html', context)


def _create_campaign_entry(person, campaign, politician, argument, opt_in_information):
    entry, created = CampaignEntry.objects.get_or_create(
        person=person,
        campaign=campaign,
        politician=politician,
        argument=argument,
        defaults={
            'opt_in_information': opt_in_information,
            'color': CampaignEntry.random_color(),
        }
    )
    if created:
        logger.info("Created campaign entry %s for campaign %s", entry.pk, campaign.slug)
    return entry


def _upsert_person(form, locale):
    data = form.cleaned_data
    person, created = Person.objects.get_or_create(
        email=data['email'],
        defaults={
            'first_name': data['first_name'],
            'last_name': data['last_name'],
            'city': data['city'],
        }
    )
    if not created:
        person.first_name = data['first_name']
        person.last_name = data['last_name']
        person.city = data['city']

    if person.needs_confirmation_token():
        person.issue_confirmation_token()

    person.language = locale
    person.save()
    return person


@require_http_methods(['GET', 'POST'])
@campaign_view
@localized('campaign_lobby')
def lobby(request: HttpRequest, campaign, slug: str) -> HttpResponse:
    """Lobby form: send one of the campaign's arguments to a politician."""
    politician = get_object_or_404(Politician, slug=slug)

    if request.method == 'POST':
        form = PersonForm(request.POST, campaign=campaign)
        if form.is_valid():
            argument = form.cleaned_data['argument']
            with transaction.atomic():
                person = _upsert_person(form, request.LANGUAGE_CODE)
                entry = _create_campaign_entry(
                    person, campaign, politician, argument,
                    form.cleaned_data['opt_in_information'],
                )
                if person.confirmed:
                    entry.confirmed = True
                    entry.save(update_fields=['confirmed'])

            if person.confirmed:
                send_thanks_mail(person, politician, campaign)
                return redirect(localized_url('campaign_thanks', request.LANGUAGE_CODE, id=entry.id))

            send_confirmation_mail(request, person, politician, campaign, argument)
            return redirect(localized_url('campaign_confirm', request.LANGUAGE_CODE, id=entry.id))
    else:
        form = PersonForm(campaign=campaign)

    return render(request, 'lobby/lobby.html', {
        'campaign': campaign,
        'politician': politician,
        'form': form,
    })


@require_GET
@campaign_view
@localized('campaign_lobby_confirm')
def lobby_confirm(request: HttpRequest, campaign, slug: str, token: str) -> HttpResponse:
    politician = get_object_or_404(Politician, slug=slug)

    person = Person.objects.filter(confirmation_token=token).first()
    if person is None:
        logger.warning("Unknown confirmation token for campaign %s", campaign.slug)
        raise ConfirmationTokenNotFound()

    if not person.confirmed and person.confirmation_expired:
        logger.warning("Expired confirmation token for person %s", person.pk)
        raise ConfirmationTokenExpired()

    entry = (
        CampaignEntry.objects
        .filter(person=person, campaign=campaign, politician=politician)
        .order_by('-id')
        .first()
    )
    if entry is None:
        logger.warning("No campaign entry to confirm for person %s", person.pk)
        raise CampaignEntryNotFound()

    if person.confirmed and entry.confirmed:
        logger.info("Confirmation link reused by person %s", person.pk)
        return redirect(localized_url('campaign_thanks', request.LANGUAGE_CODE, id=entry.id))

    with transaction.atomic():
        if not person.confirmed:
            person.mark_confirmed()
            person.save()
        CampaignEntry.objects.filter(
            person=person, campaign=campaign, confirmed=False
        ).update(confirmed=True)

    send_thanks_mail(person, politician, campaign)

    return redirect(localized_url('campaign_thanks', request.LANGUAGE_CODE, id=entry.id))


@require_GET
@campaign_view
@localized('campaign_thanks')
def thanks(request: HttpRequest, campaign, id: int) -> HttpResponse:
    entry = get_object_or_404(CampaignEntry, id=id, campaign=campaign)
    return render(request, 'lobby/thanks.html', {
        'campaign': campaign,
        'campaign_entry': entry,
    })


@require_GET
@campaign_view
@localized('campaign_confirm')
def confirm(request: HttpRequest, campaign, id: int) -> HttpResponse:
    """Tells the visitor to check their inbox."""
    entry = get_object_or_404(CampaignEntry, id=id, campaign=campaign)
    return render(request, 'lobby/confirm.html', {
        'campaign': campaign,
        'campaign_entry': entry,
    })


def _render_statements(request, campaign, entry=None):
    entries = (
        CampaignEntry.objects.confirmed()
        .filter(campaign=campaign)
        .select_related('person', 'politician', 'argument')
        .order_by('-id')
    )
    page = Paginator(entries, STATEMENTS_PER_PAGE).get_page(request.GET.get('page'))
    return render(request, 'lobby/statements.html', {
        'campaign': campaign,
        'campaign_entry': entry,
        'page': page,
    })


@require_GET
@campaign_view
@localized('campaign_statements')
def statements(request: HttpRequest, campaign) -> HttpResponse:
    return _render_statements(request, campaign)


@require_GET
@campaign_view
@localized('campaign_statement')
def statement(request: HttpRequest, campaign, id: int) -> HttpResponse:
    entry = get_object_or_404(CampaignEntry, id=id, campaign=campaign)
    return _render_statements(request, campaign, entry)
