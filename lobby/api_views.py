"""
Read-only JSON endpoints for campaign widgets
"""
from django.db.models import Count, Q
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .decorators import campaign_view
from .models import CampaignEntry, Politician, WipCount

LATEST_STATEMENTS = 50


@api_view(['GET'])
@permission_classes([AllowAny])
@campaign_view
def politicians(request, campaign, locale=''):
    """Politicians of the campaign with confirmed entry counts and WIP status"""
    queryset = Politician.objects.for_campaign(campaign).annotate(
        confirmed_entries=Count(
            'entries',
            filter=Q(entries__campaign=campaign, entries__confirmed=True),
            distinct=True,
        )
    )
    wip_counts = {
        wip.politician_id: wip
        for wip in WipCount.objects.filter(campaign=campaign)
    }
    data = []
    for politician in queryset:
        wip = wip_counts.get(politician.id)
        data.append({
            'slug': politician.slug,
            'name': politician.full_name,
            'party': politician.party,
            'regions': [region.slug for region in politician.regions.all()],
            'confirmed_entries': politician.confirmed_entries,
            'status': wip.status if wip else None,
            'voted': wip.voted if wip else None,
        })
    return Response(data)


@api_view(['GET'])
@permission_classes([AllowAny])
@campaign_view
def statements(request, campaign, locale=''):
    """Latest confirmed statements of the campaign"""
    entries = (
        CampaignEntry.objects.confirmed()
        .filter(campaign=campaign)
        .select_related('person', 'politician', 'argument')
        .order_by('-id')[:LATEST_STATEMENTS]
    )
    data = []
    for entry in entries:
        data.append({
            'id': entry.id,
            'politician': entry.politician.slug,
            'argument': entry.argument.text,
            'color': entry.color,
            'first_name': entry.person.first_name,
            'city': entry.person.city,
            'created_at': entry.created_at,
        })
    return Response(data)
