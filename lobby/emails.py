import logging

from django.conf import settings
from django.core.mail import EmailMessage
from django.template.loader import render_to_string
from django.utils.translation import gettext as _

from .decorators import localized_url

logger = logging.getLogger(__name__)


def _send_html(subject, template_name, context, recipient):
    message = EmailMessage(
        subject=subject,
        body=render_to_string(template_name, context),
        from_email=settings.LOBBY_MAIL_FROM,
        to=[recipient],
    )
    message.content_subtype = "html"
    message.send()


def send_thanks_mail(person, politician, campaign):
    context = {
        'person': person,
        'politician': politician,
        'campaign': campaign,
    }
    _send_html(_("Crowd-Lobbying"), "lobby/emails/thanks.html", context, person.email)
    logger.info("Sent thanks mail for campaign %s to person %s", campaign.slug, person.pk)


def send_confirmation_mail(request, person, politician, campaign, argument):
    """Ask ``person`` to confirm the message sent to ``politician``.

    Links are absolute and point at the host the request came in on, so they
    stay on the campaign's subdomain.
    """
    locale = person.language or ""
    url_confirmation = request.build_absolute_uri(localized_url(
        'campaign_lobby_confirm', locale,
        slug=politician.slug,
        token=person.confirmation_token,
    ))
    url_donate = request.build_absolute_uri(localized_url('campaign_index', locale))
    context = {
        'person': person,
        'politician': politician,
        'campaign': campaign,
        'argument': argument,
        'url_confirmation': url_confirmation,
        'url_donate': url_donate,
    }
    _send_html(
        _("Crowd-Lobbying: please confirm your message"),
        "lobby/emails/confirmation.html",
        context,
        person.email,
    )
    logger.info("Sent confirmation mail for campaign %s to person %s", campaign.slug, person.pk)
