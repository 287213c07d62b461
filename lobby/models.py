import random
from datetime import timedelta

from django.core.validators import RegexValidator
from django.db import models
from django.utils import timezone

from .tokens import generate_token

CONFIRMATION_TTL = timedelta(days=7)


class Region(models.Model):
    """Geographic grouping, e.g. a canton."""
    name = models.CharField(max_length=100)
    slug = models.CharField(
        max_length=2,
        unique=True,
        validators=[RegexValidator(r"^\w{2}$", "Region slugs are two letters, e.g. 'zh'.")],
    )

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name}"


class PoliticianQuerySet(models.QuerySet):
    def by_type_and_regions(self, politician_type, regions):
        return (
            self.filter(politician_type=politician_type, regions__in=regions)
            .distinct()
            .order_by("last_name", "first_name")
        )

    def for_campaign(self, campaign):
        return self.by_type_and_regions(campaign.politician_type, campaign.regions.all())


class Politician(models.Model):
    TYPE_NATIONAL_COUNCIL = "national_council"
    TYPE_COUNCIL_OF_STATES = "council_of_states"
    TYPE_CANTONAL = "cantonal"
    TYPE_CHOICES = (
        (TYPE_NATIONAL_COUNCIL, "National Council"),
        (TYPE_COUNCIL_OF_STATES, "Council of States"),
        (TYPE_CANTONAL, "Cantonal Parliament"),
    )

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    slug = models.CharField(
        max_length=150,
        unique=True,
        validators=[RegexValidator(r"^[\w.-]+$")],
    )
    politician_type = models.CharField(max_length=30, choices=TYPE_CHOICES, default=TYPE_NATIONAL_COUNCIL)
    party = models.CharField(max_length=100, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    image_url = models.URLField(blank=True, null=True)
    regions = models.ManyToManyField(Region, related_name="politicians", blank=True)

    objects = PoliticianQuerySet.as_manager()

    class Meta:
        ordering = ["last_name", "first_name"]

    def __str__(self) -> str:
        return self.full_name

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"


class Campaign(models.Model):
    name = models.CharField(max_length=200)
    # Doubles as the host subdomain: <slug>.<LOBBY_DOMAIN>
    slug = models.CharField(
        max_length=100,
        unique=True,
        validators=[RegexValidator(r"^[\w-]+$")],
    )
    description = models.TextField(blank=True, null=True)
    politician_type = models.CharField(
        max_length=30, choices=Politician.TYPE_CHOICES, default=Politician.TYPE_NATIONAL_COUNCIL
    )
    regions = models.ManyToManyField(Region, related_name="campaigns", blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"{self.name}"


class Argument(models.Model):
    """Pre-written talking point a visitor can send to a politician."""
    campaign = models.ForeignKey(Campaign, on_delete=models.CASCADE, related_name="arguments")
    text = models.TextField()
    display_order = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["display_order", "id"]

    def __str__(self) -> str:
        return f"{self.campaign.name}: {self.text[:50]}"


class Person(models.Model):
    email = models.EmailField(unique=True)
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    city = models.CharField(max_length=100)
    language = models.CharField(max_length=10, blank=True, null=True)
    confirmed = models.BooleanField(default=False)
    confirmation_token = models.CharField(max_length=100, unique=True, blank=True, null=True)
    confirmation_expires = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} <{self.email}>"

    @property
    def confirmation_expired(self):
        return self.confirmation_expires is None or self.confirmation_expires < timezone.now()

    def needs_confirmation_token(self):
        if self.confirmed:
            return False
        return self.confirmation_token is None or self.confirmation_expired

    def issue_confirmation_token(self):
        self.confirmation_token = generate_token()
        self.confirmation_expires = timezone.now() + CONFIRMATION_TTL

    def mark_confirmed(self):
        # token is kept, replayed confirmation links still resolve to this person
        self.confirmed = True


class CampaignEntryQuerySet(models.QuerySet):
    def latest_for(self, campaign, limit=10):
        return list(
            self.filter(campaign=campaign)
            .select_related("person", "politician", "argument")
            .order_by("-id")[:limit]
        )

    def confirmed(self):
        return self.filter(confirmed=True)


class CampaignEntry(models.Model):
    COLORS = (
        "#e6194b", "#3cb44b", "#ffe119", "#4363d8", "#f58231",
        "#911eb4", "#46f0f0", "#f032e6", "#bcf60c", "#008080",
    )

    person = models.ForeignKey(Person, on_delete=models.CASCADE, related_name="entries")
    campaign = models.ForeignKey(Campaign, on_delete=models.CASCADE, related_name="entries")
    politician = models.ForeignKey(Politician, on_delete=models.CASCADE, related_name="entries")
    argument = models.ForeignKey(Argument, on_delete=models.CASCADE, related_name="entries")
    opt_in_information = models.BooleanField(default=False)
    confirmed = models.BooleanField(default=False)
    color = models.CharField(max_length=7, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = CampaignEntryQuerySet.as_manager()

    class Meta:
        unique_together = ("person", "campaign", "politician", "argument")
        verbose_name_plural = "Campaign entries"

    def __str__(self) -> str:
        return f"{self.person.first_name} -> {self.politician} ({self.campaign.name})"

    @classmethod
    def random_color(cls):
        return random.choice(cls.COLORS)


class WipCount(models.Model):
    """Response counter of one politician within one campaign."""
    campaign = models.ForeignKey(Campaign, on_delete=models.CASCADE, related_name="wip_counts")
    politician = models.ForeignKey(Politician, on_delete=models.CASCADE, related_name="wip_counts")
    status = models.IntegerField(default=0)
    voted = models.IntegerField(blank=True, null=True)

    class Meta:
        unique_together = ("campaign", "politician")

    def __str__(self) -> str:
        return f"{self.campaign.name} / {self.politician} [{self.status}]"
