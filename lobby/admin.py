from django.contrib import admin

from .models import Argument, Campaign, CampaignEntry, Person, Politician, Region, WipCount


@admin.register(Region)
class RegionAdmin(admin.ModelAdmin):
    list_display = ("name", "slug")
    search_fields = ("name", "slug")


@admin.register(Politician)
class PoliticianAdmin(admin.ModelAdmin):
    list_display = ("last_name", "first_name", "slug", "politician_type", "party")
    list_filter = ("politician_type", "party", "regions")
    search_fields = ("first_name", "last_name", "slug", "party")
    filter_horizontal = ("regions",)


class ArgumentInline(admin.TabularInline):
    model = Argument
    extra = 0


class WipCountInline(admin.TabularInline):
    model = WipCount
    extra = 0
    autocomplete_fields = ("politician",)


@admin.register(Campaign)
class CampaignAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "politician_type", "is_active", "created_at")
    list_filter = ("politician_type", "is_active")
    search_fields = ("name", "slug")
    filter_horizontal = ("regions",)
    inlines = [ArgumentInline, WipCountInline]


@admin.register(Person)
class PersonAdmin(admin.ModelAdmin):
    list_display = ("email", "first_name", "last_name", "city", "language", "confirmed", "created_at")
    list_filter = ("confirmed", "language")
    search_fields = ("email", "first_name", "last_name", "city")
    readonly_fields = ("confirmation_token", "confirmation_expires", "created_at", "updated_at")


@admin.register(CampaignEntry)
class CampaignEntryAdmin(admin.ModelAdmin):
    list_display = ("campaign", "politician", "person", "confirmed", "opt_in_information", "created_at")
    list_filter = ("campaign", "confirmed", "opt_in_information")
    search_fields = ("person__email", "politician__last_name", "argument__text")
    raw_id_fields = ("person",)


@admin.register(WipCount)
class WipCountAdmin(admin.ModelAdmin):
    list_display = ("campaign", "politician", "status", "voted")
    list_filter = ("campaign", "status")
    search_fields = ("politician__first_name", "politician__last_name")
