from django import forms
from django.utils.translation import gettext_lazy as _

from .models import Argument, Person


class PersonForm(forms.ModelForm):
    argument = forms.ModelChoiceField(
        queryset=Argument.objects.none(),
        widget=forms.RadioSelect,
        empty_label=None,
        label=_("Argument"),
        error_messages={"required": _("Please choose an argument.")},
    )
    opt_in_information = forms.BooleanField(
        required=False,
        label=_("Keep me informed about this campaign"),
    )

    class Meta:
        model = Person
        fields = ["first_name", "last_name", "email", "city"]
        labels = {
            "first_name": _("First name"),
            "last_name": _("Last name"),
            "email": _("Email"),
            "city": _("City"),
        }

    def __init__(self, *args, campaign=None, **kwargs):
        super().__init__(*args, **kwargs)
        if campaign is not None:
            self.fields["argument"].queryset = campaign.arguments.all()

    def clean_email(self):
        return self.cleaned_data["email"].strip().lower()

    def validate_unique(self):
        # People are upserted by email, a known address is not an error here.
        pass
