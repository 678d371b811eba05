from django import forms
from django.utils.translation import gettext_lazy as _

from EtaskApp.core.validators import round_half_up
from EtaskApp.domain.services import grade_pass_service


class GradeSettingsForm(forms.Form):
    """Inline grade to pass editor of one grade item column."""

    grade_item_id = forms.IntegerField(widget=forms.HiddenInput)
    grade_pass = forms.TypedChoiceField(label=_("Grade to pass"), coerce=int, choices=())

    def __init__(self, grade_item, *args, choices=None, **kwargs):
        kwargs.setdefault("auto_id", f"id_%s_{grade_item.pk}")
        kwargs.setdefault("initial", {
            "grade_item_id": grade_item.pk,
            "grade_pass": round_half_up(grade_item.grade_pass),
        })
        super().__init__(*args, **kwargs)
        self.grade_item = grade_item
        if choices is None:
            choices = grade_pass_service.grade_pass_choices(grade_item)
        self.fields["grade_pass"].choices = choices
        self.fields["grade_pass"].widget.attrs.update({"class": "custom-select"})

    def clean_grade_item_id(self):
        value = self.cleaned_data["grade_item_id"]
        if value != self.grade_item.pk:
            raise forms.ValidationError(_("Unexpected grade item."))
        return value


class GradeTableForm(forms.Form):
    """Group filter of the grading table footer; submits on change."""

    group = forms.TypedChoiceField(label=_("Group"), coerce=int, choices=())

    def __init__(self, groups: dict[int, str], *args, selected=None, **kwargs):
        kwargs.setdefault("initial", {"group": selected})
        super().__init__(*args, **kwargs)
        self.fields["group"].choices = list(groups.items())
        self.fields["group"].widget.attrs.update({
            "class": "custom-select",
            "onchange": "this.form.submit();",
        })
