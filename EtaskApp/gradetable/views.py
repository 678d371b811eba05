"""Course page rendering the topics and the eTask grading table."""

import logging
from urllib.parse import urlencode

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import PermissionDenied
from django.db.models import Prefetch
from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse

from EtaskApp.core.access import can_manage
from EtaskApp.courses.models import Course
from EtaskApp.domain.services import grade_pass_service, grade_table_service
from EtaskApp.domain.services.grade_table_service import GradeTableRequest
from EtaskApp.gradetable.forms import GradeSettingsForm, GradeTableForm
from EtaskApp.learning.models import Activity, GradeItem

logger = logging.getLogger(__name__)

TABLE_PARAMS = ("group", "page", "edit")


def _int_or_none(value) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def course_url(course: Course, params) -> str:
    url = reverse("gradetable:course", args=[course.pk])
    query = {key: params[key] for key in TABLE_PARAMS if params.get(key) not in (None, "")}
    return f"{url}?{urlencode(query)}" if query else url


@login_required
def course_view(request: HttpRequest, course_id: int) -> HttpResponse:
    course = get_object_or_404(Course.objects.visible_to(request.user), pk=course_id)
    if request.method == "POST":
        return update_grade_pass(request, course)

    table_request = GradeTableRequest.from_params(request.GET)
    table = grade_table_service.build_grade_table(course, request.user, table_request)
    columns = [
        (head, GradeSettingsForm(head.grade_item, choices=head.grade_pass_choices) if head.editable else None)
        for head in table.heads
    ]
    group_form = None
    if table.show_group_filter:
        group_form = GradeTableForm(table.groups, selected=table.selected_group)

    sections = course.sections.filter(visible=True).prefetch_related(
        Prefetch("activities", queryset=Activity.objects.filter(visible=True).order_by("position", "id"))
    )
    ctx = {
        "course": course,
        "sections": sections,
        "table": table,
        "columns": columns,
        "group_form": group_form,
        "page_numbers": range(table.num_pages),
        "legend": grade_table_service.status_legend(),
        "editing": table_request.editing,
        "query": {key: request.GET.get(key) for key in TABLE_PARAMS if request.GET.get(key)},
    }
    return render(request, "gradetable/course.html", ctx)


def update_grade_pass(request: HttpRequest, course: Course) -> HttpResponse:
    """Handle the inline grade to pass form, flash the outcome and redirect back."""
    if not can_manage(request.user, course):
        raise PermissionDenied
    back = redirect(course_url(course, request.GET))

    grade_item_id = _int_or_none(request.POST.get("grade_item_id"))
    grade_item = GradeItem.objects.for_course(course).filter(pk=grade_item_id).first() if grade_item_id else None
    if grade_item is None:
        messages.error(request, grade_pass_service.failure_message(str(request.POST.get("grade_item_id", ""))))
        return back

    form = GradeSettingsForm(grade_item, request.POST)
    if not form.is_valid():
        logger.info("Invalid grade to pass form for grade item %s: %s", grade_item.pk, form.errors.as_json())
        messages.error(request, grade_pass_service.failure_message(grade_item.item_name))
        return back

    result = grade_pass_service.update_grade_pass(
        request.user, course, grade_item.pk, form.cleaned_data["grade_pass"]
    )
    if result.success:
        messages.success(request, result.message)
    else:
        messages.error(request, result.message)
    return back
