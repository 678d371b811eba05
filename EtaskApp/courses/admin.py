from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from EtaskApp.courses.models import Course, CourseMembership, CourseGroup, Section


class CourseAdmin(SimpleHistoryAdmin):
    list_display = ("title", "owner", "private_view", "progress_bars", "students_per_page",
                    "activities_sorting", "placement")


class CourseMembershipAdmin(admin.ModelAdmin):
    list_display = ("course", "user", "role")
    list_filter = ["role"]


class CourseGroupAdmin(admin.ModelAdmin):
    list_display = ("course", "name")
    filter_horizontal = ["members"]


class SectionAdmin(admin.ModelAdmin):
    list_display = ("course", "number", "name", "visible")
    ordering = ["course", "number"]


admin.site.register(Course, CourseAdmin)
admin.site.register(CourseMembership, CourseMembershipAdmin)
admin.site.register(CourseGroup, CourseGroupAdmin)
admin.site.register(Section, SectionAdmin)
