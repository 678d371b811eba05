from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from EtaskApp.learning.models import Activity, Scale, GradeItem, Grade, ActivityCompletion


class ActivityAdmin(admin.ModelAdmin):
    list_display = ("course", "section", "module", "name", "position", "due_at")
    list_filter = ["module"]
    ordering = ["course", "section__number", "position"]


class ScaleAdmin(admin.ModelAdmin):
    list_display = ("name", "items", "course")


class GradeItemAdmin(SimpleHistoryAdmin):
    list_display = ("course", "activity", "item_name", "grade_max", "scale", "grade_pass", "hidden")
    list_filter = ["hidden"]
    history_list_display = ["grade_pass"]


class GradeAdmin(admin.ModelAdmin):
    list_display = ("grade_item", "user", "final_grade")
    ordering = ["user", "grade_item"]
    list_filter = ["grade_item__course"]
    list_max_show_all = 1000
    list_per_page = 1000


class ActivityCompletionAdmin(admin.ModelAdmin):
    list_display = ("activity", "user", "state")
    list_filter = ["state"]


admin.site.register(Activity, ActivityAdmin)
admin.site.register(Scale, ScaleAdmin)
admin.site.register(GradeItem, GradeItemAdmin)
admin.site.register(Grade, GradeAdmin)
admin.site.register(ActivityCompletion, ActivityCompletionAdmin)
