import django.core.validators
import django.db.models.deletion
import simple_history.models
from django.conf import settings
from django.db import migrations, models

PRIVATE_VIEW_HELP = (
    "This settings determines whether all the students can see each other's grades "
    "in the eTask grading table or not."
)
PROGRESS_BARS_HELP = (
    "This settings determines whether progress bars Completed and Passed are "
    "calculated in the eTask grading table activity popover or not."
)
STUDENTS_PER_PAGE_HELP = "This settings determines the number of students per page in the eTask grading table."
SORTING_CHOICES = [
    ("latest", "Sort the activities by the latest"),
    ("oldest", "Sort the activities by the oldest"),
    ("inherit", "Sort the activities as they are in the course"),
]
PLACEMENT_CHOICES = [
    ("above", "Place the grading table above the course topics"),
    ("below", "Place the grading table below the course topics"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Course",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("private_view", models.BooleanField(
                    blank=True, help_text=PRIVATE_VIEW_HELP, null=True, verbose_name="eTask private view")),
                ("progress_bars", models.BooleanField(
                    blank=True, help_text=PROGRESS_BARS_HELP, null=True, verbose_name="eTask progress bars")),
                ("students_per_page", models.PositiveSmallIntegerField(
                    blank=True, help_text=STUDENTS_PER_PAGE_HELP, null=True,
                    validators=[django.core.validators.MinValueValidator(1)],
                    verbose_name="eTask students per page")),
                ("activities_sorting", models.CharField(
                    choices=SORTING_CHOICES, default="latest", max_length=16,
                    verbose_name="eTask activities sorting")),
                ("placement", models.CharField(
                    choices=PLACEMENT_CHOICES, default="above", max_length=16, verbose_name="eTask placement")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("owner", models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name="owned_courses",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
        ),
        migrations.CreateModel(
            name="CourseGroup",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=254)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("course", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE, related_name="groups", to="courses.course")),
                ("members", models.ManyToManyField(
                    blank=True, related_name="course_groups", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["name", "id"],
                "constraints": [
                    models.UniqueConstraint(fields=("course", "name"), name="uq_course_group_name"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Section",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("number", models.PositiveSmallIntegerField()),
                ("name", models.CharField(blank=True, max_length=255)),
                ("summary", models.TextField(blank=True)),
                ("visible", models.BooleanField(default=True)),
                ("course", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE, related_name="sections", to="courses.course")),
            ],
            options={
                "ordering": ["number"],
                "constraints": [
                    models.UniqueConstraint(fields=("course", "number"), name="uq_course_section_number"),
                ],
            },
        ),
        migrations.CreateModel(
            name="CourseMembership",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("role", models.CharField(
                    choices=[
                        ("TEACHER", "Teacher"),
                        ("NONEDITING_TEACHER", "Non-editing teacher"),
                        ("STUDENT", "Student"),
                    ],
                    max_length=24,
                )),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("added_by", models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name="members_added",
                    to=settings.AUTH_USER_MODEL,
                )),
                ("course", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE, related_name="memberships", to="courses.course")),
                ("user", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="course_memberships",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "constraints": [
                    models.UniqueConstraint(fields=("course", "user"), name="uq_course_user"),
                ],
            },
        ),
        migrations.CreateModel(
            name="HistoricalCourse",
            fields=[
                ("id", models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("private_view", models.BooleanField(
                    blank=True, help_text=PRIVATE_VIEW_HELP, null=True, verbose_name="eTask private view")),
                ("progress_bars", models.BooleanField(
                    blank=True, help_text=PROGRESS_BARS_HELP, null=True, verbose_name="eTask progress bars")),
                ("students_per_page", models.PositiveSmallIntegerField(
                    blank=True, help_text=STUDENTS_PER_PAGE_HELP, null=True,
                    validators=[django.core.validators.MinValueValidator(1)],
                    verbose_name="eTask students per page")),
                ("activities_sorting", models.CharField(
                    choices=SORTING_CHOICES, default="latest", max_length=16,
                    verbose_name="eTask activities sorting")),
                ("placement", models.CharField(
                    choices=PLACEMENT_CHOICES, default="above", max_length=16, verbose_name="eTask placement")),
                ("created_at", models.DateTimeField(blank=True, editable=False)),
                ("updated_at", models.DateTimeField(blank=True, editable=False)),
                ("history_id", models.AutoField(primary_key=True, serialize=False)),
                ("history_date", models.DateTimeField(db_index=True)),
                ("history_change_reason", models.CharField(max_length=100, null=True)),
                ("history_type", models.CharField(
                    choices=[("+", "Created"), ("~", "Changed"), ("-", "Deleted")], max_length=1)),
                ("history_user", models.ForeignKey(
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="+",
                    to=settings.AUTH_USER_MODEL,
                )),
                ("owner", models.ForeignKey(
                    blank=True,
                    db_constraint=False,
                    null=True,
                    on_delete=django.db.models.deletion.DO_NOTHING,
                    related_name="+",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "verbose_name": "historical course",
                "verbose_name_plural": "historical courses",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
