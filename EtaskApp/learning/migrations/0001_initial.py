import django.core.validators
import django.db.models.deletion
import simple_history.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("courses", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Activity",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("module", models.CharField(help_text="Module name, e.g. 'assign' or 'quiz'.", max_length=32)),
                ("name", models.CharField(max_length=255)),
                ("position", models.PositiveSmallIntegerField(default=0, help_text="Order within the section.")),
                ("url", models.CharField(blank=True, max_length=600)),
                ("due_at", models.DateTimeField(blank=True, null=True)),
                ("time_close", models.DateTimeField(blank=True, null=True)),
                ("completion_expected", models.DateTimeField(blank=True, null=True)),
                ("visible", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("course", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE, related_name="activities", to="courses.course")),
                ("section", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE, related_name="activities", to="courses.section")),
            ],
            options={
                "verbose_name_plural": "activities",
                "ordering": ["section__number", "position", "id"],
            },
        ),
        migrations.CreateModel(
            name="Scale",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("items", models.TextField(help_text="Comma separated labels, lowest first.")),
                ("course", models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="scales",
                    to="courses.course",
                )),
            ],
        ),
        migrations.CreateModel(
            name="GradeItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("item_name", models.CharField(max_length=255)),
                ("grade_max", models.DecimalField(
                    decimal_places=5, default=100, max_digits=10,
                    validators=[django.core.validators.MinValueValidator(0)])),
                ("grade_pass", models.DecimalField(
                    decimal_places=5, default=0, max_digits=10,
                    validators=[django.core.validators.MinValueValidator(0)])),
                ("hidden", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("activity", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE, related_name="grade_items", to="learning.activity")),
                ("course", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE, related_name="grade_items", to="courses.course")),
                ("scale", models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="grade_items",
                    to="learning.scale",
                )),
            ],
        ),
        migrations.CreateModel(
            name="Grade",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("final_grade", models.DecimalField(
                    blank=True, decimal_places=5, max_digits=10, null=True,
                    validators=[django.core.validators.MinValueValidator(0)])),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("grade_item", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE, related_name="grades", to="learning.gradeitem")),
                ("user", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="grades",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "constraints": [
                    models.UniqueConstraint(fields=("grade_item", "user"), name="uq_grade_item_user"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ActivityCompletion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("state", models.PositiveSmallIntegerField(
                    choices=[
                        (0, "Incomplete"),
                        (1, "Complete"),
                        (2, "Complete (pass)"),
                        (3, "Complete (fail)"),
                    ],
                    default=0,
                )),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("activity", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE, related_name="completions", to="learning.activity")),
                ("user", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="activity_completions",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "constraints": [
                    models.UniqueConstraint(fields=("activity", "user"), name="uq_activity_user"),
                ],
            },
        ),
        migrations.CreateModel(
            name="HistoricalGradeItem",
            fields=[
                ("id", models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name="ID")),
                ("item_name", models.CharField(max_length=255)),
                ("grade_max", models.DecimalField(
                    decimal_places=5, default=100, max_digits=10,
                    validators=[django.core.validators.MinValueValidator(0)])),
                ("grade_pass", models.DecimalField(
                    decimal_places=5, default=0, max_digits=10,
                    validators=[django.core.validators.MinValueValidator(0)])),
                ("hidden", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(blank=True, editable=False)),
                ("updated_at", models.DateTimeField(blank=True, editable=False)),
                ("history_id", models.AutoField(primary_key=True, serialize=False)),
                ("history_date", models.DateTimeField(db_index=True)),
                ("history_change_reason", models.CharField(max_length=100, null=True)),
                ("history_type", models.CharField(
                    choices=[("+", "Created"), ("~", "Changed"), ("-", "Deleted")], max_length=1)),
                ("activity", models.ForeignKey(
                    blank=True,
                    db_constraint=False,
                    null=True,
                    on_delete=django.db.models.deletion.DO_NOTHING,
                    related_name="+",
                    to="learning.activity",
                )),
                ("course", models.ForeignKey(
                    blank=True,
                    db_constraint=False,
                    null=True,
                    on_delete=django.db.models.deletion.DO_NOTHING,
                    related_name="+",
                    to="courses.course",
                )),
                ("history_user", models.ForeignKey(
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="+",
                    to=settings.AUTH_USER_MODEL,
                )),
                ("scale", models.ForeignKey(
                    blank=True,
                    db_constraint=False,
                    null=True,
                    on_delete=django.db.models.deletion.DO_NOTHING,
                    related_name="+",
                    to="learning.scale",
                )),
            ],
            options={
                "verbose_name": "historical grade item",
                "verbose_name_plural": "historical grade items",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
