from django.core.management.base import BaseCommand

from EtaskApp.core.validators import grade_pass_in_domain
from EtaskApp.learning.models import GradeItem


class Command(BaseCommand):
    help = "Reset grades to pass that lie outside their scale or grade range."

    def add_arguments(self, parser):
        parser.add_argument("--course", type=int, help="Limit to one course id.")
        parser.add_argument("--dry-run", action="store_true", help="Report without saving.")

    def handle(self, *args, **options):
        items = GradeItem.objects.select_related("scale").exclude(grade_pass=0)
        if options.get("course"):
            items = items.filter(course_id=options["course"])
        updated = 0
        for item in items:
            if grade_pass_in_domain(item, item.grade_pass):
                continue
            updated += 1
            self.stdout.write(f"Grade item {item.pk} ({item.item_name}): grade to pass {item.grade_pass} reset")
            if not options.get("dry_run"):
                item.grade_pass = 0
                item._change_reason = "grade to pass outside its domain"
                item.save(update_fields=["grade_pass", "updated_at"])
        self.stdout.write(self.style.SUCCESS(f"Updated {updated} grade items"))
