"""Signal handlers for learning data (keep grades to pass inside their scale or grade range)."""

import logging
from typing import Any

from django.db.models.signals import pre_save
from django.dispatch import receiver

from EtaskApp.core.validators import grade_pass_in_domain
from EtaskApp.learning.models import GradeItem

logger = logging.getLogger(__name__)


@receiver(pre_save, sender=GradeItem)
def reset_grade_pass_outside_domain(
    sender: type[GradeItem],
    instance: GradeItem,
    raw: bool = False,
    **kwargs: Any,
) -> None:
    """Reset the grade to pass to "not set" when the scale or maximum grade no longer admits it."""
    if raw or not instance.grade_pass:
        return
    if grade_pass_in_domain(instance, instance.grade_pass):
        return
    logger.warning("Grade to pass %s of grade item %s is outside its domain, resetting",
                   instance.grade_pass, instance.pk)
    instance.grade_pass = 0
