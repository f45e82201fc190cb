from ..models import AuditLog


def log_action(
    *,
    action: str,
    instance=None,
    object_type: str | None = None,
    object_id=None,
    user=None,
    company=None,
    changes: dict | None = None,
):
    """
    Central audit logger.
    Pass a model `instance`, or `object_type`/`object_id` when the caller
    wrote through a queryset and holds no instance.
    `company` may be a Company or its pk.
    """

    if company is None and instance is not None:
        company = getattr(instance, "company_id", None)
    company_id = getattr(company, "pk", company)

    if instance is not None:
        object_type = object_type or instance.__class__.__name__
        object_id = object_id if object_id is not None else instance.pk

    return AuditLog.objects.create(
        company_id=company_id,
        user=user,
        action=action,
        object_type=object_type,
        object_id=str(object_id),
        changes=changes,
    )
