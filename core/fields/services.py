"""
Field Service - resource-level operations over a list of fields

The field descriptors know nothing about each other. A resource page works
with all of its fields at once: pick the ones the user may see on the
current view, resolve them against a record, fill a record from a request,
and serialize the lot for the frontend.

Usage:
    from core.fields import FieldService

    fields = UserResource.fields(request)

    # Detail page
    visible = FieldService.detail_fields(fields, request, user)
    FieldService.resolve_fields(visible, user)
    payload = FieldService.serialize_fields(visible)

    # Update form submission
    rules = FieldService.validation_rules(fields, creating=False)
    ...external validation...
    FieldService.fill_fields(fields, request, user, creating=False)
    user.save()
"""
import logging

from core.fields.serializers import FieldSerializer

logger = logging.getLogger(__name__)


class FieldService:
    """Generic operations on a list of field descriptors"""

    @staticmethod
    def available_fields(fields, request, resource=None):
        """
        Get the fields the request is authorized to see.

        Args:
            fields: iterable of Field instances
            request: request (or context) passed to each can_see() predicate
            resource: record being displayed, if any

        Returns:
            list of authorized fields, in declaration order
        """
        available = []
        for field in fields:
            if field.authorized_to_see(request, resource):
                available.append(field)
            else:
                logger.debug(f"Field '{field.attribute}' hidden by authorization")
        return available

    @staticmethod
    def index_fields(fields, request, resource=None):
        return [
            field for field in FieldService.available_fields(fields, request, resource)
            if field.is_shown_on_index()
        ]

    @staticmethod
    def detail_fields(fields, request, resource=None):
        return [
            field for field in FieldService.available_fields(fields, request, resource)
            if field.is_shown_on_detail()
        ]

    @staticmethod
    def creation_fields(fields, request, resource=None):
        return [
            field for field in FieldService.available_fields(fields, request, resource)
            if field.is_shown_on_creation()
        ]

    @staticmethod
    def update_fields(fields, request, resource=None):
        return [
            field for field in FieldService.available_fields(fields, request, resource)
            if field.is_shown_on_update()
        ]

    @staticmethod
    def resolve_fields(fields, resource):
        """Resolve every field for display against the resource. Returns the fields."""
        for field in fields:
            field.resolve_for_display(resource)
        return fields

    @staticmethod
    def fill_fields(fields, request, model, creating=False):
        """
        Fill the model from the request using the creation or update fields.

        Readonly fields are filled too; the caller decides which fields to
        pass when readonly must be enforced.

        Returns:
            list of fields that were filled
        """
        if creating:
            target_fields = FieldService.creation_fields(fields, request, model)
        else:
            target_fields = FieldService.update_fields(fields, request, model)

        for field in target_fields:
            field.fill(request, model)

        logger.debug(
            f"Filled {len(target_fields)} field(s) on {model.__class__.__name__} "
            f"({'create' if creating else 'update'})"
        )
        return target_fields

    @staticmethod
    def serialize_fields(fields):
        """Frontend payload for each field, in order."""
        return FieldSerializer(fields, many=True).data

    @staticmethod
    def validation_rules(fields, creating=False):
        """
        Merge the rules of all fields into one mapping for an external validator.

        Returns:
            dict: {attribute: [rule, ...]}
        """
        rules = {}
        for field in fields:
            rules.update(field.get_creation_rules() if creating else field.get_update_rules())
        return rules
