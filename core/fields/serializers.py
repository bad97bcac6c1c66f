from rest_framework import serializers


class FieldSerializer(serializers.BaseSerializer):
    """
    Read-only serializer producing the frontend payload of a field.

    Usage:
        FieldSerializer(field).data
        FieldSerializer(fields, many=True).data
    """

    def to_representation(self, instance):
        return instance.json_serialize()
