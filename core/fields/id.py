"""
ID Field

Displays a resource's primary key. Hidden on the creation form (keys are
assigned by the database) and sortable by default.

Usage:
    ID.make()                                   # name 'ID', attribute 'id'
    ID.make('User ID', 'user_id').as_big_int().copyable()

Note: ID keeps the base fill() behavior, so a request carrying the key
overwrites it on the model. Applications that must protect keys should not
fill ID fields on update.
"""
from core.fields.base import Field
from core.fields.constants import Components


class ID(Field):
    component = Components.ID

    def __init__(self, name='ID', attribute=None, resolve_callback=None):
        super().__init__(name, attribute, resolve_callback)

        self.is_big_int = False
        self.is_copyable = False

        self.is_sortable = True
        self.shown_on_creation = False

    def as_big_int(self, big_int=True):
        """Serialize integer values as strings so JavaScript keeps full precision."""
        self.is_big_int = big_int
        return self

    def copyable(self, copyable=True):
        self.is_copyable = copyable
        return self

    def meta(self):
        return {
            **super().meta(),
            'asBigInt': self.is_big_int,
            'copyable': self.is_copyable,
        }

    def json_serialize(self):
        data = super().json_serialize()
        if self.is_big_int and isinstance(self.value, int) and not isinstance(self.value, bool):
            data['value'] = str(self.value)
        return data
