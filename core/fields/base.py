"""
Base Field Descriptor

A field describes how one model attribute is shown, resolved, filled back
and serialized for the admin panel frontend. Every field type extends
`Field`; configuration methods return the instance so they can be chained.

Usage:
    from core.fields import Text

    field = (
        Text.make('Full Name')
        .rules('required', 'max:255')
        .sortable()
        .help('As printed on the passport')
    )

    field.resolve(user)          # field.value == user.full_name
    field.fill(request, user)    # user.full_name = request payload value
    payload = field.json_serialize()

Note: fill() writes even when the field is readonly. Read-only is a
presentational flag; the request-handling layer must skip readonly fields
before filling (or the field type overrides fill(), as Heading and Line do).
"""
import logging

from core.fields.utils import (
    attribute_from_name,
    call_with_supported_args,
    data_get,
    data_set,
    request_input,
)

logger = logging.getLogger(__name__)


class Field:
    """
    Abstract base for all admin panel fields.

    Subclasses set `component` and extend `meta()` with their own options.
    """

    component = None

    def __init__(self, name, attribute=None, resolve_callback=None):
        self.name = name
        self.attribute = attribute or attribute_from_name(name)
        self.value = None

        self.resolve_callback = resolve_callback
        self.fill_callback = None
        self.display_callback = None
        self.see_callback = None

        self.validation_rules = []
        self.creation_validation_rules = []
        self.update_validation_rules = []

        self.shown_on_index = True
        self.shown_on_detail = True
        self.shown_on_creation = True
        self.shown_on_update = True

        self.is_sortable = False
        self.is_searchable = False
        self.is_nullable = False
        self.is_readonly = False

        self.help_text = None
        self.placeholder_text = None
        self.default_value = None
        self.extra_meta = {}

    @classmethod
    def make(cls, *args, **kwargs):
        """Create a new field instance (chaining entry point)."""
        return cls(*args, **kwargs)

    def __repr__(self):
        return f"<{self.__class__.__name__} name={self.name!r} attribute={self.attribute!r}>"

    # ===== Validation rules =====

    @staticmethod
    def _collect_rules(rules):
        if len(rules) == 1 and isinstance(rules[0], (list, tuple)):
            return list(rules[0])
        return list(rules)

    def rules(self, *rules):
        """Set the validation rules, e.g. rules('required', 'max:255')."""
        self.validation_rules = self._collect_rules(rules)
        return self

    def creation_rules(self, *rules):
        self.creation_validation_rules = self._collect_rules(rules)
        return self

    def update_rules(self, *rules):
        self.update_validation_rules = self._collect_rules(rules)
        return self

    def required(self, required=True):
        """Add or remove the 'required' rule."""
        if required:
            if 'required' not in self.validation_rules:
                self.validation_rules.append('required')
        else:
            self.validation_rules = [rule for rule in self.validation_rules if rule != 'required']
        return self

    def get_creation_rules(self):
        """Rules an external validator should apply when creating: {attribute: [...]}"""
        return {self.attribute: self.validation_rules + self.creation_validation_rules}

    def get_update_rules(self):
        """Rules an external validator should apply when updating: {attribute: [...]}"""
        return {self.attribute: self.validation_rules + self.update_validation_rules}

    # ===== Flags and display options =====

    def sortable(self, sortable=True):
        self.is_sortable = sortable
        return self

    def searchable(self, searchable=True):
        self.is_searchable = searchable
        return self

    def nullable(self, nullable=True):
        self.is_nullable = nullable
        return self

    def readonly(self, readonly=True):
        self.is_readonly = readonly
        return self

    def help(self, help_text):
        self.help_text = help_text
        return self

    def placeholder(self, placeholder):
        self.placeholder_text = placeholder
        return self

    def default(self, value):
        self.default_value = value
        return self

    def with_meta(self, meta):
        """Merge free-form options into the serialized payload."""
        self.extra_meta = {**self.extra_meta, **meta}
        return self

    # ===== Visibility =====

    def show_on_index(self, show=True):
        self.shown_on_index = show
        return self

    def hide_from_index(self, hide=True):
        self.shown_on_index = not hide
        return self

    def show_on_detail(self, show=True):
        self.shown_on_detail = show
        return self

    def hide_from_detail(self, hide=True):
        self.shown_on_detail = not hide
        return self

    def show_on_creating(self, show=True):
        self.shown_on_creation = show
        return self

    def hide_when_creating(self, hide=True):
        self.shown_on_creation = not hide
        return self

    def show_on_updating(self, show=True):
        self.shown_on_update = show
        return self

    def hide_when_updating(self, hide=True):
        self.shown_on_update = not hide
        return self

    def _set_visibility(self, index, detail, creation, update):
        self.shown_on_index = index
        self.shown_on_detail = detail
        self.shown_on_creation = creation
        self.shown_on_update = update
        return self

    def only_on_index(self):
        return self._set_visibility(True, False, False, False)

    def only_on_detail(self):
        return self._set_visibility(False, True, False, False)

    def only_on_forms(self):
        return self._set_visibility(False, False, True, True)

    def except_on_forms(self):
        return self._set_visibility(True, True, False, False)

    def is_shown_on_index(self):
        return self.shown_on_index

    def is_shown_on_detail(self):
        return self.shown_on_detail

    def is_shown_on_creation(self):
        return self.shown_on_creation

    def is_shown_on_update(self):
        return self.shown_on_update

    def is_shown_on_forms(self):
        return self.shown_on_creation or self.shown_on_update

    # ===== Callbacks =====

    def resolve_using(self, callback):
        """callback(resource, attribute) -> value"""
        self.resolve_callback = callback
        return self

    def fill_using(self, callback):
        """callback(request, model, attribute) -> None"""
        self.fill_callback = callback
        return self

    def display_using(self, callback):
        """callback(value, resource, attribute) -> display value"""
        self.display_callback = callback
        return self

    def can_see(self, callback):
        """callback(request, resource) -> bool"""
        self.see_callback = callback
        return self

    # ===== Lifecycle =====

    def resolve(self, resource, attribute=None):
        """Resolve the field's value from the resource into `self.value`."""
        attribute = attribute or self.attribute

        if self.resolve_callback is not None:
            self.value = call_with_supported_args(self.resolve_callback, resource, attribute)
        else:
            self.value = data_get(resource, attribute)

    def resolve_for_display(self, resource):
        """Resolve the value, then apply the display callback if one is set."""
        self.resolve(resource)

        if self.display_callback is not None:
            self.value = call_with_supported_args(
                self.display_callback, self.value, resource, self.attribute
            )

    def resolve_value(self, resource):
        """
        Resolve and return the value for display.

        Falls back to the default value when the resource has none, and
        applies the display callback to the result.
        """
        self.resolve(resource)

        value = self.default_value if self.value is None else self.value
        if self.display_callback is not None:
            value = call_with_supported_args(self.display_callback, value, resource, self.attribute)
        return value

    def fill(self, request, model):
        """
        Hydrate the model attribute from the incoming request.

        Only attributes present in the request payload are written.
        """
        if self.fill_callback is not None:
            call_with_supported_args(self.fill_callback, request, model, self.attribute)
            return

        payload = request_input(request)
        if self.attribute in payload:
            logger.debug(f"Filling '{self.attribute}' on {model.__class__.__name__}")
            data_set(model, self.attribute, payload[self.attribute])

    def authorized_to_see(self, request, resource=None):
        """Evaluate the can_see() predicate. Fields are visible by default."""
        if self.see_callback is None:
            return True
        return bool(call_with_supported_args(self.see_callback, request, resource))

    # ===== Serialization =====

    def meta(self):
        """Type-specific options merged into the serialized payload."""
        return dict(self.extra_meta)

    def json_serialize(self):
        """Flat mapping consumed by the frontend component registry."""
        return {
            'component': self.component,
            'name': self.name,
            'attribute': self.attribute,
            'value': self.value,
            'sortable': self.is_sortable,
            'searchable': self.is_searchable,
            'nullable': self.is_nullable,
            'readonly': self.is_readonly,
            'helpText': self.help_text,
            'placeholder': self.placeholder_text,
            'default': self.default_value,
            'rules': list(self.validation_rules),
            'creationRules': list(self.creation_validation_rules),
            'updateRules': list(self.update_validation_rules),
            'showOnIndex': self.shown_on_index,
            'showOnDetail': self.shown_on_detail,
            'showOnCreation': self.shown_on_creation,
            'showOnUpdate': self.shown_on_update,
            **self.meta(),
        }
