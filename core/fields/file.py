"""
File Field

Describes an uploaded file stored on one of the project's storage disks.
A disk is a Django storage alias from settings.STORAGES; the field only
names it and hands uploads to it.

Usage:
    File.make('Contract')
        .disk('private')
        .path('contracts')
        .accepted_types('.pdf,.docx')
        .max_size(10240)
        .store_original_name('contract_name')
        .store_size('contract_size')

Resolved values are always the stored path: a FieldFile read from a model
FileField is reduced to its name (None when no file is attached).

Fill behavior:
    - An uploaded file in the request is saved under `path` on the disk and
      the stored path is written to the model attribute (plus the original
      name / size columns when configured).
    - An explicit empty value (None or '') removes the stored file when the
      field is deletable and clears the columns.
    - Any other value is copied as-is, like the base field.

Callbacks:
    store(cb)     cb(request, model, attribute, upload) -> {column: value}
    store_as(cb)  cb(request, model, attribute, upload) -> file name
    delete(cb)    cb(request, model, disk, path) -> {column: value} or None
    download(cb)  cb(request, model, disk, path) -> response
    preview(cb)   cb(value, disk) -> url
    thumbnail(cb) cb(value, disk) -> url
"""
import logging
import posixpath
from collections.abc import Mapping

from django.core.files.base import File as DjangoFile
from django.core.files.storage import InvalidStorageError, storages
from django.http import FileResponse

from core.fields.base import Field
from core.fields.conf import get_setting
from core.fields.constants import Components
from core.fields.utils import call_with_supported_args, data_get, data_set, request_input

logger = logging.getLogger(__name__)


class File(Field):
    component = Components.FILE
    default_path_setting = 'FILE_PATH'

    def __init__(self, name, attribute=None, resolve_callback=None):
        super().__init__(name, attribute, resolve_callback)

        self.disk_name = get_setting('DEFAULT_DISK')
        self.storage_path = get_setting(self.default_path_setting)
        self.accepted_file_types = None
        self.max_file_size = None
        self.is_multiple = False
        self.is_deletable = True
        self.is_prunable = False
        self.downloads_disabled = False
        self.original_name_column = None
        self.size_column = None

        self.store_callback = None
        self.store_as_callback = None
        self.delete_callback = None
        self.download_callback = None
        self.preview_callback = None
        self.thumbnail_callback = None

    # ===== Storage options =====

    def disk(self, disk):
        self.disk_name = disk
        return self

    def path(self, path):
        self.storage_path = path
        return self

    def accepted_types(self, accepted_types):
        """Comma separated extensions or MIME types, e.g. '.pdf,.doc'."""
        self.accepted_file_types = accepted_types
        return self

    def max_size(self, max_size):
        """Maximum upload size in kilobytes."""
        self.max_file_size = max_size
        return self

    def multiple(self, multiple=True):
        self.is_multiple = multiple
        return self

    def deletable(self, deletable=True):
        self.is_deletable = deletable
        return self

    def prunable(self, prunable=True):
        self.is_prunable = prunable
        return self

    def disable_download(self):
        self.downloads_disabled = True
        return self

    def downloads_are_disabled(self):
        return self.downloads_disabled

    def store_original_name(self, column):
        self.original_name_column = column
        return self

    def store_size(self, column):
        self.size_column = column
        return self

    # ===== Callbacks =====

    def store(self, callback):
        self.store_callback = callback
        return self

    def store_as(self, callback):
        self.store_as_callback = callback
        return self

    def delete(self, callback):
        self.delete_callback = callback
        return self

    def download(self, callback):
        self.download_callback = callback
        return self

    def preview(self, callback):
        self.preview_callback = callback
        return self

    def thumbnail(self, callback):
        self.thumbnail_callback = callback
        return self

    # ===== URLs =====

    def get_storage(self):
        try:
            return storages[self.disk_name]
        except InvalidStorageError:
            logger.warning(f"Storage disk '{self.disk_name}' is not configured in STORAGES")
            raise

    def get_url(self, path=None):
        """Public URL of `path` (defaults to the resolved value) on the field's disk."""
        path = self.value if path is None else path
        if not path:
            return None
        return self.get_storage().url(path)

    def get_preview_url(self):
        if self.preview_callback is not None:
            return call_with_supported_args(self.preview_callback, self.value, self.disk_name)
        return self.get_url()

    def get_thumbnail_url(self):
        if self.thumbnail_callback is not None:
            return call_with_supported_args(self.thumbnail_callback, self.value, self.disk_name)
        return self.get_url()

    # ===== Lifecycle =====

    @staticmethod
    def _stored_name(value):
        # Model FileFields hand back a FieldFile; only its storage name goes on the wire.
        if isinstance(value, DjangoFile):
            return value.name or None
        return value

    def _stored_path(self, model):
        return self._stored_name(data_get(model, self.attribute))

    def resolve(self, resource, attribute=None):
        super().resolve(resource, attribute)

        self.value = self._stored_name(self.value)

    def fill(self, request, model):
        if self.fill_callback is not None:
            super().fill(request, model)
            return

        payload = request_input(request)
        if self.attribute not in payload:
            return

        incoming = payload[self.attribute]
        if incoming is None or incoming == '':
            if self.is_deletable:
                self._delete_stored_file(request, model)
            return

        if isinstance(incoming, DjangoFile):
            self._store_upload(request, model, incoming)
        else:
            super().fill(request, model)

    def _store_upload(self, request, model, upload):
        if self.store_callback is not None:
            columns = call_with_supported_args(self.store_callback, request, model, self.attribute, upload)
            self._apply_columns(model, columns)
            return

        if self.store_as_callback is not None:
            filename = call_with_supported_args(self.store_as_callback, request, model, self.attribute, upload)
        else:
            filename = posixpath.basename(upload.name)

        stored_path = self.get_storage().save(posixpath.join(self.storage_path, filename), upload)
        logger.info(f"Stored '{self.attribute}' upload at {self.disk_name}:{stored_path}")

        data_set(model, self.attribute, stored_path)
        if self.original_name_column:
            data_set(model, self.original_name_column, upload.name)
        if self.size_column:
            data_set(model, self.size_column, upload.size)

    def _delete_stored_file(self, request, model):
        path = self._stored_path(model)

        if self.delete_callback is not None:
            columns = call_with_supported_args(self.delete_callback, request, model, self.disk_name, path)
            if columns is not None:
                self._apply_columns(model, columns)
                return
        elif path:
            self.get_storage().delete(path)
            logger.info(f"Deleted '{self.attribute}' file {self.disk_name}:{path}")

        self._apply_columns(model, {
            column: None
            for column in (self.attribute, self.original_name_column, self.size_column)
            if column
        })

    @staticmethod
    def _apply_columns(model, columns):
        if isinstance(columns, Mapping):
            for column, value in columns.items():
                data_set(model, column, value)

    def download_response(self, request, model):
        """
        Build the download response for the model's stored file.

        Returns None when downloads are disabled or no file is stored.
        """
        if self.downloads_disabled:
            return None

        path = self._stored_path(model)
        if self.download_callback is not None:
            return call_with_supported_args(self.download_callback, request, model, self.disk_name, path)
        if not path:
            return None

        filename = None
        if self.original_name_column:
            filename = data_get(model, self.original_name_column)
        return FileResponse(
            self.get_storage().open(path, 'rb'),
            as_attachment=True,
            filename=filename or posixpath.basename(path),
        )

    # ===== Serialization =====

    def meta(self):
        return {
            **super().meta(),
            'disk': self.disk_name,
            'path': self.storage_path,
            'acceptedTypes': self.accepted_file_types,
            'maxSize': self.max_file_size,
            'multiple': self.is_multiple,
            'deletable': self.is_deletable,
            'prunable': self.is_prunable,
            'downloadsDisabled': self.downloads_disabled,
            'originalNameColumn': self.original_name_column,
            'sizeColumn': self.size_column,
            'previewUrl': self.get_preview_url(),
            'thumbnailUrl': self.get_thumbnail_url(),
        }
