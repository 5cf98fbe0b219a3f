import os
import uuid

from flask import current_app


class ImageStore:
    """Uploaded images kept on the local filesystem under a public web root.

    Callers address files by their root-relative URL path
    (``/images/product/<name>``); ``resolve`` maps that to a filesystem path.
    """

    def __init__(self, root):
        self.root = os.path.abspath(root)

    @staticmethod
    def generate_name(original_filename):
        _, ext = os.path.splitext(original_filename or '')
        return uuid.uuid4().hex + ext

    def resolve(self, relative_path):
        parts = relative_path.replace('\\', '/').strip('/').split('/')
        full_path = os.path.abspath(os.path.join(self.root, *parts))
        if os.path.commonpath([self.root, full_path]) != self.root:
            raise ValueError(f'Path {relative_path!r} is outside the image root')
        return full_path

    def write(self, target_directory, generated_name, data):
        """Store ``data`` (a FileStorage or raw bytes) and return its URL path."""
        directory = self.resolve(target_directory)
        os.makedirs(directory, exist_ok=True)
        full_path = os.path.join(directory, generated_name)
        if isinstance(data, (bytes, bytearray)):
            with open(full_path, 'wb') as fh:
                fh.write(data)
        else:
            data.save(full_path)
        url_path = '/' + '/'.join([target_directory.replace('\\', '/').strip('/'), generated_name])
        current_app.logger.debug(f'Stored image {url_path}')
        return url_path

    def exists(self, relative_path):
        if not relative_path:
            return False
        try:
            return os.path.isfile(self.resolve(relative_path))
        except ValueError:
            return False

    def delete_if_exists(self, relative_path):
        """Remove the file if present; returns True when something was deleted."""
        if not relative_path:
            return False
        try:
            full_path = self.resolve(relative_path)
        except ValueError:
            current_app.logger.warning(f'Refusing to delete image outside web root: {relative_path!r}')
            return False
        if not os.path.isfile(full_path):
            return False
        os.remove(full_path)
        current_app.logger.debug(f'Deleted image {relative_path}')
        return True
