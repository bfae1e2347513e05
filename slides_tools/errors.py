"""Exceptions raised by slides_tools.

Validation problems are plain ``ValueError``s and failed API calls surface as
``googleapiclient.errors.HttpError``; everything below is for failures that
originate in this package.
"""


class SlidesToolsError(Exception):
    """Base class for errors raised by slides_tools."""


class AuthError(SlidesToolsError):
    """No usable Google credential could be obtained."""


class PickerError(SlidesToolsError):
    """The presentation picker did not produce a presentation ID."""


class PickerTimeout(PickerError):
    """No selection arrived before the picker timeout elapsed."""


class PickerCancelled(PickerError):
    """The caller cancelled the picker while it was waiting."""
