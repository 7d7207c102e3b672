from __future__ import annotations


class DateHelperError(ValueError):
    pass


class InvalidArgument(DateHelperError):
    pass


class InvalidRange(DateHelperError):
    pass
