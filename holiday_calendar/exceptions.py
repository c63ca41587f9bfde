"""
Error taxonomy for the holiday calendar.

Routes translate these into structured {success, message} responses;
bulk operations catch PersistenceFailure per item and count it.
"""


class HolidayCalendarError(Exception):
    """Base class for all holiday calendar errors"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidFormat(HolidayCalendarError, ValueError):
    """A date string is not in YYYY-MM-DD form"""
    status_code = 400


class SourceUnavailable(HolidayCalendarError):
    """The external holiday source failed or returned too few records"""
    status_code = 502


class PersistenceFailure(HolidayCalendarError):
    """A single create/patch/delete/fetch call against the store failed"""
    status_code = 500


class HolidayNotFound(PersistenceFailure):
    status_code = 404

    def __init__(self, holiday_id):
        super().__init__(f"Holiday not found: {holiday_id}")
        self.holiday_id = holiday_id


class ValidationFailure(HolidayCalendarError):
    """Missing or invalid request fields; raised before any work begins"""
    status_code = 400
