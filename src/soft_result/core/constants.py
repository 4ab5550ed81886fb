class StatusCodes:
    """HTTP status codes used by the result envelopes."""
    OK = 200
    NO_CONTENT = 204
    NOT_MODIFIED = 304
    BAD_REQUEST = 400
    NOT_FOUND = 404
    INTERNAL_SERVER_ERROR = 500


class LocaleFormats:
    """How the locale tag is written on the wire."""
    NUMBER = "number"
    NAME = "name"

    DEFAULT = NUMBER


class WireFields:
    """Field names of the serialized envelope."""
    IS_SUCCESS = "isSuccess"
    LOCALE = "locale"
    MESSAGES = "messages"
    VALUE = "value"
    ERRORS = "errors"

    ERROR_MESSAGE = "message"
    ERROR_METADATA = "metadata"


JSON_MEDIA_TYPE = "application/json"

DEFAULT_ERROR_MESSAGE = "Error"
DEFAULT_OK_MESSAGE = "Ok"
SERIALIZATION_ERROR_PREFIX = "Serialization error"
