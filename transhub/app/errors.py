from fastapi import status


class TranslationApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class UnsupportedMediaType(TranslationApiError):
    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    message = "Server only accepts application/json data."


class InvalidBody(TranslationApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Request body must be valid JSON."


class MissingField(TranslationApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Request body missing at least one of the required attributes."


class NullField(TranslationApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "At least one attribute with invalid value of null"


class ValidationFailure(TranslationApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InvalidCursor(TranslationApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid pagination cursor."


class NotFound(TranslationApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "No translation with this translation_id exists."


class NotAcceptable(TranslationApiError):
    status_code = status.HTTP_406_NOT_ACCEPTABLE
    message = "Not acceptable."


class ProviderFailure(TranslationApiError):
    status_code = status.HTTP_502_BAD_GATEWAY
    message = "Translation provider request failed."


class StoreFailure(TranslationApiError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Translation store is unavailable."
