import base64
import binascii

from azure.core.exceptions import HttpResponseError, ServiceRequestError, ServiceResponseError

from cloudcontainer.storage.interface.types import ErrorKind


_TRANSIENT_STATUS_CODES = {408, 429, 500, 502, 503, 504}


class CredentialError(ValueError):
    """
    Raised when the storage account credentials can't be used to sign requests.
    """
    pass


def validate_account_key(account_key):
    """
    Checks that the account key is a non-empty base64 string, as issued by the storage service.

    :param account_key:
        Shared key of the storage account.

    :raises CredentialError:
        If the key is empty or not valid base64.
    """
    if not account_key:
        raise CredentialError("An account key is required to sign requests to the storage account.")

    try:
        base64.b64decode(account_key, validate=True)

    except (binascii.Error, ValueError, TypeError):
        raise CredentialError("The account key is malformed: it must be a base64 encoded string.") from None


def is_not_found(error) -> bool:
    """
    Tells whether the error was raised by the storage service because the resource does not exist.

    Only errors raised directly by the Azure SDK are considered. An exception wrapping one of them is not
    inspected.

    :param error:
        Any exception.

    :return:
        True if the error is an Azure HTTP error with status 404. False otherwise.
    """
    if not isinstance(error, HttpResponseError):
        return False

    return error.status_code == 404


def classify_error(error) -> ErrorKind:
    """
    Translates an error raised by the Azure SDK into an ErrorKind.

    :param error:
        Any exception.

    :return:
        ErrorKind.NOT_FOUND, ErrorKind.CONFLICT, ErrorKind.TRANSIENT or ErrorKind.UNKNOWN.
    """
    # Connection level failures carry no response at all
    if isinstance(error, (ServiceRequestError, ServiceResponseError)):
        return ErrorKind.TRANSIENT

    if not isinstance(error, HttpResponseError):
        return ErrorKind.UNKNOWN

    status_code = error.status_code

    if status_code == 404:
        return ErrorKind.NOT_FOUND

    if status_code == 409:
        return ErrorKind.CONFLICT

    if status_code in _TRANSIENT_STATUS_CODES:
        return ErrorKind.TRANSIENT

    return ErrorKind.UNKNOWN
