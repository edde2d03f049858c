
class AzureCredentials:
    """
    AzureCredentials class provides a convenient way to manage the shared key credentials of a storage account.

    Attributes:
        _account_name (str): The name of the storage account.
        _account_key (str): The shared key of the storage account, base64 encoded.

    Properties:
        account_name (str): Property to get or set the name of the storage account.
        account_key (str): Property to get or set the shared key of the storage account.

    Raises:
        KeyError: Raised when attempting to access a property that was not configured.

    Usage:
        credentials = AzureCredentials()
        credentials.account_name = "youraccount"
        credentials.account_key = "bXlrZXk="
    """

    def __init__(self, account_name=None, account_key=None):
        """
        Initializes an instance of AzureCredentials.
        """
        self._account_name = account_name
        self._account_key = account_key

    @property
    def account_name(self):
        """
        Property to get or set the name of the storage account.

        Raises:
            KeyError: Raised when attempting to access this property without an account name.

        Returns:
            str: The name of the storage account.
        """
        if self._account_name is None:
            raise KeyError("An account name is required by this service! Configure a storage account and assign "
                           "its name to an instance of this class.")

        return self._account_name

    @account_name.setter
    def account_name(self, value):
        self._account_name = value

    @property
    def account_key(self):
        """
        Property to get or set the shared key of the storage account.

        Raises:
            KeyError: Raised when attempting to access this property without an account key.

        Returns:
            str: The shared key of the storage account.
        """
        if self._account_key is None:
            raise KeyError("An account key is required by this service! Take note of one of the access keys of the "
                           "storage account and assign it to an instance of this class.")

        return self._account_key

    @account_key.setter
    def account_key(self, value):
        self._account_key = value

    def __repr__(self):
        # The key is never printed
        return f"AzureCredentials(account_name={self._account_name!r})"
